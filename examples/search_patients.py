"""Example: typed Patient search with pagination against a (mock) FHIR server.

Usage:
    python examples/search_patients.py
    FHIR_SERVER_URL=https://hapi.fhir.org/baseR4 python examples/search_patients.py --live
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import sys
from pathlib import Path
from unittest.mock import MagicMock

import requests

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from typed_fhir import (
    ClientOptions,
    FHIRClient,
    SearchQuery,
    contains,
    greater_or_equal,
    multiple_and,
    token,
)
from typed_fhir.search.compiler import compile_query, encode_params

BASE_URL = "https://fhir.example.com/r4"


def _page(ids: list[str], next_url: str | None) -> dict:
    bundle = {
        "resourceType": "Bundle",
        "type": "searchset",
        "entry": [{"resource": {"resourceType": "Patient", "id": i}} for i in ids],
    }
    if next_url:
        bundle["link"] = [{"relation": "next", "url": next_url}]
    return bundle


def _mock_session() -> MagicMock:
    """A session that serves two linked pages of Patients."""
    pages = [
        _page(["p-1", "p-2"], f"{BASE_URL}?_getpages=demo&_offset=2"),
        _page(["p-3"], None),
    ]
    responses = []
    for page in pages:
        response = MagicMock(spec=requests.Response)
        response.ok = True
        response.status_code = 200
        response.content = json.dumps(page).encode()
        response.json.return_value = page
        responses.append(response)
    session = MagicMock(spec=requests.Session)
    session.request.side_effect = responses
    return session


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    live = "--live" in sys.argv

    query = SearchQuery(
        resource_type="Patient",
        search_parameters={
            "family": contains("Sok"),
            "birthdate": multiple_and(greater_or_equal(dt.date(1970, 1, 1)), "lt2000-01-01"),
            "identifier": token("http://hospital.example/mrn", "MRN-1"),
        },
        raw_params={"_count": "2"},
        page_limit=2,
    )

    print("=== Compiled search ===")
    params = compile_query(query)
    for key, value in params:
        print(f"  {key} = {value}")
    print(f"  -> Patient?{encode_params(params)}\n")

    if live:
        client = FHIRClient(ClientOptions.from_env())
    else:
        client = FHIRClient(BASE_URL, session=_mock_session())

    result = client.search(query)
    if not result.success:
        print(f"Search failed:\n{result.message}")
        sys.exit(1)

    print(f"Fetched {len(result.bundles)} page(s), {result.total()} entries")
    for patient in result.resources():
        print(f"  Patient/{patient['id']}")
    next_page = result.next_page()
    print(f"Next page: {next_page.raw_url if next_page else 'none'}")


if __name__ == "__main__":
    main()
