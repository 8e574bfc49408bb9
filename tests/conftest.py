"""Shared pytest fixtures, payload factories, and test markers.

Test tiers
----------
  unit        Fast, fully offline, zero network. Always run.

  integration Mock the FHIR server with requests-mock. Always run.
              Validates search, pagination and CRUD end to end without
              real network calls.

  quality     Property-based (Hypothesis) checks of the serializer,
              compiler and result aggregation. Always run offline.

  live        Real FHIR server calls. Skipped unless FHIR_LIVE_SERVER_URL
              is set. See tests/live/conftest.py.

Run specific tiers:
  pytest tests/unit tests/integration tests/quality   # offline only
  pytest tests/live -m live                           # live only
  pytest tests/ -v                                    # everything
"""

from __future__ import annotations

import pytest
import requests_mock as req_mock

from typed_fhir.client import FHIRClient
from tests.fixtures.bundles import (
    make_bundle,
    make_encounter,
    make_operation_outcome,
    make_patient,
)

BASE_URL = "https://fhir.example.com/r4"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast offline unit tests")
    config.addinivalue_line("markers", "integration: mock-based integration tests")
    config.addinivalue_line("markers", "quality: property-based tests")
    config.addinivalue_line("markers", "live: requires a reachable FHIR server (skipped by default)")


# ---------------------------------------------------------------------------
# Payload fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def patient_bundle() -> dict:
    return make_bundle([make_patient("p-001"), make_patient("p-002", given="Marc", family="Uwe")])


@pytest.fixture
def error_outcome() -> dict:
    return make_operation_outcome("foobar error", None, "second problem")


@pytest.fixture
def encounter_pages() -> list[dict]:
    """Three linked Encounter pages; the last one has no next link."""
    page_urls = [f"{BASE_URL}/Encounter?_getpages=abc&_offset={n}" for n in (0, 2, 4)]
    return [
        make_bundle(
            [make_encounter(f"e-{n}a"), make_encounter(f"e-{n}b")],
            next_url=page_urls[n + 1] if n + 1 < len(page_urls) else None,
            previous_url=page_urls[n - 1] if n > 0 else None,
            self_url=page_urls[n],
        )
        for n in range(3)
    ]


# ---------------------------------------------------------------------------
# Client / HTTP mocks
# ---------------------------------------------------------------------------

@pytest.fixture
def fhir_mock():
    with req_mock.Mocker() as m:
        yield m


@pytest.fixture
def client() -> FHIRClient:
    return FHIRClient(BASE_URL)


@pytest.fixture
def paged_encounter_server(fhir_mock, encounter_pages: list[dict]):
    """First page answers the compiled query, later pages answer their links."""
    fhir_mock.get(f"{BASE_URL}/Encounter?part-of=Encounter%2Ffoobar", json=encounter_pages[0])
    fhir_mock.get(encounter_pages[0]["link"][1]["url"], json=encounter_pages[1])
    fhir_mock.get(encounter_pages[1]["link"][1]["url"], json=encounter_pages[2])
    return fhir_mock
