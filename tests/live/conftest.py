"""Skip guards for live tests.

Live tests run against a real FHIR R4 server and are skipped unless
FHIR_LIVE_SERVER_URL is set. They never fail because of missing config.

Environment variables:
  FHIR_LIVE_SERVER_URL     Base URL, e.g. https://hapi.fhir.org/baseR4
  FHIR_BEARER_TOKEN        Optional access token for secured servers

Set them in your shell before running:
  export FHIR_LIVE_SERVER_URL=https://hapi.fhir.org/baseR4
  pytest tests/live -v -m live
"""

from __future__ import annotations

import os

import pytest

from typed_fhir.client import FHIRClient
from typed_fhir.config import ClientOptions


@pytest.fixture(scope="session")
def live_client() -> FHIRClient:
    url = os.environ.get("FHIR_LIVE_SERVER_URL", "")
    if not url:
        pytest.skip("FHIR_LIVE_SERVER_URL not set")
    return FHIRClient(ClientOptions.from_env(server_url=url))
