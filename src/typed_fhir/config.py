"""Client configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field


class ClientOptions(BaseModel):
    """Connection settings for a FHIR server."""

    server_url: str = Field(..., description="FHIR base URL, e.g. https://hapi.fhir.org/baseR4")
    search_param_override: dict[str, str] = Field(
        default_factory=dict,
        description="Search field name -> wire name, bypassing camelCase -> kebab-case",
    )
    timeout: float = Field(default=30.0, description="Per-request timeout in seconds")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra headers sent on every request")
    bearer_token: str | None = Field(default=None, description="Pre-obtained OAuth2 access token")

    @classmethod
    def from_env(cls, **overrides: object) -> "ClientOptions":
        """Build options from FHIR_SERVER_URL, FHIR_TIMEOUT and FHIR_BEARER_TOKEN.

        Keyword arguments take precedence over the environment.
        """
        values: dict[str, object] = {
            "server_url": os.environ.get("FHIR_SERVER_URL", ""),
        }
        timeout = os.environ.get("FHIR_TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)
        token = os.environ.get("FHIR_BEARER_TOKEN")
        if token:
            values["bearer_token"] = token
        values.update(overrides)
        if not values["server_url"]:
            raise ValueError("server_url must not be empty (set FHIR_SERVER_URL)")
        return cls(**values)

    def default_headers(self) -> dict[str, str]:
        headers = dict(self.headers)
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"
        return headers
