"""Generic FHIR R4 HTTP transport on top of requests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Literal
from urllib.parse import urlsplit

import requests
from pydantic import BaseModel, ConfigDict, Field

from ..utils import is_operation_outcome

logger = logging.getLogger(__name__)

_FHIR_JSON = "application/fhir+json"


class RequestSpec(BaseModel):
    """One HTTP request against the FHIR server."""

    model_config = ConfigDict(extra="forbid")

    url: str = Field(..., description="Relative to the base URL, or absolute")
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"] = "GET"
    body: Any = Field(default=None, description="JSON body")
    form: list[tuple[str, str]] | None = Field(default=None, description="Form-encoded body")
    headers: dict[str, str] = Field(default_factory=dict)
    timeout: float | None = None
    return_outcome: bool = Field(
        default=False,
        description="Return an OperationOutcome error body instead of raising HTTPError",
    )


RequestInterceptor = Callable[[RequestSpec], RequestSpec]
ResponseInterceptor = Callable[[requests.Response], None]


class FHIRTransport:
    """Send RequestSpecs to a FHIR server and return decoded bodies."""

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        request_interceptors: Sequence[RequestInterceptor] = (),
        response_interceptors: Sequence[ResponseInterceptor] = (),
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._headers = dict(headers or {})
        self._timeout = timeout
        self._request_interceptors = list(request_interceptors)
        self._response_interceptors = list(response_interceptors)

    def url_for(self, url: str) -> str:
        """Absolute URLs (paging links) are kept, relative ones joined to the base URL."""
        if urlsplit(url).scheme:
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    def request(self, spec: RequestSpec) -> Any:
        """Perform the request and return the decoded JSON body.

        Returns:
            The parsed JSON body, the raw text for non-JSON bodies, or None
            when the response has no body.

        Raises:
            requests.HTTPError: on non-2xx responses, unless ``return_outcome``
                is set and the body is an OperationOutcome.
            requests.RequestException: on connection failures and timeouts.
        """
        for interceptor in self._request_interceptors:
            spec = interceptor(spec)

        url = self.url_for(spec.url)
        headers = {"Accept": _FHIR_JSON, **self._headers}
        if spec.body is not None:
            headers["Content-Type"] = _FHIR_JSON
        headers.update(spec.headers)

        logger.debug("FHIR %s %s", spec.method, url)
        response = self._session.request(
            spec.method,
            url,
            headers=headers,
            json=spec.body,
            data=spec.form,
            timeout=spec.timeout if spec.timeout is not None else self._timeout,
        )
        logger.debug("FHIR %s %s -> %s", spec.method, url, response.status_code)

        for interceptor in self._response_interceptors:
            interceptor(response)

        body = _decode(response)
        if not response.ok:
            if spec.return_outcome and is_operation_outcome(body):
                return body
            response.raise_for_status()
        return body


def _decode(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
