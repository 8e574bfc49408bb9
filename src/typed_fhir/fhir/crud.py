"""Single-request FHIR REST interactions (http://hl7.org/fhir/http.html)."""

from __future__ import annotations

import logging
from typing import Any, Literal, Mapping
from urllib.parse import urlencode

import requests

from .transport import FHIRTransport, RequestSpec

logger = logging.getLogger(__name__)

_JSON_PATCH = "application/json-patch+json"


class CrudModule:
    """create / read / update / patch / delete and friends."""

    def __init__(self, transport: FHIRTransport) -> None:
        self._transport = transport

    def create(self, resource: Mapping[str, Any], request_options: Mapping[str, Any] | None = None) -> Any:
        """POST a new resource to ``<resourceType>``."""
        return self._send(f"{resource['resourceType']}", "POST", request_options, body=dict(resource))

    def read(self, resource_type: str, id: str, request_options: Mapping[str, Any] | None = None) -> Any:
        """GET ``<resourceType>/<id>``."""
        return self._send(f"{resource_type}/{id}", "GET", request_options)

    def update(
        self,
        resource: Mapping[str, Any],
        search_params: Mapping[str, str] | None = None,
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        """PUT an existing resource to ``<resourceType>/<id>``."""
        if not resource.get("id"):
            raise ValueError("resource must have an id to be updated")
        url = _with_params(f"{resource['resourceType']}/{resource['id']}", search_params)
        return self._send(url, "PUT", request_options, body=dict(resource))

    def patch(
        self,
        resource_type: str,
        id: str,
        operations: list[Mapping[str, Any]],
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        """Apply a JSON Patch document to ``<resourceType>/<id>``."""
        return self._send(
            f"{resource_type}/{id}",
            "PATCH",
            request_options,
            body=[dict(op) for op in operations],
            headers={"Content-Type": _JSON_PATCH},
        )

    def delete(
        self,
        resource_type: str,
        id: str,
        search_params: Mapping[str, str] | None = None,
        request_options: Mapping[str, Any] | None = None,
    ) -> None:
        self._send(_with_params(f"{resource_type}/{id}", search_params), "DELETE", request_options)

    def vread(
        self,
        resource_type: str,
        id: str,
        version: str,
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        """GET ``<resourceType>/<id>/_history/<version>``."""
        return self._send(f"{resource_type}/{id}/_history/{version}", "GET", request_options)

    def history(
        self,
        resource_type: str,
        id: str,
        history_params: Mapping[str, str] | None = None,
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        """GET the history Bundle of one resource."""
        url = _with_params(f"{resource_type}/{id}/_history", history_params)
        return self._send(url, "GET", request_options)

    def conditional_create(
        self,
        resource: Mapping[str, Any],
        search_params: Mapping[str, str],
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        url = _with_params(resource["resourceType"], search_params)
        return self._send(url, "POST", request_options, body=dict(resource))

    def conditional_update(
        self,
        resource: Mapping[str, Any],
        search_params: Mapping[str, str],
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        url = _with_params(resource["resourceType"], search_params)
        return self._send(url, "PUT", request_options, body=dict(resource))

    def conditional_delete(
        self,
        resource_type: str,
        search_params: Mapping[str, str],
        request_options: Mapping[str, Any] | None = None,
    ) -> None:
        self._send(_with_params(resource_type, search_params), "DELETE", request_options)

    def exists(self, resource_type: str, id: str, request_options: Mapping[str, Any] | None = None) -> bool:
        """HEAD ``<resourceType>/<id>``; False on 404, other HTTP errors propagate."""
        try:
            self._send(f"{resource_type}/{id}", "HEAD", request_options)
        except requests.HTTPError as exc:
            if exc.response is not None and exc.response.status_code == 404:
                return False
            raise
        return True

    def capabilities(
        self,
        mode: Literal["full", "normative", "terminology"] = "full",
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        """GET the server's CapabilityStatement (``metadata``)."""
        url = "metadata" if mode == "full" else f"metadata?mode={mode}"
        return self._send(url, "GET", request_options)

    def _send(
        self,
        url: str,
        method: str,
        request_options: Mapping[str, Any] | None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        options = dict(request_options or {})
        merged_headers = {**(headers or {}), **options.pop("headers", {})}
        spec = RequestSpec(url=url, method=method, body=body, headers=merged_headers, **options)
        logger.debug("FHIR %s interaction on %s", method, url)
        return self._transport.request(spec)


def _with_params(url: str, params: Mapping[str, str] | None) -> str:
    if not params:
        return url
    return f"{url}?{urlencode(dict(params))}"
