"""FHIR R4 client: typed search plus the plain REST interactions."""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import Any, Literal, Mapping

import requests

from .config import ClientOptions
from .fhir.crud import CrudModule
from .fhir.transport import FHIRTransport, RequestInterceptor, ResponseInterceptor
from .search.builder import SearchBuilder
from .search.query import SearchQuery
from .search.response import SearchResponse
from .search.search_module import SearchModule


class FHIRClient:
    """Facade over one FHIR server.

    Args:
        options: ClientOptions, or just the server base URL.
        session: Optional requests.Session (shared pools, test doubles).
        request_interceptors: Applied in order to every outgoing RequestSpec.
        response_interceptors: Called with every requests.Response.
    """

    def __init__(
        self,
        options: ClientOptions | str,
        session: requests.Session | None = None,
        request_interceptors: Sequence[RequestInterceptor] = (),
        response_interceptors: Sequence[ResponseInterceptor] = (),
    ) -> None:
        if isinstance(options, str):
            options = ClientOptions(server_url=options)
        self.options = options
        self.transport = FHIRTransport(
            options.server_url,
            session=session,
            headers=options.default_headers(),
            timeout=options.timeout,
            request_interceptors=request_interceptors,
            response_interceptors=response_interceptors,
        )
        self._search = SearchModule(self.transport, options.search_param_override)
        self._crud = CrudModule(self.transport)

    @property
    def base_url(self) -> str:
        return self.transport.base_url

    def search(
        self,
        query: SearchQuery | SearchBuilder | Mapping[str, Any],
        request_options: Mapping[str, Any] | None = None,
        cancel_event: threading.Event | None = None,
    ) -> SearchResponse:
        """Run a search; see SearchModule.search.

        Mappings are validated into a SearchQuery first, so the camelCase form
        ``{"resourceType": "Patient", "searchParameters": {...}}`` works too.
        """
        if isinstance(query, Mapping):
            query = SearchQuery.model_validate(query)
        return self._search.search(query, request_options=request_options, cancel_event=cancel_event)

    # CRUD --------------------------------------------------------------

    def create(self, resource: Mapping[str, Any], request_options: Mapping[str, Any] | None = None) -> Any:
        return self._crud.create(resource, request_options)

    def read(self, resource_type: str, id: str, request_options: Mapping[str, Any] | None = None) -> Any:
        return self._crud.read(resource_type, id, request_options)

    def update(
        self,
        resource: Mapping[str, Any],
        search_params: Mapping[str, str] | None = None,
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._crud.update(resource, search_params, request_options)

    def patch(
        self,
        resource_type: str,
        id: str,
        operations: list[Mapping[str, Any]],
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._crud.patch(resource_type, id, operations, request_options)

    def delete(
        self,
        resource_type: str,
        id: str,
        search_params: Mapping[str, str] | None = None,
        request_options: Mapping[str, Any] | None = None,
    ) -> None:
        self._crud.delete(resource_type, id, search_params, request_options)

    def vread(
        self,
        resource_type: str,
        id: str,
        version: str,
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._crud.vread(resource_type, id, version, request_options)

    def history(
        self,
        resource_type: str,
        id: str,
        history_params: Mapping[str, str] | None = None,
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._crud.history(resource_type, id, history_params, request_options)

    def conditional_create(
        self,
        resource: Mapping[str, Any],
        search_params: Mapping[str, str],
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._crud.conditional_create(resource, search_params, request_options)

    def conditional_update(
        self,
        resource: Mapping[str, Any],
        search_params: Mapping[str, str],
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._crud.conditional_update(resource, search_params, request_options)

    def conditional_delete(
        self,
        resource_type: str,
        search_params: Mapping[str, str],
        request_options: Mapping[str, Any] | None = None,
    ) -> None:
        self._crud.conditional_delete(resource_type, search_params, request_options)

    def exists(self, resource_type: str, id: str, request_options: Mapping[str, Any] | None = None) -> bool:
        return self._crud.exists(resource_type, id, request_options)

    def capabilities(
        self,
        mode: Literal["full", "normative", "terminology"] = "full",
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._crud.capabilities(mode, request_options)
