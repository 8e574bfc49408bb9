"""Run searches and walk their pages.

A search is a loop over three states: fetching a page, finished with the
accumulated pages, or failed with an OperationOutcome. Each page is requested
only after the previous one has arrived, because the next request is the
previous page's ``next`` link.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from ..errors import SearchCancelledError
from ..fhir.models import EMPTY_SEARCHSET
from ..fhir.transport import FHIRTransport, RequestSpec
from .builder import SearchBuilder
from .compiler import compile_query, encode_params
from .query import SearchQuery
from .response import SearchResponse, SearchResponseSuccess, search_response_from_result

logger = logging.getLogger(__name__)


class SearchModule:
    """Compile, send and paginate FHIR searches."""

    def __init__(
        self,
        transport: FHIRTransport,
        param_override: Mapping[str, str] | None = None,
    ) -> None:
        self._transport = transport
        self._param_override = dict(param_override or {})

    def search(
        self,
        query: SearchQuery | SearchBuilder,
        request_options: Mapping[str, Any] | None = None,
        cancel_event: threading.Event | None = None,
    ) -> SearchResponse:
        """Fetch up to ``query.page_limit`` pages (default 1) and merge them.

        Args:
            query: A SearchQuery, or a SearchBuilder to build one from.
            request_options: Extra RequestSpec fields (``headers``, ``timeout``)
                applied to every page request.
            cancel_event: Checked before each page request; when set, the walk
                stops and SearchCancelledError is raised.

        Returns:
            SearchResponseSuccess with every fetched page, or the
            SearchResponseFailure of the first page that was an OperationOutcome.
            A page limit of 0 fetches nothing and returns one empty page.
        """
        if isinstance(query, SearchBuilder):
            query = query.build()

        resource_type = query.resource_type
        remaining = query.page_limit if query.page_limit is not None else 1
        current: SearchQuery | None = query
        accumulated: SearchResponseSuccess | None = None
        fetched = 0

        while remaining > 0 and current is not None:
            if cancel_event is not None and cancel_event.is_set():
                raise SearchCancelledError(fetched)

            body = self.search_raw(current, request_options)
            response = search_response_from_result(resource_type, body)
            if not response.success:
                logger.warning(
                    "%s search failed on page %d: %s",
                    resource_type,
                    fetched + 1,
                    response.message or "OperationOutcome without details",
                )
                return response

            accumulated = response if accumulated is None else accumulated.combine(response)
            fetched += 1
            remaining -= 1
            current = response.next_page()
            logger.debug(
                "%s search page %d fetched, next link %s",
                resource_type,
                fetched,
                "present" if current is not None else "absent",
            )

        if accumulated is None:
            return SearchResponseSuccess(resource_type=resource_type, bundles=[dict(EMPTY_SEARCHSET)])
        return accumulated

    def search_raw(
        self,
        query: SearchQuery,
        request_options: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one search request and return the decoded body, Bundle or OperationOutcome."""
        options = dict(request_options or {})
        if query.raw_url is not None:
            # continuation links are replayed untouched; some servers drop the
            # resource type from them or use their own offset encoding
            spec = RequestSpec(url=query.raw_url, return_outcome=True, **options)
        elif query.using_post:
            spec = RequestSpec(
                url=f"{query.resource_type}/_search",
                method="POST",
                form=compile_query(query, self._param_override),
                return_outcome=True,
                **options,
            )
        else:
            params = compile_query(query, self._param_override)
            url = f"{query.resource_type}?{encode_params(params)}" if params else query.resource_type
            spec = RequestSpec(url=url, return_outcome=True, **options)
        return self._transport.request(spec)
