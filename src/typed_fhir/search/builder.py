"""Fluent construction of SearchQuery objects."""

from __future__ import annotations

import copy
from typing import Any

from .query import SearchQuery


class SearchBuilder:
    """Build a SearchQuery step by step.

    Example::

        query = SearchBuilder("Patient").set("family", contains("Sokol")).page_limit(2).build()
    """

    def __init__(self, resource_type: str) -> None:
        self._resource_type = resource_type
        self._search_parameters: dict[str, Any] = {}
        self._raw_params: dict[str, str | list[str]] = {}
        self._page_limit: int | None = None
        self._using_post = False

    def set(self, field: str, value: Any) -> "SearchBuilder":
        self._search_parameters[field] = value
        return self

    def raw(self, key: str, value: str | list[str]) -> "SearchBuilder":
        self._raw_params[key] = value
        return self

    def page_limit(self, limit: int) -> "SearchBuilder":
        self._page_limit = limit
        return self

    def using_post(self, post: bool = True) -> "SearchBuilder":
        self._using_post = post
        return self

    def build(self) -> SearchQuery:
        """Snapshot the builder; later builder calls do not affect the query."""
        return SearchQuery(
            resource_type=self._resource_type,
            using_post=self._using_post,
            page_limit=self._page_limit,
            search_parameters=copy.deepcopy(self._search_parameters),
            raw_params=copy.deepcopy(self._raw_params) or None,
        )
