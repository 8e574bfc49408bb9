"""Search results: a successful run of Bundle pages, or a failed OperationOutcome."""

from __future__ import annotations

from typing import Any, Literal, NoReturn, Union

from pydantic import BaseModel, ConfigDict, Field

from ..errors import FHIRClientError, OperationOutcomeError
from ..utils import is_bundle
from .query import SearchQuery


class SearchResponseSuccess(BaseModel):
    """One or more Bundle pages of the same search, in fetch order."""

    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    resource_type: str = Field(..., description="Primary resource type of the search")
    bundles: list[dict[str, Any]] = Field(..., min_length=1)

    def resources(self, resource_type: str | None = None) -> list[dict[str, Any]]:
        """All entry resources of the given type (default: the primary type)."""
        wanted = resource_type or self.resource_type
        return [
            resource
            for resource in self._entry_resources()
            if resource.get("resourceType") == wanted
        ]

    def total(self) -> int:
        """Number of entries fetched across all pages, regardless of type.

        Bundle.total is not consulted; it is optional and servers disagree on it.
        """
        return sum(len(bundle.get("entry") or []) for bundle in self.bundles)

    def combine(self, other: "SearchResponseSuccess") -> "SearchResponseSuccess":
        """A new result holding this result's pages followed by ``other``'s."""
        return SearchResponseSuccess(
            resource_type=self.resource_type,
            bundles=[*self.bundles, *other.bundles],
        )

    def next_page(self) -> SearchQuery | None:
        return self._page_link("next")

    def previous_page(self) -> SearchQuery | None:
        return self._page_link("previous")

    def _page_link(self, relation: str) -> SearchQuery | None:
        last = self.bundles[-1]
        for link in last.get("link") or []:
            if link.get("relation") == relation and link.get("url"):
                return SearchQuery.from_url(self.resource_type, link["url"])
        return None

    def _entry_resources(self) -> list[dict[str, Any]]:
        return [
            entry["resource"]
            for bundle in self.bundles
            for entry in bundle.get("entry") or []
            if entry.get("resource")
        ]


class SearchResponseFailure(BaseModel):
    """The server answered the search with an OperationOutcome."""

    model_config = ConfigDict(frozen=True)

    success: Literal[False] = False
    operation_outcome: dict[str, Any]

    @property
    def message(self) -> str:
        """Narrative text (if plain text) then every issue's details.text, newline-joined."""
        parts: list[str] = []
        narrative = self.operation_outcome.get("text")
        if isinstance(narrative, str) and narrative:
            parts.append(narrative)
        for issue in self.operation_outcome.get("issue") or []:
            detail = (issue.get("details") or {}).get("text")
            if detail:
                parts.append(detail)
        return "\n".join(parts)

    def error(self) -> OperationOutcomeError:
        return OperationOutcomeError(self.message, self.operation_outcome)

    def raise_for_outcome(self) -> NoReturn:
        raise self.error()


SearchResponse = Union[SearchResponseSuccess, SearchResponseFailure]


def search_response_from_result(resource_type: str, body: Any) -> SearchResponse:
    """Classify a decoded search body by its resourceType.

    Raises:
        FHIRClientError: if the body is not a JSON object at all.
    """
    if is_bundle(body):
        return SearchResponseSuccess(resource_type=resource_type, bundles=[body])
    if not isinstance(body, dict):
        raise FHIRClientError(f"unexpected {resource_type} search response body: {body!r:.200}")
    return SearchResponseFailure(operation_outcome=body)
