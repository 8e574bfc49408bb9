"""The search query model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class SearchQuery(BaseModel):
    """A FHIR search request.

    Either structured (``search_parameters`` and/or ``raw_params``) or a
    verbatim ``raw_url``, never both. Raw-URL queries are how continuation
    links are followed: the server's own paging encoding is replayed as is.

    Accepts the camelCase JSON names as well (``resourceType``, ``pageLimit``,
    ``searchParameters``, ...).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    resource_type: str = Field(..., description="Primary resource type, e.g. Patient")
    using_post: bool = Field(default=False, description="POST form-encoded to <type>/_search")
    page_limit: int | None = Field(default=None, description="Pages to fetch; 1 when unset")
    search_parameters: dict[str, Any] | None = Field(default=None, description="field -> quantifier")
    raw_params: dict[str, str | list[str]] | None = Field(default=None, description="Appended verbatim")
    raw_url: str | None = Field(default=None, description="Fetched verbatim, bypasses compilation")

    @model_validator(mode="after")
    def _raw_url_is_exclusive(self) -> "SearchQuery":
        if self.raw_url is not None and (
            self.search_parameters is not None or self.raw_params is not None
        ):
            raise ValueError("raw_url cannot be combined with search_parameters or raw_params")
        return self

    @property
    def is_raw(self) -> bool:
        return self.raw_url is not None

    @classmethod
    def from_url(cls, resource_type: str, url: str) -> "SearchQuery":
        return cls(resource_type=resource_type, raw_url=url)
