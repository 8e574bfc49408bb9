"""Typed FHIR R4 client with a compiled search DSL and page aggregation."""

from .client import FHIRClient
from .config import ClientOptions
from .errors import (
    CompileError,
    FHIRClientError,
    InvalidUsageError,
    OperationOutcomeError,
    SearchCancelledError,
    SerializationError,
)
from .search import (
    Modified,
    MultipleAnd,
    Prefixed,
    Quantity,
    Reference,
    SearchBuilder,
    SearchQuery,
    SearchResponse,
    SearchResponseFailure,
    SearchResponseSuccess,
    Token,
    above,
    approximately,
    below,
    contains,
    ends_before,
    equal,
    exact,
    greater_or_equal,
    greater_than,
    in_,
    less_or_equal,
    less_than,
    missing,
    multiple_and,
    multiple_or,
    not_,
    not_equal,
    not_in,
    quantity,
    reference,
    starts_after,
    text,
    token,
)

__all__ = [
    "FHIRClient",
    "ClientOptions",
    "CompileError",
    "FHIRClientError",
    "InvalidUsageError",
    "OperationOutcomeError",
    "SearchCancelledError",
    "SerializationError",
    "Modified",
    "MultipleAnd",
    "Prefixed",
    "Quantity",
    "Reference",
    "SearchBuilder",
    "SearchQuery",
    "SearchResponse",
    "SearchResponseFailure",
    "SearchResponseSuccess",
    "Token",
    "above",
    "approximately",
    "below",
    "contains",
    "ends_before",
    "equal",
    "exact",
    "greater_or_equal",
    "greater_than",
    "in_",
    "less_or_equal",
    "less_than",
    "missing",
    "multiple_and",
    "multiple_or",
    "not_",
    "not_equal",
    "not_in",
    "quantity",
    "reference",
    "starts_after",
    "text",
    "token",
]
