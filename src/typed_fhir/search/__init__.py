from .builder import SearchBuilder
from .compiler import compile_query, encode_params, flatten_quantifier
from .datatypes import (
    MODIFIERS,
    PREFIXES,
    Modified,
    MultipleAnd,
    Prefixed,
    Quantity,
    Reference,
    Token,
)
from .operators import (
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
from .query import SearchQuery
from .response import (
    SearchResponse,
    SearchResponseFailure,
    SearchResponseSuccess,
    search_response_from_result,
)
from .search_module import SearchModule
from .serializer import ValueKind, serialize, value_kind

__all__ = [
    "SearchBuilder",
    "compile_query",
    "encode_params",
    "flatten_quantifier",
    "MODIFIERS",
    "PREFIXES",
    "Modified",
    "MultipleAnd",
    "Prefixed",
    "Quantity",
    "Reference",
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
    "SearchQuery",
    "SearchResponse",
    "SearchResponseFailure",
    "SearchResponseSuccess",
    "search_response_from_result",
    "SearchModule",
    "ValueKind",
    "serialize",
    "value_kind",
]
