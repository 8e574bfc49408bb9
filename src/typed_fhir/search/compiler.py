"""Compile a SearchQuery into an ordered list of (key, value) query parameters.

Compilation is pure and order preserving: fields come out in declaration
order, ``multiple_and`` items in their given order, and ``raw_params`` after
all compiled fields. Overlapping keys are kept as duplicates.
"""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

from ..errors import InvalidUsageError
from ..utils import camel_to_kebab
from .datatypes import Modified, MultipleAnd
from .query import SearchQuery
from .serializer import field, serialize

Param = tuple[str, str]
Leaf = tuple[str | None, list[Any]]


def compile_query(
    query: SearchQuery | Mapping[str, Any],
    overrides: Mapping[str, str] | None = None,
) -> list[Param]:
    """Turn ``search_parameters`` + ``raw_params`` into wire parameters.

    Args:
        query: The query to compile. Mappings are validated into a SearchQuery.
        overrides: field name -> wire name; unlisted fields go camelCase -> kebab-case.

    Raises:
        InvalidUsageError: if the query is a raw-URL query.
        SerializationError: if a value matches no known value shape.
    """
    if isinstance(query, Mapping):
        if query.get("rawUrl") is not None or query.get("raw_url") is not None:
            raise InvalidUsageError("raw url queries must not be compiled into search parameters")
        query = SearchQuery.model_validate(query)
    if query.raw_url is not None:
        raise InvalidUsageError("raw url queries must not be compiled into search parameters")

    overrides = overrides or {}
    params: list[Param] = []

    for name, quantifier in (query.search_parameters or {}).items():
        if quantifier is None:
            continue
        key = overrides.get(name, camel_to_kebab(name))
        for modifier, values in flatten_quantifier(quantifier):
            wire_key = f"{key}:{modifier}" if modifier is not None else key
            params.append((wire_key, ",".join(serialize(v) for v in values)))

    params.extend(_raw_params(query.raw_params or {}))
    return params


def flatten_quantifier(quantifier: Any) -> list[Leaf]:
    """Expand a quantifier tree into ``(modifier, values)`` leaves.

    A multiple-and node yields one leaf per item (recursively); anything else
    is a single leaf whose values are OR-joined by the caller.
    """
    items = _multiple_and_items(quantifier)
    if items is not None:
        leaves: list[Leaf] = []
        for item in items:
            leaves.extend(flatten_quantifier(item))
        return leaves
    return [_leaf(quantifier)]


def encode_params(params: list[Param]) -> str:
    """URL-encode compiled parameters, e.g. ``family%3Acontains=Sokol``."""
    return urlencode(params)


def _leaf(node: Any) -> Leaf:
    modifier = _modifier(node)
    inner = field(node, "value") if modifier is not None else node
    values = list(inner) if isinstance(inner, (list, tuple)) else [inner]
    for value in values:
        if _modifier(value) is not None or _multiple_and_items(value) is not None:
            raise InvalidUsageError(
                f"modifiers and multiple_and cannot be nested inside an OR list: {value!r}"
            )
    return modifier, values


def _modifier(node: Any) -> str | None:
    if isinstance(node, Modified):
        return node.modifier
    if isinstance(node, Mapping):
        return node.get("modifier")
    return None


def _multiple_and_items(node: Any) -> tuple[Any, ...] | None:
    if isinstance(node, MultipleAnd):
        return node.items
    if isinstance(node, Mapping) and node.get("quantifier") == "multiple-and":
        return tuple(node.get("items", node.get("modOrVals", ())))
    return None


def _raw_params(raw: Mapping[str, str | list[str]]) -> list[Param]:
    params: list[Param] = []
    for key, value in raw.items():
        if isinstance(value, (list, tuple)):
            params.extend((key, item) for item in value)
        else:
            params.append((key, value))
    return params
