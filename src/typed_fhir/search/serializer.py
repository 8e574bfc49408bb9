"""Render a single search value in FHIR query-string form.

Several value shapes are structurally compatible (a reference string is also
a plain string, a quantity may be a bare number), so the shape is decided by
one discriminator, ``value_kind``, which tests the shapes in a fixed order and
returns the first match:

  1. prefixed   - has a ``prefix``             -> "gt" + inner value
  2. string     - str                          -> as is
  3. number     - int / float / Decimal        -> decimal string
  4. date       - date / datetime              -> YYYY-MM-DD (UTC)
  5. boolean    - bool                         -> "true" / "false"
  6. quantity   - has a ``number``             -> "5.4" or "5.4|system|code"
  7. reference  - has a ``url`` or an ``id``   -> url, "Type/id" or "id"
  8. token      - has a ``system`` or ``code`` -> "system|code" or "code"
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel

from ..errors import SerializationError


class ValueKind(str, Enum):
    PREFIXED  = "prefixed"
    STRING    = "string"
    NUMBER    = "number"
    DATE      = "date"
    BOOLEAN   = "boolean"
    QUANTITY  = "quantity"
    REFERENCE = "reference"
    TOKEN     = "token"


def field(value: Any, *names: str) -> Any:
    """Return the first non-None field of a model or mapping, else None."""
    for name in names:
        if isinstance(value, Mapping):
            found = value.get(name)
        elif isinstance(value, BaseModel):
            found = getattr(value, name, None)
        else:
            return None
        if found is not None:
            return found
    return None


def _has(value: Any, *names: str) -> bool:
    return field(value, *names) is not None


def value_kind(value: Any) -> ValueKind:
    """Classify a search value. Raises SerializationError if nothing matches."""
    if _has(value, "prefix"):
        return ValueKind.PREFIXED
    if isinstance(value, str):
        return ValueKind.STRING
    # bool is an int subclass; it must not be rendered as 1/0
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return ValueKind.NUMBER
    if isinstance(value, dt.date):
        return ValueKind.DATE
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if _has(value, "number"):
        return ValueKind.QUANTITY
    if _has(value, "url", "id"):
        return ValueKind.REFERENCE
    if _has(value, "system", "code"):
        return ValueKind.TOKEN
    raise SerializationError(value)


def serialize(value: Any) -> str:
    """Render one search value (never a list) as its wire string."""
    kind = value_kind(value)

    if kind is ValueKind.PREFIXED:
        return f"{field(value, 'prefix')}{serialize(field(value, 'value', 'prefixValue'))}"
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.NUMBER:
        return format_number(value)
    if kind is ValueKind.DATE:
        return format_date(value)
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.QUANTITY:
        number = format_number(field(value, "number"))
        system = field(value, "system")
        code = field(value, "code")
        if system is None and code is None:
            return number
        return f"{number}|{system or ''}|{code or ''}"
    if kind is ValueKind.REFERENCE:
        url = field(value, "url")
        if url is not None:
            return url
        resource_type = field(value, "resource_type", "resourceType")
        prefix = f"{resource_type}/" if resource_type is not None else ""
        return f"{prefix}{field(value, 'id')}"
    # ValueKind.TOKEN
    system = field(value, "system")
    prefix = f"{system}|" if system is not None else ""
    return f"{prefix}{field(value, 'code') or ''}"


def format_number(number: int | float | Decimal) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def format_date(value: dt.date) -> str:
    """XML date form. Aware datetimes are moved to UTC first; the time is dropped."""
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(dt.timezone.utc)
        value = value.date()
    return value.isoformat()
