"""FHIR R4 search value model.

Search parameter types as defined in https://hl7.org/fhir/R4/search.html:

  number     -> int | float | Decimal
  date       -> datetime.date | datetime.datetime
  string/uri -> str
  token      -> Token (or a bare code string)
  reference  -> Reference (or a "Type/id" / absolute URL string)
  quantity   -> Quantity (or a bare number)
  boolean    -> bool

Wrappers:
  Prefixed    -> comparison prefix (eq, gt, ...) in front of an ordered value
  Modified    -> ":modifier" suffix on the parameter name
  MultipleAnd -> one repeated query parameter per item (logical AND)
  list/tuple  -> comma-joined values in one parameter (logical OR)

Every model has a plain-mapping equivalent with the same keys, so
``{"system": "http://loinc.org", "code": "1234-5"}`` and
``Token(system="http://loinc.org", code="1234-5")`` compile identically.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Any, Literal, Mapping, Sequence, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator


Prefix = Literal["eq", "ne", "gt", "lt", "ge", "le", "sa", "eb", "ap"]
Modifier = Literal["missing", "contains", "exact", "text", "in", "below", "above", "not", "not-in"]

PREFIXES: tuple[str, ...] = get_args(Prefix)
MODIFIERS: tuple[str, ...] = get_args(Modifier)


class _SearchModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Token(_SearchModel):
    """Coded value: ``system|code``, ``system|`` or ``code``."""

    system: str | None = Field(default=None, description="Coding system URI")
    code: str | None = Field(default=None, description="Code within the system")

    @model_validator(mode="after")
    def _system_or_code(self) -> "Token":
        if self.system is None and self.code is None:
            raise ValueError("a token needs at least a system or a code")
        return self


class Reference(_SearchModel):
    """Reference to another resource, by absolute URL or by (type, id)."""

    url: str | None = Field(default=None, description="Absolute reference URL")
    resource_type: str | None = Field(default=None, alias="resourceType")
    id: str | None = Field(default=None, description="Logical id of the target")

    @model_validator(mode="after")
    def _url_or_id(self) -> "Reference":
        if (self.url is None) == (self.id is None):
            raise ValueError("a reference needs exactly one of url or id")
        if self.url is not None and self.resource_type is not None:
            raise ValueError("resource_type only applies to id references")
        return self


class Quantity(_SearchModel):
    """Numeric value with an optional unit system and unit code."""

    number: int | float | Decimal
    system: str | None = Field(default=None, description="Unit system, e.g. http://unitsofmeasure.org")
    code: str | None = Field(default=None, description="Unit code, e.g. mg")


class Prefixed(_SearchModel):
    """An ordered value (number, date, quantity) with a comparison prefix."""

    prefix: Prefix
    value: Any


class Modified(_SearchModel):
    """One value, or an OR-list of values, with a search modifier."""

    modifier: Modifier
    value: Any


class MultipleAnd(_SearchModel):
    """Each item becomes its own repeated occurrence of the parameter."""

    items: tuple[Any, ...]


SearchValue = Union[
    str,
    int,
    float,
    Decimal,
    bool,
    dt.date,
    Token,
    Reference,
    Quantity,
    Prefixed,
    Mapping[str, Any],
]
ModifierOrValue = Union[SearchValue, Sequence[SearchValue], Modified]
Quantifier = Union[ModifierOrValue, MultipleAnd]
