"""Shorthand constructors for search values, modifiers, prefixes and quantifiers."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from .datatypes import Modified, MultipleAnd, Prefixed, Quantity, Reference, Token


def token(system_or_code: str, code: str | None = None) -> Token:
    """``token(system, code)`` or ``token(code)``."""
    if code is not None:
        return Token(system=system_or_code, code=code)
    return Token(code=system_or_code)


def reference(type_or_ref: str, id: str | None = None) -> Reference:
    """``reference("Patient", "123")``, ``reference("Patient/123")`` or ``reference("123")``."""
    if id is not None:
        return Reference(resource_type=type_or_ref, id=id)
    if "/" in type_or_ref:
        resource_type, _, ref_id = type_or_ref.partition("/")
        return Reference(resource_type=resource_type, id=ref_id)
    return Reference(id=type_or_ref)


def quantity(number: int | float | Decimal, system_or_code: str, code: str | None = None) -> Quantity:
    """``quantity(5.4, system, code)`` or ``quantity(5.4, code)``."""
    if code is not None:
        return Quantity(number=number, system=system_or_code, code=code)
    return Quantity(number=number, code=system_or_code)


# Modifiers -----------------------------------------------------------------

def missing(value: bool) -> Modified:
    return Modified(modifier="missing", value=value)


def contains(value: str) -> Modified:
    return Modified(modifier="contains", value=value)


def exact(value: str) -> Modified:
    return Modified(modifier="exact", value=value)


def text(value: Any) -> Modified:
    return Modified(modifier="text", value=value)


def in_(value: Any) -> Modified:
    return Modified(modifier="in", value=value)


def below(value: Any) -> Modified:
    return Modified(modifier="below", value=value)


def above(value: Any) -> Modified:
    return Modified(modifier="above", value=value)


def not_(value: Any) -> Modified:
    return Modified(modifier="not", value=value)


def not_in(value: Any) -> Modified:
    return Modified(modifier="not-in", value=value)


# Quantifiers ---------------------------------------------------------------

def multiple_and(*items: Any) -> MultipleAnd:
    """Repeat the parameter once per item: ``given=Marc&given=Uwe``."""
    return MultipleAnd(items=items)


def multiple_or(*items: Any) -> list[Any]:
    """Join the items into one parameter value: ``given=Marc,Uwe``."""
    return list(items)


# Prefixes ------------------------------------------------------------------

def equal(value: Any) -> Prefixed:
    return Prefixed(prefix="eq", value=value)


def not_equal(value: Any) -> Prefixed:
    return Prefixed(prefix="ne", value=value)


def greater_than(value: Any) -> Prefixed:
    return Prefixed(prefix="gt", value=value)


def less_than(value: Any) -> Prefixed:
    return Prefixed(prefix="lt", value=value)


def greater_or_equal(value: Any) -> Prefixed:
    return Prefixed(prefix="ge", value=value)


def less_or_equal(value: Any) -> Prefixed:
    return Prefixed(prefix="le", value=value)


def starts_after(value: Any) -> Prefixed:
    return Prefixed(prefix="sa", value=value)


def ends_before(value: Any) -> Prefixed:
    return Prefixed(prefix="eb", value=value)


def approximately(value: Any) -> Prefixed:
    return Prefixed(prefix="ap", value=value)
