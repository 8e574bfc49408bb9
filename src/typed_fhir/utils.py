"""Small helpers shared by the search and CRUD modules."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from typing_extensions import TypeGuard

if TYPE_CHECKING:
    from .fhir.models import Bundle, OperationOutcome

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_KEBAB_SEGMENT_RE  = re.compile(r"-.")


def camel_to_kebab(name: str) -> str:
    """'valueQuantity' -> 'value-quantity'. Underscores are left alone."""
    return _CAMEL_BOUNDARY_RE.sub(r"\1-\2", name).lower()


def kebab_to_camel(name: str) -> str:
    return _KEBAB_SEGMENT_RE.sub(lambda m: m.group(0)[1].upper(), name)


def is_bundle(body: Any) -> TypeGuard[Bundle]:
    return isinstance(body, dict) and body.get("resourceType") == "Bundle"


def is_operation_outcome(body: Any) -> TypeGuard[OperationOutcome]:
    return isinstance(body, dict) and body.get("resourceType") == "OperationOutcome"
