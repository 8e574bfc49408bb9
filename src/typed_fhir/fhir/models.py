"""Structural shapes of the FHIR payloads the search core reads.

Only the fields this package touches are declared; everything else on a
resource passes through untouched.
"""

from __future__ import annotations

from typing import Any, TypedDict

from typing_extensions import NotRequired


class Resource(TypedDict):
    resourceType: str
    id: NotRequired[str]


class BundleLink(TypedDict):
    relation: str
    url: str


class BundleEntry(TypedDict):
    fullUrl: NotRequired[str]
    resource: NotRequired[dict[str, Any]]


class Bundle(TypedDict):
    resourceType: str
    type: NotRequired[str]
    total: NotRequired[int]
    link: NotRequired[list[BundleLink]]
    entry: NotRequired[list[BundleEntry]]


class CodeableConcept(TypedDict):
    text: NotRequired[str]


class OperationOutcomeIssue(TypedDict):
    severity: str
    code: str
    details: NotRequired[CodeableConcept]
    diagnostics: NotRequired[str]


class OperationOutcome(TypedDict):
    resourceType: str
    text: NotRequired[Any]
    issue: list[OperationOutcomeIssue]


EMPTY_SEARCHSET: Bundle = {"resourceType": "Bundle", "type": "searchset"}
