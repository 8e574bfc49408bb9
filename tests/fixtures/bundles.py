"""FHIR payload factories for tests.

Builds structurally valid searchset Bundles and OperationOutcomes, so tests
state only what they care about (entries, paging links, issue texts).
"""

from __future__ import annotations

from typing import Any


def make_patient(patient_id: str, given: str = "Kirill", family: str = "Sokol") -> dict:
    return {
        "resourceType": "Patient",
        "id": patient_id,
        "name": [{"given": [given], "family": family}],
    }


def make_encounter(encounter_id: str) -> dict:
    return {"resourceType": "Encounter", "id": encounter_id, "status": "finished"}


def make_bundle(
    resources: list[dict] | None = None,
    next_url: str | None = None,
    previous_url: str | None = None,
    self_url: str | None = None,
    total: int | None = None,
) -> dict:
    """A searchset Bundle holding ``resources`` with the given paging links."""
    bundle: dict[str, Any] = {"resourceType": "Bundle", "type": "searchset"}
    links = []
    if self_url:
        links.append({"relation": "self", "url": self_url})
    if next_url:
        links.append({"relation": "next", "url": next_url})
    if previous_url:
        links.append({"relation": "previous", "url": previous_url})
    if links:
        bundle["link"] = links
    if resources is not None:
        bundle["entry"] = [
            {"fullUrl": f"urn:uuid:{r.get('id', i)}", "resource": r}
            for i, r in enumerate(resources)
        ]
    if total is not None:
        bundle["total"] = total
    return bundle


def make_operation_outcome(*details: str | None, text: str | None = None) -> dict:
    """An OperationOutcome with one error issue per detail (None -> no details)."""
    issues = []
    for detail in details:
        issue: dict[str, Any] = {"severity": "error", "code": "processing"}
        if detail is not None:
            issue["details"] = {"text": detail}
        issues.append(issue)
    outcome: dict[str, Any] = {"resourceType": "OperationOutcome", "issue": issues}
    if text is not None:
        outcome["text"] = text
    return outcome
