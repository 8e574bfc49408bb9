"""Exception hierarchy for the FHIR client."""

from __future__ import annotations

from typing import Any


class FHIRClientError(Exception):
    """Base exception for everything raised by this package."""


class CompileError(FHIRClientError, ValueError):
    """Raised when a search query cannot be turned into wire parameters."""


class SerializationError(CompileError):
    """Raised when a search value matches none of the known value shapes."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"failed to determine string representation for {value!r}")
        self.value = value


class InvalidUsageError(CompileError):
    """Raised when the compiler is handed a query it must never see."""


class OperationOutcomeError(FHIRClientError):
    """A server OperationOutcome rendered as an exception."""

    def __init__(self, message: str, operation_outcome: dict[str, Any]) -> None:
        super().__init__(message)
        self.message = message
        self.operation_outcome = operation_outcome


class SearchCancelledError(FHIRClientError):
    """Raised when a paginated search is cancelled between two pages."""

    def __init__(self, pages_fetched: int) -> None:
        super().__init__(f"search cancelled after {pages_fetched} page(s)")
        self.pages_fetched = pages_fetched
