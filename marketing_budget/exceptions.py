"""Exception hierarchy for the marketing budget engine.

Validation failures are reported as values (see ``ValidationResult``); the
exceptions here cover illegal operations and persistence failures.
"""

from typing import Dict, Optional


class MarketingBudgetError(Exception):
    """Base class for all marketing budget engine errors."""


class InvalidTransitionError(MarketingBudgetError):
    """Raised when a status transition is not in the transition table."""

    def __init__(self, from_status: str, to_status: str):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            f"Cannot transition budget from '{from_status}' to '{to_status}'"
        )


class PermissionDeniedError(MarketingBudgetError):
    """Raised when the acting user's role does not allow an operation."""

    def __init__(self, role: str, operation: str):
        self.role = role
        self.operation = operation
        super().__init__(f"Role '{role}' is not permitted to {operation}")


class RecordNotFoundError(MarketingBudgetError):
    """Raised when a record cannot be found by id."""

    def __init__(self, entity_type: str, record_id: int):
        self.entity_type = entity_type
        self.record_id = record_id
        super().__init__(f"{entity_type} #{record_id} not found")


class DataImportError(MarketingBudgetError):
    """Raised when a selective import fails part-way.

    Records saved before the failure stay saved; ``imported`` holds the
    per-type counts persisted so far.
    """

    def __init__(
        self,
        entity_type: str,
        message: str,
        imported: Optional[Dict[str, int]] = None,
    ):
        self.entity_type = entity_type
        self.imported = dict(imported or {})
        super().__init__(f"Import of {entity_type} failed: {message}")


class StorageError(MarketingBudgetError):
    """Raised when a data file cannot be read or written."""
