"""Validation layer for budget approval rules."""

from marketing_budget.validators.budget_validators import (
    APPROVAL_RULES,
    check_address,
    check_item_prices,
    check_line_items,
    check_schedule,
    check_selected_items,
    validate_for_approval,
)
from marketing_budget.validators.validation_result import (
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "APPROVAL_RULES",
    "ValidationIssue",
    "ValidationResult",
    "check_address",
    "check_item_prices",
    "check_line_items",
    "check_schedule",
    "check_selected_items",
    "validate_for_approval",
]
