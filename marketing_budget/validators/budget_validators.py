"""Approval rules for marketing budgets.

A budget may only move from draft to approved when every rule here passes.
Each rule is available as an individual checker returning a
``ValidationIssue`` or None; ``validate_for_approval`` runs all of them, in
order, and collects every failure.
"""

import logging
from decimal import Decimal
from typing import Callable, List, Optional

from marketing_budget.calculators.price_resolver import get_line_item_price
from marketing_budget.models.budget import Budget
from marketing_budget.validators.validation_result import (
    ValidationIssue,
    ValidationResult,
)

logger = logging.getLogger(__name__)

ADDRESS_REQUIRED = "address_required"
LINE_ITEMS_REQUIRED = "line_items_required"
SELECTED_ITEMS_REQUIRED = "selected_items_required"
ITEM_PRICES_REQUIRED = "item_prices_required"
SCHEDULE_REQUIRED = "schedule_required"


def check_address(budget: Budget) -> Optional[ValidationIssue]:
    """The property address must be non-empty after trimming."""
    if not budget.property_address.strip():
        return ValidationIssue(ADDRESS_REQUIRED, "Property address is required.")
    return None


def check_line_items(budget: Budget) -> Optional[ValidationIssue]:
    """The budget must have at least one line item."""
    if not budget.line_items:
        return ValidationIssue(
            LINE_ITEMS_REQUIRED, "Budget must have at least one line item."
        )
    return None


def check_selected_items(budget: Budget) -> Optional[ValidationIssue]:
    """At least one line item must be selected."""
    if not any(item.is_selected for item in budget.line_items):
        return ValidationIssue(
            SELECTED_ITEMS_REQUIRED, "At least one line item must be selected."
        )
    return None


def check_item_prices(budget: Budget) -> Optional[ValidationIssue]:
    """Every selected line item must have an effective price above zero.

    The message names how many selected items are unpriced, e.g.
    "3 selected line items have no price. Set a price or deselect them."
    """
    unpriced = sum(
        1
        for item in budget.line_items
        if item.is_selected and get_line_item_price(item) <= Decimal("0")
    )
    if unpriced == 0:
        return None

    plural = unpriced > 1
    message = (
        f"{unpriced} selected line item{'s have' if plural else ' has'} no price. "
        f"Set a price or deselect {'them' if plural else 'it'}."
    )
    return ValidationIssue(ITEM_PRICES_REQUIRED, message)


def check_schedule(budget: Budget) -> Optional[ValidationIssue]:
    """A schedule template must have been chosen."""
    if budget.schedule_id is None:
        return ValidationIssue(
            SCHEDULE_REQUIRED, "A schedule template must be selected."
        )
    return None


APPROVAL_RULES: List[Callable[[Budget], Optional[ValidationIssue]]] = [
    check_address,
    check_line_items,
    check_selected_items,
    check_item_prices,
    check_schedule,
]


def validate_for_approval(budget: Budget) -> ValidationResult:
    """Validate that a budget is ready to be approved.

    All rules are evaluated (no short-circuit), so the result lists every
    problem in rule order.

    Args:
        budget: Budget to validate

    Returns:
        ValidationResult; valid when no rule failed

    Example:
        >>> result = validate_for_approval(Budget())
        >>> result.error_count
        4
    """
    result = ValidationResult()
    for rule in APPROVAL_RULES:
        issue = rule(budget)
        if issue is not None:
            result.errors.append(issue)

    if not result.is_valid:
        logger.debug(f"{budget.label} failed approval: {result.summary()}")
    return result
