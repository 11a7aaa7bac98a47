"""Budget status lifecycle."""

from marketing_budget.lifecycle.state_machine import (
    STATUS_TRANSITIONS,
    BudgetLifecycle,
    TransitionResult,
    allowed_transitions,
    duplicate_budget,
    is_transition_allowed,
    validate_transition,
)

__all__ = [
    "STATUS_TRANSITIONS",
    "BudgetLifecycle",
    "TransitionResult",
    "allowed_transitions",
    "duplicate_budget",
    "is_transition_allowed",
    "validate_transition",
]
