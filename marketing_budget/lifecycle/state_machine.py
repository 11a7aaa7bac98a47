"""Budget lifecycle state machine.

Budgets move through draft -> approved -> sent -> archived, with approved
budgets revertible to draft. The allowed edges live in a single table that
maps each (from, to) pair to the validator admitting it, or None when the
edge is unconditional. Only draft -> approved is gated, by the approval
rules.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from marketing_budget.exceptions import InvalidTransitionError, PermissionDeniedError
from marketing_budget.models.budget import Budget
from marketing_budget.models.enums import BudgetStatus
from marketing_budget.models.permissions import UserRole, can_transition_budget
from marketing_budget.utils.time_utils import utc_now_iso
from marketing_budget.validators.budget_validators import validate_for_approval
from marketing_budget.validators.validation_result import ValidationResult

logger = logging.getLogger(__name__)

AdmissionValidator = Callable[[Budget], ValidationResult]

STATUS_TRANSITIONS: Dict[
    Tuple[BudgetStatus, BudgetStatus], Optional[AdmissionValidator]
] = {
    (BudgetStatus.DRAFT, BudgetStatus.APPROVED): validate_for_approval,
    (BudgetStatus.APPROVED, BudgetStatus.SENT): None,
    (BudgetStatus.APPROVED, BudgetStatus.DRAFT): None,
    (BudgetStatus.SENT, BudgetStatus.ARCHIVED): None,
}


def allowed_transitions(status: BudgetStatus) -> List[BudgetStatus]:
    """Statuses reachable from the given status, in table order.

    Example:
        >>> allowed_transitions(BudgetStatus.APPROVED)
        [<BudgetStatus.SENT: 'sent'>, <BudgetStatus.DRAFT: 'draft'>]
    """
    status = BudgetStatus(status)
    return [to for (frm, to) in STATUS_TRANSITIONS if frm == status]


def is_transition_allowed(from_status: BudgetStatus, to_status: BudgetStatus) -> bool:
    """Whether the edge from_status -> to_status exists in the table."""
    return (BudgetStatus(from_status), BudgetStatus(to_status)) in STATUS_TRANSITIONS


def validate_transition(
    budget: Budget, from_status: BudgetStatus, to_status: BudgetStatus
) -> ValidationResult:
    """Run the admission validator of a transition.

    Unconditional edges (and edges missing from the table, which the
    lifecycle driver rejects separately) return a passing result.

    Args:
        budget: Budget being transitioned
        from_status: Current status
        to_status: Requested status

    Returns:
        ValidationResult of the edge's validator
    """
    validator = STATUS_TRANSITIONS.get(
        (BudgetStatus(from_status), BudgetStatus(to_status))
    )
    if validator is None:
        return ValidationResult()
    return validator(budget)


@dataclass
class TransitionResult:
    """Outcome of a requested status transition.

    Attributes:
        budget: The budget (mutated in place when applied)
        from_status: Status before the request
        to_status: Requested status
        validation: Result of the edge's admission validator
        applied: Whether the status was changed
    """

    budget: Budget
    from_status: BudgetStatus
    to_status: BudgetStatus
    validation: ValidationResult

    @property
    def applied(self) -> bool:
        return self.validation.is_valid


class BudgetLifecycle:
    """Drives budget status transitions.

    Edges not in the transition table raise ``InvalidTransitionError``. When
    a role is given, roles without transition rights raise
    ``PermissionDeniedError``. A failing validation leaves the budget
    untouched; a successful transition changes ``status`` and
    ``updated_at`` only.

    Example:
        >>> lifecycle = BudgetLifecycle(role=UserRole.ADMIN)
        >>> budget = Budget(status=BudgetStatus.SENT)
        >>> lifecycle.transition(budget, BudgetStatus.ARCHIVED).applied
        True
        >>> budget.status
        <BudgetStatus.ARCHIVED: 'archived'>
    """

    def __init__(
        self,
        role: Optional[UserRole] = None,
        clock: Callable[[], str] = utc_now_iso,
    ):
        """Initialize the lifecycle driver.

        Args:
            role: Acting user's role; None skips the permission check
            clock: Returns the ISO-8601 timestamp written to updated_at
        """
        self.role = role
        self.clock = clock

    def transition(self, budget: Budget, to_status: BudgetStatus) -> TransitionResult:
        """Move a budget to a new status.

        Args:
            budget: Budget to transition (mutated only on success)
            to_status: Requested status

        Returns:
            TransitionResult carrying the validation outcome

        Raises:
            PermissionDeniedError: If the role may not perform transitions
            InvalidTransitionError: If the edge is not in the transition table
        """
        to_status = BudgetStatus(to_status)
        from_status = BudgetStatus(budget.status)

        if self.role is not None and not can_transition_budget(self.role):
            raise PermissionDeniedError(self.role.value, "change budget status")

        if not is_transition_allowed(from_status, to_status):
            raise InvalidTransitionError(from_status.value, to_status.value)

        validation = validate_transition(budget, from_status, to_status)
        result = TransitionResult(
            budget=budget,
            from_status=from_status,
            to_status=to_status,
            validation=validation,
        )

        if not validation.is_valid:
            logger.info(
                f"Transition of {budget.label} from {from_status.value} to "
                f"{to_status.value} rejected: {validation.summary()}"
            )
            return result

        budget.status = to_status
        budget.updated_at = self.clock()
        logger.info(
            f"{budget.label} moved from {from_status.value} to {to_status.value}"
        )
        return result


def duplicate_budget(budget: Budget, now: Optional[str] = None) -> Budget:
    """Create a new draft copy of a budget.

    The copy has no identity, " (copy)" appended to the address, draft
    status and fresh timestamps. Line items are copied as they are.

    Args:
        budget: Budget to duplicate
        now: Timestamp for created_at/updated_at (defaults to the current time)

    Returns:
        New, unsaved Budget
    """
    timestamp = now or utc_now_iso()
    data = budget.model_dump()
    data.update(
        id=None,
        property_address=f"{budget.property_address} (copy)",
        status=BudgetStatus.DRAFT,
        created_at=timestamp,
        updated_at=timestamp,
    )
    return Budget(**data)
