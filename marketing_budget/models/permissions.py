"""Role-based access control for the marketing budget engine.

Three roles:
- viewer: read-only access to all budget data
- editor: create and edit drafts, delete and duplicate budgets
- admin: full access, including every status transition and reference data
"""

from enum import Enum
from typing import Union

from marketing_budget.models.enums import BudgetStatus


class UserRole(str, Enum):
    """User role within the marketing budget application."""

    VIEWER = "viewer"
    EDITOR = "editor"
    ADMIN = "admin"


def can_create_budget(role: UserRole) -> bool:
    """Whether the user can create new budgets."""
    return role in (UserRole.EDITOR, UserRole.ADMIN)


def can_edit_budget(role: UserRole, status: Union[BudgetStatus, str]) -> bool:
    """Whether the user can edit a budget's fields at the given status.

    Editors may only edit drafts; admins may edit at any status.
    """
    if role == UserRole.ADMIN:
        return True
    if role == UserRole.EDITOR:
        return BudgetStatus(status) == BudgetStatus.DRAFT
    return False


def can_delete_budget(role: UserRole) -> bool:
    """Whether the user can delete a budget (any status)."""
    return role in (UserRole.EDITOR, UserRole.ADMIN)


def can_duplicate_budget(role: UserRole) -> bool:
    """Whether the user can duplicate a budget."""
    return role in (UserRole.EDITOR, UserRole.ADMIN)


def can_transition_budget(role: UserRole) -> bool:
    """Whether the user can perform status transitions."""
    return role == UserRole.ADMIN


def can_manage_reference_data(role: UserRole) -> bool:
    """Whether the user can manage vendors, services, suburbs and schedules."""
    return role == UserRole.ADMIN
