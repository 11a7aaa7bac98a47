"""Budget data models.

This module defines the Budget aggregate root together with the line items it
embeds, and the user-saved BudgetTemplate snapshots derived from budgets.
"""

from typing import Any, List, Optional

from pydantic import Field, model_validator

from marketing_budget.models.base import BaseDataModel, Money
from marketing_budget.models.enums import (
    BudgetStatus,
    BudgetTier,
    PropertySize,
    PropertyType,
)
from marketing_budget.utils.time_utils import utc_now_iso


class BudgetLineItem(BaseDataModel):
    """A line item in a budget: selection, variant and price override.

    ``service_name`` and ``variant_name`` are snapshots taken when the item
    was priced, so a budget stays readable after the catalogue changes.

    The override flag and price always travel together: ``is_overridden`` is
    True exactly when ``override_price`` is set. Use ``with_override`` and
    ``without_override`` to change both at once.

    Attributes:
        service_id: Referenced service id (may no longer exist)
        service_name: Service name snapshot
        variant_id: Selected variant id, if any
        variant_name: Variant name snapshot
        is_selected: Whether the item counts toward the budget total
        schedule_price: Price from the schedule / variant (None = unpriced)
        override_price: Manually entered price (None = not overridden)
        is_overridden: Whether the override price applies

    Example:
        >>> item = BudgetLineItem(service_id=1, schedule_price=500)
        >>> item.with_override(350).override_price
        Decimal('350')
    """

    service_id: int
    service_name: Optional[str] = None
    variant_id: Optional[str] = None
    variant_name: Optional[str] = None
    is_selected: bool = True
    schedule_price: Optional[Money] = Field(default=None, ge=0)
    override_price: Optional[Money] = Field(default=None, ge=0)
    is_overridden: bool = False

    @model_validator(mode="after")
    def validate_override_consistency(self) -> "BudgetLineItem":
        """Validate that the override flag matches the override price.

        Raises:
            ValueError: If is_overridden disagrees with override_price
        """
        if self.is_overridden != (self.override_price is not None):
            raise ValueError(
                f"is_overridden ({self.is_overridden}) must be True exactly when "
                f"override_price is set (got {self.override_price})"
            )
        return self

    def with_override(self, price: Any) -> "BudgetLineItem":
        """Return a copy with a manual override price applied."""
        data = self.model_dump()
        data.update(override_price=price, is_overridden=True)
        return BudgetLineItem(**data)

    def without_override(self) -> "BudgetLineItem":
        """Return a copy with any manual override removed."""
        data = self.model_dump()
        data.update(override_price=None, is_overridden=False)
        return BudgetLineItem(**data)


class Budget(BaseDataModel):
    """A property marketing budget, the aggregate root of the engine.

    The budget exclusively owns its line items; vendors, suburbs, schedules
    and services are referenced by id only.
    """

    id: Optional[int] = None
    property_address: str = ""
    property_type: PropertyType = PropertyType.HOUSE
    property_size: PropertySize = PropertySize.MEDIUM
    tier: BudgetTier = BudgetTier.STANDARD
    suburb_id: Optional[int] = None
    vendor_id: Optional[int] = None
    schedule_id: Optional[int] = None
    schedule_name: Optional[str] = None
    line_items: List[BudgetLineItem] = Field(default_factory=list)
    notes: Optional[str] = None
    client_name: Optional[str] = None
    agent_name: Optional[str] = None
    status: BudgetStatus = BudgetStatus.DRAFT
    created_at: str = Field(default_factory=utc_now_iso)
    updated_at: str = Field(default_factory=utc_now_iso)

    @property
    def label(self) -> str:
        """Human-readable label used in logs and audit entries."""
        return self.property_address.strip() or f"Budget #{self.id}"


class BudgetTemplateLineItem(BaseDataModel):
    """A line item snapshot within a saved budget template."""

    service_id: int
    service_name: Optional[str] = None
    variant_id: Optional[str] = None
    variant_name: Optional[str] = None
    is_selected: bool = True
    saved_price: Optional[Money] = None
    override_price: Optional[Money] = Field(default=None, ge=0)
    is_overridden: bool = False


class BudgetTemplate(BaseDataModel):
    """A user-saved budget template, created from an existing budget."""

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    property_type: Optional[PropertyType] = None
    property_size: Optional[PropertySize] = None
    tier: Optional[BudgetTier] = None
    source_schedule_id: Optional[int] = None
    line_items: List[BudgetTemplateLineItem] = Field(default_factory=list)
    created_at: str = Field(default_factory=utc_now_iso)
    updated_at: str = Field(default_factory=utc_now_iso)
