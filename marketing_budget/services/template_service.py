"""User-saved budget templates.

A template snapshots a budget's line items, with the effective price of each
line at the time it was saved, so the configuration can be reapplied to new
budgets.
"""

import logging
from typing import Dict, List, Optional

from marketing_budget.calculators.price_resolver import get_line_item_price
from marketing_budget.models.budget import (
    Budget,
    BudgetLineItem,
    BudgetTemplate,
    BudgetTemplateLineItem,
)
from marketing_budget.utils.time_utils import utc_now_iso

logger = logging.getLogger(__name__)


def create_template_from_budget(
    budget: Budget, name: str, description: Optional[str] = None
) -> BudgetTemplate:
    """Snapshot a budget's line items as a new, unsaved template.

    Args:
        budget: Source budget
        name: Template name (trimmed, must not be blank)
        description: Optional description (blank is stored as None)

    Returns:
        New BudgetTemplate

    Raises:
        ValueError: If the name is blank
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValueError("Template name is required.")

    now = utc_now_iso()
    return BudgetTemplate(
        name=trimmed,
        description=(description or "").strip() or None,
        property_type=budget.property_type,
        property_size=budget.property_size,
        tier=budget.tier,
        source_schedule_id=budget.schedule_id,
        line_items=[
            BudgetTemplateLineItem(
                service_id=item.service_id,
                service_name=item.service_name,
                variant_id=item.variant_id,
                variant_name=item.variant_name,
                is_selected=item.is_selected,
                saved_price=get_line_item_price(item),
                override_price=item.override_price,
                is_overridden=item.is_overridden,
            )
            for item in budget.line_items
        ],
        created_at=now,
        updated_at=now,
    )


def apply_template(template: BudgetTemplate) -> List[BudgetLineItem]:
    """Turn a template's line items back into budget line items.

    The saved price becomes the schedule price; overrides are preserved.
    """
    return [
        BudgetLineItem(
            service_id=item.service_id,
            service_name=item.service_name,
            variant_id=item.variant_id,
            variant_name=item.variant_name,
            is_selected=item.is_selected,
            schedule_price=item.saved_price,
            override_price=item.override_price if item.is_overridden else None,
            is_overridden=item.is_overridden and item.override_price is not None,
        )
        for item in template.line_items
    ]


class InMemoryTemplateService:
    """Stores budget templates in memory."""

    def __init__(self) -> None:
        self._templates: Dict[int, BudgetTemplate] = {}

    def get_templates(self) -> List[BudgetTemplate]:
        """All templates, most recently created first."""
        ordered = sorted(
            self._templates.values(),
            key=lambda t: (t.created_at, t.id or 0),
            reverse=True,
        )
        return [template.model_copy(deep=True) for template in ordered]

    def get_template(self, template_id: int) -> Optional[BudgetTemplate]:
        template = self._templates.get(template_id)
        return template.model_copy(deep=True) if template is not None else None

    def save_template(self, template: BudgetTemplate) -> BudgetTemplate:
        """Create or update a template."""
        stored = template.model_copy(deep=True)
        if stored.id is None:
            stored.id = max(self._templates, default=0) + 1
        else:
            stored.updated_at = utc_now_iso()
        self._templates[stored.id] = stored
        logger.debug(f"Saved template #{stored.id} ({stored.name})")
        return stored.model_copy(deep=True)

    def delete_template(self, template_id: int) -> None:
        self._templates.pop(template_id, None)
