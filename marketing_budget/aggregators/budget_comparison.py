"""Side-by-side comparison of two budgets.

Rows are keyed by service id: services from the left budget first (in its
line order), then services only the right budget has.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional

from marketing_budget.calculators.price_resolver import get_line_item_price
from marketing_budget.models.budget import Budget, BudgetLineItem


@dataclass
class ComparisonRow:
    """One service compared across two budgets.

    A price is None when that budget has no line for the service.
    """

    service_id: int
    service_name: str
    left_price: Optional[Decimal]
    right_price: Optional[Decimal]
    left_variant: str
    right_variant: str
    left_selected: bool
    right_selected: bool

    @property
    def difference(self) -> Optional[Decimal]:
        """right_price - left_price, or None when either side is missing."""
        if self.left_price is None or self.right_price is None:
            return None
        return self.right_price - self.left_price


def _variant_label(item: Optional[BudgetLineItem]) -> str:
    if item is None:
        return ""
    return item.variant_name or item.variant_id or ""


def compare_budgets(left: Budget, right: Budget) -> List[ComparisonRow]:
    """Build per-service comparison rows for two budgets.

    Args:
        left: First budget
        right: Second budget

    Returns:
        One ComparisonRow per service present in either budget
    """
    left_items: Dict[int, BudgetLineItem] = {}
    right_items: Dict[int, BudgetLineItem] = {}
    service_ids: List[int] = []

    sides = ((left_items, left.line_items), (right_items, right.line_items))
    for by_service, line_items in sides:
        for item in line_items:
            by_service[item.service_id] = item
            if item.service_id not in service_ids:
                service_ids.append(item.service_id)

    rows = []
    for service_id in service_ids:
        l_item = left_items.get(service_id)
        r_item = right_items.get(service_id)
        name = (
            (l_item and l_item.service_name)
            or (r_item and r_item.service_name)
            or f"Service #{service_id}"
        )
        rows.append(
            ComparisonRow(
                service_id=service_id,
                service_name=name,
                left_price=get_line_item_price(l_item) if l_item else None,
                right_price=get_line_item_price(r_item) if r_item else None,
                left_variant=_variant_label(l_item),
                right_variant=_variant_label(r_item),
                left_selected=l_item.is_selected if l_item else False,
                right_selected=r_item.is_selected if r_item else False,
            )
        )
    return rows
