"""Budget totals and GST calculations.

All catalogue prices are GST-inclusive at the fixed Australian rate of 10%,
so the GST component of a GST-inclusive amount is one eleventh of it.
Amounts are kept at full Decimal precision; rounding to cents only happens
when an amount is formatted for display or CSV output.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List

from marketing_budget.calculators.price_resolver import get_line_item_price
from marketing_budget.models.budget import BudgetLineItem

GST_DIVISOR = Decimal("11")
CENTS = Decimal("0.01")


@dataclass
class BudgetSummary:
    """Totals for a budget's line items.

    Attributes:
        subtotal: Sum of selected effective prices (GST-inclusive)
        gst: GST component of the subtotal (subtotal / 11, unrounded)
        total: GST-inclusive total (equal to subtotal)
        selected_count: Number of selected line items
        total_count: Number of line items

    Example:
        >>> summary = BudgetSummary(
        ...     subtotal=Decimal("550"),
        ...     gst=Decimal("50"),
        ...     total=Decimal("550"),
        ...     selected_count=2,
        ...     total_count=3,
        ... )
        >>> summary.total
        Decimal('550')
    """

    subtotal: Decimal
    gst: Decimal
    total: Decimal
    selected_count: int
    total_count: int


def calculate_gst_inclusive(total: Decimal) -> Decimal:
    """Calculate the GST component of a GST-inclusive amount.

    Args:
        total: GST-inclusive amount

    Returns:
        GST component (total / 11), unrounded

    Example:
        >>> calculate_gst_inclusive(Decimal("110"))
        Decimal('10')
    """
    return total / GST_DIVISOR


def calculate_subtotal(line_items: Iterable[BudgetLineItem]) -> Decimal:
    """Sum the effective prices of the selected line items."""
    return sum(
        (get_line_item_price(item) for item in line_items if item.is_selected),
        Decimal("0"),
    )


def calculate_budget_summary(line_items: List[BudgetLineItem]) -> BudgetSummary:
    """Calculate totals for a list of line items.

    Only selected lines count toward the subtotal. The function is pure and
    idempotent: calling it twice on the same items gives equal summaries.

    Args:
        line_items: Budget line items

    Returns:
        BudgetSummary with subtotal, GST component, total and counts

    Example:
        >>> items = [
        ...     BudgetLineItem(service_id=1, schedule_price=500),
        ...     BudgetLineItem(service_id=2, schedule_price=200, is_selected=False),
        ... ]
        >>> calculate_budget_summary(items).subtotal
        Decimal('500')
    """
    subtotal = calculate_subtotal(line_items)
    return BudgetSummary(
        subtotal=subtotal,
        gst=calculate_gst_inclusive(subtotal),
        total=subtotal,
        selected_count=sum(1 for item in line_items if item.is_selected),
        total_count=len(line_items),
    )


def round_currency(amount: Decimal) -> Decimal:
    """Round an amount to cents (half up) for display."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal) -> str:
    """Format an amount as a two-decimal string (e.g. ``"45.45"``)."""
    return f"{round_currency(amount):.2f}"
