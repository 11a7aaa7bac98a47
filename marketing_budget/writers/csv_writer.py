"""CSV output for budget lists and budget line items.

Each export is first built as a DataFrame of display strings (money as
two-decimal strings, missing prices as blank cells) and then written as CSV
with a header row, comma delimiters, ``\\n`` line separators and minimal
RFC-4180 quoting. The returned text has no trailing newline.
"""

from decimal import Decimal
from typing import Iterable, List, Optional

import pandas as pd

from marketing_budget.calculators.budget_calculator import (
    calculate_budget_summary,
    format_currency,
)
from marketing_budget.calculators.price_resolver import get_line_item_price
from marketing_budget.models.budget import Budget, BudgetLineItem

BUDGET_LIST_COLUMNS = [
    "Address",
    "Client",
    "Agent",
    "Status",
    "Tier",
    "Selected Items",
    "Subtotal (inc GST)",
    "GST Component",
    "Created",
    "Updated",
]

LINE_ITEM_COLUMNS = [
    "Service",
    "Variant",
    "Selected",
    "Schedule Price",
    "Override Price",
    "Effective Price",
    "Overridden",
]


def _optional_price(amount: Optional[Decimal]) -> str:
    return format_currency(amount) if amount is not None else ""


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def frame_to_csv(frame: pd.DataFrame) -> str:
    """Write a DataFrame of strings as CSV text without a trailing newline."""
    return frame.to_csv(index=False, lineterminator="\n").rstrip("\n")


def budget_list_frame(budgets: Iterable[Budget]) -> pd.DataFrame:
    """Build the budget list table: one row per budget with its totals.

    Args:
        budgets: Budgets to list

    Returns:
        DataFrame with the BUDGET_LIST_COLUMNS columns
    """
    rows = []
    for budget in budgets:
        summary = calculate_budget_summary(budget.line_items)
        rows.append(
            [
                budget.property_address,
                budget.client_name or "",
                budget.agent_name or "",
                budget.status.value,
                budget.tier.value,
                str(summary.selected_count),
                format_currency(summary.subtotal),
                format_currency(summary.gst),
                budget.created_at,
                budget.updated_at,
            ]
        )
    return pd.DataFrame(rows, columns=BUDGET_LIST_COLUMNS, dtype=object)


def line_item_row(item: BudgetLineItem) -> List[str]:
    """Display cells for one line item, in LINE_ITEM_COLUMNS order."""
    return [
        item.service_name or f"Service #{item.service_id}",
        item.variant_name or item.variant_id or "",
        _yes_no(item.is_selected),
        _optional_price(item.schedule_price),
        _optional_price(item.override_price),
        format_currency(get_line_item_price(item)),
        _yes_no(item.is_overridden),
    ]


def budget_line_items_frame(budget: Budget) -> pd.DataFrame:
    """Build the line item table of a single budget."""
    rows = [line_item_row(item) for item in budget.line_items]
    return pd.DataFrame(rows, columns=LINE_ITEM_COLUMNS, dtype=object)


def budget_list_to_csv(budgets: Iterable[Budget]) -> str:
    """Render a list of budgets as CSV, one row per budget.

    Example:
        >>> budget_list_to_csv([]).splitlines()[0].split(",")[:3]
        ['Address', 'Client', 'Agent']
    """
    return frame_to_csv(budget_list_frame(budgets))


def budget_line_items_to_csv(budget: Budget) -> str:
    """Render a budget's line items as CSV."""
    return frame_to_csv(budget_line_items_frame(budget))
