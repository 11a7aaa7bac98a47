"""Writers for CSV output of budgets and line items."""

from marketing_budget.writers.csv_writer import (
    BUDGET_LIST_COLUMNS,
    LINE_ITEM_COLUMNS,
    budget_line_items_frame,
    budget_line_items_to_csv,
    budget_list_frame,
    budget_list_to_csv,
)

__all__ = [
    "BUDGET_LIST_COLUMNS",
    "LINE_ITEM_COLUMNS",
    "budget_line_items_frame",
    "budget_line_items_to_csv",
    "budget_list_frame",
    "budget_list_to_csv",
]
