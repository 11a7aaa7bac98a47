"""CLI commands for the marketing budget engine."""

from marketing_budget.cli.commands.budgets import (
    compare_budgets_command,
    create_budget,
    duplicate_budget_command,
    list_budgets,
    override_price,
    show_budget,
)
from marketing_budget.cli.commands.dashboard import dashboard
from marketing_budget.cli.commands.lifecycle import transition, validate_budget
from marketing_budget.cli.commands.seed import seed
from marketing_budget.cli.commands.transfer import export_csv, export_data, import_data

__all__ = [
    "compare_budgets_command",
    "create_budget",
    "dashboard",
    "duplicate_budget_command",
    "export_csv",
    "export_data",
    "import_data",
    "list_budgets",
    "override_price",
    "seed",
    "show_budget",
    "transition",
    "validate_budget",
]
