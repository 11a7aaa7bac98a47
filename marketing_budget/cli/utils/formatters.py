"""Output formatting utilities for CLI."""

from decimal import Decimal
from typing import List, Sequence

import click

from marketing_budget.calculators.budget_calculator import format_currency


def format_success(message: str) -> str:
    """Format a success message in bold green."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message in bold red."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message in bold yellow."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message in blue."""
    return click.style(f"ℹ {message}", fg="blue")


def format_money(amount: Decimal) -> str:
    """Format a GST-inclusive amount for display, e.g. ``$1,234.50``.

    Args:
        amount: Amount to format

    Returns:
        Dollar amount with thousands separators and two decimals
    """
    rounded = Decimal(format_currency(amount))
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_table(
    headers: Sequence[str], rows: List[Sequence[str]], max_width: int = 40
) -> str:
    """Format data as a boxed text table.

    Args:
        headers: Column headers
        rows: Data rows (each row is a sequence of cell values)
        max_width: Maximum width of each column; longer cells are truncated

    Returns:
        Formatted table as a string (empty string when there are no headers)
    """
    if not headers:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], len(str(cell)))
    widths = [min(w, max_width) for w in widths]

    def render(cells: Sequence[str]) -> str:
        padded = [
            f" {str(cell)[: widths[i]]:<{widths[i]}} "
            for i, cell in enumerate(cells[: len(widths)])
        ]
        return "|" + "|".join(padded) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)
    return "\n".join(lines)
