"""Unit tests for CSV output."""

import csv
import io

import pytest

from marketing_budget.models.budget import Budget, BudgetLineItem
from marketing_budget.writers.csv_writer import (
    BUDGET_LIST_COLUMNS,
    LINE_ITEM_COLUMNS,
    budget_line_items_frame,
    budget_line_items_to_csv,
    budget_list_to_csv,
)


@pytest.fixture
def budget():
    """Budget with an overridden, an unpriced and a deselected line."""
    return Budget(
        id=1,
        property_address="12 Main St, Bardon",
        client_name='Pat "PJ" Smith',
        created_at="2026-01-15T09:30:00.000Z",
        updated_at="2026-01-16T09:30:00.000Z",
        line_items=[
            BudgetLineItem(
                service_id=1,
                service_name="Photography",
                variant_name="12 Photos",
                schedule_price=440,
            ).with_override(350),
            BudgetLineItem(service_id=2, variant_id="large"),
            BudgetLineItem(
                service_id=3, service_name="Dusk", schedule_price=165, is_selected=False
            ),
        ],
    )


class TestBudgetListCsv:
    """Test the budget list export."""

    def test_header_only_when_empty(self):
        """Test that no budgets gives just the header row."""
        assert budget_list_to_csv([]) == ",".join(BUDGET_LIST_COLUMNS)

    def test_row_values_and_quoting(self, budget):
        """Test money formatting, blank cells and quoting."""
        lines = budget_list_to_csv([budget]).split("\n")

        assert len(lines) == 2
        assert lines[1] == (
            '"12 Main St, Bardon","Pat ""PJ"" Smith",,draft,standard,2,'
            "350.00,31.82,2026-01-15T09:30:00.000Z,2026-01-16T09:30:00.000Z"
        )

    def test_embedded_newline_is_quoted(self, budget):
        """Test that a value containing a line break stays in one quoted field."""
        budget.property_address = "12 Main\nSt"
        text = budget_list_to_csv([budget])

        assert '"12 Main\nSt"' in text
        rows = list(csv.reader(io.StringIO(text)))
        assert len(rows) == 2
        assert rows[1][0] == "12 Main\nSt"

    def test_no_trailing_newline(self, budget):
        """Test that output ends without a line separator."""
        assert not budget_list_to_csv([budget]).endswith("\n")


class TestLineItemCsv:
    """Test the line item export of a single budget."""

    def test_columns(self, budget):
        """Test the header row."""
        frame = budget_line_items_frame(budget)
        assert list(frame.columns) == LINE_ITEM_COLUMNS
        assert len(frame) == 3

    def test_rows(self, budget):
        """Test cells for overridden, unpriced and deselected lines."""
        lines = budget_line_items_to_csv(budget).split("\n")

        assert lines[0] == ",".join(LINE_ITEM_COLUMNS)
        assert lines[1] == "Photography,12 Photos,Yes,440.00,350.00,350.00,Yes"
        assert lines[2] == "Service #2,large,Yes,,,0.00,No"
        assert lines[3] == "Dusk,,No,165.00,,165.00,No"
