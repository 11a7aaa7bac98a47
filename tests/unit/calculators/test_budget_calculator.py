"""Unit tests for budget totals and GST."""

from decimal import Decimal

import pytest

from marketing_budget.calculators.budget_calculator import (
    calculate_budget_summary,
    calculate_gst_inclusive,
    calculate_subtotal,
    format_currency,
    round_currency,
)
from marketing_budget.models.budget import BudgetLineItem


@pytest.fixture
def line_items():
    """Photography 500 and floor plan 200 selected, aerial 180 not selected."""
    return [
        BudgetLineItem(service_id=1, schedule_price=500),
        BudgetLineItem(service_id=2, schedule_price=200),
        BudgetLineItem(service_id=3, schedule_price=180, is_selected=False),
    ]


class TestGst:
    """Test GST extraction from GST-inclusive amounts."""

    def test_one_eleventh(self):
        """Test that GST is one eleventh of the inclusive amount."""
        assert calculate_gst_inclusive(Decimal("110")) == Decimal("10")

    def test_unrounded(self):
        """Test that GST keeps full precision until display."""
        gst = calculate_gst_inclusive(Decimal("700"))
        assert gst == Decimal("700") / Decimal("11")
        assert format_currency(gst) == "63.64"

    def test_zero(self):
        """Test GST of nothing."""
        assert calculate_gst_inclusive(Decimal("0")) == Decimal("0")


class TestBudgetSummary:
    """Test budget summary calculation."""

    def test_selected_lines_only(self, line_items):
        """Test that unselected lines are excluded from the subtotal."""
        summary = calculate_budget_summary(line_items)

        assert summary.subtotal == Decimal("700")
        assert summary.total == summary.subtotal
        assert summary.selected_count == 2
        assert summary.total_count == 3

    def test_override_changes_total(self, line_items):
        """Test that an override of 350 on the 500 line gives 550."""
        line_items[0] = line_items[0].with_override(350)
        summary = calculate_budget_summary(line_items)

        assert summary.subtotal == Decimal("550")
        assert summary.gst == Decimal("50")

    def test_empty(self):
        """Test the summary of no line items."""
        summary = calculate_budget_summary([])
        assert summary.subtotal == Decimal("0")
        assert summary.gst == Decimal("0")
        assert summary.total_count == 0

    def test_idempotent(self, line_items):
        """Test that repeated calls agree."""
        assert calculate_budget_summary(line_items) == calculate_budget_summary(
            line_items
        )

    def test_subtotal_helper(self, line_items):
        """Test the subtotal helper on its own."""
        assert calculate_subtotal(line_items) == Decimal("700")

    def test_gst_identity_with_deselected_line(self):
        """Test 500 selected and 200 deselected: GST stays exactly 500/11."""
        items = [
            BudgetLineItem(service_id=1, schedule_price=500),
            BudgetLineItem(service_id=2, schedule_price=200, is_selected=False),
        ]
        summary = calculate_budget_summary(items)

        assert summary.subtotal == Decimal("500")
        assert summary.gst == Decimal("500") / Decimal("11")
        assert str(summary.gst).startswith("45.4545454545")
        assert abs(summary.gst * 11 - summary.subtotal) < Decimal("1e-20")
        assert format_currency(summary.gst) == "45.45"


class TestRounding:
    """Test display rounding."""

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("0.005"), Decimal("0.01")),
            (Decimal("2.675"), Decimal("2.68")),
            (Decimal("-1.005"), Decimal("-1.01")),
            (Decimal("10"), Decimal("10.00")),
        ],
    )
    def test_round_half_up(self, amount, expected):
        """Test half-up rounding to cents."""
        assert round_currency(amount) == expected

    def test_format_currency(self):
        """Test the two-decimal string form."""
        assert format_currency(Decimal("1234.5")) == "1234.50"
