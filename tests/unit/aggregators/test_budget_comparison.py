"""Unit tests for budget comparison."""

from decimal import Decimal

from marketing_budget.aggregators.budget_comparison import compare_budgets
from marketing_budget.models.budget import Budget, BudgetLineItem


class TestCompareBudgets:
    """Test side-by-side comparison rows."""

    def test_rows_per_service(self):
        """Test shared, left-only and right-only services."""
        left = Budget(
            line_items=[
                BudgetLineItem(
                    service_id=1, service_name="Photography", schedule_price=500
                ),
                BudgetLineItem(
                    service_id=2, service_name="Floor Plan", schedule_price=200
                ),
            ]
        )
        right = Budget(
            line_items=[
                BudgetLineItem(
                    service_id=1, service_name="Photography", schedule_price=500
                ).with_override(350),
                BudgetLineItem(service_id=5, variant_id="default", schedule_price=350),
            ]
        )

        rows = compare_budgets(left, right)

        assert [row.service_id for row in rows] == [1, 2, 5]
        assert rows[0].difference == Decimal("-150")
        assert rows[1].right_price is None
        assert rows[1].difference is None
        assert rows[2].service_name == "Service #5"
        assert rows[2].right_variant == "default"
        assert rows[2].left_selected is False

    def test_empty_budgets(self):
        """Test comparing two empty budgets."""
        assert compare_budgets(Budget(), Budget()) == []
