"""Unit tests for dashboard aggregation."""

from decimal import Decimal

import pytest

from marketing_budget.aggregators.dashboard_aggregator import (
    build_dashboard,
    count_budgets_by_status,
    monthly_spend_trend,
    overall_spend_summary,
    total_spend_by_category,
    total_spend_by_tier,
)
from marketing_budget.models.budget import Budget, BudgetLineItem
from marketing_budget.models.enums import BudgetStatus, BudgetTier, ServiceCategory


@pytest.fixture
def budgets():
    """Three budgets across two months, tiers and statuses."""
    return [
        Budget(
            id=1,
            tier=BudgetTier.PREMIUM,
            status=BudgetStatus.APPROVED,
            created_at="2026-01-10T08:00:00.000Z",
            line_items=[
                BudgetLineItem(service_id=1, schedule_price=500),
                BudgetLineItem(service_id=2, schedule_price=200),
            ],
        ),
        Budget(
            id=2,
            tier=BudgetTier.BASIC,
            created_at="2026-01-20T08:00:00.000Z",
            line_items=[
                BudgetLineItem(service_id=1, schedule_price=500).with_override(350),
                BudgetLineItem(service_id=3, schedule_price=3699, is_selected=False),
            ],
        ),
        Budget(
            id=3,
            tier=BudgetTier.BASIC,
            status=BudgetStatus.SENT,
            created_at="2026-02-02T08:00:00.000Z",
            line_items=[BudgetLineItem(service_id=77, schedule_price=40)],
        ),
    ]


class TestStatusCounts:
    """Test counting budgets by status."""

    def test_empty_has_every_status(self):
        """Test that an empty collection gives zero for every status."""
        counts = count_budgets_by_status([])
        assert counts == {status: 0 for status in BudgetStatus}

    def test_counts(self, budgets):
        """Test counts per status."""
        counts = count_budgets_by_status(budgets)
        assert counts[BudgetStatus.DRAFT] == 1
        assert counts[BudgetStatus.APPROVED] == 1
        assert counts[BudgetStatus.SENT] == 1
        assert counts[BudgetStatus.ARCHIVED] == 0


class TestSpend:
    """Test spend rollups."""

    def test_by_category(self, budgets, sample_services):
        """Test that unknown services count as other."""
        totals = total_spend_by_category(budgets, sample_services)

        assert totals[ServiceCategory.PHOTOGRAPHY] == Decimal("850")
        assert totals[ServiceCategory.FLOOR_PLANS] == Decimal("200")
        assert totals[ServiceCategory.INTERNET] == Decimal("0")
        assert totals[ServiceCategory.OTHER] == Decimal("40")

    def test_by_tier(self, budgets):
        """Test spend per budget tier."""
        totals = total_spend_by_tier(budgets)
        assert totals[BudgetTier.PREMIUM] == Decimal("700")
        assert totals[BudgetTier.BASIC] == Decimal("390")
        assert totals[BudgetTier.STANDARD] == Decimal("0")

    def test_monthly_trend(self, budgets):
        """Test spend per creation month, oldest first."""
        trend = monthly_spend_trend(budgets)

        assert [m.month for m in trend] == ["2026-01", "2026-02"]
        assert trend[0].total == Decimal("1050")
        assert trend[0].count == 2
        assert trend[1].total == Decimal("40")

    def test_summary(self, budgets):
        """Test total and average spend."""
        summary = overall_spend_summary(budgets)
        assert summary.total_budgets == 3
        assert summary.total_spend == Decimal("1090")
        assert summary.average_spend == Decimal("1090") / 3

    def test_empty_spend_breakdowns(self):
        """Test that no budgets give zero-filled maps and an empty trend."""
        assert total_spend_by_category([], []) == {
            category: Decimal("0") for category in ServiceCategory
        }
        assert total_spend_by_tier([]) == {tier: Decimal("0") for tier in BudgetTier}
        assert monthly_spend_trend([]) == []

    def test_empty_summary(self):
        """Test that no budgets average to zero."""
        summary = overall_spend_summary([])
        assert summary.total_spend == Decimal("0")
        assert summary.average_spend == Decimal("0")

    def test_build_dashboard(self, budgets, sample_services):
        """Test that the snapshot combines every metric."""
        snapshot = build_dashboard(iter(budgets), sample_services)
        assert snapshot.summary.total_budgets == 3
        assert len(snapshot.monthly_trend) == 2
        assert snapshot.status_counts[BudgetStatus.DRAFT] == 1
