"""Aggregation modules for budget dashboards and comparisons."""

from marketing_budget.aggregators.budget_comparison import (
    ComparisonRow,
    compare_budgets,
)
from marketing_budget.aggregators.dashboard_aggregator import (
    DashboardSnapshot,
    MonthlySpend,
    SpendSummary,
    build_dashboard,
    count_budgets_by_status,
    monthly_spend_trend,
    overall_spend_summary,
    total_spend_by_category,
    total_spend_by_tier,
)

__all__ = [
    "ComparisonRow",
    "DashboardSnapshot",
    "MonthlySpend",
    "SpendSummary",
    "build_dashboard",
    "compare_budgets",
    "count_budgets_by_status",
    "monthly_spend_trend",
    "overall_spend_summary",
    "total_spend_by_category",
    "total_spend_by_tier",
]
