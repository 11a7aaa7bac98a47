"""Dashboard aggregation over budget collections.

Pure rollups used by the dashboard: budget counts by status, spend by
service category, by tier and by month, and an overall summary. Spend is the
sum of the effective prices of selected line items. Every function accepts
an empty collection.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List

from marketing_budget.calculators.budget_calculator import calculate_subtotal
from marketing_budget.calculators.price_resolver import get_line_item_price
from marketing_budget.models.budget import Budget
from marketing_budget.models.catalogue import Service
from marketing_budget.models.enums import BudgetStatus, BudgetTier, ServiceCategory
from marketing_budget.utils.time_utils import month_key

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass
class MonthlySpend:
    """Spend for one calendar month of budget creation.

    Attributes:
        month: Month key, e.g. "2026-01"
        total: Selected spend of budgets created that month
        count: Number of budgets created that month
    """

    month: str
    total: Decimal
    count: int


@dataclass
class SpendSummary:
    """Overall spend across all budgets.

    Attributes:
        total_budgets: Number of budgets
        total_spend: Selected spend summed over all budgets
        average_spend: total_spend / total_budgets, 0 when there are none
    """

    total_budgets: int
    total_spend: Decimal
    average_spend: Decimal


@dataclass
class DashboardSnapshot:
    """All dashboard metrics computed from one budget collection."""

    status_counts: Dict[BudgetStatus, int]
    spend_by_category: Dict[ServiceCategory, Decimal]
    spend_by_tier: Dict[BudgetTier, Decimal]
    monthly_trend: List[MonthlySpend]
    summary: SpendSummary


def count_budgets_by_status(budgets: Iterable[Budget]) -> Dict[BudgetStatus, int]:
    """Count budgets per lifecycle status; every status is present.

    Example:
        >>> count_budgets_by_status([])[BudgetStatus.DRAFT]
        0
    """
    counts = {status: 0 for status in BudgetStatus}
    for budget in budgets:
        counts[BudgetStatus(budget.status)] += 1
    return counts


def total_spend_by_category(
    budgets: Iterable[Budget], services: Iterable[Service]
) -> Dict[ServiceCategory, Decimal]:
    """Total selected spend per service category.

    Line items whose service is not in the catalogue count as ``other``.

    Args:
        budgets: Budgets to aggregate
        services: Service catalogue used to map service ids to categories

    Returns:
        Mapping with an entry for every category
    """
    category_map = {
        service.id: service.category for service in services if service.id is not None
    }
    totals = {category: ZERO for category in ServiceCategory}

    for budget in budgets:
        for item in budget.line_items:
            if not item.is_selected:
                continue
            category = category_map.get(item.service_id, ServiceCategory.OTHER)
            totals[category] += get_line_item_price(item)

    return totals


def total_spend_by_tier(budgets: Iterable[Budget]) -> Dict[BudgetTier, Decimal]:
    """Total selected spend per budget tier; every tier is present."""
    totals = {tier: ZERO for tier in BudgetTier}
    for budget in budgets:
        totals[BudgetTier(budget.tier)] += calculate_subtotal(budget.line_items)
    return totals


def monthly_spend_trend(budgets: Iterable[Budget]) -> List[MonthlySpend]:
    """Spend per month of budget creation, oldest month first.

    The month is the ``YYYY-MM`` prefix of each budget's ``created_at``.
    """
    totals: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    counts: Dict[str, int] = defaultdict(int)

    for budget in budgets:
        month = month_key(budget.created_at)
        totals[month] += calculate_subtotal(budget.line_items)
        counts[month] += 1

    return [
        MonthlySpend(month=month, total=totals[month], count=counts[month])
        for month in sorted(totals)
    ]


def overall_spend_summary(budgets: Iterable[Budget]) -> SpendSummary:
    """Total and average selected spend across all budgets."""
    budgets = list(budgets)
    total_spend = sum(
        (calculate_subtotal(budget.line_items) for budget in budgets), ZERO
    )
    average = total_spend / len(budgets) if budgets else ZERO
    return SpendSummary(
        total_budgets=len(budgets),
        total_spend=total_spend,
        average_spend=average,
    )


def build_dashboard(
    budgets: Iterable[Budget], services: Iterable[Service]
) -> DashboardSnapshot:
    """Compute every dashboard metric for a budget collection."""
    budgets = list(budgets)
    services = list(services)
    snapshot = DashboardSnapshot(
        status_counts=count_budgets_by_status(budgets),
        spend_by_category=total_spend_by_category(budgets, services),
        spend_by_tier=total_spend_by_tier(budgets),
        monthly_trend=monthly_spend_trend(budgets),
        summary=overall_spend_summary(budgets),
    )
    logger.debug(
        f"Dashboard built for {snapshot.summary.total_budgets} budgets, "
        f"total spend {snapshot.summary.total_spend}"
    )
    return snapshot
