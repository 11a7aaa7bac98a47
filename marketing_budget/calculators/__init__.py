"""Calculator modules for marketing budget pricing."""

from marketing_budget.calculators.budget_calculator import (
    BudgetSummary,
    calculate_budget_summary,
    calculate_gst_inclusive,
    calculate_subtotal,
    format_currency,
    round_currency,
)
from marketing_budget.calculators.price_resolver import (
    ScheduleResolution,
    apply_schedule,
    build_line_items_from_schedule,
    create_default_budget,
    get_effective_price,
    get_line_item_price,
    resolve_line_items,
)
from marketing_budget.calculators.variant_resolver import (
    PricingContext,
    get_service_variant,
    get_variant_price,
    has_auto_variants,
    has_selectable_variants,
    resolve_variant,
)

__all__ = [
    # budget_calculator
    "BudgetSummary",
    "calculate_budget_summary",
    "calculate_gst_inclusive",
    "calculate_subtotal",
    "format_currency",
    "round_currency",
    # price_resolver
    "ScheduleResolution",
    "apply_schedule",
    "build_line_items_from_schedule",
    "create_default_budget",
    "get_effective_price",
    "get_line_item_price",
    "resolve_line_items",
    # variant_resolver
    "PricingContext",
    "get_service_variant",
    "get_variant_price",
    "has_auto_variants",
    "has_selectable_variants",
    "resolve_variant",
]
