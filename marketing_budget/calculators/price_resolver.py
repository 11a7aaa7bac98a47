"""Price resolution for budget line items.

This module implements the pricing rules of a budget line:
- Effective price of a line (manual override, else schedule price, else 0)
- Refreshing line item snapshots from the current catalogue
- Seeding a budget's line items from a schedule template
- Creating default budgets

All prices are GST-inclusive Decimals. Functions never mutate their inputs.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from marketing_budget.calculators.variant_resolver import (
    PricingContext,
    get_service_variant,
    get_variant_price,
)
from marketing_budget.models.budget import Budget, BudgetLineItem
from marketing_budget.models.catalogue import Schedule, Service, Suburb
from marketing_budget.models.enums import (
    BudgetStatus,
    BudgetTier,
    PropertySize,
    PropertyType,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass
class ScheduleResolution:
    """Line items seeded from a schedule.

    Attributes:
        line_items: Budget line items, in schedule order
        missing_service_ids: Service ids the schedule references but the
            catalogue does not contain (these lines are priced at zero)
    """

    line_items: List[BudgetLineItem]
    missing_service_ids: List[int] = field(default_factory=list)


def _index_services(services: Iterable[Service]) -> Dict[int, Service]:
    return {service.id: service for service in services if service.id is not None}


def get_line_item_price(line_item: BudgetLineItem) -> Decimal:
    """Get the effective price of a line item from its stored fields.

    Uses the override price when the line is overridden, otherwise the
    schedule price; an unpriced line counts as 0.

    Args:
        line_item: Budget line item

    Returns:
        Effective GST-inclusive price

    Example:
        >>> item = BudgetLineItem(service_id=1, schedule_price=500)
        >>> get_line_item_price(item.with_override(350))
        Decimal('350')
    """
    if line_item.is_overridden and line_item.override_price is not None:
        return line_item.override_price
    if line_item.schedule_price is None:
        return ZERO
    return line_item.schedule_price


def get_effective_price(
    line_item: BudgetLineItem,
    service: Optional[Service] = None,
    context: Optional[PricingContext] = None,
) -> Decimal:
    """Get the effective price of a line item, consulting the catalogue if needed.

    Agrees with ``get_line_item_price`` whenever the line carries a schedule
    price. For an unpriced line the price is looked up from the service's
    resolved variant; without a service the line is worth 0.

    Args:
        line_item: Budget line item
        service: Catalogue service the line refers to, if known
        context: Property context for automatic variant selection

    Returns:
        Effective GST-inclusive price
    """
    if line_item.is_overridden and line_item.override_price is not None:
        return line_item.override_price
    if line_item.schedule_price is not None:
        return line_item.schedule_price
    if service is None:
        return ZERO
    return get_variant_price(service, context, line_item.variant_id)


def resolve_line_items(
    line_items: List[BudgetLineItem],
    services: Iterable[Service],
    context: Optional[PricingContext] = None,
) -> List[BudgetLineItem]:
    """Refresh line items from the current service catalogue.

    Each line gets the current service name, resolved variant and, unless it
    is overridden, the resolved variant's price as its schedule price. Lines
    referring to services that no longer exist are returned unchanged.

    Args:
        line_items: Line items to refresh
        services: Current service catalogue
        context: Property context for automatic variant selection

    Returns:
        New list of refreshed line items
    """
    by_id = _index_services(services)
    resolved = []
    for line_item in line_items:
        service = by_id.get(line_item.service_id)
        if service is None:
            resolved.append(line_item)
            continue

        variant = get_service_variant(service, context, line_item.variant_id)
        data = line_item.model_dump()
        data["service_name"] = service.name
        data["variant_id"] = variant.id if variant else line_item.variant_id
        data["variant_name"] = variant.name if variant else None
        if not line_item.is_overridden:
            data["schedule_price"] = variant.base_price if variant else ZERO
        resolved.append(BudgetLineItem(**data))
    return resolved


def build_line_items_from_schedule(
    schedule: Schedule,
    services: Iterable[Service],
    context: Optional[PricingContext] = None,
) -> ScheduleResolution:
    """Seed budget line items from a schedule template.

    Variants resolve in the usual order (the schedule's variant id, then the
    property context, then the first variant). Schedule lines pointing at
    unknown services are kept, priced at zero and reported.

    Args:
        schedule: Schedule to expand
        services: Current service catalogue
        context: Property context for automatic variant selection

    Returns:
        ScheduleResolution with the new line items and any missing service ids
    """
    by_id = _index_services(services)
    line_items = []
    missing = []

    for schedule_item in schedule.line_items:
        service = by_id.get(schedule_item.service_id)
        if service is None:
            missing.append(schedule_item.service_id)
            line_items.append(
                BudgetLineItem(
                    service_id=schedule_item.service_id,
                    variant_id=schedule_item.variant_id,
                    is_selected=schedule_item.is_selected,
                    schedule_price=ZERO,
                )
            )
            continue

        variant = get_service_variant(service, context, schedule_item.variant_id)
        line_items.append(
            BudgetLineItem(
                service_id=schedule_item.service_id,
                service_name=service.name,
                variant_id=variant.id if variant else schedule_item.variant_id,
                variant_name=variant.name if variant else None,
                is_selected=schedule_item.is_selected,
                schedule_price=variant.base_price if variant else ZERO,
            )
        )

    if missing:
        logger.warning(
            f"Schedule '{schedule.name}' references unknown services: "
            f"{', '.join(str(service_id) for service_id in missing)}"
        )

    return ScheduleResolution(line_items=line_items, missing_service_ids=missing)


def create_default_budget(vendor_id: Optional[int] = None) -> Budget:
    """Create an empty draft budget with default property values.

    Args:
        vendor_id: Optional default vendor

    Returns:
        A new draft Budget (house, medium, standard tier, no line items)
    """
    return Budget(
        property_address="",
        property_type=PropertyType.HOUSE,
        property_size=PropertySize.MEDIUM,
        tier=BudgetTier.STANDARD,
        vendor_id=vendor_id,
        status=BudgetStatus.DRAFT,
    )


def apply_schedule(
    budget: Budget,
    schedule: Optional[Schedule],
    services: Iterable[Service],
    suburbs: Iterable[Suburb] = (),
) -> Budget:
    """Apply a schedule template to a copy of a budget.

    The copy takes the schedule's property type, size and tier, its default
    vendor (when set), and line items seeded from the schedule. The suburb
    pricing tier comes from the budget's suburb. Passing no schedule clears
    the schedule reference and the line items.

    Args:
        budget: Budget to start from (left unchanged)
        schedule: Schedule to apply, or None to start from scratch
        services: Current service catalogue
        suburbs: Known suburbs, used to look up the pricing tier

    Returns:
        Updated copy of the budget
    """
    updated = budget.model_copy(deep=True)

    if schedule is None:
        updated.schedule_id = None
        updated.schedule_name = None
        updated.line_items = []
        return updated

    suburb_tier = None
    for suburb in suburbs:
        if suburb.id == budget.suburb_id:
            suburb_tier = suburb.pricing_tier
            break

    context = PricingContext(
        property_size=schedule.property_size, suburb_tier=suburb_tier
    )
    resolution = build_line_items_from_schedule(schedule, services, context)

    updated.schedule_id = schedule.id
    updated.schedule_name = schedule.name
    updated.property_type = schedule.property_type
    updated.property_size = schedule.property_size
    updated.tier = schedule.tier
    if schedule.default_vendor_id:
        updated.vendor_id = schedule.default_vendor_id
    updated.line_items = resolution.line_items

    logger.debug(
        f"Applied schedule '{schedule.name}' to {budget.label}: "
        f"{len(resolution.line_items)} line items"
    )
    return updated
