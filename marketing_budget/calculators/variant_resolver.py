"""Variant resolution for catalogue services.

Chooses which priced variant of a service applies to a budget, either from
an explicit user selection or automatically from the property context
(property size or suburb pricing tier).
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from marketing_budget.models.catalogue import Service, ServiceVariant
from marketing_budget.models.enums import PricingTier, PropertySize, VariantSelector


@dataclass
class PricingContext:
    """Property context used for automatic variant selection.

    Attributes:
        property_size: Size of the property being marketed, if known
        suburb_tier: Pricing tier of the property's suburb, if known

    Example:
        >>> context = PricingContext(property_size=PropertySize.LARGE)
        >>> context.suburb_tier is None
        True
    """

    property_size: Optional[PropertySize] = None
    suburb_tier: Optional[PricingTier] = None


def resolve_variant(
    service: Service, context: Optional[PricingContext] = None
) -> Optional[ServiceVariant]:
    """Resolve the automatically selected variant of a service.

    Services without a selector have a single implicit price and manual
    selectors have no context mapping; both return None. An auto selector
    whose context value matches no variant is a soft miss and also returns
    None.

    Args:
        service: Service to resolve
        context: Property context (size and suburb tier)

    Returns:
        The matching variant, or None

    Example:
        >>> floor_plan = Service(
        ...     name="Floor Plan",
        ...     variant_selector=VariantSelector.PROPERTY_SIZE,
        ...     variants=[
        ...         ServiceVariant(id="small", name="Small", base_price=150,
        ...                        size_match=PropertySize.SMALL),
        ...     ],
        ... )
        >>> resolve_variant(floor_plan, PricingContext(PropertySize.SMALL)).id
        'small'
    """
    if service.variant_selector is None or context is None:
        return None

    if service.variant_selector == VariantSelector.PROPERTY_SIZE:
        if context.property_size is None:
            return None
        for variant in service.variants:
            if variant.size_match == context.property_size:
                return variant
        return None

    if service.variant_selector == VariantSelector.SUBURB_TIER:
        if context.suburb_tier is None:
            return None
        for variant in service.variants:
            if variant.tier_match == context.suburb_tier:
                return variant
        return None

    # Manual selection
    return None


def has_selectable_variants(service: Service) -> bool:
    """Whether the user chooses between several variants (manual selector)."""
    return (
        service.variant_selector == VariantSelector.MANUAL
        and len(service.variants) > 1
    )


def has_auto_variants(service: Service) -> bool:
    """Whether several variants exist and one is picked from context."""
    return (
        service.variant_selector is not None
        and service.variant_selector != VariantSelector.MANUAL
        and len(service.variants) > 1
    )


def get_service_variant(
    service: Service,
    context: Optional[PricingContext] = None,
    selected_variant_id: Optional[str] = None,
) -> Optional[ServiceVariant]:
    """Get the variant that prices a service for a budget line.

    Resolution order:
    1. The explicitly selected variant, when it exists on the service
    2. The variant chosen automatically from the property context
    3. The first variant, for services without an auto selector

    Args:
        service: Service to price
        context: Property context for automatic selection
        selected_variant_id: Variant id chosen by the user, if any

    Returns:
        The resolved variant, or None when nothing applies
    """
    explicit = service.find_variant(selected_variant_id)
    if explicit is not None:
        return explicit

    auto = resolve_variant(service, context)
    if auto is not None:
        return auto

    if service.variants and (
        service.variant_selector is None
        or service.variant_selector == VariantSelector.MANUAL
    ):
        return service.variants[0]

    return None


def get_variant_price(
    service: Service,
    context: Optional[PricingContext] = None,
    selected_variant_id: Optional[str] = None,
) -> Decimal:
    """Get the GST-inclusive price of the resolved variant, or 0."""
    variant = get_service_variant(service, context, selected_variant_id)
    if variant is None:
        return Decimal("0")
    return variant.base_price
