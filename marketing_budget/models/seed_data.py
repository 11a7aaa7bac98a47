"""Seed reference data for a fresh marketing budget store.

Provides the default vendors, services, suburbs and schedules used to
bootstrap an empty repository. No budgets are seeded.
"""

from typing import Dict, List, Optional, Tuple

from marketing_budget.models.catalogue import (
    IncludedService,
    Schedule,
    ScheduleLineItem,
    Service,
    ServiceVariant,
    Suburb,
    Vendor,
)
from marketing_budget.models.enums import (
    BudgetTier,
    PricingTier,
    PropertySize,
    PropertyType,
    ServiceCategory,
    VariantSelector,
)
from marketing_budget.models.export import ExportEntityType

SEED_TIMESTAMP = "2026-01-01T00:00:00.000Z"


def _variant(
    variant_id: str,
    name: str,
    price: int,
    size: Optional[PropertySize] = None,
    tier: Optional[PricingTier] = None,
) -> ServiceVariant:
    return ServiceVariant(
        id=variant_id, name=name, base_price=price, size_match=size, tier_match=tier
    )


def _single(price: int, name: str = "Standard") -> List[ServiceVariant]:
    return [_variant("default", name, price)]


def _vendors() -> List[Vendor]:
    return [
        Vendor(id=1, name="Mountford Media", short_code="MM"),
        Vendor(id=2, name="Urban Angles", short_code="UA"),
    ]


def _size_variants(small: int, medium: int, large: int) -> List[ServiceVariant]:
    return [
        _variant("small", "Small (< 150m²)", small, size=PropertySize.SMALL),
        _variant("medium", "Medium (150-250m²)", medium, size=PropertySize.MEDIUM),
        _variant("large", "Large (> 250m²)", large, size=PropertySize.LARGE),
    ]


def _tier_variants(a: int, b: int, c: int, d: int) -> List[ServiceVariant]:
    return [
        _variant("tier-a", "Tier A Suburbs", a, tier=PricingTier.A),
        _variant("tier-b", "Tier B Suburbs", b, tier=PricingTier.B),
        _variant("tier-c", "Tier C Suburbs", c, tier=PricingTier.C),
        _variant("tier-d", "Tier D Suburbs", d, tier=PricingTier.D),
    ]


def _photo_variants(prices: Tuple[int, int, int, int]) -> List[ServiceVariant]:
    counts = (4, 8, 12, 16)
    return [
        _variant(f"{count}-photos", f"{count} Photos", price)
        for count, price in zip(counts, prices)
    ]


def _services() -> List[Service]:
    mountford_photos = _photo_variants((220, 330, 440, 550))
    package = _variant("package-12", "12 Photos + Floor Plan", 550)
    package.included_services = [
        IncludedService(
            service_id=2,
            service_name="Floor Plan",
            variant_id="medium",
            variant_name="Medium (150-250m²)",
        )
    ]
    mountford_photos.append(package)

    return [
        Service(
            id=1,
            name="Photography",
            category=ServiceCategory.PHOTOGRAPHY,
            vendor_id=1,
            variant_selector=VariantSelector.MANUAL,
            variants=mountford_photos,
        ),
        Service(
            id=2,
            name="Floor Plan",
            category=ServiceCategory.FLOOR_PLANS,
            vendor_id=1,
            variant_selector=VariantSelector.PROPERTY_SIZE,
            variants=_size_variants(150, 180, 220),
        ),
        Service(
            id=3,
            name="Dusk Photography",
            category=ServiceCategory.PHOTOGRAPHY,
            vendor_id=1,
            variants=_single(165),
        ),
        Service(
            id=4,
            name="Aerial Photography",
            category=ServiceCategory.AERIAL,
            vendor_id=1,
            variant_selector=VariantSelector.MANUAL,
            variants=[
                _variant("3-photos", "3 Photos", 130),
                _variant("5-photos", "5 Photos", 180),
            ],
        ),
        Service(
            id=5,
            name="Video Walk-Through",
            category=ServiceCategory.VIDEO,
            vendor_id=1,
            variants=_single(350),
        ),
        Service(
            id=6,
            name="360° Virtual Tour",
            category=ServiceCategory.VIDEO,
            vendor_id=1,
            variants=_single(165),
        ),
        Service(
            id=7,
            name="Virtual Furniture",
            category=ServiceCategory.VIRTUAL_STAGING,
            vendor_id=1,
            variant_selector=VariantSelector.MANUAL,
            variants=[
                _variant("1-room", "1 Room", 55),
                _variant("2-rooms", "2 Rooms", 99),
                _variant("3-rooms", "3 Rooms", 132),
            ],
        ),
        Service(
            id=8,
            name="Photography",
            category=ServiceCategory.PHOTOGRAPHY,
            vendor_id=2,
            variant_selector=VariantSelector.MANUAL,
            variants=_photo_variants((198, 297, 396, 495)),
        ),
        Service(
            id=9,
            name="Floor Plan",
            category=ServiceCategory.FLOOR_PLANS,
            vendor_id=2,
            variant_selector=VariantSelector.PROPERTY_SIZE,
            variants=_size_variants(140, 170, 200),
        ),
        Service(
            id=10,
            name="REA Premiere",
            category=ServiceCategory.INTERNET,
            variant_selector=VariantSelector.SUBURB_TIER,
            variants=_tier_variants(3699, 3519, 3199, 2929),
        ),
        Service(
            id=11,
            name="REA Highlight",
            category=ServiceCategory.INTERNET,
            variant_selector=VariantSelector.SUBURB_TIER,
            variants=_tier_variants(1759, 1599, 1449, 1299),
        ),
        Service(
            id=12,
            name="Domain",
            category=ServiceCategory.INTERNET,
            variants=_single(349, "Standard Listing"),
        ),
        Service(
            id=13,
            name="Title Search",
            category=ServiceCategory.LEGAL,
            variants=_single(25),
        ),
        Service(
            id=14,
            name="Disclosure Statement",
            category=ServiceCategory.LEGAL,
            variants=_single(35),
        ),
        Service(
            id=15,
            name="Property Brochure",
            category=ServiceCategory.PRINT,
            variant_selector=VariantSelector.MANUAL,
            variants=[
                _variant("dl-50", "DL Flyer (50)", 85),
                _variant("dl-100", "DL Flyer (100)", 120),
                _variant("a4-25", "A4 Brochure (25)", 150),
                _variant("a4-50", "A4 Brochure (50)", 220),
            ],
        ),
    ]


def _suburbs() -> List[Suburb]:
    tiers = [
        ("Bardon", PricingTier.A),
        ("Milton", PricingTier.A),
        ("St Lucia", PricingTier.A),
        ("Auchenflower", PricingTier.A),
        ("Toowong", PricingTier.A),
        ("Indooroopilly", PricingTier.B),
        ("Taringa", PricingTier.B),
        ("Fig Tree Pocket", PricingTier.B),
        ("Chapel Hill", PricingTier.D),
        ("Kenmore", PricingTier.D),
    ]
    return [
        Suburb(id=index, name=name, pricing_tier=tier, state="QLD")
        for index, (name, tier) in enumerate(tiers, start=1)
    ]


def _schedule_items(
    refs: List[Tuple[int, Optional[str]]],
) -> List[ScheduleLineItem]:
    return [
        ScheduleLineItem(service_id=service_id, variant_id=variant_id)
        for service_id, variant_id in refs
    ]


def _schedules() -> List[Schedule]:
    return [
        Schedule(
            id=1,
            name="House - Large - Premium",
            property_type=PropertyType.HOUSE,
            property_size=PropertySize.LARGE,
            tier=BudgetTier.PREMIUM,
            default_vendor_id=1,
            line_items=_schedule_items(
                [
                    (1, "12-photos"),
                    (2, "large"),
                    (3, "default"),
                    (4, "5-photos"),
                    (5, "default"),
                    (10, None),
                ]
            ),
            created_at=SEED_TIMESTAMP,
            updated_at=SEED_TIMESTAMP,
        ),
        Schedule(
            id=2,
            name="House - Medium - Standard",
            property_type=PropertyType.HOUSE,
            property_size=PropertySize.MEDIUM,
            tier=BudgetTier.STANDARD,
            default_vendor_id=1,
            line_items=_schedule_items([(1, "8-photos"), (2, "medium"), (11, None)]),
            created_at=SEED_TIMESTAMP,
            updated_at=SEED_TIMESTAMP,
        ),
        Schedule(
            id=3,
            name="Unit - Small - Basic",
            property_type=PropertyType.UNIT,
            property_size=PropertySize.SMALL,
            tier=BudgetTier.BASIC,
            default_vendor_id=2,
            line_items=_schedule_items(
                [(8, "4-photos"), (9, "small"), (12, "default")]
            ),
            created_at=SEED_TIMESTAMP,
            updated_at=SEED_TIMESTAMP,
        ),
    ]


def get_seed_data() -> Dict[ExportEntityType, list]:
    """Return freshly built seed collections keyed by entity type.

    Every call builds new model instances, so callers may mutate the result
    without affecting later calls.

    Returns:
        Mapping of vendors, services, suburbs and schedules to their records
    """
    return {
        ExportEntityType.VENDORS: _vendors(),
        ExportEntityType.SERVICES: _services(),
        ExportEntityType.SUBURBS: _suburbs(),
        ExportEntityType.SCHEDULES: _schedules(),
    }


SEED_COUNTS: Dict[ExportEntityType, int] = {
    entity_type: len(records) for entity_type, records in get_seed_data().items()
}
