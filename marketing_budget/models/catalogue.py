"""Catalogue data models: the reference data budgets are priced from.

This module defines Vendor, Service (with its ServiceVariants), Suburb and
Schedule. They are shared reference data: budgets refer to them by id and
never own them.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from marketing_budget.models.base import BaseDataModel, Money
from marketing_budget.models.enums import (
    BudgetTier,
    PricingTier,
    PropertySize,
    PropertyType,
    ServiceCategory,
    VariantSelector,
)


def _not_blank(v: str, field_name: str) -> str:
    if not v or not v.strip():
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v.strip()


class Vendor(BaseDataModel):
    """A marketing services vendor (e.g. Mountford Media).

    Attributes:
        id: Repository identity (None until saved)
        name: Display name
        short_code: Optional abbreviation (e.g. "MM")
        contact_email: Optional contact email
        contact_phone: Optional contact phone
        is_active: 1 = active, 0 = soft-deleted
    """

    id: Optional[int] = None
    name: str = Field(..., min_length=1, description="Vendor display name")
    short_code: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    is_active: int = Field(default=1, ge=0, le=1)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str, info) -> str:
        """Validate that the name is not empty or whitespace only."""
        return _not_blank(v, info.field_name)


class IncludedService(BaseDataModel):
    """A service bundled into a package variant (e.g. a floor plan)."""

    service_id: int
    service_name: str
    variant_id: Optional[str] = None
    variant_name: Optional[str] = None


class ServiceVariant(BaseDataModel):
    """A priced sub-option of a service (e.g. "8 Photos", "Tier A Suburbs").

    Attributes:
        id: Variant identifier, unique within its service
        name: Display name
        base_price: GST-inclusive price
        size_match: PropertySize this variant is chosen for (propertySize selector)
        tier_match: PricingTier this variant is chosen for (suburbTier selector)
        included_services: Services bundled into this variant
    """

    id: str = Field(..., min_length=1)
    name: str
    base_price: Money = Field(default=Decimal("0"), ge=0)
    size_match: Optional[PropertySize] = None
    tier_match: Optional[PricingTier] = None
    included_services: Optional[List[IncludedService]] = None


class Service(BaseDataModel):
    """A marketing service offered by a vendor or available system-wide.

    A service without a ``variant_selector`` has a single implicit price.
    When a selector is set the service must carry at least one variant.

    Example:
        >>> service = Service(
        ...     name="Dusk Photography",
        ...     category=ServiceCategory.PHOTOGRAPHY,
        ...     variants=[
        ...         ServiceVariant(id="default", name="Standard", base_price=165)
        ...     ],
        ... )
        >>> service.base_price
        Decimal('165')
    """

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    category: ServiceCategory = ServiceCategory.OTHER
    vendor_id: Optional[int] = None
    variant_selector: Optional[VariantSelector] = None
    variants: List[ServiceVariant] = Field(default_factory=list)
    includes_gst: bool = True
    is_active: int = Field(default=1, ge=0, le=1)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str, info) -> str:
        """Validate that the name is not empty or whitespace only."""
        return _not_blank(v, info.field_name)

    @model_validator(mode="after")
    def validate_variants_for_selector(self) -> "Service":
        """A service with a variant selector must have variants to choose from.

        Raises:
            ValueError: If a selector is set but the variant list is empty
        """
        if self.variant_selector is not None and not self.variants:
            raise ValueError(
                f"Service '{self.name}' has variant selector "
                f"'{self.variant_selector.value}' but no variants"
            )
        return self

    @property
    def base_price(self) -> Decimal:
        """The single implicit price: first variant's price, or 0."""
        if not self.variants:
            return Decimal("0")
        return self.variants[0].base_price

    def find_variant(self, variant_id: Optional[str]) -> Optional[ServiceVariant]:
        """Look up a variant by id, returning None when absent."""
        if not variant_id:
            return None
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None


class Suburb(BaseDataModel):
    """A suburb with the pricing tier used for internet listing packages."""

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    pricing_tier: PricingTier
    postcode: Optional[str] = None
    state: Optional[str] = None


class ScheduleLineItem(BaseDataModel):
    """A line item within a schedule: service reference plus default variant."""

    service_id: int
    variant_id: Optional[str] = None
    is_selected: bool = True


class Schedule(BaseDataModel):
    """A reusable budget template for a property type / size / tier combination.

    Line item service references are not checked here: a schedule may outlive
    the services it names, and resolution treats such references as unpriced.
    """

    id: Optional[int] = None
    name: str = Field(..., min_length=1)
    property_type: PropertyType
    property_size: PropertySize
    tier: BudgetTier
    default_vendor_id: Optional[int] = None
    line_items: List[ScheduleLineItem] = Field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""
    is_active: int = Field(default=1, ge=0, le=1)
