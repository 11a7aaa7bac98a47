"""Closed enumerations shared across the marketing budget models.

Values match the strings stored in export documents, so members compare
equal to their raw string form.
"""

from enum import Enum


class ServiceCategory(str, Enum):
    """Category a marketing service belongs to."""

    PHOTOGRAPHY = "photography"
    FLOOR_PLANS = "floorPlans"
    AERIAL = "aerial"
    VIDEO = "video"
    VIRTUAL_STAGING = "virtualStaging"
    INTERNET = "internet"
    LEGAL = "legal"
    PRINT = "print"
    SIGNAGE = "signage"
    OTHER = "other"


class VariantSelector(str, Enum):
    """How the priced variant of a service is chosen.

    ``MANUAL`` variants are picked by the user; the other selectors are
    resolved automatically from the budget's property context.
    """

    MANUAL = "manual"
    PROPERTY_SIZE = "propertySize"
    SUBURB_TIER = "suburbTier"


class PropertyType(str, Enum):
    """Property type classification."""

    HOUSE = "house"
    UNIT = "unit"
    TOWNHOUSE = "townhouse"
    LAND = "land"
    RURAL = "rural"
    COMMERCIAL = "commercial"


class PropertySize(str, Enum):
    """Property size classification."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class PricingTier(str, Enum):
    """Suburb pricing tier (internet listing tiers)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"


class BudgetTier(str, Enum):
    """Schedule / budget tier level."""

    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"


class BudgetStatus(str, Enum):
    """Lifecycle status of a budget."""

    DRAFT = "draft"
    APPROVED = "approved"
    SENT = "sent"
    ARCHIVED = "archived"
