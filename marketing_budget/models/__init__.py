"""Data models for the marketing budget engine.

This package contains Pydantic models for all business entities:
- BaseDataModel: Base class with common configuration
- Vendor, Service, ServiceVariant, Suburb, Schedule: catalogue reference data
- Budget, BudgetLineItem: the budget aggregate and its line items
- BudgetTemplate: user-saved budget snapshots
- DataExport: portable export envelope
- AuditEntry: audit trail records
"""

from marketing_budget.models.audit import AuditAction, AuditEntityType, AuditEntry
from marketing_budget.models.base import BaseDataModel, Money, to_decimal
from marketing_budget.models.budget import (
    Budget,
    BudgetLineItem,
    BudgetTemplate,
    BudgetTemplateLineItem,
)
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
    BudgetStatus,
    BudgetTier,
    PricingTier,
    PropertySize,
    PropertyType,
    ServiceCategory,
    VariantSelector,
)
from marketing_budget.models.export import (
    ALL_ENTITY_TYPES,
    DataExport,
    ExportEntityType,
)
from marketing_budget.models.permissions import UserRole

__all__ = [
    "BaseDataModel",
    "Money",
    "to_decimal",
    # catalogue
    "IncludedService",
    "Schedule",
    "ScheduleLineItem",
    "Service",
    "ServiceVariant",
    "Suburb",
    "Vendor",
    # enums
    "BudgetStatus",
    "BudgetTier",
    "PricingTier",
    "PropertySize",
    "PropertyType",
    "ServiceCategory",
    "VariantSelector",
    # budget
    "Budget",
    "BudgetLineItem",
    "BudgetTemplate",
    "BudgetTemplateLineItem",
    # export
    "ALL_ENTITY_TYPES",
    "DataExport",
    "ExportEntityType",
    # audit
    "AuditAction",
    "AuditEntityType",
    "AuditEntry",
    # permissions
    "UserRole",
]
