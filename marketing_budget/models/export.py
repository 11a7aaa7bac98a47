"""Portable data export envelope.

A DataExport carries any subset of the entity collections. A collection that
was not exported is ``None`` and is left out of the serialised document, which
is different from an exported-but-empty list.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from marketing_budget.models.base import BaseDataModel
from marketing_budget.models.budget import Budget
from marketing_budget.models.catalogue import Schedule, Service, Suburb, Vendor

EXPORT_VERSION = "1.0"


class ExportEntityType(str, Enum):
    """Entity collections available for selective export/import."""

    VENDORS = "vendors"
    SERVICES = "services"
    SUBURBS = "suburbs"
    SCHEDULES = "schedules"
    BUDGETS = "budgets"


# Canonical order used for exports, summaries and imports
ALL_ENTITY_TYPES: List[ExportEntityType] = list(ExportEntityType)


class DataExport(BaseDataModel):
    """Versioned envelope for a full or selective data export.

    Attributes:
        export_version: Document format version ("1.0")
        export_date: ISO-8601 timestamp of the export
        app_version: Free-form version of the exporting application
        vendors: Exported vendors, or None when not exported
        services: Exported services, or None when not exported
        suburbs: Exported suburbs, or None when not exported
        schedules: Exported schedules, or None when not exported
        budgets: Exported budgets, or None when not exported
    """

    export_version: str = EXPORT_VERSION
    export_date: str
    app_version: str
    vendors: Optional[List[Vendor]] = None
    services: Optional[List[Service]] = None
    suburbs: Optional[List[Suburb]] = None
    schedules: Optional[List[Schedule]] = None
    budgets: Optional[List[Budget]] = None

    def collection(self, entity_type: ExportEntityType) -> Optional[List[Any]]:
        """Return the collection for an entity type (None when not exported)."""
        return getattr(self, entity_type.value)

    def to_document(self) -> Dict[str, Any]:
        """Serialise to a JSON-compatible dict, omitting unexported collections."""
        document: Dict[str, Any] = {
            "exportVersion": self.export_version,
            "exportDate": self.export_date,
            "appVersion": self.app_version,
        }
        for entity_type in ALL_ENTITY_TYPES:
            records = self.collection(entity_type)
            if records is not None:
                document[entity_type.value] = [r.to_document() for r in records]
        return document
