"""Audit trail data models.

Each entry records who changed which entity, when, and JSON snapshots of the
entity before and after the change.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from marketing_budget.models.base import BaseDataModel
from marketing_budget.utils.time_utils import utc_now_iso


class AuditEntityType(str, Enum):
    """Entity types that can be audited."""

    BUDGET = "budget"
    VENDOR = "vendor"
    SERVICE = "service"
    SUBURB = "suburb"
    SCHEDULE = "schedule"


class AuditAction(str, Enum):
    """Actions that create an audit entry."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    STATUS_CHANGE = "statusChange"
    IMPORT = "import"
    SEED = "seed"


class AuditEntry(BaseDataModel):
    """A single audit log entry.

    ``before`` is None for creates; ``after`` is None for deletes.
    """

    id: Optional[int] = None
    timestamp: str = Field(default_factory=utc_now_iso)
    user: str
    entity_type: AuditEntityType
    entity_id: Optional[int] = None
    entity_label: str
    action: AuditAction
    summary: str = ""
    before: Optional[str] = None
    after: Optional[str] = None
