"""Audit loggers for budget and reference data changes."""

import logging
from typing import List, Optional, Protocol

from marketing_budget.models.audit import AuditEntityType, AuditEntry

logger = logging.getLogger(__name__)


class AuditLogger(Protocol):
    """Destination for audit entries."""

    def log(self, entry: AuditEntry) -> AuditEntry: ...

    def get_by_entity(
        self, entity_type: AuditEntityType, entity_id: int
    ) -> List[AuditEntry]: ...

    def get_all(self, limit: Optional[int] = None) -> List[AuditEntry]: ...

    def clear(self) -> None: ...


class InMemoryAuditLogger:
    """Keeps audit entries in memory; queries return newest first."""

    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []

    def log(self, entry: AuditEntry) -> AuditEntry:
        stored = entry.model_copy(update={"id": len(self._entries) + 1})
        self._entries.append(stored)
        return stored

    def get_by_entity(
        self, entity_type: AuditEntityType, entity_id: int
    ) -> List[AuditEntry]:
        return [
            entry
            for entry in reversed(self._entries)
            if entry.entity_type == entity_type and entry.entity_id == entity_id
        ]

    def get_all(self, limit: Optional[int] = None) -> List[AuditEntry]:
        entries = list(reversed(self._entries))
        return entries[:limit] if limit is not None else entries

    def clear(self) -> None:
        self._entries.clear()


class LoggingAuditLogger(InMemoryAuditLogger):
    """In-memory audit logger that also writes each entry to the log.

    Entries go to the ``marketing_budget.audit`` logger at INFO with the
    entry's fields attached as structured extras, so the JSON log format
    carries them as separate keys.
    """

    def __init__(self, audit_logger: Optional[logging.Logger] = None) -> None:
        super().__init__()
        self._logger = audit_logger or logging.getLogger("marketing_budget.audit")

    def log(self, entry: AuditEntry) -> AuditEntry:
        stored = super().log(entry)
        self._logger.info(
            f"{stored.user} {stored.action.value} {stored.entity_type.value} "
            f"'{stored.entity_label}': {stored.summary}",
            extra={
                "audit_user": stored.user,
                "audit_action": stored.action.value,
                "entity_type": stored.entity_type.value,
                "entity_id": stored.entity_id,
            },
        )
        return stored
