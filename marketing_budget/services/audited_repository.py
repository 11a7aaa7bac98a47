"""Audit decorator for budget repositories.

Wraps any repository: reads are delegated unchanged, and every write is
delegated and then recorded through an audit logger, with JSON snapshots of
the record before and after.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from marketing_budget.models.audit import AuditAction, AuditEntityType, AuditEntry
from marketing_budget.models.base import BaseDataModel
from marketing_budget.models.budget import Budget
from marketing_budget.models.catalogue import Schedule, Service, Suburb, Vendor
from marketing_budget.models.enums import BudgetStatus
from marketing_budget.services.audit_logger import AuditLogger
from marketing_budget.services.repository import BudgetRepository
from marketing_budget.utils.diff_changes import diff_changes, summarise_changes

logger = logging.getLogger(__name__)


def _snapshot(record: Optional[BaseDataModel]) -> Optional[str]:
    if record is None:
        return None
    return json.dumps(record.to_document(), ensure_ascii=False)


def _document(record: Optional[BaseDataModel]) -> Dict[str, Any]:
    return record.to_document() if record is not None else {}


class AuditedBudgetRepository:
    """Repository decorator that records an audit entry for every write.

    Saves are logged as ``create`` when the record did not exist before and
    as ``update`` otherwise; budget saves that change the status are logged
    as ``statusChange``.

    Example:
        >>> audit = InMemoryAuditLogger()
        >>> repository = AuditedBudgetRepository(
        ...     InMemoryBudgetRepository(), audit, user_name="jane"
        ... )
        >>> repository.save_vendor(Vendor(name="Urban Angles")).id
        1
        >>> audit.get_all()[0].action
        <AuditAction.CREATE: 'create'>
    """

    def __init__(
        self, inner: BudgetRepository, audit_logger: AuditLogger, user_name: str
    ):
        self.inner = inner
        self.audit_logger = audit_logger
        self.user_name = user_name

    def _log(
        self,
        entity_type: AuditEntityType,
        entity_id: Optional[int],
        entity_label: str,
        action: AuditAction,
        summary: str,
        before: Optional[BaseDataModel],
        after: Optional[BaseDataModel],
    ) -> None:
        self.audit_logger.log(
            AuditEntry(
                user=self.user_name,
                entity_type=entity_type,
                entity_id=entity_id,
                entity_label=entity_label,
                action=action,
                summary=summary,
                before=_snapshot(before),
                after=_snapshot(after),
            )
        )

    def _log_save(
        self,
        entity_type: AuditEntityType,
        label: str,
        before: Optional[BaseDataModel],
        saved: Any,
    ) -> None:
        noun = entity_type.value
        if before is None:
            action = AuditAction.CREATE
            summary = f'Created {noun} "{label}"'
        else:
            action = AuditAction.UPDATE
            summary = summarise_changes(
                f'Updated {noun} "{label}"',
                diff_changes(_document(before), _document(saved)),
            )
        self._log(entity_type, saved.id, label, action, summary, before, saved)

    # Vendors

    def get_vendors(self) -> List[Vendor]:
        return self.inner.get_vendors()

    def get_vendor(self, vendor_id: int) -> Optional[Vendor]:
        return self.inner.get_vendor(vendor_id)

    def save_vendor(self, vendor: Vendor) -> Vendor:
        before = self.inner.get_vendor(vendor.id) if vendor.id is not None else None
        saved = self.inner.save_vendor(vendor)
        self._log_save(AuditEntityType.VENDOR, saved.name, before, saved)
        return saved

    # Services

    def get_services(self) -> List[Service]:
        return self.inner.get_services()

    def get_service(self, service_id: int) -> Optional[Service]:
        return self.inner.get_service(service_id)

    def save_service(self, service: Service) -> Service:
        before = (
            self.inner.get_service(service.id) if service.id is not None else None
        )
        saved = self.inner.save_service(service)
        self._log_save(AuditEntityType.SERVICE, saved.name, before, saved)
        return saved

    # Suburbs

    def get_suburbs(self) -> List[Suburb]:
        return self.inner.get_suburbs()

    def get_suburb(self, suburb_id: int) -> Optional[Suburb]:
        return self.inner.get_suburb(suburb_id)

    def save_suburb(self, suburb: Suburb) -> Suburb:
        before = self.inner.get_suburb(suburb.id) if suburb.id is not None else None
        saved = self.inner.save_suburb(suburb)
        self._log_save(AuditEntityType.SUBURB, saved.name, before, saved)
        return saved

    # Schedules

    def get_schedules(self) -> List[Schedule]:
        return self.inner.get_schedules()

    def get_schedule(self, schedule_id: int) -> Optional[Schedule]:
        return self.inner.get_schedule(schedule_id)

    def save_schedule(self, schedule: Schedule) -> Schedule:
        before = (
            self.inner.get_schedule(schedule.id) if schedule.id is not None else None
        )
        saved = self.inner.save_schedule(schedule)
        self._log_save(AuditEntityType.SCHEDULE, saved.name, before, saved)
        return saved

    # Budgets

    def get_budgets(self, status: Optional[BudgetStatus] = None) -> List[Budget]:
        return self.inner.get_budgets(status)

    def get_budget(self, budget_id: int) -> Optional[Budget]:
        return self.inner.get_budget(budget_id)

    def save_budget(self, budget: Budget) -> Budget:
        before = self.inner.get_budget(budget.id) if budget.id is not None else None
        saved = self.inner.save_budget(budget)

        if before is not None and before.status != saved.status:
            self._log(
                AuditEntityType.BUDGET,
                saved.id,
                saved.label,
                AuditAction.STATUS_CHANGE,
                f'Status changed from "{before.status.value}" to '
                f'"{saved.status.value}"',
                before,
                saved,
            )
        else:
            self._log_save(AuditEntityType.BUDGET, saved.label, before, saved)
        return saved

    def delete_budget(self, budget_id: int) -> None:
        before = self.inner.get_budget(budget_id)
        self.inner.delete_budget(budget_id)
        label = before.label if before is not None else f"#{budget_id}"
        self._log(
            AuditEntityType.BUDGET,
            budget_id,
            label,
            AuditAction.DELETE,
            f'Deleted budget "{label}"',
            before,
            None,
        )

    def record_bulk(self, action: AuditAction, label: str, summary: str) -> None:
        """Record a bulk operation (seed or import) that has no single record."""
        self._log(AuditEntityType.BUDGET, None, label, action, summary, None, None)
