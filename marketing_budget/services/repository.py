"""Budget repository interface and in-memory implementation.

The engine never persists anything itself: callers pass a repository in.
Saves are upserts keyed on ``id``; a record without an id is inserted and
receives the next free id.
"""

import logging
from typing import Callable, Dict, Generic, List, Optional, Protocol, TypeVar

from marketing_budget.models.budget import Budget
from marketing_budget.models.catalogue import Schedule, Service, Suburb, Vendor
from marketing_budget.models.enums import BudgetStatus
from marketing_budget.utils.time_utils import utc_now_iso

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Vendor, Service, Suburb, Schedule, Budget)


class BudgetRepository(Protocol):
    """Storage for catalogue reference data and budgets."""

    def get_vendors(self) -> List[Vendor]: ...

    def get_vendor(self, vendor_id: int) -> Optional[Vendor]: ...

    def save_vendor(self, vendor: Vendor) -> Vendor: ...

    def get_services(self) -> List[Service]: ...

    def get_service(self, service_id: int) -> Optional[Service]: ...

    def save_service(self, service: Service) -> Service: ...

    def get_suburbs(self) -> List[Suburb]: ...

    def get_suburb(self, suburb_id: int) -> Optional[Suburb]: ...

    def save_suburb(self, suburb: Suburb) -> Suburb: ...

    def get_schedules(self) -> List[Schedule]: ...

    def get_schedule(self, schedule_id: int) -> Optional[Schedule]: ...

    def save_schedule(self, schedule: Schedule) -> Schedule: ...

    def get_budgets(self, status: Optional[BudgetStatus] = None) -> List[Budget]: ...

    def get_budget(self, budget_id: int) -> Optional[Budget]: ...

    def save_budget(self, budget: Budget) -> Budget: ...

    def delete_budget(self, budget_id: int) -> None: ...


class _Table(Generic[RecordT]):
    """Id-keyed record store that hands out copies, never its own objects."""

    def __init__(self) -> None:
        self._records: Dict[int, RecordT] = {}

    def all(self) -> List[RecordT]:
        return [
            self._records[key].model_copy(deep=True) for key in sorted(self._records)
        ]

    def get(self, record_id: int) -> Optional[RecordT]:
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    def save(self, record: RecordT) -> RecordT:
        stored = record.model_copy(deep=True)
        if stored.id is None:
            stored.id = max(self._records, default=0) + 1
        self._records[stored.id] = stored
        return stored.model_copy(deep=True)

    def delete(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None

    def clear(self) -> None:
        self._records.clear()

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __len__(self) -> int:
        return len(self._records)


class InMemoryBudgetRepository:
    """Repository that keeps every record in memory.

    Records are copied on the way in and out, so callers can mutate what
    they get back without changing the stored data. Updating an existing
    budget stamps its ``updated_at`` from the clock.

    Example:
        >>> repository = InMemoryBudgetRepository()
        >>> saved = repository.save_vendor(Vendor(name="Mountford Media"))
        >>> saved.id
        1
    """

    def __init__(self, clock: Callable[[], str] = utc_now_iso) -> None:
        self._clock = clock
        self._vendors: _Table[Vendor] = _Table()
        self._services: _Table[Service] = _Table()
        self._suburbs: _Table[Suburb] = _Table()
        self._schedules: _Table[Schedule] = _Table()
        self._budgets: _Table[Budget] = _Table()

    def _changed(self) -> None:
        """Hook called after every write."""

    # Vendors

    def get_vendors(self) -> List[Vendor]:
        return self._vendors.all()

    def get_vendor(self, vendor_id: int) -> Optional[Vendor]:
        return self._vendors.get(vendor_id)

    def save_vendor(self, vendor: Vendor) -> Vendor:
        saved = self._vendors.save(vendor)
        logger.debug(f"Saved vendor #{saved.id} ({saved.name})")
        self._changed()
        return saved

    # Services

    def get_services(self) -> List[Service]:
        return self._services.all()

    def get_service(self, service_id: int) -> Optional[Service]:
        return self._services.get(service_id)

    def save_service(self, service: Service) -> Service:
        saved = self._services.save(service)
        logger.debug(f"Saved service #{saved.id} ({saved.name})")
        self._changed()
        return saved

    # Suburbs

    def get_suburbs(self) -> List[Suburb]:
        return self._suburbs.all()

    def get_suburb(self, suburb_id: int) -> Optional[Suburb]:
        return self._suburbs.get(suburb_id)

    def save_suburb(self, suburb: Suburb) -> Suburb:
        saved = self._suburbs.save(suburb)
        logger.debug(f"Saved suburb #{saved.id} ({saved.name})")
        self._changed()
        return saved

    # Schedules

    def get_schedules(self) -> List[Schedule]:
        return self._schedules.all()

    def get_schedule(self, schedule_id: int) -> Optional[Schedule]:
        return self._schedules.get(schedule_id)

    def save_schedule(self, schedule: Schedule) -> Schedule:
        saved = self._schedules.save(schedule)
        logger.debug(f"Saved schedule #{saved.id} ({saved.name})")
        self._changed()
        return saved

    # Budgets

    def get_budgets(self, status: Optional[BudgetStatus] = None) -> List[Budget]:
        budgets = self._budgets.all()
        if status is None:
            return budgets
        wanted = BudgetStatus(status)
        return [budget for budget in budgets if budget.status == wanted]

    def get_budget(self, budget_id: int) -> Optional[Budget]:
        return self._budgets.get(budget_id)

    def save_budget(self, budget: Budget) -> Budget:
        if budget.id is not None and budget.id in self._budgets:
            budget = budget.model_copy(update={"updated_at": self._clock()})
        saved = self._budgets.save(budget)
        logger.debug(f"Saved budget #{saved.id} ({saved.label})")
        self._changed()
        return saved

    def delete_budget(self, budget_id: int) -> None:
        if self._budgets.delete(budget_id):
            logger.debug(f"Deleted budget #{budget_id}")
            self._changed()

    def clear_all(self) -> None:
        """Remove every record from every collection."""
        self._clear_tables()
        self._changed()

    def _clear_tables(self) -> None:
        for table in (
            self._vendors,
            self._services,
            self._suburbs,
            self._schedules,
            self._budgets,
        ):
            table.clear()
