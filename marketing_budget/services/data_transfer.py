"""Selective export and additive import of reference data and budgets.

Exports produce a versioned ``DataExport`` envelope carrying only the
requested entity collections. Imports are additive: every record is saved as
a new record (its id is discarded) and existing data is never cleared.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from marketing_budget import __version__
from marketing_budget.exceptions import DataImportError
from marketing_budget.models.base import BaseDataModel
from marketing_budget.models.budget import Budget
from marketing_budget.models.catalogue import Schedule, Service, Suburb, Vendor
from marketing_budget.models.export import (
    ALL_ENTITY_TYPES,
    EXPORT_VERSION,
    DataExport,
    ExportEntityType,
)
from marketing_budget.models.seed_data import get_seed_data
from marketing_budget.services.repository import BudgetRepository
from marketing_budget.utils.time_utils import utc_now_iso

logger = logging.getLogger(__name__)

MODEL_BY_TYPE: Dict[ExportEntityType, type] = {
    ExportEntityType.VENDORS: Vendor,
    ExportEntityType.SERVICES: Service,
    ExportEntityType.SUBURBS: Suburb,
    ExportEntityType.SCHEDULES: Schedule,
    ExportEntityType.BUDGETS: Budget,
}


@dataclass
class ImportSummary:
    """What an export document contains.

    Attributes:
        counts: Number of records per entity type (0 when absent or malformed)
        available_types: Types with at least one record, in canonical order
    """

    counts: Dict[ExportEntityType, int]
    available_types: List[ExportEntityType]

    def count(self, entity_type: ExportEntityType) -> int:
        return self.counts.get(entity_type, 0)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


@dataclass
class ImportResult:
    """Number of records imported per entity type."""

    imported: Dict[ExportEntityType, int] = field(
        default_factory=lambda: {entity_type: 0 for entity_type in ALL_ENTITY_TYPES}
    )

    @property
    def total(self) -> int:
        return sum(self.imported.values())


def _savers(
    repository: BudgetRepository,
) -> Dict[ExportEntityType, Callable[[Any], Any]]:
    return {
        ExportEntityType.VENDORS: repository.save_vendor,
        ExportEntityType.SERVICES: repository.save_service,
        ExportEntityType.SUBURBS: repository.save_suburb,
        ExportEntityType.SCHEDULES: repository.save_schedule,
        ExportEntityType.BUDGETS: repository.save_budget,
    }


def _readers(
    repository: BudgetRepository,
) -> Dict[ExportEntityType, Callable[[], List[Any]]]:
    return {
        ExportEntityType.VENDORS: repository.get_vendors,
        ExportEntityType.SERVICES: repository.get_services,
        ExportEntityType.SUBURBS: repository.get_suburbs,
        ExportEntityType.SCHEDULES: repository.get_schedules,
        ExportEntityType.BUDGETS: repository.get_budgets,
    }


def export_selective(
    repository: BudgetRepository,
    types: Iterable[ExportEntityType],
    app_version: str = __version__,
    export_date: Optional[str] = None,
) -> DataExport:
    """Export the requested entity collections from a repository.

    Args:
        repository: Source repository
        types: Entity types to include; others are left out of the envelope
        app_version: Version recorded in the envelope
        export_date: ISO-8601 timestamp (defaults to now)

    Returns:
        DataExport with only the requested collections set
    """
    requested = {ExportEntityType(t) for t in types}
    readers = _readers(repository)
    collections = {
        entity_type.value: readers[entity_type]()
        for entity_type in ALL_ENTITY_TYPES
        if entity_type in requested
    }

    export = DataExport(
        export_version=EXPORT_VERSION,
        export_date=export_date or utc_now_iso(),
        app_version=app_version,
        **collections,
    )
    exported = ", ".join(
        f"{len(records)} {name}" for name, records in collections.items()
    )
    logger.info(f"Exported {exported or 'nothing'}")
    return export


def analyse_import(document: Any) -> ImportSummary:
    """Summarise the contents of a parsed export document.

    Missing keys and values that are not lists count as zero records. The
    document is never modified and this function never raises.

    Args:
        document: Parsed JSON document (normally a dict)

    Returns:
        ImportSummary with per-type counts and the available types
    """
    if isinstance(document, DataExport):
        document = {
            entity_type.value: document.collection(entity_type)
            for entity_type in ALL_ENTITY_TYPES
        }
    if not isinstance(document, Mapping):
        document = {}

    counts = {}
    for entity_type in ALL_ENTITY_TYPES:
        records = document.get(entity_type.value)
        counts[entity_type] = len(records) if isinstance(records, list) else 0

    return ImportSummary(
        counts=counts,
        available_types=[t for t in ALL_ENTITY_TYPES if counts[t] > 0],
    )


def _as_new_record(entity_type: ExportEntityType, record: Any) -> BaseDataModel:
    model = MODEL_BY_TYPE[entity_type]
    if isinstance(record, BaseDataModel):
        data = record.model_dump()
    else:
        data = dict(record)
        data.pop("id", None)
    data["id"] = None
    return model.model_validate(data)


def import_selective(
    document: Union[DataExport, Mapping[str, Any]],
    types: Iterable[ExportEntityType],
    repository: BudgetRepository,
) -> ImportResult:
    """Import the selected entity types into a repository, additively.

    Types are processed in canonical order and records one at a time. Each
    record is saved as new; references between records are not remapped.
    There is no transaction: on failure the records already saved stay
    saved.

    Args:
        document: DataExport or parsed export document
        types: Entity types to import
        repository: Destination repository

    Returns:
        ImportResult with per-type counts

    Raises:
        DataImportError: If a record is malformed or the repository fails;
            carries the counts imported before the failure
    """
    requested = {ExportEntityType(t) for t in types}
    if isinstance(document, DataExport):
        raw = {t.value: document.collection(t) for t in ALL_ENTITY_TYPES}
    else:
        raw = document

    savers = _savers(repository)
    result = ImportResult()

    for entity_type in ALL_ENTITY_TYPES:
        if entity_type not in requested:
            continue
        records = raw.get(entity_type.value)
        if not isinstance(records, list):
            continue

        for record in records:
            so_far = {t.value: n for t, n in result.imported.items()}
            try:
                new_record = _as_new_record(entity_type, record)
            except (ValidationError, TypeError, ValueError) as e:
                raise DataImportError(
                    entity_type.value, f"invalid record: {e}", so_far
                ) from e
            try:
                savers[entity_type](new_record)
            except Exception as e:
                logger.error(f"Repository failed while importing {entity_type.value}")
                raise DataImportError(entity_type.value, str(e), so_far) from e
            result.imported[entity_type] += 1

        logger.info(f"Imported {result.imported[entity_type]} {entity_type.value}")

    return result


def load_export_document(path: Union[str, Path]) -> Dict[str, Any]:
    """Read an export document from a JSON file.

    Raises:
        DataImportError: If the file cannot be read or is not a JSON object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DataImportError("document", f"cannot read {path}: {e}") from e
    if not isinstance(document, dict):
        raise DataImportError("document", f"{path} does not contain a JSON object")
    return document


def write_export_document(export: DataExport, path: Union[str, Path]) -> None:
    """Write a DataExport to a JSON file (two-space indentation)."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(export.to_document(), f, indent=2, ensure_ascii=False)


def seed_repository(
    repository: BudgetRepository,
    data: Optional[Dict[ExportEntityType, list]] = None,
) -> Dict[ExportEntityType, int]:
    """Save seed reference data into a repository, keeping the seed ids.

    Args:
        repository: Destination repository (normally empty)
        data: Collections to seed; defaults to the built-in seed data

    Returns:
        Number of records seeded per entity type
    """
    data = data if data is not None else get_seed_data()
    savers = _savers(repository)
    counts = {}
    for entity_type in ALL_ENTITY_TYPES:
        records = data.get(entity_type, [])
        for record in records:
            savers[entity_type](record)
        counts[entity_type] = len(records)
    logger.info(
        "Seeded " + ", ".join(f"{n} {t.value}" for t, n in counts.items() if n)
    )
    return counts
