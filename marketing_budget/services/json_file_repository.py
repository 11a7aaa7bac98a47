"""Budget repository persisted to a JSON data file.

The file has the same shape as a full data export, so a data file can be
imported elsewhere and an export can serve as a data file.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Union

from pydantic import ValidationError

from marketing_budget.exceptions import StorageError
from marketing_budget.models.export import DataExport
from marketing_budget.services.repository import InMemoryBudgetRepository
from marketing_budget.utils.time_utils import utc_now_iso

logger = logging.getLogger(__name__)


class JsonFileBudgetRepository(InMemoryBudgetRepository):
    """In-memory repository written through to a JSON file after each change.

    Writes are atomic (temporary file, then rename), so an interrupted write
    never leaves a half-written data file behind. When a write fails the
    in-memory state is reloaded from the file, so memory never holds
    changes the file lacks. Record ids are kept as stored.

    Example:
        >>> repository = JsonFileBudgetRepository("budgets.json")
        >>> repository.save_budget(Budget(property_address="12 Main St")).id
        1
    """

    def __init__(
        self,
        path: Union[str, Path],
        app_version: str = "",
        clock: Callable[[], str] = utc_now_iso,
    ):
        """
        Initialize the repository, loading the data file if it exists.

        Args:
            path: Location of the JSON data file
            app_version: Version written to the file's envelope
            clock: Returns the timestamp stamped on updated budgets

        Raises:
            StorageError: If the data file exists but cannot be parsed
        """
        super().__init__(clock=clock)
        self.path = Path(path)
        self.app_version = app_version
        self._loading = False
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        """Load the data file into memory, if present."""
        if not self.path.exists():
            logger.debug(f"Data file not found, starting empty: {self.path}")
            return

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
            data = DataExport.model_validate(document)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse data file (corrupted JSON): {e}")
            raise StorageError(f"Data file {self.path} is not valid JSON: {e}") from e
        except ValidationError as e:
            logger.error(f"Data file does not match the export format: {e}")
            raise StorageError(f"Data file {self.path} is malformed: {e}") from e

        self._loading = True
        try:
            for vendor in data.vendors or []:
                self._vendors.save(vendor)
            for service in data.services or []:
                self._services.save(service)
            for suburb in data.suburbs or []:
                self._suburbs.save(suburb)
            for schedule in data.schedules or []:
                self._schedules.save(schedule)
            for budget in data.budgets or []:
                self._budgets.save(budget)
        finally:
            self._loading = False

        logger.info(
            f"Loaded {len(self._budgets)} budgets and {len(self._services)} "
            f"services from {self.path}"
        )

    def _changed(self) -> None:
        if self._loading:
            return
        try:
            self._save_to_disk()
        except StorageError:
            self._clear_tables()
            self._load_from_disk()
            raise

    def to_export(self) -> DataExport:
        """Snapshot every collection as a full DataExport."""
        return DataExport(
            export_date=utc_now_iso(),
            app_version=self.app_version,
            vendors=self.get_vendors(),
            services=self.get_services(),
            suburbs=self.get_suburbs(),
            schedules=self.get_schedules(),
            budgets=self.get_budgets(),
        )

    def _save_to_disk(self) -> None:
        """
        Save all collections using an atomic write (temp file + rename).

        Raises:
            StorageError: If the file cannot be written
        """
        document = self.to_export().to_document()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                os.replace(temp_path, self.path)
            except OSError:
                try:
                    os.unlink(temp_path)
                except FileNotFoundError:
                    pass
                raise
        except OSError as e:
            logger.error(f"Failed to save data file: {e}")
            raise StorageError(f"Could not write data file {self.path}: {e}") from e

        logger.debug(f"Saved data file {self.path}")
