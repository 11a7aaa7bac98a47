"""Unit tests for the JSON file repository."""

import json

import pytest

from marketing_budget.exceptions import StorageError
from marketing_budget.models.budget import Budget, BudgetLineItem
from marketing_budget.services import json_file_repository
from marketing_budget.services.json_file_repository import JsonFileBudgetRepository


class TestJsonFileBudgetRepository:
    """Test persistence through a JSON data file."""

    def test_missing_file_starts_empty(self, tmp_path):
        """Test that a new data file is not created until the first write."""
        path = tmp_path / "data.json"
        repository = JsonFileBudgetRepository(path)

        assert repository.get_budgets() == []
        assert not path.exists()

    def test_write_through_and_reload(self, tmp_path, sample_services):
        """Test that saved records survive a reload with their ids."""
        path = tmp_path / "data.json"
        repository = JsonFileBudgetRepository(path, app_version="9.9")
        for service in sample_services:
            repository.save_service(service)
        repository.save_budget(
            Budget(
                property_address="12 Main St",
                line_items=[BudgetLineItem(service_id=1, schedule_price=500)],
            )
        )

        reloaded = JsonFileBudgetRepository(path)

        assert [s.id for s in reloaded.get_services()] == [1, 2, 3]
        assert reloaded.get_budget(1).line_items[0].schedule_price == 500

        document = json.loads(path.read_text(encoding="utf-8"))
        assert document["appVersion"] == "9.9"
        assert document["budgets"][0]["propertyAddress"] == "12 Main St"

    def test_no_temp_files_left(self, tmp_path):
        """Test that atomic writes clean up after themselves."""
        path = tmp_path / "data.json"
        JsonFileBudgetRepository(path).save_budget(Budget(property_address="A"))
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

    def test_corrupted_file_raises(self, tmp_path):
        """Test that invalid JSON is reported as a storage error."""
        path = tmp_path / "data.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageError, match="not valid JSON"):
            JsonFileBudgetRepository(path)

    def test_malformed_document_raises(self, tmp_path):
        """Test that a document of the wrong shape is rejected."""
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"budgets": "nope"}), encoding="utf-8")

        with pytest.raises(StorageError, match="malformed"):
            JsonFileBudgetRepository(path)

    def test_unwritable_location_raises(self, tmp_path):
        """Test that write failures are reported as storage errors."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        repository = JsonFileBudgetRepository(blocker / "data.json")

        with pytest.raises(StorageError, match="Could not write"):
            repository.save_budget(Budget(property_address="A"))

    def test_failed_write_leaves_memory_matching_file(self, tmp_path, monkeypatch):
        """Test that a failed write reverts the in-memory change."""
        path = tmp_path / "data.json"
        repository = JsonFileBudgetRepository(path)
        repository.save_budget(Budget(property_address="A"))

        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(json_file_repository.os, "replace", fail_replace)

        with pytest.raises(StorageError, match="disk full"):
            repository.save_budget(Budget(property_address="B"))

        assert [b.property_address for b in repository.get_budgets()] == ["A"]
        assert [p.name for p in tmp_path.iterdir()] == ["data.json"]

    def test_failed_first_write_leaves_memory_empty(self, tmp_path):
        """Test that nothing stays in memory when the file cannot be created."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        repository = JsonFileBudgetRepository(blocker / "data.json")

        with pytest.raises(StorageError):
            repository.save_budget(Budget(property_address="A"))

        assert repository.get_budgets() == []
