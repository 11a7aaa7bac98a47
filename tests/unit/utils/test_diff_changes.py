"""Unit tests for audit change summaries."""

from marketing_budget.utils.diff_changes import (
    FieldChange,
    diff_changes,
    display_value,
    format_field_name,
    summarise_changes,
)


class TestDisplayValue:
    """Test value formatting."""

    def test_values(self):
        """Test each value kind."""
        assert display_value(None) == "—"
        assert display_value("") == '""'
        assert display_value("draft") == "draft"
        assert display_value(True) == "true"
        assert display_value(350.0) == "350.0"
        assert display_value([1, 2, 3]) == "[3 items]"
        assert display_value({"a": 1}) == '{"a": 1}'


class TestDiffChanges:
    """Test record comparison."""

    def test_timestamps_ignored(self):
        """Test that createdAt and updatedAt never count as changes."""
        before = {"status": "draft", "updatedAt": "a", "createdAt": "a"}
        after = {"status": "draft", "updatedAt": "b", "createdAt": "b"}
        assert diff_changes(before, after) == []

    def test_nested_values_compared_by_content(self):
        """Test that equal nested values are not changes."""
        before = {"lineItems": [{"serviceId": 1}], "notes": None}
        after = {"lineItems": [{"serviceId": 1}], "notes": "Call first"}
        assert diff_changes(before, after) == [
            FieldChange("notes", "—", "Call first")
        ]

    def test_new_keys_and_extra_ignores(self):
        """Test added keys and caller-supplied ignores."""
        changes = diff_changes({"a": 1}, {"a": 2, "b": 3}, ignore=["a"])
        assert changes == [FieldChange("b", "—", "3")]


class TestSummaries:
    """Test one-line summaries."""

    def test_format_field_name(self):
        """Test camelCase splitting and Id stripping."""
        assert format_field_name("propertyAddress") == "property address"
        assert format_field_name("scheduleId") == "schedule"

    def test_no_changes(self):
        """Test the summary of an update without changes."""
        assert summarise_changes("Updated vendor", []) == (
            "Updated vendor (no field changes detected)"
        )

    def test_truncated(self):
        """Test that long change lists are cut off."""
        changes = [FieldChange(f"field{i}", "1", "2") for i in range(6)]
        summary = summarise_changes("Updated budget", changes, max_fields=4)
        assert summary.endswith("+2 more")
        assert summary.count("→") == 4
