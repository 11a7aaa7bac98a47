"""Tests for structured logging context."""

import logging

from marketing_budget.utils.logging_utils import (
    ContextFilter,
    LogContext,
    get_log_context,
)


class TestLogContext:
    """Test LogContext context manager."""

    def test_fields_set_and_restored(self):
        """Test that fields are visible inside the block only."""
        assert get_log_context() == {}
        with LogContext(budget_id=1):
            assert get_log_context() == {"budget_id": 1}
        assert get_log_context() == {}

    def test_nested_contexts_merge(self):
        """Test that inner contexts add to and restore outer fields."""
        with LogContext(user="jane", budget_id=1):
            with LogContext(budget_id=2):
                assert get_log_context() == {"user": "jane", "budget_id": 2}
            assert get_log_context() == {"user": "jane", "budget_id": 1}

    def test_restored_after_exception(self):
        """Test that an error inside the block still restores context."""
        try:
            with LogContext(budget_id=5):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert get_log_context() == {}


class TestContextFilter:
    """Test copying context onto records."""

    def test_filter_adds_fields(self):
        """Test that the filter sets attributes and never drops records."""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "m", None, None)
        with LogContext(budget_id=9):
            assert ContextFilter().filter(record) is True
        assert record.budget_id == 9
