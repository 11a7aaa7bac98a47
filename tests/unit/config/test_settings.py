"""
Unit tests for configuration management.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from marketing_budget.config.settings import (
    MarketingBudgetConfig,
    get_config,
    reload_config,
)
from marketing_budget.models.permissions import UserRole


class TestMarketingBudgetConfig:
    """Test cases for MarketingBudgetConfig."""

    def test_config_with_valid_env_vars(self, test_config, mock_env):
        """Test configuration loads correctly with valid environment variables."""
        assert test_config.user_name == "test-user"
        assert test_config.user_role == UserRole.ADMIN
        assert test_config.app_version == "0.0.0-test"
        assert test_config.data_file == mock_env["MB_DATA_FILE"]
        assert test_config.environment == "testing"
        assert test_config.debug is True
        assert test_config.log_level == "DEBUG"

    def test_default_values(self, monkeypatch):
        """Test default configuration values."""
        for key in ("MB_DATA_FILE", "MB_USER_NAME", "MB_USER_ROLE", "LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)

        config = MarketingBudgetConfig(_env_file=None)

        assert config.data_file == "marketing_budget_data.json"
        assert config.user_name == "system"
        assert config.user_role == UserRole.VIEWER
        assert config.log_level == "INFO"

    def test_role_is_case_insensitive(self, mock_env):
        """Test that role names are normalised."""
        with patch.dict(os.environ, {"MB_USER_ROLE": " Editor "}):
            config = MarketingBudgetConfig(_env_file=None)
        assert config.user_role == UserRole.EDITOR

    def test_unknown_role_rejected(self, mock_env):
        """Test that unknown roles fail validation."""
        with patch.dict(os.environ, {"MB_USER_ROLE": "owner"}):
            with pytest.raises(ValidationError):
                MarketingBudgetConfig(_env_file=None)

    def test_blank_user_name_rejected(self, mock_env):
        """Test that a blank acting user is rejected."""
        with patch.dict(os.environ, {"MB_USER_NAME": "   "}):
            with pytest.raises(ValidationError, match="User name cannot be empty"):
                MarketingBudgetConfig(_env_file=None)

    def test_invalid_log_level(self, mock_env):
        """Test log level validation."""
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValidationError, match="Log level must be one of"):
                MarketingBudgetConfig(_env_file=None)

    def test_invalid_environment(self, mock_env):
        """Test environment validation."""
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}):
            with pytest.raises(ValidationError, match="Environment must be one of"):
                MarketingBudgetConfig(_env_file=None)


class TestConfigFunctions:
    """Test the global configuration accessors."""

    def test_get_config_is_cached(self, mock_env):
        """Test that get_config returns the same instance."""
        assert get_config() is get_config()

    def test_reload_config_picks_up_changes(self, mock_env, monkeypatch):
        """Test that reload_config re-reads the environment."""
        first = get_config()
        monkeypatch.setenv("MB_USER_NAME", "someone-else")

        reloaded = reload_config()

        assert reloaded is not first
        assert reloaded.user_name == "someone-else"
        assert get_config() is reloaded

    def test_env_file_loaded(self, mock_env, monkeypatch, tmp_path):
        """Test loading values from a dotenv file."""
        monkeypatch.delenv("MB_APP_VERSION")
        env_file = tmp_path / "test.env"
        env_file.write_text("MB_APP_VERSION=7.7.7\n", encoding="utf-8")

        config = reload_config(str(env_file))

        assert config.app_version == "7.7.7"
        monkeypatch.delenv("MB_APP_VERSION")
