"""Unit tests for the seed command."""

import json

import marketing_budget.config.settings
from marketing_budget.cli import cli


class TestSeedCommand:
    """Test suite for the seed command."""

    def test_seed_empty_store(self, cli_runner, mock_env):
        """Test seeding a new data file."""
        result = cli_runner.invoke(cli, ["seed"])

        assert result.exit_code == 0, result.output
        assert "Seed data loaded" in result.output
        assert "services: 15" in result.output

        with open(mock_env["MB_DATA_FILE"], encoding="utf-8") as f:
            document = json.load(f)
        assert len(document["schedules"]) == 3
        assert document["budgets"] == []

    def test_seed_twice_is_skipped(self, cli_runner, mock_env):
        """Test that existing reference data is left alone."""
        cli_runner.invoke(cli, ["seed"])
        result = cli_runner.invoke(cli, ["seed"])

        assert result.exit_code == 0
        assert "already present" in result.output

    def test_seed_force(self, cli_runner, mock_env):
        """Test that --force reseeds without duplicating records."""
        cli_runner.invoke(cli, ["seed"])
        result = cli_runner.invoke(cli, ["seed", "--force"])

        assert result.exit_code == 0
        with open(mock_env["MB_DATA_FILE"], encoding="utf-8") as f:
            assert len(json.load(f)["services"]) == 15

    def test_seed_requires_admin(self, cli_runner, mock_env, monkeypatch):
        """Test that editors cannot seed reference data."""
        monkeypatch.setenv("MB_USER_ROLE", "editor")
        marketing_budget.config.settings._config = None

        result = cli_runner.invoke(cli, ["seed"])

        assert result.exit_code == 6
        assert "Permission Denied" in result.output
