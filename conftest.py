"""
Global pytest configuration and fixtures.
"""
from decimal import Decimal
from typing import Dict

import pytest
from click.testing import CliRunner

from marketing_budget.config import MarketingBudgetConfig, reload_config
from marketing_budget.models import (
    Budget,
    BudgetLineItem,
    Schedule,
    ScheduleLineItem,
    Service,
    ServiceVariant,
    Suburb,
)
from marketing_budget.models.enums import (
    BudgetTier,
    PricingTier,
    PropertySize,
    PropertyType,
    ServiceCategory,
    VariantSelector,
)
from marketing_budget.services.repository import InMemoryBudgetRepository


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'MB_USER_NAME': 'test-user',
        'MB_USER_ROLE': 'admin',
        'MB_APP_VERSION': '0.0.0-test',
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG'
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch, tmp_path):
    """Mock environment variables for testing, with a temporary data file."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)
    data_file = tmp_path / "data.json"
    monkeypatch.setenv('MB_DATA_FILE', str(data_file))

    # Clear the global config to force reload with test values
    import marketing_budget.config.settings
    marketing_budget.config.settings._config = None

    yield {**test_env_vars, 'MB_DATA_FILE': str(data_file)}

    # Clean up
    marketing_budget.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> MarketingBudgetConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def cli_runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def repository():
    """Empty in-memory repository."""
    return InMemoryBudgetRepository()


@pytest.fixture
def sample_services():
    """A small catalogue: one fixed-price, one size-based, one tier-based service."""
    return [
        Service(
            id=1,
            name="Photography",
            category=ServiceCategory.PHOTOGRAPHY,
            variants=[ServiceVariant(id="default", name="Standard", base_price=500)],
        ),
        Service(
            id=2,
            name="Floor Plan",
            category=ServiceCategory.FLOOR_PLANS,
            variant_selector=VariantSelector.PROPERTY_SIZE,
            variants=[
                ServiceVariant(
                    id="small", name="Small", base_price=150,
                    size_match=PropertySize.SMALL,
                ),
                ServiceVariant(
                    id="large", name="Large", base_price=200,
                    size_match=PropertySize.LARGE,
                ),
            ],
        ),
        Service(
            id=3,
            name="REA Premiere",
            category=ServiceCategory.INTERNET,
            variant_selector=VariantSelector.SUBURB_TIER,
            variants=[
                ServiceVariant(
                    id="tier-a", name="Tier A", base_price=3699,
                    tier_match=PricingTier.A,
                ),
                ServiceVariant(
                    id="tier-b", name="Tier B", base_price=3519,
                    tier_match=PricingTier.B,
                ),
            ],
        ),
    ]


@pytest.fixture
def sample_suburbs():
    """Two suburbs in different pricing tiers."""
    return [
        Suburb(id=1, name="Bardon", pricing_tier=PricingTier.A, state="QLD"),
        Suburb(id=2, name="Taringa", pricing_tier=PricingTier.B, state="QLD"),
    ]


@pytest.fixture
def sample_schedule():
    """Large premium house schedule using every sample service."""
    return Schedule(
        id=1,
        name="House - Large - Premium",
        property_type=PropertyType.HOUSE,
        property_size=PropertySize.LARGE,
        tier=BudgetTier.PREMIUM,
        line_items=[
            ScheduleLineItem(service_id=1, variant_id="default"),
            ScheduleLineItem(service_id=2),
            ScheduleLineItem(service_id=3, is_selected=False),
        ],
    )


@pytest.fixture
def approvable_budget():
    """A draft budget that passes every approval rule (total 700)."""
    return Budget(
        id=1,
        property_address="12 Main St, Bardon",
        schedule_id=1,
        schedule_name="House - Large - Premium",
        tier=BudgetTier.PREMIUM,
        created_at="2026-01-15T09:30:00.000Z",
        updated_at="2026-01-15T09:30:00.000Z",
        line_items=[
            BudgetLineItem(
                service_id=1, service_name="Photography",
                schedule_price=Decimal("500"),
            ),
            BudgetLineItem(
                service_id=2, service_name="Floor Plan",
                schedule_price=Decimal("200"),
            ),
        ],
    )


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "cli: mark test as exercising the command-line interface"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        # Add unit marker for tests in tests/unit/
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        # Add cli marker for tests in tests/unit/cli/
        if "tests/unit/cli/" in str(item.fspath):
            item.add_marker(pytest.mark.cli)
