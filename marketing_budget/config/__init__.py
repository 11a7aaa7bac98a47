"""
Configuration module for the marketing budget engine.
"""
from .logging_config import (
    JSONFormatter,
    LoggingConfig,
    configure_logging,
    get_logger,
    reset_logging,
)
from .settings import MarketingBudgetConfig, get_config, load_config, reload_config

__all__ = [
    "JSONFormatter",
    "LoggingConfig",
    "MarketingBudgetConfig",
    "configure_logging",
    "get_config",
    "get_logger",
    "load_config",
    "reload_config",
    "reset_logging",
]
