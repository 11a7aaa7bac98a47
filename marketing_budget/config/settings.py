"""
Configuration management for the marketing budget engine.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from marketing_budget import __version__
from marketing_budget.models.permissions import UserRole


class MarketingBudgetConfig(BaseSettings):
    """Configuration settings for the marketing budget engine."""

    # Storage
    data_file: str = Field(default="marketing_budget_data.json", alias="MB_DATA_FILE")

    # Acting user
    user_name: str = Field(default="system", alias="MB_USER_NAME")
    user_role: UserRole = Field(default=UserRole.VIEWER, alias="MB_USER_ROLE")

    # Export envelope
    app_version: str = Field(default=__version__, alias="MB_APP_VERSION")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("user_name")
    @classmethod
    def validate_user_name(cls, v):
        """Ensure the user name is not blank."""
        if not v or not v.strip():
            raise ValueError("User name cannot be empty")
        return v.strip()

    @field_validator("user_role", mode="before")
    @classmethod
    def validate_user_role(cls, v):
        """Accept role names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()


def load_config(env_file: Optional[str] = None) -> MarketingBudgetConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return MarketingBudgetConfig()


# Global configuration instance
_config: Optional[MarketingBudgetConfig] = None


def get_config() -> MarketingBudgetConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> MarketingBudgetConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
