"""Per-invocation CLI state: configuration, acting user and repository."""

from typing import Optional

import click
from pydantic import ValidationError

from marketing_budget.cli.error_handlers import ConfigurationError
from marketing_budget.config.settings import MarketingBudgetConfig, get_config
from marketing_budget.exceptions import PermissionDeniedError, RecordNotFoundError
from marketing_budget.models.budget import Budget
from marketing_budget.models.permissions import UserRole
from marketing_budget.services.audit_logger import LoggingAuditLogger
from marketing_budget.services.audited_repository import AuditedBudgetRepository
from marketing_budget.services.json_file_repository import JsonFileBudgetRepository


class CLISession:
    """State shared by the commands of one CLI invocation.

    The configuration and repository are created on first use, so commands
    that fail on argument parsing never touch the data file.
    """

    def __init__(self, data_file: Optional[str] = None, debug: bool = False):
        self.data_file = data_file
        self.debug = debug
        self._config: Optional[MarketingBudgetConfig] = None
        self._repository: Optional[AuditedBudgetRepository] = None

    @property
    def config(self) -> MarketingBudgetConfig:
        if self._config is None:
            try:
                self._config = get_config()
            except ValidationError as e:
                raise ConfigurationError(
                    f"Invalid settings: {e}",
                    "Check the MB_*, ENVIRONMENT and LOG_LEVEL values in your "
                    "environment or .env file",
                ) from e
        return self._config

    @property
    def role(self) -> UserRole:
        return self.config.user_role

    @property
    def repository(self) -> AuditedBudgetRepository:
        if self._repository is None:
            path = self.data_file or self.config.data_file
            inner = JsonFileBudgetRepository(path, app_version=self.config.app_version)
            self._repository = AuditedBudgetRepository(
                inner, LoggingAuditLogger(), self.config.user_name
            )
        return self._repository

    def require(self, allowed: bool, operation: str) -> None:
        """Raise PermissionDeniedError unless the acting role is allowed."""
        if not allowed:
            raise PermissionDeniedError(self.role.value, operation)

    def load_budget(self, budget_id: int) -> Budget:
        """Fetch a budget by id.

        Raises:
            RecordNotFoundError: If no budget has that id
        """
        budget = self.repository.get_budget(budget_id)
        if budget is None:
            raise RecordNotFoundError("Budget", budget_id)
        return budget


pass_session = click.make_pass_decorator(CLISession, ensure=True)
