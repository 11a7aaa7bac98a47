"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click

from marketing_budget.cli.utils.formatters import format_error, format_warning
from marketing_budget.exceptions import (
    DataImportError,
    InvalidTransitionError,
    PermissionDeniedError,
    RecordNotFoundError,
    StorageError,
)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""


class DataValidationError(CLIError):
    """A budget failed validation."""


class ProcessingError(CLIError):
    """Error related to data processing."""


def _report(title: str, hint: Optional[str]) -> None:
    click.echo(format_error(title))
    if hint:
        click.echo(format_warning(f"Hint: {hint}"))


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Report an error with a user-friendly message.

    Args:
        error: The exception that occurred
        debug: Whether to show the full stack trace for unexpected errors

    Returns:
        Exit code (1-9 for known error types, 130 for cancellation,
        255 for anything else)
    """
    if isinstance(error, ConfigurationError):
        _report(f"Configuration Error: {error.message}", error.recovery_hint)
        return 1

    if isinstance(error, DataValidationError):
        _report(f"Validation Error: {error.message}", error.recovery_hint)
        return 3

    if isinstance(error, ProcessingError):
        _report(f"Processing Error: {error.message}", error.recovery_hint)
        return 4

    if isinstance(error, InvalidTransitionError):
        _report(
            f"Invalid Transition: {error}",
            "Run 'marketing-budget show-budget' to see the allowed transitions",
        )
        return 5

    if isinstance(error, PermissionDeniedError):
        _report(
            f"Permission Denied: {error}",
            "Set MB_USER_ROLE to a role with the required rights",
        )
        return 6

    if isinstance(error, RecordNotFoundError):
        _report(f"Not Found: {error}", "Run 'marketing-budget list-budgets' for ids")
        return 7

    if isinstance(error, DataImportError):
        counts = ", ".join(f"{n} {name}" for name, n in error.imported.items() if n)
        _report(
            f"Import Failed: {error}",
            f"Already imported: {counts}" if counts else None,
        )
        return 8

    if isinstance(error, StorageError):
        _report(f"Storage Error: {error}", "Check MB_DATA_FILE and its permissions")
        return 9

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
    click.echo(str(error))
    if debug:
        click.echo("\nFull stack trace:")
        click.echo(
            "".join(traceback.format_exception(type(error), error, error.__traceback__))
        )
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"))
    return 255


class ErrorHandler:
    """Context manager that turns errors into reported exit codes."""

    def __init__(self, debug: bool = False):
        self.debug = debug

    def __enter__(self) -> "ErrorHandler":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            return False
        if isinstance(exc_val, (click.ClickException, click.exceptions.Exit)):
            return False
        if isinstance(exc_val, SystemExit):
            return False
        sys.exit(handle_cli_error(exc_val, self.debug))


def with_error_handling(debug: bool = False) -> ErrorHandler:
    """
    Add standardized error handling to a CLI command body.

    Errors raised in the block are reported and turned into an exit code;
    click's own exceptions (usage errors, exits) pass through unchanged.

    Args:
        debug: Whether to show full stack traces

    Example:
        @click.command()
        @pass_session
        def my_command(session):
            with with_error_handling(session.debug):
                ...
    """
    return ErrorHandler(debug)
