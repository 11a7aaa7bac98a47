"""Budget approval validation and status transition commands."""

import click

from marketing_budget.cli.error_handlers import DataValidationError, with_error_handling
from marketing_budget.cli.utils.formatters import (
    format_error,
    format_info,
    format_success,
)
from marketing_budget.cli.utils.session import CLISession, pass_session
from marketing_budget.lifecycle.state_machine import BudgetLifecycle
from marketing_budget.models.enums import BudgetStatus
from marketing_budget.utils.logging_utils import LogContext
from marketing_budget.validators.budget_validators import validate_for_approval

STATUS_CHOICES = [status.value for status in BudgetStatus]


@click.command(name="validate-budget")
@click.argument("budget_id", type=int)
@pass_session
def validate_budget(session: CLISession, budget_id: int):
    """Check whether a budget is ready to be approved.

    Every approval rule is checked and all failures are listed. Exits with
    code 3 when the budget is not ready.

    Example:
        marketing-budget validate-budget 3
    """
    with with_error_handling(session.debug):
        budget = session.load_budget(budget_id)
        result = validate_for_approval(budget)

        click.echo(f"Validating {budget.label}")
        click.echo("=" * 60)

        if result.is_valid:
            click.echo(format_success("Budget is ready for approval"))
            return

        for issue in result.errors:
            click.echo(format_error(issue.message))
        raise DataValidationError(
            f"{result.error_count} approval rule(s) failed",
            "Fix the issues above and validate again",
        )


@click.command(name="transition")
@click.argument("budget_id", type=int)
@click.argument(
    "to_status", type=click.Choice(STATUS_CHOICES, case_sensitive=False)
)
@pass_session
def transition(session: CLISession, budget_id: int, to_status: str):
    """Move a budget to a new status.

    Approving a draft runs the approval rules first; the budget is left
    unchanged if any fail.

    Example:
        marketing-budget transition 3 approved
    """
    with with_error_handling(session.debug):
        with LogContext(budget_id=budget_id, user=session.config.user_name):
            budget = session.load_budget(budget_id)
            lifecycle = BudgetLifecycle(role=session.role)
            result = lifecycle.transition(budget, BudgetStatus(to_status.lower()))

            if not result.applied:
                for issue in result.validation.errors:
                    click.echo(format_error(issue.message))
                raise DataValidationError(
                    f"Cannot move {budget.label} to {result.to_status.value}",
                    "Fix the issues above and try again",
                )

            session.repository.save_budget(result.budget)
            click.echo(
                format_success(
                    f"{budget.label}: {result.from_status.value} -> "
                    f"{result.to_status.value}"
                )
            )
            if result.to_status == BudgetStatus.APPROVED:
                click.echo(format_info("Approved budgets can no longer be edited"))
