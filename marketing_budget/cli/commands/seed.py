"""Seed reference data command."""

import click

from marketing_budget.cli.error_handlers import with_error_handling
from marketing_budget.cli.utils.formatters import (
    format_info,
    format_success,
    format_warning,
)
from marketing_budget.cli.utils.session import CLISession, pass_session
from marketing_budget.models.audit import AuditAction
from marketing_budget.models.permissions import can_manage_reference_data
from marketing_budget.services.data_transfer import seed_repository


@click.command(name="seed")
@click.option(
    "--force",
    is_flag=True,
    help="Seed even when reference data exists (records with seed ids are replaced)",
)
@pass_session
def seed(session: CLISession, force: bool):
    """Load the default vendors, services, suburbs and schedules.

    Example:
        marketing-budget seed
    """
    with with_error_handling(session.debug):
        session.require(
            can_manage_reference_data(session.role), "seed reference data"
        )
        repository = session.repository

        if repository.get_services() and not force:
            click.echo(
                format_warning(
                    "Reference data already present; use --force to seed anyway"
                )
            )
            return

        counts = seed_repository(repository)
        repository.record_bulk(AuditAction.SEED, "Seed data", "Reference data seeded")

        for entity_type, count in counts.items():
            if count:
                click.echo(format_info(f"  {entity_type.value}: {count}"))
        click.echo(format_success("Seed data loaded"))
