"""Marketing Budget CLI.

This module provides a command-line interface for the marketing budget
engine: seeding reference data, building and pricing budgets, moving them
through their lifecycle, and exporting or importing data.
"""

from typing import Optional

import click

from marketing_budget import __version__
from marketing_budget.cli.commands import (
    compare_budgets_command,
    create_budget,
    dashboard,
    duplicate_budget_command,
    export_csv,
    export_data,
    import_data,
    list_budgets,
    override_price,
    seed,
    show_budget,
    transition,
    validate_budget,
)
from marketing_budget.cli.utils.session import CLISession
from marketing_budget.config.logging_config import LoggingConfig, configure_logging


@click.group(
    help="Marketing Budget CLI - Price property marketing budgets and track them"
)
@click.version_option(version=__version__)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON data file (overrides MB_DATA_FILE)",
)
@click.option("--debug", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, data_file: Optional[str], debug: bool):
    """Marketing Budget CLI main entry point."""
    ctx.obj = CLISession(data_file=data_file, debug=debug)


# Register commands
cli.add_command(seed)
cli.add_command(list_budgets)
cli.add_command(show_budget)
cli.add_command(create_budget)
cli.add_command(duplicate_budget_command)
cli.add_command(override_price)
cli.add_command(compare_budgets_command)
cli.add_command(validate_budget)
cli.add_command(transition)
cli.add_command(dashboard)
cli.add_command(export_data)
cli.add_command(import_data)
cli.add_command(export_csv)


def main():
    """Main entry point for the CLI."""
    configure_logging(LoggingConfig.from_env())
    cli()


if __name__ == "__main__":
    main()
