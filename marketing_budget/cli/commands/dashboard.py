"""Dashboard summary command."""

import click

from marketing_budget.aggregators.dashboard_aggregator import build_dashboard
from marketing_budget.cli.error_handlers import with_error_handling
from marketing_budget.cli.utils.formatters import format_money, format_table
from marketing_budget.cli.utils.session import CLISession, pass_session


@click.command(name="dashboard")
@pass_session
def dashboard(session: CLISession):
    """Show budget counts and spend across all budgets.

    Example:
        marketing-budget dashboard
    """
    with with_error_handling(session.debug):
        repository = session.repository
        snapshot = build_dashboard(repository.get_budgets(), repository.get_services())
        summary = snapshot.summary

        click.echo("Marketing Budget Dashboard")
        click.echo("=" * 60)
        click.echo(f"Budgets:        {summary.total_budgets}")
        click.echo(f"Total spend:    {format_money(summary.total_spend)}")
        click.echo(f"Average spend:  {format_money(summary.average_spend)}")

        click.echo("\nBy status")
        click.echo(
            format_table(
                ["Status", "Budgets"],
                [[s.value, str(n)] for s, n in snapshot.status_counts.items()],
            )
        )

        category_rows = [
            [category.value, format_money(amount)]
            for category, amount in snapshot.spend_by_category.items()
            if amount
        ]
        if category_rows:
            click.echo("\nSpend by category")
            click.echo(format_table(["Category", "Spend"], category_rows))

        click.echo("\nSpend by tier")
        click.echo(
            format_table(
                ["Tier", "Spend"],
                [[t.value, format_money(a)] for t, a in snapshot.spend_by_tier.items()],
            )
        )

        if snapshot.monthly_trend:
            click.echo("\nMonthly trend")
            click.echo(
                format_table(
                    ["Month", "Budgets", "Spend"],
                    [
                        [m.month, str(m.count), format_money(m.total)]
                        for m in snapshot.monthly_trend
                    ],
                )
            )
