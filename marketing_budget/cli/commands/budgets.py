"""Budget listing, inspection and editing commands."""

from decimal import Decimal, InvalidOperation
from typing import Optional

import click
from pydantic import ValidationError

from marketing_budget.aggregators.budget_comparison import compare_budgets
from marketing_budget.calculators.budget_calculator import calculate_budget_summary
from marketing_budget.calculators.price_resolver import (
    apply_schedule,
    create_default_budget,
    get_line_item_price,
)
from marketing_budget.cli.error_handlers import ProcessingError, with_error_handling
from marketing_budget.cli.utils.formatters import (
    format_info,
    format_money,
    format_success,
    format_table,
)
from marketing_budget.cli.utils.session import CLISession, pass_session
from marketing_budget.exceptions import RecordNotFoundError
from marketing_budget.lifecycle.state_machine import (
    allowed_transitions,
    duplicate_budget,
)
from marketing_budget.models.enums import BudgetStatus
from marketing_budget.models.permissions import (
    can_create_budget,
    can_duplicate_budget,
    can_edit_budget,
)

STATUS_CHOICES = [status.value for status in BudgetStatus]


def _price_cell(amount: Optional[Decimal]) -> str:
    return format_money(amount) if amount is not None else "-"


@click.command(name="list-budgets")
@click.option(
    "--status",
    type=click.Choice(STATUS_CHOICES, case_sensitive=False),
    default=None,
    help="Only show budgets with this status",
)
@pass_session
def list_budgets(session: CLISession, status: Optional[str]):
    """List budgets with their status and GST-inclusive totals.

    Example:
        marketing-budget list-budgets --status draft
    """
    with with_error_handling(session.debug):
        budgets = session.repository.get_budgets(
            BudgetStatus(status.lower()) if status else None
        )
        if not budgets:
            click.echo(format_info("No budgets found"))
            return

        rows = []
        for budget in budgets:
            summary = calculate_budget_summary(budget.line_items)
            rows.append(
                [
                    str(budget.id),
                    budget.property_address,
                    budget.status.value,
                    budget.tier.value,
                    f"{summary.selected_count}/{summary.total_count}",
                    format_money(summary.total),
                ]
            )
        click.echo(
            format_table(["ID", "Address", "Status", "Tier", "Items", "Total"], rows)
        )
        click.echo(f"\n{len(budgets)} budget(s)")


@click.command(name="show-budget")
@click.argument("budget_id", type=int)
@pass_session
def show_budget(session: CLISession, budget_id: int):
    """Show a budget's details, line items and totals.

    Example:
        marketing-budget show-budget 3
    """
    with with_error_handling(session.debug):
        budget = session.load_budget(budget_id)
        repository = session.repository

        suburb = repository.get_suburb(budget.suburb_id) if budget.suburb_id else None
        vendor = repository.get_vendor(budget.vendor_id) if budget.vendor_id else None
        next_statuses = ", ".join(s.value for s in allowed_transitions(budget.status))

        click.echo(f"Budget #{budget.id}: {budget.label}")
        click.echo("=" * 60)
        click.echo(f"Status:     {budget.status.value}")
        click.echo(f"Next:       {next_statuses or '(none)'}")
        click.echo(
            f"Property:   {budget.property_type.value}, "
            f"{budget.property_size.value}, {budget.tier.value} tier"
        )
        if suburb is not None:
            click.echo(f"Suburb:     {suburb.name} (Tier {suburb.pricing_tier.value})")
        if vendor is not None:
            click.echo(f"Vendor:     {vendor.name}")
        click.echo(f"Schedule:   {budget.schedule_name or '(none)'}")
        if budget.client_name:
            click.echo(f"Client:     {budget.client_name}")
        if budget.agent_name:
            click.echo(f"Agent:      {budget.agent_name}")
        click.echo()

        rows = [
            [
                item.service_name or f"Service #{item.service_id}",
                item.variant_name or item.variant_id or "",
                "Yes" if item.is_selected else "No",
                _price_cell(item.schedule_price),
                _price_cell(item.override_price),
                format_money(get_line_item_price(item)),
            ]
            for item in budget.line_items
        ]
        click.echo(
            format_table(
                ["Service", "Variant", "Selected", "Schedule", "Override", "Price"],
                rows,
            )
        )

        summary = calculate_budget_summary(budget.line_items)
        click.echo()
        click.echo(
            f"Selected items:      {summary.selected_count} of {summary.total_count}"
        )
        click.echo(f"Total (inc GST):     {format_money(summary.total)}")
        click.echo(f"GST component:       {format_money(summary.gst)}")


@click.command(name="create-budget")
@click.option("--address", required=True, help="Property address")
@click.option("--schedule-id", type=int, default=None, help="Schedule to apply")
@click.option("--suburb-id", type=int, default=None, help="Suburb of the property")
@click.option("--vendor-id", type=int, default=None, help="Default vendor")
@click.option("--client", "client_name", default=None, help="Client name")
@click.option("--agent", "agent_name", default=None, help="Agent name")
@pass_session
def create_budget(
    session: CLISession,
    address: str,
    schedule_id: Optional[int],
    suburb_id: Optional[int],
    vendor_id: Optional[int],
    client_name: Optional[str],
    agent_name: Optional[str],
):
    """Create a draft budget, optionally seeded from a schedule.

    Example:
        marketing-budget create-budget --address "12 Main St, Bardon" \\
            --schedule-id 1 --suburb-id 1
    """
    with with_error_handling(session.debug):
        session.require(can_create_budget(session.role), "create budgets")
        repository = session.repository

        budget = create_default_budget(vendor_id)
        budget.property_address = address.strip()
        budget.client_name = client_name
        budget.agent_name = agent_name

        if suburb_id is not None:
            if repository.get_suburb(suburb_id) is None:
                raise RecordNotFoundError("Suburb", suburb_id)
            budget.suburb_id = suburb_id

        if schedule_id is not None:
            schedule = repository.get_schedule(schedule_id)
            if schedule is None:
                raise RecordNotFoundError("Schedule", schedule_id)
            budget = apply_schedule(
                budget,
                schedule,
                repository.get_services(),
                repository.get_suburbs(),
            )

        saved = repository.save_budget(budget)
        summary = calculate_budget_summary(saved.line_items)
        click.echo(
            format_success(
                f"Created budget #{saved.id} for {saved.label} "
                f"({summary.total_count} items, {format_money(summary.total)})"
            )
        )


@click.command(name="duplicate-budget")
@click.argument("budget_id", type=int)
@pass_session
def duplicate_budget_command(session: CLISession, budget_id: int):
    """Copy a budget as a new draft.

    Example:
        marketing-budget duplicate-budget 3
    """
    with with_error_handling(session.debug):
        session.require(can_duplicate_budget(session.role), "duplicate budgets")
        source = session.load_budget(budget_id)
        saved = session.repository.save_budget(duplicate_budget(source))
        click.echo(format_success(f"Created budget #{saved.id} ({saved.label})"))


@click.command(name="override-price")
@click.argument("budget_id", type=int)
@click.argument("service_id", type=int)
@click.argument("price", required=False)
@click.option("--clear", is_flag=True, help="Remove the override instead")
@pass_session
def override_price(
    session: CLISession,
    budget_id: int,
    service_id: int,
    price: Optional[str],
    clear: bool,
):
    """Set or clear a manual price on a budget line item.

    Example:
        marketing-budget override-price 3 1 350
        marketing-budget override-price 3 1 --clear
    """
    with with_error_handling(session.debug):
        budget = session.load_budget(budget_id)
        session.require(
            can_edit_budget(session.role, budget.status),
            f"edit {budget.status.value} budgets",
        )
        if not clear and price is None:
            raise click.UsageError("Give a PRICE or use --clear")

        index = next(
            (
                i
                for i, item in enumerate(budget.line_items)
                if item.service_id == service_id
            ),
            None,
        )
        if index is None:
            raise RecordNotFoundError("Line item for service", service_id)

        items = list(budget.line_items)
        if clear:
            items[index] = items[index].without_override()
        else:
            try:
                items[index] = items[index].with_override(Decimal(price))
            except (InvalidOperation, ValidationError) as e:
                raise ProcessingError(
                    f"'{price}' is not a valid price", "Use a number such as 350.00"
                ) from e
        budget.line_items = items

        saved = session.repository.save_budget(budget)
        summary = calculate_budget_summary(saved.line_items)
        click.echo(
            format_success(
                f"Budget #{saved.id} total is now {format_money(summary.total)}"
            )
        )


@click.command(name="compare-budgets")
@click.argument("left_id", type=int)
@click.argument("right_id", type=int)
@pass_session
def compare_budgets_command(session: CLISession, left_id: int, right_id: int):
    """Compare two budgets service by service.

    Example:
        marketing-budget compare-budgets 3 4
    """
    with with_error_handling(session.debug):
        left = session.load_budget(left_id)
        right = session.load_budget(right_id)

        rows = []
        for row in compare_budgets(left, right):
            difference = row.difference
            rows.append(
                [
                    row.service_name,
                    _price_cell(row.left_price),
                    _price_cell(row.right_price),
                    format_money(difference) if difference is not None else "-",
                ]
            )
        click.echo(
            format_table(
                ["Service", f"#{left.id}", f"#{right.id}", "Difference"], rows
            )
        )
        left_total = calculate_budget_summary(left.line_items).total
        right_total = calculate_budget_summary(right.line_items).total
        click.echo(
            f"\nTotals: {format_money(left_total)} vs {format_money(right_total)}"
        )
