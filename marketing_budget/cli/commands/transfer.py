"""Data export, import and CSV commands."""

import json
from typing import Optional, Tuple

import click

from marketing_budget.cli.error_handlers import ProcessingError, with_error_handling
from marketing_budget.cli.utils.formatters import (
    format_info,
    format_success,
    format_table,
    format_warning,
)
from marketing_budget.cli.utils.session import CLISession, pass_session
from marketing_budget.models.audit import AuditAction
from marketing_budget.models.export import ALL_ENTITY_TYPES, ExportEntityType
from marketing_budget.models.permissions import can_manage_reference_data
from marketing_budget.services.data_transfer import (
    analyse_import,
    export_selective,
    import_selective,
    load_export_document,
    write_export_document,
)
from marketing_budget.writers.csv_writer import (
    budget_line_items_to_csv,
    budget_list_to_csv,
)

TYPE_CHOICES = [entity_type.value for entity_type in ALL_ENTITY_TYPES]


def _entity_types(values: Tuple[str, ...]):
    return [ExportEntityType(value) for value in values]


def _write_text(text: str, output: Optional[str]) -> None:
    if output is None:
        click.echo(text)
        return
    try:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    except OSError as e:
        raise ProcessingError(
            f"Cannot write {output}: {e}", "Check the output path is writable"
        ) from e


@click.command(name="export-data")
@click.option(
    "--type",
    "types",
    multiple=True,
    type=click.Choice(TYPE_CHOICES),
    help="Entity type to export (repeatable; default: all)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the export to this file instead of stdout",
)
@pass_session
def export_data(session: CLISession, types: Tuple[str, ...], output: Optional[str]):
    """Export reference data and budgets as a JSON document.

    Example:
        marketing-budget export-data --type services --type suburbs -o ref.json
    """
    with with_error_handling(session.debug):
        selected = _entity_types(types) if types else list(ALL_ENTITY_TYPES)
        export = export_selective(
            session.repository,
            selected,
            app_version=session.config.app_version,
        )

        if output is None:
            click.echo(json.dumps(export.to_document(), indent=2, ensure_ascii=False))
            return

        try:
            write_export_document(export, output)
        except OSError as e:
            raise ProcessingError(
                f"Cannot write {output}: {e}", "Check the output path is writable"
            ) from e
        counts = ", ".join(
            f"{len(export.collection(t) or [])} {t.value}" for t in selected
        )
        click.echo(format_success(f"Exported {counts} to {output}"))


@click.command(name="import-data")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--type",
    "types",
    multiple=True,
    type=click.Choice(TYPE_CHOICES),
    help="Entity type to import (repeatable; default: all present)",
)
@click.option(
    "--dry-run", is_flag=True, help="Only show what would be imported"
)
@pass_session
def import_data(
    session: CLISession, file: str, types: Tuple[str, ...], dry_run: bool
):
    """Import records from an export document, adding them as new records.

    Existing data is never removed. Ids in the file are discarded and
    references between records are not remapped.

    Example:
        marketing-budget import-data backup.json --type services --dry-run
    """
    with with_error_handling(session.debug):
        document = load_export_document(file)
        summary = analyse_import(document)
        selected = _entity_types(types) if types else summary.available_types

        click.echo(
            format_table(
                ["Type", "In file", "To import"],
                [
                    [
                        t.value,
                        str(summary.count(t)),
                        str(summary.count(t) if t in selected else 0),
                    ]
                    for t in ALL_ENTITY_TYPES
                ],
            )
        )
        if dry_run:
            click.echo(format_info("Dry run: nothing imported"))
            return

        session.require(can_manage_reference_data(session.role), "import data")

        if not any(summary.count(t) for t in selected):
            click.echo(format_warning("Nothing to import"))
            return

        result = import_selective(document, selected, session.repository)
        imported = ", ".join(
            f"{n} {t.value}" for t, n in result.imported.items() if n
        )
        session.repository.record_bulk(
            AuditAction.IMPORT, file, f"Imported {imported}"
        )
        click.echo(format_success(f"Imported {result.total} record(s): {imported}"))


@click.command(name="export-csv")
@click.option(
    "--budget-id",
    type=int,
    default=None,
    help="Export this budget's line items instead of the budget list",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the CSV to this file instead of stdout",
)
@pass_session
def export_csv(session: CLISession, budget_id: Optional[int], output: Optional[str]):
    """Export the budget list, or one budget's line items, as CSV.

    Example:
        marketing-budget export-csv -o budgets.csv
        marketing-budget export-csv --budget-id 3
    """
    with with_error_handling(session.debug):
        if budget_id is not None:
            text = budget_line_items_to_csv(session.load_budget(budget_id))
        else:
            text = budget_list_to_csv(session.repository.get_budgets())

        _write_text(text, output)
        if output is not None:
            click.echo(format_success(f"CSV written to {output}"))
