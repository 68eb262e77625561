"""Receivables commands."""

from datetime import UTC, date, datetime
from pathlib import Path

import typer
from rich.table import Table

from ledger_reports.cli.async_runner import report_error
from ledger_reports.cli.config import OutputFormat
from ledger_reports.cli.formatters import console, format_output, print_error
from ledger_reports.engine import calculate_invoice_aging, format_currency
from ledger_reports.exceptions import InputFileError
from ledger_reports.inputs import load_invoices
from ledger_reports.models import InvoiceType

app = typer.Typer(no_args_is_help=True)


@app.command("aging")
def aging(
    path: Path = typer.Argument(
        ...,
        help="JSON file with invoices (a list, or an object with 'invoices').",
        exists=True,
        dir_okay=False,
    ),
    as_of: str | None = typer.Option(
        None,
        "--as-of",
        help="Reference date (YYYY-MM-DD, default: now).",
    ),
    invoice_type: InvoiceType = typer.Option(
        InvoiceType.SALES,
        "--invoice-type",
        help="Age sales (receivables) or purchase (payables) invoices.",
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """Bucket unpaid invoices by days past due."""
    reference: datetime | None = None
    if as_of:
        try:
            reference = datetime.combine(date.fromisoformat(as_of), datetime.min.time(), tzinfo=UTC)
        except ValueError:
            print_error("Invalid as-of date format. Use YYYY-MM-DD.")
            raise typer.Exit(1) from None

    try:
        invoices = load_invoices(path)
    except InputFileError as e:
        report_error(e)
        raise typer.Exit(1) from None

    outstanding = [
        inv for inv in invoices if inv.invoice_type == invoice_type and inv.amount_due > 0
    ]
    result = calculate_invoice_aging(outstanding, reference)

    if output != OutputFormat.TABLE:
        format_output(result, output)
        return

    table = Table(title=f"Invoice Aging ({len(outstanding)} {invoice_type.value} invoices)")
    table.add_column("Bucket", style="cyan")
    table.add_column("Amount", justify="right")
    table.add_row("Current", format_currency(result.current))
    table.add_row("1-30 days", format_currency(result.days_30))
    table.add_row("31-60 days", format_currency(result.days_60))
    table.add_row("Over 60 days", format_currency(result.days_90_plus))
    table.add_section()
    table.add_row("[bold]Total[/bold]", f"[bold]{format_currency(result.total)}[/bold]")

    console.print()
    console.print(table)
