"""Output formatters for CLI commands."""

import csv
import io
import json
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any, cast

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from ledger_reports.cli.config import OutputFormat
from ledger_reports.engine import format_currency

console = Console()
error_console = Console(stderr=True)


def format_output(
    data: BaseModel | Sequence[BaseModel] | dict[str, Any] | list[dict[str, Any]],
    output_format: OutputFormat,
) -> None:
    """Print flat records as JSON or CSV.

    Tables are rendered by each command; nested statements go through
    :mod:`ledger_reports.export` for CSV.

    Args:
        data: Data to format (Pydantic model, list of models, or dict/list)
        output_format: ``json`` or ``csv``
    """
    # Convert all input types to list[dict[str, Any]]
    converted: list[dict[str, Any]]
    if isinstance(data, BaseModel):
        converted = [data.model_dump(mode="json", by_alias=True)]
    elif isinstance(data, dict):
        converted = [cast(dict[str, Any], data)]
    elif isinstance(data, Sequence) and not isinstance(data, str):
        converted = [
            item.model_dump(mode="json", by_alias=True) if isinstance(item, BaseModel) else item
            for item in data
        ]
    else:
        converted = []

    if output_format == OutputFormat.CSV:
        _format_csv(converted)
    else:
        _format_json(converted)


def _format_json(data: list[dict[str, Any]]) -> None:
    """Format as JSON."""
    if len(data) == 1:
        console.print_json(json.dumps(data[0], default=str))
    else:
        console.print_json(json.dumps(data, default=str))


def _format_csv(data: list[dict[str, Any]]) -> None:
    """Format as CSV."""
    if not data:
        return

    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=list(data[0].keys()), extrasaction="ignore")
    writer.writeheader()
    writer.writerows(data)
    print_csv(output.getvalue())


def print_csv(content: str) -> None:
    """Print CSV text verbatim."""
    console.print(content, end="", markup=False, highlight=False, soft_wrap=True)


def amounts_table(
    title: str,
    sections: Sequence[tuple[str, Mapping[str, Decimal], Decimal]],
) -> Table:
    """Build a two-column statement table.

    Args:
        title: Table title
        sections: (heading, name->amount rows, section total) triples
    """
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Account", style="cyan")
    table.add_column("Amount", justify="right")

    for heading, rows, section_total in sections:
        table.add_row(f"[bold]{heading}[/bold]", "")
        if not rows:
            table.add_row("  [dim]None[/dim]", "")
        for name, amount in rows.items():
            table.add_row(f"  {name}", format_currency(amount))
        table.add_row(f"[bold]Total {heading}[/bold]", f"[bold]{format_currency(section_total)}[/bold]")
        table.add_section()

    return table


def amount_style(amount: Decimal) -> str:
    """Rich style for a signed amount."""
    return "red" if amount < 0 else "green"


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")
