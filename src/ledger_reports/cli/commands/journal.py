"""Journal entry and account ledger commands."""

from decimal import Decimal, InvalidOperation
from pathlib import Path

import typer
from rich.table import Table

from ledger_reports.cli.async_runner import report_error
from ledger_reports.cli.config import CLIConfig, OutputFormat
from ledger_reports.cli.formatters import (
    console,
    format_output,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from ledger_reports.engine import (
    calculate_account_balance,
    check_entry_postable,
    format_currency,
    signed_delta,
    validate_journal_entry_balance,
)
from ledger_reports.exceptions import InputFileError
from ledger_reports.inputs import load_journal_entries
from ledger_reports.models import AccountType, JournalEntry, JournalEntryLine

app = typer.Typer(no_args_is_help=True)

ENTRIES_ARGUMENT = typer.Argument(
    ...,
    help="JSON file with journal entries (a list, or an object with 'journal_entries').",
    exists=True,
    dir_okay=False,
)


def _load_entries(path: Path) -> list[JournalEntry]:
    try:
        return load_journal_entries(path)
    except InputFileError as e:
        report_error(e)
        raise typer.Exit(1) from None


def _entry_label(entry: JournalEntry, index: int) -> str:
    return entry.entry_number or entry.id or f"#{index + 1}"


@app.command("validate")
def validate(
    ctx: typer.Context,
    path: Path = ENTRIES_ARGUMENT,
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """Check that every journal entry's debits equal its credits."""
    config: CLIConfig = ctx.obj
    entries = _load_entries(path)

    if not entries:
        print_info("No journal entries found.")
        return

    results = [
        (
            _entry_label(entry, i),
            validate_journal_entry_balance(entry.lines, tolerance=config.tolerance),
        )
        for i, entry in enumerate(entries)
    ]

    if output != OutputFormat.TABLE:
        format_output(
            [
                {"entry": label, **balance.model_dump(mode="json", by_alias=True)}
                for label, balance in results
            ],
            output,
        )
        return

    table = Table(title="Journal Entry Balance")
    table.add_column("Entry", style="cyan")
    table.add_column("Debits", justify="right", style="green")
    table.add_column("Credits", justify="right", style="red")
    table.add_column("Difference", justify="right")
    table.add_column("Balanced", justify="center")

    for label, balance in results:
        table.add_row(
            label,
            format_currency(balance.total_debits),
            format_currency(balance.total_credits),
            format_currency(balance.difference),
            "[green]yes[/green]" if balance.is_balanced else "[red]no[/red]",
        )

    console.print()
    console.print(table)

    unbalanced = sum(1 for _, balance in results if not balance.is_balanced)
    if unbalanced:
        print_warning(f"{unbalanced} of {len(results)} entries are not balanced")
    else:
        print_success(f"All {len(results)} entries are balanced")


@app.command("check")
def check(
    ctx: typer.Context,
    path: Path = ENTRIES_ARGUMENT,
) -> None:
    """Report which journal entries could be posted and why others cannot."""
    config: CLIConfig = ctx.obj
    entries = _load_entries(path)

    if not entries:
        print_info("No journal entries found.")
        return

    table = Table(title="Posting Check")
    table.add_column("Entry", style="cyan")
    table.add_column("Lines", justify="right")
    table.add_column("Status")

    blocked = 0
    for i, entry in enumerate(entries):
        result = check_entry_postable(entry, tolerance=config.tolerance)
        if result.can_post:
            status = "[green]ready to post[/green]"
        else:
            blocked += 1
            status = "[red]" + "; ".join(result.problems) + "[/red]"
        table.add_row(_entry_label(entry, i), str(result.effective_lines), status)

    console.print()
    console.print(table)
    if blocked:
        print_warning(f"{blocked} of {len(entries)} entries cannot be posted")


@app.command("balance")
def balance(
    ctx: typer.Context,
    path: Path = ENTRIES_ARGUMENT,
    account_id: str = typer.Argument(..., help="Account id to show."),
    account_type: AccountType | None = typer.Option(
        None,
        "--type",
        "-t",
        help="Account type (default: taken from the journal lines).",
        case_sensitive=False,
    ),
    opening: str = typer.Option(
        "0",
        "--opening",
        help="Opening balance.",
    ),
) -> None:
    """Show an account's ledger with running balance.

    Example:
        ledger-reports journal balance entries.json cash --opening 1000
    """
    entries = _load_entries(path)

    try:
        opening_balance = Decimal(opening)
    except InvalidOperation:
        opening_balance = None
    if opening_balance is None or not opening_balance.is_finite():
        print_error(f"Invalid opening balance: {opening}")
        raise typer.Exit(1)

    rows: list[tuple[JournalEntry, int, JournalEntryLine]] = [
        (entry, i, line)
        for i, entry in enumerate(entries)
        for line in entry.lines
        if line.account_id == account_id
    ]

    if account_type is None:
        account_type = next((line.account_type for _, _, line in rows if line.account_type), None)
    if account_type is None:
        print_error(f"Cannot tell the type of account {account_id}; pass --type.")
        raise typer.Exit(1)

    if not rows:
        print_info(f"No activity found for account: {account_id}")

    name = next((line.account_name for _, _, line in rows if line.account_name), account_id)
    table = Table(title=f"Ledger: {name} ({account_type.value})")
    table.add_column("Date", style="cyan")
    table.add_column("Entry")
    table.add_column("Debit", justify="right", style="green")
    table.add_column("Credit", justify="right", style="red")
    table.add_column("Balance", justify="right", style="bold")

    running = opening_balance
    table.add_row("", "Opening balance", "", "", format_currency(running))
    for entry, i, line in rows:
        running += signed_delta(account_type, line.debit, line.credit)
        table.add_row(
            entry.entry_date.isoformat() if entry.entry_date else "",
            _entry_label(entry, i),
            format_currency(line.debit) if line.debit else "",
            format_currency(line.credit) if line.credit else "",
            format_currency(running),
        )

    final = calculate_account_balance(account_type, opening_balance, [line for _, _, line in rows])

    console.print()
    console.print(table)
    console.print()
    console.print(f"[bold]Final Balance: {format_currency(final)}[/bold]")
