"""Profit & loss and balance sheet commands."""

from datetime import date
from pathlib import Path

import typer

from ledger_reports.cli.async_runner import async_command
from ledger_reports.cli.client_factory import get_client
from ledger_reports.cli.config import CLIConfig, OutputFormat
from ledger_reports.cli.formatters import (
    amount_style,
    amounts_table,
    console,
    format_output,
    print_csv,
    print_error,
    print_success,
    print_warning,
)
from ledger_reports.engine import (
    ReportInputs,
    build_financial_report,
    calculate_profit_loss,
    format_currency,
)
from ledger_reports.export import (
    export_balance_sheet_csv,
    export_filename,
    export_financial_report_csv,
    export_profit_loss_csv,
)
from ledger_reports.inputs import load_inputs
from ledger_reports.models import BalanceSheetReport, DateRange, ProfitLossReport
from ledger_reports.periods import ReportPeriod, resolve_period

app = typer.Typer(no_args_is_help=True)

INPUT_OPTION = typer.Option(
    None,
    "--input",
    "-i",
    help="JSON file with invoices, platform_transactions, journal_entries and accounts.",
    exists=True,
    dir_okay=False,
)
PERIOD_OPTION = typer.Option(
    None,
    "--period",
    "-p",
    help="Reporting period preset (default: this-month).",
)
FROM_OPTION = typer.Option(None, "--from", help="Start date (YYYY-MM-DD).")
TO_OPTION = typer.Option(None, "--to", help="End date (YYYY-MM-DD).")
OUTPUT_OPTION = typer.Option(OutputFormat.TABLE, "--output", "-o", help="Output format.")


def _parse_date(value: str | None, label: str) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        print_error(f"Invalid {label} date format. Use YYYY-MM-DD.")
        raise typer.Exit(1) from None


def _resolve_cli_period(
    period: ReportPeriod | None,
    from_date: str | None,
    to_date: str | None,
) -> DateRange | None:
    """Resolve the period options; None when none of them was given."""
    start = _parse_date(from_date, "from")
    end = _parse_date(to_date, "to")

    if start or end:
        if period not in (None, ReportPeriod.CUSTOM):
            print_error("Options --period and --from/--to are mutually exclusive.")
            raise typer.Exit(1)
        period = ReportPeriod.CUSTOM

    if period is None:
        return None

    try:
        return resolve_period(period, start=start, end=end)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1) from None


async def _gather_inputs(
    config: CLIConfig,
    input_path: Path | None,
    period: DateRange | None,
) -> tuple[ReportInputs, DateRange | None]:
    """Read records from the input file, or fetch them for the period.

    File records are used as given; the period then only labels the report.
    """
    if input_path is not None:
        return load_inputs(input_path), period

    period = period or resolve_period(ReportPeriod.THIS_MONTH)
    async with get_client(config) as client:
        return await client.fetch_report_inputs(period), period


def _print_profit_loss(report: ProfitLossReport, period: DateRange | None) -> None:
    title = "Profit & Loss"
    if period is not None:
        title += f" ({period.label()})"
    console.print()
    console.print(
        amounts_table(
            title,
            [
                ("Revenue", report.revenue, report.total_revenue),
                ("Expenses", report.expenses, report.total_expenses),
            ],
        )
    )
    style = amount_style(report.net_profit)
    console.print(
        f"[bold]Net Profit:[/bold] [{style}]{format_currency(report.net_profit)}[/{style}]"
    )


def _print_balance_sheet(report: BalanceSheetReport, period: DateRange | None) -> None:
    title = "Balance Sheet"
    if period is not None:
        day = period.date_to
        title += f" (as of {day:%b} {day.day}, {day.year})"
    console.print()
    console.print(
        amounts_table(
            title,
            [
                ("Assets", report.assets, report.total_assets),
                ("Liabilities", report.liabilities, report.total_liabilities),
                ("Equity", report.equity, report.total_equity),
            ],
        )
    )
    rhs = format_currency(report.total_liabilities_and_equity)
    console.print(f"[bold]Total Liabilities & Equity:[/bold] {rhs}")
    if report.is_balanced:
        print_success("Balance sheet is balanced")
    else:
        print_warning(
            "Balance sheet is not balanced - "
            f"Assets: {format_currency(report.total_assets)}, "
            f"Liabilities + Equity: {rhs}"
        )


@app.command("pnl")
@async_command
async def profit_loss(
    ctx: typer.Context,
    input_path: Path | None = INPUT_OPTION,
    period: ReportPeriod | None = PERIOD_OPTION,
    from_date: str | None = FROM_OPTION,
    to_date: str | None = TO_OPTION,
    output: OutputFormat = OUTPUT_OPTION,
) -> None:
    """Show the profit & loss statement."""
    config: CLIConfig = ctx.obj
    inputs, resolved = await _gather_inputs(
        config, input_path, _resolve_cli_period(period, from_date, to_date)
    )
    report = calculate_profit_loss(
        inputs.invoices, inputs.platform_transactions, inputs.journal_entries
    )

    match output:
        case OutputFormat.TABLE:
            _print_profit_loss(report, resolved)
        case OutputFormat.CSV:
            print_csv(export_profit_loss_csv(report, period=resolved))
        case OutputFormat.JSON:
            format_output(report, output)


@app.command("balance-sheet")
@async_command
async def balance_sheet(
    ctx: typer.Context,
    input_path: Path | None = INPUT_OPTION,
    period: ReportPeriod | None = PERIOD_OPTION,
    from_date: str | None = FROM_OPTION,
    to_date: str | None = TO_OPTION,
    output: OutputFormat = OUTPUT_OPTION,
) -> None:
    """Show the balance sheet, with the period's net profit as retained earnings."""
    config: CLIConfig = ctx.obj
    inputs, resolved = await _gather_inputs(
        config, input_path, _resolve_cli_period(period, from_date, to_date)
    )
    report = build_financial_report(inputs, resolved, tolerance=config.tolerance)

    match output:
        case OutputFormat.TABLE:
            _print_balance_sheet(report.balance_sheet, resolved)
        case OutputFormat.CSV:
            as_of = resolved.date_to if resolved else None
            print_csv(export_balance_sheet_csv(report.balance_sheet, as_of=as_of))
        case OutputFormat.JSON:
            format_output(report.balance_sheet, output)


@app.command("summary")
@async_command
async def summary(
    ctx: typer.Context,
    input_path: Path | None = INPUT_OPTION,
    period: ReportPeriod | None = PERIOD_OPTION,
    from_date: str | None = FROM_OPTION,
    to_date: str | None = TO_OPTION,
    output: OutputFormat = OUTPUT_OPTION,
) -> None:
    """Show the profit & loss statement and the balance sheet together."""
    config: CLIConfig = ctx.obj
    inputs, resolved = await _gather_inputs(
        config, input_path, _resolve_cli_period(period, from_date, to_date)
    )
    report = build_financial_report(inputs, resolved, tolerance=config.tolerance)

    match output:
        case OutputFormat.TABLE:
            _print_profit_loss(report.profit_loss, resolved)
            _print_balance_sheet(report.balance_sheet, resolved)
        case OutputFormat.CSV:
            print_csv(export_financial_report_csv(report))
        case OutputFormat.JSON:
            format_output(report, output)


@app.command("export")
@async_command
async def export(
    ctx: typer.Context,
    input_path: Path | None = INPUT_OPTION,
    period: ReportPeriod | None = PERIOD_OPTION,
    from_date: str | None = FROM_OPTION,
    to_date: str | None = TO_OPTION,
    out: Path | None = typer.Option(
        None,
        "--out",
        help="Destination file ('-' for stdout; default: financial-report-<from>-to-<to>.csv).",
    ),
) -> None:
    """Export the financial report as CSV for tax reporting."""
    config: CLIConfig = ctx.obj
    inputs, resolved = await _gather_inputs(
        config, input_path, _resolve_cli_period(period, from_date, to_date)
    )
    report = build_financial_report(inputs, resolved, tolerance=config.tolerance)
    content = export_financial_report_csv(report)

    if out is not None and str(out) == "-":
        print_csv(content)
        return

    destination = out or Path(export_filename(resolved))
    destination.write_text(content)
    print_success(f"Report exported to {destination}")
