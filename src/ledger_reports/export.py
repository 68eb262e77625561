"""CSV export of the financial statements (used for tax reporting)."""

import csv
import io
from datetime import date
from decimal import Decimal
from typing import Any

from ledger_reports.models import (
    BalanceSheetReport,
    DateRange,
    FinancialReport,
    ProfitLossReport,
)


def _amount(value: Decimal) -> str:
    return f"{value:.2f}"


def _as_of_label(day: date) -> str:
    return f"As of: {day:%b} {day.day}, {day.year}"


def _section(
    writer: Any, heading: str, rows: dict[str, Decimal], total_label: str, total: Decimal
) -> None:
    writer.writerow([heading, "Amount"])
    for name, amount in rows.items():
        writer.writerow([name, _amount(amount)])
    writer.writerow([total_label, _amount(total)])
    writer.writerow([])


def _write_profit_loss(writer: Any, pnl: ProfitLossReport) -> None:
    _section(writer, "Revenue", pnl.revenue, "Total Revenue", pnl.total_revenue)
    _section(writer, "Expenses", pnl.expenses, "Total Expenses", pnl.total_expenses)
    writer.writerow(["Net Profit", _amount(pnl.net_profit)])


def _write_balance_sheet(writer: Any, sheet: BalanceSheetReport) -> None:
    _section(writer, "Assets", sheet.assets, "Total Assets", sheet.total_assets)
    _section(writer, "Liabilities", sheet.liabilities, "Total Liabilities", sheet.total_liabilities)
    _section(writer, "Equity", sheet.equity, "Total Equity", sheet.total_equity)
    writer.writerow(
        ["Total Liabilities & Equity", _amount(sheet.total_liabilities_and_equity)]
    )


def _new_writer() -> tuple[io.StringIO, Any]:
    output = io.StringIO()
    return output, csv.writer(output, lineterminator="\n")


def export_profit_loss_csv(report: ProfitLossReport, *, period: DateRange | None = None) -> str:
    """Render the P&L alone: revenue and expense sections, then net profit."""
    output, writer = _new_writer()
    writer.writerow(["PROFIT & LOSS STATEMENT"])
    if period is not None:
        writer.writerow([f"Period: {period.label()}"])
    writer.writerow([])
    _write_profit_loss(writer, report)
    return output.getvalue()


def export_balance_sheet_csv(report: BalanceSheetReport, *, as_of: date | None = None) -> str:
    """Render the balance sheet alone: assets, liabilities, equity and the equation total."""
    output, writer = _new_writer()
    writer.writerow(["BALANCE SHEET"])
    if as_of is not None:
        writer.writerow([_as_of_label(as_of)])
    writer.writerow([])
    _write_balance_sheet(writer, report)
    return output.getvalue()


def export_financial_report_csv(
    report: FinancialReport, *, period: DateRange | None = None
) -> str:
    """Render the P&L and balance sheet as one CSV document.

    Args:
        report: Report to export
        period: Period to print in the headers (default: ``report.period``)

    Returns:
        CSV text with a ``PROFIT & LOSS STATEMENT`` and a ``BALANCE SHEET``
        section, amounts with two decimals.
    """
    period = period or report.period
    output, writer = _new_writer()

    writer.writerow(["Financial Report"])
    if period is not None:
        writer.writerow([f"Period: {period.label()}"])
    writer.writerow([])

    writer.writerow(["PROFIT & LOSS STATEMENT"])
    writer.writerow([])
    _write_profit_loss(writer, report.profit_loss)
    writer.writerow([])
    writer.writerow([])

    writer.writerow(["BALANCE SHEET"])
    if period is not None:
        writer.writerow([_as_of_label(period.date_to)])
    writer.writerow([])
    _write_balance_sheet(writer, report.balance_sheet)

    return output.getvalue()


def export_filename(period: DateRange | None) -> str:
    """Default file name for an exported report."""
    if period is None:
        return "financial-report.csv"
    return f"financial-report-{period.date_from.isoformat()}-to-{period.date_to.isoformat()}.csv"
