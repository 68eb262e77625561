"""Financial reports for a double-entry ledger.

Pure, typed calculations (profit & loss, balance sheet, journal checks,
account balances, receivables aging) plus an async client that pulls the
records from a PostgREST backend.

Example:
    from ledger_reports import LedgerClient, build_financial_report, resolve_period

    period = resolve_period("this-month")

    # Fetch records from the backend (SUPABASE_URL / SUPABASE_KEY)
    async with LedgerClient.from_env() as client:
        inputs = await client.fetch_report_inputs(period)

    report = build_financial_report(inputs, period)
    print(report.profit_loss.net_profit, report.balance_sheet.is_balanced)

    # Or run the calculations directly on records you already have
    pl = calculate_profit_loss(invoices, transactions, journal_lines)
    aging = calculate_invoice_aging(outstanding_invoices)
"""

from ledger_reports.client import LedgerClient
from ledger_reports.config import SourceConfig
from ledger_reports.engine import (
    ReportInputs,
    build_financial_report,
    calculate_account_balance,
    calculate_balance_sheet,
    calculate_invoice_aging,
    calculate_profit_loss,
    check_entry_postable,
    format_currency,
    next_entry_number,
    validate_journal_entry_balance,
)
from ledger_reports.exceptions import (
    ConfigError,
    InputFileError,
    LedgerReportsError,
    RecordValidationError,
    SourceAuthError,
    SourceError,
    SourceRateLimitError,
)
from ledger_reports.export import (
    export_balance_sheet_csv,
    export_financial_report_csv,
    export_profit_loss_csv,
)
from ledger_reports.periods import ReportPeriod, resolve_period

__version__ = "0.1.0"

__all__ = [
    # Calculations
    "ReportInputs",
    "build_financial_report",
    "calculate_account_balance",
    "calculate_balance_sheet",
    "calculate_invoice_aging",
    "calculate_profit_loss",
    "check_entry_postable",
    "export_balance_sheet_csv",
    "export_financial_report_csv",
    "export_profit_loss_csv",
    "format_currency",
    "next_entry_number",
    "validate_journal_entry_balance",
    # Periods
    "ReportPeriod",
    "resolve_period",
    # Backend client
    "LedgerClient",
    "SourceConfig",
    # Exceptions
    "ConfigError",
    "InputFileError",
    "LedgerReportsError",
    "RecordValidationError",
    "SourceAuthError",
    "SourceError",
    "SourceRateLimitError",
]
