"""Pure financial calculations over already-fetched ledger records.

Every function here is synchronous and side-effect free: it reads its
arguments, allocates a fresh result and keeps no state between calls.
"""

from ledger_reports.engine.aging import calculate_invoice_aging, days_overdue
from ledger_reports.engine.balance_sheet import (
    accumulate_account_deltas,
    calculate_balance_sheet,
)
from ledger_reports.engine.balances import calculate_account_balance, signed_delta
from ledger_reports.engine.financials import ReportInputs, build_financial_report
from ledger_reports.engine.formatting import format_currency
from ledger_reports.engine.journal import (
    check_entry_postable,
    next_entry_number,
    validate_journal_entry_balance,
)
from ledger_reports.engine.profit_loss import calculate_profit_loss

__all__ = [
    "ReportInputs",
    "accumulate_account_deltas",
    "build_financial_report",
    "calculate_account_balance",
    "calculate_balance_sheet",
    "calculate_invoice_aging",
    "calculate_profit_loss",
    "check_entry_postable",
    "days_overdue",
    "format_currency",
    "next_entry_number",
    "signed_delta",
    "validate_journal_entry_balance",
]
