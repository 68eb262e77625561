"""Pydantic models for ledger records and derived reports."""

from ledger_reports.models.accounts import Account, AccountType, BalanceSide, LineAccount
from ledger_reports.models.amounts import BALANCE_TOLERANCE, ZERO, Amount, to_decimal
from ledger_reports.models.invoices import Invoice, InvoiceType
from ledger_reports.models.journal import JournalEntry, JournalEntryLine, Movement
from ledger_reports.models.reports import (
    BalanceSheetReport,
    DateRange,
    FinancialReport,
    InvoiceAging,
    JournalBalance,
    PostingCheck,
    ProfitLossReport,
)
from ledger_reports.models.transactions import (
    ExpenseCategoryRef,
    PlatformRef,
    PlatformTransaction,
    TransactionKind,
)

__all__ = [
    # Amounts
    "Amount",
    "BALANCE_TOLERANCE",
    "ZERO",
    "to_decimal",
    # Account models
    "Account",
    "AccountType",
    "BalanceSide",
    "LineAccount",
    # Invoice models
    "Invoice",
    "InvoiceType",
    # Journal models
    "JournalEntry",
    "JournalEntryLine",
    "Movement",
    # Platform transaction models
    "ExpenseCategoryRef",
    "PlatformRef",
    "PlatformTransaction",
    "TransactionKind",
    # Reports
    "BalanceSheetReport",
    "DateRange",
    "FinancialReport",
    "InvoiceAging",
    "JournalBalance",
    "PostingCheck",
    "ProfitLossReport",
]
