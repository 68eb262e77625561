"""Profit & Loss aggregation across invoices, platforms and the ledger."""

import logging
from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from ledger_reports.models import (
    AccountType,
    Invoice,
    InvoiceType,
    JournalEntry,
    PlatformTransaction,
    ProfitLossReport,
    TransactionKind,
)
from ledger_reports.models.amounts import total

logger = logging.getLogger(__name__)

SALES_REVENUE = "Sales Revenue"
VENDOR_EXPENSES = "Vendor Expenses"
OTHER_REVENUE = "Other Revenue"
OPERATING_EXPENSES = "Operating Expenses"
UNNAMED_ACCOUNT = "Other"


def calculate_profit_loss(
    invoices: Iterable[Invoice] | None,
    platform_transactions: Iterable[PlatformTransaction] | None,
    journal_entries: Iterable[JournalEntry] | None,
) -> ProfitLossReport:
    """Build a P&L report from the three record sources.

    Invoices are recognized on a cash basis (``amount_paid``), platform
    transactions are bucketed by platform or expense category, and journal
    lines on Income/Expense accounts are netted so that reversing entries
    reduce their bucket.

    Any argument may be None, which reads as an empty collection.
    """
    revenue: dict[str, Decimal] = defaultdict(Decimal)
    expenses: dict[str, Decimal] = defaultdict(Decimal)

    for invoice in invoices or ():
        if invoice.invoice_type == InvoiceType.SALES:
            revenue[SALES_REVENUE] += invoice.amount_paid
        elif invoice.invoice_type == InvoiceType.PURCHASE:
            expenses[VENDOR_EXPENSES] += invoice.amount_paid

    for tx in platform_transactions or ():
        if tx.transaction_type == TransactionKind.REVENUE:
            revenue[tx.platform_name or OTHER_REVENUE] += tx.amount
        elif tx.transaction_type == TransactionKind.EXPENSE:
            expenses[tx.expense_category_name or OPERATING_EXPENSES] += tx.amount

    for entry in journal_entries or ():
        for line in entry.lines:
            name = line.account_name or UNNAMED_ACCOUNT
            if line.account_type == AccountType.INCOME:
                revenue[name] += line.credit - line.debit
            elif line.account_type == AccountType.EXPENSE:
                expenses[name] += line.debit - line.credit

    total_revenue = total(revenue.values())
    total_expenses = total(expenses.values())
    logger.debug(
        "P&L: %d revenue buckets (%s), %d expense buckets (%s)",
        len(revenue),
        total_revenue,
        len(expenses),
        total_expenses,
    )

    return ProfitLossReport(
        revenue=dict(revenue),
        expenses=dict(expenses),
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_profit=total_revenue - total_expenses,
    )
