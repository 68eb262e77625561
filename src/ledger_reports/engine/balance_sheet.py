"""Balance sheet aggregation with retained earnings and equation check."""

import logging
from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from ledger_reports.engine.balances import signed_delta
from ledger_reports.models import (
    ZERO,
    Account,
    AccountType,
    BalanceSheetReport,
    Invoice,
    InvoiceType,
    JournalEntry,
    to_decimal,
)
from ledger_reports.models.amounts import BALANCE_TOLERANCE, total

logger = logging.getLogger(__name__)

ACCOUNTS_RECEIVABLE = "Accounts Receivable"
ACCOUNTS_PAYABLE = "Accounts Payable"
RETAINED_EARNINGS = "Retained Earnings"


def accumulate_account_deltas(
    journal_entries: Iterable[JournalEntry] | None,
) -> dict[str, Decimal]:
    """Sum the normal-balance movement of every account referenced by a line.

    Lines without an account id are skipped.
    """
    deltas: dict[str, Decimal] = defaultdict(Decimal)
    for entry in journal_entries or ():
        for line in entry.lines:
            if not line.account_id:
                continue
            deltas[line.account_id] += signed_delta(line.account_type, line.debit, line.credit)
    return dict(deltas)


def calculate_balance_sheet(
    invoices: Iterable[Invoice] | None,
    journal_entries: Iterable[JournalEntry] | None,
    accounts: Iterable[Account] | None,
    net_profit: Decimal | float | int | None,
    *,
    tolerance: Decimal = BALANCE_TOLERANCE,
) -> BalanceSheetReport:
    """Build a balance sheet and check Assets = Liabilities + Equity.

    Args:
        invoices: Open invoices; unpaid amounts become receivables/payables
        journal_entries: Posted journal entries
        accounts: Chart of accounts with opening balances
        net_profit: Net profit for the period, folded into retained earnings
        tolerance: Largest difference still treated as balanced

    Returns:
        BalanceSheetReport. Accounts whose balance is exactly zero are omitted.
    """
    net_profit = to_decimal(net_profit)
    assets: dict[str, Decimal] = {}
    liabilities: dict[str, Decimal] = {}
    equity: dict[str, Decimal] = {}

    receivable = ZERO
    payable = ZERO
    for invoice in invoices or ():
        if invoice.invoice_type == InvoiceType.SALES:
            receivable += invoice.amount_due
        elif invoice.invoice_type == InvoiceType.PURCHASE:
            payable += invoice.amount_due
    if receivable > 0:
        assets[ACCOUNTS_RECEIVABLE] = receivable
    if payable > 0:
        liabilities[ACCOUNTS_PAYABLE] = payable

    deltas = accumulate_account_deltas(journal_entries)

    for account in accounts or ():
        balance = deltas.get(account.id, ZERO) + account.opening_balance
        if balance == 0:
            continue
        match account.account_type:
            case AccountType.ASSET:
                assets[account.account_name] = balance
            case AccountType.LIABILITY:
                liabilities[account.account_name] = balance
            case AccountType.EQUITY:
                equity[account.account_name] = balance
            case AccountType.INCOME | AccountType.EXPENSE:
                # Closed into retained earnings through net_profit
                pass

    if net_profit != 0:
        equity[RETAINED_EARNINGS] = equity.get(RETAINED_EARNINGS, ZERO) + net_profit

    total_assets = total(assets.values())
    total_liabilities = total(liabilities.values())
    total_equity = total(equity.values())
    is_balanced = abs(total_assets - (total_liabilities + total_equity)) < tolerance

    if not is_balanced:
        logger.warning(
            "Balance sheet out of balance: assets=%s liabilities+equity=%s",
            total_assets,
            total_liabilities + total_equity,
        )

    return BalanceSheetReport(
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        total_equity=total_equity,
        is_balanced=is_balanced,
    )
