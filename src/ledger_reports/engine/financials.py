"""Combined P&L and balance sheet generation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from ledger_reports.engine.balance_sheet import calculate_balance_sheet
from ledger_reports.engine.profit_loss import calculate_profit_loss
from ledger_reports.models import (
    BALANCE_TOLERANCE,
    Account,
    DateRange,
    FinancialReport,
    Invoice,
    JournalEntry,
    PlatformTransaction,
)


@dataclass(frozen=True, slots=True)
class ReportInputs:
    """Already-fetched records for one report run."""

    invoices: tuple[Invoice, ...] = field(default=())
    platform_transactions: tuple[PlatformTransaction, ...] = field(default=())
    journal_entries: tuple[JournalEntry, ...] = field(default=())
    accounts: tuple[Account, ...] = field(default=())

    @classmethod
    def of(
        cls,
        *,
        invoices: Iterable[Invoice] | None = None,
        platform_transactions: Iterable[PlatformTransaction] | None = None,
        journal_entries: Iterable[JournalEntry] | None = None,
        accounts: Iterable[Account] | None = None,
    ) -> ReportInputs:
        """Build inputs from any iterables (None reads as empty)."""
        return cls(
            invoices=tuple(invoices or ()),
            platform_transactions=tuple(platform_transactions or ()),
            journal_entries=tuple(journal_entries or ()),
            accounts=tuple(accounts or ()),
        )


def build_financial_report(
    inputs: ReportInputs,
    period: DateRange | None = None,
    *,
    tolerance: Decimal = BALANCE_TOLERANCE,
) -> FinancialReport:
    """Generate the P&L, then the balance sheet with its net profit folded in."""
    profit_loss = calculate_profit_loss(
        inputs.invoices,
        inputs.platform_transactions,
        inputs.journal_entries,
    )
    balance_sheet = calculate_balance_sheet(
        inputs.invoices,
        inputs.journal_entries,
        inputs.accounts,
        profit_loss.net_profit,
        tolerance=tolerance,
    )
    return FinancialReport(
        profit_loss=profit_loss,
        balance_sheet=balance_sheet,
        period=period,
    )
