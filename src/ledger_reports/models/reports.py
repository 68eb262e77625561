"""Report models produced by the calculation engine."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from ledger_reports.models.amounts import ZERO


class ProfitLossReport(BaseModel):
    """Revenue and expenses by category for a period."""

    revenue: dict[str, Decimal] = Field(default_factory=dict)
    expenses: dict[str, Decimal] = Field(default_factory=dict)
    total_revenue: Decimal = Field(default=ZERO, alias="totalRevenue")
    total_expenses: Decimal = Field(default=ZERO, alias="totalExpenses")
    net_profit: Decimal = Field(default=ZERO, alias="netProfit")

    model_config = {"populate_by_name": True, "frozen": True}


class BalanceSheetReport(BaseModel):
    """Assets, liabilities and equity at a point in time."""

    assets: dict[str, Decimal] = Field(default_factory=dict)
    liabilities: dict[str, Decimal] = Field(default_factory=dict)
    equity: dict[str, Decimal] = Field(default_factory=dict)
    total_assets: Decimal = Field(default=ZERO, alias="totalAssets")
    total_liabilities: Decimal = Field(default=ZERO, alias="totalLiabilities")
    total_equity: Decimal = Field(default=ZERO, alias="totalEquity")
    is_balanced: bool = Field(default=True, alias="isBalanced")

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def total_liabilities_and_equity(self) -> Decimal:
        """Right-hand side of the accounting equation."""
        return self.total_liabilities + self.total_equity


class JournalBalance(BaseModel):
    """Debit/credit totals of one journal entry."""

    is_balanced: bool = Field(alias="isBalanced")
    total_debits: Decimal = Field(alias="totalDebits")
    total_credits: Decimal = Field(alias="totalCredits")
    difference: Decimal

    model_config = {"populate_by_name": True, "frozen": True}


class PostingCheck(BaseModel):
    """Outcome of the pre-posting checks for a journal entry."""

    balance: JournalBalance
    effective_lines: int = Field(alias="effectiveLines")
    problems: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def can_post(self) -> bool:
        """Return True if no problem blocks posting."""
        return not self.problems


class InvoiceAging(BaseModel):
    """Outstanding receivables bucketed by days overdue."""

    current: Decimal = Field(default=ZERO)
    days_30: Decimal = Field(default=ZERO, alias="days30")
    days_60: Decimal = Field(default=ZERO, alias="days60")
    days_90_plus: Decimal = Field(default=ZERO, alias="days90Plus")
    total: Decimal = Field(default=ZERO)

    model_config = {"populate_by_name": True, "frozen": True}


class DateRange(BaseModel):
    """Inclusive reporting period."""

    date_from: date = Field(alias="dateFrom")
    date_to: date = Field(alias="dateTo")

    model_config = {"populate_by_name": True, "frozen": True}

    def label(self) -> str:
        """Human-readable period, e.g. ``Jan 1, 2024 - Jan 31, 2024``."""
        return f"{_format_day(self.date_from)} - {_format_day(self.date_to)}"


def _format_day(day: date) -> str:
    return f"{day:%b} {day.day}, {day.year}"


class FinancialReport(BaseModel):
    """P&L and balance sheet generated together for one period."""

    profit_loss: ProfitLossReport = Field(alias="profitLoss")
    balance_sheet: BalanceSheetReport = Field(alias="balanceSheet")
    period: DateRange | None = Field(default=None)

    model_config = {"populate_by_name": True, "frozen": True}
