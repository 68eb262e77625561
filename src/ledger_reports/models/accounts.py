"""Chart-of-accounts models."""

from enum import StrEnum
from typing import assert_never

from pydantic import BaseModel, Field

from ledger_reports.models.amounts import ZERO, Amount


class BalanceSide(StrEnum):
    """Side of a posting that increases an account."""

    DEBIT = "debit"
    CREDIT = "credit"


class AccountType(StrEnum):
    """Classification of accounts in double-entry bookkeeping.

    Debit increases: ASSET, EXPENSE
    Credit increases: LIABILITY, EQUITY, INCOME
    """

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    INCOME = "Income"
    EXPENSE = "Expense"

    @property
    def normal_balance(self) -> BalanceSide:
        """Return the side that increases accounts of this type."""
        match self:
            case AccountType.ASSET | AccountType.EXPENSE:
                return BalanceSide.DEBIT
            case AccountType.LIABILITY | AccountType.EQUITY | AccountType.INCOME:
                return BalanceSide.CREDIT
            case _:
                assert_never(self)

    def increases_with_debit(self) -> bool:
        """Return True if debits increase this account type's balance."""
        return self.normal_balance is BalanceSide.DEBIT

    def increases_with_credit(self) -> bool:
        """Return True if credits increase this account type's balance."""
        return self.normal_balance is BalanceSide.CREDIT


class Account(BaseModel):
    """A row from the chart of accounts.

    The running balance is never stored here; it is derived from
    ``opening_balance`` plus journal activity.
    """

    id: str
    account_name: str
    account_type: AccountType
    opening_balance: Amount = Field(default=ZERO)
    account_number: str | None = Field(default=None)
    account_subtype: str | None = Field(default=None)
    is_active: bool = Field(default=True)

    model_config = {"populate_by_name": True, "frozen": True}


class LineAccount(BaseModel):
    """Account details embedded in a journal entry line."""

    id: str | None = Field(default=None)
    account_number: str | None = Field(default=None)
    account_name: str | None = Field(default=None)
    account_type: AccountType | None = Field(default=None)
    account_subtype: str | None = Field(default=None)

    model_config = {"populate_by_name": True, "frozen": True}
