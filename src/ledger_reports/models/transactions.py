"""Platform transaction models."""

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, Field

from ledger_reports.models.amounts import ZERO, Amount


class TransactionKind(StrEnum):
    """Whether a platform transaction earns or spends money."""

    REVENUE = "revenue"
    EXPENSE = "expense"


class PlatformRef(BaseModel):
    """Sales platform embedded in a transaction."""

    name: str | None = Field(default=None)
    platform_type: str | None = Field(default=None)

    model_config = {"frozen": True}


class ExpenseCategoryRef(BaseModel):
    """Expense category embedded in a transaction."""

    name: str | None = Field(default=None)
    category_code: str | None = Field(default=None)

    model_config = {"frozen": True}


class PlatformTransaction(BaseModel):
    """A ledger-less transaction reported by a third-party sales platform."""

    transaction_type: TransactionKind
    amount: Amount = Field(default=ZERO)
    platform: PlatformRef | None = Field(default=None, alias="platforms")
    expense_category: ExpenseCategoryRef | None = Field(
        default=None, alias="expense_categories"
    )
    id: str | None = Field(default=None)
    transaction_date: date | None = Field(default=None)
    description: str | None = Field(default=None)

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def platform_name(self) -> str | None:
        """Get the platform name, if the platform was embedded."""
        return self.platform.name if self.platform else None

    @property
    def expense_category_name(self) -> str | None:
        """Get the expense category name, if one was embedded."""
        return self.expense_category.name if self.expense_category else None
