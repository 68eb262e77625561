"""General-ledger journal models."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from ledger_reports.models.accounts import AccountType, LineAccount
from ledger_reports.models.amounts import ZERO, Amount


class Movement(BaseModel):
    """A bare debit/credit pair applied to a single account."""

    debit: Amount = Field(default=ZERO)
    credit: Amount = Field(default=ZERO)

    model_config = {"frozen": True}


class JournalEntryLine(Movement):
    """One debit or credit line of a journal entry."""

    account_id: str | None = Field(default=None)
    account: LineAccount | None = Field(default=None, alias="accounts")
    id: str | None = Field(default=None)
    description: str | None = Field(default=None)

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def account_type(self) -> AccountType | None:
        """Get the type of the embedded account, if known."""
        return self.account.account_type if self.account else None

    @property
    def account_name(self) -> str | None:
        """Get the name of the embedded account, if known."""
        return self.account.account_name if self.account else None


class JournalEntry(BaseModel):
    """A formal double-entry posting made of several lines.

    Debits should equal credits; that is checked by
    :func:`ledger_reports.engine.validate_journal_entry_balance`, not here.
    """

    lines: list[JournalEntryLine] = Field(
        default_factory=list, alias="journal_entry_lines"
    )
    id: str | None = Field(default=None)
    entry_number: str | None = Field(default=None)
    entry_date: date | None = Field(default=None)
    status: str | None = Field(default=None)
    reference_number: str | None = Field(default=None)
    notes: str | None = Field(default=None)

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("lines", mode="before")
    @classmethod
    def parse_lines(cls, v: object) -> object:
        """Treat a null line list as empty."""
        return [] if v is None else v

    @property
    def is_posted(self) -> bool:
        """Return True if the entry has already been posted."""
        return (self.status or "").lower() == "posted"
