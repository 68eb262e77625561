"""Invoice models."""

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from ledger_reports.models.amounts import ZERO, Amount


class InvoiceType(StrEnum):
    """Invoice direction."""

    SALES = "sales"
    PURCHASE = "purchase"


class Invoice(BaseModel):
    """Projection of a customer (sales) or vendor (purchase) bill.

    ``amount_paid`` is the cash already realized; ``amount_due`` is what is
    still outstanding.
    """

    invoice_type: InvoiceType
    amount_paid: Amount = Field(default=ZERO)
    amount_due: Amount = Field(default=ZERO)
    id: str | None = Field(default=None)
    invoice_number: str | None = Field(default=None)
    invoice_date: date | None = Field(default=None)
    due_date: date | datetime | None = Field(default=None)
    status: str | None = Field(default=None)

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, v: object) -> object:
        """Keep timestamps, with their UTC offset, as datetimes.

        Only a bare ``YYYY-MM-DD`` string becomes a date; an empty string
        reads as no due date.
        """
        if isinstance(v, str):
            text = v.strip()
            if not text:
                return None
            if len(text) > len("YYYY-MM-DD"):
                return datetime.fromisoformat(text)
            return date.fromisoformat(text)
        return v
