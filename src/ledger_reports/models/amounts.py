"""Monetary value types shared by the record models."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator

ZERO = Decimal("0")

BALANCE_TOLERANCE = Decimal("0.01")
"""Largest debit/credit or equation difference still treated as balanced."""


def coalesce_amount(value: Any) -> Any:
    """Treat a missing or empty monetary value as zero."""
    if value is None or value == "":
        return ZERO
    return value


Amount = Annotated[Decimal, BeforeValidator(coalesce_amount)]
"""Decimal amount where null/absent upstream values read as 0."""


def total(values: Any) -> Decimal:
    """Sum amounts as Decimal (an empty iterable sums to 0)."""
    return sum(values, ZERO)


def to_decimal(value: Decimal | float | int | str | None) -> Decimal:
    """Convert a loose numeric value to Decimal, reading None as 0.

    Floats go through ``str`` so ``33.33`` stays ``Decimal("33.33")``.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
