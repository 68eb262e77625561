"""Currency formatting."""

from decimal import ROUND_HALF_UP, Decimal

from ledger_reports.models import to_decimal

CENT = Decimal("0.01")


def format_currency(amount: Decimal | float | int | None) -> str:
    """Format an amount as US dollars, e.g. ``$1,234.56`` or ``-$500.00``."""
    value = to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${abs(value):,.2f}"
