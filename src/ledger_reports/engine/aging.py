"""Receivables aging buckets."""

import logging
import math
from collections.abc import Iterable
from datetime import UTC, date, datetime, time

from ledger_reports.models import ZERO, Invoice, InvoiceAging

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

# Upper bounds (inclusive) in days overdue
CURRENT_MAX_DAYS = 0
DAYS_30_MAX = 30
DAYS_60_MAX = 60


def _as_utc(value: date | datetime) -> datetime:
    """Interpret a date as midnight UTC and a naive datetime as UTC."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    return datetime.combine(value, time.min, tzinfo=UTC)


def days_overdue(due_date: date | datetime, as_of: date | datetime) -> int:
    """Whole days elapsed since ``due_date``, floored (negative if not yet due)."""
    elapsed = _as_utc(as_of) - _as_utc(due_date)
    return math.floor(elapsed.total_seconds() / SECONDS_PER_DAY)


def calculate_invoice_aging(
    invoices: Iterable[Invoice] | None,
    as_of: date | datetime | None = None,
) -> InvoiceAging:
    """Bucket outstanding amounts by how far past due they are.

    Buckets are mutually exclusive: due today or later is ``current``,
    1-30 days is ``days_30``, 31-60 is ``days_60`` and anything older,
    including an invoice with no due date, is ``days_90_plus``. ``total``
    covers every invoice.

    Args:
        invoices: Invoices with ``amount_due`` and ``due_date``
        as_of: Reference point (default: now, UTC)
    """
    reference = as_of if as_of is not None else datetime.now(UTC)
    current = days_30 = days_60 = days_90_plus = total = ZERO

    for invoice in invoices or ():
        amount = invoice.amount_due
        total += amount

        if invoice.due_date is None:
            logger.debug("Invoice %s has no due date; aged as 90+", invoice.id)
            days_90_plus += amount
            continue

        overdue = days_overdue(invoice.due_date, reference)
        if overdue <= CURRENT_MAX_DAYS:
            current += amount
        elif overdue <= DAYS_30_MAX:
            days_30 += amount
        elif overdue <= DAYS_60_MAX:
            days_60 += amount
        else:
            days_90_plus += amount

    return InvoiceAging(
        current=current,
        days_30=days_30,
        days_60=days_60,
        days_90_plus=days_90_plus,
        total=total,
    )
