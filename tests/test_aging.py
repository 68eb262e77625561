"""Tests for receivables aging."""

from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from ledger_reports.engine import calculate_invoice_aging, days_overdue
from ledger_reports.models import Invoice, InvoiceType

AS_OF = date(2024, 1, 31)


def due_on(due: date | datetime | None, amount: str = "500") -> Invoice:
    return Invoice(invoice_type=InvoiceType.SALES, amount_due=Decimal(amount), due_date=due)


class TestDaysOverdue:
    """Tests for days_overdue."""

    def test_whole_days_between_dates(self) -> None:
        """Dates should be compared as midnight UTC."""
        assert days_overdue(date(2024, 1, 1), AS_OF) == 30

    def test_not_yet_due_is_negative(self) -> None:
        """A future due date should give a negative count."""
        assert days_overdue(date(2024, 2, 5), AS_OF) == -5

    def test_partial_day_is_floored(self) -> None:
        """Elapsed time should be floored to whole days."""
        due = datetime(2024, 1, 1, 18, 0, tzinfo=UTC)

        assert days_overdue(due, datetime(2024, 1, 2, 17, 59, tzinfo=UTC)) == 0
        assert days_overdue(due, datetime(2024, 1, 2, 18, 0, tzinfo=UTC)) == 1

    def test_floor_rounds_down_for_future_times(self) -> None:
        """A due time a few hours ahead should count as -1 day."""
        assert days_overdue(datetime(2024, 1, 31, 6, 0, tzinfo=UTC), AS_OF) == -1

    def test_naive_datetime_is_utc(self) -> None:
        """A naive datetime should be read as UTC."""
        naive = datetime(2024, 1, 1)
        aware = datetime(2024, 1, 1, tzinfo=UTC)

        assert days_overdue(naive, AS_OF) == days_overdue(aware, AS_OF)

    def test_offset_datetime_is_converted(self) -> None:
        """An aware datetime in another zone should compare by instant."""
        due = datetime(2024, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=-5)))

        # 05:00 UTC on Jan 1, so Jan 31 00:00 UTC is 29 days and 19 hours later
        assert days_overdue(due, AS_OF) == 29


class TestCalculateInvoiceAging:
    """Tests for calculate_invoice_aging buckets."""

    def test_thirty_days_overdue(self) -> None:
        """An invoice 30 days past due should land in days_30."""
        aging = calculate_invoice_aging([due_on(date(2024, 1, 1))], AS_OF)

        assert aging.days_30 == Decimal("500")
        assert aging.days_60 == Decimal("0")
        assert aging.total == Decimal("500")

    @pytest.mark.parametrize(
        ("days", "bucket"),
        [
            (-10, "current"),
            (0, "current"),
            (1, "days_30"),
            (30, "days_30"),
            (31, "days_60"),
            (60, "days_60"),
            (61, "days_90_plus"),
            (365, "days_90_plus"),
        ],
    )
    def test_bucket_boundaries(self, days: int, bucket: str) -> None:
        """Each overdue count should fall in exactly one bucket."""
        aging = calculate_invoice_aging([due_on(AS_OF - timedelta(days=days))], AS_OF)

        buckets = {
            "current": aging.current,
            "days_30": aging.days_30,
            "days_60": aging.days_60,
            "days_90_plus": aging.days_90_plus,
        }
        assert buckets.pop(bucket) == Decimal("500")
        assert all(amount == 0 for amount in buckets.values())

    def test_missing_due_date_is_oldest_bucket(self) -> None:
        """An invoice without a due date should be aged as 90+."""
        aging = calculate_invoice_aging([due_on(None, "80")], AS_OF)

        assert aging.days_90_plus == Decimal("80")
        assert aging.total == Decimal("80")

    def test_total_covers_all_buckets(self) -> None:
        """Total should equal the sum of the four buckets."""
        invoices = [
            due_on(date(2024, 2, 15), "100"),
            due_on(date(2024, 1, 20), "200"),
            due_on(date(2023, 12, 15), "300"),
            due_on(date(2023, 6, 1), "400"),
        ]

        aging = calculate_invoice_aging(invoices, AS_OF)

        assert aging.current == Decimal("100")
        assert aging.days_30 == Decimal("200")
        assert aging.days_60 == Decimal("300")
        assert aging.days_90_plus == Decimal("400")
        assert aging.total == Decimal("1000")
        assert aging.total == aging.current + aging.days_30 + aging.days_60 + aging.days_90_plus

    def test_defaults_to_now(self) -> None:
        """Without as_of the aging should be relative to the current time."""
        aging = calculate_invoice_aging([due_on(date.today() + timedelta(days=2))])

        assert aging.current == Decimal("500")

    def test_empty_input(self) -> None:
        """No invoices should give all-zero buckets."""
        aging = calculate_invoice_aging(None, AS_OF)

        assert aging.total == Decimal("0")
        assert aging.current == Decimal("0")

    def test_as_of_accepts_datetime(self) -> None:
        """A datetime reference should be accepted alongside dates."""
        aging = calculate_invoice_aging(
            [due_on(date(2024, 1, 1))], datetime(2024, 1, 31, 12, 0, tzinfo=UTC)
        )

        assert aging.days_30 == Decimal("500")


class TestParsedDueDates:
    """Tests for aging invoices parsed from backend rows."""

    def test_offset_timestamp_keeps_its_offset(self) -> None:
        """A midnight due time at -05:00 is 05:00 UTC, so 21 hours later is still current."""
        invoice = Invoice.model_validate(
            {"invoice_type": "sales", "amount_due": "500", "due_date": "2024-01-31T00:00:00-05:00"}
        )

        aging = calculate_invoice_aging([invoice], datetime(2024, 2, 1, 2, 0, tzinfo=UTC))

        assert aging.current == Decimal("500")
        assert aging.days_30 == Decimal("0")

    def test_utc_timestamp(self) -> None:
        """A Z-suffixed timestamp should age from its exact instant."""
        invoice = Invoice.model_validate(
            {"invoice_type": "sales", "amount_due": "500", "due_date": "2024-01-01T12:00:00Z"}
        )

        aging = calculate_invoice_aging([invoice], datetime(2024, 1, 31, 11, 0, tzinfo=UTC))

        # 29 days and 23 hours
        assert aging.days_30 == Decimal("500")
        assert days_overdue(invoice.due_date, datetime(2024, 1, 31, 11, 0, tzinfo=UTC)) == 29

    def test_bare_date_string(self) -> None:
        """A bare date string should age from midnight UTC."""
        invoice = Invoice.model_validate(
            {"invoice_type": "sales", "amount_due": "500", "due_date": "2024-01-01"}
        )

        aging = calculate_invoice_aging([invoice], AS_OF)

        assert aging.days_30 == Decimal("500")
