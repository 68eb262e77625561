"""Reporting period presets."""

from datetime import date
from enum import StrEnum

from dateutil.relativedelta import relativedelta

from ledger_reports.models import DateRange


class ReportPeriod(StrEnum):
    """Named reporting periods offered by the report screens and CLI."""

    THIS_MONTH = "this-month"
    LAST_MONTH = "last-month"
    THIS_QUARTER = "this-quarter"
    LAST_QUARTER = "last-quarter"
    THIS_YEAR = "this-year"
    LAST_YEAR = "last-year"
    CUSTOM = "custom"


def _month_range(day: date) -> tuple[date, date]:
    start = day.replace(day=1)
    return start, start + relativedelta(months=1, days=-1)


def _quarter_range(day: date) -> tuple[date, date]:
    start = date(day.year, 3 * ((day.month - 1) // 3) + 1, 1)
    return start, start + relativedelta(months=3, days=-1)


def _year_range(day: date) -> tuple[date, date]:
    return date(day.year, 1, 1), date(day.year, 12, 31)


def resolve_period(
    period: ReportPeriod | str,
    *,
    start: date | None = None,
    end: date | None = None,
    today: date | None = None,
) -> DateRange:
    """Turn a period preset into an inclusive date range.

    Args:
        period: Preset name
        start: First day for ``custom`` (default: first day of this month)
        end: Last day for ``custom`` (default: last day of this month)
        today: Reference day (default: today)

    Raises:
        ValueError: If the preset is unknown or a custom range ends before it starts
    """
    period = ReportPeriod(period)
    today = today or date.today()

    match period:
        case ReportPeriod.THIS_MONTH:
            date_from, date_to = _month_range(today)
        case ReportPeriod.LAST_MONTH:
            date_from, date_to = _month_range(today - relativedelta(months=1))
        case ReportPeriod.THIS_QUARTER:
            date_from, date_to = _quarter_range(today)
        case ReportPeriod.LAST_QUARTER:
            date_from, date_to = _quarter_range(today - relativedelta(months=3))
        case ReportPeriod.THIS_YEAR:
            date_from, date_to = _year_range(today)
        case ReportPeriod.LAST_YEAR:
            date_from, date_to = _year_range(today - relativedelta(years=1))
        case ReportPeriod.CUSTOM:
            month_start, month_end = _month_range(today)
            date_from = start or month_start
            date_to = end or month_end

    if date_to < date_from:
        msg = f"Period ends ({date_to}) before it starts ({date_from})"
        raise ValueError(msg)

    return DateRange(date_from=date_from, date_to=date_to)
