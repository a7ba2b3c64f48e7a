"""Date helpers for reporting periods and month windows."""

import calendar
from datetime import date, datetime, time, timezone
from logging import Logger
import re

from src.domain.constants import HISTORY_MONTHS, MONTH_LABELS
from src.domain.models import MonthWindow, ReportingPeriod

_ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}")


def as_naive_utc(moment: datetime) -> datetime:
    """Return a naive datetime expressed in UTC.

    Naive values are assumed to already be UTC, which is how the ledger
    stores timestamps.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def utc_day_key(moment: datetime) -> str:
    """Return the ``YYYY-MM-DD`` key of a timestamp in UTC."""
    return as_naive_utc(moment).date().isoformat()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def month_label(month: int) -> str:
    """Return the French abbreviation for a calendar month (1-12)."""
    return MONTH_LABELS[month - 1]


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move a (year, month) pair by ``offset`` months."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """Return the first and last instants of a calendar month."""
    last_day = calendar.monthrange(year, month)[1]
    return (
        start_of_day(date(year, month, 1)),
        end_of_day(date(year, month, last_day)),
    )


def year_start(today: date) -> datetime:
    """Return January 1st of ``today``'s year at midnight."""
    return start_of_day(date(today.year, 1, 1))


def parse_iso_date(value) -> date | None:
    """Parse a ``YYYY-MM-DD`` value.

    Args:
        value: String, date or datetime. Anything else is rejected.

    Returns:
        date | None: Parsed date, or None when missing or malformed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _ISO_DAY.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def current_month_period(today: date) -> ReportingPeriod:
    """Return the calendar month containing ``today``."""
    start, end = month_bounds(today.year, today.month)
    return ReportingPeriod(start=start, end=end, is_default=True)


def resolve_reporting_period(
    from_value,
    to_value,
    today: date,
    logger: Logger | None = None,
) -> ReportingPeriod:
    """Resolve the dashboard period from optional query values.

    Both bounds must be present and parseable; otherwise the current month
    is returned. Reversed bounds are swapped.

    Args:
        from_value: Raw ``from`` value (``YYYY-MM-DD``).
        to_value: Raw ``to`` value (``YYYY-MM-DD``).
        today: Reference day for the fallback month.
        logger: Optional logger for malformed input.

    Returns:
        ReportingPeriod: Inclusive period, end of day included.
    """
    start_day = parse_iso_date(from_value)
    end_day = parse_iso_date(to_value)
    if start_day is None or end_day is None:
        if logger is not None and (from_value or to_value):
            logger.warning(
                f"Invalid reporting period from={from_value!r} "
                f"to={to_value!r}; falling back to current month"
            )
        return current_month_period(today)
    if start_day > end_day:
        start_day, end_day = end_day, start_day
    return ReportingPeriod(
        start=start_of_day(start_day),
        end=end_of_day(end_day),
    )


def trailing_month_windows(
    today: date,
    count: int = HISTORY_MONTHS,
) -> list[MonthWindow]:
    """Return ``count`` calendar months ending at ``today``'s month.

    Returns:
        list[MonthWindow]: Windows ordered oldest first.
    """
    windows: list[MonthWindow] = []
    for offset in range(count - 1, -1, -1):
        year, month = shift_month(today.year, today.month, -offset)
        start, end = month_bounds(year, month)
        windows.append(
            MonthWindow(
                year=year,
                month=month,
                start=start,
                end=end,
                label=month_label(month),
            )
        )
    return windows


__all__ = [
    "as_naive_utc",
    "utc_day_key",
    "start_of_day",
    "end_of_day",
    "month_label",
    "shift_month",
    "month_bounds",
    "year_start",
    "parse_iso_date",
    "current_month_period",
    "resolve_reporting_period",
    "trailing_month_windows",
]
