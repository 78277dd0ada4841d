"""Internal date utilities backing the month grid and helpers.

This module is not part of the public API and may change without notice.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Union

DateLike = Union[datetime, date, str, int, float]

CALENDAR_FORMAT = "%Y-%m-%d %H:%M"
DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: DateLike | None = None) -> datetime:
    """Coerce a date-like value into a :class:`datetime`.

    :param value: A ``datetime``, a ``date`` (taken at midnight), epoch
        milliseconds, or a string such as ``"2024-03-10"``,
        ``"2024-03-10 14:30"`` or ``"2024-03-10T14:30:00"``. ``None``
        means now.
    :return: The parsed datetime.
    :raises TypeError: If *value* is of an unsupported type.
    :raises ValueError: If a string cannot be parsed.
    """
    if value is None:
        return datetime.now()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        raise TypeError(f"Cannot parse date from {type(value).__name__}")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as err:
            raise ValueError(
                f"Invalid date: expected 'YYYY-MM-DD' or 'YYYY-MM-DD HH:MM', "
                f"got {value!r}"
            ) from err
    raise TypeError(f"Cannot parse date from {type(value).__name__}")


def days_in_month(value: datetime) -> int:
    """Return the number of days in the month of *value*."""
    return calendar.monthrange(value.year, value.month)[1]


def day_of_week(value: date) -> int:
    """Return the weekday of *value*, 0 for Sunday through 6 for Saturday."""
    return (value.weekday() + 1) % 7


def add_months(value: datetime, months: int) -> datetime:
    """Shift *value* by whole months, clamping the day to the target month.

    ``add_months(datetime(2024, 3, 31), -1)`` is 2024-02-29.
    """
    index = value.year * 12 + value.month - 1 + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def with_day_of_month(value: datetime, day: int) -> datetime:
    """Return *value* moved to *day* of its month.

    Days outside the month roll over: ``0`` is the last day of the
    previous month and ``days_in_month + 1`` the first of the next one.
    """
    return value.replace(day=1) + timedelta(days=day - 1)


def format_date(value: DateLike | None, fmt: str = DATE_FORMAT) -> str:
    """Format a date-like value with a :meth:`~datetime.datetime.strftime` pattern."""
    return parse_date(value).strftime(fmt)
