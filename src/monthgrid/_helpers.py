"""Internal date, format and locale helpers.

This module is not part of the public API and may change without notice.
"""

from __future__ import annotations

import calendar
import logging
from datetime import date, datetime

from monthgrid._dateutil import (
    CALENDAR_FORMAT,
    DATE_FORMAT,
    DateLike,
    format_date,
    parse_date,
)

logger = logging.getLogger(__name__)

YEAR_PAGE_SIZE = 10
YEAR_PAGE_SPAN = 12


def _sunday_first(names) -> list[str]:
    # calendar orders weekdays from Monday
    return [names[(i - 1) % 7] for i in range(7)]


def get_months() -> list[str]:
    """Return the twelve month names, January first."""
    return list(calendar.month_name)[1:]


def get_month_name(month: int) -> str:
    """Return the name of a 0-based *month* (``0`` is January)."""
    return get_months()[month]


def get_weekdays() -> list[str]:
    """Return the seven weekday names, Sunday first."""
    return _sunday_first(calendar.day_name)


def get_weekdays_short() -> list[str]:
    """Return the seven abbreviated weekday names, Sunday first."""
    return _sunday_first(calendar.day_abbr)


def get_weekdays_min(first_day_of_week: int = 0) -> list[str]:
    """Return two-letter weekday names ordered from *first_day_of_week*.

    The Sunday-first list is rotated left so that it lines up with the
    columns of a grid built with the same *first_day_of_week*.

    :param first_day_of_week: 0 (Sunday) to 6 (Saturday).
    :return: Seven names such as ``["Mo", "Tu", ..., "Su"]``.
    """
    days = [name[:2] for name in _sunday_first(calendar.day_abbr)]
    if first_day_of_week > 0:
        days = days[first_day_of_week:] + days[:first_day_of_week]
    return days


def get_date(value: DateLike | None = None) -> datetime:
    """Parse *value* into a :class:`datetime`; ``None`` is now."""
    return parse_date(value)


def get_formatted(value: DateLike | None) -> str:
    """Format *value* as ``"YYYY-MM-DD HH:MM"``."""
    return format_date(value, CALENDAR_FORMAT)


def get_formatted_date(value: DateLike | None, fmt: str) -> str:
    """Format *value* with a :meth:`~datetime.datetime.strftime` pattern."""
    return format_date(value, fmt)


def get_date_month(value: DateLike | None) -> int:
    """Return the 0-based month of *value*."""
    return parse_date(value).month - 1


def get_date_year(value: DateLike | None) -> int:
    """Return the year of *value*."""
    return parse_date(value).year


def get_today() -> str:
    """Return today's date as ``"YYYY-MM-DD"``."""
    return date.today().strftime(DATE_FORMAT)


def are_dates_on_same_day(a: DateLike | None, b: DateLike | None) -> bool:
    """Return True if *a* and *b* fall on the same calendar day.

    Missing values never match.
    """
    if not a or not b:
        return False
    return format_date(a, DATE_FORMAT) == format_date(b, DATE_FORMAT)


def get_parsed_date(value: DateLike | None) -> dict[str, int]:
    """Split *value* into its year, 0-based month, hour and minute.

    :param value: The date to split.
    :return: Dict with ``"year"``, ``"month"``, ``"hour"`` and ``"minute"``.
    """
    parsed = parse_date(value)
    return {
        "year": parsed.year,
        "month": parsed.month - 1,
        "hour": parsed.hour,
        "minute": parsed.minute,
    }


def get_year_range(
    year: int | None, max_date: DateLike | None, min_date: DateLike | None
) -> list[int]:
    """Return the selectable years of a year picker page.

    Spans of more than twelve years are cut to the first
    ``YEAR_PAGE_SIZE`` years, so the result may stop before the year of
    *max_date*.

    :param year: Currently displayed year. Accepted for call
        compatibility; the range only depends on the bounds.
    :param max_date: Latest selectable date.
    :param min_date: Earliest selectable date.
    :return: Ascending list of years.
    """
    end_year = parse_date(max_date).year
    start_year = max(parse_date(min_date).year, 0)

    if end_year - start_year > YEAR_PAGE_SPAN:
        logger.debug(
            f"Year range {start_year}-{end_year} exceeds {YEAR_PAGE_SPAN} years, "
            f"returning first {YEAR_PAGE_SIZE}"
        )
        length = YEAR_PAGE_SIZE
    else:
        length = end_year - start_year + 1
    return [start_year + i for i in range(length)]
