"""Month grid and date helpers for calendar date pickers."""

from ._dateutil import CALENDAR_FORMAT, DATE_FORMAT
from ._grid import DayCell, GridConfig, MonthGrid, build_month_grid, get_month_days
from ._helpers import (
    YEAR_PAGE_SIZE,
    are_dates_on_same_day,
    get_date,
    get_date_month,
    get_date_year,
    get_formatted,
    get_formatted_date,
    get_month_name,
    get_months,
    get_parsed_date,
    get_today,
    get_weekdays,
    get_weekdays_min,
    get_weekdays_short,
    get_year_range,
)

__all__ = [
    "CALENDAR_FORMAT",
    "DATE_FORMAT",
    "YEAR_PAGE_SIZE",
    "DayCell",
    "GridConfig",
    "MonthGrid",
    "are_dates_on_same_day",
    "build_month_grid",
    "get_date",
    "get_date_month",
    "get_date_year",
    "get_formatted",
    "get_formatted_date",
    "get_month_days",
    "get_month_name",
    "get_months",
    "get_parsed_date",
    "get_today",
    "get_weekdays",
    "get_weekdays_min",
    "get_weekdays_short",
    "get_year_range",
    "__version__",
]


def _get_version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("monthgrid")
    except PackageNotFoundError:
        return "unknown"


__version__ = _get_version()
del _get_version
