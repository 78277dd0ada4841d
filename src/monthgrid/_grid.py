"""Internal month grid implementation.

This module is not part of the public API. Import
:func:`~monthgrid.get_month_days` and friends from ``monthgrid`` directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Optional, overload

from monthgrid._dateutil import (
    DATE_FORMAT,
    DateLike,
    add_months,
    day_of_week,
    days_in_month,
    parse_date,
    with_day_of_month,
)

if TYPE_CHECKING:
    import pandas

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
FIVE_WEEK_CELLS = 35
SIX_WEEK_CELLS = 42

_COLUMNS = ["text", "day", "date", "disabled", "isCurrentMonth", "week", "weekday"]


@dataclass(frozen=True)
class DayCell:
    """A single day shown in the month grid.

    :param text: Day of month as display text (``"1"`` to ``"31"``).
    :param day: Day of month.
    :param date: The cell's date as ``"YYYY-MM-DD"``.
    :param disabled: True when the date is outside the selectable range.
    :param is_current_month: True for days of the displayed month.
    """

    text: str
    day: int
    date: str
    disabled: bool
    is_current_month: bool

    def to_dict(self) -> dict[str, Any]:
        """Return the cell in the shape calendar components consume."""
        return {
            "text": self.text,
            "day": self.day,
            "date": self.date,
            "disabled": self.disabled,
            "isCurrentMonth": self.is_current_month,
        }


@dataclass(frozen=True)
class GridConfig:
    """Display options for :func:`build_month_grid`.

    :param display_full_days: Fill leading and trailing cells with days of
        the adjacent months instead of leaving them blank.
    :param minimum_date: Earliest selectable date, or ``None``.
    :param maximum_date: Latest selectable date, or ``None``.
    :param first_day_of_week: Weekday starting each row, 0 (Sunday) to 6
        (Saturday).
    :raises ValueError: If *first_day_of_week* is outside 0-6.
    """

    display_full_days: bool = False
    minimum_date: Optional[DateLike] = None
    maximum_date: Optional[DateLike] = None
    first_day_of_week: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.first_day_of_week <= 6:
            raise ValueError(
                f"first_day_of_week must be between 0 and 6, "
                f"got {self.first_day_of_week!r}"
            )


class MonthGrid(Sequence):
    """Immutable, chronologically ordered cells of one calendar page.

    Items are :class:`DayCell` instances or ``None`` for blank leading
    cells. The sequence is flat; use :meth:`weeks` to split it into rows.
    """

    def __init__(self, cells: Iterable[DayCell | None]):
        self._cells: tuple[DayCell | None, ...] = tuple(cells)

    @overload
    def __getitem__(self, index: int) -> DayCell | None: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[DayCell | None, ...]: ...

    def __getitem__(self, index):
        return self._cells[index]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[DayCell | None]:
        return iter(self._cells)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MonthGrid):
            return self._cells == other._cells
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        blanks = sum(1 for cell in self._cells if cell is None)
        return f"MonthGrid(cells={len(self._cells)}, blanks={blanks})"

    def weeks(self) -> list[list[DayCell | None]]:
        """Split the grid into rows of seven cells.

        The last row is shorter when trailing days are not displayed.
        """
        return [
            list(self._cells[i : i + DAYS_PER_WEEK])
            for i in range(0, len(self._cells), DAYS_PER_WEEK)
        ]

    def to_list(self) -> list[dict[str, Any] | None]:
        """Return the cells as plain dicts, keeping ``None`` blanks."""
        return [cell.to_dict() if cell is not None else None for cell in self._cells]

    def to_dataframe(self) -> pandas.DataFrame:
        """Convert the grid to a :class:`pandas.DataFrame`.

        One row per cell with its ``week`` (row) and ``weekday`` (column)
        position. Blank cells keep their position with missing values.

        Requires ``pandas`` (``pip install pandas``).

        :return: DataFrame of the grid cells.
        :raises ImportError: If pandas is not installed.
        """
        try:
            import pandas as pd
        except ImportError as err:
            raise ImportError(
                "pandas is required for to_dataframe(). "
                "Install it with: pip install pandas"
            ) from err

        records = []
        for index, cell in enumerate(self._cells):
            record = cell.to_dict() if cell is not None else dict.fromkeys(_COLUMNS[:5])
            week, weekday = divmod(index, DAYS_PER_WEEK)
            record["week"] = week
            record["weekday"] = weekday
            records.append(record)
        return pd.DataFrame.from_records(records, columns=_COLUMNS)


def _as_bound(value: DateLike | None) -> date | None:
    if value is None or value == "":
        return None
    return parse_date(value).date()


def _generate_day_object(
    day: int,
    value: datetime,
    min_date: date | None,
    max_date: date | None,
    is_current_month: bool,
) -> DayCell:
    """Build the cell for *value*, disabling it outside ``[min_date, max_date]``."""
    disabled = False
    if min_date is not None:
        disabled = value.date() < min_date
    if max_date is not None and not disabled:
        disabled = value.date() > max_date
    return DayCell(
        text=str(day),
        day=day,
        date=value.strftime(DATE_FORMAT),
        disabled=disabled,
        is_current_month=is_current_month,
    )


def build_month_grid(reference: DateLike | None, config: GridConfig) -> MonthGrid:
    """Compute the calendar page containing *reference*.

    The grid starts with the days needed to align day 1 under its weekday
    column: blanks, or the last days of the previous month when
    ``config.display_full_days`` is set. All days of the month follow.
    With ``display_full_days`` the page is completed with the first days
    of the next month up to 35 cells, or 42 when the month spills into a
    sixth week. Without it nothing follows the last day of the month.

    :param reference: Any date within the month to display; ``None`` for today.
    :param config: Display options.
    :return: Flat grid of cells, to be read in rows of seven.
    :raises ValueError: If *reference* or a bound cannot be parsed.
    """
    current = parse_date(reference)
    min_date = _as_bound(config.minimum_date)
    max_date = _as_bound(config.maximum_date)

    month_days = days_in_month(current)
    previous = add_months(current, -1)
    previous_days = days_in_month(previous)
    lead_offset = (
        day_of_week(with_day_of_month(current, 1 - config.first_day_of_week))
        % DAYS_PER_WEEK
    )

    if config.display_full_days:
        leading: list[DayCell | None] = []
        for i in range(lead_offset):
            day = i + previous_days - lead_offset + 1
            leading.append(
                _generate_day_object(
                    day, with_day_of_month(previous, day), min_date, max_date, False
                )
            )
    else:
        leading = [None] * lead_offset

    occupied = lead_offset + month_days
    if not config.display_full_days:
        trailing_count = 0
    elif occupied > FIVE_WEEK_CELLS:
        trailing_count = SIX_WEEK_CELLS - occupied
    else:
        trailing_count = FIVE_WEEK_CELLS - occupied

    current_cells = [
        _generate_day_object(
            day, with_day_of_month(current, day), min_date, max_date, True
        )
        for day in range(1, month_days + 1)
    ]

    following = add_months(current, 1)
    trailing = [
        _generate_day_object(
            day, with_day_of_month(following, day), min_date, max_date, False
        )
        for day in range(1, trailing_count + 1)
    ]

    logger.debug(
        f"Built grid for {current:%Y-%m}: lead={lead_offset}, "
        f"trailing={trailing_count}, cells={occupied + trailing_count}"
    )
    return MonthGrid([*leading, *current_cells, *trailing])


def get_month_days(
    value: DateLike | None = None,
    display_full_days: bool = False,
    minimum_date: DateLike | None = None,
    maximum_date: DateLike | None = None,
    first_day_of_week: int = 0,
) -> MonthGrid:
    """Calculate the day cells of the month containing *value*.

    Convenience wrapper around :func:`build_month_grid`.

    :param value: The selected date; ``None`` for today.
    :param display_full_days: Show days of the adjacent months.
    :param minimum_date: Minimum selectable date.
    :param maximum_date: Maximum selectable date.
    :param first_day_of_week: First day of week, 0 (Sunday) to 6 (Saturday).
    :return: Grid of day cells.
    """
    config = GridConfig(
        display_full_days=display_full_days,
        minimum_date=minimum_date,
        maximum_date=maximum_date,
        first_day_of_week=first_day_of_week,
    )
    return build_month_grid(value, config)
