"""Internal CLI entry point for the ``monthgrid`` command.

This module is not part of the public API and may change without notice.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import NoReturn

from dotenv import load_dotenv

from monthgrid._grid import DayCell, GridConfig, MonthGrid, build_month_grid
from monthgrid._helpers import get_weekdays_min, get_year_range

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from err


def _format_cell(cell: DayCell | None) -> str:
    if cell is None:
        return ""
    if cell.disabled:
        return f"({cell.text})"
    return cell.text


def render_text(grid: MonthGrid, first_day_of_week: int) -> str:
    """Render *grid* as a plain-text calendar page."""
    lines = [" ".join(f"{name:>4}" for name in get_weekdays_min(first_day_of_week))]
    for week in grid.weeks():
        lines.append(" ".join(f"{_format_cell(cell):>4}" for cell in week).rstrip())
    return "\n".join(lines)


def _fail(message: str) -> NoReturn:
    print(json.dumps({"error": message}, indent=4))
    sys.exit(1)


def cli():
    """CLI entry point for the ``monthgrid`` command.

    Defaults are read from ``MONTHGRID_FIRST_DAY_OF_WEEK``,
    ``MONTHGRID_FULL_DAYS``, ``MONTHGRID_MIN_DATE`` and
    ``MONTHGRID_MAX_DATE``, after loading ``.env`` from the current
    directory. Command-line options take precedence.
    """
    load_dotenv()

    parser = argparse.ArgumentParser(description="Calendar month grid generator")
    parser.add_argument(
        "--date", help="Any date within the month to show (default: today)"
    )
    parser.add_argument(
        "--full-days",
        action="store_true",
        help="Fill leading and trailing cells with adjacent month days",
    )
    parser.add_argument("--min-date", help="Minimum selectable date")
    parser.add_argument("--max-date", help="Maximum selectable date")
    parser.add_argument(
        "--first-day-of-week",
        type=int,
        choices=range(7),
        help="First day of week, 0 (Sunday) to 6 (Saturday)",
    )
    parser.add_argument(
        "--years",
        action="store_true",
        help="Print the selectable year range between --min-date and --max-date",
    )
    parser.add_argument(
        "--format", choices=["json", "text"], default="json", help="Output format"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    min_date = args.min_date or os.getenv("MONTHGRID_MIN_DATE") or None
    max_date = args.max_date or os.getenv("MONTHGRID_MAX_DATE") or None

    try:
        if args.years:
            if not (min_date and max_date):
                _fail("--years requires both a minimum and a maximum date.")
            print(json.dumps(get_year_range(None, max_date, min_date)))
            return

        first_day_of_week = args.first_day_of_week
        if first_day_of_week is None:
            first_day_of_week = _env_int("MONTHGRID_FIRST_DAY_OF_WEEK") or 0

        config = GridConfig(
            display_full_days=args.full_days or _env_flag("MONTHGRID_FULL_DAYS"),
            minimum_date=min_date,
            maximum_date=max_date,
            first_day_of_week=first_day_of_week,
        )
        grid = build_month_grid(args.date, config)
    except (ValueError, TypeError) as e:
        _fail(str(e))

    if args.format == "text":
        print(render_text(grid, config.first_day_of_week))
    else:
        print(json.dumps(grid.to_list(), indent=4))


if __name__ == "__main__":
    cli()
