"""Utilities for working with reporting months.

Months are 0-based (0 = January) everywhere in this package. Rollover is
done with integer arithmetic on ``year * 12 + month`` so nothing depends on
locale or timezone.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Tuple

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def shift_month(month: int, year: int, offset: int) -> Tuple[int, int]:
    """Return the ``(month, year)`` that is ``offset`` months away."""

    new_year, new_month = divmod(year * 12 + month + offset, 12)
    return new_month, new_year


def months_between(
    start_month: int, start_year: int, end_month: int, end_year: int
) -> int:
    return (end_year - start_year) * 12 + (end_month - start_month)


def previous_month(month: int, year: int) -> Tuple[int, int]:
    return shift_month(month, year, -1)


def next_month(month: int, year: int) -> Tuple[int, int]:
    return shift_month(month, year, 1)


def month_of(value: date) -> Tuple[int, int]:
    return value.month - 1, value.year


def month_bounds(month: int, year: int) -> Tuple[date, date]:
    """Return the first and last calendar day of the month."""

    month, year = shift_month(month, year, 0)
    last_day = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, 1), date(year, month + 1, last_day)


def last_month_range(today: date | None = None) -> Tuple[date, date]:
    """Return the first and last day of the calendar month before ``today``."""

    today = today or date.today()
    first_of_this_month = today.replace(day=1)
    last_day_previous_month = first_of_this_month - timedelta(days=1)
    first_day_previous_month = last_day_previous_month.replace(day=1)
    return first_day_previous_month, last_day_previous_month


def month_name(month: int) -> str:
    return MONTH_NAMES[month % 12]


def short_month_name(month: int) -> str:
    return month_name(month)[:3]
