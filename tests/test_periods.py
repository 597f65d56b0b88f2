from datetime import date

from studio_analytics.periods import (
    last_month_range,
    month_bounds,
    month_of,
    months_between,
    next_month,
    previous_month,
    shift_month,
    short_month_name,
)


def test_last_month_range_handles_year_transition():
    start, end = last_month_range(date(2025, 1, 5))
    assert start == date(2024, 12, 1)
    assert end == date(2024, 12, 31)


def test_shift_month_rolls_over_in_both_directions():
    assert shift_month(10, 2024, 2) == (0, 2025)
    assert shift_month(0, 2024, -1) == (11, 2023)
    assert shift_month(2, 2024, -5) == (9, 2023)
    assert shift_month(5, 2024, -30) == (11, 2021)


def test_navigation_wraps_year():
    assert previous_month(0, 2024) == (11, 2023)
    assert next_month(11, 2024) == (0, 2025)


def test_months_between_and_month_of():
    assert months_between(10, 2024, 0, 2025) == 2
    assert months_between(3, 2024, 1, 2024) == -2
    assert month_of(date(2024, 3, 31)) == (2, 2024)


def test_month_bounds_handles_leap_february():
    assert month_bounds(1, 2024) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(11, 2023) == (date(2023, 12, 1), date(2023, 12, 31))


def test_short_month_name():
    assert short_month_name(0) == "Jan"
    assert short_month_name(9) == "Oct"
