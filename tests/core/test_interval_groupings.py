"""Interval Groupings — per-grouping generation over long ranges.

Tests cover:
    - Daily intervals over a month and a year
    - Weekly intervals always Monday 00:00 → Sunday 23:59:59.999
    - Monthly intervals over several years, including leap Februaries
    - Hourly, quarterly, and yearly intervals
"""

from datetime import datetime, timedelta, timezone

from chrono_intervals.core.domain_types import Grouping
from chrono_intervals.core.generate_intervals import get_extended_utc_intervals, get_intervals
from chrono_intervals.core.generator_config import new_generator, with_grouping

MS = timedelta(milliseconds=1)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def _is_midnight(dt: datetime) -> bool:
    return (dt.hour, dt.minute, dt.second, dt.microsecond) == (0, 0, 0, 0)


def _is_last_ms_of_day(dt: datetime) -> bool:
    return (dt.hour, dt.minute, dt.second, dt.microsecond) == (23, 59, 59, 999000)


# ─── PER_DAY ─────────────────────────────────────────────────────

def test_per_day_over_a_month():
    intervals = get_extended_utc_intervals(
        utc(2022, 6, 25, 8, 23, 45), utc(2022, 7, 25, 8, 23, 45), Grouping.PER_DAY, 0,
    )
    assert len(intervals) == 31
    for start, end in intervals:
        assert start.day == end.day
        assert _is_midnight(start)
        assert _is_last_ms_of_day(end)


def test_per_day_over_a_year():
    intervals = get_extended_utc_intervals(
        utc(2021, 6, 25, 8, 23, 45), utc(2022, 6, 24, 8, 23, 45), Grouping.PER_DAY, 0,
    )
    assert len(intervals) == 365
    assert intervals[0].start.year == 2021
    assert intervals[-1].start.year == 2022


# ─── PER_WEEK ────────────────────────────────────────────────────

def test_per_week_regular():
    config = with_grouping(new_generator(), Grouping.PER_WEEK)
    intervals = get_intervals(config, utc(2022, 10, 4, 8, 23, 45), utc(2022, 10, 18, 8, 23, 45))
    assert intervals == [
        (utc(2022, 10, 3), utc(2022, 10, 9, 23, 59, 59, 999000)),
        (utc(2022, 10, 10), utc(2022, 10, 16, 23, 59, 59, 999000)),
        (utc(2022, 10, 17), utc(2022, 10, 23, 23, 59, 59, 999000)),
    ]


def test_per_week_over_several_months():
    config = with_grouping(new_generator(), Grouping.PER_WEEK)
    intervals = get_intervals(config, utc(2022, 9, 9, 8, 23, 45), utc(2022, 11, 9, 8, 23, 45))
    assert len(intervals) == 10
    for start, end in intervals:
        assert start.weekday() == 0
        assert end.weekday() == 6
        assert _is_midnight(start)
        assert _is_last_ms_of_day(end)


def test_per_week_over_a_year():
    config = with_grouping(new_generator(), Grouping.PER_WEEK)
    intervals = get_intervals(config, utc(2021, 9, 9, 8, 23, 45), utc(2022, 9, 8, 8, 23, 45))
    assert len(intervals) == 53
    assert intervals[0].start.year == 2021
    assert intervals[-1].start.year == 2022


# ─── PER_MONTH ───────────────────────────────────────────────────

def test_per_month_regular():
    config = with_grouping(new_generator(), Grouping.PER_MONTH)
    intervals = get_intervals(config, utc(2022, 6, 4, 8, 23, 45), utc(2022, 9, 18, 8, 23, 45))
    assert intervals == [
        (utc(2022, 6, 1), utc(2022, 6, 30, 23, 59, 59, 999000)),
        (utc(2022, 7, 1), utc(2022, 7, 31, 23, 59, 59, 999000)),
        (utc(2022, 8, 1), utc(2022, 8, 31, 23, 59, 59, 999000)),
        (utc(2022, 9, 1), utc(2022, 9, 30, 23, 59, 59, 999000)),
    ]


def test_per_month_over_several_years():
    config = with_grouping(new_generator(), Grouping.PER_MONTH)
    intervals = get_intervals(config, utc(2020, 9, 9, 8, 23, 45), utc(2022, 8, 9, 8, 23, 45))
    assert len(intervals) == 24
    for start, end in intervals:
        assert start.day == 1
        assert (end + MS).day == 1
        assert _is_midnight(start)
        assert _is_last_ms_of_day(end)
    assert intervals[0].start.year == 2020
    assert intervals[-1].start.year == 2022


def test_per_month_leap_february_ends_on_the_29th():
    config = with_grouping(new_generator(), Grouping.PER_MONTH)
    intervals = get_intervals(config, utc(2024, 2, 10), utc(2024, 2, 20))
    assert intervals == [(utc(2024, 2, 1), utc(2024, 2, 29, 23, 59, 59, 999000))]


def test_per_month_common_february_ends_on_the_28th():
    config = with_grouping(new_generator(), Grouping.PER_MONTH)
    intervals = get_intervals(config, utc(2023, 2, 10), utc(2023, 2, 20))
    assert intervals == [(utc(2023, 2, 1), utc(2023, 2, 28, 23, 59, 59, 999000))]


# ─── PER_HOUR / PER_QUARTER / PER_YEAR ───────────────────────────

def test_per_hour_over_a_day():
    config = with_grouping(new_generator(), Grouping.PER_HOUR)
    intervals = get_intervals(config, utc(2022, 6, 25, 0, 30), utc(2022, 6, 25, 23, 30))
    assert len(intervals) == 24
    assert intervals[0] == (utc(2022, 6, 25, 0), utc(2022, 6, 25, 0, 59, 59, 999000))
    assert intervals[-1] == (utc(2022, 6, 25, 23), utc(2022, 6, 25, 23, 59, 59, 999000))


def test_per_quarter_over_a_year():
    config = with_grouping(new_generator(), Grouping.PER_QUARTER)
    intervals = get_intervals(config, utc(2022, 2, 14), utc(2022, 11, 2))
    assert [start.month for start, _ in intervals] == [1, 4, 7, 10]
    assert intervals[-1].end == utc(2022, 12, 31, 23, 59, 59, 999000)


def test_per_year_over_a_leap_year():
    config = with_grouping(new_generator(), Grouping.PER_YEAR)
    intervals = get_intervals(config, utc(2023, 7, 1), utc(2024, 7, 1))
    assert intervals == [
        (utc(2023, 1, 1), utc(2023, 12, 31, 23, 59, 59, 999000)),
        (utc(2024, 1, 1), utc(2024, 12, 31, 23, 59, 59, 999000)),
    ]
