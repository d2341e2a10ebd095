"""Interval Generator — walks grouping boundaries across a range and emits UTC intervals.

Invariants:
    - Intervals are ordered, non-overlapping, separated by exactly `precision`
    - Every start lies on a grouping boundary; every end is next boundary - precision
    - extend_begin=True: first start <= begin. False: first start >= begin
    - extend_end=True: last end >= end. False: last end < end
    - A begin exactly on a boundary is kept regardless of extend_begin
    - end < begin raises InvalidRangeError; begin == end yields no intervals
    - Overflow while computing an interval end surfaces as OutOfRangeError (chained)

Design Decisions:
    - Each end is computed fresh from next_boundary(current) - precision: no drift
      accumulates over long ranges
    - Loop runs while current <= end so an `end` lying exactly on a boundary still
      gets its enclosing interval; extend_end=False trims by upper boundary afterwards
    - Convenience wrappers are pure pass-throughs (no extra behavior)
"""

from datetime import datetime, timedelta

from chrono_intervals.core.boundaries import (
    boundary_at_or_before,
    next_boundary,
    require_aware,
)
from chrono_intervals.core.domain_types import (
    DEFAULT_PRECISION,
    Grouping,
    OffsetWestSeconds,
    TimeInterval,
)
from chrono_intervals.core.errors import ErrorContext, InvalidRangeError, OutOfRangeError
from chrono_intervals.core.generator_config import GeneratorConfig


def get_intervals(
    config: GeneratorConfig, begin: datetime, end: datetime,
) -> list[TimeInterval]:
    """Partition [begin, end] into grouping-aligned UTC intervals."""
    require_aware(begin, "begin")
    require_aware(end, "end")
    if end < begin:
        raise InvalidRangeError(begin, end, ErrorContext(
            grouping=config.grouping.value,
            offset_west_secs=config.offset_west_secs,
        ))
    if begin == end:
        return []

    current = _first_boundary(config, begin)

    intervals: list[TimeInterval] = []
    uppers: list[datetime] = []
    while current <= end:
        upper = next_boundary(current, config.grouping, config.offset_west_secs)
        intervals.append(TimeInterval(current, _interval_end(config, upper)))
        uppers.append(upper)
        current = upper

    if not config.extend_end:
        intervals = [
            interval for interval, upper in zip(intervals, uppers) if upper <= end
        ]
    return intervals


def _first_boundary(config: GeneratorConfig, begin: datetime) -> datetime:
    first = boundary_at_or_before(begin, config.grouping, config.offset_west_secs)
    if not config.extend_begin and first < begin:
        return next_boundary(first, config.grouping, config.offset_west_secs)
    return first


def _interval_end(config: GeneratorConfig, upper: datetime) -> datetime:
    try:
        return upper - config.precision
    except OverflowError as exc:
        raise OutOfRangeError("interval_end", ErrorContext(
            grouping=config.grouping.value,
            offset_west_secs=config.offset_west_secs,
            debug_info={"upper": upper.isoformat()},
        )) from exc


# ─── Convenience entry points ────────────────────────────────────

def get_extended_utc_intervals(
    begin: datetime,
    end: datetime,
    grouping: Grouping | str,
    offset_west_seconds: OffsetWestSeconds,
) -> list[TimeInterval]:
    """Extended intervals with the default 1ms precision.

    The first interval starts on the boundary at or before `begin` and the
    last one ends after `end`. Boundaries are shifted `offset_west_seconds`
    west of UTC, e.g. 7 * 3600 yields days that start at midnight PDT.
    """
    config = GeneratorConfig(
        grouping=grouping,
        offset_west_secs=offset_west_seconds,
        precision=DEFAULT_PRECISION,
        extend_begin=True,
        extend_end=True,
    )
    return get_intervals(config, begin, end)


def get_utc_intervals_opts(
    begin: datetime,
    end: datetime,
    grouping: Grouping | str,
    offset_west_seconds: OffsetWestSeconds,
    precision: timedelta,
    extend_begin: bool,
    extend_end: bool,
) -> list[TimeInterval]:
    """Intervals with every option explicit."""
    config = GeneratorConfig(
        grouping=grouping,
        offset_west_secs=offset_west_seconds,
        precision=precision,
        extend_begin=extend_begin,
        extend_end=extend_end,
    )
    return get_intervals(config, begin, end)
