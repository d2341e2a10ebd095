"""Boundary Calculator — maps instants onto grouping boundaries in an offset-shifted frame.

Invariants:
    - All returned instants are UTC
    - Truncation and advance happen in the frame shifted WEST by offset_west_secs
    - Round-trip: boundary_at_or_before(t) == b for every b <= t < next_boundary(b)
    - Month/quarter/year lengths come from datetime + relativedelta, never fixed durations
    - Overflow past datetime.min/max surfaces as OutOfRangeError (chained)

Design Decisions:
    - One GroupingRule per Grouping in an explicit table: new granularities are new
      entries, never subclasses (ADR: no convention-over-config)
    - relativedelta for every step, including hour/day: one arithmetic path for all rules
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, NamedTuple

from dateutil.relativedelta import relativedelta

from chrono_intervals.core.domain_types import Grouping, MAX_OFFSET_SECONDS, OffsetWestSeconds
from chrono_intervals.core.errors import (
    ErrorContext,
    InvalidGroupingError,
    InvalidOffsetError,
    NaiveInstantError,
    OutOfRangeError,
)


# ─── Truncation primitives (operate on the shifted local frame) ──

def _start_of_hour(local: datetime) -> datetime:
    return local.replace(minute=0, second=0, microsecond=0)


def _start_of_day(local: datetime) -> datetime:
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


def _start_of_week(local: datetime) -> datetime:
    """ISO week: Monday 00:00."""
    return _start_of_day(local) - relativedelta(days=local.weekday())


def _start_of_month(local: datetime) -> datetime:
    return _start_of_day(local).replace(day=1)


def _start_of_quarter(local: datetime) -> datetime:
    first_month = 3 * ((local.month - 1) // 3) + 1
    return _start_of_day(local).replace(month=first_month, day=1)


def _start_of_year(local: datetime) -> datetime:
    return _start_of_day(local).replace(month=1, day=1)


class GroupingRule(NamedTuple):
    """How one grouping truncates and advances a local datetime."""
    truncate: Callable[[datetime], datetime]
    step: relativedelta

    def advance(self, local: datetime) -> datetime:
        return local + self.step


_RULES: dict[Grouping, GroupingRule] = {
    Grouping.PER_HOUR: GroupingRule(_start_of_hour, relativedelta(hours=1)),
    Grouping.PER_DAY: GroupingRule(_start_of_day, relativedelta(days=1)),
    Grouping.PER_WEEK: GroupingRule(_start_of_week, relativedelta(weeks=1)),
    Grouping.PER_MONTH: GroupingRule(_start_of_month, relativedelta(months=1)),
    Grouping.PER_QUARTER: GroupingRule(_start_of_quarter, relativedelta(months=3)),
    Grouping.PER_YEAR: GroupingRule(_start_of_year, relativedelta(years=1)),
}


# ─── Input coercion ──────────────────────────────────────────────

def coerce_grouping(grouping: Grouping | str) -> Grouping:
    """Accept a Grouping or its string value."""
    try:
        return Grouping(grouping)
    except ValueError:
        raise InvalidGroupingError(grouping) from None


def grouping_rule(grouping: Grouping | str) -> GroupingRule:
    return _RULES[coerce_grouping(grouping)]


def shifted_timezone(offset_west_secs: OffsetWestSeconds) -> timezone:
    """Fixed-offset frame for an offset in seconds west of UTC."""
    if isinstance(offset_west_secs, bool) or not isinstance(offset_west_secs, int):
        raise InvalidOffsetError(offset_west_secs)
    if abs(offset_west_secs) >= MAX_OFFSET_SECONDS:
        raise InvalidOffsetError(offset_west_secs)
    return timezone(-timedelta(seconds=offset_west_secs))


def require_aware(instant: datetime, field: str) -> None:
    """Raise NaiveInstantError unless instant carries a usable tzinfo."""
    if instant.tzinfo is None or instant.tzinfo.utcoffset(instant) is None:
        raise NaiveInstantError(field)


# ─── Public boundary operations ──────────────────────────────────

def boundary_at_or_before(
    instant: datetime, grouping: Grouping | str, offset_west_secs: OffsetWestSeconds = 0,
) -> datetime:
    """Start of the grouping unit enclosing `instant`, as a UTC datetime."""
    require_aware(instant, "instant")
    rule = grouping_rule(grouping)
    local_tz = shifted_timezone(offset_west_secs)
    try:
        local = instant.astimezone(local_tz)
        return rule.truncate(local).astimezone(timezone.utc)
    except (OverflowError, ValueError) as exc:
        raise OutOfRangeError(
            "boundary_at_or_before",
            _context(grouping, offset_west_secs, instant),
        ) from exc


def next_boundary(
    boundary: datetime, grouping: Grouping | str, offset_west_secs: OffsetWestSeconds = 0,
) -> datetime:
    """Boundary one grouping unit after `boundary`, as a UTC datetime.

    `boundary` is expected to lie on a grouping boundary already; the unit is
    added in the shifted frame so month and year lengths stay calendar-exact.
    """
    require_aware(boundary, "boundary")
    rule = grouping_rule(grouping)
    local_tz = shifted_timezone(offset_west_secs)
    try:
        local = boundary.astimezone(local_tz)
        return rule.advance(local).astimezone(timezone.utc)
    except (OverflowError, ValueError) as exc:
        raise OutOfRangeError(
            "next_boundary",
            _context(grouping, offset_west_secs, boundary),
        ) from exc


def _context(
    grouping: Grouping | str, offset_west_secs: OffsetWestSeconds, instant: datetime,
) -> ErrorContext:
    return ErrorContext(
        grouping=Grouping(grouping).value,
        offset_west_secs=offset_west_secs,
        debug_info={"instant": instant.isoformat()},
    )
