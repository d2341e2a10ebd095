"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Every grouping is a Grouping member — no raw string matching in core logic
    - TimeInterval is always a (start, end) pair of UTC datetimes
    - Offsets are seconds WEST of UTC (positive = behind UTC)

Design Decisions:
    - str Enum for Grouping: serializes to JSON and env vars without custom encoders
    - NamedTuple for TimeInterval: unpacks like a plain pair, reads like a record
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import NamedTuple, NewType


# ─── Value Types ─────────────────────────────────────────────────

OffsetWestSeconds = NewType("OffsetWestSeconds", int)   # |x| < 86_400


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_PRECISION: timedelta = timedelta(milliseconds=1)
MAX_OFFSET_SECONDS: int = 86_400  # exclusive bound accepted by datetime.timezone


# ─── Enums ───────────────────────────────────────────────────────

class Grouping(str, Enum):
    """Calendar granularity used to partition time.

    Weeks follow the ISO convention: they start on Monday 00:00.
    Quarters start on Jan/Apr/Jul/Oct 1st 00:00.
    """
    PER_HOUR = "per_hour"
    PER_DAY = "per_day"
    PER_WEEK = "per_week"
    PER_MONTH = "per_month"
    PER_QUARTER = "per_quarter"
    PER_YEAR = "per_year"


# ─── Records ─────────────────────────────────────────────────────

class TimeInterval(NamedTuple):
    """One generated bucket. Both ends are UTC; end = next boundary - precision."""
    start: datetime
    end: datetime
