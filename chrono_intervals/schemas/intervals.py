"""Interval Schemas — Pydantic models for the interval generation endpoints.

Invariants:
    - begin/end must carry a UTC offset (AwareDatetime): naive timestamps rejected at the edge
    - Optional options fall back to Settings defaults in the service layer
    - precision_us > 0; offset_west_secs strictly inside +/- 1 day
    - Response datetimes are always UTC

Design Decisions:
    - Precision exposed as integer microseconds: the finest step datetime can represent
    - Range ordering (end >= begin) left to core/ so the error code is INVALID_RANGE
"""

from pydantic import AwareDatetime, BaseModel, Field

from chrono_intervals.core.domain_types import Grouping, MAX_OFFSET_SECONDS


class IntervalRequest(BaseModel):
    """Interval generation request — range plus optional generation options."""
    begin: AwareDatetime
    end: AwareDatetime
    grouping: Grouping | None = None
    offset_west_secs: int | None = Field(
        None, gt=-MAX_OFFSET_SECONDS, lt=MAX_OFFSET_SECONDS,
    )
    precision_us: int | None = Field(None, gt=0)
    extend_begin: bool = True
    extend_end: bool = True


class IntervalOut(BaseModel):
    """One generated interval."""
    start: AwareDatetime
    end: AwareDatetime


class IntervalResponse(BaseModel):
    """Generated intervals plus the effective options used to build them."""
    grouping: Grouping
    offset_west_secs: int
    precision_us: int
    extend_begin: bool
    extend_end: bool
    count: int
    intervals: list[IntervalOut]
