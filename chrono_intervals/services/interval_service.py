"""Interval Service — settings-aware interval generation for the API layer.

Invariants:
    - Request options override Settings defaults; Settings never override explicit options
    - Requests that could exceed settings.max_intervals are rejected BEFORE generating
    - Every successful generation logged with grouping, offset and interval count

Design Decisions:
    - Size guard estimated from the shortest possible unit per grouping: cheap upper
      bound on the interval count, no partial generation needed
    - Thin shell: all calendar logic stays in core/
"""

import logging
from datetime import datetime, timedelta

from chrono_intervals.config import Settings
from chrono_intervals.core.domain_types import Grouping, TimeInterval
from chrono_intervals.core.errors import ErrorContext, TooManyIntervalsError
from chrono_intervals.core.generate_intervals import get_intervals
from chrono_intervals.core.generator_config import GeneratorConfig
from chrono_intervals.schemas.intervals import IntervalRequest

logger = logging.getLogger(__name__)

# Shortest length each unit can have in a fixed-offset frame
SHORTEST_UNIT: dict[Grouping, timedelta] = {
    Grouping.PER_HOUR: timedelta(hours=1),
    Grouping.PER_DAY: timedelta(days=1),
    Grouping.PER_WEEK: timedelta(weeks=1),
    Grouping.PER_MONTH: timedelta(days=28),
    Grouping.PER_QUARTER: timedelta(days=89),
    Grouping.PER_YEAR: timedelta(days=365),
}


def build_config(request: IntervalRequest, settings: Settings) -> GeneratorConfig:
    """Merge request options over settings defaults."""
    grouping = request.grouping or settings.default_grouping
    offset = (
        request.offset_west_secs
        if request.offset_west_secs is not None
        else settings.default_offset_west_secs
    )
    precision_us = request.precision_us or settings.default_precision_us
    return GeneratorConfig(
        grouping=grouping,
        offset_west_secs=offset,
        precision=timedelta(microseconds=precision_us),
        extend_begin=request.extend_begin,
        extend_end=request.extend_end,
    )


def estimate_max_count(grouping: Grouping, begin: datetime, end: datetime) -> int:
    """Upper bound on the number of intervals for [begin, end]."""
    span = max(end - begin, timedelta(0))
    return span // SHORTEST_UNIT[grouping] + 2


def generate_intervals(
    request: IntervalRequest, settings: Settings,
) -> tuple[GeneratorConfig, list[TimeInterval]]:
    """Generate intervals for an API request. Raises IntervalsError subclasses."""
    config = build_config(request, settings)
    context = ErrorContext(
        grouping=config.grouping.value, offset_west_secs=config.offset_west_secs,
    )

    if estimate_max_count(config.grouping, request.begin, request.end) > settings.max_intervals:
        raise TooManyIntervalsError(settings.max_intervals, context)

    intervals = get_intervals(config, request.begin, request.end)
    logger.info(
        f"Generated {len(intervals)} {config.grouping.value} interval(s)",
        extra={
            "grouping": config.grouping.value,
            "offset_west_secs": config.offset_west_secs,
            "interval_count": len(intervals),
        },
    )
    return config, intervals
