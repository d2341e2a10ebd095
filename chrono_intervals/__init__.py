"""chrono-intervals — calendar-aligned UTC time intervals per hour, day, week, month etc.

Invariants:
    - Package root has no import side effects (no logging setup, no settings read)
    - Public library API re-exported explicitly from core/

Design Decisions:
    - Explicit re-exports over star imports: every public name visible in one place
"""

from chrono_intervals.core.boundaries import boundary_at_or_before, next_boundary
from chrono_intervals.core.domain_types import Grouping, TimeInterval
from chrono_intervals.core.errors import (
    IntervalsError,
    InvalidGroupingError,
    InvalidOffsetError,
    InvalidPrecisionError,
    InvalidRangeError,
    NaiveInstantError,
    OutOfRangeError,
    TooManyIntervalsError,
)
from chrono_intervals.core.generate_intervals import (
    get_extended_utc_intervals,
    get_intervals,
    get_utc_intervals_opts,
)
from chrono_intervals.core.generator_config import (
    GeneratorConfig,
    new_generator,
    with_grouping,
    with_offset_west_secs,
    with_precision,
    without_extended_begin,
    without_extended_end,
    without_extension,
)

__version__ = "0.1.0"

__all__ = [
    # domain types
    "Grouping",
    "TimeInterval",
    # configuration
    "GeneratorConfig",
    "new_generator",
    "with_grouping",
    "with_offset_west_secs",
    "with_precision",
    "without_extended_begin",
    "without_extended_end",
    "without_extension",
    # generation
    "get_intervals",
    "get_extended_utc_intervals",
    "get_utc_intervals_opts",
    "boundary_at_or_before",
    "next_boundary",
    # errors
    "IntervalsError",
    "InvalidGroupingError",
    "InvalidOffsetError",
    "InvalidPrecisionError",
    "InvalidRangeError",
    "NaiveInstantError",
    "OutOfRangeError",
    "TooManyIntervalsError",
]
