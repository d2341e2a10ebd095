"""Generator Config — immutable generation options plus builder-style override functions.

Invariants:
    - GeneratorConfig is frozen: every with_*/without_* returns a NEW instance
    - new_generator() always returns the same fixed defaults (no mutable global default)
    - Defaults: PER_DAY, offset 0, precision 1ms, extend_begin and extend_end True
    - Offset and precision validated on construction; precision magnitude is NOT capped

Design Decisions:
    - Frozen dataclass + dataclasses.replace over a mutable builder: configs can be shared
      across threads and calls without aliasing
    - Validation in __post_init__: replace() re-runs it, so no override can skip it
    - Free functions mirror the chained-setter API: with_precision(with_grouping(cfg, g), p)
"""

from dataclasses import dataclass, replace
from datetime import timedelta, timezone

from chrono_intervals.core.boundaries import coerce_grouping, shifted_timezone
from chrono_intervals.core.domain_types import DEFAULT_PRECISION, Grouping, OffsetWestSeconds
from chrono_intervals.core.errors import InvalidPrecisionError


@dataclass(frozen=True)
class GeneratorConfig:
    """Options for one interval generation call."""
    grouping: Grouping = Grouping.PER_DAY
    offset_west_secs: OffsetWestSeconds = 0
    precision: timedelta = DEFAULT_PRECISION
    extend_begin: bool = True
    extend_end: bool = True

    def __post_init__(self):
        object.__setattr__(self, "grouping", coerce_grouping(self.grouping))
        shifted_timezone(self.offset_west_secs)
        validate_precision(self.precision)

    @property
    def shifted_timezone(self) -> timezone:
        """Frame in which boundaries are truncated."""
        return shifted_timezone(self.offset_west_secs)


def validate_precision(precision: timedelta) -> None:
    if not isinstance(precision, timedelta) or precision <= timedelta(0):
        raise InvalidPrecisionError(precision)


def new_generator() -> GeneratorConfig:
    return GeneratorConfig()


def with_grouping(config: GeneratorConfig, grouping: Grouping | str) -> GeneratorConfig:
    return replace(config, grouping=grouping)


def with_offset_west_secs(
    config: GeneratorConfig, seconds: OffsetWestSeconds,
) -> GeneratorConfig:
    """Shift boundaries west of UTC, e.g. 7 * 3600 for PDT, -2 * 3600 for CEST."""
    return replace(config, offset_west_secs=seconds)


def with_precision(config: GeneratorConfig, precision: timedelta) -> GeneratorConfig:
    """Gap kept between one interval's end and the next one's start."""
    return replace(config, precision=precision)


def without_extended_begin(config: GeneratorConfig) -> GeneratorConfig:
    return replace(config, extend_begin=False)


def without_extended_end(config: GeneratorConfig) -> GeneratorConfig:
    return replace(config, extend_end=False)


def without_extension(config: GeneratorConfig) -> GeneratorConfig:
    """Keep only intervals fully enclosed by the requested range."""
    return replace(config, extend_begin=False, extend_end=False)
