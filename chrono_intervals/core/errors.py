"""Error Hierarchy — typed, categorized exceptions for all interval generation failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Input errors (400-level) are the caller's to fix; OUT_OF_RANGE is a calendar limit
    - to_response() produces the REST error envelope
    - No partial results: an error means nothing was returned

Design Decisions:
    - Single hierarchy with IntervalsError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CALENDAR_RANGE = "calendar_range"
    LIMIT = "limit"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    grouping: str | None = None
    offset_west_secs: int | None = None
    debug_info: dict[str, Any] | None = None


class IntervalsError(Exception):
    """Base exception for all chrono-intervals errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "grouping": self.context.grouping,
                    "offset_west_secs": self.context.offset_west_secs,
                },
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class InvalidRangeError(IntervalsError):
    """Requested range ends before it begins."""
    def __init__(self, begin: datetime, end: datetime, context: ErrorContext | None = None):
        super().__init__(
            f"Range end {end.isoformat()} is before begin {begin.isoformat()}",
            "INVALID_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.begin = begin
        self.end = end


class NaiveInstantError(IntervalsError):
    """Instant has no timezone information."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{field}' must be timezone-aware (got a naive datetime)",
            "NAIVE_INSTANT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidPrecisionError(IntervalsError):
    """Gap between intervals is not a positive duration."""
    def __init__(self, precision: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Precision must be a positive duration, got {precision!r}",
            "INVALID_PRECISION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.precision = precision


class InvalidOffsetError(IntervalsError):
    """Alignment offset outside the range of a fixed UTC offset."""
    def __init__(self, offset_west_secs: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Offset must be an integer strictly between -86400 and 86400 seconds, "
            f"got {offset_west_secs!r}",
            "INVALID_OFFSET", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.offset_west_secs = offset_west_secs


class InvalidGroupingError(IntervalsError):
    """Grouping value is not one of the known granularities."""
    def __init__(self, grouping: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown grouping {grouping!r}",
            "INVALID_GROUPING", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.grouping = grouping


class TooManyIntervalsError(IntervalsError):
    """Request would produce more intervals than the configured limit."""
    def __init__(self, max_intervals: int, context: ErrorContext | None = None):
        super().__init__(
            f"Request exceeds the maximum of {max_intervals} intervals. "
            f"Use a coarser grouping or a shorter range.",
            "TOO_MANY_INTERVALS", ErrorCategory.LIMIT,
            ErrorSeverity.WARNING, context, 413,
        )
        self.max_intervals = max_intervals


# ─── Calendar Errors ────────────────────────────────────────────

class OutOfRangeError(IntervalsError):
    """Calendar arithmetic left the representable datetime range."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Calendar arithmetic out of range during {operation}",
            "OUT_OF_RANGE", ErrorCategory.CALENDAR_RANGE,
            ErrorSeverity.ERROR, context, 422,
        )
        self.operation = operation
