from .clock import (
    Clock,
    Instant,
    MonotonicClock,
    SupportsSecondsSince,
    SystemClock,
    seconds_between,
)
from .duration import Duration, DurationParseError
from .util import DAY, HOUR, MAX_SECONDS, MINUTE, SECOND

__all__ = [
    "Duration",
    "DurationParseError",
    "Clock",
    "Instant",
    "SupportsSecondsSince",
    "SystemClock",
    "MonotonicClock",
    "seconds_between",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "MAX_SECONDS",
]
