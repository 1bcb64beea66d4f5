"""Unit constants and saturation helpers for hms_duration.

Time unit constants represent durations in seconds. ``MAX_SECONDS`` is the
ceiling of the 64-bit unsigned count a Duration can hold; every arithmetic
path clamps into ``[0, MAX_SECONDS]`` instead of overflowing or going
negative.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

MAX_SECONDS = 2**64 - 1


def saturate(value: int) -> int:
    """Clamp an integer count of seconds into ``[0, MAX_SECONDS]``."""
    if value < 0:
        return 0
    if value > MAX_SECONDS:
        return MAX_SECONDS
    return value


def require_count(value: object, name: str) -> int:
    """Validate a non-negative integer argument and return it.

    Raises:
        TypeError: If value is not an int (bools are rejected too)
        ValueError: If value is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{name} must be a non-negative int.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: Durations have whole-second precision; "
            f"convert with int() first if truncation is intended."
        )
    if value < 0:
        raise ValueError(
            f"{name} must be non-negative, got {value}.\n"
            f"Hint: Durations cannot be negative; "
            f"use subtraction (a - b) to get a clamped difference."
        )
    return value
