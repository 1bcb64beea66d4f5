import logging
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from hms_duration.util import HOUR, MAX_SECONDS, MINUTE, require_count, saturate

if TYPE_CHECKING:
    from hms_duration.clock import Clock, Instant

logger = logging.getLogger(__name__)

_FIELD = re.compile(r"[0-9]+")
_MAX_DIGITS = len(str(MAX_SECONDS))


class DurationParseError(ValueError):
    """Raised when a string is not a valid ``H:M:S`` duration."""

    def __init__(self, text: str):
        self.text: str = text
        super().__init__(
            f"Could not parse {text!r} as a duration.\n"
            f"Expected three ':'-separated non-negative integers, "
            f"e.g. '01:30:45' or '0:90:0'"
        )


@dataclass(frozen=True, kw_only=True, order=True)
class Duration:
    """Non-negative span of time with whole-second precision.

    ``seconds`` is the only stored state; hours, minutes and seconds
    components are derived from it. Arithmetic saturates at ``0`` and
    ``MAX_SECONDS`` instead of raising or wrapping.
    """

    seconds: int = 0

    def __post_init__(self) -> None:
        require_count(self.seconds, "seconds")
        if self.seconds > MAX_SECONDS:
            raise ValueError(
                f"Duration seconds ({self.seconds}) must be <= {MAX_SECONDS}.\n"
                f"Hint: Duration.from_seconds() saturates instead of raising"
            )

    # Construction

    @classmethod
    def zero(cls) -> "Duration":
        return cls(seconds=0)

    @classmethod
    def from_seconds(cls, seconds: int) -> "Duration":
        return cls(seconds=saturate(require_count(seconds, "seconds")))

    @classmethod
    def from_minutes(cls, minutes: int) -> "Duration":
        """Create a Duration from whole minutes, saturating on overflow."""
        return cls(seconds=saturate(require_count(minutes, "minutes") * MINUTE))

    @classmethod
    def from_hours(cls, hours: int) -> "Duration":
        """Create a Duration from whole hours, saturating on overflow."""
        return cls(seconds=saturate(require_count(hours, "hours") * HOUR))

    @classmethod
    def from_hms(cls, hours: int, minutes: int, seconds: int) -> "Duration":
        """Create a Duration from an hours/minutes/seconds triple.

        The components are summed, not validated as a clock reading, so
        ``from_hms(0, 90, 0)`` equals ``from_hms(1, 30, 0)``.
        """
        total = (
            require_count(hours, "hours") * HOUR
            + require_count(minutes, "minutes") * MINUTE
            + require_count(seconds, "seconds")
        )
        return cls(seconds=saturate(total))

    @classmethod
    def from_timedelta(cls, td: timedelta) -> "Duration":
        """Create a Duration from a timedelta, dropping sub-second precision.

        Raises:
            ValueError: If td is negative
        """
        if td < timedelta(0):
            raise ValueError(
                f"Cannot create a Duration from a negative timedelta: {td!r}\n"
                f"Hint: Use abs(td) if only the magnitude matters"
            )
        return cls.from_seconds(td // timedelta(seconds=1))

    @classmethod
    def from_system_time_diff(
        cls, earlier: "Instant", later: "Instant"
    ) -> "Duration | None":
        """Create a Duration from the gap between two instants.

        Instants may be POSIX or monotonic readings (int/float), datetimes,
        or objects implementing ``seconds_since``. Returns None when
        ``later`` precedes ``earlier``; equal instants give a zero Duration.
        """
        from hms_duration.clock import seconds_between

        elapsed = seconds_between(earlier, later)
        if elapsed is None:
            return None
        return cls.from_seconds(elapsed)

    @classmethod
    def elapsed_since(
        cls, start: "Instant", clock: "Clock | None" = None
    ) -> "Duration | None":
        """Duration from ``start`` to the clock's current instant.

        Defaults to the wall clock. Returns None if the clock reads earlier
        than ``start``.
        """
        from hms_duration.clock import SystemClock

        if clock is None:
            clock = SystemClock()
        return cls.from_system_time_diff(start, clock.now())

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Parse an ``H:M:S`` string.

        Each field is one or more ASCII digits. Minutes and seconds outside
        0-59 are accepted and folded into the total, so ``"00:90:00"``
        parses to 1 hour 30 minutes.

        Raises:
            TypeError: If text is not a str
            DurationParseError: If text is not three digit fields
        """
        if not isinstance(text, str):
            raise TypeError(
                f"Duration.parse() expects a str, got {type(text).__name__!r}"
            )
        fields = text.split(":")
        if len(fields) != 3:
            logger.debug("Rejected %r: expected 3 fields, got %d", text, len(fields))
            raise DurationParseError(text)

        values: list[int] = []
        for field in fields:
            if not _FIELD.fullmatch(field):
                logger.debug("Rejected %r: non-digit field %r", text, field)
                raise DurationParseError(text)
            digits = field.lstrip("0") or "0"
            if len(digits) > _MAX_DIGITS or int(digits) > MAX_SECONDS:
                logger.debug("Rejected %r: field %r out of range", text, field)
                raise DurationParseError(text)
            values.append(int(digits))

        hours, minutes, seconds = values
        return cls.from_hms(hours, minutes, seconds)

    @classmethod
    def try_parse(cls, text: str) -> "Duration | None":
        """Like ``parse`` but returns None for malformed input."""
        try:
            return cls.parse(text)
        except DurationParseError:
            return None

    # Accessors

    def as_seconds(self) -> int:
        return self.seconds

    def as_minutes(self) -> int:
        """Total minutes, truncated (90 seconds is 1 minute)."""
        return self.seconds // MINUTE

    def as_hours(self) -> int:
        """Total hours, truncated."""
        return self.seconds // HOUR

    def hours_part(self) -> int:
        """Hours component of the clock reading; unbounded above."""
        return self.seconds // HOUR

    def minutes_part(self) -> int:
        """Minutes component of the clock reading (0-59)."""
        return (self.seconds // MINUTE) % 60

    def seconds_part(self) -> int:
        """Seconds component of the clock reading (0-59)."""
        return self.seconds % MINUTE

    def is_zero(self) -> bool:
        return self.seconds == 0

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    def format(self) -> str:
        """Format as ``HH:MM:SS``; hours widen past two digits as needed."""
        return (
            f"{self.hours_part():02d}:"
            f"{self.minutes_part():02d}:"
            f"{self.seconds_part():02d}"
        )

    @override
    def __str__(self) -> str:
        return self.format()

    # Arithmetic

    def saturating_add(self, other: "Duration") -> "Duration":
        """Sum of both durations, clamped at ``MAX_SECONDS``."""
        return Duration(seconds=saturate(self.seconds + other.seconds))

    def saturating_sub(self, other: "Duration") -> "Duration":
        """Difference of both durations, clamped at zero."""
        if self.seconds >= other.seconds:
            return Duration(seconds=self.seconds - other.seconds)
        return Duration(seconds=0)

    def add_seconds(self, seconds: int) -> "Duration":
        """Return a new Duration with ``seconds`` added, saturating."""
        return Duration(
            seconds=saturate(self.seconds + require_count(seconds, "seconds"))
        )

    def __add__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.saturating_add(other)

    def __sub__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.saturating_sub(other)

    def __mul__(self, factor: Any) -> "Duration":
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Duration(
            seconds=saturate(self.seconds * require_count(factor, "factor"))
        )

    __rmul__ = __mul__

    def __floordiv__(self, divisor: Any) -> "Duration":
        """Floor-divide by a positive int.

        Raises:
            ValueError: If divisor is zero or negative
        """
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            return NotImplemented
        if require_count(divisor, "divisor") == 0:
            raise ValueError(
                "Cannot divide a Duration by zero.\n"
                "Hint: Check the divisor before splitting a Duration into parts"
            )
        return Duration(seconds=self.seconds // divisor)
