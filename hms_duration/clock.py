"""Instant differencing for measuring elapsed time.

The Duration type itself never reads a clock. This module is the seam where
an embedding application supplies instants (POSIX timestamps, monotonic
readings, datetimes, or its own instant objects) and gets back the forward
difference in whole seconds.
"""

import logging
import math
import time
from datetime import datetime, timedelta
from typing import Protocol, TypeAlias, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsSecondsSince(Protocol):
    """Opaque instant that knows how far it lies after another instant."""

    def seconds_since(self, other: "SupportsSecondsSince") -> float:
        """Return seconds elapsed from ``other`` to ``self``.

        A negative result means ``self`` is not after ``other``.
        """
        ...


Instant: TypeAlias = int | float | datetime | SupportsSecondsSince


@runtime_checkable
class Clock(Protocol):
    """Source of instants."""

    def now(self) -> Instant: ...


class SystemClock:
    """Wall clock backed by ``time.time()``."""

    def now(self) -> float:
        return time.time()


class MonotonicClock:
    """Clock backed by ``time.monotonic()``.

    Only differences between readings are meaningful, which is all
    ``seconds_between`` needs.
    """

    def now(self) -> float:
        return time.monotonic()


def _delta_seconds(earlier: Instant, later: Instant) -> int | float:
    """Signed seconds from ``earlier`` to ``later``.

    Raises:
        TypeError: If the two instants are of incompatible kinds
    """
    if isinstance(earlier, datetime) and isinstance(later, datetime):
        if (earlier.tzinfo is None) != (later.tzinfo is None):
            raise TypeError(
                f"Cannot difference a naive and a timezone-aware datetime.\n"
                f"Got earlier={earlier!r}, later={later!r}\n"
                f"Hint: Give both instants the same kind of tzinfo:\n"
                f"  datetime(..., tzinfo=timezone.utc)"
            )
        return (later - earlier) // timedelta(seconds=1)
    if _is_number(earlier) and _is_number(later):
        return later - earlier  # type: ignore[operator]
    if (
        isinstance(later, SupportsSecondsSince)
        and type(earlier) is type(later)
    ):
        return later.seconds_since(earlier)  # type: ignore[arg-type]
    raise TypeError(
        f"Instants must both be numbers, both datetimes, or both the same "
        f"type implementing seconds_since().\n"
        f"Got {type(earlier).__name__!r} and {type(later).__name__!r}\n"
        f"Examples:\n"
        f"  seconds_between(time.monotonic(), time.monotonic())\n"
        f"  seconds_between(datetime.now(timezone.utc), "
        f"datetime.now(timezone.utc))"
    )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def seconds_between(earlier: Instant, later: Instant) -> int | None:
    """Whole seconds from ``earlier`` to ``later``, or None if unavailable.

    Sub-second remainders are floored away. Equal instants give ``0``; a
    negative delta (reversed order, or a clock that stepped backwards)
    gives ``None`` rather than a fabricated zero.
    """
    delta = _delta_seconds(earlier, later)
    if (isinstance(delta, float) and not math.isfinite(delta)) or delta < 0:
        logger.debug(
            "No forward difference between %r and %r (delta=%s)",
            earlier,
            later,
            delta,
        )
        return None
    return math.floor(delta)
