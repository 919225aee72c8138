"""Time-of-day sources used for opening hour checks."""

from collections.abc import Callable
from datetime import datetime, time

Clock = Callable[[], time]


def system_clock() -> time:
    """Return the current wall-clock time of day."""
    return datetime.now().time()


def fixed_clock(at: time | str) -> Clock:
    """Build a clock that always reports the same time of day.

    Args:
        at: A time, or an ISO formatted string such as "10:30:00"

    Returns:
        Zero-argument callable returning ``at``
    """
    fixed = time.fromisoformat(at) if isinstance(at, str) else at

    def _clock() -> time:
        return fixed

    return _clock
