"""Clock adapter: the current instant as a timezone-aware datetime."""

import time
from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def from_unix_timestamp(seconds: int) -> datetime:
    """Convert whole epoch seconds to a UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def system_now() -> datetime:
    """Current time, truncated to whole seconds like the host clock."""
    return from_unix_timestamp(int(time.time()))


def fixed_clock(instant: datetime) -> Clock:
    """Return a clock that always reports ``instant``."""
    if instant.tzinfo is None:
        raise ValueError("Fixed clock instant must be timezone-aware")
    return lambda: instant
