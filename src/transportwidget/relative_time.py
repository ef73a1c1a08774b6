"""Coarse English descriptions of time intervals ("in 5 minutes", "in 2 hours")."""

from datetime import timedelta
from typing import Tuple

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

# (exclusive lower bound in seconds, unit divisor, singular phrase, plural unit)
# Checked top-down; a divisor of None means the singular phrase always applies.
_ROUGH_PERIODS: Tuple[tuple, ...] = (
    (547 * DAY, YEAR, None, "years"),
    (345 * DAY, None, "a year", None),
    (45 * DAY, MONTH, None, "months"),
    (29 * DAY, None, "a month", None),
    (10 * DAY + 12 * HOUR, WEEK, None, "weeks"),
    (6 * DAY + 12 * HOUR, None, "a week", None),
    (36 * HOUR, DAY, None, "days"),
    (22 * HOUR, None, "a day", None),
    (90 * MINUTE, HOUR, None, "hours"),
    (45 * MINUTE, None, "an hour", None),
    (90, MINUTE, None, "minutes"),
    (45, None, "a minute", None),
)


def rough_period(seconds: int) -> str:
    """
    Describe a non-negative number of seconds in its dominant unit.

    Counts are floored and never drop below two once the plural form is used,
    so 100 seconds reads "2 minutes" rather than "1 minutes".
    """
    if seconds < 0:
        raise ValueError(f"Interval must be non-negative, got {seconds}")

    for bound, divisor, singular, plural in _ROUGH_PERIODS:
        if seconds > bound:
            if divisor is None:
                return singular
            return f"{max(seconds // divisor, 2)} {plural}"

    if seconds > 10:
        return f"{seconds} seconds"
    return "now"


def humanize(interval: timedelta) -> str:
    """
    Render the absolute size of ``interval`` as a rough future phrase.

    Args:
        interval: Any timedelta; its sign is ignored.

    Returns:
        "in 5 minutes", "in an hour" and so on, or a bare "now" for
        intervals of ten seconds or less.
    """
    seconds = abs(interval) // timedelta(seconds=1)
    text = rough_period(seconds)

    if text == "now":
        return text
    return f"in {text}"
