"""Select upcoming departures and render them as widget text."""

import logging
from datetime import datetime, timedelta
from itertools import islice

from .models import TransportResponse
from .relative_time import humanize

logger = logging.getLogger(__name__)

NO_DEPARTURES = "No departures"
TIME_FORMAT_ERROR = "Could not format departure"


def render_departures(data: TransportResponse, num_departures: int, now: datetime) -> str:
    """
    Build the text block for one station pair.

    Args:
        data: Decoded planner response.
        num_departures: Maximum number of departure lines to emit.
        now: Reference instant; every departure is compared against it.

    Returns:
        "{from} -> {to}" followed by one "\\n{in ...} (HH:MM)" line per
        upcoming departure, or "\\nNo departures" when the planner returned
        no connections at all.
    """
    content = f"{data.from_.name} -> {data.to.name}"

    if not data.connections:
        return content + f"\n{NO_DEPARTURES}"

    upcoming = (
        connection
        for connection in data.connections
        if connection.departure - now > timedelta(0)
    )

    for connection in islice(upcoming, num_departures):
        departure = connection.departure
        content += (
            f"\n{format_departure_offset(departure, now)}"
            f" ({format_departure_time(departure)})"
        )

    return content


def format_departure_time(departure: datetime) -> str:
    """Wall-clock HH:MM in the departure's own UTC offset."""
    try:
        return departure.strftime("%H:%M")
    except (ValueError, OverflowError) as e:
        logger.warning(f"Failed to format departure {departure!r}: {e}")
        return TIME_FORMAT_ERROR


def format_departure_offset(departure: datetime, now: datetime) -> str:
    """Rough time until departure, e.g. "in 5 minutes"."""
    return humanize(departure - now)
