"""Fill in missing days and times on a raw extracted event.

Flyers often give only one side of a range. Each rule below targets its own
field and falls back to the sibling field; no date or time is invented when
both sides are missing.

    start_day  := start_day or end_day
    end_day    := end_day or start_day
    start_time := start_time or end_time
    end_time   := end_time, else start_time + 3h (wrapping past midnight)

Empty strings count as missing.
"""

import logging
from datetime import datetime, timedelta

from flyer_events.models.event import NormalizedEvent, RawExtractedEvent

logger = logging.getLogger(__name__)

DEFAULT_DURATION = timedelta(hours=3)


def _default_end_time(start_time: str) -> str:
    """Return start_time + DEFAULT_DURATION as HH:MM. Raises ValueError unless start_time is HH:MM."""
    start = datetime.strptime(start_time.strip(), "%H:%M")
    return (start + DEFAULT_DURATION).strftime("%H:%M")


def normalize_event(event: RawExtractedEvent) -> NormalizedEvent:
    """Resolve temporal gaps on one event. Never raises on bad time values."""
    end_time = event.end_time or None

    if not end_time and event.start_time:
        try:
            end_time = _default_end_time(event.start_time)
        except ValueError:
            logger.warning(
                "Could not parse start time %r for event %r; leaving end time empty",
                event.start_time,
                event.title,
            )

    return NormalizedEvent(
        title=event.title,
        address=event.address,
        location=event.location,
        type=event.type,
        start_day=event.start_day or event.end_day or None,
        end_day=event.end_day or event.start_day or None,
        start_time=event.start_time or event.end_time or None,
        end_time=end_time,
        description=event.description,
        cost=event.cost,
    )
