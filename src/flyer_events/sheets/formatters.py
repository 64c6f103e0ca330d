"""Pure display formatters for the Date, Time and Cost columns.

All three are total: unparseable input comes back unchanged (or empty for
missing values) rather than raising, so a partial value from the vision model
still reaches the sheet.
"""

import re
from datetime import date, datetime

from dateutil import parser as dateutil_parser

from flyer_events.models.row import NullCostPolicy

_TWELVE_HOUR_RE = re.compile(r"\d{1,2}:\d{2}\s*(AM|PM)", re.IGNORECASE)
_TWENTY_FOUR_HOUR_RE = re.compile(r"(\d{1,2}):(\d{2})")
_COST_NUMBER_RE = re.compile(r"(\d+(?:\.\d{2})?)")

# Two defaults differing in every date part; parses that depend on them are partial
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)

_NULL_COST_LABELS = {
    NullCostPolicy.FREE: "Free",
    NullCostPolicy.UNKNOWN: "Unknown",
}


def _parse_full_date(date_string: str) -> date | None:
    """Return the calendar date only if the string names year, month and day.

    ISO strings are tried first. Free-form strings go through dateutil twice
    with different defaults; a partial date ("March", "Saturday", "15")
    resolves differently per default and is rejected.
    """
    try:
        return datetime.fromisoformat(date_string.strip()).date()
    except ValueError:
        pass

    try:
        first = dateutil_parser.parse(date_string, default=_DEFAULT_A).date()
        second = dateutil_parser.parse(date_string, default=_DEFAULT_B).date()
    except (ValueError, OverflowError):
        return None
    return first if first == second else None


def format_date(date_string: str | None) -> str:
    """Format a date as MM/DD/YYYY.

    Anything short of a complete date is echoed unchanged; no missing part is
    filled in from today or any other default.
    """
    if not date_string:
        return ""
    parsed = _parse_full_date(date_string)
    if parsed is None:
        return date_string
    return parsed.strftime("%m/%d/%Y")


def format_time(time_string: str | None) -> str:
    """Format a time as H:MM AM/PM.

    Values already carrying an AM/PM suffix are uppercased; 24-hour H:MM values
    are converted (00:xx -> 12:xx AM, 12:xx -> 12:xx PM). Anything else is
    returned trimmed.
    """
    if not time_string:
        return ""

    time = time_string.strip()

    if _TWELVE_HOUR_RE.search(time):
        return time.upper()

    match = _TWENTY_FOUR_HOUR_RE.search(time)
    if match:
        hours = int(match.group(1))
        minutes = match.group(2)
        suffix = "PM" if hours >= 12 else "AM"
        if hours == 0:
            hours = 12
        elif hours > 12:
            hours -= 12
        return f"{hours}:{minutes} {suffix}"

    return time


def format_cost(
    cost_string: str | None,
    null_cost_policy: NullCostPolicy = NullCostPolicy.UNKNOWN,
) -> str:
    """Format a cost as $N or Free.

    Missing cost maps to the policy label ("Unknown" or "Free"). Strings that
    mention "free", or equal "0"/"$0", map to "Free". A leading "$" keeps the
    original string; otherwise the first number gets a "$" prefix. With no
    number at all the original string is returned.
    """
    if not cost_string:
        return _NULL_COST_LABELS[NullCostPolicy(null_cost_policy)]

    cost = cost_string.lower().strip()

    if "free" in cost or cost in ("0", "$0"):
        return "Free"

    if cost.startswith("$"):
        return cost_string

    match = _COST_NUMBER_RE.search(cost)
    if match:
        return f"${match.group(1)}"

    return cost_string
