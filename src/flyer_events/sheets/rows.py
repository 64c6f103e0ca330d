"""Pure function mapping a NormalizedEvent to a spreadsheet row."""

from flyer_events.models.event import NormalizedEvent
from flyer_events.models.row import FormattedRow, NullCostPolicy
from flyer_events.sheets.formatters import format_cost, format_date, format_time


def format_event_for_spreadsheet(
    event: NormalizedEvent,
    source_ref: str | None,
    null_cost_policy: NullCostPolicy = NullCostPolicy.UNKNOWN,
) -> FormattedRow:
    """Build the ten-column row for one event.

    The Date column uses start_day only; the Link column is source_ref as
    given (empty when the image upload produced no URL).
    """
    return FormattedRow(
        date=format_date(event.start_day),
        event_name=event.title or "",
        type=event.type or "",
        start_time=format_time(event.start_time),
        end_time=format_time(event.end_time),
        location=event.location or "",
        address=event.address or "",
        description=event.description or "",
        cost=format_cost(event.cost, null_cost_policy),
        link=source_ref or "",
    )
