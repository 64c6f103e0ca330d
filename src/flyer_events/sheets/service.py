"""Batch write of all events from one inbound request.

Every attachment's events are formatted into rows and written with exactly one
append call, so a multi-image email never produces more than one sheet write.
"""

import logging

from flyer_events.models.attachment import AttachmentEventGroup, BatchResult
from flyer_events.models.row import NullCostPolicy
from flyer_events.sheets.client import SheetsDestination
from flyer_events.sheets.rows import format_event_for_spreadsheet

logger = logging.getLogger(__name__)


class SpreadsheetConfigError(RuntimeError):
    """Raised when no destination spreadsheet id is configured."""


async def add_events_to_spreadsheet(
    groups: list[AttachmentEventGroup],
    destination: SheetsDestination,
    null_cost_policy: NullCostPolicy = NullCostPolicy.UNKNOWN,
) -> BatchResult:
    """Format every event across groups and append them as one batch.

    1. No events in any group -> return without contacting the destination
    2. Missing spreadsheet id -> SpreadsheetConfigError (before formatting)
    3. Rows are ordered by group (attachment order), then event order
    4. One append call; its errors are logged and re-raised

    Returns:
        BatchResult with the number of rows written and the updated range.
    """
    if not any(group.events for group in groups):
        logger.info("No events to add to spreadsheet", extra={"groups": len(groups)})
        return BatchResult()

    if not destination.is_configured:
        raise SpreadsheetConfigError("GOOGLE_SPREADSHEET_ID is not set")

    rows = [
        format_event_for_spreadsheet(event, group.source_ref, null_cost_policy).to_values()
        for group in groups
        for event in group.events
    ]

    try:
        updated_range = await destination.append(rows)
    except Exception:
        logger.error("Error adding %d events to spreadsheet", len(rows), exc_info=True)
        raise

    logger.info(
        "Added %d events to spreadsheet",
        len(rows),
        extra={"rows": len(rows), "updated_range": updated_range},
    )
    return BatchResult(rows_written=len(rows), updated_range=updated_range)
