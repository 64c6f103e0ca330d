"""Tests for the single-append batch write."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from flyer_events.models.attachment import AttachmentEventGroup, BatchResult
from flyer_events.models.event import NormalizedEvent
from flyer_events.models.row import NullCostPolicy
from flyer_events.sheets.client import SheetsDestination
from flyer_events.sheets.rows import format_event_for_spreadsheet
from flyer_events.sheets.service import SpreadsheetConfigError, add_events_to_spreadsheet


def _make_event(title: str, **overrides) -> NormalizedEvent:
    """Return a NormalizedEvent identified by title."""
    defaults = {
        "title": title,
        "address": "1 Main St",
        "location": "Berkeley",
        "type": "Dance",
        "start_day": "2025-06-01",
        "start_time": "20:00",
        "end_day": "2025-06-01",
        "end_time": "23:00",
        "description": f"{title} description",
        "cost": "$10",
    }
    defaults.update(overrides)
    return NormalizedEvent(**defaults)


def _make_destination(updated_range: str = "Sheet1!A2:J4") -> MagicMock:
    """Return a configured destination mock with an async append."""
    destination = MagicMock(spec=SheetsDestination)
    destination.is_configured = True
    destination.append = AsyncMock(return_value=updated_range)
    return destination


async def test_rows_flattened_in_group_order():
    """Rows follow group order then event order; empty groups contribute nothing."""
    e1, e2, e3 = _make_event("e1"), _make_event("e2"), _make_event("e3")
    groups = [
        AttachmentEventGroup(events=[e1, e2], source_ref="r1"),
        AttachmentEventGroup(events=[], source_ref="r2"),
        AttachmentEventGroup(events=[e3], source_ref="r3"),
    ]
    destination = _make_destination()

    result = await add_events_to_spreadsheet(groups, destination)

    destination.append.assert_awaited_once()
    rows = destination.append.call_args.args[0]
    assert rows == [
        format_event_for_spreadsheet(e1, "r1").to_values(),
        format_event_for_spreadsheet(e2, "r1").to_values(),
        format_event_for_spreadsheet(e3, "r3").to_values(),
    ]
    assert result == BatchResult(rows_written=3, updated_range="Sheet1!A2:J4")


async def test_single_append_for_many_groups():
    """Ten images with events still produce exactly one destination write."""
    groups = [
        AttachmentEventGroup(events=[_make_event(f"e{i}")], source_ref=f"r{i}")
        for i in range(10)
    ]
    destination = _make_destination()

    result = await add_events_to_spreadsheet(groups, destination)

    assert destination.append.await_count == 1
    assert len(destination.append.call_args.args[0]) == 10
    assert result.rows_written == 10


async def test_missing_source_ref_gives_empty_link():
    """A group without a source ref writes an empty Link column."""
    groups = [AttachmentEventGroup(events=[_make_event("e1")], source_ref=None)]
    destination = _make_destination()

    await add_events_to_spreadsheet(groups, destination)

    rows = destination.append.call_args.args[0]
    assert rows[0][-1] == ""


@pytest.mark.parametrize(
    "groups",
    [
        [],
        [AttachmentEventGroup(events=[], source_ref="r1")],
        [
            AttachmentEventGroup(events=[], source_ref="r1"),
            AttachmentEventGroup(events=[], source_ref=None),
        ],
    ],
)
async def test_no_events_skips_destination(groups):
    """No events at all: the destination is never contacted."""
    destination = _make_destination()

    result = await add_events_to_spreadsheet(groups, destination)

    destination.append.assert_not_called()
    assert result == BatchResult(rows_written=0, updated_range=None)


async def test_missing_spreadsheet_id_raises_before_formatting():
    """Unconfigured destination fails before any row is formatted or written."""
    service = MagicMock()
    destination = SheetsDestination(spreadsheet_id="", service=service)
    groups = [AttachmentEventGroup(events=[_make_event("e1")], source_ref="r1")]

    with patch("flyer_events.sheets.service.format_event_for_spreadsheet") as mock_format:
        with pytest.raises(SpreadsheetConfigError):
            await add_events_to_spreadsheet(groups, destination)

    mock_format.assert_not_called()
    service.spreadsheets.assert_not_called()


async def test_missing_spreadsheet_id_with_no_events_is_noop():
    """Nothing to write is a no-op even when the destination is unconfigured."""
    destination = SheetsDestination(spreadsheet_id="", service=MagicMock())

    result = await add_events_to_spreadsheet([], destination)

    assert result.rows_written == 0


async def test_append_error_propagates_unchanged():
    """Destination failures are re-raised as the same exception object."""
    error = RuntimeError("quota exceeded")
    destination = _make_destination()
    destination.append.side_effect = error
    groups = [AttachmentEventGroup(events=[_make_event("e1")], source_ref="r1")]

    with pytest.raises(RuntimeError) as exc_info:
        await add_events_to_spreadsheet(groups, destination)

    assert exc_info.value is error


async def test_null_cost_policy_forwarded():
    """The configured null-cost policy reaches the Cost column."""
    groups = [AttachmentEventGroup(events=[_make_event("e1", cost=None)], source_ref="r1")]
    destination = _make_destination()

    await add_events_to_spreadsheet(groups, destination, null_cost_policy=NullCostPolicy.FREE)

    rows = destination.append.call_args.args[0]
    assert rows[0][8] == "Free"
