"""Spreadsheet output: field formatting, row building and the batch append."""

from flyer_events.sheets.client import SheetsDestination, build_sheets_service
from flyer_events.sheets.formatters import format_cost, format_date, format_time
from flyer_events.sheets.rows import format_event_for_spreadsheet
from flyer_events.sheets.service import SpreadsheetConfigError, add_events_to_spreadsheet

__all__ = [
    "add_events_to_spreadsheet",
    "build_sheets_service",
    "format_cost",
    "format_date",
    "format_event_for_spreadsheet",
    "format_time",
    "SheetsDestination",
    "SpreadsheetConfigError",
]
