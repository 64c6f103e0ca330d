"""Flyer events: forwarded flyer images to spreadsheet rows."""
