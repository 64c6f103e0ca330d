"""Inbound email handling: form parsing, per-attachment pipeline, HTTP route."""

from flyer_events.inbound.parsing import parse_inbound_form
from flyer_events.inbound.pipeline import process_attachment, process_inbound_email

__all__ = [
    "parse_inbound_form",
    "process_attachment",
    "process_inbound_email",
]
