"""Data models and enums for the flyer events pipeline."""

from flyer_events.models.attachment import (
    AttachmentEventGroup,
    AttachmentResult,
    AttachmentStatus,
    BatchResult,
    InboundAttachment,
    ParsedEmail,
    PipelineStage,
    RequestSummary,
)
from flyer_events.models.event import NormalizedEvent, RawExtractedEvent
from flyer_events.models.row import COLUMNS, FormattedRow, NullCostPolicy

__all__ = [
    "AttachmentEventGroup",
    "AttachmentResult",
    "AttachmentStatus",
    "BatchResult",
    "COLUMNS",
    "FormattedRow",
    "InboundAttachment",
    "NormalizedEvent",
    "NullCostPolicy",
    "ParsedEmail",
    "PipelineStage",
    "RawExtractedEvent",
    "RequestSummary",
]
