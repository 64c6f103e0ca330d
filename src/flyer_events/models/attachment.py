"""Inbound email, per-attachment results, and request summary models."""

from enum import Enum

from pydantic import BaseModel

from flyer_events.models.event import NormalizedEvent


class InboundAttachment(BaseModel):
    """A file attached to the inbound email."""

    filename: str = "image"
    content_type: str
    content: bytes
    size: int


class ParsedEmail(BaseModel):
    """Fields read from the inbound-parse form (no raw payload)."""

    to: list[str] = []
    sender: str = ""
    subject: str = ""
    text: str | None = None
    html: str | None = None
    attachments: list[InboundAttachment] = []


class AttachmentEventGroup(BaseModel):
    """Normalized events from one attachment plus its uploaded image URL, if any."""

    events: list[NormalizedEvent]
    source_ref: str | None = None


class AttachmentStatus(str, Enum):
    """Outcome of processing one attachment."""

    EXTRACTED = "extracted"
    NO_EVENTS = "no_events"
    FAILED = "failed"


class PipelineStage(str, Enum):
    """Per-attachment stage a failure is attributed to."""

    EXTRACTION = "extraction"
    UPLOAD = "upload"


class AttachmentResult(BaseModel):
    """Explicit success/failure record for one attachment's pipeline run."""

    filename: str
    status: AttachmentStatus
    events: list[NormalizedEvent] = []
    source_ref: str | None = None
    failed_stage: PipelineStage | None = None
    error: str | None = None
    upload_error: str | None = None  # Upload failed or timed out; row link left empty

    def to_group(self) -> AttachmentEventGroup:
        return AttachmentEventGroup(events=self.events, source_ref=self.source_ref)


class BatchResult(BaseModel):
    """Outcome of the single spreadsheet append for a request."""

    rows_written: int = 0
    updated_range: str | None = None


class RequestSummary(BaseModel):
    """Request-level summary of all attachment results and the batch write."""

    attachments: list[AttachmentResult]
    events_found: int
    rows_written: int
    updated_range: str | None = None
    failed_attachments: int

    def to_log_dict(self) -> dict:
        """Compact view for logging and the HTTP response (no event bodies)."""
        return {
            "attachments": [
                {
                    "filename": a.filename,
                    "status": a.status.value,
                    "events": len(a.events),
                    "source_ref": a.source_ref,
                    "failed_stage": a.failed_stage.value if a.failed_stage else None,
                    "error": a.error,
                    "upload_error": a.upload_error,
                }
                for a in self.attachments
            ],
            "events_found": self.events_found,
            "rows_written": self.rows_written,
            "updated_range": self.updated_range,
            "failed_attachments": self.failed_attachments,
        }
