"""Vision model response schema for Gemini structured output."""

from pydantic import BaseModel, Field

from flyer_events.models.event import RawExtractedEvent


class ExtractionResponse(BaseModel):
    """Schema for Gemini structured output. Used as response_schema parameter."""

    events: list[RawExtractedEvent] = Field(
        default_factory=list,
        description="Every event found on the flyer; empty if none",
    )
