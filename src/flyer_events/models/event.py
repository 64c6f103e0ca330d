"""Extracted and normalized event models.

Attribute names are snake_case; the JSON names the vision model emits are the
camelCase aliases (``startDay``, ``endTime``, ...).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RawExtractedEvent(BaseModel):
    """One event detected on a flyer image, exactly as the model returned it.

    ``location`` and ``type`` are expected to come from fixed lists (see
    llm.prompts) but are not validated here.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = ""
    address: str = ""
    location: str = ""
    type: str = ""
    start_day: str | None = Field(default=None, alias="startDay")  # YYYY-MM-DD
    start_time: str | None = Field(default=None, alias="startTime")  # HH:mm
    end_day: str | None = Field(default=None, alias="endDay")
    end_time: str | None = Field(default=None, alias="endTime")
    description: str = ""
    cost: str | None = None  # Free-form: "$25", "Free", "25"

    @field_validator("title", "address", "location", "type", "description", mode="before")
    @classmethod
    def null_to_empty(cls, v: str | None) -> str:
        # The model sends null for text it cannot read
        return "" if v is None else v


class NormalizedEvent(RawExtractedEvent):
    """A RawExtractedEvent with missing days and times filled in by normalize_event."""
