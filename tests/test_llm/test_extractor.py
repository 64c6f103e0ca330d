"""Extractor tests with a mocked Gemini client."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.genai import types
from pydantic import ValidationError

from flyer_events.llm.extractor import extract_events
from flyer_events.llm.prompts import GEMINI_MODEL
from flyer_events.llm.schemas import ExtractionResponse
from flyer_events.models.event import RawExtractedEvent

IMAGE = b"\x89PNG\r\n\x1a\nfake-image-bytes"


def _make_response(parsed=None, text: str | None = None) -> MagicMock:
    """Build a mock GenerateContentResponse."""
    response = MagicMock()
    response.parsed = parsed
    response.text = text
    response.usage_metadata.prompt_token_count = 1500
    response.usage_metadata.candidates_token_count = 200
    return response


def _make_client(response=None, error: Exception | None = None) -> MagicMock:
    """Return a mock genai.Client whose aio generate_content returns response."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response, side_effect=error)
    return client


async def test_returns_parsed_events():
    """The SDK's parsed ExtractionResponse is returned as-is."""
    parsed = ExtractionResponse(
        events=[RawExtractedEvent(title="Jazz Night", start_day="2025-03-15")]
    )
    client = _make_client(_make_response(parsed=parsed))

    result = await extract_events(client, IMAGE, "image/png", label="flyer.png")

    assert result is parsed
    assert result.events[0].title == "Jazz Night"


async def test_sends_image_and_structured_output_config():
    """One call with the prompt, the inline image, and the JSON schema config."""
    client = _make_client(_make_response(parsed=ExtractionResponse()))

    await extract_events(client, IMAGE, "image/jpeg", default_year=2026)

    client.aio.models.generate_content.assert_awaited_once()
    kwargs = client.aio.models.generate_content.call_args.kwargs
    assert kwargs["model"] == GEMINI_MODEL

    prompt_part, image_part = kwargs["contents"]
    assert "Set the year to 2026" in prompt_part.text
    assert image_part.inline_data.data == IMAGE
    assert image_part.inline_data.mime_type == "image/jpeg"

    config = kwargs["config"]
    assert isinstance(config, types.GenerateContentConfig)
    assert config.response_mime_type == "application/json"
    assert config.response_schema is ExtractionResponse


async def test_falls_back_to_response_text():
    """When the SDK did not parse, the raw JSON text is validated."""
    text = json.dumps(
        {
            "events": [
                {
                    "title": "Open Mic",
                    "address": "12 Oak St",
                    "location": "Berkeley",
                    "type": "Open Mic",
                    "startDay": "2025-05-02",
                    "startTime": "18:30",
                    "description": "Bring a poem",
                    "cost": None,
                }
            ]
        }
    )
    client = _make_client(_make_response(parsed=None, text=text))

    result = await extract_events(client, IMAGE, "image/png")

    event = result.events[0]
    assert event.start_time == "18:30"
    assert event.end_day is None
    assert event.cost is None


async def test_empty_reply_means_no_events():
    """An empty reply is treated as no events found."""
    client = _make_client(_make_response(parsed=None, text=None))

    result = await extract_events(client, IMAGE, "image/png")

    assert result.events == []


async def test_invalid_json_raises_validation_error():
    """A reply that is not valid JSON surfaces as ValidationError."""
    client = _make_client(_make_response(parsed=None, text="not json"))

    with pytest.raises(ValidationError):
        await extract_events(client, IMAGE, "image/png")


async def test_api_error_propagates():
    """Gemini call failures are not swallowed or retried."""
    client = _make_client(error=RuntimeError("model unavailable"))

    with pytest.raises(RuntimeError, match="model unavailable"):
        await extract_events(client, IMAGE, "image/png")

    assert client.aio.models.generate_content.await_count == 1
