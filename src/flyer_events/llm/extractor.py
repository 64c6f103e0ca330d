"""Flyer image -> RawExtractedEvent list via Gemini vision.

Sends the image as an inline bytes part alongside the extraction prompt and
requests JSON matching ExtractionResponse. There are no retries here; the
per-attachment pipeline treats any exception as that attachment's failure.
"""

import logging

from google import genai
from google.genai import types

from flyer_events.cost import extract_usage, log_usage
from flyer_events.llm.prompts import GEMINI_MODEL, build_extraction_prompt
from flyer_events.llm.schemas import ExtractionResponse

logger = logging.getLogger(__name__)


async def _call_gemini(
    client: genai.Client,
    prompt: str,
    image_bytes: bytes,
    mime_type: str,
) -> object:
    """Call Gemini with the flyer image and structured output config.

    Returns:
        Raw GenerateContentResponse (caller extracts .parsed and usage_metadata).
    """
    return await client.aio.models.generate_content(
        model=GEMINI_MODEL,
        contents=[
            types.Part.from_text(text=prompt),
            types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
        ],
        config=types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=ExtractionResponse,
            temperature=0.2,
        ),
    )


def _parse_response(response: object) -> ExtractionResponse:
    """Return the structured result, validating the raw text if the SDK did not parse it."""
    parsed = getattr(response, "parsed", None)
    if isinstance(parsed, ExtractionResponse):
        return parsed
    return ExtractionResponse.model_validate_json(getattr(response, "text", None) or "{}")


async def extract_events(
    client: genai.Client,
    image_bytes: bytes,
    mime_type: str,
    *,
    label: str = "",
    default_year: int | None = None,
) -> ExtractionResponse:
    """Extract every event on a flyer image.

    Args:
        client: Configured Gemini client instance.
        image_bytes: Raw image content.
        mime_type: Image content type, e.g. "image/png".
        label: Identifier for logs (usually the attachment filename).
        default_year: Year assumed for dates printed without one.

    Returns:
        ExtractionResponse; events is empty when nothing was found.

    Raises:
        google.genai.errors.APIError: On Gemini API errors.
        pydantic.ValidationError: If the reply does not match the schema.
    """
    prompt = build_extraction_prompt(default_year)
    response = await _call_gemini(client, prompt, image_bytes, mime_type)

    result = _parse_response(response)
    log_usage(label, extract_usage(response))

    logger.info(
        "Extracted %d event(s) from %s",
        len(result.events),
        label or "image",
        extra={"label": label, "events": len(result.events)},
    )
    return result
