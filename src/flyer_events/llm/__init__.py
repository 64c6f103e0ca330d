"""Event extraction from flyer images via Gemini.

Public API:
    extract_events(client, image_bytes, mime_type) -> ExtractionResponse
        One structured-output vision call per image, no retries.
"""

from flyer_events.llm.client import build_gemini_client, get_gemini_client
from flyer_events.llm.extractor import extract_events
from flyer_events.llm.schemas import ExtractionResponse

__all__ = [
    "build_gemini_client",
    "get_gemini_client",
    "extract_events",
    "ExtractionResponse",
]
