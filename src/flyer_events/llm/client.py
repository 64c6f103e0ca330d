"""Gemini client used for flyer extraction.

One client per process, built lazily from settings. The HTTP timeout comes
from ``gemini_timeout_ms``; no retry options are set, so a failed call drops
only that attachment's events.
"""

from functools import lru_cache

from google import genai
from google.genai import types

from flyer_events.config import Settings, get_settings


def build_gemini_client(settings: Settings) -> genai.Client:
    """Create a genai.Client from the API key and timeout in settings."""
    return genai.Client(
        api_key=settings.gemini_api_key,
        http_options=types.HttpOptions(timeout=settings.gemini_timeout_ms),
    )


@lru_cache
def get_gemini_client() -> genai.Client:
    """Return the process-wide Gemini client. Tests reset it with cache_clear()."""
    return build_gemini_client(get_settings())
