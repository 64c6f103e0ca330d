"""Token usage extraction, cost calculation, and structured cost logging.

Centralizes Gemini pricing constants (single source of truth) and logs one
structured record per extraction call for cost monitoring.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Gemini 3 Flash pricing -- single source of truth
INPUT_PRICE_PER_TOKEN = 0.50 / 1_000_000  # $0.50 per 1M input tokens
OUTPUT_PRICE_PER_TOKEN = 3.00 / 1_000_000  # $3.00 per 1M output tokens


@dataclass
class TokenUsage:
    """Token counts and calculated cost for a single Gemini API call."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    cost_usd: float


def extract_usage(response: object) -> TokenUsage:
    """Extract token usage from a Gemini GenerateContentResponse.

    Missing usage_metadata or None counts default to 0 (image tokens are
    included in prompt_token_count).
    """
    metadata = getattr(response, "usage_metadata", None)
    prompt_tokens = getattr(metadata, "prompt_token_count", 0) or 0
    completion_tokens = getattr(metadata, "candidates_token_count", 0) or 0
    cost_usd = (prompt_tokens * INPUT_PRICE_PER_TOKEN) + (
        completion_tokens * OUTPUT_PRICE_PER_TOKEN
    )

    return TokenUsage(
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=prompt_tokens + completion_tokens,
        cost_usd=cost_usd,
    )


def log_usage(label: str, usage: TokenUsage) -> None:
    """Log structured token usage for one extraction call.

    Args:
        label: The attachment the call was made for.
        usage: Token usage data from extract_usage.
    """
    # Lazy import to avoid circular dependency (cost -> llm.prompts -> llm -> extractor -> cost)
    from flyer_events.llm.prompts import GEMINI_MODEL

    logger.info(
        "Gemini extraction complete",
        extra={
            "attachment": label,
            "model": GEMINI_MODEL,
            "prompt_tokens": usage.prompt_tokens,
            "completion_tokens": usage.completion_tokens,
            "total_tokens": usage.total_tokens,
            "cost_usd": round(usage.cost_usd, 6),
        },
    )
