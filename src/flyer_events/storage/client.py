"""S3 client singleton.

Creates a cached boto3 S3 client for the configured region. Credentials come
from the default AWS chain (env vars, shared config, instance role).
"""

import boto3

from flyer_events.config import get_settings

_client = None


def get_s3_client():
    """Return a cached boto3 S3 client.

    Creates the client on first call using region from settings.
    Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        settings = get_settings()
        _client = boto3.client("s3", region_name=settings.region)
    return _client


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
