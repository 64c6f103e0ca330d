"""Flyer image storage on S3."""

from flyer_events.storage.client import get_s3_client, reset_client
from flyer_events.storage.uploader import ImageUploader, StorageConfigError

__all__ = [
    "get_s3_client",
    "ImageUploader",
    "reset_client",
    "StorageConfigError",
]
