"""Upload flyer images to S3 and return their public URL."""

import asyncio
import logging
from datetime import datetime, timezone

from flyer_events.config import Settings
from flyer_events.storage.client import get_s3_client

logger = logging.getLogger(__name__)


class StorageConfigError(RuntimeError):
    """Raised when no upload bucket is configured."""


class ImageUploader:
    """Puts attachment bytes under images/<filename> in one bucket."""

    def __init__(self, bucket: str, region: str, client=None) -> None:
        self.bucket = bucket
        self.region = region
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageUploader":
        return cls(bucket=settings.s3_bucket, region=settings.region)

    def _get_client(self):
        if self._client is None:
            self._client = get_s3_client()
        return self._client

    def object_url(self, key: str) -> str:
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    async def upload(self, content: bytes, filename: str, content_type: str) -> str:
        """Upload one image and return its URL.

        Raises:
            StorageConfigError: If no bucket is configured.
            botocore.exceptions.ClientError: If S3 rejects the put.
        """
        if not self.bucket:
            raise StorageConfigError("S3_BUCKET is not set")

        key = f"images/{filename}"
        client = self._get_client()

        # boto3 is synchronous
        await asyncio.to_thread(
            client.put_object,
            Bucket=self.bucket,
            Key=key,
            Body=content,
            ContentType=content_type,
            Metadata={
                "originalFilename": filename,
                "uploadTimestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

        url = self.object_url(key)
        logger.info("Uploaded %s to %s", filename, url, extra={"bytes": len(content)})
        return url
