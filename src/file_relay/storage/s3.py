"""S3 object storage: upload and presigned download links.

boto3 is synchronous; every call is wrapped in asyncio.to_thread() so the
event loop stays free while S3 responds.
"""

import asyncio
import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from file_relay.config import Settings
from file_relay.errors import DownstreamError
from file_relay.models.relay import RelayStage

logger = logging.getLogger(__name__)


def build_s3_client(settings: Settings):
    """Create a boto3 S3 client from settings.

    Path-style addressing keeps presigned URLs valid for bucket names with dots
    and for S3-compatible endpoints (``s3_endpoint_url``).
    """
    return boto3.client(
        "s3",
        region_name=settings.aws_region,
        aws_access_key_id=settings.aws_access_key_id or None,
        aws_secret_access_key=settings.aws_secret_access_key or None,
        endpoint_url=settings.s3_endpoint_url or None,
        config=Config(s3={"addressing_style": "path"}),
    )


class ObjectStore:
    """A single S3 bucket the relay writes into."""

    def __init__(self, client, bucket: str, expiry_seconds: int) -> None:
        self._client = client
        self._bucket = bucket
        self._expiry_seconds = expiry_seconds

    async def put(self, key: str, body: bytes, content_type: str) -> None:
        """Store ``body`` under ``key``. An existing object with that key is replaced.

        Raises:
            DownstreamError(UPLOAD): PutObject failed.
        """
        try:
            await asyncio.to_thread(
                self._client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as exc:
            raise DownstreamError(RelayStage.UPLOAD, str(exc)) from exc

        logger.info("Uploaded %s (%d bytes) to bucket %s", key, len(body), self._bucket)

    async def presign(self, key: str) -> str:
        """Return a time-limited GET URL for ``key``.

        Raises:
            DownstreamError(PRESIGN): the URL could not be signed.
        """
        try:
            return await asyncio.to_thread(
                self._client.generate_presigned_url,
                "get_object",
                Params={"Bucket": self._bucket, "Key": key},
                ExpiresIn=self._expiry_seconds,
            )
        except (BotoCoreError, ClientError) as exc:
            raise DownstreamError(RelayStage.PRESIGN, str(exc)) from exc
