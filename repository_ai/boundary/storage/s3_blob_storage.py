"""
S3-compatible blob storage for uploaded PDFs.

boto3 calls are blocking, so each operation runs in a worker thread.

Dependencies: boto3, botocore
System role: Raw document source for the ingestion pipeline
"""

import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from repository_ai.configs.storage import BlobStorageSettings
from repository_ai.core.exceptions import StorageError

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


class S3BlobStorage:
    """Download, upload and remove objects in one bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "ap-southeast-1",
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        client=None,
    ) -> None:
        """
        Initialize blob storage.

        Args:
            bucket: Bucket holding uploaded PDFs
            region: Bucket region
            endpoint_url: Custom S3 endpoint (None for AWS)
            access_key_id: Access key (None to use the default credential chain)
            secret_access_key: Secret key
            client: Pre-built boto3 S3 client
        """
        self._bucket = bucket
        self._s3_client = client or boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
        )

    @classmethod
    def from_settings(cls, settings: BlobStorageSettings) -> "S3BlobStorage":
        return cls(
            bucket=settings.bucket,
            region=settings.region,
            endpoint_url=settings.endpoint_url,
            access_key_id=settings.access_key_id,
            secret_access_key=settings.secret_access_key,
        )

    async def download(self, path: str) -> bytes:
        """
        Download an object's bytes.

        Args:
            path: Object key (e.g. "uploads/thesis.pdf")

        Returns:
            bytes: Object content

        Raises:
            StorageError: When the key is empty, missing, or the request fails
        """
        if not path:
            raise StorageError("Storage path is required", operation="download")

        try:
            data = await asyncio.to_thread(self._get_object_bytes, path)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in NOT_FOUND_CODES:
                raise StorageError(
                    f"File not found in storage: {path}",
                    operation="download",
                    details={"path": path},
                ) from e
            raise StorageError(
                f"Failed to download from storage: {e}",
                operation="download",
                details={"path": path},
            ) from e
        except BotoCoreError as e:
            raise StorageError(
                f"Failed to download from storage: {e}",
                operation="download",
                details={"path": path},
            ) from e

        logger.info(
            f"{__name__}:download - Downloaded {len(data)} bytes",
            extra={"bucket": self._bucket, "path": path},
        )
        return data

    async def upload(
        self,
        path: str,
        data: bytes,
        content_type: str = "application/pdf",
    ) -> str:
        """
        Upload bytes to an object key, overwriting any existing object.

        Returns:
            str: The object key written

        Raises:
            StorageError: When the request fails
        """
        try:
            await asyncio.to_thread(
                self._s3_client.put_object,
                Bucket=self._bucket,
                Key=path,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Failed to upload to storage: {e}",
                operation="upload",
                details={"path": path},
            ) from e
        return path

    async def remove(self, paths: list[str]) -> None:
        """
        Delete objects. Missing objects are not an error.

        Args:
            paths: Object keys to delete

        Raises:
            StorageError: When the request fails or any key could not be deleted
        """
        if not paths:
            return

        try:
            response = await asyncio.to_thread(
                self._s3_client.delete_objects,
                Bucket=self._bucket,
                Delete={"Objects": [{"Key": path} for path in paths], "Quiet": True},
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(
                f"Failed to remove from storage: {e}",
                operation="remove",
                details={"paths": paths},
            ) from e

        errors = response.get("Errors", [])
        if errors:
            raise StorageError(
                f"Failed to remove {len(errors)} object(s) from storage",
                operation="remove",
                details={"keys": [error.get("Key") for error in errors]},
            )

    def _get_object_bytes(self, path: str) -> bytes:
        response = self._s3_client.get_object(Bucket=self._bucket, Key=path)
        return response["Body"].read()
