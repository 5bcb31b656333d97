"""Test suite for S3BlobStorage with a mocked boto3 client."""

import io
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from repository_ai.boundary.storage import S3BlobStorage
from repository_ai.configs.storage import BlobStorageSettings
from repository_ai.core.exceptions import StorageError


def client_error(code: str, operation: str = "GetObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def s3_client() -> MagicMock:
    """Provide mock boto3 S3 client."""
    return MagicMock()


@pytest.fixture
def storage(s3_client: MagicMock) -> S3BlobStorage:
    """Provide storage bound to the mock client."""
    return S3BlobStorage(bucket="PDF_UPLOADS", client=s3_client)


class TestS3BlobStorageInit:
    """Test client construction."""

    def test_from_settings_passes_endpoint_and_credentials(self) -> None:
        """Should build a boto3 client for the configured endpoint."""
        settings = BlobStorageSettings(
            bucket="PDF_UPLOADS",
            region="ap-southeast-1",
            endpoint_url="https://project.supabase.co/storage/v1/s3",
            access_key_id="access",
            secret_access_key="secret",
        )

        with patch("repository_ai.boundary.storage.s3_blob_storage.boto3.client") as mock_client:
            S3BlobStorage.from_settings(settings)

        mock_client.assert_called_once_with(
            "s3",
            region_name="ap-southeast-1",
            endpoint_url="https://project.supabase.co/storage/v1/s3",
            aws_access_key_id="access",
            aws_secret_access_key="secret",
        )


class TestS3BlobStorageDownload:
    """Test object downloads."""

    async def test_returns_object_bytes(self, storage, s3_client) -> None:
        """Should read the object body."""
        s3_client.get_object.return_value = {"Body": io.BytesIO(b"%PDF-1.4 data")}

        data = await storage.download("uploads/thesis.pdf")

        assert data == b"%PDF-1.4 data"
        s3_client.get_object.assert_called_once_with(Bucket="PDF_UPLOADS", Key="uploads/thesis.pdf")

    @pytest.mark.parametrize("code", ["NoSuchKey", "404"])
    async def test_missing_object(self, storage, s3_client, code) -> None:
        """Should raise StorageError naming the missing path."""
        s3_client.get_object.side_effect = client_error(code)

        with pytest.raises(StorageError, match="File not found in storage: uploads/missing.pdf"):
            await storage.download("uploads/missing.pdf")

    async def test_access_denied(self, storage, s3_client) -> None:
        """Should wrap other client errors."""
        s3_client.get_object.side_effect = client_error("AccessDenied")

        with pytest.raises(StorageError, match="Failed to download from storage") as exc_info:
            await storage.download("uploads/thesis.pdf")
        assert exc_info.value.details["operation"] == "download"

    async def test_connection_failure(self, storage, s3_client) -> None:
        """Should wrap botocore transport errors."""
        s3_client.get_object.side_effect = EndpointConnectionError(endpoint_url="https://s3")

        with pytest.raises(StorageError):
            await storage.download("uploads/thesis.pdf")

    async def test_empty_path_rejected(self, storage, s3_client) -> None:
        """Should refuse an empty key without calling S3."""
        with pytest.raises(StorageError, match="path is required"):
            await storage.download("")
        s3_client.get_object.assert_not_called()


class TestS3BlobStorageUploadRemove:
    """Test uploads and removals."""

    async def test_upload_returns_path(self, storage, s3_client) -> None:
        """Should put the object with its content type and return the key."""
        path = await storage.upload("uploads/new.pdf", b"data", "application/pdf")

        assert path == "uploads/new.pdf"
        s3_client.put_object.assert_called_once_with(
            Bucket="PDF_UPLOADS",
            Key="uploads/new.pdf",
            Body=b"data",
            ContentType="application/pdf",
        )

    async def test_upload_failure(self, storage, s3_client) -> None:
        """Should wrap upload errors."""
        s3_client.put_object.side_effect = client_error("InternalError", "PutObject")

        with pytest.raises(StorageError, match="Failed to upload"):
            await storage.upload("uploads/new.pdf", b"data")

    async def test_remove_deletes_all_keys(self, storage, s3_client) -> None:
        """Should delete every key in one request."""
        s3_client.delete_objects.return_value = {}

        await storage.remove(["a.pdf", "b.pdf"])

        kwargs = s3_client.delete_objects.call_args.kwargs
        assert kwargs["Delete"]["Objects"] == [{"Key": "a.pdf"}, {"Key": "b.pdf"}]

    async def test_remove_nothing(self, storage, s3_client) -> None:
        """Should skip the request for an empty list."""
        await storage.remove([])
        s3_client.delete_objects.assert_not_called()

    async def test_remove_partial_failure(self, storage, s3_client) -> None:
        """Should raise when S3 reports keys it could not delete."""
        s3_client.delete_objects.return_value = {"Errors": [{"Key": "b.pdf", "Code": "AccessDenied"}]}

        with pytest.raises(StorageError) as exc_info:
            await storage.remove(["a.pdf", "b.pdf"])
        assert exc_info.value.details["keys"] == ["b.pdf"]
