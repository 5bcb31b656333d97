"""
Blob storage configuration settings.

Uploaded PDFs live in an S3-compatible bucket. Supabase storage exposes an
S3 endpoint, so pointing endpoint_url at it works without a separate client.

Dependencies: pydantic, pydantic_settings
System role: Raw document storage configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from repository_ai.configs.base import BaseSettings


class BlobStorageSettings(BaseSettings):
    """S3-compatible bucket holding uploaded PDF files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(default="PDF_UPLOADS", description="Bucket holding uploaded PDFs")
    region: str = Field(default="ap-southeast-1", description="Bucket region")
    endpoint_url: str | None = Field(
        default=None,
        description="Custom S3 endpoint (e.g. Supabase storage S3 gateway)",
    )
    access_key_id: str | None = Field(default=None, description="Access key id")
    secret_access_key: str | None = Field(default=None, description="Secret access key")
