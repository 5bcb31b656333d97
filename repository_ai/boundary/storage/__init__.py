"""
Blob storage boundary.

Exports: S3BlobStorage
"""

from repository_ai.boundary.storage.s3_blob_storage import S3BlobStorage

__all__ = ["S3BlobStorage"]
