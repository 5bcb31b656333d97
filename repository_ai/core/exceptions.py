"""
Errors raised by ingestion, retrieval and their storage adapters.

Every error carries a user-facing `message` (what the progress stream and
HTTP responses show) and a `details` dict that goes to the logs.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


def _with(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class RepositoryAIError(Exception):
    """Base class; `message` is safe to show to the caller."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class ValidationError(RepositoryAIError):
    """Missing or malformed caller input, e.g. no documentId or a blank query."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.field = field
        super().__init__(message, _with(details, field=field))


class DocumentProcessingError(RepositoryAIError):
    """
    A document could not be taken through the pipeline.

    Args:
        message: Error message
        document_id: Document being processed, when known
        details: Additional context
    """

    def __init__(
        self,
        message: str,
        document_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.document_id = document_id
        super().__init__(message, _with(details, document_id=document_id))


class ExtractionError(DocumentProcessingError):
    """The PDF is unreadable or has no text layer. Not retried."""


class EmbeddingError(DocumentProcessingError):
    """
    An embedding request still failed after all retries.

    `item_index` is the position of the failing text: within the batch when
    raised by EmbeddingClient, within the whole document once EmbeddingTask
    has re-raised it.
    """

    def __init__(
        self,
        message: str,
        item_index: int | None = None,
        document_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.item_index = item_index
        super().__init__(message, document_id, _with(details, item_index=item_index))


class MalformedEmbeddingResponseError(RepositoryAIError):
    """The provider answered without a usable vector. Retried like a transport error."""


class StorageError(RepositoryAIError):
    """Blob storage or database I/O failed."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.operation = operation
        super().__init__(message, _with(details, operation=operation))
