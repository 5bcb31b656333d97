"""Database access for the document processing pipeline."""

from .document_record_store import DocumentRecord, DocumentStore

__all__ = ["DocumentRecord", "DocumentStore"]
