"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_engine(), get_async_engine(), get_async_session_factory(), get_async_db()
  - DocumentModel, DocumentChunkModel: Persisted entities
  - document_crud, document_chunk_crud: CRUD operation singletons

Dependencies: sqlalchemy, pgvector, repository_ai.configs
System role: Database adapter for documents and embedded chunks
"""

from repository_ai.boundary.db.base import Base, TimestampMixin
from repository_ai.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
    get_engine,
)
from repository_ai.boundary.db.models import DocumentChunkModel, DocumentModel
from repository_ai.boundary.db.CRUD import (
    BaseCRUD,
    DocumentChunkCRUD,
    DocumentCRUD,
    document_chunk_crud,
    document_crud,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "get_engine",
    "get_async_engine",
    "get_async_session_factory",
    "get_async_db",
    "DocumentModel",
    "DocumentChunkModel",
    "BaseCRUD",
    "DocumentCRUD",
    "DocumentChunkCRUD",
    "document_crud",
    "document_chunk_crud",
]
