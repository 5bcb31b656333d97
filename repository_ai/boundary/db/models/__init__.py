"""
Database models package.

Exports:
  - DocumentModel: Publication record (file path, hash, AI summary)
  - DocumentChunkModel: Embedded chunk rows

Dependencies: sqlalchemy, pgvector, repository_ai.boundary.db.base
System role: Database model definitions for domain entities
"""

from repository_ai.boundary.db.models.document_model import DocumentModel
from repository_ai.boundary.db.models.document_chunk_model import DocumentChunkModel

__all__ = [
    "DocumentModel",
    "DocumentChunkModel",
]
