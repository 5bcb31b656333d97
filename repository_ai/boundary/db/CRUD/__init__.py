"""
CRUD operations package.

Exports: BaseCRUD, DocumentCRUD, DocumentChunkCRUD and their singletons.
"""

from repository_ai.boundary.db.CRUD.base_crud import BaseCRUD
from repository_ai.boundary.db.CRUD.document_chunk_crud import DocumentChunkCRUD, document_chunk_crud
from repository_ai.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud

__all__ = [
    "BaseCRUD",
    "DocumentCRUD",
    "DocumentChunkCRUD",
    "document_crud",
    "document_chunk_crud",
]
