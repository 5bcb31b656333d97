"""
Vector store boundary.

Exports: VectorStore, PgVectorStore, InMemoryVectorStore, get_vector_store,
StoredChunk, SearchResult
"""

from repository_ai.boundary.vdb.base import VectorStore
from repository_ai.boundary.vdb.memory_store import InMemoryVectorStore
from repository_ai.boundary.vdb.pgvector_store import PgVectorStore
from repository_ai.boundary.vdb.vector_schemas import SearchResult, StoredChunk
from repository_ai.boundary.vdb.vector_store_factory import get_vector_store

__all__ = [
    "VectorStore",
    "PgVectorStore",
    "InMemoryVectorStore",
    "get_vector_store",
    "StoredChunk",
    "SearchResult",
]
