"""
Vector store interface.

Dependencies: abc
System role: Contract shared by the pgvector and in-memory stores
"""

from abc import ABC, abstractmethod

from repository_ai.boundary.vdb.vector_schemas import SearchResult, StoredChunk
from repository_ai.core.document_processing.models import EmbeddedChunk


class VectorStore(ABC):
    """Persists embedded chunks and answers cosine similarity queries."""

    @abstractmethod
    async def insert_chunks(self, document_id: int, chunks: list[EmbeddedChunk]) -> int:
        """
        Insert chunks for a document. Chunks without an embedding are skipped.

        Returns:
            int: Number of rows inserted
        """

    @abstractmethod
    async def delete_document_chunks(self, document_id: int) -> int:
        """Remove every chunk of a document. Returns rows deleted."""

    @abstractmethod
    async def replace_document_chunks(self, document_id: int, chunks: list[EmbeddedChunk]) -> int:
        """
        Delete a document's chunks and insert new ones as one unit.

        Either the old set or the new set is visible afterwards, never neither.
        """

    @abstractmethod
    async def get_document_chunks(self, document_id: int) -> list[StoredChunk]:
        """Return a document's chunks ordered by page_start then char_start."""

    @abstractmethod
    async def similarity_search(
        self,
        query_vector: list[float],
        limit: int,
        threshold: float,
    ) -> list[SearchResult]:
        """
        Return up to limit chunks scoring strictly above threshold, best first.
        """
