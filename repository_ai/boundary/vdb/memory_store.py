"""
In-memory implementation of VectorStore for local development and tests.

Scores with numpy cosine similarity using the same strict threshold and
descending order as the pgvector store.

Dependencies: numpy
System role: Database-free vector storage
"""

import asyncio
import logging

import numpy as np

from repository_ai.boundary.vdb.base import VectorStore
from repository_ai.boundary.vdb.vector_schemas import SearchResult, StoredChunk
from repository_ai.core.document_processing.models import EmbeddedChunk

logger = logging.getLogger(__name__)


class InMemoryVectorStore(VectorStore):
    """Keeps chunk rows and vectors in process memory."""

    def __init__(self) -> None:
        self._rows: dict[int, tuple[StoredChunk, np.ndarray]] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def insert_chunks(self, document_id: int, chunks: list[EmbeddedChunk]) -> int:
        async with self._lock:
            return self._insert(document_id, chunks)

    async def delete_document_chunks(self, document_id: int) -> int:
        async with self._lock:
            return self._delete(document_id)

    async def replace_document_chunks(self, document_id: int, chunks: list[EmbeddedChunk]) -> int:
        async with self._lock:
            self._delete(document_id)
            return self._insert(document_id, chunks)

    async def get_document_chunks(self, document_id: int) -> list[StoredChunk]:
        stored = [row for row, _ in self._rows.values() if row.document_id == document_id]
        return sorted(stored, key=lambda row: (row.page_start, row.char_start))

    async def similarity_search(
        self,
        query_vector: list[float],
        limit: int,
        threshold: float,
    ) -> list[SearchResult]:
        if not self._rows:
            return []

        query = np.asarray(query_vector, dtype=np.float32)
        query_norm = np.linalg.norm(query)

        scored: list[SearchResult] = []
        for row, vector in self._rows.values():
            denominator = query_norm * np.linalg.norm(vector)
            score = float(np.dot(query, vector) / denominator) if denominator else 0.0
            if score > threshold:
                scored.append(
                    SearchResult(
                        id=row.id,
                        document_id=row.document_id,
                        content=row.content,
                        phrase=row.phrase,
                        page_start=row.page_start,
                        page_end=row.page_end,
                        score=score,
                    )
                )

        scored.sort(key=lambda result: result.score, reverse=True)
        return scored[:limit]

    def _insert(self, document_id: int, chunks: list[EmbeddedChunk]) -> int:
        inserted = 0
        for chunk in chunks:
            if chunk.embedding is None:
                logger.warning(
                    f"{__name__}:insert_chunks - Skipping chunk without embedding",
                    extra={"document_id": document_id, "char_start": chunk.char_start},
                )
                continue
            row = StoredChunk(
                id=self._next_id,
                document_id=document_id,
                content=chunk.content,
                phrase=chunk.phrase,
                page_start=chunk.page_start,
                page_end=chunk.page_end,
                char_start=chunk.char_start,
                char_end=chunk.char_end,
            )
            self._rows[row.id] = (row, np.asarray(chunk.embedding, dtype=np.float32))
            self._next_id += 1
            inserted += 1
        return inserted

    def _delete(self, document_id: int) -> int:
        doomed = [row_id for row_id, (row, _) in self._rows.items() if row.document_id == document_id]
        for row_id in doomed:
            del self._rows[row_id]
        return len(doomed)
