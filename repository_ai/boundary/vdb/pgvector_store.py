"""
Postgres + pgvector implementation of VectorStore.

Each public operation opens its own session and commits on success. Similarity
is 1 - cosine distance, computed in SQL by the <=> operator.

Dependencies: sqlalchemy, pgvector
System role: Production vector storage for ingestion and RAG retrieval
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from repository_ai.boundary.db.CRUD.document_chunk_crud import document_chunk_crud
from repository_ai.boundary.vdb.base import VectorStore
from repository_ai.boundary.vdb.vector_schemas import SearchResult, StoredChunk
from repository_ai.core.document_processing.models import EmbeddedChunk
from repository_ai.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class PgVectorStore(VectorStore):
    """Vector store backed by the document_chunks table."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        dimension: int | None = None,
        insert_batch_size: int = 50,
    ) -> None:
        """
        Initialize store.

        Args:
            session_factory: Async session factory bound to the application database
            dimension: Required vector width; None accepts any width
            insert_batch_size: Rows flushed per insert batch
        """
        self._session_factory = session_factory
        self._dimension = dimension
        self._insert_batch_size = insert_batch_size

    async def insert_chunks(self, document_id: int, chunks: list[EmbeddedChunk]) -> int:
        rows = self._embedded_only(document_id, chunks)
        try:
            async with self._session_factory() as session:
                inserted = await document_chunk_crud.bulk_create(
                    session, document_id, rows, batch_size=self._insert_batch_size
                )
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError(
                f"Failed to insert chunks: {e}",
                operation="insert",
                details={"document_id": document_id},
            ) from e

        logger.info(
            f"{__name__}:insert_chunks - Inserted {inserted} chunks",
            extra={"document_id": document_id},
        )
        return inserted

    async def delete_document_chunks(self, document_id: int) -> int:
        try:
            async with self._session_factory() as session:
                deleted = await document_chunk_crud.delete_by_document_id(session, document_id)
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError(
                f"Failed to delete chunks: {e}",
                operation="delete",
                details={"document_id": document_id},
            ) from e

        logger.info(
            f"{__name__}:delete_document_chunks - Deleted {deleted} chunks",
            extra={"document_id": document_id},
        )
        return deleted

    async def replace_document_chunks(self, document_id: int, chunks: list[EmbeddedChunk]) -> int:
        rows = self._embedded_only(document_id, chunks)
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    deleted = await document_chunk_crud.delete_by_document_id(session, document_id)
                    inserted = await document_chunk_crud.bulk_create(
                        session, document_id, rows, batch_size=self._insert_batch_size
                    )
        except SQLAlchemyError as e:
            raise StorageError(
                f"Failed to replace chunks: {e}",
                operation="replace",
                details={"document_id": document_id},
            ) from e

        logger.info(
            f"{__name__}:replace_document_chunks - Replaced {deleted} chunks with {inserted}",
            extra={"document_id": document_id},
        )
        return inserted

    async def get_document_chunks(self, document_id: int) -> list[StoredChunk]:
        try:
            async with self._session_factory() as session:
                rows = await document_chunk_crud.get_by_document_id(session, document_id)
        except SQLAlchemyError as e:
            raise StorageError(
                f"Failed to read chunks: {e}",
                operation="query",
                details={"document_id": document_id},
            ) from e

        return [
            StoredChunk(
                id=row.id,
                document_id=row.document_id,
                content=row.content,
                phrase=row.phrase,
                page_start=row.page_start,
                page_end=row.page_end,
                char_start=row.char_start,
                char_end=row.char_end,
            )
            for row in rows
        ]

    async def similarity_search(
        self,
        query_vector: list[float],
        limit: int,
        threshold: float,
    ) -> list[SearchResult]:
        self._check_width(len(query_vector), operation="query")
        try:
            async with self._session_factory() as session:
                rows = await document_chunk_crud.similarity_search(
                    session, query_vector, limit=limit, threshold=threshold
                )
        except SQLAlchemyError as e:
            raise StorageError(f"Similarity search failed: {e}", operation="query") from e

        return [
            SearchResult(
                id=row.id,
                document_id=row.document_id,
                content=row.content,
                phrase=row.phrase,
                page_start=row.page_start,
                page_end=row.page_end,
                score=float(row.score),
            )
            for row in rows
        ]

    def _embedded_only(self, document_id: int, chunks: list[EmbeddedChunk]) -> list[EmbeddedChunk]:
        rows = [chunk for chunk in chunks if chunk.embedding is not None]
        for chunk in rows:
            self._check_width(len(chunk.embedding), operation="insert", document_id=document_id)
        skipped = len(chunks) - len(rows)
        if skipped:
            logger.warning(
                f"{__name__}:insert_chunks - Skipping {skipped} chunks without embeddings",
                extra={"document_id": document_id},
            )
        return rows

    def _check_width(self, width: int, operation: str, document_id: int | None = None) -> None:
        if self._dimension is None or width == self._dimension:
            return
        raise StorageError(
            f"Vector has {width} dimensions, store expects {self._dimension}",
            operation=operation,
            details={"document_id": document_id} if document_id is not None else None,
        )
