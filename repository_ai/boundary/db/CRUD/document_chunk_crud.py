"""
Document chunk CRUD operations.

Adds bulk insert, per-document delete/read, and cosine similarity search on
top of BaseCRUD. Similarity is 1 - (embedding <=> query) on both the insert
and query side, so scores stay comparable.

Dependencies: sqlalchemy, pgvector
System role: Chunk row persistence and vector queries
"""

from typing import Sequence

from sqlalchemy import Row, select
from sqlalchemy.ext.asyncio import AsyncSession

from repository_ai.boundary.db.CRUD.base_crud import BaseCRUD
from repository_ai.boundary.db.models.document_chunk_model import DocumentChunkModel
from repository_ai.core.document_processing.models import EmbeddedChunk


class DocumentChunkCRUD(BaseCRUD[DocumentChunkModel]):
    """CRUD operations for DocumentChunkModel."""

    def __init__(self) -> None:
        """Initialize DocumentChunkCRUD with DocumentChunkModel."""
        super().__init__(DocumentChunkModel)

    async def bulk_create(
        self,
        session: AsyncSession,
        document_id: int,
        chunks: list[EmbeddedChunk],
        batch_size: int = 50,
    ) -> int:
        """
        Insert chunk rows for one document, flushing every batch_size rows.

        Args:
            session: Async database session
            document_id: Owning document
            chunks: Chunks that all carry an embedding
            batch_size: Rows per flush

        Returns:
            int: Number of rows inserted
        """
        for offset in range(0, len(chunks), batch_size):
            session.add_all(
                [
                    DocumentChunkModel(
                        document_id=document_id,
                        content=chunk.content,
                        phrase=chunk.phrase,
                        embedding=chunk.embedding,
                        page_start=chunk.page_start,
                        page_end=chunk.page_end,
                        char_start=chunk.char_start,
                        char_end=chunk.char_end,
                    )
                    for chunk in chunks[offset : offset + batch_size]
                ]
            )
            await session.flush()
        return len(chunks)

    async def delete_by_document_id(self, session: AsyncSession, document_id: int) -> int:
        """
        Delete every chunk row of a document.

        Returns:
            int: Number of rows deleted
        """
        return await self.delete_where(session, DocumentChunkModel.document_id == document_id)

    async def get_by_document_id(
        self,
        session: AsyncSession,
        document_id: int,
    ) -> Sequence[DocumentChunkModel]:
        """
        Retrieve a document's chunks in page, then character order.
        """
        return await self.find_where(
            session,
            DocumentChunkModel.document_id == document_id,
            order_by=(DocumentChunkModel.page_start, DocumentChunkModel.char_start),
        )

    async def count_by_document_id(self, session: AsyncSession, document_id: int) -> int:
        return await self.count_where(session, DocumentChunkModel.document_id == document_id)

    async def similarity_search(
        self,
        session: AsyncSession,
        query_vector: list[float],
        limit: int,
        threshold: float,
    ) -> Sequence[Row]:
        """
        Find the chunks most similar to query_vector across all documents.

        Args:
            session: Async database session
            query_vector: Query embedding
            limit: Maximum rows returned
            threshold: Rows must score strictly above this similarity

        Returns:
            Rows with id, document_id, content, phrase, page_start, page_end, score
            ordered by descending score
        """
        similarity = 1 - DocumentChunkModel.embedding.cosine_distance(query_vector)
        stmt = (
            select(
                DocumentChunkModel.id,
                DocumentChunkModel.document_id,
                DocumentChunkModel.content,
                DocumentChunkModel.phrase,
                DocumentChunkModel.page_start,
                DocumentChunkModel.page_end,
                similarity.label("score"),
            )
            .where(similarity > threshold)
            .order_by(similarity.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.all()


document_chunk_crud = DocumentChunkCRUD()
