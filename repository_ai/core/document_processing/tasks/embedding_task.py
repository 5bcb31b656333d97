"""
Embedding generation task.

Embeds chunks in fixed-size batches through the shared EmbeddingClient,
yielding each batch as soon as it is embedded so callers can report progress.

Dependencies: repository_ai.boundary.embeddings
System role: Third stage of document ingestion pipeline
"""

import logging
from typing import AsyncIterator

from repository_ai.boundary.embeddings import EmbeddingClient
from repository_ai.boundary.embeddings.embedding_client import failure_message
from repository_ai.core.exceptions import EmbeddingError

from ..models import Chunk, EmbeddedChunk

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Attach embeddings to chunks, batch by batch."""

    def __init__(self, embedding_client: EmbeddingClient, batch_size: int = 10) -> None:
        """
        Initialize embedding task.

        Args:
            embedding_client: Client that owns provider selection and retries
            batch_size: Chunks per batch

        Raises:
            ValueError: When batch_size is not positive
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")

        self._client = embedding_client
        self._batch_size = batch_size

    async def iter_batches(
        self,
        chunks: list[Chunk],
        document_id: int | None = None,
    ) -> AsyncIterator[list[EmbeddedChunk]]:
        """
        Embed chunks batch by batch.

        Args:
            chunks: Chunks in document order
            document_id: Document being embedded, attached to errors

        Yields:
            list[EmbeddedChunk]: Each embedded batch, in input order

        Raises:
            EmbeddingError: When any chunk exhausts its retries; item_index is
                the chunk's position in the whole document
        """
        for offset in range(0, len(chunks), self._batch_size):
            batch = chunks[offset : offset + self._batch_size]
            try:
                vectors = await self._client.embed_batch([chunk.content for chunk in batch])
            except EmbeddingError as e:
                item_index = offset + e.item_index if e.item_index is not None else None
                message = e.message
                if item_index is not None and "attempts" in e.details:
                    message = failure_message(item_index, e.details["attempts"], e.details.get("reason", ""))
                raise EmbeddingError(
                    message,
                    item_index=item_index,
                    document_id=document_id,
                    details={k: v for k, v in e.details.items() if k != "item_index"},
                ) from e

            logger.debug(
                f"{__name__}:iter_batches - Embedded batch",
                extra={"offset": offset, "size": len(batch), "document_id": document_id},
            )
            yield [
                EmbeddedChunk(**chunk.model_dump(), embedding=vector)
                for chunk, vector in zip(batch, vectors)
            ]

    async def embed(self, chunks: list[Chunk], document_id: int | None = None) -> list[EmbeddedChunk]:
        """Embed all chunks and return them in input order."""
        embedded: list[EmbeddedChunk] = []
        async for batch in self.iter_batches(chunks, document_id):
            embedded.extend(batch)
        return embedded
