"""
Document ingestion orchestrator.

Drives one document through download, extraction, chunking, embedding,
chunk replacement and summarization, yielding a ProgressEvent at every stage.
The stream ends with exactly one terminal event: "complete" or "error".

Dependencies: All task modules, repository_ai.boundary, configs
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import hashlib
import logging
from typing import AsyncIterator, Protocol

from repository_ai.boundary.embeddings import EmbeddingClient
from repository_ai.boundary.vdb.base import VectorStore
from repository_ai.boundary.vdb.vector_schemas import StoredChunk
from repository_ai.core.exceptions import DocumentProcessingError, ExtractionError, ValidationError
from repository_ai.observability import log_exception_with_context

from .configs import DocumentPipelineSettings, get_pipeline_settings
from .database import DocumentStore
from .models import EmbeddedChunk, IngestStep, ProgressEvent
from .tasks import ChunkingTask, EmbeddingTask, ParsingTask

logger = logging.getLogger(__name__)

EMBED_PROGRESS_START = 50
EMBED_PROGRESS_END = 75


class BlobStorage(Protocol):
    async def download(self, path: str) -> bytes: ...


class Summarizer(Protocol):
    async def summarize(self, chunks: list[StoredChunk], question: str | None = None) -> str: ...


class IngestionPipeline:
    """Orchestrate document ingestion: download -> extract -> chunk -> embed -> store -> summarize."""

    def __init__(
        self,
        storage: BlobStorage,
        document_store: DocumentStore,
        vector_store: VectorStore,
        embedding_client: EmbeddingClient,
        summarizer: Summarizer,
        settings: DocumentPipelineSettings | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            storage: Blob storage holding uploaded PDFs
            document_store: Document row reader/writer
            vector_store: Chunk persistence
            embedding_client: Shared embedding client
            summarizer: Summary generator
            settings: Pipeline settings (uses defaults if None)
        """
        self._settings = settings or get_pipeline_settings()
        self._storage = storage
        self._document_store = document_store
        self._vector_store = vector_store
        self._summarizer = summarizer

        self._parsing_task = ParsingTask()
        self._chunking_task = ChunkingTask.from_settings(self._settings)
        self._embedding_task = EmbeddingTask(
            embedding_client,
            batch_size=self._settings.embedding_batch_size,
        )

    def run(self, document_id: int | None) -> AsyncIterator[ProgressEvent]:
        """
        Ingest one document, yielding progress events.

        Validation happens on call, so a missing id fails before the stream
        is opened and no event is ever produced.

        Args:
            document_id: Document to ingest

        Returns:
            AsyncIterator[ProgressEvent]: Stage updates ending with one terminal event

        Raises:
            ValidationError: document_id missing
        """
        if document_id is None:
            raise ValidationError("documentId is required", field="documentId")

        return self._run(document_id)

    async def _run(self, document_id: int) -> AsyncIterator[ProgressEvent]:
        progress: float = 0
        logger.info(f"{__name__}:run - Ingestion started", extra={"document_id": document_id})

        try:
            progress = 10
            yield ProgressEvent(step=IngestStep.DOWNLOADING, progress=progress, message="Fetching document...")
            document = await self._document_store.get_document(document_id)
            if document is None:
                raise DocumentProcessingError("Document not found", document_id=document_id)

            data = await self._storage.download(document.file_path)
            file_hash = hashlib.sha256(data).hexdigest()
            progress = 20
            yield ProgressEvent(
                step=IngestStep.DOWNLOADING,
                progress=progress,
                message=f"Downloaded {len(data)} bytes",
            )

            if self._settings.skip_unchanged and document.file_hash == file_hash and document.ai_summary:
                logger.info(
                    f"{__name__}:run - Document unchanged, skipping",
                    extra={"document_id": document_id},
                )
                yield ProgressEvent(
                    step=IngestStep.COMPLETE,
                    progress=100,
                    message="Document unchanged, skipping AI processing.",
                )
                return

            progress = 30
            yield ProgressEvent(step=IngestStep.EXTRACTING, progress=progress, message="Extracting text from PDF...")
            pages = await asyncio.to_thread(self._parsing_task.parse, data)
            if not pages:
                raise ExtractionError("No text extracted from PDF", document_id=document_id)

            chunks = self._chunking_task.chunk(pages)
            progress = 45
            yield ProgressEvent(
                step=IngestStep.EXTRACTING,
                progress=progress,
                message=f"Created {len(chunks)} chunks from {len(pages)} pages",
            )

            progress = EMBED_PROGRESS_START
            yield ProgressEvent(
                step=IngestStep.EMBEDDING,
                progress=progress,
                message=f"Generating embeddings for {len(chunks)} chunks...",
            )
            embedded: list[EmbeddedChunk] = []
            async for batch in self._embedding_task.iter_batches(chunks, document_id):
                embedded.extend(batch)
                progress = EMBED_PROGRESS_START + (
                    (EMBED_PROGRESS_END - EMBED_PROGRESS_START) * len(embedded) / len(chunks)
                )
                yield ProgressEvent(
                    step=IngestStep.EMBEDDING,
                    progress=progress,
                    message=f"Embedded {len(embedded)}/{len(chunks)} chunks",
                )

            progress = 80
            yield ProgressEvent(step=IngestStep.EMBEDDING, progress=progress, message="Saving chunks...")
            if self._settings.atomic_replace:
                await self._vector_store.replace_document_chunks(document_id, embedded)
            else:
                await self._vector_store.delete_document_chunks(document_id)
                await self._vector_store.insert_chunks(document_id, embedded)

            progress = 85
            yield ProgressEvent(step=IngestStep.SUMMARIZING, progress=progress, message="Generating AI summary...")
            stored_chunks = await self._vector_store.get_document_chunks(document_id)
            summary = await self._summarizer.summarize(stored_chunks)
            await self._document_store.save_ai_summary(document_id, file_hash, summary)

            logger.info(
                f"{__name__}:run - Ingestion complete",
                extra={"document_id": document_id, "chunk_count": len(embedded)},
            )
            yield ProgressEvent(step=IngestStep.COMPLETE, progress=100, message="Processing complete")

        except Exception as e:
            message = getattr(e, "message", None) or str(e)
            log_exception_with_context(
                logger,
                f"{__name__}:run - Ingestion failed",
                e,
                document_id=document_id,
                progress=progress,
            )
            yield ProgressEvent(step=IngestStep.ERROR, progress=progress, message=message)
