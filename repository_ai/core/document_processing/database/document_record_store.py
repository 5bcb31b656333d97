"""
Document record store for the ingestion pipeline.

Reads the document row being ingested and writes back the file checksum and
AI summary once processing succeeds.

Dependencies: sqlalchemy, asyncpg
System role: Database persistence layer for the pipeline
"""

import logging

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from repository_ai.boundary.db.CRUD.document_crud import document_crud
from repository_ai.core.exceptions import StorageError

logger = logging.getLogger(__name__)


class DocumentRecord(BaseModel):
    """Fields of a document row the pipeline needs."""

    id: int
    title: str = ""
    file_path: str
    file_hash: str | None = None
    ai_summary: str | None = None


class DocumentStore:
    """Read and update document rows, one session per call."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """
        Initialize with session factory.

        Args:
            session_factory: Async session factory bound to the application database
        """
        self._session_factory = session_factory

    async def get_document(self, document_id: int) -> DocumentRecord | None:
        """
        Load a document row.

        Args:
            document_id: Document id

        Returns:
            DocumentRecord | None: The row, or None when it does not exist

        Raises:
            StorageError: Database query failed
        """
        try:
            async with self._session_factory() as session:
                document = await document_crud.get_by_id(session, document_id)
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:get_document - {type(e).__name__}: {e}")
            raise StorageError(
                f"Failed to load document: {e}",
                operation="query",
                details={"document_id": document_id},
            ) from e

        if document is None:
            return None

        return DocumentRecord(
            id=document.id,
            title=document.title,
            file_path=document.file_path,
            file_hash=document.file_hash,
            ai_summary=document.ai_summary,
        )

    async def save_ai_summary(self, document_id: int, file_hash: str, ai_summary: str) -> None:
        """
        Persist the ingested file's checksum and its summary.

        Args:
            document_id: Document id
            file_hash: SHA-256 hex digest of the ingested file
            ai_summary: Generated summary

        Raises:
            StorageError: Document not found or update failed
        """
        try:
            async with self._session_factory() as session:
                updated = await document_crud.update_ai_fields(
                    session, document_id, file_hash=file_hash, ai_summary=ai_summary
                )
                if not updated:
                    await session.rollback()
                    raise StorageError(
                        f"Document {document_id} not found",
                        operation="update",
                        details={"document_id": document_id},
                    )
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:save_ai_summary - {type(e).__name__}: {e}")
            raise StorageError(
                f"Failed to save summary: {e}",
                operation="update",
                details={"document_id": document_id},
            ) from e

        logger.info(
            f"{__name__}:save_ai_summary - Summary saved",
            extra={"document_id": document_id, "summary_length": len(ai_summary)},
        )

    async def update_ai_summary(self, document_id: int, ai_summary: str) -> None:
        """
        Replace a document's summary without touching its file checksum.

        Raises:
            StorageError: Document not found or update failed
        """
        try:
            async with self._session_factory() as session:
                updated = await document_crud.update_by_id(session, document_id, ai_summary=ai_summary)
                if not updated:
                    await session.rollback()
                    raise StorageError(
                        f"Document {document_id} not found",
                        operation="update",
                        details={"document_id": document_id},
                    )
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:update_ai_summary - {type(e).__name__}: {e}")
            raise StorageError(
                f"Failed to update summary: {e}",
                operation="update",
                details={"document_id": document_id},
            ) from e
