"""
Document CRUD operations.

Dependencies: sqlalchemy, repository_ai.boundary.db.models
System role: Document persistence operations used by ingestion
"""

from sqlalchemy.ext.asyncio import AsyncSession

from repository_ai.boundary.db.CRUD.base_crud import BaseCRUD
from repository_ai.boundary.db.models.document_model import DocumentModel


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """CRUD operations for DocumentModel."""

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)

    async def update_ai_fields(
        self,
        session: AsyncSession,
        id: int,
        file_hash: str,
        ai_summary: str,
    ) -> bool:
        """
        Store the ingested file's checksum and its generated summary.

        Args:
            session: Async database session
            id: Document id
            file_hash: SHA-256 hex digest of the ingested file
            ai_summary: Generated summary text

        Returns:
            True if the document exists and was updated
        """
        return await self.update_by_id(session, id, file_hash=file_hash, ai_summary=ai_summary)


document_crud = DocumentCRUD()
