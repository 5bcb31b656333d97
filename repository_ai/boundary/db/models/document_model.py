"""
Document ORM model.

Only the columns the ingestion pipeline reads or writes are mapped here;
authors, courses and moderation state belong to the wider application schema.

Dependencies: sqlalchemy, repository_ai.boundary.db.base
System role: Publication record persistence
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from repository_ai.boundary.db.base import Base, TimestampMixin


class DocumentModel(Base, TimestampMixin):
    """
    Uploaded publication.

    Attributes:
        id: Integer primary key
        title: Publication title
        file_path: Object path of the PDF in blob storage
        file_hash: SHA-256 hex digest of the last ingested file
        ai_summary: Generated technical summary (None until ingested)
        chunks: Embedded chunks produced by ingestion
    """

    __tablename__ = "documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_hash: Mapped[str | None] = mapped_column(String(64), nullable=True)
    ai_summary: Mapped[str | None] = mapped_column(Text, nullable=True)

    chunks = relationship(
        "DocumentChunkModel",
        back_populates="document",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
