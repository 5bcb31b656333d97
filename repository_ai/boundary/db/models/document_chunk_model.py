"""
Document chunk ORM model.

Each row stores one embedded chunk. The embedding column is an unsized
pgvector VECTOR; its width is EmbeddingSettings.dimension, enforced by
PgVectorStore on insert and search.
Vectors are compared with the cosine distance operator (<=>).

Dependencies: sqlalchemy, pgvector
System role: Chunk and embedding persistence for vector search
"""

from pgvector.sqlalchemy import Vector
from sqlalchemy import BigInteger, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from repository_ai.boundary.db.base import Base


class DocumentChunkModel(Base):
    """
    Embedded chunk of a document.

    Attributes:
        id: Auto-assigned primary key
        document_id: Owning document
        content: Chunk text
        phrase: Leading words for display
        embedding: Embedding vector
        page_start, page_end: Page range the chunk spans
        char_start, char_end: Offsets in the flattened document text
    """

    __tablename__ = "document_chunks"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    document_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    phrase: Mapped[str] = mapped_column(Text, nullable=False, default="")
    embedding = mapped_column(Vector(), nullable=False)
    page_start: Mapped[int] = mapped_column(Integer, nullable=False)
    page_end: Mapped[int] = mapped_column(Integer, nullable=False)
    char_start: Mapped[int] = mapped_column(Integer, nullable=False)
    char_end: Mapped[int] = mapped_column(Integer, nullable=False)

    document = relationship("DocumentModel", back_populates="chunks")

    __table_args__ = (Index("idx_document_chunks_document_id", "document_id"),)
