"""
Chunk domain models for document processing pipeline.

Represents a slice of a document's flattened text with page and character
provenance, optionally carrying its embedding vector.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

from pydantic import BaseModel, Field, model_validator


class Chunk(BaseModel):
    """Overlapping slice of flattened document text."""

    content: str = Field(description="Trimmed chunk text")
    phrase: str = Field(description="First words of the chunk, for display")
    page_start: int = Field(description="Page containing the first character")
    page_end: int = Field(description="Page containing the last character")
    char_start: int = Field(ge=0, description="Window start offset (inclusive)")
    char_end: int = Field(description="Window end offset (exclusive)")

    @model_validator(mode="after")
    def _check_ranges(self) -> "Chunk":
        if self.char_start >= self.char_end:
            raise ValueError("char_start must be less than char_end")
        if self.page_start > self.page_end:
            raise ValueError("page_start must not exceed page_end")
        return self


class EmbeddedChunk(Chunk):
    """Chunk with its embedding vector."""

    embedding: list[float] | None = Field(default=None, description="Embedding vector")
