"""
Vector database schemas.

Pydantic models for chunk rows read back from the store and for similarity
search results.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class StoredChunk(BaseModel):
    """Chunk row as persisted, without its embedding."""

    id: int = Field(description="Auto-assigned row id")
    document_id: int = Field(description="Owning document")
    content: str = Field(description="Chunk text")
    phrase: str = Field(description="Leading words for display")
    page_start: int = Field(description="First page of the chunk")
    page_end: int = Field(description="Last page of the chunk")
    char_start: int = Field(description="Start offset in flattened text")
    char_end: int = Field(description="End offset in flattened text")


class SearchResult(BaseModel):
    """Single result from similarity search."""

    id: int = Field(description="Chunk row id")
    document_id: int = Field(description="Owning document")
    content: str = Field(description="Chunk text")
    phrase: str = Field(description="Leading words for display")
    page_start: int = Field(description="First page of the chunk")
    page_end: int = Field(description="Last page of the chunk")
    score: float = Field(description="Cosine similarity to the query")
