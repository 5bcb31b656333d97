"""
Page record model for extracted PDF text.

Dependencies: pydantic
System role: Output of the PDF text extractor, input of the chunker
"""

from pydantic import BaseModel, ConfigDict, Field


class PageRecord(BaseModel):
    """Normalized text of one PDF page. Discarded after chunking."""

    model_config = ConfigDict(frozen=True)

    page_number: int = Field(ge=1, description="1-based page number in the source PDF")
    text: str = Field(description="Whitespace-normalized page text")
