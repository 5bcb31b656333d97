"""
PDF text extraction task using pypdf.

Converts raw PDF bytes into per-page plain-text records. Text follows each
page's content stream order; no layout reconstruction is attempted.

Dependencies: pypdf
System role: First processing stage of document ingestion pipeline
"""

import io
import logging
import re

from pypdf import PdfReader

from repository_ai.core.document_processing.models import PageRecord
from repository_ai.core.exceptions import ExtractionError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs into single spaces and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


class ParsingTask:
    """Extract per-page text from PDF bytes."""

    def parse(self, data: bytes) -> list[PageRecord]:
        """
        Extract text from every page of a PDF.

        Pages whose normalized text is empty are dropped, so the returned page
        numbers may have gaps. An empty result is not an error here; the
        pipeline decides how to report a document without text.

        Args:
            data: Complete byte content of one PDF file

        Returns:
            list[PageRecord]: One record per page that yielded text, in page order

        Raises:
            ExtractionError: When the bytes cannot be parsed as a PDF
        """
        if not data:
            raise ExtractionError("PDF file is empty")

        try:
            reader = PdfReader(io.BytesIO(data))
            pages: list[PageRecord] = []
            for page_number, page in enumerate(reader.pages, start=1):
                text = normalize_whitespace(page.extract_text() or "")
                if text:
                    pages.append(PageRecord(page_number=page_number, text=text))
        except Exception as e:
            raise ExtractionError(f"Failed to parse PDF: {e}") from e

        logger.info(
            f"{__name__}:parse - Extracted text",
            extra={"page_count": len(reader.pages), "text_pages": len(pages)},
        )
        return pages
