"""
Text chunking task with page and character provenance.

Flattens page texts into one string (single space between pages), then walks
it with a fixed-size window that advances by chunk_size - overlap. A window
that would end mid-text is stretched to the next space when one lies within
the snap window, so words are not split.

Dependencies: bisect
System role: Second processing stage of document ingestion pipeline
"""

import logging
from bisect import bisect_right

from repository_ai.core.document_processing.configs import DocumentPipelineSettings
from repository_ai.core.document_processing.models import Chunk, PageRecord
from repository_ai.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = " "


class ChunkingTask:
    """Split extracted pages into overlapping, page-attributed chunks."""

    def __init__(
        self,
        chunk_size: int = 2000,
        chunk_overlap: int = 320,
        word_snap_window: int = 100,
        phrase_words: int = 20,
    ) -> None:
        """
        Initialize chunking task with window configuration.

        Args:
            chunk_size: Window size in characters
            chunk_overlap: Characters shared by consecutive windows
            word_snap_window: Max distance past the cut point to look for a space
            phrase_words: Number of leading words kept as the display phrase

        Raises:
            ValueError: When overlap is not smaller than chunk size
        """
        if chunk_overlap >= chunk_size:
            raise ValueError("chunk_overlap must be smaller than chunk_size")

        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap
        self._word_snap_window = word_snap_window
        self._phrase_words = phrase_words

    @classmethod
    def from_settings(cls, settings: DocumentPipelineSettings) -> "ChunkingTask":
        return cls(
            chunk_size=settings.chunk_size_chars,
            chunk_overlap=settings.overlap_chars,
            word_snap_window=settings.word_snap_window,
            phrase_words=settings.phrase_words,
        )

    @property
    def step(self) -> int:
        return self._chunk_size - self._chunk_overlap

    def chunk(self, pages: list[PageRecord]) -> list[Chunk]:
        """
        Split pages into chunks.

        Args:
            pages: Extracted pages with strictly increasing page numbers

        Returns:
            list[Chunk]: Chunks in document order

        Raises:
            ValidationError: When pages is empty or page numbers do not increase
        """
        if not pages:
            raise ValidationError("No pages to chunk", field="pages")
        for previous, current in zip(pages, pages[1:]):
            if current.page_number <= previous.page_number:
                raise ValidationError(
                    f"Page numbers must be strictly increasing "
                    f"({previous.page_number} followed by {current.page_number})",
                    field="pages",
                )

        full_text, page_starts = self._flatten(pages)
        page_numbers = [p.page_number for p in pages]
        text_length = len(full_text)

        chunks: list[Chunk] = []
        start = 0
        while start < text_length:
            end = self._window_end(full_text, start)
            content = full_text[start:end].strip()

            if not content:
                start += self.step
                continue

            chunks.append(
                Chunk(
                    content=content,
                    phrase=" ".join(content.split()[: self._phrase_words]),
                    page_start=self._page_at(start, page_starts, page_numbers, text_length, fallback=0),
                    page_end=self._page_at(end - 1, page_starts, page_numbers, text_length, fallback=-1),
                    char_start=start,
                    char_end=end,
                )
            )

            if end >= text_length:
                break
            start += self.step

        logger.debug(
            f"{__name__}:chunk - Chunked document",
            extra={"text_length": text_length, "chunk_count": len(chunks)},
        )
        return chunks

    def _flatten(self, pages: list[PageRecord]) -> tuple[str, list[int]]:
        """
        Join page texts, recording where each page begins.

        The separator after a page belongs to that page, so page i covers
        [page_starts[i], page_starts[i + 1]) and the last page runs to the end.
        """
        parts: list[str] = []
        page_starts: list[int] = []
        offset = 0
        for page in pages:
            page_starts.append(offset)
            segment = page.text + PAGE_SEPARATOR
            parts.append(segment)
            offset += len(segment)
        return "".join(parts), page_starts

    def _window_end(self, text: str, start: int) -> int:
        end = start + self._chunk_size
        if end >= len(text):
            return len(text)

        next_space = text.find(" ", end)
        if next_space != -1 and next_space - end < self._word_snap_window:
            return next_space
        return end

    def _page_at(
        self,
        offset: int,
        page_starts: list[int],
        page_numbers: list[int],
        text_length: int,
        fallback: int,
    ) -> int:
        if 0 <= offset < text_length:
            return page_numbers[bisect_right(page_starts, offset) - 1]

        # Page ranges tile [0, text_length), so only out-of-range offsets land here.
        logger.warning(
            f"{__name__}:_page_at - Offset outside page map, using fallback page",
            extra={"offset": offset, "text_length": text_length},
        )
        return page_numbers[fallback]
