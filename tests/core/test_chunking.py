"""Tests for ChunkingTask: tiling, overlap, word snapping and page attribution."""

import pytest

from repository_ai.core.document_processing.configs import DocumentPipelineSettings
from repository_ai.core.document_processing.models import PageRecord
from repository_ai.core.document_processing.tasks.chunking_task import ChunkingTask
from repository_ai.core.exceptions import ValidationError


def flatten(pages: list[PageRecord]) -> str:
    return "".join(page.text + " " for page in pages)


class TestChunkingTaskInit:
    """Test window configuration."""

    def test_defaults_match_token_sizes(self) -> None:
        """Should default to 2000-char windows advancing by 1680."""
        task = ChunkingTask()
        assert task.step == 2000 - 320

    def test_overlap_not_smaller_than_size_rejected(self) -> None:
        """Should reject overlap >= chunk size."""
        with pytest.raises(ValueError):
            ChunkingTask(chunk_size=100, chunk_overlap=100)

    def test_from_settings_converts_tokens_to_chars(self) -> None:
        """Should derive char sizes from token settings."""
        settings = DocumentPipelineSettings(chunk_size_tokens=100, overlap_tokens=10, chars_per_token=4)
        task = ChunkingTask.from_settings(settings)
        assert task.step == 400 - 40


class TestChunkingTaskValidation:
    """Test input validation."""

    def test_empty_pages_rejected(self) -> None:
        """Should raise ValidationError for no pages."""
        with pytest.raises(ValidationError):
            ChunkingTask().chunk([])

    def test_non_increasing_page_numbers_rejected(self) -> None:
        """Should raise ValidationError when page numbers repeat or decrease."""
        pages = [PageRecord(page_number=2, text="two"), PageRecord(page_number=2, text="again")]
        with pytest.raises(ValidationError):
            ChunkingTask().chunk(pages)

    def test_non_contiguous_page_numbers_allowed(self) -> None:
        """Should accept gaps in page numbering."""
        pages = [PageRecord(page_number=1, text="first"), PageRecord(page_number=5, text="fifth")]
        chunks = ChunkingTask().chunk(pages)
        assert chunks[0].page_start == 1
        assert chunks[0].page_end == 5


class TestChunkingShortDocument:
    """Test documents shorter than one window."""

    def test_single_chunk_spans_whole_text(self) -> None:
        """Should emit exactly one chunk covering the whole text."""
        pages = [PageRecord(page_number=1, text="A short abstract about soil erosion.")]
        chunks = ChunkingTask().chunk(pages)

        assert len(chunks) == 1
        assert chunks[0].content == "A short abstract about soil erosion."
        assert chunks[0].char_start == 0
        assert chunks[0].char_end == len(flatten(pages))
        assert chunks[0].page_start == chunks[0].page_end == 1

    def test_phrase_is_first_twenty_words(self) -> None:
        """Should keep only the leading 20 words as phrase."""
        text = " ".join(f"w{i}" for i in range(30))
        chunks = ChunkingTask().chunk([PageRecord(page_number=1, text=text)])
        assert chunks[0].phrase == " ".join(f"w{i}" for i in range(20))


class TestChunkingThreePageScenario:
    """Pages of 1000, 1500 and 800 chars flatten to 3303 chars."""

    def test_two_chunks_with_page_spans(self, sample_pages) -> None:
        """Should emit [0, ~2000) on pages 1-2 and [1680, 3303) on pages 2-3."""
        chunks = ChunkingTask().chunk(sample_pages)

        assert len(flatten(sample_pages)) == 3303
        assert len(chunks) == 2

        first, second = chunks
        assert first.char_start == 0
        assert 2000 <= first.char_end < 2100
        assert (first.page_start, first.page_end) == (1, 2)

        assert second.char_start == 1680
        assert second.char_end == 3303
        assert (second.page_start, second.page_end) == (2, 3)

    def test_consecutive_chunks_overlap(self, sample_pages) -> None:
        """Should overlap consecutive windows by about 320 chars."""
        first, second = ChunkingTask().chunk(sample_pages)
        assert second.char_start < first.char_end
        assert 320 <= first.char_end - second.char_start < 320 + 100


class TestChunkingTiling:
    """Test chunk coverage over longer documents."""

    @pytest.fixture
    def long_pages(self) -> list[PageRecord]:
        return [
            PageRecord(
                page_number=n,
                text=" ".join(f"page{n}word{i}" for i in range(120)),
            )
            for n in range(1, 8)
        ]

    def test_windows_cover_text_without_gaps(self, long_pages) -> None:
        """Should leave no uncovered offset between first and last chunk."""
        text = flatten(long_pages)
        chunks = ChunkingTask(chunk_size=500, chunk_overlap=80).chunk(long_pages)

        assert chunks[0].char_start == 0
        assert chunks[-1].char_end == len(text)
        for previous, current in zip(chunks, chunks[1:]):
            assert current.char_start < previous.char_end

    def test_content_is_trimmed_window(self, long_pages) -> None:
        """Should store the trimmed slice of the flattened text."""
        text = flatten(long_pages)
        for chunk in ChunkingTask(chunk_size=500, chunk_overlap=80).chunk(long_pages):
            assert chunk.content == text[chunk.char_start : chunk.char_end].strip()

    def test_windows_advance_by_fixed_step(self, long_pages) -> None:
        """Should start each window step chars after the previous one."""
        chunks = ChunkingTask(chunk_size=500, chunk_overlap=80).chunk(long_pages)
        starts = [chunk.char_start for chunk in chunks]
        assert all(b - a == 420 for a, b in zip(starts, starts[1:]))

    def test_cuts_do_not_split_words(self, long_pages) -> None:
        """Should end every non-final window at a space."""
        text = flatten(long_pages)
        chunks = ChunkingTask(chunk_size=500, chunk_overlap=80).chunk(long_pages)
        for chunk in chunks[:-1]:
            assert text[chunk.char_end] == " "

    def test_page_ranges_are_ordered(self, long_pages) -> None:
        """Should never report page_start after page_end or pages going backwards."""
        chunks = ChunkingTask(chunk_size=500, chunk_overlap=80).chunk(long_pages)
        for previous, current in zip(chunks, chunks[1:]):
            assert current.page_start >= previous.page_start
        assert chunks[-1].page_end == 7


class TestChunkingWordSnap:
    """Test snapping of cut points to word boundaries."""

    def test_cut_at_raw_boundary_when_no_space_nearby(self) -> None:
        """Should cut mid-token when the next space is beyond the snap window."""
        text = "x" * 300 + " tail"
        chunks = ChunkingTask(chunk_size=100, chunk_overlap=20, word_snap_window=50).chunk(
            [PageRecord(page_number=1, text=text)]
        )
        assert chunks[0].char_end == 100

    def test_cut_extends_to_next_space(self) -> None:
        """Should extend the window to a space inside the snap window."""
        text = "y" * 110 + " rest of the sentence"
        chunks = ChunkingTask(chunk_size=100, chunk_overlap=20, word_snap_window=50).chunk(
            [PageRecord(page_number=1, text=text)]
        )
        assert chunks[0].char_end == 110

    def test_whitespace_window_is_skipped(self) -> None:
        """Should advance without emitting when a window trims to nothing."""
        text = "start" + " " * 195 + "end"
        pages = [PageRecord(page_number=1, text=text)]
        chunks = ChunkingTask(chunk_size=50, chunk_overlap=10, word_snap_window=5).chunk(pages)

        assert all(chunk.content for chunk in chunks)
        assert chunks[0].content == "start"
        assert chunks[-1].content == "end"
