"""Tests for EmbeddingTask batching and error reporting."""

import pytest

from repository_ai.boundary.embeddings import EmbeddingClient, EmbeddingProvider
from repository_ai.core.document_processing.models import Chunk
from repository_ai.core.document_processing.tasks import EmbeddingTask
from repository_ai.core.exceptions import EmbeddingError


class FailingTextProvider(EmbeddingProvider):
    """Embeds every text except `bad_text`; records batch calls."""

    name = "failing-text"

    def __init__(self, bad_text: str | None = None) -> None:
        self.bad_text = bad_text
        self.calls: list[str] = []

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if text == self.bad_text:
            raise ConnectionError("boom")
        return [float(text[1:])]


def make_chunks(count: int) -> list[Chunk]:
    return [
        Chunk(
            content=f"c{i}",
            phrase=f"c{i}",
            page_start=1,
            page_end=1,
            char_start=i * 10,
            char_end=i * 10 + 5,
        )
        for i in range(count)
    ]


class TestEmbeddingTask:
    """Test batch iteration."""

    async def test_batches_in_order(self) -> None:
        """Should yield batches of batch_size with vectors aligned to chunks."""
        task = EmbeddingTask(EmbeddingClient(FailingTextProvider(), max_retries=0), batch_size=10)

        batches = [batch async for batch in task.iter_batches(make_chunks(25))]

        assert [len(batch) for batch in batches] == [10, 10, 5]
        assert [chunk.embedding for chunk in batches[1]] == [[float(i)] for i in range(10, 20)]

    async def test_failure_in_later_batch_reports_document_position(self) -> None:
        """Should name the failing chunk by its position in the whole document."""
        task = EmbeddingTask(EmbeddingClient(FailingTextProvider("c13"), max_retries=0), batch_size=10)

        with pytest.raises(EmbeddingError) as exc_info:
            await task.embed(make_chunks(20), document_id=7)

        error = exc_info.value
        assert error.item_index == 13
        assert error.message == "Embedding failed for item 13 after 1 attempts: boom"
        assert error.details["document_id"] == 7
        assert error.details["provider"] == "failing-text"

    def test_batch_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            EmbeddingTask(EmbeddingClient(FailingTextProvider()), batch_size=0)
