"""Tests for RagContextAssembler prompt assembly."""

from unittest.mock import AsyncMock

import pytest

from repository_ai.boundary.embeddings import EmbeddingClient
from repository_ai.boundary.vdb import InMemoryVectorStore, SearchResult
from repository_ai.core.exceptions import ValidationError
from repository_ai.core.rag_query import RagContextAssembler, format_sources

QUERY = "How does drought affect rice yield?"


@pytest.fixture
def provider(provider_factory):
    return provider_factory(dimension=2, vectors={QUERY: [1.0, 0.0]})


@pytest.fixture
def vector_store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture
def assembler(provider, vector_store) -> RagContextAssembler:
    return RagContextAssembler(EmbeddingClient(provider, max_retries=0), vector_store)


class TestFallbackPrompt:
    """Test behavior when nothing clears the threshold."""

    async def test_empty_store_returns_fallback(self, assembler) -> None:
        """Should return the general-knowledge prompt and no sources."""
        context = await assembler.assemble_context(QUERY)

        assert context.sources == []
        assert context.prompt == (
            f"User Query: {QUERY}\n\n"
            "No relevant sources found in the knowledge base. Please answer based on general "
            "knowledge but state that no internal documents were matched."
        )

    async def test_low_similarity_returns_fallback(self, assembler, vector_store, embedded_chunk_factory) -> None:
        """Should ignore chunks at or below the 0.5 threshold."""
        await vector_store.insert_chunks(1, [embedded_chunk_factory("unrelated", [0.0, 1.0])])

        context = await assembler.assemble_context(QUERY)

        assert context.sources == []
        assert "No relevant sources found" in context.prompt


class TestGroundedPrompt:
    """Test prompts built from retrieved sources."""

    async def test_sources_numbered_in_similarity_order(self, assembler, vector_store, embedded_chunk_factory) -> None:
        """Should number sources from 1 in descending score order."""
        await vector_store.insert_chunks(
            7,
            [
                embedded_chunk_factory("weaker match", [1.0, 0.6], page_start=4, page_end=5),
                embedded_chunk_factory("best match", [1.0, 0.0], page_start=2, page_end=2),
            ],
        )

        context = await assembler.assemble_context(QUERY)

        assert [s.content for s in context.sources] == ["best match", "weaker match"]
        assert '[Source 1]: (Page 2-2) "best match..."\nbest match' in context.prompt
        assert '[Source 2]: (Page 4-5) "weaker match..."\nweaker match' in context.prompt
        assert context.prompt.index("[Source 1]") < context.prompt.index("[Source 2]")

    async def test_instructions_and_query_included(self, assembler, vector_store, embedded_chunk_factory) -> None:
        """Should wrap context in the citation instructions."""
        await vector_store.insert_chunks(1, [embedded_chunk_factory("relevant", [1.0, 0.1])])

        prompt = (await assembler.assemble_context(QUERY)).prompt

        assert "--- CONTEXT START ---" in prompt
        assert "--- CONTEXT END ---" in prompt
        assert f"User Query: {QUERY}" in prompt
        assert "Cite sources using [Source X] notation." in prompt
        assert "Mention specific page numbers when relevant." in prompt
        assert "do not hallucinate information" in prompt

    async def test_at_most_top_k_sources(self, provider, vector_store, embedded_chunk_factory) -> None:
        """Should include no more than top_k sources."""
        await vector_store.insert_chunks(
            1, [embedded_chunk_factory(f"chunk {i}", [1.0, 0.01 * i]) for i in range(8)]
        )
        assembler = RagContextAssembler(EmbeddingClient(provider, max_retries=0), vector_store)

        context = await assembler.assemble_context(QUERY)

        assert len(context.sources) == 5
        assert "[Source 6]" not in context.prompt

    async def test_exactly_one_embedding_call(self, assembler, provider, vector_store, embedded_chunk_factory) -> None:
        """Should embed only the query."""
        await vector_store.insert_chunks(1, [embedded_chunk_factory("relevant", [1.0, 0.1])])

        await assembler.assemble_context(QUERY)

        assert provider.calls == [QUERY]

    async def test_search_parameters(self, provider) -> None:
        """Should search with top 5 and threshold 0.5 by default."""
        store = AsyncMock()
        store.similarity_search.return_value = []
        assembler = RagContextAssembler(EmbeddingClient(provider, max_retries=0), store)

        await assembler.assemble_context(QUERY)

        store.similarity_search.assert_awaited_once_with([1.0, 0.0], limit=5, threshold=0.5)

    async def test_blank_query_rejected(self, assembler, provider) -> None:
        """Should refuse a blank query without embedding it."""
        with pytest.raises(ValidationError):
            await assembler.assemble_context("   ")
        assert provider.calls == []


class TestFormatSources:
    """Test source block rendering."""

    def test_format(self) -> None:
        """Should render marker, page range, phrase and content."""
        source = SearchResult(
            id=1,
            document_id=2,
            content="Full chunk text.",
            phrase="Full chunk",
            page_start=3,
            page_end=4,
            score=0.9,
        )
        assert format_sources([source]) == '[Source 1]: (Page 3-4) "Full chunk..."\nFull chunk text.\n\n'
