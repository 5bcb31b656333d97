"""Tests for DocumentSummarizer prompt rendering and model invocation."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.messages import AIMessage

from repository_ai.boundary.vdb import StoredChunk
from repository_ai.configs.summarization import SummarizationSettings
from repository_ai.core.exceptions import DocumentProcessingError
from repository_ai.core.summarization import DocumentSummarizer, format_citations
from repository_ai.core.summarization.summary_prompt import DEFAULT_SUMMARY_QUESTION


@pytest.fixture
def chunks() -> list[StoredChunk]:
    return [
        StoredChunk(
            id=1, document_id=9, content="We sampled 40 plots.", phrase="We sampled 40 plots.",
            page_start=1, page_end=1, char_start=0, char_end=21,
        ),
        StoredChunk(
            id=2, document_id=9, content="Yield fell by 12%.", phrase="Yield fell by 12%.",
            page_start=2, page_end=3, char_start=1680, char_end=1700,
        ),
    ]


@pytest.fixture
def model() -> MagicMock:
    model = MagicMock()
    model.ainvoke = AsyncMock(return_value=AIMessage(content="## Methodology\nPlots were sampled."))
    return model


def rendered_prompt(model: MagicMock) -> str:
    messages = model.ainvoke.await_args.args[0]
    return "\n".join(message.content for message in messages)


class TestFormatCitations:
    """Test citation block rendering."""

    def test_zero_based_citation_ids(self, chunks) -> None:
        """Should number citations from 0 with page ranges."""
        text = format_citations(chunks)

        assert text.startswith('[CitationID: 0] (Page 1-1) "We sampled 40 plots...."\nWe sampled 40 plots.\n\n')
        assert '[CitationID: 1] (Page 2-3) "Yield fell by 12%...."' in text


class TestDocumentSummarizer:
    """Test summary generation."""

    async def test_default_question_used(self, model, chunks) -> None:
        """Should ask for the Critical Technical Summary by default."""
        summary = await DocumentSummarizer(model).summarize(chunks)

        assert summary == "## Methodology\nPlots were sampled."
        prompt = rendered_prompt(model)
        assert DEFAULT_SUMMARY_QUESTION in prompt
        assert "[CitationID: 0]" in prompt

    async def test_prompt_requires_sections(self, model, chunks) -> None:
        """Should require the four mandatory sections and neutral voice."""
        await DocumentSummarizer(model).summarize(chunks)

        prompt = rendered_prompt(model)
        for heading in ("## Methodology", "## Mechanism", "## Results", "## Conclusion"):
            assert heading in prompt
        assert "neutral, third-person" in prompt

    async def test_custom_question(self, model, chunks) -> None:
        """Should replace the default request with the caller's question."""
        await DocumentSummarizer(model).summarize(chunks, question="What sample size was used?")

        prompt = rendered_prompt(model)
        assert "What sample size was used?" in prompt
        assert DEFAULT_SUMMARY_QUESTION not in prompt

    async def test_model_failure_wrapped(self, model, chunks) -> None:
        """Should raise DocumentProcessingError when the model call fails."""
        model.ainvoke.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(DocumentProcessingError, match="Summary generation failed"):
            await DocumentSummarizer(model).summarize(chunks)

    def test_from_settings_builds_gemini_chat_model(self) -> None:
        """Should configure ChatGoogleGenerativeAI from settings."""
        settings = SummarizationSettings(model_id="gemini-2.5-flash", temperature=0.1, api_key="key")

        with patch("repository_ai.core.summarization.summarizer.ChatGoogleGenerativeAI") as chat_model:
            DocumentSummarizer.from_settings(settings)

        chat_model.assert_called_once_with(model="gemini-2.5-flash", temperature=0.1, google_api_key="key")
