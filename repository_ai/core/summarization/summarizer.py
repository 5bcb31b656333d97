"""
Document summarizer using Gemini through LangChain.

Formats a document's stored chunks as citation blocks and asks the chat model
for a Critical Technical Summary, or answers a caller-supplied question over
the same context.

Dependencies: langchain_core, langchain_google_genai
System role: Summarization stage of document ingestion pipeline
"""

import logging
from typing import Protocol, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from repository_ai.configs.summarization import SummarizationSettings
from repository_ai.core.exceptions import DocumentProcessingError
from repository_ai.core.summarization.summary_prompt import (
    CITATION_TEMPLATE,
    DEFAULT_SUMMARY_QUESTION,
    SUMMARY_PROMPT,
)

logger = logging.getLogger(__name__)


class SummaryChunk(Protocol):
    content: str
    phrase: str
    page_start: int
    page_end: int


def format_citations(chunks: Sequence[SummaryChunk]) -> str:
    """Render chunks as [CitationID: i] blocks, numbered from 0."""
    return "".join(
        CITATION_TEMPLATE.format(
            index=index,
            page_start=chunk.page_start,
            page_end=chunk.page_end,
            phrase=chunk.phrase,
            content=chunk.content,
        )
        for index, chunk in enumerate(chunks)
    )


class DocumentSummarizer:
    """Generate technical summaries of ingested documents."""

    def __init__(self, model: BaseChatModel) -> None:
        """
        Initialize summarizer.

        Args:
            model: LangChain chat model used for generation
        """
        self._model = model

    @classmethod
    def from_settings(cls, settings: SummarizationSettings) -> "DocumentSummarizer":
        kwargs = {"model": settings.model_id, "temperature": settings.temperature}
        if settings.api_key:
            kwargs["google_api_key"] = settings.api_key
        return cls(ChatGoogleGenerativeAI(**kwargs))

    async def summarize(
        self,
        chunks: Sequence[SummaryChunk],
        question: str | None = None,
    ) -> str:
        """
        Summarize a document from its chunks.

        Args:
            chunks: Stored chunks in page/char order
            question: Optional question replacing the default summary request

        Returns:
            str: Model output text

        Raises:
            DocumentProcessingError: Model call failed
        """
        messages = SUMMARY_PROMPT.format_messages(
            context=format_citations(chunks),
            question=question or DEFAULT_SUMMARY_QUESTION,
        )

        try:
            response = await self._model.ainvoke(messages)
        except Exception as e:
            logger.error(f"{__name__}:summarize - {type(e).__name__}: {e}")
            raise DocumentProcessingError(f"Summary generation failed: {e}") from e

        summary = response.content if isinstance(response.content, str) else response.text()
        logger.info(
            f"{__name__}:summarize - Generated summary",
            extra={"chunk_count": len(chunks), "summary_length": len(summary)},
        )
        return summary
