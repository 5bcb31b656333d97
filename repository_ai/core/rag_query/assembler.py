"""
RAG context assembler.

Embeds a query once, retrieves the most similar chunks across all documents,
and renders them into a citation-numbered prompt. Generation is left to the
caller.

Dependencies: langchain_core, repository_ai.boundary
System role: Retrieval half of retrieval-augmented generation
"""

import logging

from pydantic import BaseModel, Field

from repository_ai.boundary.embeddings import EmbeddingClient
from repository_ai.boundary.vdb import SearchResult, VectorStore
from repository_ai.configs.vector_store import VectorStoreSettings
from repository_ai.core.exceptions import ValidationError
from repository_ai.observability import log_with_context
from repository_ai.core.rag_query.rag_prompt import (
    NO_SOURCES_PROMPT,
    RAG_PROMPT,
    SOURCE_TEMPLATE,
)

logger = logging.getLogger(__name__)


class RagContext(BaseModel):
    """Prompt ready for generation plus the sources cited in it."""

    prompt: str = Field(description="Rendered generation prompt")
    sources: list[SearchResult] = Field(
        default_factory=list,
        description="Retrieved chunks, best first; [Source N] refers to sources[N-1]",
    )


def format_sources(sources: list[SearchResult]) -> str:
    """Render sources as numbered citation blocks, starting at [Source 1]."""
    return "".join(
        SOURCE_TEMPLATE.format(
            index=index,
            page_start=source.page_start,
            page_end=source.page_end,
            phrase=source.phrase,
            content=source.content,
        )
        for index, source in enumerate(sources, start=1)
    )


class RagContextAssembler:
    """Build grounded prompts from vector search results."""

    def __init__(
        self,
        embedding_client: EmbeddingClient,
        vector_store: VectorStore,
        top_k: int = 5,
        similarity_threshold: float = 0.5,
    ) -> None:
        """
        Initialize assembler.

        Args:
            embedding_client: Client used to embed the query
            vector_store: Store searched for similar chunks
            top_k: Maximum sources per prompt
            similarity_threshold: Sources must score strictly above this
        """
        self._embedding_client = embedding_client
        self._vector_store = vector_store
        self._top_k = top_k
        self._similarity_threshold = similarity_threshold

    @classmethod
    def from_settings(
        cls,
        settings: VectorStoreSettings,
        embedding_client: EmbeddingClient,
        vector_store: VectorStore,
    ) -> "RagContextAssembler":
        return cls(
            embedding_client=embedding_client,
            vector_store=vector_store,
            top_k=settings.top_k,
            similarity_threshold=settings.similarity_threshold,
        )

    async def assemble_context(self, query: str) -> RagContext:
        """
        Assemble a RAG prompt for a query.

        Args:
            query: User question

        Returns:
            RagContext: Prompt and sources (empty sources means the fallback prompt)

        Raises:
            ValidationError: Query is blank
            EmbeddingError: Query embedding failed after retries
            StorageError: Vector search failed
        """
        if not query or not query.strip():
            raise ValidationError("Query must not be empty", field="query")

        query_vector = await self._embedding_client.embed(query)
        sources = await self._vector_store.similarity_search(
            query_vector,
            limit=self._top_k,
            threshold=self._similarity_threshold,
        )

        if not sources:
            logger.info(f"{__name__}:assemble_context - No sources above threshold")
            return RagContext(prompt=NO_SOURCES_PROMPT.format(query=query), sources=[])

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:assemble_context - Assembled {len(sources)} sources",
            top_score=sources[0].score,
            document_ids=sorted({source.document_id for source in sources}),
        )
        prompt = RAG_PROMPT.format(context=format_sources(sources), query=query)
        return RagContext(prompt=prompt, sources=sources)
