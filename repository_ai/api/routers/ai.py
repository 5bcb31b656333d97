"""
AI query and summary API endpoints.

Routes:
- POST /ai/query - Build a RAG prompt for a question
- GET /ai/summary/{document_id} - Read a document's stored AI summary
- POST /ai/summary/{document_id}/regenerate - Summarize stored chunks again

Dependencies: repository_ai.core.rag_query, repository_ai.core.summarization
System role: AI HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from repository_ai.api.deps import (
    get_document_store,
    get_rag_assembler,
    get_summarizer,
    get_vector_store,
)
from repository_ai.boundary.vdb import SearchResult, VectorStore
from repository_ai.core.document_processing.database import DocumentStore
from repository_ai.core.exceptions import RepositoryAIError, ValidationError
from repository_ai.core.rag_query import RagContextAssembler
from repository_ai.core.summarization import DocumentSummarizer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


class QueryRequest(BaseModel):
    """RAG query request body."""

    query: str = Field(description="User question")


class QueryResponse(BaseModel):
    """Assembled prompt and its sources."""

    prompt: str
    sources: list[SearchResult]


class SummaryResponse(BaseModel):
    """Stored summary of a document (None until ingested)."""

    summary: str | None


@router.post("/query", response_model=QueryResponse)
async def query_repository(
    request: QueryRequest,
    assembler: RagContextAssembler = Depends(get_rag_assembler),
) -> QueryResponse:
    """
    Assemble a grounded prompt for a question.

    Raises:
        HTTPException(400): Blank query
        HTTPException(502): Embedding or vector search failed
    """
    try:
        context = await assembler.assemble_context(request.query)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except RepositoryAIError as e:
        logger.error(f"{__name__}:query_repository - {type(e).__name__}: {e}")
        raise HTTPException(status_code=502, detail=e.message)

    return QueryResponse(prompt=context.prompt, sources=context.sources)


@router.get("/summary/{document_id}", response_model=SummaryResponse)
async def get_summary(
    document_id: int,
    document_store: DocumentStore = Depends(get_document_store),
) -> SummaryResponse:
    """
    Read a document's AI summary.

    Raises:
        HTTPException(404): Document not found
    """
    document = await document_store.get_document(document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")
    return SummaryResponse(summary=document.ai_summary)


@router.post("/summary/{document_id}/regenerate", response_model=SummaryResponse)
async def regenerate_summary(
    document_id: int,
    document_store: DocumentStore = Depends(get_document_store),
    vector_store: VectorStore = Depends(get_vector_store),
    summarizer: DocumentSummarizer = Depends(get_summarizer),
) -> SummaryResponse:
    """
    Summarize a document's stored chunks again and save the result.

    Raises:
        HTTPException(404): Document not found or has no chunks
        HTTPException(502): Summary generation or saving failed
    """
    document = await document_store.get_document(document_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")

    chunks = await vector_store.get_document_chunks(document_id)
    if not chunks:
        raise HTTPException(status_code=404, detail="No chunks found for this document")

    try:
        summary = await summarizer.summarize(chunks)
        await document_store.update_ai_summary(document_id, summary)
    except RepositoryAIError as e:
        logger.error(f"{__name__}:regenerate_summary - {type(e).__name__}: {e}")
        raise HTTPException(status_code=502, detail=e.message)

    return SummaryResponse(summary=summary)
