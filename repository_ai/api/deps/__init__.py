"""Dependency injection for API routes."""

from .dependencies import (
    ServiceCache,
    get_document_store,
    get_ingestion_pipeline,
    get_rag_assembler,
    get_service_cache,
    get_summarizer,
    get_vector_store,
)

__all__ = [
    "ServiceCache",
    "get_service_cache",
    "get_ingestion_pipeline",
    "get_rag_assembler",
    "get_document_store",
    "get_vector_store",
    "get_summarizer",
]
