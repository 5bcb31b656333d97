"""
Document processing pipeline for ingestion.

Parses, chunks, embeds and stores uploaded PDFs, then summarizes them.
The orchestrator is IngestionPipeline in .entrypoint.

Dependencies: pypdf, pydantic, repository_ai.boundary
System role: Document ingestion pipeline
"""

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .models import Chunk, EmbeddedChunk, IngestStep, PageRecord, ProgressEvent

__all__ = [
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "PageRecord",
    "Chunk",
    "EmbeddedChunk",
    "IngestStep",
    "ProgressEvent",
]
