"""
Models for document processing pipeline.

Exports: PageRecord, Chunk, EmbeddedChunk, IngestStep, ProgressEvent, parse_progress_line
"""

from .chunk import Chunk, EmbeddedChunk
from .page_record import PageRecord
from .progress import TERMINAL_STEPS, IngestStep, ProgressEvent, parse_progress_line

__all__ = [
    "PageRecord",
    "Chunk",
    "EmbeddedChunk",
    "IngestStep",
    "ProgressEvent",
    "TERMINAL_STEPS",
    "parse_progress_line",
]
