"""
Document summarization.

Exports: DocumentSummarizer, format_citations
"""

from repository_ai.core.summarization.summarizer import DocumentSummarizer, format_citations

__all__ = ["DocumentSummarizer", "format_citations"]
