"""
RAG query assembly.

Exports: RagContextAssembler, RagContext, format_sources
"""

from repository_ai.core.rag_query.assembler import RagContext, RagContextAssembler, format_sources

__all__ = ["RagContextAssembler", "RagContext", "format_sources"]
