"""Research repository AI backend: PDF ingestion, vector search and RAG prompt assembly."""
