"""Core business logic: ingestion pipeline, retrieval and summarization."""
