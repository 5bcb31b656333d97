"""HTTP API for ingestion, retrieval and summaries."""
