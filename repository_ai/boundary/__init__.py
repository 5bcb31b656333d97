"""Boundary adapters: database, blob storage, vector store and embedding providers."""
