"""
Embedding boundary.

Exports: EmbeddingProvider, EmbeddingClient, create_embedding_provider, create_embedding_client
"""

from repository_ai.boundary.embeddings.base import EmbeddingProvider
from repository_ai.boundary.embeddings.embedding_client import EmbeddingClient
from repository_ai.boundary.embeddings.factory import (
    create_embedding_client,
    create_embedding_provider,
)

__all__ = [
    "EmbeddingProvider",
    "EmbeddingClient",
    "create_embedding_provider",
    "create_embedding_client",
]
