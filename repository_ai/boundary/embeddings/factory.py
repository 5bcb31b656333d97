"""
Embedding provider factory.

Provider choice comes from EmbeddingSettings.provider and is fixed for the
lifetime of the returned client.

Dependencies: repository_ai.boundary.embeddings, repository_ai.configs
System role: Embedding provider instantiation and selection
"""

import logging

from repository_ai.boundary.embeddings.base import EmbeddingProvider
from repository_ai.boundary.embeddings.embedding_client import EmbeddingClient
from repository_ai.configs.embedding import EmbeddingSettings

logger = logging.getLogger(__name__)


def create_embedding_provider(settings: EmbeddingSettings) -> EmbeddingProvider:
    """
    Build the configured embedding provider.

    Args:
        settings: Embedding settings

    Returns:
        EmbeddingProvider: Gemini or Supabase provider

    Raises:
        ValueError: If the provider name is unknown or its credentials are missing
    """
    provider = settings.provider.lower()

    if provider == "gemini":
        from repository_ai.boundary.embeddings.gemini_provider import GeminiEmbeddingProvider

        logger.info(f"{__name__}:create_embedding_provider - Using Gemini embeddings")
        return GeminiEmbeddingProvider(
            model=settings.gemini_model,
            api_key=settings.gemini_api_key,
            dimension=settings.dimension,
            request_delay=settings.request_delay_seconds,
        )

    if provider == "supabase":
        from repository_ai.boundary.embeddings.supabase_provider import SupabaseEmbeddingProvider

        logger.info(f"{__name__}:create_embedding_provider - Using Supabase embeddings")
        return SupabaseEmbeddingProvider(
            supabase_url=settings.supabase_url,
            service_role_key=settings.supabase_service_role_key,
            concurrency=settings.concurrent_batch_size,
            timeout=settings.http_timeout_seconds,
        )

    raise ValueError(
        f"Invalid EMBEDDING_PROVIDER: {settings.provider}. Must be 'gemini' or 'supabase'."
    )


def create_embedding_client(settings: EmbeddingSettings) -> EmbeddingClient:
    """Build an EmbeddingClient around the configured provider."""
    return EmbeddingClient.from_settings(settings, create_embedding_provider(settings))
