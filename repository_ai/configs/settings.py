"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from repository_ai.configs.base import BaseSettings
from repository_ai.configs.database import DatabaseSettings
from repository_ai.configs.embedding import EmbeddingSettings
from repository_ai.configs.storage import BlobStorageSettings
from repository_ai.configs.summarization import SummarizationSettings
from repository_ai.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    storage: BlobStorageSettings = Field(default_factory=BlobStorageSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    summarization: SummarizationSettings = Field(default_factory=SummarizationSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
