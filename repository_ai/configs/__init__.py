"""
Configuration package.

Exports: Settings, get_settings and the per-concern settings classes.
"""

from repository_ai.configs.database import DatabaseSettings
from repository_ai.configs.embedding import EmbeddingSettings
from repository_ai.configs.settings import Settings, get_settings
from repository_ai.configs.storage import BlobStorageSettings
from repository_ai.configs.summarization import SummarizationSettings
from repository_ai.configs.vector_store import VectorStoreSettings

__all__ = [
    "Settings",
    "get_settings",
    "DatabaseSettings",
    "BlobStorageSettings",
    "EmbeddingSettings",
    "VectorStoreSettings",
    "SummarizationSettings",
]
