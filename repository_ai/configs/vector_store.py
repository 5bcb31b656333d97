"""
Vector store configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Vector search configuration for RAG retrieval
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from repository_ai.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (pgvector for prod, in-memory for local dev)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: Literal["pgvector", "memory"] = Field(
        default="pgvector",
        description="Vector store type: 'pgvector' for Postgres, 'memory' for local dev",
    )
    top_k: int = Field(default=5, description="Number of top results to retrieve")
    similarity_threshold: float = Field(
        default=0.5,
        description="Results must score strictly above this similarity",
    )
    insert_batch_size: int = Field(default=50, description="Rows flushed per insert batch")
