"""
Embedding provider configuration settings.

Selects exactly one provider at startup. The primary provider (Gemini) runs
strictly sequentially with a fixed delay before every call; the secondary
provider (Supabase edge function) may run small concurrent groups.

Dependencies: pydantic, pydantic_settings
System role: Embedding client configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from repository_ai.configs.base import BaseSettings


class EmbeddingSettings(BaseSettings):
    """Embedding provider selection, credentials and retry policy."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: Literal["gemini", "supabase"] = Field(
        default="gemini",
        description="Embedding provider: 'gemini' (primary) or 'supabase' (secondary)",
    )
    dimension: int = Field(
        default=768,
        description="Vector dimension stored in the chunk table (gte-small via Supabase is 384)",
    )

    # Gemini
    gemini_model: str = Field(default="text-embedding-004", description="Gemini embedding model")
    gemini_api_key: str | None = Field(default=None, description="Gemini API key")
    request_delay_seconds: float = Field(
        default=1.0,
        description="Fixed delay before every Gemini call (requests-per-minute ceiling)",
    )

    # Supabase edge function
    supabase_url: str | None = Field(default=None, description="Supabase project URL")
    supabase_service_role_key: str | None = Field(
        default=None,
        description="Service role key sent as bearer token",
    )
    concurrent_batch_size: int = Field(
        default=5,
        description="Texts embedded concurrently per group (secondary provider only)",
    )
    http_timeout_seconds: float = Field(default=30.0, description="HTTP timeout per call")

    # Retry policy
    max_retries: int = Field(default=3, ge=0, description="Retries after the first failed call")
    base_delay_seconds: float = Field(
        default=1.0,
        ge=0.0,
        description="First backoff delay; doubles on each retry",
    )
