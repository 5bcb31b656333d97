"""
Configuration settings for document processing pipeline.

Provides environment-based configuration for chunking, embedding batches and
chunk replacement behavior.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentPipelineSettings(BaseSettings):
    """Settings for document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings (token counts approximated in characters)
    chunk_size_tokens: int = Field(default=500, gt=0, description="Target chunk size in tokens")
    overlap_tokens: int = Field(default=80, ge=0, description="Overlap between consecutive chunks")
    chars_per_token: int = Field(default=4, gt=0, description="Characters per token approximation")
    word_snap_window: int = Field(
        default=100,
        ge=0,
        description="Max characters scanned past a cut point for a word boundary",
    )
    phrase_words: int = Field(default=20, gt=0, description="Words kept in a chunk's display phrase")

    # Embedding settings
    embedding_batch_size: int = Field(default=10, gt=0, description="Chunks per embedding batch")

    # Persistence settings
    atomic_replace: bool = Field(
        default=False,
        description="Delete old chunk rows and insert new ones in a single transaction",
    )
    skip_unchanged: bool = Field(
        default=False,
        description="Skip reprocessing when file hash matches and a summary exists",
    )

    @property
    def chunk_size_chars(self) -> int:
        return self.chunk_size_tokens * self.chars_per_token

    @property
    def overlap_chars(self) -> int:
        return self.overlap_tokens * self.chars_per_token

    @model_validator(mode="after")
    def _check_overlap(self) -> "DocumentPipelineSettings":
        if self.overlap_tokens >= self.chunk_size_tokens:
            raise ValueError("overlap_tokens must be smaller than chunk_size_tokens")
        return self


@lru_cache
def get_pipeline_settings() -> DocumentPipelineSettings:
    """
    Get cached pipeline settings instance.

    Returns:
        DocumentPipelineSettings: Singleton settings loaded from environment
    """
    return DocumentPipelineSettings()
