"""
Summarization model configuration settings.

Dependencies: pydantic, pydantic_settings
System role: LLM configuration for AI document summaries
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from repository_ai.configs.base import BaseSettings


class SummarizationSettings(BaseSettings):
    """Chat model used to write per-document technical summaries."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SUMMARY_",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(default="gemini-2.5-flash", description="Gemini chat model id")
    temperature: float = Field(default=0.2, description="Sampling temperature")
    api_key: str | None = Field(
        default=None,
        description="Google API key (falls back to GOOGLE_API_KEY when unset)",
    )
