"""
Gemini embedding provider (primary).

Calls models.embed_content through the google-genai SDK. The REST payload is
{model, contents: [{parts: [{text}]}]} and the response
{embeddings: [{values: [...]}]}. Gemini enforces a strict requests-per-minute
quota, so this provider is marked sequential with a fixed pre-call delay.

Dependencies: google.genai, asyncio
System role: Primary embedding provider
"""

import asyncio
import logging

from google import genai
from google.genai import types

from repository_ai.boundary.embeddings.base import EmbeddingProvider
from repository_ai.core.exceptions import MalformedEmbeddingResponseError

logger = logging.getLogger(__name__)


class GeminiEmbeddingProvider(EmbeddingProvider):
    """Embed text with a Gemini embedding model."""

    name = "gemini"
    concurrency = 1

    def __init__(
        self,
        model: str = "text-embedding-004",
        api_key: str | None = None,
        dimension: int = 768,
        request_delay: float = 1.0,
        client: genai.Client | None = None,
    ) -> None:
        """
        Initialize Gemini provider.

        Args:
            model: Gemini embedding model id
            api_key: API key (SDK falls back to GOOGLE_API_KEY / GEMINI_API_KEY)
            dimension: Requested output dimensionality
            request_delay: Seconds to wait before every call
            client: Pre-built SDK client (tests inject a mock)
        """
        self._model = model
        self._dimension = dimension
        self.request_delay = request_delay
        self._client = client or genai.Client(api_key=api_key)

        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={dimension}"
        )

    async def embed(self, text: str) -> list[float]:
        response = await asyncio.to_thread(
            self._client.models.embed_content,
            model=self._model,
            contents=text,
            config=types.EmbedContentConfig(output_dimensionality=self._dimension),
        )

        embeddings = getattr(response, "embeddings", None)
        values = getattr(embeddings[0], "values", None) if embeddings else None
        if not values:
            raise MalformedEmbeddingResponseError(
                "Gemini response contained no embedding values",
                details={"model": self._model},
            )
        return [float(v) for v in values]
