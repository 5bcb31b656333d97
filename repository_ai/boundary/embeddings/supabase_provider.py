"""
Supabase edge-function embedding provider (secondary).

POSTs {"input": text} to {supabase_url}/functions/v1/embed with the service
role key as bearer token and reads {"embedding": [...]} back. Rate limits are
loose enough to embed a small group of texts concurrently.

Dependencies: httpx
System role: Secondary embedding provider
"""

import logging

import httpx

from repository_ai.boundary.embeddings.base import EmbeddingProvider
from repository_ai.core.exceptions import MalformedEmbeddingResponseError

logger = logging.getLogger(__name__)


class SupabaseEmbeddingProvider(EmbeddingProvider):
    """Embed text through the Supabase 'embed' edge function."""

    name = "supabase"

    def __init__(
        self,
        supabase_url: str | None,
        service_role_key: str | None,
        concurrency: int = 5,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Supabase provider.

        Args:
            supabase_url: Project URL (https://<ref>.supabase.co)
            service_role_key: Service role key used as bearer token
            concurrency: Texts embedded concurrently per group
            timeout: Per-request timeout in seconds
            http_client: Pre-built client (tests inject a MockTransport)

        Raises:
            ValueError: When URL or key is missing
        """
        if not supabase_url or not service_role_key:
            raise ValueError("Missing Supabase configuration")

        self._endpoint = f"{supabase_url.rstrip('/')}/functions/v1/embed"
        self._headers = {"Authorization": f"Bearer {service_role_key}"}
        self.concurrency = max(1, concurrency)
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def embed(self, text: str) -> list[float]:
        response = await self._client.post(
            self._endpoint,
            json={"input": text},
            headers=self._headers,
        )
        response.raise_for_status()

        data = response.json()
        embedding = data.get("embedding") if isinstance(data, dict) else None
        if not isinstance(embedding, list) or not embedding:
            raise MalformedEmbeddingResponseError(
                "Supabase response contained no embedding array",
                details={"status_code": response.status_code},
            )
        return [float(v) for v in embedding]

    async def aclose(self) -> None:
        await self._client.aclose()
