"""
Embedding client with bounded exponential-backoff retry.

Wraps a single EmbeddingProvider. Every call is retried up to max_retries
times, sleeping base_delay, 2 * base_delay, 4 * base_delay, ... between
attempts. Sequential providers also sleep their fixed request_delay before
every attempt, successful or not.

Dependencies: tenacity, asyncio
System role: Embedding generation for chunks and queries
"""

import asyncio
import logging

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from repository_ai.boundary.embeddings.base import EmbeddingProvider
from repository_ai.configs.embedding import EmbeddingSettings
from repository_ai.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


def failure_message(index: int, attempts: int, reason: object) -> str:
    return f"Embedding failed for item {index} after {attempts} attempts: {reason}"


class EmbeddingClient:
    """Order-preserving embedding with per-call retry."""

    def __init__(
        self,
        provider: EmbeddingProvider,
        max_retries: int = 3,
        base_delay: float = 1.0,
    ) -> None:
        """
        Initialize client.

        Args:
            provider: Provider that performs the actual embedding call
            max_retries: Retries after the first failed attempt
            base_delay: First backoff delay in seconds (doubles each retry)
        """
        self._provider = provider
        self._max_retries = max_retries
        self._base_delay = base_delay

    @classmethod
    def from_settings(
        cls,
        settings: EmbeddingSettings,
        provider: EmbeddingProvider,
    ) -> "EmbeddingClient":
        return cls(
            provider=provider,
            max_retries=settings.max_retries,
            base_delay=settings.base_delay_seconds,
        )

    @property
    def provider_name(self) -> str:
        return self._provider.name

    async def embed(self, text: str) -> list[float]:
        """
        Embed one text (a chunk or a search query).

        Raises:
            EmbeddingError: When every attempt failed
        """
        return await self._embed_with_retry(text, 0)

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """
        Embed texts, returning vectors in input order.

        Sequential providers are called one text at a time; others are called
        in concurrent groups of provider.concurrency texts.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: One vector per input text

        Raises:
            EmbeddingError: For the first text whose retries were exhausted
        """
        group_size = max(1, self._provider.concurrency)
        vectors: list[list[float]] = []

        if group_size == 1:
            for index, text in enumerate(texts):
                vectors.append(await self._embed_with_retry(text, index))
            return vectors

        for offset in range(0, len(texts), group_size):
            group = texts[offset : offset + group_size]
            vectors.extend(await self._embed_group(group, offset))
        return vectors

    async def _embed_group(self, group: list[str], offset: int) -> list[list[float]]:
        # A failure cancels the rest of the group before it is re-raised.
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [
                    tg.create_task(self._embed_with_retry(text, offset + i))
                    for i, text in enumerate(group)
                ]
        except ExceptionGroup as eg:
            failures = [e for e in eg.exceptions if isinstance(e, EmbeddingError)]
            if not failures:
                raise
            raise min(failures, key=lambda e: e.item_index)
        return [task.result() for task in tasks]

    async def aclose(self) -> None:
        await self._provider.aclose()

    async def _embed_with_retry(self, text: str, index: int) -> list[float]:
        attempts = self._max_retries + 1
        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type(Exception),
                stop=stop_after_attempt(attempts),
                wait=wait_exponential(multiplier=self._base_delay, exp_base=2),
                before_sleep=self._log_retry(index),
                reraise=True,
            ):
                with attempt:
                    if self._provider.request_delay > 0:
                        await asyncio.sleep(self._provider.request_delay)
                    return await self._provider.embed(text)
        except Exception as e:
            logger.error(
                f"{__name__}:embed - Item {index} failed after {attempts} attempts - "
                f"{type(e).__name__}: {e}"
            )
            raise EmbeddingError(
                failure_message(index, attempts, e),
                item_index=index,
                details={"provider": self._provider.name, "attempts": attempts, "reason": str(e)},
            ) from e

    def _log_retry(self, index: int):
        def log(retry_state: RetryCallState) -> None:
            outcome = retry_state.outcome
            error = outcome.exception() if outcome is not None else None
            logger.warning(
                f"{__name__}:embed - Retry {retry_state.attempt_number}/{self._max_retries} "
                f"for item {index} after {type(error).__name__}: {error}"
            )

        return log
