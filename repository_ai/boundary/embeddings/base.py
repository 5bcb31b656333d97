"""
Embedding provider interface.

Dependencies: abc
System role: Strategy interface selected once at startup
"""

from abc import ABC, abstractmethod


class EmbeddingProvider(ABC):
    """
    Converts one text into a fixed-dimension vector.

    Attributes:
        name: Provider identifier used in logs
        request_delay: Seconds to wait before every call (0 disables)
        concurrency: Texts that may be in flight at once (1 = strictly sequential)
    """

    name: str = "base"
    request_delay: float = 0.0
    concurrency: int = 1

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Raises:
            MalformedEmbeddingResponseError: Response carried no usable vector
            Exception: Any transport or provider failure
        """

    async def aclose(self) -> None:
        """Release network resources held by the provider."""
