"""Base embedding strategy and provider error."""

from abc import ABC, abstractmethod

from app.config.embedding.models import EmbeddingConfig


class EmbeddingProviderError(Exception):
    """Raised when an embedding provider call fails or returns an unusable response."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class BaseEmbeddingStrategy(ABC):
    """
    One embedding provider. Returns raw vectors with a consistent dimension;
    truncation and normalization are applied by the embedding client.
    """

    @abstractmethod
    async def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        """Embed texts, returning one vector per text in the same order."""
        ...

    #: Registry key and the value of EmbeddingConfig.strategy
    name: str = ""

    @property
    def strategy_name(self) -> str:
        return self.name
