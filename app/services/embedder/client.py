"""
Embedding client: the two calls the vectorize pipeline depends on.
create_vectors embeds one text with the configured provider; store_vectors persists a batch
of vector records to the OpenSearch index.
"""

from abc import ABC, abstractmethod
from functools import lru_cache

from opensearchpy import AsyncOpenSearch

from app.config.embedding.models import EmbeddingConfig
from app.config.embedding.static import resolve_embedding_config
from app.config.indexing.models import IndexingConfig
from app.config.indexing.static import resolve_indexing_config
from app.config.logging import get_logger
from app.config.settings import get_settings
from app.repositories.opensearch.base import VectorStoreError
from app.repositories.opensearch.vectors_repository import bulk_store_vectors
from app.resources.opensearch.index_manager import ensure_vector_index
from app.services.embedder.base import BaseEmbeddingStrategy, EmbeddingProviderError
from app.services.embedder.models import EmbeddingResult, StoreResult, VectorRecord
from app.services.embedder.normalization import normalize_vector
from app.services.embedder.strategies import STRATEGY_REGISTRY, get_embedding_strategy

logger = get_logger(__name__)


class BaseEmbeddingClient(ABC):
    """Narrow contract for embedding and persisting vectors. Substitute a fake in tests."""

    @abstractmethod
    async def create_vectors(self, text: str) -> EmbeddingResult:
        """Embed one text. Raises EmbeddingProviderError on failure."""
        ...

    @abstractmethod
    async def store_vectors(self, vectors: list[VectorRecord]) -> StoreResult:
        """Persist all records in one batch. Raises VectorStoreError on failure."""
        ...


class EmbeddingClient(BaseEmbeddingClient):
    """Embedding strategy + OpenSearch index behind the client contract."""

    def __init__(
        self,
        strategy: BaseEmbeddingStrategy,
        config: EmbeddingConfig,
        index_name: str,
        indexing_config: IndexingConfig,
        opensearch_client: AsyncOpenSearch | None = None,
    ) -> None:
        self._strategy = strategy
        self._config = config
        self._index_name = index_name
        self._indexing_config = indexing_config
        self._opensearch = opensearch_client
        self._index_ready = False

    async def create_vectors(self, text: str) -> EmbeddingResult:
        vectors = await self._strategy.embed([text[: self._config.max_length]], self._config)
        if len(vectors) != 1:
            raise EmbeddingProviderError(
                f"{self._strategy.strategy_name} returned {len(vectors)} vectors for one input"
            )
        if not vectors[0]:
            raise EmbeddingProviderError(f"{self._strategy.strategy_name} returned an empty vector")
        vector = vectors[0]
        if self._config.normalize:
            vector = normalize_vector(vector, self._config.normalization_type)
        return EmbeddingResult(embeddings=vector)

    async def store_vectors(self, vectors: list[VectorRecord]) -> StoreResult:
        if not vectors:
            return StoreResult(index_name=self._index_name, count=0)
        dimensions = {len(v.values) for v in vectors}
        if len(dimensions) != 1:
            raise VectorStoreError(f"Vectors in one batch have mixed dimensions: {sorted(dimensions)}")
        if not self._index_ready:
            await ensure_vector_index(
                self._index_name, dimensions.pop(), self._indexing_config, client=self._opensearch
            )
            self._index_ready = True
        ids = await bulk_store_vectors(self._index_name, vectors, client=self._opensearch)
        return StoreResult(index_name=self._index_name, count=len(ids), ids=ids)


@lru_cache
def get_embedding_client() -> BaseEmbeddingClient:
    """Process-wide client built from settings. Raises ValueError for unknown profiles."""
    settings = get_settings()
    config = resolve_embedding_config(settings.embedding_profile)
    strategy = get_embedding_strategy(config.strategy)
    if strategy is None:
        raise ValueError(
            f"Unknown embedding strategy: {config.strategy!r} (known: {', '.join(sorted(STRATEGY_REGISTRY))})"
        )
    logger.info(
        "Embedding client initialized",
        extra={"strategy": config.strategy, "model": config.model, "index_name": settings.vector_index_name},
    )
    return EmbeddingClient(
        strategy=strategy,
        config=config,
        index_name=settings.vector_index_name,
        indexing_config=resolve_indexing_config(settings.indexing_profile),
    )
