"""Embedding providers by name. 'mock' needs no credentials and is used for local runs and tests."""

from functools import lru_cache

from app.services.embedder.base import BaseEmbeddingStrategy
from app.services.embedder.strategies.bedrock_strategy import BedrockEmbeddingStrategy
from app.services.embedder.strategies.mock_strategy import MockEmbeddingStrategy
from app.services.embedder.strategies.openai_strategy import OpenAIEmbeddingStrategy
from app.services.embedder.strategies.sentence_transformers_strategy import (
    SentenceTransformersEmbeddingStrategy,
)

STRATEGY_REGISTRY: dict[str, type[BaseEmbeddingStrategy]] = {
    strategy.name: strategy
    for strategy in (
        OpenAIEmbeddingStrategy,
        BedrockEmbeddingStrategy,
        SentenceTransformersEmbeddingStrategy,
        MockEmbeddingStrategy,
    )
}


@lru_cache
def get_embedding_strategy(strategy_name: str) -> BaseEmbeddingStrategy | None:
    """
    Shared strategy instance for a provider name, or None if unknown.
    Instances hold SDK clients and loaded models, so one per process is reused.
    """
    cls = STRATEGY_REGISTRY.get(strategy_name)
    return cls() if cls is not None else None
