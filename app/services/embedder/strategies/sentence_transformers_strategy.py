"""Sentence Transformers (local) embedding strategy. Requires the 'local' extra."""

import asyncio

from app.config.embedding.models import EmbeddingConfig
from app.config.logging import get_logger
from app.services.embedder.base import BaseEmbeddingStrategy, EmbeddingProviderError

logger = get_logger(__name__)


class SentenceTransformersEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Local Sentence Transformers model, loaded on first use and kept for the process.
    No API key required. Encoding is CPU/GPU bound and runs in a worker thread.
    """

    name = "sentence_transformers"

    def __init__(self) -> None:
        self._model = None
        self._model_name: str | None = None

    def _get_model(self, model_name: str):
        if self._model is None or self._model_name != model_name:
            try:
                from sentence_transformers import SentenceTransformer
            except ImportError as e:
                raise EmbeddingProviderError(
                    "sentence-transformers is not installed (pip install '.[local]')", cause=e
                ) from e
            logger.info("Loading sentence-transformers model", extra={"model": model_name})
            self._model = SentenceTransformer(model_name)
            self._model_name = model_name
        return self._model

    def _encode(self, texts: list[str], model_name: str) -> list[list[float]]:
        model = self._get_model(model_name)
        vectors = model.encode(texts, show_progress_bar=False, convert_to_numpy=True)
        return [v.tolist() for v in vectors]

    async def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        return await asyncio.to_thread(self._encode, texts, config.model)
