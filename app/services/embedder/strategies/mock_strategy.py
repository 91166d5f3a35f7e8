"""Mock embedding strategy for tests and local runs. Produces deterministic fake vectors."""

import hashlib
import re

from app.config.embedding.models import EmbeddingConfig
from app.services.embedder.base import BaseEmbeddingStrategy

MOCK_DEFAULT_DIM = 384


def _mock_dimension(config: EmbeddingConfig) -> int:
    """config.dimensions, else a trailing number in the model name (mock-768), else 384."""
    if config.dimensions is not None:
        return config.dimensions
    match = re.search(r"(\d+)$", config.model)
    return int(match.group(1)) if match else MOCK_DEFAULT_DIM


def _mock_vector(text: str, dim: int) -> list[float]:
    """Component j is the first 4 bytes of sha256(j:text), scaled to [0, 1)."""
    out: list[float] = []
    for j in range(dim):
        digest = hashlib.sha256(f"{j}:{text}".encode("utf-8")).digest()
        out.append(int.from_bytes(digest[:4], "big") / 2**32)
    return out


class MockEmbeddingStrategy(BaseEmbeddingStrategy):
    """Same text and dimension always give the same vector, across processes."""

    name = "mock"

    async def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        dim = _mock_dimension(config)
        return [_mock_vector(t, dim) for t in texts]
