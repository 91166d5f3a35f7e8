"""Embedding and vector record models exchanged with the embedding client."""

from typing import Any

from pydantic import BaseModel, Field


class EmbeddingResult(BaseModel):
    """Vector produced for one text."""

    embeddings: list[float]


class VectorRecord(BaseModel):
    """Unit persisted to the vector index."""

    id: str = Field(..., min_length=1)
    values: list[float]
    metadata: dict[str, Any] = Field(default_factory=dict)


class StoreResult(BaseModel):
    """Confirmation of a batched store call."""

    index_name: str
    count: int = Field(..., ge=0)
    ids: list[str] = Field(default_factory=list)
