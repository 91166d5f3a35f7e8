"""Indexing configuration models. Read-only; no business logic."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class HNSWConfig(BaseModel):
    """HNSW graph parameters for the k-NN vector field."""

    m: int = Field(default=16, ge=1)
    ef_construction: int = Field(default=200, ge=1)


class IndexingConfig(BaseModel):
    """Similarity, HNSW tuning and index settings used when the vector index is created."""

    similarity: Literal["cosine", "l2", "dot_product"] = Field(..., description="cosine|l2|dot_product")
    engine: str = Field(default="nmslib", description="k-NN engine")
    hnsw_config: HNSWConfig = Field(default_factory=HNSWConfig)
    index_settings: dict[str, Any] = Field(
        default_factory=lambda: {"number_of_shards": 1, "number_of_replicas": 1}
    )
