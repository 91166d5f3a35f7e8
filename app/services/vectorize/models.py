"""Vectorize pipeline output. Serialized with camelCase keys."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChunkMetadata(BaseModel):
    """Position of a chunk within its split."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    chunk_index: int = Field(..., ge=0)
    total_chunks: int = Field(..., ge=1)
    start_index: int = Field(..., ge=0)
    end_index: int = Field(..., ge=0)


class ChunkEmbedding(BaseModel):
    """One chunk with its embedding, as returned to the caller."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    content: str
    embedding: list[float]
    metadata: ChunkMetadata


class VectorizeData(BaseModel):
    """Either chunks (chunking enabled) or a single embedding, plus the stored record count."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    chunks: list[ChunkEmbedding] | None = None
    embedding: list[float] | None = None
    vectors_stored: int = Field(..., ge=0)
