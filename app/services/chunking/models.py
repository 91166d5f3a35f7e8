"""Chunk and split result models. Immutable; serialized with camelCase keys."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Chunk(BaseModel):
    """One piece of a split text with its position metadata."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    content: str
    index: int = Field(..., ge=0)
    total_chunks: int = Field(..., ge=1)
    start_offset: int = Field(..., ge=0)
    end_offset: int = Field(..., ge=0)


class SplitResult(BaseModel):
    """Ordered chunks of one input plus the input length."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    chunks: list[Chunk]
    total_chunks: int = Field(..., ge=1)
    original_length: int = Field(..., ge=0)
