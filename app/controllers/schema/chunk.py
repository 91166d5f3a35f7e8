"""Request/response schemas for POST /chunk."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.config.chunking.models import ChunkingStrategy
from app.services.chunking.models import SplitResult


class ChunkRequest(BaseModel):
    """POST /chunk request body. Omitted fields fall back to the strategy's profile in static.json."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str = Field(..., max_length=1_000_000, description="Text to split; may be empty")
    strategy: ChunkingStrategy | None = Field(default=None, description="Defaults to the active profile")
    chunk_size: int | None = Field(default=None, ge=1, le=100_000)
    chunk_overlap: int | None = Field(default=None, ge=0, le=50_000)
    separators: list[str] | None = Field(default=None, min_length=1)
    keep_separator: bool | None = Field(default=None)


class ChunkResponse(BaseModel):
    """POST /chunk success body."""

    success: bool = Field(default=True)
    data: SplitResult
