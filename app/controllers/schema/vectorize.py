"""Request/response schemas for POST /vectorize."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.config.chunking.models import ChunkingConfig, ChunkingStrategy
from app.services.vectorize.models import VectorizeData

DEFAULT_CHUNK_OVERLAP = 200


class ChunkingOptions(BaseModel):
    """Optional chunking block of the request. Sizes are characters, approximate tokens for 'token'."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    enabled: bool = Field(default=False)
    strategy: ChunkingStrategy = Field(default="recursive")
    chunk_size: int = Field(default=1000, ge=100, le=4000)
    chunk_overlap: int = Field(default=DEFAULT_CHUNK_OVERLAP, ge=0, le=500)
    separators: list[str] | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def validate_overlap(self):
        """
        An omitted overlap is scaled to a fifth of chunkSize when the default would not fit.
        An explicit overlap >= chunkSize is rejected; 'simple' ignores overlap.
        """
        if "chunk_overlap" not in self.model_fields_set and self.chunk_overlap >= self.chunk_size:
            self.chunk_overlap = self.chunk_size // 5
        if self.enabled and self.strategy != "simple" and self.chunk_overlap >= self.chunk_size:
            raise ValueError("chunkOverlap must be smaller than chunkSize")
        return self

    def to_config(self) -> ChunkingConfig | None:
        """Chunking config to run with, or None when chunking is disabled."""
        if not self.enabled:
            return None
        return ChunkingConfig(
            strategy=self.strategy,
            chunk_size=self.chunk_size,
            chunk_overlap=self.chunk_overlap,
            separators=self.separators,
        )


class VectorizeRequest(BaseModel):
    """POST /vectorize request body."""

    text: str = Field(..., min_length=1, description="Text to embed")
    chunking: ChunkingOptions | None = Field(default=None)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must contain non-whitespace characters")
        return v


class VectorizeResponse(BaseModel):
    """POST /vectorize success body."""

    success: bool = Field(default=True)
    data: VectorizeData
