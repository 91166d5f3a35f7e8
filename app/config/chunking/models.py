"""Chunking configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

ChunkingStrategy = Literal["character", "recursive", "token", "simple"]

DEFAULT_SEPARATORS: list[str] = ["\n\n", "\n", " ", ""]


class ChunkingConfig(BaseModel):
    """Chunking strategy and parameters. Sizes are characters, or approximate tokens for 'token'."""

    strategy: ChunkingStrategy = Field(default="recursive", description="character|recursive|token|simple")
    chunk_size: int = Field(default=1000, gt=0, description="Maximum chunk size")
    chunk_overlap: int = Field(default=200, ge=0, description="Trailing context carried into the next chunk")
    separators: list[str] | None = Field(default=None, description="Separators in priority order")
    keep_separator: bool | None = Field(default=None, description="Keep separators in chunk text")

    @model_validator(mode="after")
    def validate_overlap(self):
        """Overlap must be smaller than the chunk size; 'simple' never overlaps."""
        if self.strategy == "simple":
            self.chunk_overlap = 0
            return self
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        return self

    def effective_separators(self) -> list[str]:
        """Configured separators, or paragraph → line → word → character."""
        return list(self.separators) if self.separators else list(DEFAULT_SEPARATORS)
