"""Embedding configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, Field


class EmbeddingConfig(BaseModel):
    """Embedding provider and parameters for one profile."""

    strategy: str = Field(..., description="openai|bedrock|sentence_transformers|mock")
    model: str = Field(..., description="Model identifier")
    dimensions: int | None = Field(default=None, ge=1, description="Requested vector size where the model supports it")
    normalize: bool = Field(default=False)
    normalization_type: Literal["L2", "L1", "none"] = Field(default="L2")
    max_length: int = Field(default=8192, ge=1, description="Input truncation, in characters")
    api_key: str | None = Field(default=None, description="OpenAI API key when strategy is openai")
    region: str | None = Field(default=None, description="AWS region when strategy is bedrock")
