"""Response envelope shared by all routes."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Failure body. error is safe to show; internal details are only logged."""

    success: bool = Field(default=False)
    error: str = Field(..., description="Human-readable failure message")
