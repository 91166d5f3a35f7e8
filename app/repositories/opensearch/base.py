"""Shared OpenSearch repository error handling."""

from app.config.logging import get_logger

logger = get_logger(__name__)


class VectorStoreError(Exception):
    """Raised when persisting vectors to the index fails. Message does not leak backend details."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


def translate_opensearch_error(e: Exception, context: str) -> VectorStoreError:
    """Wrap OpenSearch client errors into a non-leaking VectorStoreError."""
    logger.warning(
        "OpenSearch operation failed",
        extra={"context": context, "error_type": type(e).__name__},
    )
    return VectorStoreError(f"Vector store temporarily unavailable: {context}", cause=e)
