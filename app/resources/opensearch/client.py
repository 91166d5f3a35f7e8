"""Shared async OpenSearch client for the vector index. Created lazily, closed on shutdown."""

from typing import Any

from opensearchpy import AsyncOpenSearch

from app.config.logging import get_logger
from app.config.storage.opensearch import get_opensearch_config

logger = get_logger(__name__)

_client: AsyncOpenSearch | None = None


def build_client_kwargs(cfg: dict[str, Any]) -> dict[str, Any]:
    """AsyncOpenSearch keyword arguments for a connection config. Auth is sent only with a username."""
    kwargs: dict[str, Any] = {
        "hosts": [cfg["host"]],
        "use_ssl": cfg["use_ssl"],
        "verify_certs": cfg["verify_certs"],
        "timeout": cfg["timeout"],
        "max_retries": 2,
        "retry_on_timeout": True,
    }
    if cfg.get("username"):
        kwargs["http_auth"] = (cfg["username"], cfg.get("password", ""))
    if not cfg["verify_certs"]:
        kwargs["ssl_show_warn"] = False
    return kwargs


def get_opensearch_client() -> AsyncOpenSearch:
    """Return the process-wide client used by the vector repository, index manager and /ready."""
    global _client
    if _client is None:
        cfg = get_opensearch_config()
        _client = AsyncOpenSearch(**build_client_kwargs(cfg))
        logger.info(
            "Vector store client created",
            extra={"host": cfg["host"], "index_name": cfg["index_name"], "timeout": cfg["timeout"]},
        )
    return _client


async def close_opensearch_client() -> None:
    """Release pooled connections. Safe to call when no client was ever created."""
    global _client
    if _client is None:
        return
    client, _client = _client, None
    try:
        await client.close()
    except Exception as e:
        logger.warning("Vector store client did not close cleanly", extra={"error": type(e).__name__})
        return
    logger.info("Vector store client closed")
