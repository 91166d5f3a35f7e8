"""FastAPI app entry: config, logging, health, error envelopes, and graceful shutdown."""

from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config.logging import configure_logging, get_logger
from app.config.settings import get_settings
from app.controllers.routes.chunk import router as chunk_router
from app.controllers.routes.vectorize import router as vectorize_router
from app.resources.opensearch.client import close_opensearch_client
from app.resources.opensearch.health import ping_opensearch

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging. Shutdown: close the OpenSearch client."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    yield
    logger.info("Application shutting down")
    await close_opensearch_client()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Vectorize Service",
    description="Split text into chunks, embed them, and store the vectors",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(chunk_router)
app.include_router(vectorize_router)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(content={"success": False, "error": message}, status_code=status_code)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not check dependencies."""
    return {"status": "ok"}


@app.get("/ready")
async def ready():
    """Readiness: verifies OpenSearch connectivity."""
    opensearch = await ping_opensearch()
    ok = opensearch.get("ok", False)
    body = {
        "status": "ok" if ok else "degraded",
        "opensearch": {"ok": ok, "error": opensearch.get("error")},
    }
    return JSONResponse(content=body, status_code=200 if ok else 503)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_request: Request, exc: RequestValidationError):
    """Invalid bodies get 400 with field-level messages, before any downstream call."""
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    logger.info("Request validation failed", extra={"errors": messages})
    return _error(400, "; ".join(messages) or "Invalid request body")


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: connection failures and timeouts get clear, non-leaking messages."""
    exc_name = type(exc).__name__
    # Do not leak stack traces or internal details to the client
    if "Connection" in exc_name or "Timeout" in exc_name or "connection" in str(type(exc).__module__).lower():
        logger.warning("Connection or timeout error", extra={"error": exc_name})
        return _error(503, "A dependency is temporarily unavailable. Please retry later.")
    logger.exception("Unhandled error")
    return _error(500, "An internal error occurred.")


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=settings.debug)
