"""POST /vectorize: split text (optional), embed every chunk, store the vectors."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.config.logging import get_logger
from app.controllers.schema.common import ErrorResponse
from app.controllers.schema.vectorize import VectorizeRequest, VectorizeResponse
from app.services.embedder.client import BaseEmbeddingClient, get_embedding_client
from app.services.vectorize.pipeline import VectorizeError, run_vectorize_pipeline

logger = get_logger(__name__)

router = APIRouter(prefix="/vectorize", tags=["vectorize"])


@router.post(
    "",
    response_model=VectorizeResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def vectorize(
    body: VectorizeRequest,
    client: BaseEmbeddingClient = Depends(get_embedding_client),
):
    """
    Without chunking the whole text is embedded once. With chunking enabled each chunk is
    embedded in order, then all vectors are stored in one batch. Any failure fails the request.
    """
    config = body.chunking.to_config() if body.chunking else None
    try:
        data = await run_vectorize_pipeline(body.text, config, client)
    except ValueError as e:
        return JSONResponse(status_code=400, content=ErrorResponse(error=str(e)).model_dump())
    except VectorizeError:
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to vectorize data").model_dump(),
        )
    return VectorizeResponse(data=data)
