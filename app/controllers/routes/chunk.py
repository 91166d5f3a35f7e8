"""POST /chunk: split text and return the chunks with offsets. No embedding, nothing stored."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config.chunking.static import resolve_chunking_config
from app.controllers.schema.chunk import ChunkRequest, ChunkResponse
from app.controllers.schema.common import ErrorResponse
from app.services.chunking.splitter import split_text

router = APIRouter(prefix="/chunk", tags=["chunking"])


@router.post("", response_model=ChunkResponse, responses={400: {"model": ErrorResponse}})
async def chunk_text(body: ChunkRequest):
    """Preview how a strategy splits text. Size and overlap default to the strategy's profile."""
    overrides = body.model_dump(include={"chunk_size", "chunk_overlap", "separators", "keep_separator"})
    try:
        config = resolve_chunking_config(body.strategy, overrides)
    except ValidationError as e:
        message = "; ".join(err["msg"] for err in e.errors())
        return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())
    except ValueError as e:
        return JSONResponse(status_code=400, content=ErrorResponse(error=str(e)).model_dump())
    return ChunkResponse(data=split_text(body.text, config))
