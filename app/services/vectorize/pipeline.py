"""
Vectorize pipeline: text (+ optional chunking config) → split → embed each chunk in order →
one batched store. Any failure aborts the request; nothing is stored after an embedding failure
and nothing is retried.
"""

from typing import Any

from app.config.chunking.models import ChunkingConfig
from app.config.logging import get_logger
from app.services.chunking.splitter import split_text
from app.services.embedder.client import BaseEmbeddingClient
from app.services.embedder.models import VectorRecord
from app.services.vectorize.models import ChunkEmbedding, ChunkMetadata, VectorizeData
from app.utils.ids import chunk_response_id, chunk_vector_id, single_vector_id
from app.utils.time import epoch_millis

logger = get_logger(__name__)


class VectorizeError(Exception):
    """The request failed as a whole. Does not say which chunk or call failed."""


async def _store(client: BaseEmbeddingClient, records: list[VectorRecord]) -> None:
    logger.info("Storing vectors", extra={"vectors_count": len(records)})
    try:
        result = await client.store_vectors(records)
    except Exception as e:
        logger.exception("Vector store failed", extra={"vectors_count": len(records)})
        raise VectorizeError("Failed to store vectors") from e
    logger.info("Vectors stored", extra={"index_name": result.index_name, "stored": result.count})


async def _vectorize_single(text: str, client: BaseEmbeddingClient) -> VectorizeData:
    logger.info("Processing text without chunking")
    try:
        result = await client.create_vectors(text)
    except Exception as e:
        logger.exception("Embedding failed", extra={"text_length": len(text)})
        raise VectorizeError("Failed to create embedding") from e
    logger.info("Embedding created", extra={"dimension": len(result.embeddings)})

    record = VectorRecord(
        id=single_vector_id(epoch_millis()),
        values=result.embeddings,
        metadata={"content": text, "originalTextLength": len(text)},
    )
    await _store(client, [record])
    return VectorizeData(embedding=result.embeddings, vectors_stored=1)


async def _vectorize_chunked(
    text: str,
    chunking: ChunkingConfig,
    client: BaseEmbeddingClient,
) -> VectorizeData:
    split = split_text(text, chunking)
    logger.info(
        "Text split into chunks",
        extra={"strategy": chunking.strategy, "total_chunks": split.total_chunks},
    )

    timestamp = epoch_millis()
    chunks: list[ChunkEmbedding] = []
    records: list[VectorRecord] = []
    for chunk in split.chunks:
        logger.info("Creating embedding for chunk %d/%d", chunk.index + 1, split.total_chunks)
        try:
            result = await client.create_vectors(chunk.content)
        except Exception as e:
            logger.exception(
                "Embedding failed",
                extra={"chunk_index": chunk.index, "total_chunks": split.total_chunks},
            )
            raise VectorizeError("Failed to create embedding") from e

        chunks.append(
            ChunkEmbedding(
                id=chunk_response_id(chunk.index),
                content=chunk.content,
                embedding=result.embeddings,
                metadata=ChunkMetadata(
                    chunk_index=chunk.index,
                    total_chunks=chunk.total_chunks,
                    start_index=chunk.start_offset,
                    end_index=chunk.end_offset,
                ),
            )
        )
        metadata: dict[str, Any] = {
            "content": chunk.content,
            "chunkIndex": chunk.index,
            "totalChunks": chunk.total_chunks,
            "originalTextLength": split.original_length,
        }
        records.append(
            VectorRecord(id=chunk_vector_id(timestamp, chunk.index), values=result.embeddings, metadata=metadata)
        )

    await _store(client, records)
    return VectorizeData(chunks=chunks, vectors_stored=len(records))


async def run_vectorize_pipeline(
    text: str,
    chunking: ChunkingConfig | None,
    client: BaseEmbeddingClient,
) -> VectorizeData:
    """
    Embed and store text. chunking=None embeds the whole text as one record.
    Raises ValueError for empty or whitespace-only text (before any call) and VectorizeError for any
    embedding or store failure.
    """
    if not text.strip():
        raise ValueError("Text is required")
    logger.info(
        "Starting vectorization",
        extra={"text_length": len(text), "chunking": chunking.model_dump() if chunking else None},
    )
    if chunking is None:
        return await _vectorize_single(text, client)
    return await _vectorize_chunked(text, chunking, client)
