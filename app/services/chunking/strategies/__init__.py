"""Chunking strategy implementations."""

from typing import Callable

from app.config.chunking.models import ChunkingConfig
from app.services.chunking.strategies.character import character_chunks
from app.services.chunking.strategies.recursive import recursive_chunks
from app.services.chunking.strategies.simple import simple_chunks
from app.services.chunking.strategies.token import token_chunks, tokens_to_chars

STRATEGY_REGISTRY: dict[str, Callable[[str, ChunkingConfig], list[str]]] = {
    "character": character_chunks,
    "recursive": recursive_chunks,
    "token": token_chunks,
    "simple": simple_chunks,
}


def get_strategy_fn(strategy_name: str):
    """Return the chunking function for the given strategy name, or None."""
    return STRATEGY_REGISTRY.get(strategy_name)


def effective_chunk_size(config: ChunkingConfig) -> int:
    """Chunk size in characters for the config's strategy."""
    if config.strategy == "token":
        return tokens_to_chars(config.chunk_size)
    return config.chunk_size
