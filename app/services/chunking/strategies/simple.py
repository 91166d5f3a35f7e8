"""Fixed-size slicing without overlap."""

from app.config.chunking.models import ChunkingConfig


def simple_chunks(text: str, config: ChunkingConfig) -> list[str]:
    """Cut text every chunk_size characters. The last slice holds the remainder."""
    size = config.chunk_size
    return [text[i : i + size] for i in range(0, len(text), size)]
