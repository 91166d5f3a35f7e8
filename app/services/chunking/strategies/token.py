"""
Approximate token chunking. chunk_size and chunk_overlap are read as token counts and
converted at a fixed 4 characters per token before running the recursive splitter.
This is a heuristic for English text, not a tokenizer: real token counts will differ.
"""

from app.config.chunking.models import DEFAULT_SEPARATORS, ChunkingConfig
from app.services.chunking.strategies.recursive import build_recursive_splitter

CHARS_PER_TOKEN = 4


def tokens_to_chars(tokens: int) -> int:
    """Character budget for an approximate token count."""
    return tokens * CHARS_PER_TOKEN


def token_chunks(text: str, config: ChunkingConfig) -> list[str]:
    """Recursive split with sizes scaled from tokens to characters. Custom separators are not used."""
    splitter = build_recursive_splitter(
        tokens_to_chars(config.chunk_size),
        tokens_to_chars(config.chunk_overlap),
        list(DEFAULT_SEPARATORS),
    )
    return splitter.split_text(text)
