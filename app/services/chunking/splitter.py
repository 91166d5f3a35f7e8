"""
Splitter: text + chunking config → SplitResult. Pure and deterministic.

Offsets are cumulative: each chunk starts where the previous one ended. With an
overlapping strategy the overlap is counted twice, so start/end only match positions
in the original text for the 'simple' strategy.
"""

from app.config.chunking.models import ChunkingConfig
from app.config.chunking.static import resolve_chunking_config
from app.services.chunking.models import Chunk, SplitResult
from app.services.chunking.strategies import effective_chunk_size, get_strategy_fn


def build_split_result(original_text: str, pieces: list[str]) -> SplitResult:
    """Attach index, total and cumulative offsets to raw chunk strings."""
    if not pieces:
        pieces = [""]
    total = len(pieces)
    chunks: list[Chunk] = []
    offset = 0
    for i, piece in enumerate(pieces):
        end = offset + len(piece)
        chunks.append(
            Chunk(content=piece, index=i, total_chunks=total, start_offset=offset, end_offset=end)
        )
        offset = end
    return SplitResult(chunks=chunks, total_chunks=total, original_length=len(original_text))


def split_text(text: str, config: ChunkingConfig) -> SplitResult:
    """
    Split text with the config's strategy. Text that already fits in one chunk (including
    the empty string) is returned verbatim as a single chunk.
    Raises ValueError for an unknown strategy.
    """
    strategy_fn = get_strategy_fn(config.strategy)
    if strategy_fn is None:
        raise ValueError(f"Unknown chunking strategy: {config.strategy!r}")
    if len(text) <= effective_chunk_size(config):
        return build_split_result(text, [text])
    return build_split_result(text, strategy_fn(text, config))


def simple_split(text: str, chunk_size: int | None = None) -> SplitResult:
    """Fixed-size, non-overlapping slices."""
    return split_text(text, resolve_chunking_config("simple", {"chunk_size": chunk_size}))


def character_split(
    text: str,
    chunk_size: int | None = None,
    chunk_overlap: int | None = None,
    separators: list[str] | None = None,
    keep_separator: bool | None = None,
) -> SplitResult:
    config = resolve_chunking_config(
        "character",
        {
            "chunk_size": chunk_size,
            "chunk_overlap": chunk_overlap,
            "separators": separators,
            "keep_separator": keep_separator,
        },
    )
    return split_text(text, config)


def recursive_split(
    text: str,
    chunk_size: int | None = None,
    chunk_overlap: int | None = None,
    separators: list[str] | None = None,
) -> SplitResult:
    config = resolve_chunking_config(
        "recursive",
        {"chunk_size": chunk_size, "chunk_overlap": chunk_overlap, "separators": separators},
    )
    return split_text(text, config)


def token_split(
    text: str,
    chunk_size: int | None = None,
    chunk_overlap: int | None = None,
) -> SplitResult:
    """Sizes are approximate tokens (4 characters each)."""
    config = resolve_chunking_config("token", {"chunk_size": chunk_size, "chunk_overlap": chunk_overlap})
    return split_text(text, config)
