"""Single-separator splitting via LangChain's CharacterTextSplitter, with a hard-slice fallback."""

from langchain_text_splitters import CharacterTextSplitter

from app.config.chunking.models import ChunkingConfig


def _hard_slice(piece: str, size: int, overlap: int) -> list[str]:
    """Windows of `size` characters stepping by size - overlap; the last window reaches the end."""
    if len(piece) <= size:
        return [piece]
    step = size - overlap
    windows: list[str] = []
    start = 0
    while True:
        windows.append(piece[start : start + size])
        if start + size >= len(piece):
            break
        start += step
    return windows


def character_chunks(text: str, config: ChunkingConfig) -> list[str]:
    """
    Split on the first configured separator (paragraph break by default) and merge pieces
    up to chunk_size with chunk_overlap. Pieces the separator cannot bring under
    chunk_size are sliced by length.
    """
    kwargs = {}
    if config.keep_separator is not None:
        kwargs["keep_separator"] = config.keep_separator
    splitter = CharacterTextSplitter(
        separator=config.effective_separators()[0],
        chunk_size=config.chunk_size,
        chunk_overlap=config.chunk_overlap,
        length_function=len,
        **kwargs,
    )
    chunks: list[str] = []
    for piece in splitter.split_text(text):
        chunks.extend(_hard_slice(piece, config.chunk_size, config.chunk_overlap))
    return chunks
