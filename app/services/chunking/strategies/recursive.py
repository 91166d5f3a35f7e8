"""Separator-priority recursive splitting, delegated to LangChain's RecursiveCharacterTextSplitter."""

from langchain_text_splitters import RecursiveCharacterTextSplitter

from app.config.chunking.models import ChunkingConfig


def build_recursive_splitter(
    chunk_size: int,
    chunk_overlap: int,
    separators: list[str],
    keep_separator: bool | None = None,
) -> RecursiveCharacterTextSplitter:
    """Recursive splitter measuring length in characters."""
    kwargs = {}
    if keep_separator is not None:
        kwargs["keep_separator"] = keep_separator
    return RecursiveCharacterTextSplitter(
        separators=separators,
        chunk_size=chunk_size,
        chunk_overlap=chunk_overlap,
        length_function=len,
        **kwargs,
    )


def recursive_chunks(text: str, config: ChunkingConfig) -> list[str]:
    """
    Split on the highest-priority separator, re-split oversized pieces with the next one,
    then merge neighbours up to chunk_size carrying chunk_overlap characters forward.
    """
    splitter = build_recursive_splitter(
        config.chunk_size,
        config.chunk_overlap,
        config.effective_separators(),
        config.keep_separator,
    )
    return splitter.split_text(text)
