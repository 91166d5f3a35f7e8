"""Id generation for vector records. Timestamp based, so reruns never collide with earlier records."""


def chunk_vector_id(timestamp_ms: int, chunk_index: int) -> str:
    """Record id for one chunk of a request, e.g. chunk_1718000000000_3."""
    return f"chunk_{timestamp_ms}_{chunk_index}"


def single_vector_id(timestamp_ms: int) -> str:
    """Record id for an unchunked text, e.g. single_1718000000000."""
    return f"single_{timestamp_ms}"


def chunk_response_id(chunk_index: int) -> str:
    """Id of a chunk within one response body."""
    return f"chunk_{chunk_index}"
