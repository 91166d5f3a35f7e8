"""Vector normalization (L2, L1, none)."""

import math
from typing import Literal

NormType = Literal["L2", "L1", "none"]


def vector_norm(vec: list[float], norm_type: NormType) -> float:
    if norm_type == "L1":
        return sum(abs(x) for x in vec)
    return math.sqrt(sum(x * x for x in vec))


def normalize_vector(vec: list[float], norm_type: NormType) -> list[float]:
    """Scale vec to unit norm. 'none' and zero vectors come back unchanged."""
    if norm_type == "none":
        return list(vec)
    norm = vector_norm(vec, norm_type)
    if norm == 0:
        return list(vec)
    return [x / norm for x in vec]
