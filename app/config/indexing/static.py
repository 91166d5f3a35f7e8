"""Static indexing config loader. Read-only; no business logic."""

import json
from pathlib import Path

from app.config.indexing.models import IndexingConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, IndexingConfig] | None = None

STRATEGY_TO_PROFILE = {
    "cosine_knn": "cosine_default",
    "l2_knn": "l2_default",
    "dot_product_knn": "dot_product_default",
}


def load_indexing_profiles() -> dict[str, IndexingConfig]:
    """Load indexing profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = json.loads(_config_path.read_text(encoding="utf-8"))
    _cached = {k: IndexingConfig.model_validate(v) for k, v in data.get("profiles", {}).items()}
    return _cached


def resolve_indexing_config(profile_or_strategy: str) -> IndexingConfig:
    """Resolve an indexing profile (cosine_default) or strategy alias (cosine_knn). Raises ValueError if unknown."""
    name = profile_or_strategy.strip()
    config = load_indexing_profiles().get(STRATEGY_TO_PROFILE.get(name, name))
    if config is None:
        raise ValueError(f"Unknown indexing profile or strategy: {profile_or_strategy!r}")
    return config
