"""Static chunking config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from app.config.chunking.models import ChunkingConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_raw: dict[str, Any] | None = None
_cached: dict[str, ChunkingConfig] | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON once; holds both profiles and the active profile name."""
    global _raw
    if _raw is None:
        _raw = json.loads(_config_path.read_text(encoding="utf-8"))
    return _raw


def load_chunking_profiles() -> dict[str, ChunkingConfig]:
    """Load chunking profiles from static.json. Keys are strategy names."""
    global _cached
    if _cached is not None:
        return _cached
    profiles = _load_raw_data().get("profiles", {})
    _cached = {k: ChunkingConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_chunking_config(profile_name: str) -> ChunkingConfig | None:
    """Return chunking config for the given profile, or None if missing."""
    return load_chunking_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'recursive'."""
    return _load_raw_data().get("active", "recursive")


def resolve_chunking_config(
    strategy: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> ChunkingConfig:
    """
    Resolve the chunking config for a strategy, falling back to the active profile when
    strategy is None. Non-None values in overrides replace the profile defaults.
    Raises ValueError for an unknown strategy or an invalid merged config.
    """
    name = strategy or get_active_profile_name()
    base = get_chunking_config(name)
    if base is None:
        raise ValueError(f"Unknown chunking strategy: {name!r}")
    values = {k: v for k, v in (overrides or {}).items() if v is not None}
    if not values:
        return base
    return ChunkingConfig.model_validate({**base.model_dump(), **values})
