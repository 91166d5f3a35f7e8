"""Static embedding config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from app.config.embedding.models import EmbeddingConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_raw: dict[str, Any] | None = None
_cached: dict[str, EmbeddingConfig] | None = None

_STRATEGY_TO_PROFILE: dict[str, str] = {
    "openai": "openai_default",
    "bedrock": "bedrock_default",
    "sentence_transformers": "sentence_default",
    "mock": "mock_default",
}


def _load_raw_data() -> dict[str, Any]:
    global _raw
    if _raw is None:
        _raw = json.loads(_config_path.read_text(encoding="utf-8"))
    return _raw


def load_embedding_profiles() -> dict[str, EmbeddingConfig]:
    """Load embedding profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    profiles = _load_raw_data().get("profiles", {})
    _cached = {k: EmbeddingConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'openai_default'."""
    return _load_raw_data().get("active", "openai_default")


def resolve_embedding_config(
    profile_name: str,
    inline_config: dict[str, Any] | None = None,
) -> EmbeddingConfig:
    """
    Resolve embedding config by profile name and optional inline overrides.
    'active' selects the profile marked active in static.json; bare strategy names
    (openai, bedrock, sentence_transformers, mock) map to their default profiles.
    Raises ValueError if the profile is unknown.
    """
    if profile_name == "active":
        name = get_active_profile_name()
    else:
        name = _STRATEGY_TO_PROFILE.get(profile_name, profile_name)
    base = load_embedding_profiles().get(name)
    if base is None:
        raise ValueError(f"Unknown embedding profile: {name!r}")
    if not inline_config:
        return base
    return EmbeddingConfig.model_validate({**base.model_dump(), **inline_config})
