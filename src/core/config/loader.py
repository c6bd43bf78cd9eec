from __future__ import annotations

from collections.abc import Mapping

from pydantic import ValidationError

from src.core.config.models import DEFAULT_MODEL, DEFAULT_PORT, RelayConfig
from src.core.exceptions import ConfigError

API_KEY_VARS = ("GEMINI_KEY", "GOOGLE_API_KEY")


def _api_key(env: Mapping[str, str]) -> str:
    for name in API_KEY_VARS:
        value = (env.get(name) or "").strip()
        if value:
            return value
    raise ConfigError(f"API key not set (expected one of: {', '.join(API_KEY_VARS)})")


def _port(env: Mapping[str, str]) -> int:
    raw = (env.get("PORT") or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"Invalid PORT: {raw!r}") from e


def load_relay_config(env: Mapping[str, str]) -> RelayConfig:
    """Build the immutable relay config from environment variables."""
    data = {
        "api_key": _api_key(env),
        "port": _port(env),
        "model": (env.get("GEMINI_MODEL") or "").strip() or DEFAULT_MODEL,
    }
    prompt_mode = (env.get("PROMPT_MODE") or "").strip().lower()
    if prompt_mode:
        data["prompt_mode"] = prompt_mode
    policy = (env.get("ON_MALFORMED_OUTPUT") or "").strip().lower()
    if policy:
        data["on_malformed_output"] = policy
    try:
        return RelayConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid relay config: {e}") from e
