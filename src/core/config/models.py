from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr


DEFAULT_MODEL = "gemini-2.5-pro"
DEFAULT_PORT = 5000


class PromptMode(str, Enum):
    TEMPLATE = "template"  # substitute the query into the fixed planner prompt
    VERBATIM = "verbatim"  # caller sends the full prompt


class MalformedOutputPolicy(str, Enum):
    WRAP = "wrap"  # answer {"reply": <text>}
    FAIL = "fail"  # answer 500


class RelayConfig(BaseModel):
    """Deployment settings, read once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    model: str = DEFAULT_MODEL
    prompt_mode: PromptMode = PromptMode.VERBATIM
    on_malformed_output: MalformedOutputPolicy = MalformedOutputPolicy.WRAP
