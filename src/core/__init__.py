from src.core.config.loader import load_relay_config
from src.core.config.models import RelayConfig, PromptMode, MalformedOutputPolicy
from src.core.exceptions import ConfigError, QueryRequired, UpstreamError, MalformedCompletion

__all__ = [
    "load_relay_config",
    "RelayConfig",
    "PromptMode",
    "MalformedOutputPolicy",
    "ConfigError",
    "QueryRequired",
    "UpstreamError",
    "MalformedCompletion",
]
