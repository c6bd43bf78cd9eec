from src.core.config.loader import load_relay_config
from src.core.config.models import RelayConfig, PromptMode, MalformedOutputPolicy
from src.core.config.env import get_env_vars, load_default_env

__all__ = ["load_relay_config", "RelayConfig", "PromptMode", "MalformedOutputPolicy", "get_env_vars", "load_default_env"]
