"""
deckhand configuration.

Layered YAML configuration validated with Pydantic.
"""

from deckhand.config.loader import (
    ConfigurationError,
    clear_config_cache,
    get_config,
    load_config,
)
from deckhand.config.schema import (
    AgentConfigSchema,
    Config,
    LoggingConfig,
    ProviderConfig,
    ToolsConfig,
)

__all__ = [
    "AgentConfigSchema",
    "Config",
    "ConfigurationError",
    "LoggingConfig",
    "ProviderConfig",
    "ToolsConfig",
    "clear_config_cache",
    "get_config",
    "load_config",
]
