"""
Configuration for mediaembed.

Contains built-in provider profiles, default settings and the stored
preference loader.
"""

from mediaembed.config.defaults import (
    DEFAULT_DIMS,
    DEFAULT_JOIN_TOKENS,
    OEMBED_TIMEOUT,
    PLUGIN_NAME,
    RESPONSIVE_PREF,
)
from mediaembed.config.loader import (
    ConfigSource,
    EmbedConfig,
    clear_config_cache,
    get_config,
    get_preferences,
)
from mediaembed.config.providers import (
    PROVIDERS,
    get_provider_count,
    list_supported_providers,
)

__all__ = [
    "DEFAULT_DIMS",
    "DEFAULT_JOIN_TOKENS",
    "OEMBED_TIMEOUT",
    "PLUGIN_NAME",
    "RESPONSIVE_PREF",
    "PROVIDERS",
    "get_provider_count",
    "list_supported_providers",
    # Config loader
    "ConfigSource",
    "EmbedConfig",
    "get_config",
    "get_preferences",
    "clear_config_cache",
]
