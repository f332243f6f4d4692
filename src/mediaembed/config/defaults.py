"""
Default configuration values for mediaembed.

Note: Stored preferences are resolved via config/loader.py which supports
an environment variable (MEDIAEMBED_CONFIG), project config, and user config.
"""

# Name used to prefix plugin-wide preferences
PLUGIN_NAME = "mediaembed"

# Global responsive preference key ("true" / "false")
RESPONSIVE_PREF = f"{PLUGIN_NAME}_responsive"
DEFAULT_RESPONSIVE = "false"

# Base URL / id, first parameter, following parameters
DEFAULT_JOIN_TOKENS = ("/", "?", "&amp;")

# Separator between reference strings in a reference set
REFERENCE_SEPARATOR = ", "

# Default player size
DEFAULT_DIMS = {
    "width": "640",
    "height": "",
    "ratio": "16:9",
}

# Timeouts (seconds)
OEMBED_TIMEOUT = 30
