"""
Stored preference loader with priority resolution.

Root directory (MEDIAEMBED_ROOT):
- macOS/Linux: ~/.mediaembed
- Windows: %APPDATA%\\mediaembed
- Override: MEDIAEMBED_ROOT environment variable

Preferences are merged from (highest to lowest priority):
1. File named by the MEDIAEMBED_CONFIG environment variable
2. Project config (.mediaembed/config.yaml, searched upward from cwd)
3. User config ({root_dir}/config.yaml)
4. Built-in defaults (the provider schemas, applied by the resolvers)

YAML structure:
    preferences:
      mediaembed_responsive: true
      youtube_width: 560
      vimeo:
        color: "#ff0000"
        ratio: "4:3"

Nested provider sections are flattened to {provider}_{field} keys and all
values are stored as strings (booleans as "true"/"false").
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class EmbedConfig:
    """Resolved mediaembed configuration."""

    root_dir: Path
    source: ConfigSource
    preferences: dict[str, str] = field(default_factory=dict)

    def get_pref(self, key: str, default: str | None = None) -> str | None:
        return self.preferences.get(key, default)

    def __repr__(self) -> str:
        return (
            f"EmbedConfig(root_dir={self.root_dir!r}, "
            f"source={self.source.value!r}, preferences={len(self.preferences)})"
        )


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _pref_text(value: Any) -> str:
    """Store a YAML scalar the way a preference store would (as text)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _get_preferences_from_yaml(config: dict[str, Any] | None) -> dict[str, str]:
    """Extract and flatten the preferences section of a parsed config.

    Args:
        config: Parsed YAML config dict.

    Returns:
        Flat {key: text} mapping, empty if the section is missing.
    """
    if not config:
        return {}

    section = config.get("preferences")
    if section is None:
        return {}
    if not isinstance(section, dict):
        logger.warning("'preferences' must be a mapping, ignoring it")
        return {}

    prefs: dict[str, str] = {}
    for key, value in section.items():
        if isinstance(value, dict):
            for name, sub in value.items():
                prefs[f"{key}_{name}"] = _pref_text(sub)
        else:
            prefs[str(key)] = _pref_text(value)
    return prefs


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .mediaembed/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / ".mediaembed" / "config.yaml"
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the mediaembed root directory.

    Priority:
    1. MEDIAEMBED_ROOT environment variable
    2. Platform-specific default:
       - Windows: %APPDATA%\\mediaembed
       - macOS/Linux: ~/.mediaembed

    Returns:
        Path to the root directory (may not exist yet).
    """
    env_root = os.environ.get("MEDIAEMBED_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "mediaembed"
        return Path.home() / "AppData" / "Roaming" / "mediaembed"
    return Path.home() / ".mediaembed"


def _get_user_config_path() -> Path:
    """Get the user-level config path.

    Returns:
        Path to user config file at {root_dir}/config.yaml
    """
    return _get_root_dir() / "config.yaml"


def _resolve_config() -> EmbedConfig:
    """Resolve configuration from all sources.

    Lower priority sources are loaded first and overridden key by key.
    The reported source is the highest priority one that contributed.

    Returns:
        Resolved EmbedConfig with root_dir, source and preferences.
    """
    root_dir = _get_root_dir()
    preferences: dict[str, str] = {}
    source = ConfigSource.DEFAULT

    # 3. User config
    user_config_path = _get_user_config_path()
    user_prefs = _get_preferences_from_yaml(_load_yaml_config(user_config_path))
    if user_prefs:
        logger.debug(f"Loaded {len(user_prefs)} preference(s) from {user_config_path}")
        preferences.update(user_prefs)
        source = ConfigSource.USER

    # 2. Project config
    project_config_path = _find_project_config()
    if project_config_path:
        project_prefs = _get_preferences_from_yaml(_load_yaml_config(project_config_path))
        if project_prefs:
            logger.debug(
                f"Loaded {len(project_prefs)} preference(s) from {project_config_path}"
            )
            preferences.update(project_prefs)
            source = ConfigSource.PROJECT

    # 1. Environment variable
    env_config = os.environ.get("MEDIAEMBED_CONFIG")
    if env_config:
        env_path = Path(env_config).expanduser().resolve()
        env_loaded = _load_yaml_config(env_path)
        if env_loaded is None:
            logger.warning(f"MEDIAEMBED_CONFIG points to an unreadable file: {env_path}")
        else:
            logger.info(f"Using preferences from MEDIAEMBED_CONFIG: {env_path}")
            preferences.update(_get_preferences_from_yaml(env_loaded))
            source = ConfigSource.ENV

    return EmbedConfig(root_dir=root_dir, source=source, preferences=preferences)


@lru_cache(maxsize=1)
def get_config() -> EmbedConfig:
    """Get resolved mediaembed configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().

    Returns:
        EmbedConfig with preferences and source.
    """
    return _resolve_config()


def get_preferences() -> dict[str, str]:
    """Get the stored preferences of the resolved configuration."""
    return get_config().preferences


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if environment variables or config files have changed
    and you need to re-resolve the configuration.
    """
    get_config.cache_clear()
