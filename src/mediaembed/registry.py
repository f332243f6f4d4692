"""
mediaembed.registry - Provider profile registry.

Profiles are built once from mediaembed.config.providers and shared by
every render. A registry maps provider names to immutable profiles and can
detect which provider a reference belongs to.

Functions:
    get_registry: The process-wide registry of built-in providers.
    clear_registry_cache: Rebuild the registry on next access.
    preference_defaults: Every stored preference key with its default.
    tag_attributes: Attribute names a player tag accepts.

Example:
    >>> from mediaembed.registry import get_registry
    >>> registry = get_registry()
    >>> registry.detect("https://youtu.be/dQw4w9WgXcQ").name
    'youtube'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from typing import Any

from mediaembed.config.defaults import DEFAULT_RESPONSIVE, PLUGIN_NAME, RESPONSIVE_PREF
from mediaembed.config.providers import PROVIDERS
from mediaembed.exceptions import UnknownProviderError
from mediaembed.models.profile import ProviderProfile
from mediaembed.resolvers.params import attribute_name
from mediaembed.resolvers.references import is_bare_id, match_reference, split_references

logger = logging.getLogger(__name__)


# Aliases for convenience - maps alias -> canonical name
PROVIDER_ALIASES: dict[str, str] = {
    "yt": "youtube",
    "youtube-nocookie": "youtube",
    "dm": "dailymotion",
    "sc": "soundcloud",
}


def _resolve_name(name: str) -> str:
    """Resolve aliases to canonical names (case-insensitive)."""
    normalized = name.lower().strip()
    return PROVIDER_ALIASES.get(normalized, normalized)


class ProviderRegistry:
    """Name -> ProviderProfile mapping, in registration order."""

    def __init__(self, profiles: Iterable[ProviderProfile] = ()):
        self._profiles: dict[str, ProviderProfile] = {}
        for profile in profiles:
            self.register(profile)

    def register(self, profile: ProviderProfile) -> ProviderProfile:
        """Add a profile.

        Raises:
            ValueError: If a profile with the same name is registered.
        """
        if profile.name in self._profiles:
            raise ValueError(f"Provider '{profile.name}' is already registered")
        self._profiles[profile.name] = profile
        logger.debug(f"Registered provider: {profile.name} ({profile.mode.value})")
        return profile

    def get(self, name: str) -> ProviderProfile:
        """Get a profile by name or alias.

        Raises:
            UnknownProviderError: If no such provider is registered.
        """
        canonical = _resolve_name(name)
        try:
            return self._profiles[canonical]
        except KeyError:
            raise UnknownProviderError(name, self.names()) from None

    def names(self) -> list[str]:
        return list(self._profiles)

    def detect(self, reference_set: str) -> ProviderProfile | None:
        """Find the first provider whose pattern table matches a reference.

        Only the first reference string of the set is looked at. Bare ids
        cannot be attributed to a provider.
        """
        reference = split_references(reference_set)[0]
        if is_bare_id(reference):
            return None
        for profile in self._profiles.values():
            if match_reference(profile, reference) is not None:
                return profile
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _resolve_name(name) in self._profiles

    def __iter__(self) -> Iterator[ProviderProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)

    def __repr__(self) -> str:
        return f"ProviderRegistry({self.names()!r})"


def build_registry(entries: Iterable[dict] = PROVIDERS) -> ProviderRegistry:
    """Build a registry from provider config entries."""
    return ProviderRegistry(ProviderProfile.from_dict(entry) for entry in entries)


@lru_cache(maxsize=1)
def get_registry() -> ProviderRegistry:
    """Get the registry of built-in providers.

    Built once per process; use clear_registry_cache() to rebuild it.
    """
    return build_registry()


def clear_registry_cache() -> None:
    """Clear the cached registry."""
    get_registry.cache_clear()


def preference_defaults(registry: ProviderRegistry | None = None) -> dict[str, dict[str, Any]]:
    """Collect every stored preference key with its default.

    Keys are {provider}_{field} for dimensions and parameters, plus the
    plugin-wide responsive preference.

    Returns:
        {key: {"default": ..., "group": ..., "valid": ...}}
    """
    if registry is None:
        registry = get_registry()
    prefs: dict[str, dict[str, Any]] = {
        RESPONSIVE_PREF: {
            "default": DEFAULT_RESPONSIVE,
            "group": PLUGIN_NAME,
            "valid": ["true", "false"],
        }
    }

    for profile in registry:
        group = f"{PLUGIN_NAME}_{profile.name}"
        for dim, default in profile.dims.items():
            prefs[profile.pref_key(dim)] = {"default": default, "group": group, "valid": None}
        for param, spec in profile.params.items():
            prefs[profile.pref_key(param)] = {
                "default": spec.default,
                "group": group,
                "valid": spec.valid,
            }

    return prefs


def tag_attributes(profile: ProviderProfile) -> list[str]:
    """Attribute names accepted by a player tag for this provider."""
    names = list(profile.dims) + [attribute_name(p) for p in profile.params]
    return list(dict.fromkeys(names))
