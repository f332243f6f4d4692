"""
mediaembed - Resolve media references and render embeddable players.

1. Resolve a URL, filename or raw id into a provider-specific playable id
2. Merge tag attributes and stored preferences into player parameters
3. Work out the player size, fixed or responsive
4. Compose the iframe markup (and queue provider scripts once per page)
"""

# Config
from mediaembed.config.loader import clear_config_cache, get_config, get_preferences
from mediaembed.config.providers import get_provider_count, list_supported_providers

# Embed composition
from mediaembed.embed import RenderPass, build_src, compose

# Exceptions
from mediaembed.exceptions import (
    EmbedIssue,
    InvalidParamValueError,
    InvalidRatioError,
    MediaEmbedError,
    MismatchedUnitsError,
    NoMatchForReferenceError,
    NothingToPlayError,
    OEmbedFetchError,
    UndefinedSizeError,
    UnknownProviderError,
)

# Models
from mediaembed.models import (
    Dimension,
    MatchRule,
    OEmbedSpec,
    ParamSpec,
    PlayableDescriptor,
    ProviderProfile,
    ResolutionMode,
    ResolvedLayout,
)
from mediaembed.oembed import OEmbedLookup
from mediaembed.player import Player, is_player, render_player, resolve_playable_id
from mediaembed.registry import (
    ProviderRegistry,
    get_registry,
    preference_defaults,
    tag_attributes,
)

# Resolvers
from mediaembed.resolvers import resolve_layout, resolve_params, resolve_references

__version__ = "1.0.0"

__all__ = [
    # Core functions
    "render_player",
    "is_player",
    "resolve_references",
    "resolve_params",
    "resolve_layout",
    "resolve_playable_id",
    "build_src",
    "compose",
    # Registry
    "ProviderRegistry",
    "get_registry",
    "preference_defaults",
    "tag_attributes",
    "list_supported_providers",
    "get_provider_count",
    # Runtime objects
    "Player",
    "RenderPass",
    "OEmbedLookup",
    # Models
    "Dimension",
    "MatchRule",
    "OEmbedSpec",
    "ParamSpec",
    "PlayableDescriptor",
    "ProviderProfile",
    "ResolutionMode",
    "ResolvedLayout",
    # Config
    "get_config",
    "get_preferences",
    "clear_config_cache",
    # Exceptions
    "MediaEmbedError",
    "EmbedIssue",
    "NoMatchForReferenceError",
    "InvalidRatioError",
    "UndefinedSizeError",
    "MismatchedUnitsError",
    "InvalidParamValueError",
    "NothingToPlayError",
    "UnknownProviderError",
    "OEmbedFetchError",
]
