"""
Data models for mediaembed.
"""

from mediaembed.models.descriptor import PlayableDescriptor
from mediaembed.models.layout import Dimension, ResolvedLayout
from mediaembed.models.profile import (
    MatchRule,
    OEmbedSpec,
    ParamSpec,
    ProviderProfile,
    ResolutionMode,
)

__all__ = [
    "Dimension",
    "MatchRule",
    "OEmbedSpec",
    "ParamSpec",
    "PlayableDescriptor",
    "ProviderProfile",
    "ResolutionMode",
    "ResolvedLayout",
]
