"""
Player: one provider instance configured for one render.

A Player holds the reference set ("play" value) and tag attribute
overrides, resolves descriptors lazily, and renders the embed:

    >>> from mediaembed import Player, get_registry
    >>> player = Player(get_registry().get("youtube"), preferences={})
    >>> player.set_play("https://youtu.be/dQw4w9WgXcQ").set_config({"width": "480"})
    >>> html = player.render()

Providers in oEmbed mode get their playable id from a remote lookup; the
others use the resolved descriptor id directly.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mediaembed.config.defaults import RESPONSIVE_PREF
from mediaembed.config.loader import get_preferences
from mediaembed.embed.composer import build_src, compose
from mediaembed.exceptions import NothingToPlayError
from mediaembed.models.profile import ResolutionMode
from mediaembed.oembed import OEmbedLookup
from mediaembed.registry import get_registry
from mediaembed.resolvers.layout import resolve_layout
from mediaembed.resolvers.params import resolve_params
from mediaembed.resolvers.references import resolve_references, split_references

if TYPE_CHECKING:
    from mediaembed.embed.render_pass import RenderPass
    from mediaembed.exceptions import EmbedIssue
    from mediaembed.models.descriptor import PlayableDescriptor
    from mediaembed.models.layout import ResolvedLayout
    from mediaembed.models.profile import ProviderProfile
    from mediaembed.oembed import Fetcher
    from mediaembed.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def resolve_playable_id(
    profile: ProviderProfile,
    descriptor: PlayableDescriptor,
    lookup: OEmbedLookup | None = None,
) -> str | None:
    """Turn a descriptor into the id put in the player URL.

    Direct providers use the descriptor id. oEmbed providers read the
    profile's id field from the remote document; None when it is missing.
    """
    if profile.mode is ResolutionMode.DIRECT:
        return descriptor.normalized_id

    if lookup is None:
        lookup = OEmbedLookup(profile.oembed, descriptor.normalized_id)
    value = lookup.get(profile.oembed.id_field)
    if value is None or value == "":
        logger.warning(
            f"{profile.name}: oEmbed field '{profile.oembed.id_field}' missing "
            f"for {lookup.media_url}"
        )
        return None
    return str(value)


class Player:
    """A provider instance for one render.

    Args:
        profile: Provider profile.
        preferences: Stored preferences; defaults to the loaded config.
        render_pass: Collects once-per-page scripts.
        fetcher: oEmbed fetcher (for oEmbed providers), see OEmbedLookup.
    """

    def __init__(
        self,
        profile: ProviderProfile,
        preferences: Mapping[str, str] | None = None,
        render_pass: RenderPass | None = None,
        fetcher: Fetcher | None = None,
    ):
        self.profile = profile
        self.preferences = get_preferences() if preferences is None else preferences
        self.render_pass = render_pass
        self.fetcher = fetcher
        self.play = ""
        self.config: dict[str, Any] = {}
        self.issues: list[EmbedIssue] = []
        self._fallback = False
        self._descriptors: dict[str, PlayableDescriptor] | None = None
        self._lookup: OEmbedLookup | None = None

    def set_play(self, value: str, fallback: bool = False) -> Player:
        """Set the reference set to play."""
        self.play = value
        self._fallback = fallback
        self._descriptors = None
        self._lookup = None
        self.issues = []
        return self

    def set_config(self, value: Mapping[str, Any]) -> Player:
        """Set the tag attribute overrides."""
        self.config = dict(value)
        return self

    @property
    def references(self) -> list[str]:
        return split_references(self.play)

    def get_descriptors(self, fallback: bool | None = None) -> dict[str, PlayableDescriptor]:
        """Resolved descriptors, keyed by reference string.

        Resolution runs again when the first reference is not resolved yet
        and raw-id fallback is now requested.
        """
        fallback = self._fallback if fallback is None else fallback
        if self._descriptors is None or (
            fallback and self.references[0] not in self._descriptors
        ):
            self._descriptors = resolve_references(
                self.profile, self.play, fallback, self.issues
            )
        return self._descriptors

    @property
    def descriptors(self) -> dict[str, PlayableDescriptor]:
        return self.get_descriptors()

    def is_valid(self) -> bool:
        """Whether the play value matches this provider's patterns."""
        return bool(self.get_descriptors())

    @property
    def responsive(self) -> bool:
        att = self.config.get("responsive")
        if isinstance(att, bool):
            return att
        if att:
            return att == "true"
        return self.preferences.get(RESPONSIVE_PREF) == "true"

    def _first_descriptor(self) -> PlayableDescriptor | None:
        reference = self.references[0]
        if not reference:
            return None
        return self.get_descriptors(fallback=True).get(reference)

    @property
    def lookup(self) -> OEmbedLookup | None:
        """oEmbed lookup of the first reference (oEmbed providers only)."""
        if self.profile.oembed is None:
            return None
        if self._lookup is None:
            descriptor = self._first_descriptor()
            if descriptor is None:
                return None
            self._lookup = OEmbedLookup(
                self.profile.oembed, descriptor.normalized_id, fetcher=self.fetcher
            )
        return self._lookup

    def get_remote_field(self, name: str, default: Any = None) -> Any:
        """Read a field of the oEmbed document of the first reference.

        Raises:
            ValueError: If the provider has no oEmbed endpoint.
        """
        if self.profile.oembed is None:
            raise ValueError(f"Provider '{self.profile.name}' has no oEmbed endpoint")
        lookup = self.lookup
        if lookup is None:
            return default
        return lookup.get(name, default)

    def get_src(self) -> str:
        """Build the player source URL.

        Raises:
            NothingToPlayError: If the first reference has no playable id.
        """
        reference = self.references[0]
        descriptor = self._first_descriptor()
        if descriptor is None:
            raise NothingToPlayError(reference, self.profile.name)

        playable_id = resolve_playable_id(self.profile, descriptor, self.lookup)
        if not playable_id:
            raise NothingToPlayError(reference, self.profile.name)

        params = resolve_params(self.profile, self.config, self.preferences, self.issues)
        return build_src(self.profile.src, playable_id, params, descriptor.join_tokens)

    def get_layout(self) -> ResolvedLayout:
        return resolve_layout(
            self.profile, self.config, self.preferences, self.responsive, self.issues
        )

    def render(self, wraptag: str | None = None, css_class: str | None = None) -> str:
        """Render the player markup.

        Each call resolves again, so ``issues`` only lists this render's.

        Raises:
            NothingToPlayError: If the first reference has no playable id.
        """
        self.issues = []
        self._descriptors = None
        src = self.get_src()
        layout = self.get_layout()
        return compose(
            src,
            layout,
            script=self.profile.script,
            render_pass=self.render_pass,
            wraptag=wraptag,
            css_class=css_class,
        )

    def __repr__(self) -> str:
        return f"Player(provider={self.profile.name!r}, play={self.play!r})"


def _find_profile(
    reference: str, provider: str | None, registry: ProviderRegistry | None
) -> ProviderProfile | None:
    if registry is None:
        registry = get_registry()
    if provider:
        return registry.get(provider)
    return registry.detect(reference)


def is_player(
    reference: str,
    provider: str | None = None,
    registry: ProviderRegistry | None = None,
) -> bool:
    """Whether a reference set can be played by a (given or detected) provider."""
    profile = _find_profile(reference, provider, registry)
    if profile is None:
        return False
    return Player(profile, preferences={}).set_play(reference).is_valid()


def render_player(
    reference: str,
    provider: str | None = None,
    *,
    config: Mapping[str, Any] | None = None,
    fallback: bool = False,
    registry: ProviderRegistry | None = None,
    preferences: Mapping[str, str] | None = None,
    render_pass: RenderPass | None = None,
    fetcher: Fetcher | None = None,
    wraptag: str | None = None,
    css_class: str | None = None,
) -> str:
    """Render a player for a reference set.

    The provider is looked up by name, or detected from the first reference.

    Raises:
        UnknownProviderError: If the named provider is not registered.
        NothingToPlayError: If no provider or playable id is found.
    """
    profile = _find_profile(reference, provider, registry)
    if profile is None:
        raise NothingToPlayError(split_references(reference)[0])

    player = Player(profile, preferences=preferences, render_pass=render_pass, fetcher=fetcher)
    player.set_play(reference, fallback).set_config(config or {})
    return player.render(wraptag, css_class)
