"""
Provider profile models.

A ProviderProfile is the immutable configuration bundle of one media
source: its pattern table, embed base URL, join tokens, parameter and
dimension schemas, optional external script and resolution mode.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mediaembed.config.defaults import DEFAULT_DIMS, DEFAULT_JOIN_TOKENS


class ResolutionMode(str, Enum):
    """How a playable descriptor becomes the id put in the player URL."""

    DIRECT = "direct"
    OEMBED = "oembed"


class MatchRule(BaseModel):
    """One entry of a provider pattern table."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="Descriptor type set when this rule matches")
    pattern: str = Field(..., description="Regular expression searched in the reference")
    capture: int = Field(1, ge=0, description="Index of the group holding the id")
    join_token: str | None = Field(
        None, description="If set, later rules may append their id with this token"
    )
    prefix: str = Field("", description="Prepended to the captured id")

    # Class-level compiled patterns for performance
    _compiled_patterns: ClassVar[dict[str, re.Pattern]] = {}

    @field_validator("pattern")
    @classmethod
    def check_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid pattern {v!r}: {e}") from e
        return v

    @property
    def accumulates(self) -> bool:
        return self.join_token is not None

    @property
    def regex(self) -> re.Pattern:
        if self.pattern not in self._compiled_patterns:
            self._compiled_patterns[self.pattern] = re.compile(self.pattern, re.IGNORECASE)
        return self._compiled_patterns[self.pattern]

    def extract(self, reference: str) -> str | None:
        """Return ``prefix + capture`` if the rule matches, else None."""
        match = self.regex.search(reference)
        if not match:
            return None
        return self.prefix + (match.group(self.capture) or "")


class ParamSpec(BaseModel):
    """A player query parameter.

    ``valid`` is either a list of accepted values (enforced) or a type tag
    such as "color" or "number" describing the preference input.
    """

    model_config = ConfigDict(frozen=True)

    default: str = ""
    force: bool = False
    valid: list[str] | str | None = None

    @property
    def valid_values(self) -> list[str] | None:
        return self.valid if isinstance(self.valid, list) else None


class OEmbedSpec(BaseModel):
    """Remote metadata lookup for OEMBED providers."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    url_base: str = ""
    id_field: str = "video_id"


class ProviderProfile(BaseModel):
    """Immutable configuration of one media provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    src: str
    rules: tuple[MatchRule, ...] = ()
    join_tokens: tuple[str, str, str] = DEFAULT_JOIN_TOKENS
    standalone_joins: dict[str, str] = Field(default_factory=dict)
    params: dict[str, ParamSpec] = Field(default_factory=dict)
    dims: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_DIMS))
    script: str | None = None
    mode: ResolutionMode = ResolutionMode.DIRECT
    oembed: OEmbedSpec | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("Provider name cannot be empty")
        return v

    @field_validator("dims", mode="before")
    @classmethod
    def check_dims(cls, v: dict) -> dict[str, str]:
        if not isinstance(v, dict):
            return v
        unknown = set(v) - {"width", "height", "ratio"}
        if unknown:
            raise ValueError(f"Unknown dimensions: {', '.join(sorted(unknown))}")
        if "width" not in v:
            raise ValueError("A width default is required")
        return {k: "" if val is None else str(val) for k, val in v.items()}

    @model_validator(mode="after")
    def check_mode(self) -> ProviderProfile:
        if self.mode is ResolutionMode.OEMBED and self.oembed is None:
            raise ValueError(f"{self.name}: oembed mode needs an oembed endpoint")
        return self

    @property
    def has_height(self) -> bool:
        """Whether the player has a height at all (audio players may not)."""
        return "height" in self.dims

    def pref_key(self, field: str) -> str:
        """Stored preference key for a dimension or parameter."""
        return f"{self.name}_{field}"

    @classmethod
    def from_dict(cls, data: dict) -> ProviderProfile:
        """Build a profile from a config.providers entry."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        return self.name
