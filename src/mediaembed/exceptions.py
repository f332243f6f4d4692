"""
Custom exceptions for mediaembed.

All mediaembed exceptions inherit from MediaEmbedError for easy catching.

Resolution problems (bad ratio, undefined size, invalid parameter value,
unmatched reference) are EmbedIssue instances: they are reported through
``mediaembed.utils.logging.report_issue`` and never raised by the resolvers.
Only NothingToPlayError stops a render.
"""

from __future__ import annotations

from typing import Any


class MediaEmbedError(Exception):
    """Base exception for all mediaembed errors."""

    pass


class EmbedIssue(MediaEmbedError):
    """A non-fatal resolution problem.

    Attributes:
        message: Human-readable message
        category: Issue classification (e.g., "invalid_ratio")
        details: Additional diagnostic information
    """

    category = "unknown"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the issue to a structured dict for logs and CLI output."""
        result: dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
            "category": self.category,
        }
        if self.details:
            result["details"] = self.details
        return result


class NoMatchForReferenceError(EmbedIssue):
    """A reference string matched no pattern and no raw-id fallback was asked."""

    category = "no_match"

    def __init__(self, reference: str, provider: str):
        super().__init__(
            f"No {provider} pattern matches {reference!r}",
            details={"reference": reference, "provider": provider},
        )
        self.reference = reference
        self.provider = provider


class InvalidRatioError(EmbedIssue):
    """Aspect ratio is malformed or has a zero component."""

    category = "invalid_ratio"

    def __init__(self, ratio: str):
        super().__init__(
            f"Invalid player ratio {ratio!r}, expected W:H with nonzero values",
            details={"ratio": ratio},
        )
        self.ratio = ratio


class UndefinedSizeError(EmbedIssue):
    """No usable width/height/ratio combination."""

    category = "undefined_size"

    def __init__(self, *, width: str = "", height: str | None = None, ratio: str = ""):
        super().__init__(
            "Undefined player size, set a width and a height or a ratio",
            details={"width": width, "height": height, "ratio": ratio},
        )


class MismatchedUnitsError(EmbedIssue):
    """Responsive layout cannot derive a percentage from mixed units."""

    category = "mismatched_units"

    def __init__(self, width: str, height: str):
        super().__init__(
            f"Cannot make {width} x {height} responsive, units differ",
            details={"width": width, "height": height},
        )


class InvalidParamValueError(EmbedIssue):
    """An attribute value is not in the parameter's valid set."""

    category = "invalid_param_value"

    def __init__(self, param: str, value: str, valid: list[str]):
        quoted = '", "'.join(valid)
        super().__init__(
            f'Unknown attribute value for "{param}". Valid values are: "{quoted}".',
            details={"param": param, "value": value, "valid": list(valid)},
        )
        self.param = param
        self.value = value
        self.valid = list(valid)


class NothingToPlayError(MediaEmbedError):
    """The first reference string has no playable id; no markup is emitted."""

    def __init__(self, reference: str = "", provider: str = ""):
        message = "Nothing to play"
        if reference:
            message = f"Nothing to play for {reference!r}"
        if provider:
            message += f" ({provider})"
        super().__init__(message)
        self.reference = reference
        self.provider = provider


class UnknownProviderError(MediaEmbedError, ValueError):
    """Provider name is not registered."""

    def __init__(self, name: str, available: list[str] | None = None):
        available = available or []
        message = f"Unknown provider: {name!r}"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message)
        self.name = name
        self.available = available


class OEmbedFetchError(MediaEmbedError):
    """Remote oEmbed document could not be fetched or decoded."""

    def __init__(self, message: str, *, url: str = ""):
        super().__init__(message)
        self.message = message
        self.url = url
