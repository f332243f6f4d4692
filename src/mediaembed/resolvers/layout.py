"""
Player layout resolution.

Reconciles width, height and aspect ratio from tag attribute overrides,
stored preferences and schema defaults, in fixed or responsive mode.

Fixed mode keeps pixel (or unit) sizes and derives a missing width or
height from the ratio. Responsive mode makes the player 100% wide and
expresses its height as a percentage of the width, used as the bottom
padding of an intrinsic-ratio wrapper.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mediaembed.exceptions import (
    InvalidRatioError,
    MismatchedUnitsError,
    UndefinedSizeError,
)
from mediaembed.models.layout import Dimension, ResolvedLayout
from mediaembed.utils.formatting import format_number, format_percentage
from mediaembed.utils.logging import report_issue

if TYPE_CHECKING:
    from mediaembed.exceptions import EmbedIssue
    from mediaembed.models.profile import ProviderProfile

_WHITESPACE_RE = re.compile(r"\s+")
_RATIO_RE = re.compile(r"(\d+):(\d+)")

FULL_WIDTH = "100%"


def _is_forced_zero(value: Any) -> bool:
    return isinstance(value, bool) or value == "false"


def raw_dimensions(
    profile: ProviderProfile,
    overrides: Mapping[str, Any] | None = None,
    stored: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Pick the raw width/height/ratio values, whitespace removed.

    Priority: attribute override, stored preference, schema default.
    A boolean or "false" override forces the dimension to 0.
    """
    overrides = overrides or {}
    stored = stored or {}
    raw: dict[str, str] = {}

    for dim, default in profile.dims.items():
        att = overrides.get(dim)
        if _is_forced_zero(att):
            value = "0"
        elif att:
            value = str(att)
        else:
            value = stored.get(profile.pref_key(dim), default) or ""
        raw[dim] = _WHITESPACE_RE.sub("", value)

    return raw


def parse_ratio(
    ratio: str, issues: list[EmbedIssue] | None = None
) -> tuple[int, int] | None:
    """Parse "W:H" into integers.

    Returns:
        (W, H), or None when no ratio is set ("" or "0") or when it is
        invalid, in which case an InvalidRatioError is reported.
    """
    if ratio in ("", "0"):
        return None

    match = _RATIO_RE.search(ratio)
    if match:
        w, h = int(match.group(1)), int(match.group(2))
        if w and h:
            return w, h

    report_issue(InvalidRatioError(ratio), issues)
    return None


def _width_text(width: Dimension) -> str | None:
    if not width:
        return None
    # Pixels are implied
    if width.unit and width.unit != "px":
        return f"{width.magnitude}{width.unit}"
    return str(width.magnitude)


def _height_text(height: Dimension | None, responsive: bool) -> str | None:
    if height is None or not height:
        return None
    unit = height.unit or ("px" if responsive else "")
    if unit and (responsive or unit != "px"):
        return f"{height.magnitude}{unit}"
    return str(height.magnitude)


def _resolve_responsive(
    width: Dimension,
    height: Dimension | None,
    ratio: tuple[int, int] | None,
    raw: dict[str, str],
    issues: list[EmbedIssue],
) -> ResolvedLayout:
    if ratio:
        rw, rh = ratio
        padding = format_percentage(rh / rw * 100)
        return ResolvedLayout(FULL_WIDTH, padding, padding, responsive=True)

    if width and height:
        if width.unit == height.unit:
            padding = format_percentage(height.magnitude / width.magnitude * 100)
            return ResolvedLayout(FULL_WIDTH, padding, padding, responsive=True)
        if str(width) == FULL_WIDTH and not height.unit:
            # Fluid width with a fixed pixel height (e.g. audio waveforms)
            padding = f"{height.magnitude}px"
            return ResolvedLayout(FULL_WIDTH, padding, padding, responsive=True)
        # No ratio can be derived from mixed units; sizes are kept as given
        report_issue(MismatchedUnitsError(str(width), str(height)), issues)
        return ResolvedLayout(
            _width_text(width), _height_text(height, True), responsive=True
        )

    if width:
        return ResolvedLayout(FULL_WIDTH, responsive=True)

    report_issue(
        UndefinedSizeError(
            width=raw.get("width", ""), height=raw.get("height"), ratio=raw.get("ratio", "")
        ),
        issues,
    )
    return ResolvedLayout(None, _height_text(height, True), responsive=True)


def _resolve_fixed(
    width: Dimension,
    height: Dimension | None,
    ratio: tuple[int, int] | None,
    raw: dict[str, str],
    issues: list[EmbedIssue],
) -> ResolvedLayout:
    width_text = _width_text(width)
    height_text = _height_text(height, False)

    if width and height:
        return ResolvedLayout(width_text, height_text)

    if width and height is None:
        # Player without height (e.g. audio)
        return ResolvedLayout(width_text)

    if (width or height) and ratio:
        rw, rh = ratio
        if width:
            height_text = format_number(width.magnitude * rh / rw) + width.unit
        else:
            width_text = format_number(height.magnitude * rw / rh) + height.unit
        return ResolvedLayout(width_text, height_text)

    report_issue(
        UndefinedSizeError(
            width=raw.get("width", ""), height=raw.get("height"), ratio=raw.get("ratio", "")
        ),
        issues,
    )
    return ResolvedLayout(width_text, height_text)


def resolve_layout(
    profile: ProviderProfile,
    overrides: Mapping[str, Any] | None = None,
    stored: Mapping[str, str] | None = None,
    responsive: bool = False,
    issues: list[EmbedIssue] | None = None,
) -> ResolvedLayout:
    """Compute the player size.

    Args:
        profile: Provider profile holding the dimension defaults.
        overrides: Tag attribute values ("width", "height", "ratio").
        stored: Stored preferences keyed by {provider}_{dim}.
        responsive: Whether to lay out an intrinsic-ratio responsive player.
        issues: Optional collector for reported issues.

    Returns:
        ResolvedLayout. Invalid ratios, undefined sizes and mismatched
        units are reported and listed in ``issues``; best-effort values are
        still returned.
    """
    raw = raw_dimensions(profile, overrides, stored)
    layout_issues: list[EmbedIssue] = []

    width = Dimension.parse(raw["width"])
    height = Dimension.parse(raw["height"]) if "height" in raw else None
    ratio = parse_ratio(raw.get("ratio", ""), layout_issues)

    if responsive:
        layout = _resolve_responsive(width, height, ratio, raw, layout_issues)
    else:
        layout = _resolve_fixed(width, height, ratio, raw, layout_issues)

    layout.issues = layout_issues
    if issues is not None:
        issues.extend(layout_issues)
    return layout
