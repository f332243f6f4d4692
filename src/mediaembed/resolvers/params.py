"""
Player parameter resolution.

Merges tag attribute overrides and stored preferences into the ordered
list of ``name=value`` query parameters of the player URL.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mediaembed.exceptions import InvalidParamValueError
from mediaembed.utils.logging import report_issue

if TYPE_CHECKING:
    from mediaembed.exceptions import EmbedIssue
    from mediaembed.models.profile import ProviderProfile


def attribute_name(param: str) -> str:
    """Tag attribute name of a parameter ("ui-logo" -> "ui_logo")."""
    return param.replace("-", "_")


def override_text(value: Any) -> str:
    """Normalize an attribute override; "" means not set."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _clean(value: str) -> str:
    # Colors are stored with a leading "#" for the preference input
    return value.replace("#", "")


def resolve_params(
    profile: ProviderProfile,
    overrides: Mapping[str, Any] | None = None,
    stored: Mapping[str, str] | None = None,
    issues: list[EmbedIssue] | None = None,
) -> list[str]:
    """Compute the player query parameters.

    For each parameter, in schema order:
    - without an override, the stored preference is emitted if it differs
      from the schema default or the parameter is forced;
    - with an override, it is emitted unless the schema restricts values
      and the override is not one of them (reported, then omitted).

    Args:
        profile: Provider profile holding the parameter schema.
        overrides: Tag attribute values, keyed by attribute name.
        stored: Stored preferences keyed by {provider}_{param}.
        issues: Optional collector for reported issues.

    Returns:
        List of "name=value" strings.
    """
    overrides = overrides or {}
    stored = stored or {}
    params: list[str] = []

    for param, spec in profile.params.items():
        pref = stored.get(profile.pref_key(param), spec.default)
        value = override_text(overrides.get(attribute_name(param)))

        if value == "":
            if pref != spec.default or spec.force:
                params.append(f"{param}={_clean(pref)}")
            continue

        valid = spec.valid_values
        if valid is not None and value not in valid:
            report_issue(InvalidParamValueError(attribute_name(param), value, valid), issues)
            continue

        params.append(f"{param}={_clean(value)}")

    return params
