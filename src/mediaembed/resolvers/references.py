"""
Reference resolution: turn a reference set into playable descriptors.

A reference set is one or more reference strings (URLs, filenames or bare
ids) separated by ", ". Each one is matched against the provider pattern
table in order:

- the first matching rule creates the descriptor;
- a rule without a join token stops the scan;
- a rule with a join token keeps scanning, and each later match appends
  ``join_token + prefix + capture`` to the id and overwrites the type.

Strings without a ``.xyz``-like token are bare ids; they only produce a
descriptor when raw-id fallback is requested.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from mediaembed.config.defaults import REFERENCE_SEPARATOR
from mediaembed.exceptions import NoMatchForReferenceError
from mediaembed.models.descriptor import PlayableDescriptor
from mediaembed.utils.logging import report_issue

if TYPE_CHECKING:
    from mediaembed.exceptions import EmbedIssue
    from mediaembed.models.profile import ProviderProfile

# A dot followed by letters: URL host or file extension
_NOT_ID_RE = re.compile(r"[.][a-z]+")


def split_references(reference_set: str) -> list[str]:
    """Split a reference set into individual reference strings."""
    return reference_set.split(REFERENCE_SEPARATOR)


def is_bare_id(reference: str) -> bool:
    """Whether a reference looks like a raw provider id rather than a URL/filename."""
    return _NOT_ID_RE.search(reference) is None


def join_tokens_for(
    profile: ProviderProfile, descriptor: PlayableDescriptor
) -> tuple[str, str, str]:
    """Per-reference join-token hook.

    Starts from the profile defaults every time, so nothing leaks from one
    reference to the next. A descriptor produced by a single rule whose
    category has a standalone join gets that token between base URL and id.
    """
    tokens = profile.join_tokens
    if len(descriptor.categories) == 1:
        lead = profile.standalone_joins.get(descriptor.categories[0])
        if lead is not None:
            tokens = (lead, tokens[1], tokens[2])
    return tokens


def match_reference(profile: ProviderProfile, reference: str) -> PlayableDescriptor | None:
    """Run the pattern table against one URL or filename.

    Args:
        profile: Provider whose rules are tried, in order.
        reference: A single reference string.

    Returns:
        The descriptor, or None if no rule matched.
    """
    normalized_id: str | None = None
    type_ = ""
    categories: list[str] = []
    join_token: str | None = None

    for rule in profile.rules:
        captured = rule.extract(reference)
        if captured is None:
            continue

        if normalized_id is None:
            normalized_id = captured
            type_ = rule.category
            categories.append(rule.category)
            if not rule.accumulates:
                break
            join_token = rule.join_token
        else:
            normalized_id += join_token + captured
            type_ = rule.category
            categories.append(rule.category)

    if normalized_id is None:
        return None

    return PlayableDescriptor(
        normalized_id=normalized_id,
        type=type_,
        categories=tuple(categories),
    )


def resolve_reference(
    profile: ProviderProfile,
    reference: str,
    fallback: bool = False,
    issues: list[EmbedIssue] | None = None,
) -> PlayableDescriptor | None:
    """Resolve one reference string.

    Args:
        profile: Provider profile.
        reference: URL, filename or bare id.
        fallback: Treat a bare id as the playable id itself.
        issues: Optional collector for reported issues.

    Returns:
        The descriptor with its join tokens, or None.
    """
    if is_bare_id(reference):
        descriptor = PlayableDescriptor(normalized_id=reference, type="id") if fallback else None
    else:
        descriptor = match_reference(profile, reference)

    if descriptor is None:
        report_issue(NoMatchForReferenceError(reference, profile.name), issues)
        return None

    return descriptor.model_copy(update={"join_tokens": join_tokens_for(profile, descriptor)})


def resolve_references(
    profile: ProviderProfile,
    reference_set: str,
    fallback: bool = False,
    issues: list[EmbedIssue] | None = None,
) -> dict[str, PlayableDescriptor]:
    """Resolve every reference string of a reference set.

    Args:
        profile: Provider profile.
        reference_set: One or more reference strings separated by ", ".
        fallback: Treat bare ids as playable ids.
        issues: Optional collector for reported issues.

    Returns:
        Descriptors keyed by original reference string, in resolution order.
        References that did not resolve are absent.
    """
    descriptors: dict[str, PlayableDescriptor] = {}
    for reference in split_references(reference_set):
        descriptor = resolve_reference(profile, reference, fallback, issues)
        if descriptor is not None:
            descriptors[reference] = descriptor
    return descriptors
