"""
Resolvers turning references, overrides and preferences into embed pieces.
"""

from mediaembed.resolvers.layout import parse_ratio, raw_dimensions, resolve_layout
from mediaembed.resolvers.params import attribute_name, resolve_params
from mediaembed.resolvers.references import (
    is_bare_id,
    join_tokens_for,
    match_reference,
    resolve_reference,
    resolve_references,
    split_references,
)

__all__ = [
    "attribute_name",
    "is_bare_id",
    "join_tokens_for",
    "match_reference",
    "parse_ratio",
    "raw_dimensions",
    "resolve_layout",
    "resolve_params",
    "resolve_reference",
    "resolve_references",
    "split_references",
]
