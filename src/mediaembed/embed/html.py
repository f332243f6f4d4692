"""
HTML helpers for player markup.
"""

from __future__ import annotations

from html import escape


def wrap_tag(content: str, tag: str, css_class: str | None = None, atts: str = "") -> str:
    """Wrap content in an HTML element.

    Args:
        content: Inner HTML.
        tag: Element name (e.g., "div", "figure").
        css_class: Optional class attribute value.
        atts: Extra raw attributes (e.g., 'style="..."').

    Returns:
        The wrapped HTML, e.g. '<div class="player">...</div>'.
    """
    opening = tag
    if css_class:
        opening += f' class="{escape(css_class, quote=True)}"'
    if atts:
        opening += f" {atts}"
    return f"<{opening}>{content}</{tag}>"


def script_tag(url: str) -> str:
    """External script element for a page."""
    return f'<script src="{escape(url, quote=True)}"></script>'
