"""
Player markup composition.
"""

from mediaembed.embed.composer import build_src, compose
from mediaembed.embed.html import script_tag, wrap_tag
from mediaembed.embed.render_pass import RenderPass

__all__ = [
    "RenderPass",
    "build_src",
    "compose",
    "script_tag",
    "wrap_tag",
]
