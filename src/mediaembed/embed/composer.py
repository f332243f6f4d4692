"""
Embed composition: player source URL and iframe markup.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from mediaembed.embed.html import script_tag, wrap_tag

if TYPE_CHECKING:
    from mediaembed.embed.render_pass import RenderPass
    from mediaembed.models.layout import ResolvedLayout

logger = logging.getLogger(__name__)

# Unitless sizes become width/height attributes, others go to the style
_PLAIN_SIZE_RE = re.compile(r"\d+(?:\.\d+)?")

RESPONSIVE_PLAYER_STYLE = "position: absolute; top: 0; left: 0; width: 100%; height: 100%"


def build_src(
    base: str,
    playable_id: str,
    params: list[str],
    join_tokens: tuple[str, str, str],
) -> str:
    """Stick the player base URL, the playable id and the parameters.

    Args:
        base: Provider embed base URL.
        playable_id: Normalized id (may already hold a query string).
        params: "name=value" strings, in order.
        join_tokens: (base/id, first parameter, next parameters) separators.

    Returns:
        Player source URL.
    """
    src = f"{base}{join_tokens[0]}{playable_id}"
    if params:
        # Avoid a second "?" when the id already opened the query string
        joint = join_tokens[2] if join_tokens[1] in src else join_tokens[1]
        src += joint + join_tokens[2].join(params)
    return src


def _is_plain(size: str) -> bool:
    return _PLAIN_SIZE_RE.fullmatch(size) is not None


def compose(
    src: str,
    layout: ResolvedLayout,
    *,
    script: str | None = None,
    render_pass: RenderPass | None = None,
    wraptag: str | None = None,
    css_class: str | None = None,
) -> str:
    """Build the player markup.

    Responsive layouts with a percentage padding are rendered with the
    intrinsic-ratio technique: a relatively positioned wrapper whose bottom
    padding holds the ratio, and an absolutely positioned 100% x 100%
    iframe. Other layouts get width/height attributes, or inline styles
    for sizes with units.

    Args:
        src: Player source URL.
        layout: Resolved player size.
        script: External script the player needs on the page.
        render_pass: Collects the script once per page render. Without one,
            the script tag directly follows the player markup.
        wraptag: Optional wrapping element; "div" in responsive mode.
        css_class: Class of the wrapping element.

    Returns:
        HTML fragment.
    """
    inline_script = ""
    if script:
        if render_pass is not None:
            render_pass.queue_script(script)
        else:
            logger.debug(f"No render pass, inlining script {script}")
            inline_script = script_tag(script)

    width, height = layout.width, layout.height
    style = ["border: none"]
    wrapstyle = ""

    if layout.responsive and layout.percentage_padding:
        style.append(RESPONSIVE_PLAYER_STYLE)
        wrapstyle = (
            f'style="position: relative; padding-bottom:{layout.percentage_padding}; '
            'height: 0; overflow: hidden"'
        )
        width = height = None
        wraptag = wraptag or "div"
    else:
        if width and not _is_plain(width):
            style.append(f"width:{width}")
            width = None
        if height and not _is_plain(height):
            style.append(f"height:{height}")
            height = None

    player = '<iframe src="{}"{}{} style="{}" allowfullscreen></iframe>'.format(
        src.replace('"', "&quot;"),
        f' width="{width}"' if width else "",
        f' height="{height}"' if height else "",
        "; ".join(style),
    )

    if wraptag:
        player = wrap_tag(player, wraptag, css_class, wrapstyle)
    return player + inline_script
