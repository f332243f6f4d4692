"""
Once-per-page script injections.

Some players need an external script on the page (e.g. a JS player API).
Composing several embeds of the same provider must add it only once, at
the end of the document. A RenderPass collects those scripts while embeds
are rendered; the page renderer drains them once and places the tags
before ``</body>``.

Create one RenderPass per page render, or call reset() between pages.
"""

from __future__ import annotations

import logging

from mediaembed.embed.html import script_tag

logger = logging.getLogger(__name__)

BODY_CLOSE = "</body>"


class RenderPass:
    """Pending script injections for one page render."""

    def __init__(self) -> None:
        self._pending: list[str] = []
        self._seen: set[str] = set()

    def queue_script(self, url: str) -> bool:
        """Queue a script URL unless already queued during this pass.

        Returns:
            True if the script was queued now.
        """
        if url in self._seen:
            return False
        self._seen.add(url)
        self._pending.append(url)
        logger.debug(f"Queued script {url}")
        return True

    def is_queued(self, url: str) -> bool:
        return url in self._seen

    @property
    def pending(self) -> list[str]:
        return list(self._pending)

    def drain(self) -> list[str]:
        """Return the pending script tags and clear them.

        Scripts stay marked as seen, so they are not queued again before
        reset().
        """
        tags = [script_tag(url) for url in self._pending]
        self._pending.clear()
        return tags

    def inject(self, document: str) -> str:
        """Place the pending script tags before the closing body tag.

        If the document has no closing body tag, the tags are appended.
        """
        tags = self.drain()
        if not tags:
            return document
        block = "\n".join(tags) + "\n"
        index = document.rfind(BODY_CLOSE)
        if index == -1:
            return document + "\n" + block
        return document[:index] + block + document[index:]

    def reset(self) -> None:
        """Start a new page render."""
        self._pending.clear()
        self._seen.clear()

    def __repr__(self) -> str:
        return f"RenderPass(pending={self._pending!r})"
