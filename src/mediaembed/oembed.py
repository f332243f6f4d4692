"""
oEmbed lookups for providers whose playable id comes from remote metadata.

The JSON document is fetched on first access, then kept on the lookup
instance for its lifetime. A failed fetch is logged and behaves like a
document without fields: callers see missing fields, never an exception.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from collections.abc import Callable
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from mediaembed.config.defaults import OEMBED_TIMEOUT
from mediaembed.exceptions import OEmbedFetchError

if TYPE_CHECKING:
    from mediaembed.models.profile import OEmbedSpec

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, float], Any]


def fetch_json(url: str, timeout: float = OEMBED_TIMEOUT) -> Any:
    """GET a URL and decode its JSON body. Redirects are followed.

    Raises:
        OEmbedFetchError: On network, HTTP or decoding errors.
    """
    req = urllib.request.Request(
        url,
        method="GET",
        headers={"Accept": "application/json", "User-Agent": "mediaembed"},
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            body = resp.read()
    except (urllib.error.URLError, OSError) as e:
        raise OEmbedFetchError(f"Failed to fetch {url}: {e}", url=url) from e

    try:
        return json.loads(body)
    except ValueError as e:
        raise OEmbedFetchError(f"Invalid JSON from {url}: {e}", url=url) from e


class OEmbedLookup:
    """Lazy oEmbed document for one media.

    Args:
        spec: Endpoint, media URL base and id field of the provider.
        media_uri: Part of the media URL after ``spec.url_base`` (usually the
            resolved playable id).
        fetcher: ``fetcher(url, timeout)`` returning decoded JSON. Defaults to
            fetch_json.
    """

    def __init__(
        self,
        spec: OEmbedSpec,
        media_uri: str,
        fetcher: Fetcher | None = None,
        timeout: float = OEMBED_TIMEOUT,
    ):
        self.spec = spec
        self.media_uri = media_uri
        self.timeout = timeout
        self._fetcher = fetcher or fetch_json
        self._data: dict[str, Any] | None = None

    @property
    def media_url(self) -> str:
        return self.spec.url_base + self.media_uri

    @property
    def request_url(self) -> str:
        joint = "&" if "?" in self.spec.endpoint else "?"
        return self.spec.endpoint + joint + urlencode({"url": self.media_url})

    @property
    def data(self) -> dict[str, Any]:
        """The oEmbed document; fetched on first access."""
        if self._data is None:
            self._data = self._fetch()
        return self._data

    def _fetch(self) -> dict[str, Any]:
        url = self.request_url
        logger.debug(f"Fetching oEmbed data: {url}")
        try:
            data = self._fetcher(url, self.timeout)
        except OEmbedFetchError as e:
            logger.warning(f"oEmbed lookup failed for {self.media_url}: {e.message}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"oEmbed response for {self.media_url} is not an object")
            return {}
        return data

    def get(self, name: str, default: Any = None) -> Any:
        """Get a field of the oEmbed document, or default if missing."""
        return self.data.get(name, default)

    def has(self, name: str) -> bool:
        return name in self.data

    def clear(self) -> None:
        """Forget the fetched document."""
        self._data = None

    def __repr__(self) -> str:
        state = "fetched" if self._data is not None else "pending"
        return f"OEmbedLookup(media_url={self.media_url!r}, {state})"
