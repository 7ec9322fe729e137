"""Remote SVG resource fetching.

Handles fetching SVG markup from HTTP(S) URLs, consulting a SourceCache
first and storing fresh responses in it.
"""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from typing import Any

from svg_scene.__about__ import __version__
from svg_scene.exceptions import RemoteResourceError
from svg_scene.sources.cache import SourceCache

logger = logging.getLogger(__name__)


def is_url(source: Any) -> bool:
    """True for strings starting with an http:// or https:// scheme."""
    if not isinstance(source, str):
        return False
    source = source.strip().lower()
    return source.startswith("http://") or source.startswith("https://")


class RemoteSource:
    """Fetch SVG markup from URLs with optional caching."""

    # Default timeout for requests (seconds)
    DEFAULT_TIMEOUT = 30

    # Maximum body size to download (10MB)
    MAX_SIZE = 10 * 1024 * 1024

    def __init__(
        self,
        cache: SourceCache | None = None,
        timeout: int = DEFAULT_TIMEOUT,
        max_size: int = MAX_SIZE,
        no_cache: bool = False,
    ) -> None:
        """Initialize the source.

        Args:
            cache: Cache consulted before fetching and filled after.
            timeout: Request timeout in seconds.
            max_size: Maximum response size in bytes.
            no_cache: Read from the cache but never write to it.
        """
        self.cache = cache
        self.timeout = timeout
        self.max_size = max_size
        self.no_cache = no_cache

    def fetch(self, url: str) -> str:
        """Return the markup at ``url``, from the cache when present.

        Raises:
            RemoteResourceError: If the request fails or the body is too large.
        """
        if self.cache is not None:
            cached = self.cache.get(url)
            if cached:
                logger.debug("Cache hit for %s", url)
                return cached

        content = self._download(url)

        if self.cache is not None and not self.no_cache:
            self.cache.put(url, content)
        return content

    def _download(self, url: str) -> str:
        req = urllib.request.Request(
            url,
            headers={
                "User-Agent": f"svg-scene/{__version__}",
                "Accept": "image/svg+xml, application/xml, text/xml, */*",
            },
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                content_length = response.headers.get("Content-Length")
                if content_length and int(content_length) > self.max_size:
                    raise RemoteResourceError(
                        url,
                        details={"error": f"File too large: {content_length} bytes"},
                    )

                content = response.read(self.max_size + 1)
                if len(content) > self.max_size:
                    raise RemoteResourceError(
                        url,
                        details={"error": f"File too large: >{self.max_size} bytes"},
                    )

                encoding = response.headers.get_content_charset() or "utf-8"
                return content.decode(encoding)
        except RemoteResourceError:
            raise
        except urllib.error.HTTPError as e:
            raise RemoteResourceError(url, status_code=e.code) from e
        except urllib.error.URLError as e:
            raise RemoteResourceError(url, details={"error": str(e.reason)}) from e
        except (OSError, ValueError, LookupError) as e:
            raise RemoteResourceError(url, details={"error": str(e)}) from e
