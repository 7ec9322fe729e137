"""Key/value stores for fetched SVG markup."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Protocol
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class SourceCache(Protocol):
    """Minimal cache interface consulted before fetching."""

    def get(self, key: str) -> str | None: ...

    def put(self, key: str, value: str) -> None: ...


class MemoryCache:
    """In-process cache backed by a dict."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)


class FileCache:
    """Persistent cache storing one file per key under ``cache_dir``.

    Cache failures are never fatal: an unreadable entry is a miss and a
    failed write is logged and skipped.
    """

    SUFFIX = ".svgcache"

    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = Path(cache_dir)

    def path_for(self, key: str) -> Path:
        """Get cache file path for a key (usually a URL)."""
        key_hash = hashlib.sha256(key.encode()).hexdigest()[:16]
        filename = Path(urlparse(key).path).name or "index"
        return self.cache_dir / f"{key_hash}_{filename}{self.SUFFIX}"

    def get(self, key: str) -> str | None:
        cache_file = self.path_for(key)
        if not cache_file.exists():
            return None
        try:
            return cache_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable cache entry %s: %s", cache_file, e)
            return None

    def put(self, key: str, value: str) -> None:
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            self.path_for(key).write_text(value, encoding="utf-8")
        except OSError as e:
            logger.warning("Could not cache %s: %s", key, e)

    def entries(self) -> list[Path]:
        if not self.cache_dir.is_dir():
            return []
        return sorted(self.cache_dir.glob(f"*{self.SUFFIX}"))

    def size(self) -> int:
        """Total bytes used by cache entries."""
        return sum(entry.stat().st_size for entry in self.entries())

    def clear(self) -> int:
        """Delete all cache entries and return how many were removed."""
        removed = 0
        for entry in self.entries():
            entry.unlink()
            removed += 1
        return removed
