"""SVG source acquisition: remote fetch with an optional cache."""

from svg_scene.sources.cache import FileCache, MemoryCache, SourceCache
from svg_scene.sources.remote import RemoteSource, is_url

__all__ = ["FileCache", "MemoryCache", "SourceCache", "RemoteSource", "is_url"]
