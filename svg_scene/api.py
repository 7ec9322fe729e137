"""High-level conversion API.

Example:
    >>> from svg_scene import SceneConverter, SceneOptions
    >>> converter = SceneConverter(SceneOptions(fill="#333"))
    >>> result = converter.convert_string('<svg width="10"><circle r="4"/></svg>')
    >>> result.scene.element_children[0].attributes["r"]
    '4'
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from svg_scene.builder import SceneNode, build_scene
from svg_scene.config import Config, SceneOptions
from svg_scene.exceptions import RemoteResourceError, SceneError, SVGParseError
from svg_scene.sources.cache import FileCache
from svg_scene.sources.remote import RemoteSource, is_url
from svg_scene.svg.parser import parse_svg_string

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of one conversion.

    ``scene`` is None whenever ``success`` is False. An empty document is
    unsuccessful without being an error, so ``errors`` may be empty.
    """

    success: bool
    scene: SceneNode | None = None
    source: str = "string"
    errors: list[str] = field(default_factory=list)

    @classmethod
    def failed(cls, source: str, error: Exception | None = None) -> ConversionResult:
        return cls(success=False, source=source, errors=[str(error)] if error else [])


class SceneConverter:
    """Convert SVG markup, files or URLs into scene graphs.

    A converter holds only read-only settings, so one instance can serve
    concurrent conversions.
    """

    def __init__(
        self,
        options: SceneOptions | None = None,
        config: Config | None = None,
        source: RemoteSource | None = None,
        log_level: str | None = None,
        on_load: Callable[[SceneNode], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        """Initialize converter.

        Args:
            options: Per-conversion options; defaults to ``config.options``.
            config: Ambient configuration; ``Config()`` when omitted.
            source: Remote fetcher; built from ``config`` when omitted.
            log_level: Level for the ``svg_scene`` logger, e.g. "DEBUG".
                Left untouched when omitted.
            on_load: Called with the scene after each successful conversion.
            on_error: Called with the exception when a conversion fails.
        """
        self.config = config or Config()
        self.options = options or self.config.options
        self.source = source or RemoteSource(
            cache=FileCache(self.config.cache_dir),
            timeout=self.config.timeout,
            max_size=self.config.max_size,
            no_cache=self.config.no_cache,
        )
        self.on_load = on_load
        self.on_error = on_error

        if log_level:
            logging.getLogger("svg_scene").setLevel(log_level.upper())

    def convert_string(self, markup: str | None, source: str = "string") -> ConversionResult:
        """Convert SVG markup. None or blank markup yields no scene."""
        if markup is None or not markup.strip():
            logger.debug("No markup to convert from %s", source)
            return ConversionResult.failed(source)

        try:
            root = parse_svg_string(markup)
            scene = build_scene(root, self.options)
        except SVGParseError as e:
            return self._fail(source, e)

        if scene is None:
            return ConversionResult.failed(source)

        if self.on_load is not None:
            self.on_load(scene)
        return ConversionResult(success=True, scene=scene, source=source)

    def convert_file(self, path: Path | str) -> ConversionResult:
        path = Path(path)
        try:
            markup = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return self._fail(str(path), SVGParseError(f"Cannot read {path}: {e}"))
        return self.convert_string(markup, source=str(path))

    def convert_url(self, url: str) -> ConversionResult:
        try:
            markup = self.source.fetch(url)
        except RemoteResourceError as e:
            return self._fail(url, e)
        return self.convert_string(markup, source=url)

    def convert(self, source: str | Path) -> ConversionResult:
        """Dispatch on the input: URL, existing file path, or raw markup."""
        if is_url(source):
            return self.convert_url(str(source))
        if isinstance(source, Path):
            return self.convert_file(source)
        if "<" not in source and _is_file(source):
            return self.convert_file(source)
        return self.convert_string(source)

    def _fail(self, source: str, error: SceneError) -> ConversionResult:
        logger.warning("Conversion of %s failed: %s", source, error)
        if self.on_error is not None:
            self.on_error(error)
        return ConversionResult.failed(source, error)


def _is_file(candidate: str) -> bool:
    try:
        return Path(candidate).is_file()
    except (OSError, ValueError):
        return False
