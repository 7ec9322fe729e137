"""Configuration for svg-scene.

Two layers:
- SceneOptions: the per-conversion settings (fill override, root size
  overrides). Immutable and passed explicitly through the build.
- Config: ambient settings loaded from YAML (defaults for SceneOptions,
  source cache location, network limits, log level).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from svg_scene.exceptions import ConfigError

CONFIG_ENV_VAR = "SVG_SCENE_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "svg-scene" / "config.yaml"
DEFAULT_CACHE_DIR = Path.home() / ".cache" / "svg-scene"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SceneOptions:
    """Options for a single conversion.

    Attributes:
        fill: Color forced onto shapes' fill (except explicit ``none``).
        apply_fill_to_all: Inject ``fill`` into every node, even where the
            source declares none.
        override_width: Replaces the root ``svg`` width when set.
        override_height: Replaces the root ``svg`` height when set.
    """

    fill: str | None = None
    apply_fill_to_all: bool = False
    override_width: str | None = None
    override_height: str | None = None

    @property
    def forces_fill(self) -> bool:
        return bool(self.fill) and self.apply_fill_to_all

    def with_overrides(self, **changes: Any) -> SceneOptions:
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


@dataclass
class Config:
    """Ambient configuration for the converter and CLI."""

    options: SceneOptions = field(default_factory=SceneOptions)
    cache_dir: Path = DEFAULT_CACHE_DIR
    no_cache: bool = False
    timeout: int = 30
    max_size: int = 10 * 1024 * 1024
    log_level: str = "WARNING"

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from YAML.

        Lookup order: ``path``, then ``$SVG_SCENE_CONFIG``, then
        ``~/.config/svg-scene/config.yaml``. A missing file gives defaults.

        Raises:
            ConfigError: If the file is not valid YAML or a value is invalid.
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

        if not path.exists():
            return cls()

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax in {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a Config from the ``scene`` and ``source`` YAML sections."""
        scene = _section(data, "scene")
        source = _section(data, "source")

        option_names = {f.name for f in fields(SceneOptions)}
        for key in scene:
            if key not in option_names:
                raise ConfigError(f"scene.{key}: unknown setting")

        options = SceneOptions(
            fill=_optional_str(scene, "scene", "fill"),
            apply_fill_to_all=_bool(scene, "scene", "apply_fill_to_all", False),
            override_width=_optional_str(scene, "scene", "override_width"),
            override_height=_optional_str(scene, "scene", "override_height"),
        )

        config = cls(options=options)
        if "cache_dir" in source:
            config.cache_dir = Path(str(source["cache_dir"])).expanduser()
        config.no_cache = _bool(source, "source", "no_cache", False)
        config.timeout = _positive_int(source, "source", "timeout", config.timeout)
        config.max_size = _positive_int(source, "source", "max_size", config.max_size)

        log_level = data.get("log_level", config.log_level)
        if not isinstance(log_level, str) or log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"log_level: must be one of {', '.join(_LOG_LEVELS)}")
        config.log_level = log_level.upper()
        return config


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name}: expected mapping, got {type(value).__name__}")
    return value


def _optional_str(section: dict[str, Any], name: str, key: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    # Dimensions are commonly written as bare numbers in YAML
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, str):
        raise ConfigError(f"{name}.{key}: expected string, got {type(value).__name__}")
    return value


def _bool(section: dict[str, Any], name: str, key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{name}.{key}: expected boolean, got {type(value).__name__}")
    return value


def _positive_int(section: dict[str, Any], name: str, key: str, default: int) -> int:
    value = section.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{name}.{key}: expected integer, got {type(value).__name__}")
    if value < 1:
        raise ConfigError(f"{name}.{key}: must be at least 1")
    return value
