"""Unit tests for svg_scene.config (SceneOptions and YAML Config loading)."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent
from unittest.mock import patch

import pytest

from svg_scene.config import CONFIG_ENV_VAR, Config, SceneOptions
from svg_scene.exceptions import ConfigError


class TestSceneOptions:
    """Tests for SceneOptions."""

    def test_defaults(self) -> None:
        """Config() has the documented defaults."""
        options = SceneOptions()
        assert options.fill is None
        assert options.apply_fill_to_all is False
        assert options.forces_fill is False

    def test_with_overrides_skips_none(self) -> None:
        """with_overrides ignores None values."""
        base = SceneOptions(fill="red", override_width="10")
        updated = base.with_overrides(fill=None, override_width="20", apply_fill_to_all=True)
        assert updated == SceneOptions(fill="red", apply_fill_to_all=True, override_width="20")
        assert base.override_width == "10"


class TestConfigLoad:
    """Tests for Config.load()."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing config file gives default settings."""
        config = Config.load(tmp_path / "absent.yaml")
        assert config.options == SceneOptions()
        assert config.log_level == "WARNING"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty config file gives default settings."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert Config.load(path).timeout == 30

    def test_full_config(self, tmp_path: Path) -> None:
        """Every supported setting is read from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            dedent(f"""
            log_level: debug
            scene:
              fill: "#222"
              apply_fill_to_all: true
              override_width: 48
              override_height: "24"
            source:
              cache_dir: {tmp_path / "cache"}
              no_cache: true
              timeout: 5
              max_size: 1024
            """)
        )
        config = Config.load(path)
        assert config.options == SceneOptions(
            fill="#222",
            apply_fill_to_all=True,
            override_width="48",
            override_height="24",
        )
        assert config.cache_dir == tmp_path / "cache"
        assert config.no_cache is True
        assert config.timeout == 5
        assert config.max_size == 1024
        assert config.log_level == "DEBUG"

    def test_env_var_is_used(self, tmp_path: Path) -> None:
        """SVG_SCENE_CONFIG points Config.load at a file."""
        path = tmp_path / "env.yaml"
        path.write_text("scene:\n  fill: blue\n")
        with patch.dict("os.environ", {CONFIG_ENV_VAR: str(path)}):
            assert Config.load().options.fill == "blue"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Broken YAML raises ConfigError."""
        path = tmp_path / "bad.yaml"
        path.write_text("scene: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML syntax"):
            Config.load(path)

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("- a list", "top level must be a mapping"),
            ("scene: 3", "scene: expected mapping"),
            ("scene:\n  colour: red", "scene.colour: unknown setting"),
            ("scene:\n  apply_fill_to_all: 'yes'", "scene.apply_fill_to_all: expected boolean"),
            ("scene:\n  fill: [1]", "scene.fill: expected string"),
            ("source:\n  timeout: 0", "source.timeout: must be at least 1"),
            ("source:\n  timeout: fast", "source.timeout: expected integer"),
            ("log_level: LOUD", "log_level: must be one of"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, content: str, message: str) -> None:
        """Invalid settings raise ConfigError naming the key."""
        path = tmp_path / "invalid.yaml"
        path.write_text(content)
        with pytest.raises(ConfigError, match=message):
            Config.load(path)
