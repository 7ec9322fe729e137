"""Exception hierarchy for svg-scene.

Only SVGParseError and RemoteResourceError ever reach a caller of the
converter. Unsupported elements, exhausted switches and out-of-schema
attributes are absorbed during the build and only logged.
"""

from __future__ import annotations

from typing import Any


class SceneError(Exception):
    """Base class for all svg-scene errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({extra})"


class SVGParseError(SceneError):
    """Markup has no usable <svg> fragment or cannot be parsed."""


class RemoteResourceError(SceneError):
    """Fetching SVG markup from a URL failed."""

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = f"Failed to fetch {url}"
        if status_code is not None:
            message += f": HTTP {status_code}"
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class ConfigError(SceneError):
    """Configuration file contains invalid values."""
