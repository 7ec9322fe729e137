"""Document-wide fill override."""

from __future__ import annotations

from svg_scene.config import SceneOptions

NO_FILL = "none"


def resolve_fill(value: str, override: str | None) -> str:
    """Return ``override`` in place of a declared fill, except ``none``.

    An explicit ``fill="none"`` is kept verbatim under any override.
    """
    if override and value.strip() != NO_FILL:
        return override
    return value


def forced_fill(options: SceneOptions) -> dict[str, str]:
    """Attributes injected on every node when the fill applies to all."""
    if options.forces_fill:
        return {"fill": options.fill}
    return {}
