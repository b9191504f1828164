# this_file: python/autofit/canvases/__init__.py
"""
Canvas backend selection utilities and registry.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping

from ..constants import ENV_ENGINE
from .base import BaseCanvas, CanvasInitError, CanvasUnavailableError
from .cairo import CairoCanvas

ENGINE_BUILDERS: dict[str, Callable[..., BaseCanvas]] = {
    CairoCanvas.engine: CairoCanvas,
}

try:
    from .skia import SkiaCanvas
except Exception:  # pragma: no cover - optional dependency
    SkiaCanvas = None  # type: ignore[assignment, misc]
else:
    ENGINE_BUILDERS[SkiaCanvas.engine] = SkiaCanvas  # type: ignore[arg-type]

# Preference order for "auto": cairo is the reference backend.
_PREFERRED_ORDER = ("cairo", "skia")


def available_engines() -> dict[str, bool]:
    """Ask every registered canvas class if it works; one that raises counts as unavailable."""
    status: dict[str, bool] = {}
    for name, canvas_cls in ENGINE_BUILDERS.items():
        try:
            status[name] = canvas_cls.is_available()  # type: ignore[attr-defined]
        except Exception:
            status[name] = False
    return status


def describe_available_engines(status: Mapping[str, bool] | None = None) -> str:
    """Comma-separated canvas engines usable here, for log and CLI messages."""
    engines = available_engines() if status is None else status
    usable = [name for name, ok in engines.items() if ok]
    return ", ".join(usable) if usable else "none"


def default_engine() -> str:
    """
    Choose the best available canvas engine.

    ``AUTOFIT_ENGINE`` wins when it names an available engine; otherwise
    cairo, then skia, then anything else that reports itself available.
    """
    availability = available_engines()

    requested = os.environ.get(ENV_ENGINE, "").strip().lower()
    if requested and requested != "auto" and availability.get(requested):
        return requested

    for name in _PREFERRED_ORDER:
        if availability.get(name):
            return name

    for name, ok in availability.items():
        if ok:
            return name

    raise CanvasUnavailableError("No canvas engines are available.")


def get_canvas_class(engine: str = "auto") -> type[BaseCanvas]:
    """
    Resolve an engine name (or ``"auto"``) to its canvas class.

    Raises:
        CanvasInitError: Unknown engine name
        CanvasUnavailableError: Engine is known but cannot run here
    """
    engine = engine.lower()
    if engine == "auto":
        engine = default_engine()

    builder = ENGINE_BUILDERS.get(engine)
    if not builder:
        raise CanvasInitError(
            f"Unknown canvas engine '{engine}'. Known: {', '.join(ENGINE_BUILDERS)}"
        )

    if not builder.is_available():  # type: ignore[attr-defined]
        raise CanvasUnavailableError(f"Canvas '{engine}' is not available on this system.")

    return builder  # type: ignore[return-value]


__all__ = [
    "BaseCanvas",
    "CairoCanvas",
    "CanvasInitError",
    "CanvasUnavailableError",
    "ENGINE_BUILDERS",
    "SkiaCanvas",
    "available_engines",
    "default_engine",
    "describe_available_engines",
    "get_canvas_class",
]
