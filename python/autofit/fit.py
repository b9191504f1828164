# this_file: python/autofit/fit.py
"""
Autofit engine: scale a text unit so its ink box fills a rectangle, then
draw it centered.

Two policies share one bounded loop:

* ``SCALE_ONLY`` measures once at the canvas font size and adjusts the two
  axis scales independently until both land in the fit band.
* ``FONT_SIZE_PLUS_SCALE`` remeasures at the current font size every
  iteration, grows the font while both axes are short, then tops up each
  axis with its scale factor.

The scale factors always multiply the *measured* extents; they never change
what gets measured.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from .base import DegenerateRectangleError, EmptyTextError, NonConvergenceError
from .canvases.base import BaseCanvas
from .constants import (
    ENV_ALLOW_SHRINK,
    ENV_MAX_ITERATIONS,
    ENV_POLICY,
    FIT_HIGH,
    FIT_LOW,
    GROW_FACTOR,
    MAX_ITERATIONS,
    SHRINK_FACTOR,
)
from .geometry import FitResult, Rectangle, TextExtents


class FitPolicy(str, Enum):
    SCALE_ONLY = "scale-only"
    FONT_SIZE_PLUS_SCALE = "font-size-plus-scale"


_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(slots=True)
class FitConfig:
    """
    Tunables for :func:`fit`.

    Attributes:
        policy: Which fitting loop to run
        low: Lower edge of the fit band as a fraction of the target dimension
        high: Upper edge of the fit band
        grow: Factor applied when a dimension is short
        shrink: Factor applied when a dimension overshoots
        max_iterations: Iteration cap; exceeding it raises NonConvergenceError
        allow_shrink: Let FONT_SIZE_PLUS_SCALE shrink an overshooting axis
            instead of accepting the overshoot
    """

    policy: FitPolicy = FitPolicy.SCALE_ONLY
    low: float = FIT_LOW
    high: float = FIT_HIGH
    grow: float = GROW_FACTOR
    shrink: float = SHRINK_FACTOR
    max_iterations: int = MAX_ITERATIONS
    allow_shrink: bool = True

    def __post_init__(self) -> None:
        self.policy = FitPolicy(self.policy)
        if not 0 < self.low < self.high:
            raise ValueError(f"Invalid fit band [{self.low}, {self.high}]")
        if self.grow <= 1.0 or not 0 < self.shrink < 1.0:
            raise ValueError(f"Invalid step factors grow={self.grow} shrink={self.shrink}")
        # A step larger than the band could jump straight over it forever.
        if self.grow > self.high / self.low or 1 / self.shrink > self.high / self.low:
            raise ValueError("Step factors must not exceed the width of the fit band")
        if self.max_iterations <= 0:
            raise ValueError("max_iterations must be positive")

    @classmethod
    def from_env(cls, **overrides) -> FitConfig:
        """Build a config from ``AUTOFIT_*`` environment variables plus overrides."""
        values: dict[str, object] = {}
        policy = os.environ.get(ENV_POLICY)
        if policy:
            values["policy"] = FitPolicy(policy.strip().lower())
        max_iterations = os.environ.get(ENV_MAX_ITERATIONS)
        if max_iterations:
            values["max_iterations"] = int(max_iterations)
        allow_shrink = os.environ.get(ENV_ALLOW_SHRINK, "").strip().lower()
        if allow_shrink in _TRUTHY:
            values["allow_shrink"] = True
        elif allow_shrink in _FALSY:
            values["allow_shrink"] = False
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]


def centered_origin(extents: TextExtents) -> tuple[float, float]:
    """Pen position that centers the ink box on (0, 0), cancelling the bearings."""
    return (
        -extents.width / 2.0 - extents.x_bearing,
        -extents.height / 2.0 - extents.y_bearing,
    )


def _result(font_size, scale_x, scale_y, extents, iterations) -> FitResult:
    draw_x, draw_y = centered_origin(extents)
    return FitResult(
        font_size=font_size,
        scale_x=scale_x,
        scale_y=scale_y,
        draw_x=draw_x,
        draw_y=draw_y,
        extents=extents,
        iterations=iterations,
    )


def _measure(canvas: BaseCanvas, text: str, font_size: float) -> TextExtents:
    extents = canvas.measure_extents(text, font_size)
    if extents.is_empty:
        raise EmptyTextError(
            f"Text {text!r} has no visible ink at size {font_size:g} "
            f"(extents {extents.width:g}x{extents.height:g})"
        )
    return extents


def _fit_scale_only(
    text: str, rect: Rectangle, canvas: BaseCanvas, config: FitConfig, font_size: float
) -> FitResult:
    extents = _measure(canvas, text, font_size)
    lo_w, hi_w = rect.width * config.low, rect.width * config.high
    lo_h, hi_h = rect.height * config.low, rect.height * config.high

    scale_x = scale_y = 1.0
    for iteration in range(config.max_iterations):
        if extents.width * scale_x < lo_w:
            scale_x *= config.grow
        elif extents.width * scale_x > hi_w:
            scale_x *= config.shrink
        elif extents.height * scale_y < lo_h:
            scale_y *= config.grow
        elif extents.height * scale_y > hi_h:
            scale_y *= config.shrink
        else:
            return _result(font_size, scale_x, scale_y, extents, iteration)

    raise NonConvergenceError(
        f"scale-only fit of {text!r} did not converge in {config.max_iterations} iterations",
        _result(font_size, scale_x, scale_y, extents, config.max_iterations),
    )


def _fit_font_size_plus_scale(
    text: str, rect: Rectangle, canvas: BaseCanvas, config: FitConfig, font_size: float
) -> FitResult:
    lo_w, hi_w = rect.width * config.low, rect.width * config.high
    lo_h, hi_h = rect.height * config.low, rect.height * config.high

    scale_x = scale_y = 1.0
    extents = _measure(canvas, text, font_size)
    for iteration in range(config.max_iterations):
        if iteration:
            extents = _measure(canvas, text, font_size)

        width = extents.width * scale_x
        height = extents.height * scale_y
        if width < lo_w and height < lo_h:
            font_size *= config.grow
        elif width < lo_w:
            scale_x *= config.grow
        elif height < lo_h:
            scale_y *= config.grow
        elif config.allow_shrink and width > hi_w:
            scale_x *= config.shrink
        elif config.allow_shrink and height > hi_h:
            scale_y *= config.shrink
        else:
            if width > hi_w or height > hi_h:
                logger.debug(
                    f"Accepting overshoot for {text!r}: {width:.1f}x{height:.1f} "
                    f"in {rect.width:.1f}x{rect.height:.1f}"
                )
            return _result(font_size, scale_x, scale_y, extents, iteration)

    # The last step may have grown the font; center with matching extents.
    extents = _measure(canvas, text, font_size)
    raise NonConvergenceError(
        f"font-size-plus-scale fit of {text!r} did not converge in "
        f"{config.max_iterations} iterations",
        _result(font_size, scale_x, scale_y, extents, config.max_iterations),
    )


_POLICIES = {
    FitPolicy.SCALE_ONLY: _fit_scale_only,
    FitPolicy.FONT_SIZE_PLUS_SCALE: _fit_font_size_plus_scale,
}


def fit(
    text: str,
    rect: Rectangle,
    canvas: BaseCanvas,
    config: FitConfig | None = None,
    *,
    font_size: float | None = None,
) -> FitResult:
    """
    Compute font size, axis scales and centered origin for ``text`` in ``rect``.

    Args:
        text: One text unit (a codepoint or a line)
        rect: Target rectangle in page coordinates
        canvas: Canvas used to measure extents
        config: Fitting policy and tunables (defaults to SCALE_ONLY)
        font_size: Starting font size (defaults to the canvas font size)

    Returns:
        FitResult for this exact text, rectangle and font face

    Raises:
        EmptyTextError: Empty text, or text without visible ink
        DegenerateRectangleError: Rectangle with non-positive or non-finite size
        NonConvergenceError: Iteration cap exceeded; ``exc.result`` holds the
            last placement reached
    """
    config = config or FitConfig()
    if not text:
        raise EmptyTextError("Cannot fit empty text")
    if rect.is_degenerate:
        raise DegenerateRectangleError(
            f"Cannot fit into rectangle {rect.width:g}x{rect.height:g} "
            f"at ({rect.x0:g}, {rect.y0:g})"
        )

    start_size = canvas.font_size if font_size is None else float(font_size)
    result = _POLICIES[config.policy](text, rect, canvas, config, start_size)
    logger.debug(
        f"Fitted {text!r} ({config.policy.value}) in {result.iterations} iterations: "
        f"size={result.font_size:.2f} scale=({result.scale_x:.3f}, {result.scale_y:.3f})"
    )
    return result


def draw_fitted(canvas: BaseCanvas, text: str, rect: Rectangle, result: FitResult) -> None:
    """
    Emit ``text`` with a placement computed by :func:`fit`.

    Transform and font state are restored even if glyph emission fails.
    """
    center_x, center_y = rect.center
    with canvas.transform_scope():
        canvas.set_font_size(result.font_size)
        canvas.translate(center_x, center_y)
        canvas.scale(result.scale_x, result.scale_y)
        canvas.move_to(result.draw_x, result.draw_y)
        canvas.show_text(text)


def draw_centered_text(
    canvas: BaseCanvas,
    text: str,
    rect: Rectangle,
    config: FitConfig | None = None,
) -> FitResult:
    """Fit ``text`` into ``rect`` and draw it centered. Returns the placement used."""
    result = fit(text, rect, canvas, config)
    draw_fitted(canvas, text, rect, result)
    return result
