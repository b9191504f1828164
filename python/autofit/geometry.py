# this_file: python/autofit/geometry.py
"""
Value types shared by the fitting engine and canvas backends.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """
    Axis-aligned target box ``(x0, y0) - (x1, y1)`` in page coordinates.

    Attributes:
        x0: Left edge
        y0: Top edge
        x1: Right edge
        y1: Bottom edge
    """

    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def center(self) -> tuple[float, float]:
        return self.x0 + self.width / 2, self.y0 + self.height / 2

    @property
    def is_degenerate(self) -> bool:
        """True when the box cannot be fitted into (non-positive or non-finite size)."""
        w, h = self.width, self.height
        return not (math.isfinite(w) and math.isfinite(h)) or w <= 0 or h <= 0


@dataclass(frozen=True, slots=True)
class TextExtents:
    """
    Ink box of a text unit at one font size, as reported by a canvas.

    ``x_bearing``/``y_bearing`` are the offsets from the nominal origin
    (pen position on the baseline) to the top-left of the ink box.
    """

    x_bearing: float
    y_bearing: float
    width: float
    height: float
    x_advance: float = 0.0
    y_advance: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True, slots=True)
class FitResult:
    """
    Placement parameters for one fitted text unit.

    ``draw_x``/``draw_y`` are expressed relative to the rectangle center in
    the text's own (pre-scale) coordinate space. Only valid for the text,
    rectangle and font face that produced it.
    """

    font_size: float
    scale_x: float
    scale_y: float
    draw_x: float
    draw_y: float
    extents: TextExtents
    iterations: int = 0

    @property
    def scaled_width(self) -> float:
        return self.extents.width * self.scale_x

    @property
    def scaled_height(self) -> float:
        return self.extents.height * self.scale_y
