# this_file: python/autofit/__init__.py

"""autofit: draw text centered and scaled to fill fixed rectangles.

Example:
    >>> import cairo
    >>> import autofit
    >>> surface = cairo.PDFSurface("out.pdf", 595, 842)
    >>> canvas = autofit.CairoCanvas(cairo.Context(surface), font_size=40)
    >>> autofit.draw_centered_text(canvas, "森", autofit.Rectangle(0, 0, 198, 421))
"""

from __future__ import annotations

from .base import (
    AutofitError,
    CanvasDrawError,
    CanvasInitError,
    CanvasUnavailableError,
    DegenerateRectangleError,
    EmptyTextError,
    NonConvergenceError,
)
from .canvases import BaseCanvas, CairoCanvas, available_engines, get_canvas_class
from .fit import FitConfig, FitPolicy, draw_centered_text, draw_fitted, fit
from .geometry import FitResult, Rectangle, TextExtents
from .page import PageLayout, PageReport, SplitMode, render_pdf, render_units
from .segment import (
    codepoint_count,
    iter_codepoints,
    normalize_newlines,
    split_by_codepoint,
    split_by_line,
)

__version__ = "0.1.0"

__all__ = [
    "AutofitError",
    "BaseCanvas",
    "CairoCanvas",
    "CanvasDrawError",
    "CanvasInitError",
    "CanvasUnavailableError",
    "DegenerateRectangleError",
    "EmptyTextError",
    "FitConfig",
    "FitPolicy",
    "FitResult",
    "NonConvergenceError",
    "PageLayout",
    "PageReport",
    "Rectangle",
    "SplitMode",
    "TextExtents",
    "__version__",
    "available_engines",
    "codepoint_count",
    "draw_centered_text",
    "draw_fitted",
    "fit",
    "get_canvas_class",
    "iter_codepoints",
    "normalize_newlines",
    "render_pdf",
    "render_units",
    "split_by_codepoint",
    "split_by_line",
]
