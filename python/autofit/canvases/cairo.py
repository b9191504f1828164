# this_file: python/autofit/canvases/cairo.py
"""
Cairo-backed canvas via pycairo.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from loguru import logger

from ..constants import DEFAULT_FONT_FACE, DEFAULT_FONT_SIZE
from ..geometry import TextExtents
from .base import BaseCanvas, CanvasInitError, Line

try:
    import cairo
except ImportError as exc:  # pragma: no cover - optional at import time
    CAIRO_IMPORT_ERROR: ImportError | None = exc
else:
    CAIRO_IMPORT_ERROR = None



class CairoCanvas(BaseCanvas):
    """
    Canvas over an existing ``cairo.Context``.

    The font face is selected once with the toy font API; size changes go
    through :meth:`set_font_size` so they stay inside cairo's save/restore
    state.
    """

    engine = "cairo"

    def __init__(
        self,
        context,
        *,
        font_face: str = DEFAULT_FONT_FACE,
        font_size: float = DEFAULT_FONT_SIZE,
    ):
        if CAIRO_IMPORT_ERROR:
            raise CanvasInitError(
                f"cairo canvas unavailable: {CAIRO_IMPORT_ERROR}"
            ) from CAIRO_IMPORT_ERROR

        super().__init__(font_face=font_face, font_size=font_size)
        self._ctx = context
        self._ctx.select_font_face(
            font_face, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL
        )
        self._ctx.set_font_size(self.font_size)

    @classmethod
    def is_available(cls) -> bool:
        """Check if the cairo canvas is available (requires pycairo)."""
        return CAIRO_IMPORT_ERROR is None

    @classmethod
    @contextmanager
    def pdf_document(
        cls,
        output_path: Path,
        width: float,
        height: float,
        *,
        font_face: str = DEFAULT_FONT_FACE,
        font_size: float = DEFAULT_FONT_SIZE,
    ) -> Iterator[CairoCanvas]:
        """Open a single-page PDF surface and yield a canvas drawing into it."""
        if CAIRO_IMPORT_ERROR:
            raise CanvasInitError(
                f"cairo canvas unavailable: {CAIRO_IMPORT_ERROR}"
            ) from CAIRO_IMPORT_ERROR
        try:
            surface = cairo.PDFSurface(str(output_path), width, height)
        except cairo.Error as exc:
            raise CanvasInitError(f"Failed to create PDF surface at {output_path}: {exc}") from exc

        try:
            yield cls(cairo.Context(surface), font_face=font_face, font_size=font_size)
        finally:
            surface.finish()
            logger.debug(f"Finished cairo PDF surface {output_path}")

    def measure_extents(self, text: str, font_size: float) -> TextExtents:
        self._ctx.save()
        try:
            self._ctx.set_font_size(font_size)
            ext = self._ctx.text_extents(text)
        finally:
            self._ctx.restore()
        return TextExtents(
            x_bearing=ext.x_bearing,
            y_bearing=ext.y_bearing,
            width=ext.width,
            height=ext.height,
            x_advance=ext.x_advance,
            y_advance=ext.y_advance,
        )

    def set_font_size(self, font_size: float) -> None:
        super().set_font_size(font_size)
        self._ctx.set_font_size(self.font_size)

    def save(self) -> None:
        self._ctx.save()

    def restore(self) -> None:
        self._ctx.restore()

    def translate(self, dx: float, dy: float) -> None:
        self._ctx.translate(dx, dy)

    def scale(self, sx: float, sy: float) -> None:
        self._ctx.scale(sx, sy)

    def move_to(self, x: float, y: float) -> None:
        self._ctx.move_to(x, y)

    def show_text(self, text: str) -> None:
        self._ctx.show_text(text)

    def draw_lines(self, lines: Sequence[Line], line_width: float) -> None:
        """Stroke straight black segments ``(x0, y0, x1, y1)`` as one path."""
        if not lines:
            return
        self._ctx.save()
        try:
            self._ctx.set_source_rgb(0, 0, 0)
            self._ctx.set_line_width(line_width)
            for x0, y0, x1, y1 in lines:
                self._ctx.move_to(x0, y0)
                self._ctx.line_to(x1, y1)
            self._ctx.stroke()
        finally:
            self._ctx.restore()
