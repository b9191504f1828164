# this_file: python/autofit/canvases/skia.py
"""
Skia-backed canvas via skia-python.
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
    import skia
except ImportError as exc:  # pragma: no cover - optional dependency
    SKIA_IMPORT_ERROR: ImportError | None = exc
else:
    SKIA_IMPORT_ERROR = None



class SkiaCanvas(BaseCanvas):
    """
    Canvas over a ``skia.Canvas``.

    Skia has no current-point state, so :meth:`move_to` records the pen
    position and :meth:`show_text` draws at it.
    """

    engine = "skia"

    def __init__(
        self,
        canvas,
        *,
        font_face: str = DEFAULT_FONT_FACE,
        font_size: float = DEFAULT_FONT_SIZE,
    ):
        if SKIA_IMPORT_ERROR:
            raise CanvasInitError(
                f"skia canvas unavailable: {SKIA_IMPORT_ERROR}"
            ) from SKIA_IMPORT_ERROR

        super().__init__(font_face=font_face, font_size=font_size)
        self._canvas = canvas
        self._typeface = skia.Typeface.MakeFromName(font_face, skia.FontStyle.Normal())
        if self._typeface is None:
            raise CanvasInitError(f"Failed to load typeface {font_face!r}")
        self._font = skia.Font(self._typeface, self.font_size)
        self._paint = skia.Paint(Color=skia.ColorBLACK, AntiAlias=True)
        self._pen = (0.0, 0.0)
        self._pen_stack: list[tuple[float, float]] = []

    @classmethod
    def is_available(cls) -> bool:
        """Check if the skia canvas is available (requires skia-python)."""
        return SKIA_IMPORT_ERROR is None

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
    ) -> Iterator[SkiaCanvas]:
        """Open a single-page PDF document and yield a canvas drawing into it."""
        if SKIA_IMPORT_ERROR:
            raise CanvasInitError(
                f"skia canvas unavailable: {SKIA_IMPORT_ERROR}"
            ) from SKIA_IMPORT_ERROR

        stream = skia.FILEWStream(str(output_path))
        if not stream.isValid():
            raise CanvasInitError(f"Cannot open {output_path} for writing")
        document = skia.PDF.MakeDocument(stream)
        page = document.beginPage(width, height)
        try:
            yield cls(page, font_face=font_face, font_size=font_size)
        finally:
            document.endPage()
            document.close()
            stream.flush()
            logger.debug(f"Finished skia PDF document {output_path}")

    def measure_extents(self, text: str, font_size: float) -> TextExtents:
        font = skia.Font(self._typeface, font_size)
        bounds = skia.Rect()
        advance = font.measureText(text, skia.TextEncoding.kUTF8, bounds)
        return TextExtents(
            x_bearing=bounds.left(),
            y_bearing=bounds.top(),
            width=bounds.width(),
            height=bounds.height(),
            x_advance=float(advance),
        )

    def set_font_size(self, font_size: float) -> None:
        super().set_font_size(font_size)
        self._font.setSize(self.font_size)

    def save(self) -> None:
        self._canvas.save()
        self._pen_stack.append(self._pen)

    def restore(self) -> None:
        self._canvas.restore()
        if self._pen_stack:
            self._pen = self._pen_stack.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._canvas.translate(dx, dy)

    def scale(self, sx: float, sy: float) -> None:
        self._canvas.scale(sx, sy)

    def move_to(self, x: float, y: float) -> None:
        self._pen = (float(x), float(y))

    def show_text(self, text: str) -> None:
        x, y = self._pen
        self._canvas.drawString(text, x, y, self._font, self._paint)
        self._pen = (x + float(self._font.measureText(text)), y)

    def draw_lines(self, lines: Sequence[Line], line_width: float) -> None:
        if not lines:
            return
        paint = skia.Paint(
            Color=skia.ColorBLACK,
            AntiAlias=True,
            Style=skia.Paint.kStroke_Style,
            StrokeWidth=line_width,
        )
        for x0, y0, x1, y1 in lines:
            self._canvas.drawLine(x0, y0, x1, y1, paint)
