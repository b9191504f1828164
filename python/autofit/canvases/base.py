# this_file: python/autofit/canvases/base.py
"""
Abstract drawing canvas used by the fitting engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path

from ..base import CanvasInitError, CanvasUnavailableError
from ..constants import DEFAULT_FONT_FACE, DEFAULT_FONT_SIZE
from ..geometry import TextExtents

__all__ = ["BaseCanvas", "CanvasInitError", "CanvasUnavailableError", "Line"]

Line = tuple[float, float, float, float]


class BaseCanvas(ABC):
    """
    Measuring and drawing primitives over one backend drawing context.

    Subclasses bind a backend context (a cairo context, a skia canvas) and
    translate the primitives below into backend calls. One canvas wraps one
    context; do not share a canvas between threads.
    """

    engine = "base"

    def __init__(
        self,
        *,
        font_face: str = DEFAULT_FONT_FACE,
        font_size: float = DEFAULT_FONT_SIZE,
    ):
        if font_size <= 0:
            raise CanvasInitError(f"Invalid font size: {font_size} (must be positive)")
        self.font_face = font_face
        self.font_size = float(font_size)

    @classmethod
    def is_available(cls) -> bool:
        return True

    @classmethod
    def pdf_document(
        cls,
        output_path: Path,
        width: float,
        height: float,
        *,
        font_face: str = DEFAULT_FONT_FACE,
        font_size: float = DEFAULT_FONT_SIZE,
    ) -> AbstractContextManager[BaseCanvas]:
        """Open a single-page PDF and return a context manager yielding a canvas on it."""
        raise CanvasUnavailableError(f"{cls.engine} canvas cannot write PDF documents")

    @abstractmethod
    def measure_extents(self, text: str, font_size: float) -> TextExtents:
        """Measure ``text`` at ``font_size`` without changing the current font state."""

    @abstractmethod
    def save(self) -> None: ...

    @abstractmethod
    def restore(self) -> None: ...

    @abstractmethod
    def translate(self, dx: float, dy: float) -> None: ...

    @abstractmethod
    def scale(self, sx: float, sy: float) -> None: ...

    @abstractmethod
    def move_to(self, x: float, y: float) -> None: ...

    @abstractmethod
    def show_text(self, text: str) -> None: ...

    @abstractmethod
    def draw_lines(self, lines: Sequence[Line], line_width: float) -> None:
        """Stroke straight black segments ``(x0, y0, x1, y1)``."""

    def set_font_size(self, font_size: float) -> None:
        self.font_size = float(font_size)

    @contextmanager
    def transform_scope(self) -> Iterator[BaseCanvas]:
        """Save the transform and font state; restore it on every exit path."""
        saved_size = self.font_size
        self.save()
        try:
            yield self
        finally:
            self.restore()
            self.set_font_size(saved_size)
