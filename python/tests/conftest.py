# this_file: python/tests/conftest.py

"""Shared fixtures: a recording canvas with linear, predictable metrics."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
PYTHON_PACKAGE = PROJECT_ROOT / "python"
if str(PYTHON_PACKAGE) not in sys.path:
    sys.path.insert(0, str(PYTHON_PACKAGE))

from autofit.canvases.base import BaseCanvas  # noqa: E402
from autofit.geometry import TextExtents  # noqa: E402


class RecordingCanvas(BaseCanvas):
    """
    Canvas whose ink box grows linearly with font size.

    Each non-whitespace character is ``em_width * size`` wide and the line is
    ``em_height * size`` tall. Whitespace has no ink. With ``strict_utf8`` text
    that does not encode to UTF-8 is rejected, as C-backed canvases do.
    """

    engine = "recording"

    def __init__(
        self,
        *,
        font_size=10.0,
        em_width=0.5,
        em_height=1.0,
        x_bearing=0.0,
        y_bearing=0.0,
        fail_on_show=False,
        strict_utf8=False,
    ):
        super().__init__(font_face="test", font_size=font_size)
        self.em_width = em_width
        self.em_height = em_height
        self.bearings = (x_bearing, y_bearing)
        self.fail_on_show = fail_on_show
        self.strict_utf8 = strict_utf8
        self.ops = []
        self.measured = []
        self.depth = 0

    def measure_extents(self, text, font_size):
        self.measured.append((text, font_size))
        if self.strict_utf8:
            text.encode("utf-8")
        ink = len(text.strip())
        if not ink:
            return TextExtents(0.0, 0.0, 0.0, 0.0)
        return TextExtents(
            x_bearing=self.bearings[0] * font_size,
            y_bearing=self.bearings[1] * font_size,
            width=self.em_width * font_size * ink,
            height=self.em_height * font_size,
        )

    def save(self):
        self.depth += 1
        self.ops.append(("save",))

    def restore(self):
        self.depth -= 1
        self.ops.append(("restore",))

    def translate(self, dx, dy):
        self.ops.append(("translate", dx, dy))

    def scale(self, sx, sy):
        self.ops.append(("scale", sx, sy))

    def move_to(self, x, y):
        self.ops.append(("move_to", x, y))

    def show_text(self, text):
        if self.fail_on_show:
            raise RuntimeError("glyph emission failed")
        if self.strict_utf8:
            text.encode("utf-8")
        self.ops.append(("show_text", text, self.font_size))

    def draw_lines(self, lines, line_width):
        self.ops.append(("draw_lines", list(lines), line_width))

    def op_names(self):
        return [op[0] for op in self.ops]


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def make_canvas():
    return RecordingCanvas
