# this_file: python/autofit/page.py
"""
Page driver: lay text units out on a grid of cells and fit each one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import numpy as np
from loguru import logger

from .base import AutofitError, CanvasDrawError, NonConvergenceError
from .canvases import get_canvas_class
from .canvases.base import BaseCanvas, Line
from .constants import (
    DEFAULT_FONT_FACE,
    DEFAULT_FONT_SIZE,
    GRID_COLS,
    GRID_LINE_WIDTH,
    GRID_ROWS,
    PAGE_HEIGHT,
    PAGE_WIDTH,
)
from .fit import FitConfig, draw_fitted, fit
from .geometry import FitResult, Rectangle
from .segment import split_by_codepoint, split_by_line

_SURROGATES = re.compile("[\ud800-\udfff]")


class SplitMode(str, Enum):
    CHAR = "char"
    LINE = "line"


@dataclass(frozen=True, slots=True)
class PageLayout:
    """Page size in points and the rows x cols grid of cells laid over it."""

    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    rows: int = GRID_ROWS
    cols: int = GRID_COLS

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid must have at least one cell, got {self.rows}x{self.cols}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid page dimensions width={self.width} height={self.height}")

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    def _edges(self) -> tuple[np.ndarray, np.ndarray]:
        xs = np.linspace(0.0, self.width, self.cols + 1)
        ys = np.linspace(0.0, self.height, self.rows + 1)
        return xs, ys

    def cells(self) -> list[Rectangle]:
        """Cell rectangles in row-major order."""
        xs, ys = self._edges()
        return [
            Rectangle(float(xs[col]), float(ys[row]), float(xs[col + 1]), float(ys[row + 1]))
            for row in range(self.rows)
            for col in range(self.cols)
        ]

    def grid_lines(self) -> list[Line]:
        """Interior separator lines spanning the full page."""
        xs, ys = self._edges()
        lines: list[Line] = [(0.0, float(y), self.width, float(y)) for y in ys[1:-1]]
        lines.extend((float(x), 0.0, float(x), self.height) for x in xs[1:-1])
        return lines


def draw_grid(canvas: BaseCanvas, layout: PageLayout, line_width: float = GRID_LINE_WIDTH) -> None:
    canvas.draw_lines(layout.grid_lines(), line_width)


def layout_units(text: str | bytes, mode: SplitMode | str = SplitMode.CHAR) -> list[str]:
    """
    Split ``text`` into drawable units.

    Bytes are segmented as-is and each unit decoded with replacement. Lone
    surrogates in ``str`` input (undecodable ``sys.argv`` bytes on POSIX) are
    replaced as well, so malformed input degrades to U+FFFD instead of failing.
    """
    mode = SplitMode(mode)
    units = split_by_codepoint(text) if mode is SplitMode.CHAR else split_by_line(text)
    if isinstance(text, bytes):
        return [unit.decode("utf-8", errors="replace") for unit in units]
    return [_SURROGATES.sub("\ufffd", unit) for unit in units]


@dataclass(slots=True)
class CellOutcome:
    index: int
    text: str
    rect: Rectangle
    result: FitResult | None = None
    error: AutofitError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None


@dataclass(slots=True)
class PageReport:
    """What happened to every unit handed to :func:`render_units`."""

    cells: list[CellOutcome] = field(default_factory=list)
    dropped: list[str] = field(default_factory=list)
    engine: str = ""

    @property
    def fitted(self) -> int:
        return sum(1 for cell in self.cells if cell.ok)

    @property
    def failed(self) -> list[CellOutcome]:
        return [cell for cell in self.cells if cell.error is not None]

    def summary(self) -> dict[str, object]:
        return {
            "engine": self.engine,
            "cells": len(self.cells),
            "fitted": self.fitted,
            "failed": [
                {"index": cell.index, "text": cell.text, "error": str(cell.error)}
                for cell in self.failed
            ],
            "dropped": len(self.dropped),
        }


def _render_cell(
    canvas: BaseCanvas,
    text: str,
    rect: Rectangle,
    config: FitConfig | None,
    draw_best_effort: bool,
) -> FitResult:
    try:
        try:
            result = fit(text, rect, canvas, config)
        except NonConvergenceError as exc:
            if draw_best_effort and exc.result is not None:
                draw_fitted(canvas, text, rect, exc.result)
            raise
        draw_fitted(canvas, text, rect, result)
        return result
    except AutofitError:
        raise
    except Exception as exc:
        raise CanvasDrawError(f"{canvas.engine} canvas failed on {text!r}: {exc}") from exc


def render_units(
    canvas: BaseCanvas,
    units: list[str],
    cells: list[Rectangle],
    config: FitConfig | None = None,
    *,
    draw_best_effort: bool = True,
) -> PageReport:
    """
    Fit and draw each unit into its cell.

    A fitting or backend error on one cell is logged and recorded; the
    remaining cells are still processed. With ``draw_best_effort`` a
    non-converged cell is drawn with the last placement the loop reached.
    """
    report = PageReport(engine=canvas.engine)
    if len(units) > len(cells):
        report.dropped = list(units[len(cells):])
        logger.warning(
            f"{len(report.dropped)} text unit(s) do not fit on the page "
            f"({len(units)} units, {len(cells)} cells)"
        )

    for index, (text, rect) in enumerate(zip(units, cells)):
        outcome = CellOutcome(index=index, text=text, rect=rect)
        try:
            outcome.result = _render_cell(canvas, text, rect, config, draw_best_effort)
        except NonConvergenceError as exc:
            outcome.error = exc
            logger.warning(f"Cell {index}: {exc}")
        except AutofitError as exc:
            outcome.error = exc
            logger.warning(f"Cell {index}: skipped {text!r}: {exc}")
        report.cells.append(outcome)

    logger.debug(f"Rendered {report.fitted}/{len(report.cells)} cells")
    return report


def render_pdf(
    text: str | bytes,
    output_path: str | Path,
    *,
    layout: PageLayout | None = None,
    mode: SplitMode | str = SplitMode.CHAR,
    font_face: str = DEFAULT_FONT_FACE,
    font_size: float = DEFAULT_FONT_SIZE,
    engine: str = "auto",
    config: FitConfig | None = None,
) -> PageReport:
    """
    Render ``text`` to a one-page PDF: grid lines, then one unit per cell.

    Returns:
        PageReport describing each cell and the engine that drew them
    """
    layout = layout or PageLayout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    canvas_cls = get_canvas_class(engine)
    units = layout_units(text, mode)
    logger.debug(
        f"Rendering {len(units)} unit(s) on a {layout.rows}x{layout.cols} grid "
        f"with {canvas_cls.engine} to {output_path}"
    )

    with canvas_cls.pdf_document(
        output_path,
        layout.width,
        layout.height,
        font_face=font_face,
        font_size=font_size,
    ) as canvas:
        draw_grid(canvas, layout)
        return render_units(canvas, units, layout.cells(), config)
