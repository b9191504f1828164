# this_file: python/autofit/constants.py
"""
Shared constants for fitting and page layout.
"""

from __future__ import annotations

from typing import Final

# Fit band: a scaled dimension is "fit" inside [FIT_LOW, FIT_HIGH] x target.
FIT_LOW: Final[float] = 0.9
FIT_HIGH: Final[float] = 1.1

# Multiplicative steps applied per iteration.
GROW_FACTOR: Final[float] = 1.1
SHRINK_FACTOR: Final[float] = 0.9

MAX_ITERATIONS: Final[int] = 1000

# A4 in PostScript points.
PAGE_WIDTH: Final[float] = 595.0
PAGE_HEIGHT: Final[float] = 842.0
GRID_ROWS: Final[int] = 2
GRID_COLS: Final[int] = 3
GRID_LINE_WIDTH: Final[float] = 3.0

DEFAULT_FONT_FACE: Final[str] = "serif"
DEFAULT_FONT_SIZE: Final[float] = 40.0

ENV_ENGINE: Final[str] = "AUTOFIT_ENGINE"
ENV_FONT_FACE: Final[str] = "AUTOFIT_FONT_FACE"
ENV_POLICY: Final[str] = "AUTOFIT_POLICY"
ENV_MAX_ITERATIONS: Final[str] = "AUTOFIT_MAX_ITERATIONS"
ENV_ALLOW_SHRINK: Final[str] = "AUTOFIT_ALLOW_SHRINK"
