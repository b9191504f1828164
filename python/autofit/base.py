# this_file: python/autofit/base.py
"""
Exception hierarchy for fitting and canvas backends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .geometry import FitResult


class AutofitError(Exception):
    """Base class for errors raised while fitting a single text unit."""


class DegenerateRectangleError(AutofitError, ValueError):
    """Target rectangle has a zero, negative or non-finite dimension."""


class EmptyTextError(AutofitError, ValueError):
    """Text unit is empty or has no visible ink to fit."""


class NonConvergenceError(AutofitError):
    """
    Fitting loop hit its iteration cap.

    The last scale/font size reached is kept on ``result`` so callers can
    still draw with it or substitute a fallback.
    """

    def __init__(self, message: str, result: FitResult | None = None):
        super().__init__(message)
        self.result = result


class CanvasDrawError(AutofitError):
    """Canvas backend raised while measuring or drawing one text unit."""


class CanvasInitError(RuntimeError):
    """Canvas backend failed to initialize or returned unusable output."""


class CanvasUnavailableError(RuntimeError):
    """Requested canvas backend is not available on this system."""
