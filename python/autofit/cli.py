# this_file: python/autofit/cli.py
"""Command line entry point: render text into a grid of auto-fitted cells."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from loguru import logger

from .base import CanvasInitError, CanvasUnavailableError
from .canvases import describe_available_engines
from .constants import (
    DEFAULT_FONT_FACE,
    DEFAULT_FONT_SIZE,
    ENV_FONT_FACE,
    GRID_COLS,
    GRID_ROWS,
)
from .fit import FitConfig, FitPolicy
from .page import PageLayout, SplitMode, render_pdf

DEFAULT_TEXT = "テスト森鷗外"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="autofit-pdf",
        description="Draw each character (or line) of TEXT centered and scaled into a grid cell of a PDF page.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help=f"Text to render (default: {DEFAULT_TEXT!r}).",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Read UTF-8 text from this file instead of the TEXT argument.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("output.pdf"),
        help="PDF file to write.",
    )
    parser.add_argument("--rows", type=int, default=GRID_ROWS, help="Grid rows.")
    parser.add_argument("--cols", type=int, default=GRID_COLS, help="Grid columns.")
    parser.add_argument(
        "--font",
        default=os.environ.get(ENV_FONT_FACE, DEFAULT_FONT_FACE),
        help="Font family name passed to the backend.",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=DEFAULT_FONT_SIZE,
        help="Starting font size in points.",
    )
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in FitPolicy],
        default=None,
        help="Fitting policy (default: scale-only, or AUTOFIT_POLICY).",
    )
    parser.add_argument(
        "--split",
        choices=[mode.value for mode in SplitMode],
        default=SplitMode.CHAR.value,
        help="One cell per character or per line.",
    )
    parser.add_argument(
        "--engine",
        default="auto",
        help="Canvas engine: auto, cairo or skia.",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        help="Iteration cap for the fitting loop.",
    )
    parser.add_argument(
        "--no-shrink",
        action="store_true",
        help="With font-size-plus-scale, accept overshoot instead of shrinking.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser.parse_args(argv)


def _read_text(args: argparse.Namespace) -> str | bytes:
    if args.input is not None:
        return args.input.read_bytes()
    return args.text if args.text is not None else DEFAULT_TEXT


def main(argv: list[str] | None = None) -> int:
    """Run the renderer from CLI arguments and print a JSON summary."""
    args = parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    try:
        config = FitConfig.from_env(
            policy=args.policy,
            max_iterations=args.max_iterations,
            allow_shrink=False if args.no_shrink else None,
        )
        layout = PageLayout(rows=args.rows, cols=args.cols)
        text = _read_text(args)
    except (ValueError, OSError) as exc:
        logger.error(f"Invalid arguments: {exc}")
        return 2

    try:
        report = render_pdf(
            text,
            args.output,
            layout=layout,
            mode=args.split,
            font_face=args.font,
            font_size=args.font_size,
            engine=args.engine,
            config=config,
        )
    except (CanvasInitError, CanvasUnavailableError) as exc:
        logger.error(f"{exc} (available engines: {describe_available_engines()})")
        return 2

    summary = {"output": str(args.output), **report.summary()}
    print(json.dumps(summary, ensure_ascii=False))
    return 1 if report.failed else 0


if __name__ == "__main__":
    sys.exit(main())
