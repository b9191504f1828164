#!/usr/bin/env python3
# this_file: examples/basic_render.py
"""Basic rendering example for autofit: six characters on a 2x3 A4 grid."""

import sys

try:
    import autofit
except ImportError:
    print("Error: autofit not installed. Install with: pip install -e .")
    sys.exit(1)


def main():
    """Render a few scripts, one character per cell, with both fitting policies."""
    print(f"autofit version: {autofit.__version__}")
    print(f"Available engines: {autofit.available_engines()}")

    texts = [
        ("テスト森鷗外", "japanese.pdf"),
        ("abあいう漢字", "mixed.pdf"),
        ("😃𠮷Ωж", "supplementary.pdf"),
    ]

    for policy in autofit.FitPolicy:
        config = autofit.FitConfig(policy=policy)
        for text, filename in texts:
            output = f"{policy.value}-{filename}"
            try:
                report = autofit.render_pdf(text, output, config=config)
            except autofit.CanvasUnavailableError as e:
                print(f"  ✗ {text} -> Error: {e}")
                continue
            mark = "✓" if not report.failed else "✗"
            print(f"  {mark} {text} -> {output} ({report.fitted}/{len(report.cells)} cells)")

    print("\n✓ Basic rendering example complete")


if __name__ == "__main__":
    main()
