"""
Print every built-in Mandelbrot plot in order.

Run:
    python -m scripts.run_all

Options:
    --vectorized    Evaluate grids with numpy
    --only NAME     Print a single preset (repeatable)
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mandelplot.config import PRESETS
from mandelplot.logging_config import setup_logging
from mandelplot.render import render_plot

logger = logging.getLogger("mandelplot.run_all")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print the built-in Mandelbrot plots")
    parser.add_argument(
        "--vectorized",
        action="store_true",
        help="Evaluate grids with numpy instead of point by point",
    )
    parser.add_argument(
        "--only",
        action="append",
        choices=list(PRESETS),
        help="Print only this preset (may be given more than once)",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    names = args.only or list(PRESETS)
    for name in names:
        config = replace(PRESETS[name], vectorized=args.vectorized)
        logger.info(
            "plot %s: %dx%d, %d iterations",
            name, config.horizontal_count, config.vertical_count, config.iterations,
        )
        for line in render_plot(config):
            print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
