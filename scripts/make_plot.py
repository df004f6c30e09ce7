import argparse
import logging
import os
import sys
from dataclasses import replace

# Ensure repository root is on sys.path so `from mandelplot...` works when running
# this script directly (e.g. `python scripts/make_plot.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from mandelplot.config import INTERESTING_TICKS, PRESETS, PlotConfig, get_preset
from mandelplot.grid import InvalidGrid
from mandelplot.iterators import DEFAULT_ITERATIONS
from mandelplot.logging_config import setup_logging
from mandelplot.render import build_plot, render_plot
from mandelplot.summary import row_summary
from mandelplot.utils import parse_complex

logger = logging.getLogger("mandelplot.make_plot")


def build_parser():
    parser = argparse.ArgumentParser(description="Print an ASCII plot of the Mandelbrot set")
    parser.add_argument("--preset", type=str, choices=sorted(PRESETS),
                        help="use one of the built-in regions")
    # pass negative corners as --upper-left=-3+2j
    parser.add_argument("--upper-left", type=str, default=None, help="default -3+2j")
    parser.add_argument("--lower-right", type=str, default=None, help="default 1-2j")
    parser.add_argument("--width", type=int, default=None, help="points per row (default 50)")
    parser.add_argument("--height", type=int, default=None, help="number of rows (default 50)")
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument("--imag", action="store_true", default=None,
                        help="suffix each row with its imaginary coordinate")
    parser.add_argument("--ticks", action="store_true", default=None,
                        help="print real-axis labels under the plot")
    parser.add_argument("--vectorized", action="store_true",
                        help="evaluate the grid with numpy instead of point by point")
    parser.add_argument("--summary", action="store_true",
                        help="print per-row bounded counts after the plot")
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("--log-file", type=str, default=None)
    return parser


# options that describe a custom region; --preset replaces all of them
REGION_OPTIONS = {
    "upper_left": "--upper-left",
    "lower_right": "--lower-right",
    "width": "--width",
    "height": "--height",
    "imag": "--imag",
    "ticks": "--ticks",
}


def config_from_args(args) -> PlotConfig:
    if args.preset:
        config = get_preset(args.preset)
    else:
        config = PlotConfig(
            upper_left=parse_complex(args.upper_left or "-3+2j"),
            lower_right=parse_complex(args.lower_right or "1-2j"),
            horizontal_count=50 if args.width is None else args.width,
            vertical_count=50 if args.height is None else args.height,
            show_imaginary=bool(args.imag),
            ticks=INTERESTING_TICKS if args.ticks else (),
        )

    overrides = {"vectorized": args.vectorized}
    if args.iterations is not None:
        overrides["iterations"] = args.iterations
    return replace(config, **overrides)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.preset:
        given = [flag for dest, flag in REGION_OPTIONS.items() if getattr(args, dest) is not None]
        if given:
            parser.error(f"--preset cannot be combined with {', '.join(given)}")

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        config = config_from_args(args)
        if config.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {config.iterations}")
        grid, plot = build_plot(config)
    except (InvalidGrid, ValueError) as e:
        logger.error("%s", e)
        return 2

    for line in render_plot(config, grid, plot):
        print(line)

    if args.summary:
        print(row_summary(grid, plot).to_string(index=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
