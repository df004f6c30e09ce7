import logging
import time

import numpy as np

from mandelplot.grid import make_complex_grid
from mandelplot.iterators import escape_mask, is_bounded

logger = logging.getLogger(__name__)


def map_grid(grid, predicate) -> np.ndarray:
    """
    Evaluate predicate(c) at every grid point.

    Returns a (vertical_count, horizontal_count) bool array in row-major
    order, row 0 being the top row of the grid.
    """
    out = np.zeros(grid.shape, dtype=bool)
    for r, points in enumerate(grid):
        for i, c in enumerate(points):
            out[r, i] = bool(predicate(c))
    return out


def evaluate_grid(grid, iterations: int, vectorized: bool = False) -> np.ndarray:
    """Escape-time plot of a ComplexGrid, point by point or with numpy."""
    t0 = time.perf_counter()
    if vectorized:
        plot = escape_mask(grid.values(), iterations)
    else:
        plot = map_grid(grid, lambda c: is_bounded(c, iterations))
    logger.debug(
        "evaluated %dx%d grid (%d iterations, vectorized=%s) in %.3fs",
        grid.vertical_count, grid.horizontal_count, iterations, vectorized,
        time.perf_counter() - t0,
    )
    return plot


def plot_value(predicate: bool, bounded_glyph: str = "*", unbounded_glyph: str = " ") -> str:
    return bounded_glyph if predicate else unbounded_glyph


def render_rows(plot, grid=None, bounded_glyph: str = "*", unbounded_glyph: str = " "):
    """
    Turn a bool plot into printable lines.

    If grid is given, each line ends with "|<imag>" where <imag> is the
    row's imaginary coordinate.
    """
    lines = []
    for r, row in enumerate(np.asarray(plot, dtype=bool)):
        line = "".join(plot_value(v, bounded_glyph, unbounded_glyph) for v in row)
        if grid is not None:
            line += f"|{grid.imaginary_at(r)!r}"
        lines.append(line)
    return lines


def render_indices(ticks, interval) -> str:
    """
    Axis label line for a real IntervalGrid.

    Columns are consumed left to right; at each column k (the current length
    of the line) the next pending tick is labelled "|%.2f" with the column's
    value once interval.at(k) >= tick, otherwise a blank is emitted. A label
    takes several characters, so the following column is the one under its
    end.
    """
    rendered = ""
    pending = iter(sorted(ticks))
    tick = next(pending, None)

    while len(rendered) < interval.count:
        if tick is None:
            break
        value = interval.at(len(rendered))
        if value >= tick:
            rendered += "|%.2f" % value
            tick = next(pending, None)
        else:
            rendered += " "

    return rendered


def build_plot(config):
    """Return (grid, plot) for a PlotConfig. Grid errors surface before any evaluation."""
    grid = make_complex_grid(
        config.upper_left,
        config.lower_right,
        config.horizontal_count,
        config.vertical_count,
    )
    return grid, evaluate_grid(grid, config.iterations, vectorized=config.vectorized)


def render_plot(config, grid=None, plot=None) -> list:
    """Render the plot described by a PlotConfig, evaluating it unless given."""
    if grid is None or plot is None:
        grid, plot = build_plot(config)

    lines = []
    if config.title:
        lines.append(config.title)
    lines.extend(
        render_rows(
            plot,
            grid if config.show_imaginary else None,
            config.bounded_glyph,
            config.unbounded_glyph,
        )
    )
    if config.ticks:
        lines.append(render_indices(config.ticks, grid.real_axis_interval()))
    return lines
