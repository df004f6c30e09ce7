"""
Tests for grid evaluation and the text rendering helpers.
"""

from dataclasses import replace
from pathlib import Path
import sys

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from mandelplot.config import INTERESTING_TICKS, PRESETS, PlotConfig, get_preset
from mandelplot.grid import InvalidGrid, make_complex_grid, make_interval
from mandelplot.render import (
    build_plot, evaluate_grid, map_grid, plot_value, render_indices,
    render_plot, render_rows,
)


def test_map_grid_shape_and_order():
    grid = make_complex_grid(complex(0.0, 1.0), complex(3.0, -1.0), 4, 3)
    plot = map_grid(grid, lambda c: c.imag > 0 and c.real >= 2.0)

    assert plot.shape == (3, 4)
    expected = np.array([
        [False, False, True, True],
        [False, False, False, False],
        [False, False, False, False],
    ])
    np.testing.assert_array_equal(plot, expected)


def test_evaluate_grid_vectorized_agrees():
    grid = make_complex_grid(complex(-3.0, 1.0), complex(1.0, -1.0), 60, 21)
    np.testing.assert_array_equal(
        evaluate_grid(grid, 30),
        evaluate_grid(grid, 30, vectorized=True),
    )


def test_plot_value():
    assert plot_value(True) == "*"
    assert plot_value(False) == " "
    assert plot_value(True, "#", ".") == "#"
    assert plot_value(False, "#", ".") == "."


def test_render_rows():
    plot = np.array([[True, False, True], [False, False, False]])
    assert render_rows(plot) == ["* *", "   "]


def test_render_rows_with_imaginary_suffix():
    grid = make_complex_grid(complex(-1.0, 1.0), complex(1.0, -1.0), 3, 3)
    plot = np.ones(grid.shape, dtype=bool)
    lines = render_rows(plot, grid)
    assert lines == ["***|1.0", "***|0.0", "***|-1.0"]


def test_render_indices_basic():
    axis = make_interval(-3.0, 1.0, 5)  # -3, -2, -1, 0, 1
    assert render_indices([-3.0], axis) == "|-3.00"
    assert render_indices([-1.0], axis) == "  |-1.00"


def test_render_indices_sorts_ticks_and_stops_at_width():
    axis = make_interval(-3.0, 1.0, 50)
    line = render_indices(list(reversed(INTERESTING_TICKS)), axis)
    assert line == render_indices(INTERESTING_TICKS, axis)
    assert line.startswith("|-3.00")
    # labels only start inside the plot width
    assert len(line) < 50 + len("|-0.00")


def test_render_indices_no_ticks():
    axis = make_interval(0.0, 1.0, 10)
    assert render_indices([], axis) == ""


def test_render_indices_label_uses_column_value():
    axis = make_interval(0.0, 1.0, 11)  # 0.0, 0.1, ..., 1.0
    # first column >= 0.25 is 0.3
    assert render_indices([0.25], axis) == "   |0.30"


def test_render_indices_square_axis():
    grid, _ = build_plot(PRESETS["square"])
    line = render_indices(INTERESTING_TICKS, grid.real_axis_interval())

    # the 1.00 tick is never reached: the 0.84 label runs past column 49
    assert line == "|-3.00       |-1.94      |-0.96|-0.47|0.02|0.43|0.84"


def test_render_indices_wide_axis():
    grid = make_complex_grid(complex(-3.0, 1.0), complex(1.0, -1.0), 110, 55)
    line = render_indices(INTERESTING_TICKS, grid.real_axis_interval())

    prefix = (
        "|-3.00" + " " * 22 + "|-1.97" + " " * 21 + "|-0.98"
        + " " + "|-0.72" + " " * 14 + "|0.01"
        + "  " + "|0.27" + "  " + "|0.52" + " " * 8
    )
    assert line.startswith(prefix)
    # last column is 1.0 up to rounding: labelled, or left blank at the edge
    assert line[len(prefix):] in ("|1.00", " ")


def test_square_preset_shape():
    config = get_preset("square")
    lines = render_plot(config)

    # 50 rows + tick line
    assert len(lines) == 51
    assert lines[0].endswith("|2.0")
    assert float(lines[49].split("|")[1]) == pytest.approx(-2.0)
    for line in lines[:50]:
        glyphs = line.split("|")[0]
        assert len(glyphs) == 50
        assert set(glyphs) <= {"*", " "}


def test_square_preset_contains_set():
    grid, plot = build_plot(PRESETS["square"])
    assert plot.shape == grid.shape
    assert plot.any()
    # the top and bottom rows (|imag| = 2) are outside the set
    assert not plot[0].any()
    assert not plot[-1].any()
    # nothing left of -2 on the real axis is bounded
    axis = grid.real_axis_interval()
    left = [i for i in range(axis.count) if axis.at(i) < -2.0]
    assert not plot[:, left].any()


def test_best_preset_has_title():
    lines = render_plot(replace(PRESETS["best"], vectorized=True))
    assert lines[0] == "Best mandelplot!"
    assert len(lines) == 1 + 55
    assert all(len(line) == 220 for line in lines[1:])


def test_render_plot_custom_glyphs():
    config = PlotConfig(
        upper_left=complex(-0.5, 0.25),
        lower_right=complex(0.0, -0.25),
        horizontal_count=4,
        vertical_count=3,
        bounded_glyph="#",
        unbounded_glyph=".",
    )
    assert render_plot(config) == ["####", "####", "####"]


def test_render_plot_invalid_grid():
    config = PlotConfig(complex(-3.0, 2.0), complex(1.0, -2.0), 50, 1)
    with pytest.raises(InvalidGrid, match="vertical_count"):
        render_plot(config)


def test_get_preset_unknown():
    with pytest.raises(KeyError, match="square"):
        get_preset("nope")
