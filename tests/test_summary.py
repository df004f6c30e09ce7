import numpy as np
import pytest
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from mandelplot.grid import make_complex_grid
from mandelplot.summary import row_summary


def test_row_summary_columns():
    grid = make_complex_grid(complex(-1.0, 1.0), complex(1.0, -1.0), 4, 3)
    plot = np.array([
        [True, False, False, False],
        [True, True, True, True],
        [False, False, False, False],
    ])
    df = row_summary(grid, plot)

    assert list(df.columns) == ["row", "imag", "bounded", "fraction"]
    assert df["bounded"].tolist() == [1, 4, 0]
    np.testing.assert_allclose(df["fraction"], [0.25, 1.0, 0.0])
    np.testing.assert_allclose(df["imag"], [1.0, 0.0, -1.0])


def test_row_summary_shape_mismatch():
    grid = make_complex_grid(complex(-1.0, 1.0), complex(1.0, -1.0), 4, 3)
    with pytest.raises(ValueError, match="shape"):
        row_summary(grid, np.zeros((3, 5), dtype=bool))
