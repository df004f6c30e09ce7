import numpy as np
import pandas as pd


def row_summary(grid, plot) -> pd.DataFrame:
    """
    Per-row count of bounded points.

    Columns: row, imag, bounded, fraction (bounded / horizontal_count).
    """
    plot = np.asarray(plot, dtype=bool)
    if plot.shape != grid.shape:
        raise ValueError(f"plot shape {plot.shape} does not match grid shape {grid.shape}")

    bounded = plot.sum(axis=1)
    df = pd.DataFrame({
        "row": np.arange(grid.vertical_count),
        "imag": [grid.imaginary_at(r) for r in range(grid.vertical_count)],
        "bounded": bounded.astype(int),
    })
    df["fraction"] = df["bounded"] / grid.horizontal_count
    return df
