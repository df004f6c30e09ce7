"""
Uniform sampling grids over the real line and the complex plane.

An IntervalGrid holds only its defining parameters (start, end, count) and
computes each point on demand:

    value(i) = start + step * i,   step = (end - start) / (count - 1)

A ComplexGrid stacks IntervalGrids over the real axis, one per row, with the
imaginary part decreasing from the upper-left corner to the lower-right one
(row 0 is the top of the plot).

Main entrypoints:
    make_interval(start, end, count) -> IntervalGrid
    make_complex_grid(upper_left, lower_right, horizontal_count, vertical_count) -> ComplexGrid
"""

from __future__ import annotations

import cmath
import logging
import numbers
from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

Number = Union[float, complex]


class InvalidGrid(ValueError):
    """A grid was requested with fewer than two points or non-finite bounds."""


class IndexOutOfRange(IndexError):
    """An index outside [0, count) was passed to a grid accessor."""


def _check_count(name: str, count) -> int:
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise InvalidGrid(f"{name} must be an integer, got {count!r}")
    if count < 2:
        raise InvalidGrid(f"{name} must be >= 2, got {count}")
    return int(count)


def _check_finite(name: str, value) -> None:
    if not cmath.isfinite(complex(value)):
        raise InvalidGrid(f"{name} must be finite, got {value!r}")


def _check_index(index, count: int, what: str = "index") -> int:
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise TypeError(f"{what} must be an integer, got {type(index).__name__}")
    if not 0 <= index < count:
        raise IndexOutOfRange(f"{what} {index} out of range [0, {count})")
    return int(index)


@dataclass(frozen=True)
class IntervalGrid:
    start: Number
    end: Number
    count: int
    step: Number = field(init=False)

    def __post_init__(self):
        _check_count("count", self.count)
        _check_finite("start", self.start)
        _check_finite("end", self.end)
        object.__setattr__(self, "step", (self.end - self.start) / (self.count - 1))

    def at(self, i: int) -> Number:
        i = _check_index(i, self.count)
        return self.start + self.step * i

    def values(self) -> np.ndarray:
        """All points as a 1D array, computed with the same formula as at()."""
        return np.array([self.at(i) for i in range(self.count)])

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, i: int) -> Number:
        return self.at(i)

    def __iter__(self) -> Iterator[Number]:
        for i in range(self.count):
            yield self.start + self.step * i


@dataclass(frozen=True)
class ComplexGrid:
    upper_left: complex
    lower_right: complex
    horizontal_count: int
    vertical_count: int
    vertical_step: float = field(init=False)

    def __post_init__(self):
        _check_count("horizontal_count", self.horizontal_count)
        _check_count("vertical_count", self.vertical_count)
        _check_finite("upper_left", self.upper_left)
        _check_finite("lower_right", self.lower_right)
        object.__setattr__(self, "upper_left", complex(self.upper_left))
        object.__setattr__(self, "lower_right", complex(self.lower_right))
        object.__setattr__(
            self,
            "vertical_step",
            (self.upper_left.imag - self.lower_right.imag) / (self.vertical_count - 1),
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.vertical_count, self.horizontal_count)

    def imaginary_at(self, r: int) -> float:
        r = _check_index(r, self.vertical_count, "row")
        return self.upper_left.imag - self.vertical_step * r

    def row(self, r: int) -> IntervalGrid:
        imag = self.imaginary_at(r)
        return IntervalGrid(
            complex(self.upper_left.real, imag),
            complex(self.lower_right.real, imag),
            self.horizontal_count,
        )

    def real_axis_interval(self) -> IntervalGrid:
        """Horizontal extent projected on the real axis (used for tick labels)."""
        return IntervalGrid(self.upper_left.real, self.lower_right.real, self.horizontal_count)

    def values(self) -> np.ndarray:
        """Row-major 2D complex array, cell (r, i) equal to row(r).at(i)."""
        out = np.empty(self.shape, dtype=np.complex128)
        for r, points in enumerate(self):
            out[r, :] = list(points)
        return out

    def __len__(self) -> int:
        return self.vertical_count

    def __getitem__(self, r: int) -> IntervalGrid:
        return self.row(r)

    def __iter__(self) -> Iterator[IntervalGrid]:
        for r in range(self.vertical_count):
            yield self.row(r)


def make_interval(start: Number, end: Number, count: int) -> IntervalGrid:
    return IntervalGrid(start, end, count)


def make_complex_grid(
    upper_left: complex,
    lower_right: complex,
    horizontal_count: int,
    vertical_count: int,
) -> ComplexGrid:
    grid = ComplexGrid(upper_left, lower_right, horizontal_count, vertical_count)
    logger.debug(
        "complex grid %s -> %s, %dx%d",
        grid.upper_left, grid.lower_right, horizontal_count, vertical_count,
    )
    return grid
