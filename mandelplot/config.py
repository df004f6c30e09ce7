"""
Plot configuration and the built-in example regions.

PRESETS reproduces the classic sequence of plots, in order: a bare square
50x50 overview, the same overview with row coordinates and axis labels, a
wider 110x55 view of the central band and a 220x55 high resolution view of
the same band.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from mandelplot.iterators import DEFAULT_ITERATIONS

# Real-axis positions labelled under the plot
INTERESTING_TICKS = (-3.0, -2.0, -1.0, -0.75, 0.0, 0.25, 0.5, 1.0)


@dataclass(frozen=True)
class PlotConfig:
    upper_left: complex
    lower_right: complex
    horizontal_count: int
    vertical_count: int
    iterations: int = DEFAULT_ITERATIONS
    show_imaginary: bool = False  # suffix each row with "|<imag>"
    ticks: Sequence[float] = ()
    title: Optional[str] = None
    bounded_glyph: str = "*"
    unbounded_glyph: str = " "
    vectorized: bool = False


PRESETS: Dict[str, PlotConfig] = {
    "square_plain": PlotConfig(
        upper_left=complex(-3.0, 2.0),
        lower_right=complex(1.0, -2.0),
        horizontal_count=50,
        vertical_count=50,
    ),
    "square": PlotConfig(
        upper_left=complex(-3.0, 2.0),
        lower_right=complex(1.0, -2.0),
        horizontal_count=50,
        vertical_count=50,
        show_imaginary=True,
        ticks=INTERESTING_TICKS,
    ),
    "wide": PlotConfig(
        upper_left=complex(-3.0, 1.0),
        lower_right=complex(1.0, -1.0),
        horizontal_count=110,
        vertical_count=55,
        show_imaginary=True,
        ticks=INTERESTING_TICKS,
    ),
    "best": PlotConfig(
        upper_left=complex(-3.0, 1.0),
        lower_right=complex(1.0, -1.0),
        horizontal_count=220,
        vertical_count=55,
        title="Best mandelplot!",
    ),
}


def get_preset(name: str) -> PlotConfig:
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset: {name!r} (choose from {', '.join(PRESETS)})") from None
