import logging

import numpy as np

logger = logging.getLogger(__name__)

ESCAPE_THRESHOLD = 2.0
DEFAULT_ITERATIONS = 30


def quadratic_map(c):
    """Return f(z) = z^2 + c for a fixed parameter c."""
    return lambda z: z * z + c


def orbit(c, iterations: int = DEFAULT_ITERATIONS):
    """
    Iterator over the first `iterations` iterates of z_{n+1} = z_n^2 + c from z_0 = 0.

    z_0 itself is not yielded. Works for any type with +, * and a zero
    obtainable as c * 0 (int, float, complex, numpy scalars). A negative
    count raises ValueError here, before any iterate is requested.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")
    return _iterates(quadratic_map(c), c * 0, iterations)


def _iterates(f, z, iterations: int):
    for _ in range(iterations):
        z = f(z)
        yield z


def is_bounded(c, iterations: int = DEFAULT_ITERATIONS) -> bool:
    """
    Escape-time test: True iff |z_n| <= 2 for every iterate n = 1..iterations.

    Vacuously True for iterations == 0. Stops at the first escaped iterate,
    since |z| > 2 never comes back under this map.
    """
    return all(abs(z) <= ESCAPE_THRESHOLD for z in orbit(c, iterations))


def escape_mask(points, iterations: int = DEFAULT_ITERATIONS) -> np.ndarray:
    """
    Vectorized is_bounded over an array of complex parameters.

    Returns a bool array of the same shape. Escaped points are frozen so
    their values never overflow.
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")

    C = np.asarray(points, dtype=np.complex128)
    Z = np.zeros_like(C)
    bounded = np.ones(C.shape, dtype=bool)

    for i in range(iterations):
        # only points still inside are updated
        Z[bounded] = Z[bounded] * Z[bounded] + C[bounded]
        bounded &= np.abs(Z) <= ESCAPE_THRESHOLD

        if not np.any(bounded):
            logger.debug("all points escaped after %d iterations", i + 1)
            break

    return bounded
