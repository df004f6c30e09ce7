"""ASCII plots of the Mandelbrot set from an escape-time test on a uniform grid."""

__version__ = "0.1.0"
