"""Polynomial interpolation analysis: Lagrange, Newton and Hermite on uniform and Chebyshev nodes."""

__version__ = "0.1.0"