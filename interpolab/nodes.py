"""Generation of interpolation nodes on the interval [A, B]."""

import math

from interpolab.function import A, B


def _check_count(n: int) -> None:
    if n < 1:
        raise ValueError(f"number of nodes must be at least 1, got {n}")


def uniform_nodes(n: int) -> list[float]:
    """Return ``n`` evenly spaced nodes covering [A, B].

    A single node sits at the midpoint; otherwise the ends are A and B exactly.
    """
    _check_count(n)
    if n == 1:
        return [(A + B) / 2.0]
    step = (B - A) / (n - 1.0)
    nodes = [A + i * step for i in range(n)]
    nodes[-1] = B
    return nodes


def chebyshev_nodes(n: int) -> list[float]:
    """Return the ``n`` Chebyshev nodes of the first kind mapped to [A, B], ascending."""
    _check_count(n)
    mid = 0.5 * (A + B)
    half = 0.5 * (B - A)
    descending = (
        mid + half * math.cos((2.0 * i + 1.0) * math.pi / (2.0 * n)) for i in range(n)
    )
    return list(descending)[::-1]