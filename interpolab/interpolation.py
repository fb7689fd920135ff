"""Polynomial interpolation by the Lagrange, Newton and Hermite methods."""

import math
import warnings
from collections.abc import Sequence
from itertools import pairwise

from interpolab.function import MAX_NODES

#: Node separations below this are treated as coincident nodes.
_TOLERANCE = 1e-15


def _check_lengths(nodes: Sequence[float], *others: Sequence[float]) -> None:
    for other in others:
        if len(other) != len(nodes):
            raise ValueError(
                f"length mismatch: {len(nodes)} nodes but {len(other)} values"
            )


def _check_limit(n: int) -> None:
    if n > MAX_NODES:
        raise ValueError(f"too many nodes: {n} > {MAX_NODES}")


def lagrange(x: float, nodes: Sequence[float], values: Sequence[float]) -> float:
    """Evaluate the Lagrange interpolating polynomial through the nodes at ``x``.

    With no nodes the result is 0.0. Coincident nodes give NaN unless ``x``
    lies on the repeated node, in which case the affected basis term is zero.
    """
    _check_lengths(nodes, values)
    result = 0.0
    for i, (xi, yi) in enumerate(zip(nodes, values)):
        basis = 1.0
        for j, xj in enumerate(nodes):
            if i == j:
                continue
            denom = xi - xj
            if abs(denom) >= _TOLERANCE:
                basis *= (x - xj) / denom
                continue
            warnings.warn(
                f"coincident Lagrange nodes {i} and {j} ({xi:g}, {xj:g})",
                RuntimeWarning,
                stacklevel=2,
            )
            if abs(x - xj) < _TOLERANCE:
                basis = 0.0
            else:
                basis = math.nan
            break
        if math.isnan(basis):
            return math.nan
        result += yi * basis
    return result


def _newton_coefficients(nodes: Sequence[float], values: Sequence[float]) -> list[float]:
    """Return the divided differences f[x0], f[x0,x1], ..., f[x0..x_{n-1}]."""
    column = list(values)
    coefficients = [column[0]]
    for span in range(1, len(nodes)):
        next_column = []
        for (lo, hi), (x_lo, x_hi) in zip(pairwise(column), zip(nodes, nodes[span:])):
            denom = x_hi - x_lo
            if abs(denom) < _TOLERANCE:
                warnings.warn(
                    f"coincident Newton nodes ({x_lo:g}, {x_hi:g})",
                    RuntimeWarning,
                    stacklevel=3,
                )
                next_column.append(math.nan)
            else:
                next_column.append((hi - lo) / denom)
        column = next_column
        coefficients.append(column[0])
    return coefficients


def newton(x: float, nodes: Sequence[float], values: Sequence[float]) -> float:
    """Evaluate the Newton divided-difference polynomial through the nodes at ``x``.

    Raises ValueError for no nodes or more than MAX_NODES; coincident nodes give NaN.
    """
    _check_lengths(nodes, values)
    n = len(nodes)
    if n < 1:
        raise ValueError("Newton interpolation needs at least one node")
    _check_limit(n)

    coefficients = _newton_coefficients(nodes, values)
    result = coefficients[0]
    product = 1.0
    for coefficient, node in zip(coefficients[1:], nodes):
        product *= x - node
        if math.isnan(coefficient):
            return math.nan
        result += coefficient * product
    return result


def _hermite_coefficients(
    z: list[float], values: Sequence[float], derivatives: Sequence[float]
) -> list[float]:
    """Return the generalised divided differences over the doubled nodes ``z``."""
    column = [v for v in values for _ in range(2)]
    coefficients = [column[0]]
    for span in range(1, len(z)):
        next_column = []
        pairs = zip(pairwise(column), zip(z, z[span:]))
        for row, ((lo, hi), (z_lo, z_hi)) in enumerate(pairs):
            denom = z_hi - z_lo
            if abs(denom) < _TOLERANCE:
                if span == 1 and row % 2 == 0:
                    next_column.append(derivatives[row // 2])
                else:
                    warnings.warn(
                        f"unexpected zero denominator in Hermite table "
                        f"at row {row}, span {span}; using 0.0",
                        RuntimeWarning,
                        stacklevel=3,
                    )
                    next_column.append(0.0)
            elif math.isnan(lo) or math.isnan(hi):
                next_column.append(math.nan)
            else:
                next_column.append((hi - lo) / denom)
        column = next_column
        coefficients.append(column[0])
    return coefficients


def hermite(
    x: float,
    nodes: Sequence[float],
    values: Sequence[float],
    derivatives: Sequence[float],
) -> float:
    """Evaluate the Hermite polynomial matching values and first derivatives at ``x``.

    The polynomial has degree 2n-1 for n nodes. With no nodes the result is 0.0;
    more than MAX_NODES nodes raises ValueError.
    """
    _check_lengths(nodes, values, derivatives)
    n = len(nodes)
    if n == 0:
        return 0.0
    _check_limit(n)

    z = [node for node in nodes for _ in range(2)]
    coefficients = _hermite_coefficients(z, values, derivatives)
    if math.isnan(coefficients[0]):
        return math.nan

    result = coefficients[0]
    product = 1.0
    for coefficient, zk in zip(coefficients[1:], z):
        product *= x - zk
        if math.isnan(coefficient) or math.isnan(product):
            return math.nan
        result += coefficient * product
        if math.isnan(result):
            break
    return result