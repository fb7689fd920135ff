"""Plain-text data files: point lists for plotting and per-node-count error tables."""

import os
from collections.abc import Sequence

#: Header line of the error tables.
ERROR_CSV_HEADER = "NumNodes,MaxAbsoluteError,MeanSquaredError"


def _check_same_length(first: Sequence[float], second: Sequence[float], what: str) -> None:
    if len(first) != len(second):
        raise ValueError(f"length mismatch: {len(first)} vs {len(second)} {what}")


def write_points(
    path: str | os.PathLike[str], xs: Sequence[float], ys: Sequence[float]
) -> None:
    """Write ``(x, y)`` pairs, one space-separated pair per line, six decimals each.

    Raises ValueError if the sequences differ in length and OSError if the file
    cannot be written.
    """
    _check_same_length(xs, ys, "coordinates")
    with open(path, "w", encoding="utf-8") as out:
        out.writelines(f"{x:f} {y:f}\n" for x, y in zip(xs, ys))


def write_error_csv(
    path: str | os.PathLike[str],
    max_errors: Sequence[float],
    mse: Sequence[float],
) -> None:
    """Write a CSV table of maximum absolute error and MSE for node counts 1..n.

    Row ``i`` (counting from 1) holds the errors measured with ``i`` nodes.
    Raises ValueError if the sequences differ in length and OSError if the file
    cannot be written.
    """
    _check_same_length(max_errors, mse, "error values")
    with open(path, "w", encoding="utf-8") as out:
        out.write(ERROR_CSV_HEADER + "\n")
        out.writelines(
            f"{count},{max_error:.10e},{squared:.10e}\n"
            for count, (max_error, squared) in enumerate(zip(max_errors, mse), start=1)
        )