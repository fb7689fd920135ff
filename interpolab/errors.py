"""Error measures between true and interpolated values."""

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorResult:
    """Maximum absolute error and mean squared error of an approximation."""

    max_error: float
    mean_squared_error: float


def calculate_error(
    true_values: Iterable[float], interp_values: Iterable[float]
) -> ErrorResult:
    """Compare two equally long sequences point by point.

    NaN differences never raise the maximum but do make the mean squared error NaN.
    """
    true_list = list(true_values)
    interp_list = list(interp_values)
    if len(true_list) != len(interp_list):
        raise ValueError(
            f"length mismatch: {len(true_list)} true values, "
            f"{len(interp_list)} interpolated values"
        )
    if not true_list:
        raise ValueError("cannot compute errors over zero points")

    diffs = [abs(t - p) for t, p in zip(true_list, interp_list)]
    max_error = max((d for d in diffs if not math.isnan(d)), default=0.0)
    mse = sum(d * d for d in diffs) / len(diffs)
    return ErrorResult(max_error=max_error, mean_squared_error=mse)