"""The function under study, its derivative and the interpolation interval."""

import math

#: Frequency parameter of the sine term.
K = 4.0
#: Damping parameter of the exponential term.
M = 0.4
PI = math.pi
#: Start of the interpolation interval.
A = -2.0 * PI * PI
#: End of the interpolation interval.
B = PI * PI
#: Largest number of interpolation nodes the analysis accepts.
MAX_NODES = 500


def f(x: float) -> float:
    """Return sin(K*x/PI) * exp(-M*x/PI)."""
    return math.sin(K * x / PI) * math.exp(-M * x / PI)


def df(x: float) -> float:
    """Return the first derivative of :func:`f` at ``x``."""
    damping = math.exp(-M * x / PI)
    phase = K * x / PI
    return (K / PI) * math.cos(phase) * damping + (-M / PI) * math.sin(phase) * damping