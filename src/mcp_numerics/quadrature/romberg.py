import logging
from typing import Callable, Optional

import numpy as np

from ..trace import TraceCallback, Tracer
from .errors import MaxIterationsReached
from .rules import check_interval

logger = logging.getLogger(__name__)

ScalarFn = Callable[[float], float]


def romberg(
    f: ScalarFn,
    a: float,
    b: float,
    tolerance: float = 1e-6,
    max_iter: int = 20,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """
    Romberg integration over at most ``max_iter`` table rows.

    Row ``i`` starts from the trapezoidal estimate on ``2**i`` panels, built
    from row ``i - 1`` by adding only the new midpoints, and then applies
    Richardson extrapolation across the row:

        R[i][j] = R[i][j-1] + (R[i][j-1] - R[i-1][j-1]) / (4**j - 1)

    Returns ``R[i][i]`` as soon as it differs from ``R[i-1][i-1]`` by less
    than ``tolerance``.
    """
    check_interval(a, b)
    tracer = Tracer("romberg", show_iterations, trace)

    table = np.zeros((max(max_iter, 1), max(max_iter, 1)), dtype=np.float64)
    table[0, 0] = 0.5 * (b - a) * (f(a) + f(b))
    tracer.emit("row", 0, row=table[0, :1])

    for i in range(1, max_iter):
        panels = 2 ** i
        h = (b - a) / panels
        midpoints = 0.0
        for k in range(1, 2 ** (i - 1) + 1):
            midpoints += f(a + (2 * k - 1) * h)
        table[i, 0] = 0.5 * table[i - 1, 0] + h * midpoints

        for j in range(1, i + 1):
            table[i, j] = table[i, j - 1] + (table[i, j - 1] - table[i - 1, j - 1]) / (4.0 ** j - 1.0)

        tracer.emit("row", i, row=table[i, : i + 1])

        if abs(table[i, i] - table[i - 1, i - 1]) < tolerance:
            logger.debug("Romberg converged after %d rows (%d panels)", i + 1, panels)
            return float(table[i, i])

    raise MaxIterationsReached(f"Romberg integration did not converge in {max_iter} rows.")
