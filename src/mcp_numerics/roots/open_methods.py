from typing import Callable, Optional

from ..trace import TraceCallback, Tracer
from .errors import InvalidFunction, MaxIterationsReached

ScalarFn = Callable[[float], float]


def fixed_point(
    g: ScalarFn,
    x0: float,
    tolerance: float = 1e-4,
    max_iter: int = 100,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """
    Iterate ``x = g(x)`` from ``x0`` until successive iterates agree.

    Nothing guards against a divergent ``g``; pick one that contracts near
    the fixed point.
    """
    tracer = Tracer("fixed_point", show_iterations, trace)
    x = float(x0)

    for iteration in range(1, max_iter + 1):
        x_prev = x
        x = g(x)
        tracer.emit("iterate", iteration, x=x, step=x - x_prev)
        if abs(x - x_prev) < tolerance:
            return x

    raise MaxIterationsReached(f"Fixed-point iteration did not converge in {max_iter} iterations.")


def newton_raphson(
    f: ScalarFn,
    df: ScalarFn,
    x0: float,
    tolerance: float = 1e-4,
    max_iter: int = 100,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """Newton's method with an explicit derivative ``df``."""
    tracer = Tracer("newton_raphson", show_iterations, trace)
    x = float(x0)

    for iteration in range(1, max_iter + 1):
        fx = f(x)
        dfx = df(x)
        if dfx == 0.0:
            raise InvalidFunction(f"Derivative vanishes at x = {x}.")

        x_next = x - fx / dfx
        tracer.emit("iterate", iteration, x=x_next, fx=fx, dfx=dfx)
        if abs(x_next - x) < tolerance:
            return x_next
        x = x_next

    raise MaxIterationsReached(f"Newton-Raphson did not converge in {max_iter} iterations.")
