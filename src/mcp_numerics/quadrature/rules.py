"""
Fixed Newton-Cotes and Gauss-Legendre rules.

Each rule samples ``f`` on a fixed grid over ``[a, b]``; none of them iterate.
"""

from typing import Callable, Optional

from numpy.polynomial.legendre import leggauss

from ..trace import TraceCallback, Tracer
from .errors import InvalidFunction, InvalidInterval

ScalarFn = Callable[[float], float]


def check_interval(a: float, b: float) -> None:
    if a >= b:
        raise InvalidInterval(f"Lower limit {a} must be below upper limit {b}.")


def trapezoidal(
    f: ScalarFn,
    a: float,
    b: float,
    n: int = 10,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """Composite trapezoidal rule on ``n`` equal panels (error O(h^2))."""
    check_interval(a, b)
    if n < 1:
        raise InvalidFunction(f"Trapezoidal rule needs n >= 1, got {n}.")

    h = (b - a) / n
    total = 0.5 * (f(a) + f(b))
    for i in range(1, n):
        total += f(a + i * h)
    result = total * h

    Tracer("trapezoidal", show_iterations, trace).emit("estimate", n, h=h, value=result)
    return result


def simpson13(
    f: ScalarFn,
    a: float,
    b: float,
    n: int = 10,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """Composite Simpson 1/3 rule; ``n`` must be even (error O(h^4))."""
    check_interval(a, b)
    if n < 2 or n % 2 != 0:
        raise InvalidFunction(f"Simpson's 1/3 rule needs an even n >= 2, got {n}.")

    h = (b - a) / n
    total = f(a) + f(b)
    for i in range(1, n):
        weight = 4.0 if i % 2 == 1 else 2.0
        total += weight * f(a + i * h)
    result = total * h / 3.0

    Tracer("simpson13", show_iterations, trace).emit("estimate", n, h=h, value=result)
    return result


def simpson38(
    f: ScalarFn,
    a: float,
    b: float,
    n: int = 12,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """Composite Simpson 3/8 rule; ``n`` must be a multiple of 3."""
    check_interval(a, b)
    if n < 3 or n % 3 != 0:
        raise InvalidFunction(f"Simpson's 3/8 rule needs n to be a positive multiple of 3, got {n}.")

    h = (b - a) / n
    total = f(a) + f(b)
    for i in range(1, n):
        weight = 2.0 if i % 3 == 0 else 3.0
        total += weight * f(a + i * h)
    result = total * 3.0 * h / 8.0

    Tracer("simpson38", show_iterations, trace).emit("estimate", n, h=h, value=result)
    return result


def gaussian_quadrature(
    f: ScalarFn,
    a: float,
    b: float,
    points: int = 2,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """
    Gauss-Legendre quadrature with ``points`` nodes (2 by default).

    The two-point rule uses nodes ``±1/sqrt(3)`` with unit weights and is
    exact for cubics; an ``k``-point rule is exact up to degree ``2k - 1``.
    """
    check_interval(a, b)
    if points < 1:
        raise InvalidFunction(f"Gaussian quadrature needs at least one node, got {points}.")

    nodes, weights = leggauss(points)
    half_width = (b - a) / 2.0
    midpoint = (b + a) / 2.0

    total = 0.0
    for node, weight in zip(nodes, weights):
        total += float(weight) * f(half_width * float(node) + midpoint)
    result = half_width * total

    Tracer("gaussian_quadrature", show_iterations, trace).emit(
        "estimate", points, nodes=half_width * nodes + midpoint, value=result
    )
    return result
