"""Bracketing root finders: bisection, false position and Brent's method.

All three need ``f(a) * f(b) < 0`` on entry and keep a sign-changing
interval for the whole run.
"""

from typing import Callable, Optional

import numpy as np

from ..trace import TraceCallback, Tracer
from .errors import MaxIterationsReached, NoRootInInterval

ScalarFn = Callable[[float], float]

EPS = float(np.finfo(np.float64).eps)


def _check_bracket(f: ScalarFn, a: float, b: float) -> None:
    if f(a) * f(b) >= 0:
        raise NoRootInInterval(f"f does not change sign on [{a}, {b}].")


def bisection(
    f: ScalarFn,
    a: float,
    b: float,
    tolerance: float = 1e-4,
    max_iter: int = 100,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """Halve the bracket until its half-width drops below ``tolerance``."""
    a, b = float(a), float(b)
    _check_bracket(f, a, b)
    tracer = Tracer("bisection", show_iterations, trace)

    for iteration in range(1, max_iter + 1):
        c = (a + b) / 2.0
        fc = f(c)
        tracer.emit("iterate", iteration, a=a, b=b, c=c, fc=fc)
        if fc == 0.0 or (b - a) / 2.0 < tolerance:
            return c
        if fc * f(a) < 0:
            b = c
        else:
            a = c

    raise MaxIterationsReached(f"Bisection did not converge in {max_iter} iterations.")


def false_position(
    f: ScalarFn,
    a: float,
    b: float,
    tolerance: float = 1e-4,
    max_iter: int = 100,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """
    Regula falsi: replace the midpoint with the secant x-intercept.

    Stops on the full bracket width, not the half-width used by bisection.
    One endpoint usually stays fixed, so on smooth functions most runs end
    on the exact-zero test rather than on the width.
    """
    a, b = float(a), float(b)
    _check_bracket(f, a, b)
    tracer = Tracer("false_position", show_iterations, trace)

    for iteration in range(1, max_iter + 1):
        fa, fb = f(a), f(b)
        c = (a * fb - b * fa) / (fb - fa)
        fc = f(c)
        tracer.emit("iterate", iteration, a=a, b=b, c=c, fc=fc)
        if fc == 0.0 or (b - a) < tolerance:
            return c
        if fc * fa < 0:
            b = c
        else:
            a = c

    raise MaxIterationsReached(f"False position did not converge in {max_iter} iterations.")


def brent(
    f: ScalarFn,
    a: float,
    b: float,
    tolerance: float = 1e-4,
    max_iter: int = 100,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> float:
    """
    Brent-Dekker root finding.

    ``b`` is the best estimate so far, ``a`` the previous one and ``c`` the
    far end of the bracket. Each step tries inverse quadratic interpolation
    (secant when only two distinct points are known) and falls back to
    bisection when the interpolated step leaves the bracket or does not
    shrink fast enough.
    """
    a, b = float(a), float(b)
    _check_bracket(f, a, b)
    tracer = Tracer("brent", show_iterations, trace)

    fa = f(a)
    fb = f(b)
    c, fc = b, fb
    d = e = 0.0

    for iteration in range(1, max_iter + 1):
        if fb * fc > 0:
            c, fc = a, fa
            d = b - a
            e = d

        if abs(fc) < abs(fb):
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        tol1 = 2.0 * EPS * abs(b) + 0.5 * tolerance
        xm = 0.5 * (c - b)
        tracer.emit("iterate", iteration, b=b, c=c, fb=fb, half_width=xm)

        if abs(xm) <= tol1 or fb == 0.0:
            return b

        if abs(e) >= tol1 and abs(fa) > abs(fb):
            s = fb / fa
            if a == c:
                # secant
                p = 2.0 * xm * s
                q = 1.0 - s
            else:
                # inverse quadratic interpolation
                q = fa / fc
                r = fb / fc
                p = s * (2.0 * xm * q * (q - r) - (b - a) * (r - 1.0))
                q = (q - 1.0) * (r - 1.0) * (s - 1.0)

            if p > 0.0:
                q = -q
            else:
                p = -p

            prev_e = e
            e = d
            if 2.0 * p < 3.0 * xm * q - abs(tol1 * q) and p < abs(0.5 * prev_e * q):
                d = p / q
            else:
                d = xm
                e = d
        else:
            d = xm
            e = d

        a, fa = b, fb
        if abs(d) > tol1:
            b += d
        else:
            b += tol1 if xm > 0 else -tol1
        fb = f(b)

    raise MaxIterationsReached(f"Brent's method did not converge in {max_iter} iterations.")
