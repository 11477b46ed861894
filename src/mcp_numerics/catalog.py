"""Named example problems for the server tools and scripts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from . import quadrature, roots

ScalarFn = Callable[[float], float]


@dataclass(frozen=True)
class ScalarProblem:
    """A scalar equation ``f(x) = 0`` with everything each root finder needs."""
    label: str
    f: ScalarFn
    df: ScalarFn
    g: ScalarFn
    bracket: Tuple[float, float]
    x0: float


ROOT_PROBLEMS: Dict[str, ScalarProblem] = {
    "quadratic": ScalarProblem(
        label="x^2 - 4",
        f=lambda x: x * x - 4.0,
        df=lambda x: 2.0 * x,
        g=lambda x: x - (x * x - 4.0) / 10.0,
        bracket=(0.0, 3.0),
        x0=1.0,
    ),
    "cubic": ScalarProblem(
        label="x^3 - x - 1",
        f=lambda x: x * x * x - x - 1.0,
        df=lambda x: 3.0 * x * x - 1.0,
        g=lambda x: (x + 1.0) ** (1.0 / 3.0),
        bracket=(1.0, 2.0),
        x0=1.0,
    ),
    "cosine": ScalarProblem(
        label="cos(x) - x",
        f=lambda x: math.cos(x) - x,
        df=lambda x: -math.sin(x) - 1.0,
        g=math.cos,
        bracket=(0.0, 1.0),
        x0=0.5,
    ),
}

INTEGRANDS: Dict[str, Tuple[str, ScalarFn]] = {
    "square": ("x^2", lambda x: x * x),
    "cube": ("x^3", lambda x: x * x * x),
    "exp": ("exp(x)", math.exp),
    "sin": ("sin(x)", math.sin),
}


def get_root_problem(name: str) -> ScalarProblem:
    try:
        return ROOT_PROBLEMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown root problem '{name}'. Choose from: {', '.join(sorted(ROOT_PROBLEMS))}."
        ) from None


def get_integrand(name: str) -> ScalarFn:
    try:
        return INTEGRANDS[name][1]
    except KeyError:
        raise ValueError(
            f"Unknown integrand '{name}'. Choose from: {', '.join(sorted(INTEGRANDS))}."
        ) from None


ROOT_METHODS = ("bisection", "false_position", "fixed_point", "newton_raphson", "brent")
QUADRATURE_METHODS = ("trapezoidal", "simpson13", "simpson38", "romberg", "gaussian")


def run_root_method(
    method: str,
    problem: ScalarProblem,
    tolerance: float = 1e-4,
    max_iter: int = 100,
    **trace_kwargs,
) -> float:

    a, b = problem.bracket
    if method == "bisection":
        return roots.bisection(problem.f, a, b, tolerance, max_iter, **trace_kwargs)
    if method == "false_position":
        return roots.false_position(problem.f, a, b, tolerance, max_iter, **trace_kwargs)
    if method == "fixed_point":
        return roots.fixed_point(problem.g, problem.x0, tolerance, max_iter, **trace_kwargs)
    if method == "newton_raphson":
        return roots.newton_raphson(problem.f, problem.df, problem.x0, tolerance, max_iter, **trace_kwargs)
    if method == "brent":
        return roots.brent(problem.f, a, b, tolerance, max_iter, **trace_kwargs)
    raise ValueError(f"Unknown root-finding method '{method}'. Choose from: {', '.join(ROOT_METHODS)}.")


def run_quadrature(
    method: str,
    f: ScalarFn,
    a: float,
    b: float,
    n: int | None = None,
    tolerance: float = 1e-6,
    max_iter: int = 20,
    points: int = 2,
    **trace_kwargs,
) -> float:

    if method == "trapezoidal":
        return quadrature.trapezoidal(f, a, b, 10 if n is None else n, **trace_kwargs)
    if method == "simpson13":
        return quadrature.simpson13(f, a, b, 10 if n is None else n, **trace_kwargs)
    if method == "simpson38":
        return quadrature.simpson38(f, a, b, 12 if n is None else n, **trace_kwargs)
    if method == "romberg":
        return quadrature.romberg(f, a, b, tolerance, max_iter, **trace_kwargs)
    if method == "gaussian":
        return quadrature.gaussian_quadrature(f, a, b, points, **trace_kwargs)
    raise ValueError(
        f"Unknown quadrature method '{method}'. Choose from: {', '.join(QUADRATURE_METHODS)}."
    )
