"""MCP Numerics: classical iterative solvers for linear systems, roots, integrals and LPs."""

from .linear import RelaxationResult, gauss_seidel
from .lp import simplex_solve
from .quadrature import gaussian_quadrature, romberg, simpson13, simpson38, trapezoidal
from .roots import bisection, brent, false_position, fixed_point, newton_raphson
from .schemas import LPProblem, LPSolution, RelaxationOptions, SolveOptions
from .trace import TraceCollector, TraceEvent

__all__ = [
    "gauss_seidel",
    "RelaxationResult",
    "RelaxationOptions",
    "bisection",
    "false_position",
    "fixed_point",
    "newton_raphson",
    "brent",
    "trapezoidal",
    "simpson13",
    "simpson38",
    "romberg",
    "gaussian_quadrature",
    "simplex_solve",
    "LPProblem",
    "LPSolution",
    "SolveOptions",
    "TraceEvent",
    "TraceCollector",
]
