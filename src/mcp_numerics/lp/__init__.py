"""Linear programming on a dense simplex tableau."""

from .errors import Infeasible, InvalidProblem, LPError, MaxIterationsReached, Unbounded
from .simplex import simplex_solve
from .utils import build_tableau

__all__ = [
    "simplex_solve",
    "build_tableau",
    "LPError",
    "InvalidProblem",
    "Infeasible",
    "Unbounded",
    "MaxIterationsReached",
]
