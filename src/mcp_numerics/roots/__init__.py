"""Scalar root finding."""

from .bracketing import bisection, brent, false_position
from .errors import InvalidFunction, MaxIterationsReached, NoRootInInterval, RootFindingError
from .open_methods import fixed_point, newton_raphson

__all__ = [
    "bisection",
    "false_position",
    "fixed_point",
    "newton_raphson",
    "brent",
    "RootFindingError",
    "NoRootInInterval",
    "InvalidFunction",
    "MaxIterationsReached",
]
