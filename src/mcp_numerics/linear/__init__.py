"""Iterative relaxation solvers for dense linear systems."""

from .gauss_seidel import ConvergenceError, RelaxationResult, gauss_seidel, split_augmented

__all__ = ["gauss_seidel", "split_augmented", "RelaxationResult", "ConvergenceError"]
