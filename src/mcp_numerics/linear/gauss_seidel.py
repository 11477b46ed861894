import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..schemas import RelaxationOptions
from ..trace import TraceCallback, Tracer

logger = logging.getLogger(__name__)


class ConvergenceError(Exception):
    """Relaxation sweeps ran out before successive iterates settled."""


@dataclass
class RelaxationResult:
    """Container for a Gauss-Seidel solve."""
    solution: np.ndarray
    converged: bool
    iterations: int
    max_change: float

    def raise_for_convergence(self) -> "RelaxationResult":
        if not self.converged:
            raise ConvergenceError(
                f"No convergence after {self.iterations} sweeps "
                f"(last max change {self.max_change:.3e})."
            )
        return self


def split_augmented(system) -> tuple:
    """Return ``(A, b)`` from an augmented ``n x (n+1)`` matrix."""
    aug = np.asarray(system, dtype=np.float64)
    if aug.ndim != 2 or aug.shape[0] < 1 or aug.shape[1] != aug.shape[0] + 1:
        raise ValueError(
            f"Expected an augmented n x (n+1) matrix, got shape {aug.shape}."
        )
    return aug[:, :-1].copy(), aug[:, -1].copy()


def gauss_seidel(
    system,
    options: Optional[RelaxationOptions] = None,
    *,
    x0=None,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> RelaxationResult:
    """
    Solve ``A x = b`` by Gauss-Seidel relaxation.

    Each sweep overwrites ``x[i]`` in place, so later rows of the same sweep
    already see the new values. Iteration stops once every component moved by
    less than ``options.tolerance`` since the previous sweep, or after
    ``options.max_iterations`` sweeps. A non-converged run still returns the
    last iterate, with ``converged=False``.

    The diagonal of ``A`` must be non-zero; this is not checked.
    """
    opts = options or RelaxationOptions()
    A, b = split_augmented(system)
    n = b.shape[0]
    tracer = Tracer("gauss_seidel", show_iterations, trace)

    if x0 is None:
        x = np.zeros(n, dtype=np.float64)
    else:
        x = np.asarray(x0, dtype=np.float64).flatten().copy()
        if x.shape[0] != n:
            raise ValueError(f"Initial guess has {x.shape[0]} entries, expected {n}.")

    max_change = np.inf
    sweep = 0
    for sweep in range(1, opts.max_iterations + 1):
        prev = x.copy()
        for i in range(n):
            total = b[i]
            for j in range(n):
                if j != i:
                    total -= A[i, j] * x[j]
            x[i] = total / A[i, i]

        tracer.emit("sweep", sweep, x=x)

        max_change = float(np.max(np.abs(x - prev)))
        if max_change < opts.tolerance:
            logger.debug("Gauss-Seidel converged at sweep %d", sweep)
            return RelaxationResult(solution=x, converged=True, iterations=sweep, max_change=max_change)

    logger.warning(
        "Gauss-Seidel did not converge in %d sweeps (max change %.3e)",
        sweep,
        max_change,
    )
    return RelaxationResult(solution=x, converged=False, iterations=sweep, max_change=max_change)
