import logging
import numpy as np
from typing import Any, Dict, List, Optional

from .utils import build_tableau
from ..schemas import LPProblem, LPSolution, SolveOptions
from ..trace import TraceCallback, Tracer

logger = logging.getLogger(__name__)


def simplex_solve(
    problem: LPProblem,
    opts: Optional[SolveOptions] = None,
    *,
    show_iterations: bool = False,
    trace: Optional[TraceCallback] = None,
) -> LPSolution:
    """
    Dense-tableau primal simplex, two-phase when >= or = rows are present.

    All-<= problems with non-negative right-hand sides skip Phase I and run
    the textbook single-phase method on the slack basis. Decision-variable
    kinds (continuous/integer) are advisory; the LP relaxation is solved.
    """

    opts = opts or SolveOptions()
    tracer = Tracer("simplex", show_iterations, trace)
    tableau, basis, meta = build_tableau(problem)

    if any(kind == "I" for kind in problem.var_types or []):
        logger.debug("Integer variable kinds are advisory; solving the LP relaxation.")

    tracer.emit("problem", 0, problem=problem.describe())
    tracer.emit("initial_tableau", 0, tableau=tableau, columns=list(meta["col_names"]))

    iterations = 0
    if meta["artificial_indices"]:
        phase1 = _phase_I(tableau, basis, meta, opts, tracer)
        iterations += phase1["iterations"]
        if phase1["status"] == "infeasible":
            return _terminal("infeasible", iterations, "Infeasible: Phase I could not drive artificials to zero.")
        if phase1["status"] == "iteration_limit":
            return _terminal("iteration_limit", iterations, "Hit iteration limit in Phase I.")
        if phase1["status"] == "unbounded":
            return _terminal(
                "unbounded",
                iterations,
                "Phase I detected unbounded auxiliary problem (likely modelling error).",
            )
        tableau, basis, meta = phase1["tableau"], phase1["basis"], phase1["meta"]
        tracer.emit("phase_two", iterations, tableau=tableau, columns=list(meta["col_names"]))

    remaining_iters = max(opts.max_iters - iterations, 0)
    phase2 = _run_simplex(tableau, basis, meta, opts, tracer, remaining_iters, iterations, phase=2)
    iterations += phase2["iterations"]

    if phase2["status"] == "iteration_limit":
        return _terminal("iteration_limit", iterations, "Hit iteration limit in Phase II.")
    if phase2["status"] == "unbounded":
        entering = meta["col_names"][phase2["entering"]]
        return _terminal(
            "unbounded",
            iterations,
            f"Unbounded: column {entering} has no positive entry for the ratio test.",
        )

    objective = float(tableau[0, -1])
    x = _extract_solution(tableau, meta["n_vars"], opts.tol)
    logger.debug("Simplex optimal after %d pivots, objective %.6g", iterations, objective)
    return LPSolution(
        status="optimal",
        objective_value=objective,
        x=x,
        iterations=iterations,
        message="",
    )


def _terminal(status: str, iterations: int, message: str) -> LPSolution:
    logger.debug("Simplex stopped with status %s after %d pivots", status, iterations)
    return LPSolution(
        status=status,
        objective_value=None,
        x=None,
        iterations=iterations,
        message=message,
    )


def _phase_I(
    tableau: np.ndarray,
    basis: List[int],
    meta: Dict[str, Any],
    opts: SolveOptions,
    tracer: Tracer,
) -> Dict[str, Any]:
    artificial = meta["artificial_indices"]

    # maximise -sum(artificials), expressed against the artificial basis
    tableau[0, :] = 0.0
    tableau[0, artificial] = 1.0
    for row, col in enumerate(basis, start=1):
        if col in artificial:
            tableau[0] -= tableau[row]

    tracer.emit("phase_one", 0, tableau=tableau, columns=list(meta["col_names"]))
    result = _run_simplex(tableau, basis, meta, opts, tracer, opts.max_iters, 0, phase=1)
    if result["status"] != "optimal":
        return result

    if tableau[0, -1] < -opts.tol:
        return {"status": "infeasible", "iterations": result["iterations"]}

    tableau, basis, meta = _drop_artificials(tableau, basis, meta, opts.tol)
    _set_objective(tableau, basis, meta)
    return {
        "status": "feasible",
        "iterations": result["iterations"],
        "tableau": tableau,
        "basis": basis,
        "meta": meta,
    }


def _drop_artificials(tableau: np.ndarray, basis: List[int], meta: Dict[str, Any], tol: float):
    artificial = set(meta["artificial_indices"])
    n_cols = tableau.shape[1] - 1
    keep_rows = [0]
    for row, col in enumerate(basis, start=1):
        if col in artificial:
            candidates = [j for j in range(n_cols) if j not in artificial and abs(tableau[row, j]) > tol]
            if not candidates:
                # redundant constraint: every structural entry is zero
                continue
            _pivot(tableau, row, candidates[0])
            basis[row - 1] = candidates[0]
        keep_rows.append(row)

    keep_cols = [j for j in range(n_cols) if j not in artificial]
    remap = {old: new for new, old in enumerate(keep_cols)}
    reduced = tableau[np.ix_(keep_rows, keep_cols + [n_cols])].copy()
    new_basis = [remap[basis[row - 1]] for row in keep_rows[1:]]

    new_meta = dict(meta)
    new_meta["col_names"] = [meta["col_names"][j] for j in keep_cols]
    new_meta["col_types"] = [meta["col_types"][j] for j in keep_cols]
    new_meta["artificial_indices"] = []
    return reduced, new_basis, new_meta


def _set_objective(tableau: np.ndarray, basis: List[int], meta: Dict[str, Any]) -> None:
    n = meta["n_vars"]
    tableau[0, :] = 0.0
    tableau[0, :n] = -meta["objective"]
    for row, col in enumerate(basis, start=1):
        factor = tableau[0, col]
        if factor != 0.0:
            tableau[0] -= factor * tableau[row]


def _run_simplex(
    tableau: np.ndarray,
    basis: List[int],
    meta: Dict[str, Any],
    opts: SolveOptions,
    tracer: Tracer,
    max_iterations: int,
    offset: int,
    phase: int,
) -> Dict[str, Any]:
    use_bland = opts.pivot_rule == "bland"
    iterations = 0

    while True:
        entering = _entering_column(tableau, opts.tol, use_bland)
        if entering is None:
            return {"status": "optimal", "iterations": iterations}

        if iterations >= max_iterations:
            return {"status": "iteration_limit", "iterations": iterations}

        leaving = _leaving_row(tableau, basis, entering, opts.tol, use_bland)
        if leaving is None:
            return {"status": "unbounded", "iterations": iterations, "entering": entering}

        tracer.emit(
            "select",
            offset + iterations + 1,
            phase=phase,
            entering=meta["col_names"][entering],
            leaving=meta["col_names"][basis[leaving - 1]],
        )
        _pivot(tableau, leaving, entering)
        basis[leaving - 1] = entering
        iterations += 1
        tracer.emit("pivot", offset + iterations, phase=phase, tableau=tableau)


def _entering_column(tableau: np.ndarray, tol: float, use_bland: bool) -> Optional[int]:
    reduced = tableau[0, :-1]
    if use_bland:
        for j, value in enumerate(reduced):
            if value < -tol:
                return j
        return None
    # argmin returns the first occurrence on ties
    j = int(np.argmin(reduced))
    if reduced[j] < -tol:
        return j
    return None


def _leaving_row(
    tableau: np.ndarray,
    basis: List[int],
    entering: int,
    tol: float,
    use_bland: bool,
) -> Optional[int]:
    best_row: Optional[int] = None
    best_ratio = np.inf
    for row in range(1, tableau.shape[0]):
        entry = tableau[row, entering]
        if entry <= tol:
            continue
        ratio = tableau[row, -1] / entry
        if ratio < best_ratio:
            best_ratio, best_row = ratio, row
        elif use_bland and ratio == best_ratio and best_row is not None and basis[row - 1] < basis[best_row - 1]:
            best_row = row
    return best_row


def _pivot(tableau: np.ndarray, row: int, col: int) -> None:
    """Gauss-Jordan step: scale ``row`` so the pivot is 1, zero ``col`` elsewhere."""
    pivot_row = tableau[row] / tableau[row, col]
    factors = tableau[:, col].copy()
    factors[row] = 0.0
    tableau -= np.outer(factors, pivot_row)
    tableau[row] = pivot_row


def _extract_solution(tableau: np.ndarray, n_vars: int, tol: float) -> List[float]:
    """Decision variables with a unit column take that row's RHS; the rest are zero."""
    x: List[float] = []
    for j in range(n_vars):
        column = tableau[:, j]
        ones = np.flatnonzero(np.abs(column - 1.0) <= tol)
        zeros = int(np.count_nonzero(np.abs(column) <= tol))
        value = 0.0
        if ones.size == 1 and ones[0] != 0 and zeros == column.size - 1:
            value = float(tableau[ones[0], -1])
        if abs(value) < 1e-12:
            value = 0.0
        x.append(value)
    return x
