import numpy as np
from typing import Any, Dict, List, Tuple

from ..schemas import LPProblem
from .errors import InvalidProblem

_FLIPPED = {"<=": ">=", ">=": "<=", "=": "="}


def build_tableau(problem: LPProblem) -> Tuple[np.ndarray, List[int], Dict[str, Any]]:
    """
    Build the initial simplex tableau for ``max c @ x`` s.t. ``A x (rel) b``, ``x >= 0``.

    Rows with a negative right-hand side are negated first (flipping their
    relation). Columns are laid out as: decision variables, one slack (<=)
    or surplus (>=) column per inequality, one artificial column per >= or =
    row, then the right-hand side. Row 0 holds ``-c``.

    For an all-<= problem with ``b >= 0`` this is the classic
    ``(m+1) x (n+m+1)`` tableau with an identity slack block and no
    artificial columns.

    Returns the tableau, the initial basis (one column index per constraint
    row) and column metadata.
    """

    n = problem.n_vars
    m = problem.n_constraints
    if n == 0:
        raise InvalidProblem("Problem has no decision variables.")

    c = np.asarray(problem.c, dtype=np.float64)
    A = np.asarray(problem.A, dtype=np.float64).reshape(m, n)
    b = np.asarray(problem.b, dtype=np.float64)
    if not (np.all(np.isfinite(c)) and np.all(np.isfinite(A)) and np.all(np.isfinite(b))):
        raise InvalidProblem("Problem data contains non-finite coefficients.")

    relations = list(problem.relations or ["<="] * m)
    for i in range(m):
        if b[i] < 0:
            A[i] = -A[i]
            b[i] = -b[i]
            relations[i] = _FLIPPED[relations[i]]

    col_names: List[str] = [f"x{j + 1}" for j in range(n)]
    col_types: List[str] = ["decision"] * n
    entries: List[Tuple[int, int, float]] = []
    basis: List[int] = [-1] * m

    def add_column(name: str, col_type: str) -> int:
        col_names.append(name)
        col_types.append(col_type)
        return len(col_names) - 1

    for i, rel in enumerate(relations):
        if rel == "<=":
            idx = add_column(f"s{i + 1}", "slack")
            entries.append((i, idx, 1.0))
            basis[i] = idx
        elif rel == ">=":
            idx = add_column(f"s{i + 1}", "surplus")
            entries.append((i, idx, -1.0))

    artificial_indices: List[int] = []
    for i, rel in enumerate(relations):
        if rel in (">=", "="):
            idx = add_column(f"a{i + 1}", "artificial")
            entries.append((i, idx, 1.0))
            basis[i] = idx
            artificial_indices.append(idx)

    tableau = np.zeros((m + 1, len(col_names) + 1), dtype=np.float64)
    tableau[0, :n] = -c
    tableau[1:, :n] = A
    for row, col, value in entries:
        tableau[row + 1, col] = value
    tableau[1:, -1] = b

    metadata: Dict[str, Any] = {
        "n_vars": n,
        "objective": c,
        "col_names": col_names,
        "col_types": col_types,
        "artificial_indices": artificial_indices,
    }
    return tableau, basis, metadata
