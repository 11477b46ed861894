import numpy as np
import pytest
from scipy.optimize import linprog

from mcp_numerics.lp import InvalidProblem, MaxIterationsReached, Unbounded, build_tableau, simplex_solve
from mcp_numerics.schemas import LPProblem, SolveOptions
from mcp_numerics.trace import TraceCollector
from scripts.generate_instances import generate_random_lp


def make_textbook_lp() -> LPProblem:
    return LPProblem(
        name="textbook",
        c=[3.0, 2.0],
        A=[[2.0, 1.0], [1.0, 1.0], [1.0, 0.0]],
        b=[100.0, 80.0, 40.0],
    )


def reference_optimum(problem: LPProblem) -> float:
    res = linprog(
        -np.asarray(problem.c),
        A_ub=np.asarray(problem.A),
        b_ub=np.asarray(problem.b),
        bounds=[(0, None)] * problem.n_vars,
        method="highs",
    )
    assert res.success
    return -res.fun


def test_simplex_solves_textbook_lp():
    problem = make_textbook_lp()
    solution = simplex_solve(problem, SolveOptions())

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(180.0, rel=1e-9)
    assert solution.objective_value == pytest.approx(reference_optimum(problem), rel=1e-9)
    assert solution.x == pytest.approx([20.0, 60.0], rel=1e-9)
    assert solution.iterations == 3
    assert solution.raise_for_status() is solution


def test_bland_rule_reaches_same_optimum():
    solution = simplex_solve(make_textbook_lp(), SolveOptions(pivot_rule="bland"))

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(180.0, rel=1e-9)
    assert solution.x == pytest.approx([20.0, 60.0], rel=1e-9)


def test_initial_tableau_layout():
    tableau, basis, meta = build_tableau(make_textbook_lp())

    assert tableau.shape == (4, 6)
    assert tableau[0].tolist() == [-3.0, -2.0, 0.0, 0.0, 0.0, 0.0]
    assert np.array_equal(tableau[1:, 2:5], np.eye(3))
    assert tableau[1:, -1].tolist() == [100.0, 80.0, 40.0]
    assert basis == [2, 3, 4]
    assert meta["artificial_indices"] == []


def test_unbounded_when_ratio_test_is_empty():
    problem = LPProblem(c=[1.0, 1.0], A=[[1.0, -1.0]], b=[1.0])
    solution = simplex_solve(problem)

    assert solution.status == "unbounded"
    assert solution.x is None
    assert solution.objective_value is None
    assert "x2" in solution.message
    with pytest.raises(Unbounded):
        solution.raise_for_status()


def test_unconstrained_positive_objective_is_unbounded():
    solution = simplex_solve(LPProblem(c=[1.0], A=[], b=[]))
    assert solution.status == "unbounded"


def test_unconstrained_nonpositive_objective_is_optimal_at_origin():
    solution = simplex_solve(LPProblem(c=[-1.0, 0.0], A=[], b=[]))

    assert solution.status == "optimal"
    assert solution.objective_value == 0.0
    assert solution.x == [0.0, 0.0]


def test_iteration_limit():
    solution = simplex_solve(make_textbook_lp(), SolveOptions(max_iters=1))

    assert solution.status == "iteration_limit"
    assert solution.iterations == 1
    with pytest.raises(MaxIterationsReached):
        solution.raise_for_status()


def test_integer_kinds_are_advisory():
    problem = make_textbook_lp()
    problem.var_types = ["I", "C"]
    solution = simplex_solve(problem)

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(180.0)


@pytest.mark.parametrize("seed", range(5))
def test_random_instances_match_reference(seed):
    problem = generate_random_lp(4, 3, seed)
    solution = simplex_solve(problem)

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(reference_optimum(problem), rel=1e-7)
    x = np.asarray(solution.x)
    assert np.all(x >= -1e-9)
    assert np.all(np.asarray(problem.A) @ x <= np.asarray(problem.b) + 1e-7)


def test_trace_reports_entry_and_every_pivot():
    collector = TraceCollector()
    solution = simplex_solve(make_textbook_lp(), trace=collector)

    stages = collector.stages()
    assert stages[:2] == ["problem", "initial_tableau"]
    assert stages[2:] == ["select", "pivot"] * solution.iterations

    first_select = collector.events[2].data
    assert first_select["entering"] == "x1"
    assert first_select["leaving"] == "s3"
    final = collector.events[-1].data["tableau"]
    assert final[0, -1] == pytest.approx(180.0)


def test_trace_snapshots_are_independent():
    collector = TraceCollector()
    simplex_solve(make_textbook_lp(), trace=collector)

    initial = collector.events[1].data["tableau"]
    assert initial[0].tolist() == [-3.0, -2.0, 0.0, 0.0, 0.0, 0.0]


def test_non_finite_data_is_invalid():
    with pytest.raises(InvalidProblem):
        simplex_solve(LPProblem(c=[float("nan")], A=[[1.0]], b=[1.0]))


def test_empty_problem_is_invalid():
    with pytest.raises(InvalidProblem):
        simplex_solve(LPProblem(c=[], A=[], b=[]))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"c": [1.0, 2.0], "A": [[1.0]], "b": [1.0]},
        {"c": [1.0], "A": [[1.0], [2.0]], "b": [1.0]},
        {"c": [1.0], "A": [[1.0]], "b": [1.0], "relations": ["<=", "<="]},
        {"c": [1.0], "A": [[1.0]], "b": [1.0], "var_types": ["C", "I"]},
    ],
)
def test_dimension_mismatch_is_rejected(kwargs):
    with pytest.raises(ValueError):
        LPProblem(**kwargs)
