import numpy as np
import pytest

from mcp_numerics.linear import ConvergenceError, gauss_seidel, split_augmented
from mcp_numerics.schemas import RelaxationOptions
from mcp_numerics.trace import TraceCollector

SYSTEM = [
    [4.0, -1.0, 0.0, 7.0],
    [-1.0, 4.0, -1.0, 6.0],
    [0.0, -1.0, 4.0, 5.0],
]
EXACT = [67.0 / 28.0, 18.0 / 7.0, 53.0 / 28.0]


def test_converges_on_diagonally_dominant_system():
    result = gauss_seidel(SYSTEM)

    assert result.converged
    assert result.iterations < 25
    assert result.solution == pytest.approx(EXACT, abs=1e-3)


def test_tight_tolerance_matches_direct_solve():
    A, b = split_augmented(SYSTEM)
    result = gauss_seidel(SYSTEM, RelaxationOptions(tolerance=1e-10, max_iterations=200))

    assert result.converged
    assert result.solution == pytest.approx(np.linalg.solve(A, b), abs=1e-9)
    assert result.max_change < 1e-10


def test_non_convergence_keeps_last_iterate():
    result = gauss_seidel(SYSTEM, RelaxationOptions(tolerance=1e-12, max_iterations=2))

    assert not result.converged
    assert result.iterations == 2
    assert result.solution.shape == (3,)
    with pytest.raises(ConvergenceError):
        result.raise_for_convergence()


def test_divergent_system_reports_not_converged():
    # spectral radius of the Gauss-Seidel iteration matrix is 6 here
    result = gauss_seidel([[1.0, 2.0, 3.0], [3.0, 1.0, 4.0]], RelaxationOptions(max_iterations=10))

    assert not result.converged
    assert result.iterations == 10


def test_exact_initial_guess_converges_in_one_sweep():
    result = gauss_seidel([[2.0, 1.0, 3.0], [1.0, 3.0, 4.0]], x0=[1.0, 1.0])

    assert result.converged
    assert result.iterations == 1
    assert result.solution == pytest.approx([1.0, 1.0])


def test_sweeps_use_latest_values():
    # with x = 0, Jacobi gives x2 = 6/4 after one sweep; Gauss-Seidel uses the new x1
    collector = TraceCollector()
    gauss_seidel(SYSTEM, RelaxationOptions(max_iterations=1), trace=collector)

    first = collector.events[0].data["x"]
    assert first[0] == pytest.approx(7.0 / 4.0)
    assert first[1] == pytest.approx((6.0 + 7.0 / 4.0) / 4.0)


def test_trace_emits_one_event_per_sweep():
    collector = TraceCollector()
    result = gauss_seidel(SYSTEM, trace=collector)

    assert collector.stages() == ["sweep"] * result.iterations
    assert [event.iteration for event in collector.events] == list(range(1, result.iterations + 1))


def test_input_is_not_mutated():
    system = np.array(SYSTEM)
    before = system.copy()
    gauss_seidel(system)

    assert np.array_equal(system, before)


@pytest.mark.parametrize(
    "system",
    [
        [[1.0, 2.0], [3.0, 4.0]],
        [1.0, 2.0, 3.0],
        [[1.0, 2.0, 3.0, 4.0]],
    ],
)
def test_rejects_non_augmented_shapes(system):
    with pytest.raises(ValueError):
        gauss_seidel(system)


def test_initial_guess_length_is_checked():
    with pytest.raises(ValueError):
        gauss_seidel(SYSTEM, x0=[0.0, 0.0])
