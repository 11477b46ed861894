import logging
import math

import pytest
from scipy.optimize import brentq

from mcp_numerics.roots import (
    InvalidFunction,
    MaxIterationsReached,
    NoRootInInterval,
    RootFindingError,
    bisection,
    brent,
    false_position,
    fixed_point,
    newton_raphson,
)
from mcp_numerics.trace import TraceCollector


def quadratic(x):
    return x * x - 4.0


def cubic(x):
    return x * x * x - x - 1.0


CUBIC_ROOT = brentq(cubic, 1.0, 2.0, xtol=1e-14)


def test_bisection_finds_root_inside_bracket():
    root = bisection(quadratic, 0.0, 3.0, tolerance=1e-6)

    assert 0.0 <= root <= 3.0
    assert root == pytest.approx(2.0, abs=1e-6)
    assert abs(quadratic(root)) < 1e-5


def test_bisection_stops_on_half_width():
    # [1, 2] -> c = 1.5, half-width 0.5 is not below 0.5; next c = 1.25 with half-width 0.25
    assert bisection(cubic, 1.0, 2.0, tolerance=0.5) == 1.25
    assert bisection(cubic, 1.0, 2.0, tolerance=0.5 + 1e-9) == 1.5


def test_false_position_hits_linear_root_exactly():
    assert false_position(lambda x: x - 0.25, 0.0, 1.0) == 0.25
    assert false_position(lambda x: 2.0 * x - 1.0, 0.0, 3.0) == 0.5


def test_false_position_stops_on_full_width():
    # first secant point on [1, 2] for x^3 - x - 1 is 7/6; the bracket width is 1
    first = false_position(cubic, 1.0, 2.0, tolerance=1.0 + 1e-9)
    assert first == pytest.approx(7.0 / 6.0)

    second = false_position(cubic, 1.0, 2.0, tolerance=1.0)
    assert second != pytest.approx(7.0 / 6.0)
    assert 7.0 / 6.0 < second < CUBIC_ROOT


def test_fixed_point_converges_for_contraction():
    root = fixed_point(lambda x: x - (x * x - 4.0) / 10.0, 1.0)
    assert root == pytest.approx(2.0, abs=1e-3)

    root = fixed_point(lambda x: (x + 1.0) ** (1.0 / 3.0), 1.0, tolerance=1e-10)
    assert root == pytest.approx(CUBIC_ROOT, abs=1e-9)


def test_fixed_point_divergence_exhausts_budget():
    with pytest.raises(MaxIterationsReached):
        fixed_point(lambda x: 2.0 * x + 1.0, 1.0, max_iter=50)


def test_newton_already_at_root():
    assert newton_raphson(quadratic, lambda x: 2.0 * x, 2.0) == 2.0


def test_newton_converges_quadratically():
    collector = TraceCollector()
    root = newton_raphson(cubic, lambda x: 3.0 * x * x - 1.0, 1.0, trace=collector)

    assert root == pytest.approx(CUBIC_ROOT, abs=1e-8)
    assert len(collector.events) < 10


def test_newton_zero_derivative_is_invalid():
    with pytest.raises(InvalidFunction):
        newton_raphson(quadratic, lambda x: 2.0 * x, 0.0)


def test_newton_without_real_root_runs_out():
    with pytest.raises(MaxIterationsReached):
        newton_raphson(lambda x: x * x + 1.0, lambda x: 2.0 * x, 0.5, max_iter=3)


def test_brent_matches_reference():
    assert brent(cubic, 1.0, 2.0) == pytest.approx(1.3247, abs=2e-4)
    assert brent(cubic, 1.0, 2.0, tolerance=1e-12) == pytest.approx(CUBIC_ROOT, abs=1e-11)


def test_brent_handles_transcendental_function():
    f = lambda x: math.cos(x) - x  # noqa: E731
    root = brent(f, 0.0, 1.0, tolerance=1e-12)

    assert root == pytest.approx(brentq(f, 0.0, 1.0, xtol=1e-14), abs=1e-11)


def test_brent_needs_few_iterations():
    collector = TraceCollector()
    brent(cubic, 1.0, 2.0, tolerance=1e-12, trace=collector)

    assert 0 < len(collector.events) < 20


@pytest.mark.parametrize("method", [bisection, false_position, brent])
@pytest.mark.parametrize("bracket", [(3.0, 5.0), (-1.0, 1.0), (2.0, 3.0)])
def test_bracketing_methods_require_sign_change(method, bracket):
    with pytest.raises(NoRootInInterval):
        method(quadratic, *bracket)


@pytest.mark.parametrize("method", [bisection, brent])
def test_bracketing_methods_exhaust_budget(method):
    with pytest.raises(MaxIterationsReached):
        method(cubic, 1.0, 2.0, tolerance=1e-14, max_iter=2)


def test_zero_budget_always_fails():
    with pytest.raises(MaxIterationsReached):
        bisection(quadratic, 0.0, 3.0, max_iter=0)
    with pytest.raises(MaxIterationsReached):
        fixed_point(math.cos, 0.5, max_iter=0)


def test_errors_share_family_base():
    for error in (NoRootInInterval, InvalidFunction, MaxIterationsReached):
        assert issubclass(error, RootFindingError)


def test_show_iterations_logs_each_step(caplog):
    caplog.set_level(logging.INFO, logger="mcp_numerics.trace")
    collector = TraceCollector()
    bisection(quadratic, 0.0, 3.0, show_iterations=True, trace=collector)

    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == len(collector.events)
    assert all(message.startswith("bisection [iterate]") for message in messages)
