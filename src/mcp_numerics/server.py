from typing import List, Literal

from mcp.server.fastmcp import FastMCP

from .catalog import get_integrand, get_root_problem, run_quadrature, run_root_method
from .linear import gauss_seidel
from .lp import LPError, simplex_solve
from .quadrature import IntegrationError
from .roots import RootFindingError
from .schemas import LPProblem, RelaxationOptions, SolveOptions

mcp = FastMCP("MCP Numerics")

RootMethod = Literal["bisection", "false_position", "fixed_point", "newton_raphson", "brent"]
QuadratureMethod = Literal["trapezoidal", "simpson13", "simpson38", "romberg", "gaussian"]


def _error(exc: Exception) -> dict:
    return {"error": type(exc).__name__, "message": str(exc)}


@mcp.tool()
def solve_linear_system(system: List[List[float]], options: RelaxationOptions | None = None) -> dict:
    "Solve an augmented n x (n+1) system [A | b] by Gauss-Seidel relaxation."
    try:
        result = gauss_seidel(system, options or RelaxationOptions())
    except ValueError as exc:
        return _error(exc)
    return {
        "solution": result.solution.tolist(),
        "converged": result.converged,
        "iterations": result.iterations,
        "max_change": result.max_change,
    }


@mcp.tool()
def solve_lp(problem: LPProblem, options: SolveOptions | None = None) -> dict:
    "Maximise a linear program with the tableau simplex method and return the solution dict."
    opts = options or SolveOptions()
    try:
        solution = simplex_solve(problem, opts)
    except LPError as exc:
        return _error(exc)
    return solution.model_dump()


@mcp.tool()
def find_root(
    method: RootMethod,
    problem: str = "quadratic",
    tolerance: float = 1e-4,
    max_iter: int = 100,
) -> dict:
    "Find a root of a named example function (quadratic, cubic, cosine) with the given method."
    try:
        scalar_problem = get_root_problem(problem)
        root = run_root_method(method, scalar_problem, tolerance, max_iter)
    except (RootFindingError, ValueError) as exc:
        return _error(exc)
    return {"method": method, "problem": scalar_problem.label, "root": root}


@mcp.tool()
def integrate(
    method: QuadratureMethod,
    integrand: str = "square",
    a: float = 0.0,
    b: float = 1.0,
    n: int | None = None,
    tolerance: float = 1e-6,
    max_iter: int = 20,
    points: int = 2,
) -> dict:
    "Integrate a named example function (square, cube, exp, sin) over [a, b]."
    try:
        f = get_integrand(integrand)
        value = run_quadrature(method, f, a, b, n=n, tolerance=tolerance, max_iter=max_iter, points=points)
    except (IntegrationError, ValueError) as exc:
        return _error(exc)
    return {"method": method, "integrand": integrand, "a": a, "b": b, "value": value}


if __name__ == "__main__":
    # Allow: `uv run mcp dev src/mcp_numerics/server.py` or pack as stdio/http via CLI
    mcp.run()
