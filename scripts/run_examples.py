#!/usr/bin/env python3
"""Run the demo problems for every solver family and print the results as tables."""
import argparse
import logging
from typing import List, Optional, Sequence

from mcp_numerics.catalog import (
    INTEGRANDS,
    QUADRATURE_METHODS,
    ROOT_METHODS,
    ROOT_PROBLEMS,
    get_integrand,
    get_root_problem,
    run_quadrature,
    run_root_method,
)
from mcp_numerics.linear import gauss_seidel
from mcp_numerics.lp import simplex_solve
from mcp_numerics.quadrature import IntegrationError
from mcp_numerics.roots import RootFindingError
from mcp_numerics.schemas import LPProblem, RelaxationOptions

DIAGONALLY_DOMINANT = [
    [4.0, -1.0, 0.0, 7.0],
    [-1.0, 4.0, -1.0, 6.0],
    [0.0, -1.0, 4.0, 5.0],
]

TEXTBOOK_LP = LPProblem(
    name="textbook",
    c=[3.0, 2.0],
    A=[[2.0, 1.0], [1.0, 1.0], [1.0, 0.0]],
    b=[100.0, 80.0, 40.0],
)


def print_table(headers: Sequence[str], rows: List[Sequence[str]]) -> None:
    widths = [max(len(str(row[k])) for row in [headers, *rows]) for k in range(len(headers))]
    print(" | ".join(str(h).ljust(w) for h, w in zip(headers, widths)))
    print("-+-".join("-" * w for w in widths))
    for row in rows:
        print(" | ".join(str(cell).ljust(w) for cell, w in zip(row, widths)))


def run_roots(args: argparse.Namespace) -> None:
    problem = get_root_problem(args.problem)
    methods = [args.method] if args.method else list(ROOT_METHODS)
    rows = []
    for method in methods:
        try:
            root = run_root_method(
                method, problem, args.tolerance, args.max_iter, show_iterations=args.show_iterations
            )
            rows.append((method, problem.label, f"{root:.6f}", ""))
        except RootFindingError as exc:
            rows.append((method, problem.label, "-", f"{type(exc).__name__}: {exc}"))
    print_table(("method", "f(x)", "root", "error"), rows)


def run_integrals(args: argparse.Namespace) -> None:
    f = get_integrand(args.integrand)
    methods = [args.method] if args.method else list(QUADRATURE_METHODS)
    rows = []
    for method in methods:
        try:
            value = run_quadrature(
                method, f, args.a, args.b, n=args.n, show_iterations=args.show_iterations
            )
            rows.append((method, INTEGRANDS[args.integrand][0], f"{value:.8f}", ""))
        except IntegrationError as exc:
            rows.append((method, INTEGRANDS[args.integrand][0], "-", f"{type(exc).__name__}: {exc}"))
    print_table(("method", "f(x)", "integral", "error"), rows)


def run_linear(args: argparse.Namespace) -> None:
    opts = RelaxationOptions(tolerance=args.tolerance, max_iterations=args.max_iter)
    result = gauss_seidel(DIAGONALLY_DOMINANT, opts, show_iterations=args.show_iterations)
    rows = [(f"x{i + 1}", f"{value:.4f}") for i, value in enumerate(result.solution)]
    print_table(("variable", "value"), rows)
    status = "converged" if result.converged else "did not converge"
    print(f"{status} after {result.iterations} sweeps (max change {result.max_change:.2e})")


def run_lp(args: argparse.Namespace) -> None:
    solution = simplex_solve(TEXTBOOK_LP, show_iterations=args.show_iterations)
    print(TEXTBOOK_LP.describe())
    print()
    print(f"status: {solution.status} ({solution.iterations} pivots)")
    if solution.x is not None:
        rows = [(f"x{i + 1}", f"{value:g}") for i, value in enumerate(solution.x)]
        rows.append(("objective", f"{solution.objective_value:g}"))
        print_table(("variable", "value"), rows)
    elif solution.message:
        print(solution.message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--show-iterations", action="store_true", help="Log every iteration")
    sub = parser.add_subparsers(dest="family", required=True)

    roots = sub.add_parser("roots", help="Root finding")
    roots.add_argument("--method", choices=ROOT_METHODS, default=None)
    roots.add_argument("--problem", choices=sorted(ROOT_PROBLEMS), default="quadratic")
    roots.add_argument("--tolerance", type=float, default=1e-4)
    roots.add_argument("--max-iter", type=int, default=100)
    roots.set_defaults(handler=run_roots)

    integrate = sub.add_parser("integrate", help="Numerical integration")
    integrate.add_argument("--method", choices=QUADRATURE_METHODS, default=None)
    integrate.add_argument("--integrand", choices=sorted(INTEGRANDS), default="square")
    integrate.add_argument("--a", type=float, default=0.0)
    integrate.add_argument("--b", type=float, default=1.0)
    integrate.add_argument("--n", type=int, default=None, help="Subintervals for the fixed rules")
    integrate.set_defaults(handler=run_integrals)

    linear = sub.add_parser("linear", help="Gauss-Seidel on a 3x3 diagonally dominant system")
    linear.add_argument("--tolerance", type=float, default=1e-3)
    linear.add_argument("--max-iter", type=int, default=25)
    linear.set_defaults(handler=run_linear)

    lp = sub.add_parser("lp", help="Simplex on max 3x1 + 2x2")
    lp.set_defaults(handler=run_lp)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.show_iterations else logging.WARNING,
        format="%(message)s",
    )
    args.handler(args)


if __name__ == "__main__":
    main()
