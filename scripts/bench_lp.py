#!/usr/bin/env python3
import time

from mcp_numerics.lp.simplex import simplex_solve
from mcp_numerics.schemas import LPProblem, SolveOptions
from scripts.generate_instances import generate_random_lp


def textbook_lp() -> LPProblem:
    return LPProblem(
        name="textbook",
        c=[3.0, 2.0],
        A=[[2.0, 1.0], [1.0, 1.0], [1.0, 0.0]],
        b=[100.0, 80.0, 40.0],
    )


def main() -> None:
    opts = SolveOptions()
    cases = [("textbook", textbook_lp())]
    for seed in range(3):
        cases.append((f"random-{seed}", generate_random_lp(3, 3, seed)))
    for size in (10, 25, 50):
        cases.append((f"random-{size}x{size}", generate_random_lp(size, size, size)))

    print("name,status,objective,iterations,time_ms")
    for name, problem in cases:
        start = time.perf_counter()
        solution = simplex_solve(problem, opts)
        elapsed_ms = (time.perf_counter() - start) * 1000
        print(
            f"{name},{solution.status},{solution.objective_value},{solution.iterations},{elapsed_ms:.2f}"
        )


if __name__ == "__main__":
    main()
