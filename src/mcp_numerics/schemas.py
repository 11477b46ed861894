from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

Relation = Literal["<=", ">=", "="]
VarType = Literal["C", "I"]
PivotRule = Literal["dantzig", "bland"]
LPStatus = Literal["optimal", "infeasible", "unbounded", "iteration_limit"]


class RelaxationOptions(BaseModel):
    tolerance: float = Field(default=1e-3, gt=0.0)
    max_iterations: int = Field(default=25, ge=1)


class LPProblem(BaseModel):
    """Maximise ``c @ x`` subject to ``A x (relation) b`` and ``x >= 0``."""

    name: str = "problem"
    c: List[float]
    A: List[List[float]]
    b: List[float]
    relations: Optional[List[Relation]] = None
    var_types: Optional[List[VarType]] = None

    @model_validator(mode="after")
    def _check_dimensions(self) -> "LPProblem":
        n = len(self.c)
        m = len(self.A)
        if len(self.b) != m:
            raise ValueError(f"b has {len(self.b)} entries but A has {m} rows.")
        for idx, row in enumerate(self.A):
            if len(row) != n:
                raise ValueError(f"Row {idx} of A has {len(row)} columns, expected {n}.")
        if self.relations is None:
            self.relations = ["<="] * m
        elif len(self.relations) != m:
            raise ValueError(f"relations has {len(self.relations)} entries, expected {m}.")
        if self.var_types is None:
            self.var_types = ["C"] * n
        elif len(self.var_types) != n:
            raise ValueError(f"var_types has {len(self.var_types)} entries, expected {n}.")
        return self

    @property
    def n_vars(self) -> int:
        return len(self.c)

    @property
    def n_constraints(self) -> int:
        return len(self.A)

    def describe(self) -> str:
        def _expr(coeffs: List[float]) -> str:
            text = ""
            for j, coef in enumerate(coeffs):
                term = f"{abs(coef):g}x{j + 1}"
                if not text:
                    text = term if coef >= 0 else f"-{term}"
                else:
                    text += f" + {term}" if coef >= 0 else f" - {term}"
            return text

        lines = [f"maximize {_expr(self.c)}", "subject to"]
        for row, rel, rhs in zip(self.A, self.relations or [], self.b):
            lines.append(f"  {_expr(row)} {rel} {rhs:g}")
        return "\n".join(lines)


class SolveOptions(BaseModel):
    max_iters: int = 1000
    tol: float = 1e-9
    pivot_rule: PivotRule = "dantzig"


class LPSolution(BaseModel):
    status: LPStatus
    objective_value: Optional[float]
    x: Optional[List[float]]
    iterations: int
    message: str = ""

    def raise_for_status(self) -> "LPSolution":
        from .lp.errors import Infeasible, MaxIterationsReached, Unbounded  # local import to avoid cycle

        errors = {
            "infeasible": Infeasible,
            "unbounded": Unbounded,
            "iteration_limit": MaxIterationsReached,
        }
        if self.status in errors:
            raise errors[self.status](self.message or self.status)
        return self
