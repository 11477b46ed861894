class LPError(Exception):
    """Base class for linear-programming failures."""


class InvalidProblem(LPError):
    """The problem data cannot be turned into a tableau."""


class Infeasible(LPError):
    """No point satisfies every constraint."""


class Unbounded(LPError):
    """The objective grows without limit over the feasible region."""


class MaxIterationsReached(LPError):
    """The pivot budget ran out before an optimal tableau was reached."""
