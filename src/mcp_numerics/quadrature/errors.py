class IntegrationError(Exception):
    """Base class for quadrature failures."""


class InvalidInterval(IntegrationError):
    """The lower limit is not strictly below the upper limit."""


class InvalidFunction(IntegrationError):
    """The subdivision or node count does not suit the requested rule."""


class MaxIterationsReached(IntegrationError):
    """Romberg extrapolation ran out of rows before converging."""
