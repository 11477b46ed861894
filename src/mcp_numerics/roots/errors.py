class RootFindingError(Exception):
    """Base class for root-finding failures."""


class NoRootInInterval(RootFindingError):
    """The function does not change sign over the bracket."""


class InvalidFunction(RootFindingError):
    """The function or its derivative cannot be used at the current iterate."""


class MaxIterationsReached(RootFindingError):
    """The iteration budget ran out before a stopping test was met."""
