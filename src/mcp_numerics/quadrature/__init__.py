"""Definite-integral quadrature."""

from .errors import IntegrationError, InvalidFunction, InvalidInterval, MaxIterationsReached
from .romberg import romberg
from .rules import gaussian_quadrature, simpson13, simpson38, trapezoidal

__all__ = [
    "trapezoidal",
    "simpson13",
    "simpson38",
    "romberg",
    "gaussian_quadrature",
    "IntegrationError",
    "InvalidInterval",
    "InvalidFunction",
    "MaxIterationsReached",
]
