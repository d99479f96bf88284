"""Polynomials in power basis with real coefficients."""

from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_antiderivative,
    polynomial_coefficient,
    polynomial_degree,
    polynomial_derivative,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_integral,
    polynomial_mod,
    polynomial_multiply,
    polynomial_negate,
    polynomial_normalize,
    polynomial_subtract,
    polynomial_to_string,
)
from ._polynomial_error import PolynomialError

__all__ = [
    # Exceptions
    "PolynomialError",
    # Polynomial
    "Polynomial",
    "polynomial",
    "polynomial_add",
    "polynomial_antiderivative",
    "polynomial_coefficient",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_integral",
    "polynomial_mod",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_normalize",
    "polynomial_subtract",
    "polynomial_to_string",
]
