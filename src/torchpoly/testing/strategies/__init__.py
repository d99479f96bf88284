"""Hypothesis strategies for polynomial testing."""

from ._polynomial_coefficients import polynomial_coefficients
from ._real_numbers import real_numbers

__all__ = [
    "polynomial_coefficients",
    "real_numbers",
]
