from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_antiderivative import polynomial_antiderivative
from ._polynomial_coefficient import polynomial_coefficient
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_integral import polynomial_integral
from ._polynomial_mod import polynomial_mod
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_negate import polynomial_negate
from ._polynomial_normalize import polynomial_normalize
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_to_string import polynomial_to_string

__all__ = [
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
