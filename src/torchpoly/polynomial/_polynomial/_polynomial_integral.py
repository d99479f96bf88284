from typing import Union

from torch import Tensor

from ._polynomial import Polynomial
from ._polynomial_antiderivative import polynomial_antiderivative
from ._polynomial_evaluate import polynomial_evaluate


def polynomial_integral(
    p: Polynomial,
    lower: Union[Tensor, float],
    upper: Union[Tensor, float],
) -> Union[Tensor, float]:
    """Compute definite integral of polynomial.

    Computes integral_{lower}^{upper} p(x) dx.

    Parameters
    ----------
    p : Polynomial
        Polynomial to integrate.
    lower : Tensor or float
        Lower limit of integration.
    upper : Tensor or float
        Upper limit of integration.

    Returns
    -------
    Tensor or float
        Value of definite integral.

    Notes
    -----
    Computed as F(upper) - F(lower) where F is the antiderivative.

    Examples
    --------
    >>> p = polynomial(0.0, 0.0, 3.0)  # 3x^2
    >>> polynomial_integral(p, 0.0, 2.0)
    8.0
    """
    # Compute antiderivative with C=0
    antiderivative = polynomial_antiderivative(p, constant=0.0)

    # Evaluate at endpoints
    f_upper = polynomial_evaluate(antiderivative, upper)
    f_lower = polynomial_evaluate(antiderivative, lower)

    return f_upper - f_lower
