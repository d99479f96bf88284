from ._polynomial import Polynomial, _coefficients


def polynomial_coefficient(p: Polynomial, i: int) -> float:
    """Return the coefficient of x^i.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    i : int
        Power of x.

    Returns
    -------
    float
        Coefficient of x^i, or 0.0 when i is negative or above the degree.

    Examples
    --------
    >>> p = polynomial(1.0, 2.0, 3.0)
    >>> polynomial_coefficient(p, 2)
    3.0
    >>> polynomial_coefficient(p, 5)
    0.0
    """
    coeffs = _coefficients(p)

    if i < 0 or i >= coeffs.shape[-1]:
        return 0.0

    return coeffs[i].item()
