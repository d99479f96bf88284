from ._polynomial import Polynomial, _coefficients
from ._polynomial_normalize import polynomial_normalize


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Negate polynomial.

    Parameters
    ----------
    p : Polynomial
        Polynomial to negate.

    Returns
    -------
    Polynomial
        Negated polynomial -p.
    """
    return polynomial_normalize(-_coefficients(p))
