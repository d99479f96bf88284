from ._polynomial import Polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_negate import polynomial_negate


def polynomial_subtract(p: Polynomial, q: Polynomial) -> Polynomial:
    """Subtract two polynomials.

    Computed as p + (-q).

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to subtract.

    Returns
    -------
    Polynomial
        Normalized difference p - q. ``polynomial_subtract(p, p)`` is [0].
    """
    return polynomial_add(p, polynomial_negate(q))
