from ._polynomial import Polynomial, _coefficients


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1. The zero polynomial has degree 0.
    """
    return _coefficients(p).shape[-1] - 1
