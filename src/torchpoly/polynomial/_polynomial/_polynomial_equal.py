from ._polynomial import Polynomial, _coefficients


def polynomial_equal(
    p: Polynomial,
    q: Polynomial,
    tol: float = 1e-5,
) -> bool:
    """Check polynomial equality within tolerance.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float
        Absolute tolerance for coefficient comparison.

    Returns
    -------
    bool
        True if p and q have the same degree and every pair of
        coefficients differs by at most tol.
    """
    p_coeffs = _coefficients(p)
    q_coeffs = _coefficients(q)

    if p_coeffs.shape[-1] != q_coeffs.shape[-1]:
        return False

    diff = (p_coeffs - q_coeffs.to(p_coeffs.dtype)).abs()

    return bool((diff <= tol).all())
