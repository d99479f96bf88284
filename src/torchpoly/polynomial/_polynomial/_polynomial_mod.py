import warnings

import torch

from ._polynomial import Polynomial, _coefficients
from ._polynomial_degree import polynomial_degree
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_normalize import polynomial_normalize
from ._polynomial_subtract import polynomial_subtract


def polynomial_mod(p: Polynomial, q: Polynomial) -> Polynomial:
    """Return remainder of one step of polynomial long division.

    When deg(p) >= deg(q), the leading term of p is cancelled once:

        t = lead(p) / lead(q)
        r = p - t * x^(deg(p) - deg(q)) * q

    Otherwise p is returned unchanged. Only one step is taken, so the
    result can still have degree >= deg(q).

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial.

    Returns
    -------
    Polynomial
        Remainder after one reduction step.

    Warns
    -----
    UserWarning
        If the leading coefficient of q is zero. The division is still
        carried out and the result holds inf or nan coefficients.

    Examples
    --------
    >>> p = polynomial(1.0, 2.0, 3.0)  # 1 + 2x + 3x^2
    >>> q = polynomial(3.0, 4.0)  # 3 + 4x
    >>> polynomial_mod(p, q).coeffs  # 1 - 0.25x
    tensor([ 1.0000, -0.2500], dtype=torch.float64)
    """
    p_coeffs = _coefficients(p)
    q_coeffs = _coefficients(q)

    deg_p = polynomial_degree(p)
    deg_q = polynomial_degree(q)

    if deg_p < deg_q:
        return polynomial_normalize(p_coeffs)

    leading_q = q_coeffs[deg_q]

    if leading_q == 0:
        warnings.warn(
            "Divisor has a zero leading coefficient; the remainder will "
            "contain non-finite coefficients.",
            stacklevel=2,
        )

    # Single quotient term t * x^(deg_p - deg_q)
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)
    term = torch.zeros(
        deg_p - deg_q + 1, dtype=common_dtype, device=p_coeffs.device
    )
    term[-1] = p_coeffs[deg_p] / leading_q

    quotient = polynomial_normalize(term)

    return polynomial_subtract(p, polynomial_multiply(quotient, q))
