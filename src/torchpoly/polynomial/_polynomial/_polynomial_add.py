import torch

from ._polynomial import Polynomial, _coefficients
from ._polynomial_normalize import polynomial_normalize


def polynomial_add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Add two polynomials.

    Sums overlapping coefficients; coefficients of the longer operand past
    the end of the shorter one are carried over unchanged.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add.

    Returns
    -------
    Polynomial
        Normalized sum p + q.

    Examples
    --------
    >>> polynomial_add(polynomial(1.0, 2.0), polynomial(3.0, 4.0, 5.0)).coeffs
    tensor([4., 6., 5.], dtype=torch.float64)
    """
    p_coeffs = _coefficients(p)
    q_coeffs = _coefficients(q)

    # The longer operand is primary
    if p_coeffs.shape[-1] < q_coeffs.shape[-1]:
        p_coeffs, q_coeffs = q_coeffs, p_coeffs

    n_q = q_coeffs.shape[-1]

    # Promote to common dtype
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)

    result = p_coeffs.to(common_dtype).clone()
    result[:n_q] = result[:n_q] + q_coeffs.to(common_dtype)

    return polynomial_normalize(result)
