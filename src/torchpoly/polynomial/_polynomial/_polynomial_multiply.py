import torch

from ._polynomial import Polynomial, _coefficients
from ._polynomial_normalize import polynomial_normalize


def polynomial_multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Multiply two polynomials.

    Computes convolution of coefficients,
    result[k] = sum_{i + j = k} p[i] * q[j]. Result degree is
    deg(p) + deg(q) unless either operand is zero.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.

    Returns
    -------
    Polynomial
        Normalized product p * q. A zero operand gives [0].

    Examples
    --------
    >>> polynomial_multiply(polynomial(3.0, 4.0), polynomial(1.0, 2.0, 3.0)).coeffs
    tensor([ 3., 10., 17., 12.], dtype=torch.float64)
    """
    p_coeffs = _coefficients(p)
    q_coeffs = _coefficients(q)

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    # Promote to common dtype
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)
    p_coeffs = p_coeffs.to(common_dtype)
    q_coeffs = q_coeffs.to(common_dtype)

    # Every pairwise product p[i] * q[j] lands in slot i + j
    products = torch.outer(p_coeffs, q_coeffs)
    i = torch.arange(n_p, device=p_coeffs.device)
    j = torch.arange(n_q, device=p_coeffs.device)
    slots = (i.unsqueeze(-1) + j).flatten()

    n_out = n_p + n_q - 1
    result = torch.zeros(n_out, dtype=common_dtype, device=p_coeffs.device)
    result = result.index_add(0, slots, products.flatten())

    return polynomial_normalize(result)
