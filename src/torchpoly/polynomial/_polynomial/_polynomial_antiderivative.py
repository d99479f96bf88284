from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial, _coefficients
from ._polynomial_normalize import polynomial_normalize


def polynomial_antiderivative(
    p: Polynomial,
    constant: Union[Tensor, float] = 0.0,
) -> Polynomial:
    """Compute antiderivative (indefinite integral).

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    constant : Tensor or float
        Integration constant, used as the coefficient of x^0 (default 0).

    Returns
    -------
    Polynomial
        Normalized antiderivative with the given constant term.

    Examples
    --------
    >>> p = polynomial(1.0, 4.0)  # 1 + 4x
    >>> polynomial_antiderivative(p, 5.0).coeffs  # 5 + x + 2x^2
    tensor([5., 1., 2.], dtype=torch.float64)
    """
    coeffs = _coefficients(p)

    # Integer coefficients are integrated in float64
    if not coeffs.is_floating_point():
        coeffs = coeffs.to(torch.float64)

    n = coeffs.shape[-1]

    # Integral of (a_0 + a_1*x + ... + a_n*x^n)
    # = C + a_0*x + a_1*x^2/2 + a_2*x^3/3 + ... + a_n*x^(n+1)/(n+1)
    # new_coeffs[0] = constant
    # new_coeffs[i+1] = old_coeffs[i] / (i+1)
    indices = torch.arange(1, n + 1, device=coeffs.device, dtype=coeffs.dtype)
    integrated = coeffs / indices

    c = torch.as_tensor(constant, dtype=coeffs.dtype, device=coeffs.device)

    new_coeffs = torch.cat([c.reshape(1), integrated], dim=-1)

    return polynomial_normalize(new_coeffs)
