import torch

from ._polynomial import Polynomial, _coefficients
from ._polynomial_normalize import polynomial_normalize


def polynomial_derivative(p: Polynomial) -> Polynomial:
    """Compute derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Derivative dp/dx. Constant polynomial returns [0.0].

    Examples
    --------
    >>> p = polynomial(1.0, 2.0, 3.0)  # 1 + 2x + 3x^2
    >>> polynomial_derivative(p).coeffs  # 2 + 6x
    tensor([2., 6.], dtype=torch.float64)
    """
    coeffs = _coefficients(p)
    n = coeffs.shape[-1]

    # d/dx (a_0 + a_1*x + a_2*x^2 + ... + a_n*x^n)
    # = a_1 + 2*a_2*x + 3*a_3*x^2 + ... + n*a_n*x^(n-1)
    # new_coeffs[i] = (i+1) * old_coeffs[i+1]
    indices = torch.arange(1, n, device=coeffs.device, dtype=coeffs.dtype)

    return polynomial_normalize(coeffs[1:] * indices)
