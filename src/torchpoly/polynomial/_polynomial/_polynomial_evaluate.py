from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial, _coefficients


def polynomial_evaluate(
    p: Polynomial,
    x: Union[Tensor, float],
) -> Union[Tensor, float]:
    """Evaluate polynomial at points.

    Computes sum_i coeffs[i] * x^i with each power of x formed directly.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (N,).
    x : Tensor or float
        Evaluation point(s). A tensor may have any shape.

    Returns
    -------
    Tensor or float
        Values p(x). A tensor of the same shape as x when x is a tensor,
        otherwise a Python float.

    Notes
    -----
    The power-sum form is used instead of Horner's method, so rounding
    error grows with the degree somewhat faster than with Horner.

    Examples
    --------
    >>> p = polynomial(-1.0, 2.0, -3.0)
    >>> polynomial_evaluate(p, 2.5)
    -14.75
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0], dtype=torch.float64))
    tensor([-1., -2.], dtype=torch.float64)
    """
    coeffs = _coefficients(p)

    is_tensor = isinstance(x, Tensor)

    if is_tensor:
        points = x.to(device=coeffs.device)
    else:
        points = torch.tensor(x, dtype=coeffs.dtype, device=coeffs.device)

    # Promote to common dtype
    common_dtype = torch.promote_types(coeffs.dtype, points.dtype)
    coeffs = coeffs.to(common_dtype)
    points = points.to(common_dtype)

    powers = torch.arange(
        coeffs.shape[-1], device=coeffs.device, dtype=common_dtype
    )

    # (..., 1) ** (N,) -> (..., N), then contract against coefficients
    result = (coeffs * points.unsqueeze(-1) ** powers).sum(dim=-1)

    if is_tensor:
        return result

    return result.item()
