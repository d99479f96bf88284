import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_normalize(coeffs: Tensor) -> Polynomial:
    """Build a polynomial in normal form from a coefficient tensor.

    Removes trailing coefficients that are exactly zero. The constant term
    is never removed, so the zero polynomial is [0].

    Parameters
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,). May be empty.

    Returns
    -------
    Polynomial
        Polynomial over a copy of the kept coefficients.

    Notes
    -----
    Zero is tested with exact equality, not a tolerance; 1e-300 is kept.
    NaN coefficients are never trimmed.

    Examples
    --------
    >>> polynomial_normalize(torch.tensor([1.0, 0.0, 2.0, 0.0, 0.0])).coeffs
    tensor([1., 0., 2.])
    >>> polynomial_normalize(torch.tensor([0.0, 0.0])).coeffs
    tensor([0.])
    """
    n = coeffs.shape[-1]

    if n == 0:
        return Polynomial(
            coeffs=torch.zeros(1, dtype=coeffs.dtype, device=coeffs.device)
        )

    # Find last position that is non-zero, counting index 0 as kept
    mask = coeffs != 0
    mask[0] = True

    indices = torch.arange(n, device=coeffs.device)
    last_nonzero = indices[mask].max().item()

    return Polynomial(coeffs=coeffs[: last_nonzero + 1].clone())
