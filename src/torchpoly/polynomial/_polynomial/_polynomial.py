import dataclasses
from typing import Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchpoly.polynomial._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i. An empty tensor is the
        default value and behaves as the zero polynomial [0].

    Examples
    --------
    1 + 2x + 3x^2:
        polynomial(1.0, 2.0, 3.0)

    Operator overloading:
        p + q    # polynomial_add(p, q)
        p - q    # polynomial_subtract(p, q)
        p * q    # polynomial_multiply(p, q)
        p % q    # polynomial_mod(p, q)
        -p       # polynomial_negate(p)
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor = dataclasses.field(
        default_factory=lambda: torch.empty(0, dtype=torch.float64)
    )

    def __add__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def __radd__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(other, self)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(self, other)

    def __rsub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(other, self)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply

        return polynomial_multiply(self, other)

    def __rmul__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply

        return polynomial_multiply(other, self)

    def __neg__(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def __mod__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_mod import polynomial_mod

        return polynomial_mod(self, other)

    def __call__(self, x: Union[Tensor, float]) -> Union[Tensor, float]:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def _coefficients(p: Polynomial) -> Tensor:
    # Every read goes through here so the empty default acts as [0].
    coeffs = p.coeffs
    if coeffs is None:
        return torch.zeros(1, dtype=torch.float64)
    if coeffs.dim() == 0:
        return coeffs.reshape(1)
    if coeffs.shape[-1] == 0:
        return torch.zeros(1, dtype=coeffs.dtype, device=coeffs.device)
    return coeffs


def polynomial(
    *coefficients: Union[float, Tensor],
    dtype: torch.dtype = torch.float64,
) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    *coefficients : float
        Coefficients in ascending order; the i-th argument is the
        coefficient of x^i. A single Tensor, list or tuple is taken as
        the whole coefficient sequence. No arguments gives the zero
        polynomial.
    dtype : torch.dtype
        Floating point type of the coefficient tensor (default float64).

    Returns
    -------
    Polynomial
        Normalized polynomial over a copy of the coefficients.

    Raises
    ------
    PolynomialError
        If the coefficients do not form a one-dimensional sequence, or
        dtype is not a floating point type.

    Examples
    --------
    >>> p = polynomial(1.0, 2.0, 3.0)  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.], dtype=torch.float64)
    >>> polynomial(1.0, 2.0, 0.0).coeffs
    tensor([1., 2.], dtype=torch.float64)
    """
    from ._polynomial_normalize import polynomial_normalize

    if not dtype.is_floating_point:
        raise PolynomialError(
            f"Polynomial coefficients must be floating point, got {dtype}"
        )

    if len(coefficients) == 1 and isinstance(
        coefficients[0], (Tensor, list, tuple)
    ):
        coefficients = coefficients[0]

    if isinstance(coefficients, Tensor):
        coeffs = coefficients.detach().to(dtype=dtype).clone()
    else:
        coeffs = torch.tensor(list(coefficients), dtype=dtype)

    if coeffs.dim() == 0:
        coeffs = coeffs.reshape(1)

    if coeffs.dim() != 1:
        raise PolynomialError(
            f"Polynomial coefficients must be one-dimensional, "
            f"got shape {tuple(coeffs.shape)}"
        )

    return polynomial_normalize(coeffs)
