"""torchpoly: single-variable polynomials on PyTorch tensors."""

from . import polynomial

__all__ = [
    "polynomial",
]

__version__ = "0.1.0"
