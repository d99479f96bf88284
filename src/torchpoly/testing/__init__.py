"""Testing helpers for torchpoly."""

from . import strategies

__all__ = [
    "strategies",
]
