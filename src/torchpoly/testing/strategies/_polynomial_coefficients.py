from typing import List

import hypothesis.strategies

from ._real_numbers import real_numbers


def polynomial_coefficients(
    min_size: int = 0,
    max_size: int = 8,
    min_value: float = -1e3,
    max_value: float = 1e3,
    nonzero_leading: bool = False,
) -> hypothesis.strategies.SearchStrategy[List[float]]:
    """Strategy for ascending coefficient lists.

    Parameters
    ----------
    min_size, max_size : int
        Bounds on the number of coefficients.
    min_value, max_value : float
        Bounds on each coefficient.
    nonzero_leading : bool
        If True, the last coefficient is at least 1 in magnitude, so the
        list is already normalized and describes a nonzero polynomial.
    """
    coefficients = hypothesis.strategies.lists(
        real_numbers(min_value, max_value),
        min_size=min_size,
        max_size=max_size,
    )

    if not nonzero_leading:
        return coefficients

    leading = real_numbers(min_value, max_value).filter(lambda c: abs(c) >= 1)

    return hypothesis.strategies.tuples(coefficients, leading).map(
        lambda pair: pair[0] + [pair[1]]
    )
