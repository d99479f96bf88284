from ._polynomial import Polynomial, _coefficients

# Coefficients smaller than this in magnitude are not displayed
_DISPLAY_THRESHOLD = 0.0001

_DECIMALS = 3


def polynomial_to_string(p: Polynomial) -> str:
    """Format polynomial as human-readable text.

    Terms are written from the highest power down, e.g.
    ``"4.000x^4 + 2.000x^2 - x - 3.000"``.

    Parameters
    ----------
    p : Polynomial
        Polynomial to format.

    Returns
    -------
    str
        Text representation.

    Notes
    -----
    - Terms with |c| < 1e-4 are skipped, except the constant term when
      nothing else has been written, so the zero polynomial is "0.000".
    - Coefficients are written with three decimals. Non-constant terms
      with |c| == 1 are written without digits ("x", "-x^2").
    - Terms after the first are joined with " + " or " - " and written by
      absolute value.
    - Non-finite coefficients use Python float formatting ("nan", "inf",
      "-inf").

    Examples
    --------
    >>> polynomial_to_string(polynomial(-3.0, -1.0, 2.0, 0.0, 4.0))
    '4.000x^4 + 2.000x^2 - x - 3.000'
    >>> polynomial_to_string(polynomial())
    '0.000'
    """
    coeffs = _coefficients(p).tolist()

    parts = []
    first = True

    for power in range(len(coeffs) - 1, -1, -1):
        c = coeffs[power]
        magnitude = abs(c)

        if magnitude < _DISPLAY_THRESHOLD and not (first and power == 0):
            continue

        if not first:
            parts.append(" - " if c < 0 else " + ")
            c = magnitude

        if magnitude != 1.0 or power == 0:
            parts.append(f"{c:.{_DECIMALS}f}")
        elif c == -1.0:
            parts.append("-")

        if power != 0:
            parts.append("x")
            if power != 1:
                parts.append(f"^{power}")

        first = False

    return "".join(parts)
