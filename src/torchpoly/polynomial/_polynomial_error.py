class PolynomialError(Exception):
    """Base class for polynomial errors.

    Raised when a polynomial cannot be built from the given coefficients
    (e.g., a coefficient tensor that is not one-dimensional).
    """

    pass
