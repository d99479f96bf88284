"""Property-based tests for polynomial algebra."""

import hypothesis

from torchpoly.polynomial import (
    polynomial,
    polynomial_add,
    polynomial_antiderivative,
    polynomial_degree,
    polynomial_derivative,
    polynomial_equal,
    polynomial_multiply,
    polynomial_normalize,
    polynomial_subtract,
)
from torchpoly.testing.strategies import polynomial_coefficients, real_numbers

_settings = hypothesis.settings(max_examples=50, deadline=None)


class TestPolynomialProperties:
    """Algebraic laws that hold for every polynomial."""

    @_settings
    @hypothesis.given(polynomial_coefficients())
    def test_normalize_idempotent(self, coeffs):
        """Normalizing twice is the same as once."""
        once = polynomial(*coeffs)
        twice = polynomial_normalize(once.coeffs)
        assert twice.coeffs.tolist() == once.coeffs.tolist()

    @_settings
    @hypothesis.given(polynomial_coefficients())
    def test_normal_form(self, coeffs):
        """Leading coefficient is nonzero unless the degree is 0."""
        p = polynomial(*coeffs)
        assert p.coeffs.shape[-1] >= 1
        if polynomial_degree(p) > 0:
            assert p.coeffs[-1].item() != 0.0

    @_settings
    @hypothesis.given(polynomial_coefficients())
    def test_add_zero_identity(self, coeffs):
        """p + 0 == p."""
        p = polynomial(*coeffs)
        assert polynomial_equal(polynomial_add(p, polynomial()), p)

    @_settings
    @hypothesis.given(polynomial_coefficients(), polynomial_coefficients())
    def test_add_commutative(self, p_coeffs, q_coeffs):
        """p + q == q + p."""
        p = polynomial(*p_coeffs)
        q = polynomial(*q_coeffs)
        assert polynomial_equal(polynomial_add(p, q), polynomial_add(q, p))

    @_settings
    @hypothesis.given(polynomial_coefficients())
    def test_subtract_self(self, coeffs):
        """p - p == [0]."""
        p = polynomial(*coeffs)
        assert polynomial_subtract(p, p).coeffs.tolist() == [0.0]

    @_settings
    @hypothesis.given(
        polynomial_coefficients(nonzero_leading=True),
        polynomial_coefficients(nonzero_leading=True),
    )
    def test_multiply_degree(self, p_coeffs, q_coeffs):
        """deg(p * q) == deg(p) + deg(q) for nonzero p and q."""
        p = polynomial(*p_coeffs)
        q = polynomial(*q_coeffs)
        assert polynomial_degree(polynomial_multiply(p, q)) == (
            polynomial_degree(p) + polynomial_degree(q)
        )

    @_settings
    @hypothesis.given(polynomial_coefficients(), real_numbers())
    def test_derivative_of_antiderivative(self, coeffs, constant):
        """d/dx of the antiderivative recovers p."""
        p = polynomial(*coeffs)
        r = polynomial_derivative(polynomial_antiderivative(p, constant))
        assert polynomial_equal(r, p)
