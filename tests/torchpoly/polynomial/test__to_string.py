"""Tests for polynomial_to_string."""

import pytest
import torch

from torchpoly.polynomial import Polynomial, polynomial, polynomial_to_string


class TestPolynomialToString:
    """Tests for text rendering."""

    @pytest.mark.parametrize(
        "coeffs, expected",
        [
            ((-3.0, -1.0, 2.0, 0.0, 4.0), "4.000x^4 + 2.000x^2 - x - 3.000"),
            ((0.0, 1.0), "x"),
            ((0.0, -1.0), "-x"),
            ((), "0.000"),
            ((0.0,), "0.000"),
            ((1.5,), "1.500"),
            ((-1.0,), "-1.000"),
            ((1.0,), "1.000"),
            ((0.0, 2.0), "2.000x"),
            ((-2.5, 1.0), "x - 2.500"),
            ((1.0, 1.0, 1.0), "x^2 + x + 1.000"),
            ((3.0, -1.0, 0.0, -1.0), "-x^3 - x + 3.000"),
            ((2.0, 0.0, -1.0), "-x^2 + 2.000"),
            ((1.2344, -6.789), "-6.789x + 1.234"),
        ],
    )
    def test_format(self, coeffs, expected):
        """Rendering of representative polynomials."""
        assert polynomial_to_string(polynomial(*coeffs)) == expected

    def test_small_terms_skipped(self):
        """Terms below 1e-4 in magnitude are not written."""
        assert polynomial_to_string(polynomial(0.00001, 1.0)) == "x"

    def test_small_constant_only(self):
        """A lone small constant is still written."""
        assert polynomial_to_string(polynomial(0.00001)) == "0.000"

    def test_small_leading_term(self):
        """Constant is written when every higher term is skipped."""
        assert polynomial_to_string(polynomial(0.0, 0.00001)) == "0.000"

    def test_non_finite(self):
        """Non-finite coefficients use Python float formatting."""
        with pytest.warns(UserWarning):
            r = polynomial(1.0, 2.0, 3.0) % polynomial()

        assert polynomial_to_string(r) == "nanx^2 + 2.000x + 1.000"

    def test_infinite_constant(self):
        """Infinite constant term renders as inf."""
        assert polynomial_to_string(polynomial(float("-inf"))) == "-inf"

    def test_default(self):
        """Default (empty) polynomial renders as zero."""
        p = Polynomial(coeffs=torch.empty(0, dtype=torch.float64))
        assert polynomial_to_string(p) == "0.000"
