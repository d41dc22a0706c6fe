"""
Unit tests for gradient checking utilities.
"""

import pytest
import numpy as np
from scipy.optimize import rosen, rosen_der

from pyfmincg.core import DenseMatrix, ShapeMismatchError
from pyfmincg.utils import numerical_gradient, check_gradient
from pyfmincg.utils.math_utils import DEFAULT_EPSILON


def quadratic(x):
    return x.dot(x), 2 * x


def rosenbrock(x):
    flat = x.data
    return rosen(flat), DenseMatrix.from_array(rosen_der(flat))


class TestNumericalGradient:
    """Tests for numerical_gradient."""

    def test_quadratic(self):
        """Test finite differences of x' x."""
        x = DenseMatrix.from_rows([[1.0], [-2.0], [0.5]])
        result = numerical_gradient(quadratic, x)
        assert result.allclose(2 * x, atol=1e-6)

    def test_keeps_shape(self):
        """Test that row vectors give row-vector gradients."""
        x = DenseMatrix.from_rows([[1.0, 2.0]])
        assert numerical_gradient(quadratic, x).shape == (1, 2)

    def test_rosenbrock(self):
        """Test against scipy's analytic Rosenbrock derivative."""
        x = DenseMatrix.from_rows([[-1.2], [1.0]])
        result = numerical_gradient(rosenbrock, x)
        np.testing.assert_allclose(result.data, rosen_der(x.data), rtol=1e-5)

    def test_only_cost_is_used(self):
        """Test that a wrong analytic gradient does not matter."""
        x = DenseMatrix.from_rows([[3.0]])
        result = numerical_gradient(lambda v: (v.dot(v), DenseMatrix(1, 1)), x)
        assert np.isclose(result[0], 6.0, atol=1e-6)

    def test_default_epsilon(self):
        """Test the default finite-difference step."""
        assert np.isclose(DEFAULT_EPSILON, np.sqrt(np.finfo(float).eps))

    def test_invalid_epsilon(self):
        """Test error with non-positive step."""
        with pytest.raises(ValueError, match="positive"):
            numerical_gradient(quadratic, DenseMatrix(2, 1), epsilon=0.0)

    def test_matrix_point_error(self):
        """Test error when x is not a vector."""
        with pytest.raises(ShapeMismatchError):
            numerical_gradient(quadratic, DenseMatrix(2, 2))


class TestCheckGradient:
    """Tests for check_gradient."""

    def test_consistent_gradient(self):
        """Test a small difference for a correct gradient."""
        x = DenseMatrix.from_rows([[-1.2], [1.0]])
        assert check_gradient(rosenbrock, x) < 1e-3

    def test_inconsistent_gradient(self):
        """Test a large difference for a sign-flipped gradient."""
        x = DenseMatrix.from_rows([[1.0], [1.0]])
        difference = check_gradient(lambda v: (v.dot(v), -2 * v), x)
        assert np.isclose(difference, np.sqrt(32.0), rtol=1e-4)
