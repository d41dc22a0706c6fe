"""
Unit tests for validation functions.
"""

import pytest
import numpy as np
from pyfmincg.core import DenseMatrix, ShapeMismatchError
from pyfmincg.utils import (
    validate_budget,
    validate_vector,
    validate_objective_output,
    validate_labels,
    validate_positive,
    validate_positive_integer,
    validate_non_negative,
)


class TestValidateBudget:
    """Tests for validate_budget."""

    @pytest.mark.parametrize("budget", [-100, -1, 0, 1, 100, np.int64(5)])
    def test_integers_accepted(self, budget):
        """Test that any integer passes."""
        validate_budget(budget)

    @pytest.mark.parametrize("budget", [2.5, 1.0, "10", None, True])
    def test_non_integers_rejected(self, budget):
        """Test that floats, strings, None and bools are rejected."""
        with pytest.raises(TypeError, match="budget must be an integer"):
            validate_budget(budget)


class TestValidateVector:
    """Tests for validate_vector."""

    def test_vectors_accepted(self):
        """Test row, column and 1x1 matrices."""
        validate_vector(DenseMatrix(3, 1))
        validate_vector(DenseMatrix(1, 3))
        validate_vector(DenseMatrix(1, 1))

    def test_matrix_rejected(self):
        """Test error for a 2x2 matrix."""
        with pytest.raises(ShapeMismatchError, match="x0 must be a row or column"):
            validate_vector(DenseMatrix(2, 2), "x0")

    def test_non_matrix_rejected(self):
        """Test error for a numpy array."""
        with pytest.raises(TypeError, match="must be a DenseMatrix"):
            validate_vector(np.zeros((3, 1)))


class TestValidateObjectiveOutput:
    """Tests for validate_objective_output."""

    def test_valid_pair(self):
        """Test that a correct pair is returned unchanged."""
        gradient = DenseMatrix(2, 1, 1.0)
        cost, result = validate_objective_output((1.5, gradient), (2, 1))
        assert cost == 1.5
        assert result is gradient

    def test_numpy_cost_converted(self):
        """Test that numpy scalars become floats."""
        cost, _ = validate_objective_output((np.float32(2.0), DenseMatrix(1, 1)), (1, 1))
        assert type(cost) is float

    def test_array_gradient_converted(self):
        """Test that a 1D array becomes a column vector."""
        _, gradient = validate_objective_output((0.0, np.array([1.0, 2.0])), (2, 1))
        assert isinstance(gradient, DenseMatrix)
        assert gradient.tolist() == [[1.0], [2.0]]

    def test_non_finite_cost_allowed(self):
        """Test that inf and nan costs pass through."""
        cost, _ = validate_objective_output((float('inf'), DenseMatrix(1, 1)), (1, 1))
        assert cost == float('inf')
        cost, _ = validate_objective_output((float('nan'), DenseMatrix(1, 1)), (1, 1))
        assert np.isnan(cost)

    def test_not_a_pair(self):
        """Test error when the output is a single value."""
        with pytest.raises(TypeError, match="pair"):
            validate_objective_output(1.0, (1, 1))
        with pytest.raises(TypeError, match="pair"):
            validate_objective_output((1.0, DenseMatrix(1, 1), 2), (1, 1))

    def test_bad_cost(self):
        """Test error when the cost is not a number."""
        with pytest.raises(TypeError, match="cost must be a number"):
            validate_objective_output(("a", DenseMatrix(1, 1)), (1, 1))

    def test_wrong_gradient_shape(self):
        """Test error for a transposed gradient."""
        with pytest.raises(ShapeMismatchError, match="Gradient has shape"):
            validate_objective_output((0.0, DenseMatrix(1, 2)), (2, 1))


class TestValidateLabels:
    """Tests for validate_labels."""

    def test_valid_labels(self):
        """Test labels inside the range."""
        validate_labels([0, 1, 2, 1], num_labels=3, n_examples=4)

    def test_count_mismatch(self):
        """Test error when labels and examples differ in number."""
        with pytest.raises(ValueError, match="Got 2 labels for 3 examples"):
            validate_labels([0, 1], num_labels=2, n_examples=3)

    def test_out_of_range(self):
        """Test error for negative and too large labels."""
        with pytest.raises(ValueError, match=r"Labels must be in \[0, 3\)"):
            validate_labels([0, 3, -1], num_labels=3, n_examples=3)

    def test_non_integer_labels(self):
        """Test error for float labels."""
        with pytest.raises(ValueError, match="integers"):
            validate_labels([0.0, 1.5], num_labels=2, n_examples=2)


class TestValidateNumbers:
    """Tests for validate_positive and validate_non_negative."""

    def test_positive(self):
        """Test positive values and rejections."""
        validate_positive(0.1)
        with pytest.raises(ValueError, match="must be positive"):
            validate_positive(0.0, "epsilon")
        with pytest.raises(TypeError):
            validate_positive("x")

    def test_positive_integer(self):
        """Test integer counts and rejections."""
        validate_positive_integer(1)
        validate_positive_integer(np.int64(4))
        with pytest.raises(TypeError, match="num_labels must be an integer"):
            validate_positive_integer(2.5, "num_labels")
        with pytest.raises(TypeError):
            validate_positive_integer(True)
        with pytest.raises(ValueError, match="must be positive"):
            validate_positive_integer(0)

    def test_non_negative(self):
        """Test non-negative values and rejections."""
        validate_non_negative(0.0)
        with pytest.raises(ValueError, match="lam must be non-negative"):
            validate_non_negative(-0.5, "lam")

    def test_nan_rejected_as_non_negative(self):
        """Test that NaN is not a valid regularization weight."""
        with pytest.raises(ValueError):
            validate_non_negative(float('nan'), "lam")
