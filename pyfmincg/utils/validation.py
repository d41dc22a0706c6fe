"""
Validation functions for PyFmincg.

This module provides functions for validating arguments and objective
function outputs before they reach the numerical code.
"""

import numbers
import numpy as np
from typing import Sequence, Tuple

from ..core import DenseMatrix, ShapeMismatchError


def validate_budget(budget: int) -> None:
    """
    Validate the run length given to the minimizer.

    Parameters
    ----------
    budget : int
        Positive: maximum number of line searches.
        Negative: maximum number of function evaluations.
        Zero: return the starting point unchanged.

    Raises
    ------
    TypeError
        If budget is not an integer

    Examples
    --------
    >>> validate_budget(100)  # No error
    >>> validate_budget(2.5)  # Raises TypeError
    """
    if isinstance(budget, bool) or not isinstance(budget, numbers.Integral):
        raise TypeError(f"budget must be an integer, got {type(budget)}")


def validate_vector(x, param_name: str = "x") -> None:
    """
    Validate that x is a DenseMatrix row or column vector.

    Raises
    ------
    TypeError
        If x is not a DenseMatrix
    ShapeMismatchError
        If x has more than one row and more than one column
    """
    if not isinstance(x, DenseMatrix):
        raise TypeError(f"{param_name} must be a DenseMatrix, got {type(x)}")
    if not x.is_vector:
        raise ShapeMismatchError(
            f"{param_name} must be a row or column vector, got "
            f"{x.rows}x{x.columns} matrix"
        )


def validate_objective_output(
    output,
    shape: Tuple[int, int]
) -> Tuple[float, DenseMatrix]:
    """
    Validate and normalize the (cost, gradient) pair of an objective.

    Parameters
    ----------
    output : tuple
        Value returned by the objective function
    shape : tuple of int
        Shape of the point the objective was evaluated at

    Returns
    -------
    cost : float
        Objective value (may be NaN or infinite)
    gradient : DenseMatrix
        Gradient with the given shape. Array-like gradients are converted
        (1D arrays become column vectors).

    Raises
    ------
    TypeError
        If output is not a pair or the cost is not a number
    ShapeMismatchError
        If the gradient shape differs from shape
    """
    try:
        cost, gradient = output
    except (TypeError, ValueError):
        raise TypeError(
            f"Objective must return a (cost, gradient) pair, got {type(output)}"
        )

    try:
        cost = float(cost)
    except (TypeError, ValueError):
        raise TypeError(f"Objective cost must be a number, got {type(cost)}")

    if not isinstance(gradient, DenseMatrix):
        gradient = DenseMatrix.from_array(gradient)

    if gradient.shape != tuple(shape):
        raise ShapeMismatchError(
            f"Gradient has shape {gradient.shape}, expected {tuple(shape)}"
        )

    return cost, gradient


def validate_labels(
    labels: Sequence[int],
    num_labels: int,
    n_examples: int
) -> None:
    """
    Validate class labels for one-vs-all training.

    Parameters
    ----------
    labels : sequence of int
        Class label for every example
    num_labels : int
        Number of classes; valid labels are 0 .. num_labels - 1
    n_examples : int
        Number of rows of the data matrix

    Raises
    ------
    ValueError
        If the number of labels differs from n_examples or a label is
        outside [0, num_labels)

    Examples
    --------
    >>> validate_labels([0, 1, 2, 1], num_labels=3, n_examples=4)  # No error
    >>> validate_labels([0, 3], num_labels=3, n_examples=2)  # Raises ValueError
    """
    if len(labels) != n_examples:
        raise ValueError(
            f"Got {len(labels)} labels for {n_examples} examples"
        )

    labels = np.asarray(labels)
    if labels.size and not np.issubdtype(labels.dtype, np.integer):
        raise ValueError(f"Labels must be integers, got dtype {labels.dtype}")

    invalid = labels[(labels < 0) | (labels >= num_labels)]
    if invalid.size:
        raise ValueError(
            f"Labels must be in [0, {num_labels}), got {sorted(set(invalid.tolist()))}"
        )


def validate_positive(
    value: float,
    param_name: str = "value"
) -> None:
    """
    Validate that a value is positive.

    Raises
    ------
    TypeError
        If value is not a number
    ValueError
        If value is not positive
    """
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise TypeError(f"{param_name} must be a number, got {type(value)}")

    if value <= 0:
        raise ValueError(f"{param_name} must be positive, got {value}")


def validate_positive_integer(
    value: int,
    param_name: str = "value"
) -> None:
    """
    Validate that a value is an integer >= 1 (e.g. a number of classes).

    Raises
    ------
    TypeError
        If value is not an integer (bools are rejected)
    ValueError
        If value is smaller than 1

    Examples
    --------
    >>> validate_positive_integer(3, "num_labels")  # No error
    >>> validate_positive_integer(2.5, "num_labels")  # Raises TypeError
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{param_name} must be an integer, got {type(value)}")

    if value < 1:
        raise ValueError(f"{param_name} must be positive, got {value}")


def validate_non_negative(
    value: float,
    param_name: str = "value"
) -> None:
    """Validate that a value is a number >= 0 (e.g. a regularization weight)."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise TypeError(f"{param_name} must be a number, got {type(value)}")

    if not value >= 0:
        raise ValueError(f"{param_name} must be non-negative, got {value}")
