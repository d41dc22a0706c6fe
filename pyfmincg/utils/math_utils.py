"""
Gradient checking utilities for PyFmincg.

If the minimizer stops after only a few line searches, the objective's
value and gradient are often inconsistent. These helpers compare the
analytic gradient against finite differences (scipy.optimize).
"""

import numpy as np
from typing import Callable, Tuple
from scipy.optimize import approx_fprime, check_grad

from ..core import DenseMatrix
from .validation import validate_vector, validate_positive

Objective = Callable[[DenseMatrix], Tuple[float, DenseMatrix]]

# Same default step as scipy.optimize
DEFAULT_EPSILON = float(np.sqrt(np.finfo(float).eps))


def _split_objective(f: Objective, shape: Tuple[int, int]):
    """Wrap a (cost, gradient) objective as flat-array cost and gradient functions."""
    def cost(flat: np.ndarray) -> float:
        value, _ = f(DenseMatrix.from_array(flat.reshape(shape)))
        return float(value)

    def gradient(flat: np.ndarray) -> np.ndarray:
        _, grad = f(DenseMatrix.from_array(flat.reshape(shape)))
        return np.asarray(grad, dtype=float).ravel()

    return cost, gradient


def numerical_gradient(
    f: Objective,
    x: DenseMatrix,
    epsilon: float = DEFAULT_EPSILON
) -> DenseMatrix:
    """
    Forward-difference approximation of the gradient of f at x.

    Parameters
    ----------
    f : callable
        Objective returning (cost, gradient); only the cost is used
    x : DenseMatrix
        Point (row or column vector)
    epsilon : float, optional
        Finite-difference step (default: sqrt of machine epsilon)

    Returns
    -------
    DenseMatrix
        Approximate gradient with the shape of x

    Examples
    --------
    >>> def f(x):
    ...     return (x.dot(x), 2 * x)
    >>> x = DenseMatrix.from_rows([[1.0], [2.0]])
    >>> numerical_gradient(f, x).allclose(2 * x, atol=1e-6)
    True
    """
    validate_vector(x)
    validate_positive(epsilon, "epsilon")

    cost, _ = _split_objective(f, x.shape)
    approx = approx_fprime(x.data, cost, epsilon)
    return DenseMatrix.from_array(np.reshape(approx, x.shape))


def check_gradient(
    f: Objective,
    x: DenseMatrix,
    epsilon: float = DEFAULT_EPSILON
) -> float:
    """
    Distance between the analytic and the finite-difference gradient.

    Returns
    -------
    float
        2-norm of (analytic - numerical); small values (relative to the
        gradient magnitude) mean f is consistent.
    """
    validate_vector(x)
    validate_positive(epsilon, "epsilon")

    cost, gradient = _split_objective(f, x.shape)
    return float(check_grad(cost, gradient, x.data, epsilon=epsilon))
