"""
Logistic regression classification for PyFmincg.

Provides the regularized logistic regression loss and gradient, and a
one-vs-all driver that trains one binary classifier per class with fmincg
and predicts the class whose classifier gives the highest probability.
"""

import warnings
from typing import List, Sequence, Tuple

from ..core import DenseMatrix, ShapeMismatchError
from ..optimization import fmincg
from ..utils.validation import (
    validate_budget,
    validate_labels,
    validate_non_negative,
    validate_positive_integer,
)
from ..utils.log import get_logger

logger = get_logger(__name__)


def _check_problem(X: DenseMatrix, y: DenseMatrix, W: DenseMatrix) -> None:
    if X.rows == 0:
        raise ValueError("X must contain at least one example")
    if y.shape != (X.rows, 1):
        raise ShapeMismatchError(
            f"Targets must be a {X.rows}x1 column vector, got "
            f"{y.rows}x{y.columns}"
        )
    if W.shape != (X.columns, 1):
        raise ShapeMismatchError(
            f"Weights must be a {X.columns}x1 column vector, got "
            f"{W.rows}x{W.columns}"
        )


def logistic_regression_cost(
    X: DenseMatrix,
    y: DenseMatrix,
    W: DenseMatrix
) -> Tuple[float, DenseMatrix]:
    """
    Compute the logistic regression loss and its gradient.

    Parameters
    ----------
    X : DenseMatrix
        Training examples, shape (m, n), one example per row
    y : DenseMatrix
        Targets, shape (m, 1), 1 for the positive class and 0 otherwise
    W : DenseMatrix
        Weights, shape (n, 1)

    Returns
    -------
    loss : float
        Mean cross-entropy:
        -(log(g)' y + log(1 - g)' (1 - y)) / m  with  g = sigmoid(X W)
    gradient : DenseMatrix
        Partial derivatives of the loss w.r.t. each weight, X' (g - y) / m

    Raises
    ------
    ValueError
        If X has no rows
    ShapeMismatchError
        If y or W have the wrong shape

    Examples
    --------
    >>> X = DenseMatrix.from_rows([[1.0, 2.0], [1.0, -1.0]])
    >>> y = DenseMatrix.from_rows([[1.0], [0.0]])
    >>> loss, grad = logistic_regression_cost(X, y, DenseMatrix(2, 1))
    >>> round(loss, 4)
    0.6931

    Notes
    -----
    Saturated probabilities (g exactly 0 or 1) give an infinite or NaN
    loss. fmincg treats that as a bad step and shrinks it.
    """
    _check_problem(X, y, W)
    m = float(X.rows)

    g = (X @ W).sigmoid()
    loss = (g.log().transpose() @ y + (1 - g).log().transpose() @ (1 - y)) / -m
    gradient = X.transpose() @ (g - y) / m

    return loss.scalar, gradient


def logistic_regression_cost_regularized(
    X: DenseMatrix,
    y: DenseMatrix,
    W: DenseMatrix,
    lam: float
) -> Tuple[float, DenseMatrix]:
    """
    Logistic regression loss and gradient with L2 regularization.

    Adds lam / (2m) * sum(W[1:]^2) to the loss and lam / m * W to the
    gradient. W[0], the weight of the bias column, is not regularized.

    Parameters
    ----------
    X, y, W : DenseMatrix
        As for logistic_regression_cost
    lam : float
        Regularization strength (>= 0)

    Returns
    -------
    loss : float
    gradient : DenseMatrix
    """
    validate_non_negative(lam, "lam")
    loss, gradient = logistic_regression_cost(X, y, W)

    temp = W.copy()
    temp[0] = 0.0

    m = float(X.rows)
    loss += (lam / (2 * m)) * temp.pow(2).sum()
    gradient = gradient + (lam / m) * temp

    return loss, gradient


def add_intercept(X: DenseMatrix) -> DenseMatrix:
    """Prepend a column of ones (the bias feature) to X."""
    result = DenseMatrix(X.rows, X.columns + 1, 1.0)
    for c in range(X.columns):
        result.set_column(c + 1, X.column(c))
    return result


def train_one_vs_all(
    X: DenseMatrix,
    y: Sequence[int],
    num_labels: int,
    lam: float = 0.1,
    budget: int = 50
) -> DenseMatrix:
    """
    Train one regularized logistic regression classifier per class.

    Parameters
    ----------
    X : DenseMatrix
        Training examples, shape (m, n). Include a bias column (see
        add_intercept) if the classifiers need an offset.
    y : sequence of int
        Class label of every example, in [0, num_labels)
    num_labels : int
        Number of classes
    lam : float, optional
        Regularization strength (default: 0.1)
    budget : int, optional
        fmincg run length per class (default: 50 line searches)

    Returns
    -------
    DenseMatrix
        Weights of shape (n, num_labels); column k holds the classifier
        for label k versus all other labels

    Examples
    --------
    >>> X = add_intercept(DenseMatrix.from_rows([[0.0], [0.2], [5.0], [5.2]]))
    >>> W = train_one_vs_all(X, [0, 0, 1, 1], num_labels=2)
    >>> predict_one_vs_all(X, W)
    [0, 0, 1, 1]

    Notes
    -----
    Before training, the loss of all-zero weights is logged at INFO
    level as a sanity check; it always equals log(2) = 0.6931.
    """
    validate_positive_integer(num_labels, "num_labels")
    validate_labels(y, num_labels, X.rows)
    validate_non_negative(lam, "lam")
    validate_budget(budget)

    all_weights = DenseMatrix(X.columns, num_labels, 0.0)

    for label in range(num_labels):
        # 1 for examples of this class, 0 for every other class
        this_class = DenseMatrix(len(y), 1, 0.0)
        for r, target in enumerate(y):
            this_class[r] = 1.0 if target == label else 0.0

        def objective(W: DenseMatrix) -> Tuple[float, DenseMatrix]:
            return logistic_regression_cost_regularized(X, this_class, W, lam)

        initial_weights = DenseMatrix(X.columns, 1, 0.0)
        initial_loss, _ = objective(initial_weights)

        W, losses, iterations = fmincg(objective, initial_weights, budget)
        final_loss = losses[-1] if losses else float('inf')
        logger.info(
            "class %i: initial loss %.4f, iterations %i, loss %.4f",
            label, initial_loss, iterations, final_loss
        )

        if not losses:
            warnings.warn(
                f"No line search succeeded for class {label}; "
                f"its weights were left at zero"
            )

        all_weights.set_column(label, W)

    return all_weights


def predict_one_vs_all(X: DenseMatrix, W: DenseMatrix) -> List[int]:
    """
    Predict the label of every example with one-vs-all classifiers.

    The prediction for a row is the column (label) whose classifier gives
    the highest probability; ties go to the lowest label.
    """
    prediction = (X @ W).sigmoid()
    return [prediction.row_argmax(r).index for r in range(prediction.rows)]


def one_vs_all_accuracy(
    X: DenseMatrix,
    y: Sequence[int],
    W: DenseMatrix
) -> float:
    """
    Percentage of examples whose predicted label equals y.

    Returns
    -------
    float
        Accuracy in [0, 100]
    """
    if len(y) != X.rows:
        raise ValueError(f"Got {len(y)} labels for {X.rows} examples")
    if X.rows == 0:
        raise ValueError("X must contain at least one example")

    predicted = predict_one_vs_all(X, W)
    correct = sum(1 for p, t in zip(predicted, y) if p == t)
    return correct * 100.0 / X.rows
