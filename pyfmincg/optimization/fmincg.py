"""
Nonlinear conjugate-gradient minimizer for PyFmincg.

fmincg minimizes a continuous differentiable multivariate function. Search
directions follow the Polack-Ribiere flavour of conjugate gradients; each
line search uses quadratic and cubic polynomial approximations with the
Wolfe-Powell stopping criteria, together with the slope ratio method for
guessing initial step sizes. Extra checks make sure that exploration takes
place and that extrapolation never becomes unboundedly large.

Based on the Octave/MATLAB fmincg by Carl Edward Rasmussen
(C) Copyright 1999, 2000 & 2001, Carl Edward Rasmussen, as distributed with
the ml-class exercises. Changes: function signature, no output display,
the expected first-step reduction is fixed to 1.0.
"""

import math
import numpy as np
from typing import Callable, List, NamedTuple, Tuple

from ..core import DenseMatrix
from ..utils.validation import (
    validate_budget,
    validate_vector,
    validate_objective_output,
)
from ..utils.log import get_logger

logger = get_logger(__name__)

Objective = Callable[[DenseMatrix], Tuple[float, DenseMatrix]]

RHO = 0.01    # sufficient decrease constant of the Wolfe-Powell conditions
SIG = 0.5     # curvature constant of the Wolfe-Powell conditions
INT = 0.1     # don't reevaluate within 0.1 of the limit of the current bracket
EXT = 3.0     # extrapolate maximum 3 times the current bracket
RATIO = 100.0  # maximum allowed slope ratio
MAX = 20      # maximum function evaluations per line search
RED = 1.0     # expected reduction in function value in the first line search

# Smallest normal double, keeps the slope ratio denominator away from zero
_TINY = float(np.finfo(float).tiny)


class MinimizeResult(NamedTuple):
    """
    Outcome of an fmincg run.

    Attributes
    ----------
    x : DenseMatrix
        Best point found
    cost_history : list of float
        Cost after every successful line search
    iterations : int
        Line searches (budget > 0) or function evaluations (budget < 0) used
    """

    x: DenseMatrix
    cost_history: List[float]
    iterations: int


def _quadratic_fit(f2, f3, d3, z3) -> float:
    """Step from point 3 to the minimum of the quadratic through f3, d3 and f2."""
    f2, f3, d3, z3 = map(np.float64, (f2, f3, d3, z3))
    with np.errstate(all='ignore'):
        return float(z3 - (0.5 * d3 * z3 * z3) / (d3 * z3 + f2 - f3))


def _cubic_coefficients(f2, f3, d2, d3, z3):
    f2, f3, d2, d3, z3 = map(np.float64, (f2, f3, d2, d3, z3))
    with np.errstate(all='ignore'):
        A = 6 * (f2 - f3) / z3 + 3 * (d2 + d3)
        B = 3 * (f3 - f2) - z3 * (d3 + 2 * d2)
    return A, B, d2, z3


def _cubic_fit(f2, f3, d2, d3, z3) -> float:
    """Minimizer of the cubic through points 2 and 3 (interpolation)."""
    A, B, d2, z3 = _cubic_coefficients(f2, f3, d2, d3, z3)
    with np.errstate(all='ignore'):
        # numerical error possible, the caller bisects on NaN/Inf
        return float((np.sqrt(B * B - A * d2 * z3 * z3) - B) / A)


def _cubic_extrapolation(f2, f3, d2, d3, z3) -> float:
    """Minimizer of the cubic through points 2 and 3 (extrapolation)."""
    A, B, d2, z3 = _cubic_coefficients(f2, f3, d2, d3, z3)
    with np.errstate(all='ignore'):
        return float(-d2 * z3 * z3 / (B + np.sqrt(B * B - A * d2 * z3 * z3)))


def _safe_divide(numerator: float, denominator: float) -> float:
    with np.errstate(all='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))


def fmincg(
    f: Objective,
    x0: DenseMatrix,
    budget: int = 100
) -> MinimizeResult:
    """
    Minimize f starting from x0 with nonlinear conjugate gradients.

    Parameters
    ----------
    f : callable
        Objective mapping a vector X to (cost, gradient), where gradient
        has the same shape as X
    x0 : DenseMatrix
        Starting point (row or column vector)
    budget : int, optional
        Length of the run (default: 100). If positive, the maximum number
        of line searches ("iterations"); if negative, its absolute value is
        the maximum number of function evaluations ("epochs"); if zero,
        x0 is returned without evaluating f.

    Returns
    -------
    MinimizeResult
        (x, cost_history, iterations). The result unpacks like a tuple:
        ``x, costs, i = fmincg(f, x0, 50)``

    Raises
    ------
    TypeError
        If budget is not an integer or f does not return a pair
    ShapeMismatchError
        If x0 is not a vector or a gradient has the wrong shape

    Examples
    --------
    >>> def bowl(x):
    ...     return x.dot(x), 2 * x
    >>> x, costs, i = fmincg(bowl, DenseMatrix.from_rows([[10.0], [10.0]]), 50)
    >>> abs(x[0]) < 1e-4 and abs(x[1]) < 1e-4
    True

    Notes
    -----
    The run ends when the budget is used up or when two consecutive line
    searches fail (a minimum has been reached, or numerical problems
    prevent getting any closer). Neither is an error. If the run stops
    within a few iterations, the cost and gradient returned by f may be
    inconsistent; see pyfmincg.utils.check_gradient.
    """
    validate_budget(budget)
    validate_vector(x0, "x0")

    if budget == 0:
        return MinimizeResult(x0.copy(), [], 0)

    count_epochs = budget < 0
    count_iterations = budget > 0
    length = abs(budget)

    i = 0                                  # run length counter
    line_search_failed = False             # no previous line search has failed
    cost_history: List[float] = []

    def evaluate(X: DenseMatrix) -> Tuple[float, DenseMatrix]:
        nonlocal i
        cost, gradient = validate_objective_output(f(X), X.shape)
        if count_epochs:
            i += 1
        return cost, gradient

    X = x0.copy()
    f1, df1 = evaluate(X)

    s = -df1                               # search direction is steepest
    d1 = -s.dot(s)                         # this is the slope
    z1 = RED / (1 - d1)                    # initial step is red / (|s| + 1)

    while i < length:
        if count_iterations:
            i += 1

        # copy of current values in case the line search fails
        X0, f0, df0 = X, f1, df1

        # begin line search
        X = X + z1 * s
        f2, df2 = evaluate(X)
        d2 = df2.dot(s)

        # point 3 starts equal to point 1
        f3, d3, z3 = f1, d1, -z1
        M = MAX if budget > 0 else min(MAX, length - i)
        success = False
        limit = -1.0                       # no upper limit yet

        while True:
            while ((f2 > f1 + z1 * RHO * d1) or (d2 > -SIG * d1)) and M > 0:
                limit = z1                 # tighten the bracket
                if f2 > f1:
                    z2 = _quadratic_fit(f2, f3, d3, z3)
                else:
                    z2 = _cubic_fit(f2, f3, d2, d3, z3)

                if not math.isfinite(z2):
                    z2 = z3 / 2            # numerical problem, bisect

                # don't accept too close to limits
                z2 = max(min(z2, INT * z3), (1 - INT) * z3)
                z1 = z1 + z2
                X = X + z2 * s
                f2, df2 = evaluate(X)
                M -= 1
                d2 = df2.dot(s)
                z3 = z3 - z2               # z3 is now relative to the location of z2

            if f2 > f1 + z1 * RHO * d1 or d2 > -SIG * d1:
                break                      # failure
            elif d2 > SIG * d1:
                success = True
                break
            elif M == 0:
                break                      # failure

            z2 = _cubic_extrapolation(f2, f3, d2, d3, z3)

            if not math.isfinite(z2) or z2 < 0:
                if limit < -0.5:           # no upper limit: extrapolate the maximum amount
                    z2 = z1 * (EXT - 1)
                else:
                    z2 = (limit - z1) / 2
            elif limit > -0.5 and z2 + z1 > limit:
                z2 = (limit - z1) / 2      # extrapolation beyond max, bisect
            elif limit < -0.5 and z2 + z1 > z1 * EXT:
                z2 = z1 * (EXT - 1.0)      # extrapolation beyond limit
            elif z2 < -z3 * INT:
                z2 = -z3 * INT
            elif limit > -0.5 and z2 < (limit - z1) * (1.0 - INT):
                z2 = (limit - z1) * (1.0 - INT)   # too close to limit

            # point 3 becomes point 2
            f3, d3, z3 = f2, d2, -z2
            z1 = z1 + z2
            X = X + z2 * s
            f2, df2 = evaluate(X)
            M -= 1
            d2 = df2.dot(s)

        if success:
            f1 = f2
            cost_history.append(f1)
            logger.debug("iteration %4i | cost %4.6e", i, f1)

            # Polack-Ribiere direction
            beta = _safe_divide(df2.dot(df2) - df1.dot(df2), df1.dot(df1))
            s = beta * s - df2
            df1, df2 = df2, df1

            d2 = df1.dot(s)
            if d2 > 0:                     # new slope must be negative
                s = -df1                   # otherwise use steepest direction
                d2 = -s.dot(s)

            # slope ratio but max RATIO
            z1 = z1 * min(RATIO, _safe_divide(d1, d2 - _TINY))
            d1 = d2
            line_search_failed = False
        else:
            # restore point from before the failed line search
            X, f1, df1 = X0, f0, df0
            logger.debug("line search failed, count %i", i)

            if line_search_failed or i > length:
                # failed twice in a row or ran out of budget, give up
                logger.info(
                    "fmincg stopped after %i %s: no further progress",
                    i, "evaluations" if count_epochs else "iterations"
                )
                break

            df1, df2 = df2, df1
            s = -df1                       # try steepest
            d1 = -s.dot(s)
            z1 = 1 / (1 - d1)
            line_search_failed = True
    else:
        logger.info(
            "fmincg used its budget of %i %s, cost %s",
            length, "evaluations" if count_epochs else "iterations",
            f"{f1:.6e}"
        )

    return MinimizeResult(X, cost_history, i)
