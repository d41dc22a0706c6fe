"""
Optimization algorithms for PyFmincg.

Optimizers:
    Nonlinear conjugate gradients (Polack-Ribiere) with a Wolfe-Powell
    line search built from quadratic/cubic interpolation and extrapolation

Functions:
    fmincg: Minimize a differentiable function of a DenseMatrix vector

Classes:
    MinimizeResult: (x, cost_history, iterations) returned by fmincg
"""

from .fmincg import (
    fmincg,
    MinimizeResult,
    RHO,
    SIG,
    INT,
    EXT,
    RATIO,
    MAX,
    RED,
)

__all__ = [
    "fmincg",
    "MinimizeResult",
    # Line search constants
    "RHO",
    "SIG",
    "INT",
    "EXT",
    "RATIO",
    "MAX",
    "RED",
]
