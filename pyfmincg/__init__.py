"""
PyFmincg: nonlinear conjugate-gradient minimization in Python

A small numerical toolkit built around fmincg, an unconstrained minimizer
for differentiable multivariate functions using Polack-Ribiere conjugate
gradients and a Wolfe-Powell line search with quadratic/cubic
interpolation and extrapolation.

The toolkit provides:
- DenseMatrix, the dense matrix/vector type the minimizer works on
- fmincg, the conjugate-gradient minimizer
- Regularized logistic regression and one-vs-all classification
- Gradient checking against finite differences
- HDF5 persistence of matrices and results (requires h5py)
- Cost history plots (requires matplotlib)

Based on the Octave/MATLAB fmincg by Carl Edward Rasmussen, as used in
the ml-class exercises.
"""

__version__ = "1.0.0"
__author__ = "PyFmincg Contributors"
__license__ = "MIT"

# Import core classes
from .core import (
    DenseMatrix,
    RowMax,
    MatrixError,
    InvalidShapeError,
    ShapeMismatchError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)

# Import the minimizer
from .optimization import fmincg, MinimizeResult

# Import classification functions
from .classification import (
    logistic_regression_cost,
    logistic_regression_cost_regularized,
    add_intercept,
    train_one_vs_all,
    predict_one_vs_all,
    one_vs_all_accuracy,
)

# Import utilities
from .utils import check_gradient, numerical_gradient, set_log_level

# Plotting functions are optional (requires matplotlib)
from .plotting import HAS_MATPLOTLIB as HAS_PLOTTING

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Core classes
    "DenseMatrix",
    "RowMax",
    "MatrixError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    # Optimization
    "fmincg",
    "MinimizeResult",
    # Classification
    "logistic_regression_cost",
    "logistic_regression_cost_regularized",
    "add_intercept",
    "train_one_vs_all",
    "predict_one_vs_all",
    "one_vs_all_accuracy",
    # Utilities
    "check_gradient",
    "numerical_gradient",
    "set_log_level",
    # Plotting (if available)
    "HAS_PLOTTING",
]

if HAS_PLOTTING:
    from .plotting import plot_cost_history, plot_cost_histories, save_cost_plot

    __all__.extend([
        "plot_cost_history",
        "plot_cost_histories",
        "save_cost_plot",
    ])
