"""
Utility functions for PyFmincg.

Categories:
    Validation of arguments and objective outputs
    Gradient checking (finite differences via scipy)
    Logging configuration

Functions:
    validate_budget: Check the minimizer run length
    validate_objective_output: Normalize a (cost, gradient) pair
    numerical_gradient: Finite-difference gradient
    check_gradient: Compare analytic and numerical gradients
    get_logger: Namespaced package logger
    set_log_level: Change the level of every package logger
"""

from .validation import (
    validate_budget,
    validate_vector,
    validate_objective_output,
    validate_labels,
    validate_positive,
    validate_positive_integer,
    validate_non_negative,
)
from .math_utils import (
    numerical_gradient,
    check_gradient,
)
from .log import (
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    # Validation functions
    "validate_budget",
    "validate_vector",
    "validate_objective_output",
    "validate_labels",
    "validate_positive",
    "validate_positive_integer",
    "validate_non_negative",
    # Gradient checking
    "numerical_gradient",
    "check_gradient",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
