"""
Classification models trained with fmincg.

Functions:
    Logistic Regression:
        logistic_regression_cost: Loss and gradient
        logistic_regression_cost_regularized: Loss and gradient with L2 penalty
        add_intercept: Prepend a bias column to the data matrix

    One-vs-All:
        train_one_vs_all: Train one classifier per class
        predict_one_vs_all: Predict labels from trained weights
        one_vs_all_accuracy: Training/test accuracy in percent
"""

from .logistic import (
    logistic_regression_cost,
    logistic_regression_cost_regularized,
    add_intercept,
    train_one_vs_all,
    predict_one_vs_all,
    one_vs_all_accuracy,
)

__all__ = [
    # Logistic regression
    "logistic_regression_cost",
    "logistic_regression_cost_regularized",
    "add_intercept",
    # One-vs-all
    "train_one_vs_all",
    "predict_one_vs_all",
    "one_vs_all_accuracy",
]
