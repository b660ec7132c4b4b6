"""
Model-fitting adapters for the regression comparison.

This subpackage wraps the external fitting routines behind small functions
that take plain arrays and return plain numbers, so the rest of the package
never touches a statsmodels results object.

Modules:
    regression:
        Ordinary least-squares line with standard errors and confidence
        half-widths, and a binomial/logit GLM with per-point standard errors
        on the log-odds and probability scales.

Design Principle:
    This subpackage has no dependencies on plotting/ or the output layer.
"""

from .regression import (
    LogisticFit,
    coefficient_table,
    linear_regression,
    logistic_regression,
)

__all__ = [
    "LogisticFit",
    "coefficient_table",
    "linear_regression",
    "logistic_regression",
]
