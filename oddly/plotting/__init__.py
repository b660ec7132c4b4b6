"""
Static figures for the linear vs. logistic regression comparison.

All plotting functions accept precomputed fits and prediction tables and do
not fit models themselves.

Modules:
    tutorial_plots:
        (1) Jittered 0/1 outcomes with the OLS line
        (2) Fitted logistic curve with its 95% band drawn as a polygon
        (3) The fitted model on the log-odds, odds and probability scales
        (4) The logistic function itself

    style:
        rcParams, axis cleanup and PNG/PDF/SVG bundle saving.

Design Principles:
    1. No fitting in plotting code.

    2. Input validation with explicit KeyError for missing required columns.
"""

from .style import set_global_style
from .tutorial_plots import (
    plot_linear_fit,
    plot_link_scales,
    plot_logistic_fit,
    plot_sigmoid,
)

__all__ = [
    "plot_linear_fit",
    "plot_link_scales",
    "plot_logistic_fit",
    "plot_sigmoid",
    "set_global_style",
]
