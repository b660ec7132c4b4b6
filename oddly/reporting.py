"""Turn fitted coefficients into the numbers the tutorial narrative quotes.

The logistic intercept and slope are reported on all three scales
(log-odds, odds, probability) so a reader can check each conversion step.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np
import pandas as pd

from .odds import (
    log_odds_to_odds,
    odds_to_probability,
    percent_change_in_odds,
)
from .stats.regression import LogisticFit


def interpret_logistic_fit(fit: LogisticFit, units: float = 10.0) -> Dict[str, float]:
    """Express a logistic fit on the log-odds, odds and probability scales.

    Args:
        fit (LogisticFit): Result of ``logistic_regression``.
        units (float, optional): Larger predictor step to report alongside the
            one-unit change. Defaults to ``10.0`` (a decade of birth years).

    Returns:
        dict[str, float]: ``intercept_log_odds``, ``intercept_odds`` and
        ``intercept_probability`` (the outcome at the centering point),
        ``x_mean``, ``slope``, ``odds_ratio``, ``pct_change_per_unit``,
        ``units``, ``odds_ratio_per_units`` and ``pct_change_per_units``.

    Note:
        For a centered fit the intercept describes a respondent with the mean
        birth year; for an uncentered fit it describes ``x = 0``, which is far
        outside the data and rarely meaningful.
    """
    intercept_odds = log_odds_to_odds(fit.intercept)
    return {
        "intercept_log_odds": fit.intercept,
        "intercept_odds": intercept_odds,
        "intercept_probability": odds_to_probability(intercept_odds),
        "x_mean": fit.x_mean if fit.centered else 0.0,
        "slope": fit.slope,
        "odds_ratio": fit.odds_ratio,
        "pct_change_per_unit": percent_change_in_odds(fit.slope),
        "units": float(units),
        "odds_ratio_per_units": float(log_odds_to_odds(fit.slope * float(units))),
        "pct_change_per_units": percent_change_in_odds(fit.slope, units),
    }


def interpret_linear_fit(fit: Dict[str, float], x) -> Dict[str, float]:
    """Summarize the linear probability model and its out-of-range predictions.

    Args:
        fit (dict[str, float]): Result of ``linear_regression``.
        x (array-like): Predictor values at which to evaluate the line.

    Returns:
        dict[str, float]: ``slope``, ``intercept``, ``fitted_at_mean``,
        ``fitted_min``, ``fitted_max``, ``n_outside_unit`` and ``r2``.
    """
    x_arr = np.asarray(x, dtype=float)
    fitted = fit["m"] * x_arr + fit["b"]
    outside = (fitted < 0.0) | (fitted > 1.0)
    return {
        "slope": fit["m"],
        "intercept": fit["b"],
        "fitted_at_mean": float(fit["m"] * fit["xbar"] + fit["b"]),
        "fitted_min": float(np.min(fitted)),
        "fitted_max": float(np.max(fitted)),
        "n_outside_unit": int(np.sum(outside)),
        "r2": fit["r2"],
    }


def format_summary(
    linear_info: Dict[str, float],
    logistic_info: Dict[str, float],
    table: pd.DataFrame | None = None,
) -> List[str]:
    """Format both model summaries as human-readable lines."""
    lines = [
        "Linear probability model (OLS):",
        f"  slope = {linear_info['slope']:.5f} per year, R^2 = {linear_info['r2']:.4f}",
        f"  fitted P(happy) at mean birth year = {linear_info['fitted_at_mean']:.4f}",
        (
            f"  fitted range [{linear_info['fitted_min']:.4f}, "
            f"{linear_info['fitted_max']:.4f}], "
            f"{linear_info['n_outside_unit']} fitted values outside [0, 1]"
        ),
        "",
        "Logistic model (binomial, logit link):",
        (
            f"  intercept = {logistic_info['intercept_log_odds']:.4f} log-odds "
            f"(odds {logistic_info['intercept_odds']:.4f}, "
            f"P(happy) {logistic_info['intercept_probability']:.4f}) "
            f"at birth year {logistic_info['x_mean']:.2f}"
        ),
        (
            f"  slope = {logistic_info['slope']:.5f} log-odds per year, "
            f"odds ratio {logistic_info['odds_ratio']:.4f} "
            f"({logistic_info['pct_change_per_unit']:+.2f}% odds per year)"
        ),
        (
            f"  over {logistic_info['units']:g} years: odds ratio "
            f"{logistic_info['odds_ratio_per_units']:.4f} "
            f"({logistic_info['pct_change_per_units']:+.2f}% odds)"
        ),
    ]
    if table is not None and not table.empty:
        lines.append("")
        lines.append("Coefficients:")
        for term, row in table.iterrows():
            lines.append(
                f"  {term:<12} estimate={row['estimate']:.5f} "
                f"se={row['std_error']:.5f} z={row['z_value']:.3f} "
                f"p={row['p_value']:.4g}"
            )
    return lines


def print_summary(lines: List[str]) -> None:
    """Print the lines from ``format_summary`` under a heading."""
    print("\nRegression comparison:")
    for line in lines:
        print(line)
