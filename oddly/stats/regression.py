"""Provide the two regression fits compared in the tutorial.

This module supports:
- an ordinary least-squares line through the 0/1 outcome (the linear
  probability model), and
- a binomial GLM with logit link on the mean-centered predictor, with
  per-point standard errors on both the log-odds and probability scales.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict

import numpy as np
import pandas as pd
import statsmodels.api as sm
from scipy.stats import t as student_t

from ..odds import log_odds_to_probability, odds_ratio as _odds_ratio

logger = logging.getLogger(__name__)


def _paired_finite(x, y) -> tuple[np.ndarray, np.ndarray]:
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if x_arr.shape != y_arr.shape:
        raise ValueError(
            f"x and y must have the same shape, got {x_arr.shape} and {y_arr.shape}"
        )
    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    return x_arr[mask], y_arr[mask]


def linear_regression(
    x: np.ndarray, y: np.ndarray, min_points: int = 3
) -> Dict[str, float]:
    """Fit an ordinary least-squares straight line to finite data pairs.

    Args:
        x (numpy.ndarray): Predictor values.
        y (numpy.ndarray): Response values; for the linear probability model
            these are the 0/1 outcomes.
        min_points (int, optional): Minimum number of finite paired
            observations required. Defaults to ``3``.

    Returns:
        dict[str, float]: Regression diagnostics with keys ``m`` (slope),
        ``b`` (intercept), ``r2`` (coefficient of determination), ``se_m``,
        ``se_b``, ``ci95_m``, ``ci95_b`` (95% half-widths), ``p_m`` (p-value
        for slope), plus ``n``, ``dof``, ``mse``, ``ssxx`` and ``xbar``.

    Raises:
        ValueError: If there are insufficient valid points or insufficient x/y
            variance.

    Note:
        Applied to a binary outcome the fitted line is unbounded, so fitted
        "probabilities" can fall below 0 or above 1. That defect is what the
        tutorial uses to motivate the logistic model.
    """
    x_arr, y_arr = _paired_finite(x, y)
    n = int(len(x_arr))
    if n < min_points:
        raise ValueError("Insufficient valid data for regression.")

    xbar = float(np.mean(x_arr))
    ssxx = float(np.sum((x_arr - xbar) ** 2))
    if ssxx <= 0:
        raise ValueError("Insufficient predictor variance for regression.")

    m, b = np.polyfit(x_arr, y_arr, 1)
    resid = y_arr - (m * x_arr + b)

    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - y_arr.mean()) ** 2))
    if sst <= 0:
        raise ValueError("Insufficient variance for regression.")
    r2 = 1.0 - sse / sst

    dof = n - 2
    mse = sse / dof if dof > 0 else np.inf

    se_m = math.nan
    se_b = math.nan
    ci95_m = math.nan
    ci95_b = math.nan
    p_m = math.nan

    if dof > 0:
        se_m = float(np.sqrt(mse / ssxx))
        se_b = float(np.sqrt(mse * (1.0 / n + (xbar**2) / ssxx)))
        t_stat = m / se_m if se_m > 0 else np.inf
        p_m = float(2 * student_t.sf(abs(t_stat), dof))
        t_crit = float(student_t.ppf(0.975, dof))
        ci95_m = t_crit * se_m
        ci95_b = t_crit * se_b

    return {
        "m": float(m),
        "b": float(b),
        "r2": float(r2),
        "se_m": se_m,
        "se_b": se_b,
        "ci95_m": ci95_m,
        "ci95_b": ci95_b,
        "p_m": p_m,
        "n": n,
        "dof": dof,
        "mse": mse,
        "ssxx": ssxx,
        "xbar": xbar,
    }


@dataclass(frozen=True, eq=False)
class LogisticFit:
    """Result of a binomial/logit fit on a (possibly centered) predictor.

    ``intercept`` is the log-odds of success at ``x_mean`` when the fit was
    centered, otherwise at ``x = 0``. ``slope`` is the change in log-odds per
    unit of the predictor.
    """

    intercept: float
    slope: float
    se_intercept: float
    se_slope: float
    z_intercept: float
    z_slope: float
    p_intercept: float
    p_slope: float
    cov_params: np.ndarray
    x_mean: float
    centered: bool
    x: np.ndarray
    log_odds: np.ndarray
    se_log_odds: np.ndarray
    fitted: np.ndarray
    se_fit: np.ndarray
    deviance: float
    null_deviance: float
    aic: float
    n: int

    @property
    def odds_ratio(self) -> float:
        """Multiplicative change in odds per one-unit increase in ``x``."""
        return _odds_ratio(self.slope)

    def design(self, x) -> np.ndarray:
        """Return the two-column design matrix the fit uses for ``x``."""
        x_arr = np.atleast_1d(np.asarray(x, dtype=float))
        shift = self.x_mean if self.centered else 0.0
        return np.column_stack([np.ones_like(x_arr), x_arr - shift])

    def predict(self, x) -> pd.DataFrame:
        """Predict log-odds and probabilities, with standard errors, at ``x``.

        Returns:
            pandas.DataFrame: Columns ``x``, ``log_odds``, ``se_log_odds``,
            ``probability`` and ``se_probability``. The probability-scale
            standard error uses the delta method, ``p (1 - p) se_link``.
        """
        X = self.design(x)
        beta = np.array([self.intercept, self.slope])
        eta = X @ beta
        se_eta = np.sqrt(np.maximum(np.sum((X @ self.cov_params) * X, axis=1), 0.0))
        prob = log_odds_to_probability(eta)
        return pd.DataFrame(
            {
                "x": X[:, 1] + (self.x_mean if self.centered else 0.0),
                "log_odds": eta,
                "se_log_odds": se_eta,
                "probability": prob,
                "se_probability": prob * (1.0 - prob) * se_eta,
            }
        )


def logistic_regression(
    x: np.ndarray, y: np.ndarray, center: bool = True, min_points: int = 3
) -> LogisticFit:
    """Fit ``logit P(y = 1) = intercept + slope * x`` by maximum likelihood.

    Args:
        x (numpy.ndarray): Predictor values.
        y (numpy.ndarray): Binary outcomes (booleans or 0/1).
        center (bool, optional): Subtract the predictor mean before fitting so
            the intercept describes a respondent of average birth year.
            Defaults to ``True``.
        min_points (int, optional): Minimum number of finite pairs. Defaults
            to ``3``.

    Returns:
        LogisticFit: Coefficients, Wald statistics and per-point fitted
        values with standard errors.

    Raises:
        ValueError: If there are too few points, the outcome is not binary,
            the predictor has no variance, or the outcome is constant.

    Note:
        Fitting is delegated to ``statsmodels`` (``GLM`` with a ``Binomial``
        family, whose default link is the logit).
    """
    x_arr, y_arr = _paired_finite(x, y)
    n = int(len(x_arr))
    if n < min_points:
        raise ValueError("Insufficient valid data for regression.")
    if not np.all(np.isin(y_arr, (0.0, 1.0))):
        raise ValueError("Logistic regression requires a 0/1 outcome.")
    if np.ptp(x_arr) == 0:
        raise ValueError("Insufficient predictor variance for regression.")
    if np.ptp(y_arr) == 0:
        raise ValueError("Outcome is constant; logistic coefficients are not identified.")

    x_mean = float(np.mean(x_arr))
    shift = x_mean if center else 0.0
    X = sm.add_constant(x_arr - shift, has_constant="add")
    result = sm.GLM(y_arr, X, family=sm.families.Binomial()).fit()

    params = np.asarray(result.params, dtype=float)
    bse = np.asarray(result.bse, dtype=float)
    tvalues = np.asarray(result.tvalues, dtype=float)
    pvalues = np.asarray(result.pvalues, dtype=float)
    cov = np.asarray(result.cov_params(), dtype=float)

    eta = X @ params
    se_eta = np.sqrt(np.maximum(np.sum((X @ cov) * X, axis=1), 0.0))
    fitted = log_odds_to_probability(eta)

    logger.info(
        "Logistic fit: intercept=%.4f (se %.4f), slope=%.5f (se %.5f), n=%d",
        params[0],
        bse[0],
        params[1],
        bse[1],
        n,
    )

    return LogisticFit(
        intercept=float(params[0]),
        slope=float(params[1]),
        se_intercept=float(bse[0]),
        se_slope=float(bse[1]),
        z_intercept=float(tvalues[0]),
        z_slope=float(tvalues[1]),
        p_intercept=float(pvalues[0]),
        p_slope=float(pvalues[1]),
        cov_params=cov,
        x_mean=x_mean,
        centered=bool(center),
        x=x_arr,
        log_odds=eta,
        se_log_odds=se_eta,
        fitted=np.asarray(fitted, dtype=float),
        se_fit=fitted * (1.0 - fitted) * se_eta,
        deviance=float(result.deviance),
        null_deviance=float(result.null_deviance),
        aic=float(result.aic),
        n=n,
    )


def coefficient_table(fit: LogisticFit, predictor: str = "birthyear") -> pd.DataFrame:
    """Tabulate estimates, standard errors, z statistics and p-values."""
    return pd.DataFrame(
        {
            "estimate": [fit.intercept, fit.slope],
            "std_error": [fit.se_intercept, fit.se_slope],
            "z_value": [fit.z_intercept, fit.z_slope],
            "p_value": [fit.p_intercept, fit.p_slope],
        },
        index=pd.Index(["(Intercept)", predictor], name="term"),
    )
