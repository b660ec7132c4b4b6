"""Convert between probability, odds and log-odds for a binary outcome.

All functions are pure and accept either Python scalars or numpy arrays.
Scalar input returns a ``float``; array input returns a ``numpy.ndarray``.

Domain violations raise :class:`NumericDomainError` instead of letting
``nan`` or ``inf`` leak into downstream predictions.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import pandas as pd
from scipy.special import expit
from scipy.stats import norm


class NumericDomainError(ValueError):
    """Raised when a conversion is evaluated outside its numeric domain."""


def _as_array(value) -> np.ndarray:
    return np.asarray(value, dtype=float)


def _unwrap(result: np.ndarray, like):
    if np.ndim(like) == 0:
        return float(result)
    return result


def _offending(values: np.ndarray, mask: np.ndarray) -> str:
    bad = np.atleast_1d(values)[np.atleast_1d(mask)]
    shown = ", ".join(f"{v:g}" for v in bad[:5])
    if bad.size > 5:
        shown += f", ... ({bad.size} values)"
    return shown


def log_odds_to_odds(log_odds):
    """Map log-odds to odds, ``e^l``.

    Raises:
        NumericDomainError: If the result overflows to infinity or the input
            is not a number.
    """
    arr = _as_array(log_odds)
    if np.any(np.isnan(arr)):
        raise NumericDomainError("log_odds_to_odds: log-odds must not be NaN")
    with np.errstate(over="ignore"):
        odds = np.exp(arr)
    overflow = np.isinf(odds)
    if np.any(overflow):
        raise NumericDomainError(
            "log_odds_to_odds: odds overflow to infinity for log-odds "
            f"{_offending(arr, overflow)}"
        )
    return _unwrap(odds, log_odds)


def odds_to_log_odds(odds):
    """Map odds to log-odds, ``ln(o)``.

    Raises:
        NumericDomainError: If any odds value is ``<= 0`` (log undefined) or
            not finite.
    """
    arr = _as_array(odds)
    invalid = ~(np.isfinite(arr) & (arr > 0))
    if np.any(invalid):
        raise NumericDomainError(
            "odds_to_log_odds: odds must be finite and > 0, got "
            f"{_offending(arr, invalid)}"
        )
    return _unwrap(np.log(arr), odds)


def odds_to_probability(odds):
    """Map odds to probability, ``o / (1 + o)``.

    Raises:
        NumericDomainError: If any odds value is negative or not finite.
    """
    arr = _as_array(odds)
    invalid = ~(np.isfinite(arr) & (arr >= 0))
    if np.any(invalid):
        raise NumericDomainError(
            "odds_to_probability: odds must be finite and >= 0, got "
            f"{_offending(arr, invalid)}"
        )
    return _unwrap(arr / (1.0 + arr), odds)


def probability_to_odds(probability):
    """Map probability to odds, ``p / (1 - p)``.

    A probability of exactly 1 has infinite odds; callers that can see
    ``p == 1`` must special-case it before converting.

    Raises:
        NumericDomainError: If any probability is ``>= 1`` or ``< 0``.
    """
    arr = _as_array(probability)
    invalid = ~((arr >= 0) & (arr < 1))
    if np.any(invalid):
        raise NumericDomainError(
            "probability_to_odds: probability must lie in [0, 1), got "
            f"{_offending(arr, invalid)}"
        )
    return _unwrap(arr / (1.0 - arr), probability)


def probability_to_log_odds(probability):
    """Map probability to log-odds (the logit), ``ln(p / (1 - p))``.

    Raises:
        NumericDomainError: If any probability lies outside ``(0, 1)``.
    """
    arr = _as_array(probability)
    invalid = ~((arr > 0) & (arr < 1))
    if np.any(invalid):
        raise NumericDomainError(
            "probability_to_log_odds: probability must lie strictly in (0, 1), got "
            f"{_offending(arr, invalid)}"
        )
    return _unwrap(np.log(arr) - np.log1p(-arr), probability)


def log_odds_to_probability(log_odds):
    """Map log-odds to probability with the logistic (sigmoid) function.

    Evaluated as ``1 / (1 + e^{-l})`` through :func:`scipy.special.expit`,
    which stays finite for large positive and negative ``l``.
    """
    arr = _as_array(log_odds)
    if np.any(np.isnan(arr)):
        raise NumericDomainError("log_odds_to_probability: log-odds must not be NaN")
    return _unwrap(expit(arr), log_odds)


def predict_log_odds(intercept: float, slope: float, centered_x):
    """Linear predictor of the logit model, ``intercept + slope * centered_x``."""
    arr = _as_array(centered_x)
    return _unwrap(float(intercept) + float(slope) * arr, centered_x)


def predict_probabilities(intercept: float, slope: float, x) -> pd.DataFrame:
    """Run the per-point prediction pipeline for a centered logit model.

    Args:
        intercept (float): Fitted intercept (log-odds at the mean of ``x``).
        slope (float): Fitted slope (change in log-odds per unit of ``x``).
        x (array-like): Raw predictor values. They are centered on their own
            mean before the linear predictor is evaluated.

    Returns:
        pandas.DataFrame: One row per input value with columns ``x``,
        ``centered_x``, ``log_odds``, ``odds`` and ``probability``.

    Raises:
        ValueError: If ``x`` is empty.
        NumericDomainError: If the odds overflow for some point.
    """
    x_arr = np.atleast_1d(_as_array(x))
    if x_arr.size == 0:
        raise ValueError("predict_probabilities: x is empty")

    centered = x_arr - float(np.mean(x_arr))
    log_odds = predict_log_odds(intercept, slope, centered)
    odds = log_odds_to_odds(log_odds)
    probability = odds_to_probability(odds)
    return pd.DataFrame(
        {
            "x": x_arr,
            "centered_x": centered,
            "log_odds": log_odds,
            "odds": odds,
            "probability": probability,
        }
    )


def odds_ratio(slope: float) -> float:
    """Multiplicative change in odds for a one-unit increase, ``e^slope``."""
    return float(log_odds_to_odds(float(slope)))


def percent_change_in_odds(slope: float, units: float = 1.0) -> float:
    """Percentage change in odds for an increase of ``units`` in the predictor."""
    return (odds_ratio(float(slope) * float(units)) - 1.0) * 100.0


def _z_bounds(level: float) -> Tuple[float, float]:
    if not 0.0 < float(level) < 1.0:
        raise ValueError(f"Confidence level must lie in (0, 1), got {level!r}")
    alpha = 1.0 - float(level)
    return float(norm.ppf(alpha / 2.0)), float(norm.ppf(1.0 - alpha / 2.0))


def confidence_band(fit, se, level: float = 0.95):
    """Build a normal-approximation band directly on the probability scale.

    Args:
        fit (array-like): Fitted probabilities.
        se (array-like): Standard errors of ``fit`` on the probability scale.
        level (float, optional): Coverage. Defaults to ``0.95``.

    Returns:
        tuple: ``(lower, upper)`` with ``lower = fit + z(alpha/2) * se`` and
        ``upper = fit + z(1 - alpha/2) * se``.

    Note:
        The band is linear in ``se`` and is not clipped, so near 0 or 1 it can
        extend outside ``[0, 1]``. :func:`logit_confidence_band` bands the
        log-odds scale instead and always stays inside ``(0, 1)``.
    """
    fit_arr = _as_array(fit)
    se_arr = _as_array(se)
    if np.any(se_arr < 0):
        raise ValueError("Standard errors must be non-negative.")
    z_lo, z_hi = _z_bounds(level)
    lower = fit_arr + z_lo * se_arr
    upper = fit_arr + z_hi * se_arr
    return _unwrap(lower, fit), _unwrap(upper, fit)


def logit_confidence_band(log_odds_fit, log_odds_se, level: float = 0.95):
    """Band the log-odds scale and map both endpoints through the sigmoid.

    Returns:
        tuple: ``(lower, upper)`` probabilities, always strictly inside
        ``(0, 1)``.
    """
    fit_arr = _as_array(log_odds_fit)
    se_arr = _as_array(log_odds_se)
    if np.any(se_arr < 0):
        raise ValueError("Standard errors must be non-negative.")
    z_lo, z_hi = _z_bounds(level)
    lower = log_odds_to_probability(fit_arr + z_lo * se_arr)
    upper = log_odds_to_probability(fit_arr + z_hi * se_arr)
    return _unwrap(lower, log_odds_fit), _unwrap(upper, log_odds_fit)
