"""
Linear vs. logistic regression on a binary outcome.

This module runs the tutorial pipeline on one sample:
- Fit an ordinary least-squares line to the 0/1 outcome (linear probability
  model). Its fitted values are unbounded and can leave [0, 1].
- Fit a binomial GLM with logit link on the mean-centered predictor:
    log(p / (1 - p)) = b0 + b1 * (x - mean(x)),
  so b0 is the log-odds for a respondent of average birth year and e^b1 is
  the odds ratio per year.
- Convert the fit to per-point log-odds, odds and probabilities.

Confidence bands:
- The primary band is built on the probability scale, fit ± z * se with a
  delta-method se. It is not clipped and can leave [0, 1] near the extremes.
- A second band is built on the log-odds scale and mapped through the
  sigmoid; it always stays in (0, 1). Both are reported.
"""

from __future__ import annotations

import logging
import os
import warnings
from typing import Dict

import numpy as np
import pandas as pd

from .odds import confidence_band, logit_confidence_band, predict_probabilities
from .output import (
    save_coefficients_to_csv,
    save_predictions_to_csv,
    save_summary,
    write_sample,
)
from .plotting import (
    plot_linear_fit,
    plot_link_scales,
    plot_logistic_fit,
    plot_sigmoid,
)
from .reporting import format_summary, interpret_linear_fit, interpret_logistic_fit
from .schema import Sample
from .stats.regression import (
    LogisticFit,
    coefficient_table,
    linear_regression,
    logistic_regression,
)

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = 0.95


def build_predictions(
    sample: Sample,
    fit: LogisticFit,
    linear_fit: Dict[str, float] | None = None,
    level: float = DEFAULT_LEVEL,
) -> pd.DataFrame:
    """Assemble per-point predictions and both confidence bands.

    Args:
        sample (Sample): Observed data; its predictor values define the
            evaluation points and the centering mean.
        fit (LogisticFit): Centered logistic fit of ``sample``.
        linear_fit (dict[str, float], optional): OLS diagnostics; when given,
            a ``linear_fit`` column with the OLS fitted values is added.
        level (float, optional): Band coverage. Defaults to ``0.95``.

    Returns:
        pandas.DataFrame: Columns from ``predict_probabilities`` plus
        ``outcome``, ``se``, ``lower``, ``upper``, ``se_log_odds``,
        ``logit_lower``, ``logit_upper`` and optionally ``linear_fit``.

    Raises:
        ValueError: If ``fit`` was not centered or does not match ``sample``.

    Note:
        A warning is emitted when the probability-scale band leaves [0, 1].
    """
    if not fit.centered:
        raise ValueError("build_predictions expects a mean-centered logistic fit.")
    if fit.n != len(sample):
        raise ValueError(
            f"Fit was computed on {fit.n} points but sample has {len(sample)}."
        )
    if not np.isclose(fit.x_mean, float(np.mean(sample.x))):
        raise ValueError(
            f"Fit was centered at {fit.x_mean:.4f} but sample mean is "
            f"{float(np.mean(sample.x)):.4f}."
        )

    preds = predict_probabilities(fit.intercept, fit.slope, sample.x)
    preds.insert(2, "outcome", sample.y.astype(int))

    per_point = fit.predict(sample.x)
    lower, upper = confidence_band(per_point["probability"], per_point["se_probability"], level)
    logit_lower, logit_upper = logit_confidence_band(
        per_point["log_odds"], per_point["se_log_odds"], level
    )
    preds["se"] = per_point["se_probability"].to_numpy()
    preds["lower"] = np.asarray(lower)
    preds["upper"] = np.asarray(upper)
    preds["se_log_odds"] = per_point["se_log_odds"].to_numpy()
    preds["logit_lower"] = np.asarray(logit_lower)
    preds["logit_upper"] = np.asarray(logit_upper)

    if linear_fit is not None:
        preds["linear_fit"] = linear_fit["m"] * preds["x"] + linear_fit["b"]

    outside = int(((preds["lower"] < 0) | (preds["upper"] > 1)).sum())
    if outside:
        warnings.warn(
            (
                f"{outside} probability-scale band bounds fall outside [0, 1]; "
                "see logit_lower/logit_upper for a bounded alternative."
            ),
            RuntimeWarning,
            stacklevel=2,
        )
    return preds


def fit_models(sample: Sample) -> Dict:
    """Fit both models to a sample and return them with their interpretation."""
    linear_fit = linear_regression(sample.x, sample.y.astype(float))
    logistic_fit = logistic_regression(sample.x, sample.y.astype(float), center=True)
    table = coefficient_table(logistic_fit)
    linear_info = interpret_linear_fit(linear_fit, sample.x)
    logistic_info = interpret_logistic_fit(logistic_fit)
    return {
        "linear_fit": linear_fit,
        "logistic_fit": logistic_fit,
        "coefficients": table,
        "linear_info": linear_info,
        "logistic_info": logistic_info,
        "summary_lines": format_summary(linear_info, logistic_info, table),
    }


def render_figures(
    sample: Sample, results: Dict, output_dir: str
) -> Dict[str, str]:
    """Draw the four tutorial figures and return their PNG paths by name."""
    return {
        "linear_fit": plot_linear_fit(sample, results["linear_fit"], output_dir),
        "logistic_fit": plot_logistic_fit(
            sample, results["predictions"], output_dir, show_logit_band=True
        ),
        "link_scales": plot_link_scales(results["predictions"], output_dir),
        "sigmoid": plot_sigmoid(output_dir),
    }


def run_tutorial(
    sample: Sample,
    output_dir: str = "output",
    make_plots: bool = True,
    level: float = DEFAULT_LEVEL,
) -> Dict:
    """Run the full comparison on one sample and write every artifact.

    Args:
        sample (Sample): Data to analyze.
        output_dir (str, optional): Directory for tables, text and figures.
            Defaults to ``"output"``.
        make_plots (bool, optional): Render figures. Defaults to ``True``.
        level (float, optional): Band coverage. Defaults to ``0.95``.

    Returns:
        dict: ``sample``, ``linear_fit``, ``logistic_fit``, ``coefficients``,
        ``linear_info``, ``logistic_info``, ``summary_lines``,
        ``predictions``, ``figures`` (name to PNG path) and ``artifacts``
        (name to file path).
    """
    logger.info("Fitting linear and logistic models to %d points", len(sample))
    results = fit_models(sample)
    results["sample"] = sample
    results["predictions"] = build_predictions(
        sample, results["logistic_fit"], results["linear_fit"], level=level
    )

    os.makedirs(output_dir, exist_ok=True)
    artifacts = {
        "sample": write_sample(sample, os.path.join(output_dir, "sample.tsv")),
        "predictions": save_predictions_to_csv(results["predictions"], output_dir),
        "coefficients": save_coefficients_to_csv(results["coefficients"], output_dir),
        "summary": save_summary(results["summary_lines"], output_dir),
    }
    results["artifacts"] = artifacts

    results["figures"] = render_figures(sample, results, output_dir) if make_plots else {}
    logger.info(
        "Wrote %d artifacts and %d figures to %s",
        len(artifacts),
        len(results["figures"]),
        output_dir,
    )
    return results
