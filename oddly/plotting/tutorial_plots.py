"""Render the tutorial figures comparing the linear and logistic fits.

Each function receives precomputed fits or prediction tables and only draws
them; no model fitting happens here.
"""

from __future__ import annotations

import os
from typing import Dict

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..odds import log_odds_to_probability
from ..schema import Sample
from .style import (
    COLORS,
    LABELS,
    STYLE,
    clean_axis,
    finalize_figure,
    set_axis_labels,
    set_global_style,
)


def _jittered(y: np.ndarray, rng: np.random.Generator | None) -> np.ndarray:
    gen = rng if rng is not None else np.random.default_rng(0)
    return y.astype(float) + gen.uniform(-STYLE.JITTER, STYLE.JITTER, size=len(y))


def _require_columns(df: pd.DataFrame, required: set, name: str) -> None:
    missing = required - set(df.columns)
    if missing:
        raise KeyError(f"{name} missing required columns: {sorted(missing)}")


def _draw_points(ax, sample: Sample, rng: np.random.Generator | None) -> None:
    ax.scatter(
        sample.x,
        _jittered(sample.y, rng),
        s=14,
        color=COLORS["points"],
        alpha=STYLE.ALPHA_POINTS,
        linewidths=0,
        label="Observed (jittered)",
    )


def plot_linear_fit(
    sample: Sample,
    linear_fit: Dict[str, float],
    output_dir: str = "output",
    rng: np.random.Generator | None = None,
) -> str:
    """Plot the 0/1 outcomes with the ordinary least-squares line.

    Args:
        sample (Sample): Observed data.
        linear_fit (dict[str, float]): Result of ``linear_regression``.
        output_dir (str, optional): Directory for the figure bundle.
        rng (numpy.random.Generator, optional): Generator for the vertical
            jitter; a generator seeded with ``0`` is used when omitted.

    Returns:
        str: Path to ``linear_fit.png``.

    Raises:
        ValueError: If ``sample`` is empty.
    """
    if len(sample) == 0:
        raise ValueError("sample is empty; nothing to plot")

    set_global_style()
    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    _draw_points(ax, sample, rng)

    x_grid = np.linspace(float(np.min(sample.x)), float(np.max(sample.x)), 200)
    ax.plot(
        x_grid,
        linear_fit["m"] * x_grid + linear_fit["b"],
        color=COLORS["linear"],
        label="OLS fit",
    )
    for level in (0.0, 1.0):
        ax.axhline(level, color=COLORS["guide"], linewidth=STYLE.LINEWIDTH_THIN, linestyle="--")

    set_axis_labels(ax, x=LABELS["birthyear"], y=LABELS["is_happy"])
    clean_axis(ax)
    ax.legend(loc="center right")
    return finalize_figure(
        fig,
        title="Linear probability model",
        savepath=os.path.join(output_dir, "linear_fit"),
    )


def plot_logistic_fit(
    sample: Sample,
    predictions: pd.DataFrame,
    output_dir: str = "output",
    rng: np.random.Generator | None = None,
    show_logit_band: bool = False,
) -> str:
    """Plot outcomes, the fitted probability curve and its 95% band.

    Args:
        sample (Sample): Observed data.
        predictions (pandas.DataFrame): Per-point table from
            ``oddly.analysis.build_predictions`` with at least ``x``,
            ``probability``, ``lower`` and ``upper``.
        output_dir (str, optional): Directory for the figure bundle.
        rng (numpy.random.Generator, optional): Generator for point jitter.
        show_logit_band (bool, optional): Also outline the band built on the
            log-odds scale (``logit_lower``/``logit_upper``).

    Returns:
        str: Path to ``logistic_fit.png``.

    Raises:
        ValueError: If ``predictions`` is empty.
        KeyError: If required columns are missing.
    """
    if predictions.empty:
        raise ValueError("predictions table is empty; nothing to plot")
    required = {"x", "probability", "lower", "upper"}
    if show_logit_band:
        required |= {"logit_lower", "logit_upper"}
    _require_columns(predictions, required, "predictions")

    set_global_style()
    ordered = predictions.sort_values("x", kind="stable")
    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    _draw_points(ax, sample, rng)

    # Band drawn as a closed polygon: lower edge left to right, upper edge back.
    poly_x = np.concatenate([ordered["x"].to_numpy(), ordered["x"].to_numpy()[::-1]])
    poly_y = np.concatenate([ordered["lower"].to_numpy(), ordered["upper"].to_numpy()[::-1]])
    ax.fill(poly_x, poly_y, color=COLORS["band"], alpha=STYLE.ALPHA_BAND, linewidth=0, label="95% band")
    ax.plot(ordered["x"], ordered["probability"], color=COLORS["logistic"], label="Logistic fit")

    if show_logit_band:
        for col in ("logit_lower", "logit_upper"):
            ax.plot(
                ordered["x"],
                ordered[col],
                color=COLORS["logit_band"],
                linewidth=STYLE.LINEWIDTH_THIN,
                linestyle="--",
                label="95% band (log-odds scale)" if col == "logit_lower" else None,
            )

    set_axis_labels(ax, x=LABELS["birthyear"], y=LABELS["probability"])
    clean_axis(ax)
    ax.legend(loc="center right")
    return finalize_figure(
        fig,
        title="Logistic regression",
        savepath=os.path.join(output_dir, "logistic_fit"),
    )


def plot_link_scales(predictions: pd.DataFrame, output_dir: str = "output") -> str:
    """Plot the fitted model on the log-odds, odds and probability scales.

    The log-odds panel is a straight line, the odds panel an exponential and
    the probability panel the S-shaped logistic curve.
    """
    if predictions.empty:
        raise ValueError("predictions table is empty; nothing to plot")
    _require_columns(predictions, {"x", "log_odds", "odds", "probability"}, "predictions")

    set_global_style()
    ordered = predictions.sort_values("x", kind="stable")
    fig, axes = plt.subplots(1, 3, figsize=STYLE.FIGSIZE_TRIPLE)
    for ax, col in zip(axes, ("log_odds", "odds", "probability")):
        ax.plot(ordered["x"], ordered[col], color=COLORS["logistic"])
        set_axis_labels(ax, x=LABELS["birthyear"], y=LABELS[col])
        clean_axis(ax)
    return finalize_figure(
        fig,
        title="One model, three scales",
        savepath=os.path.join(output_dir, "link_scales"),
    )


def plot_sigmoid(output_dir: str = "output", limit: float = 6.0) -> str:
    """Plot the logistic function over ``[-limit, limit]``."""
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")

    set_global_style()
    grid = np.linspace(-float(limit), float(limit), 241)
    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.plot(grid, log_odds_to_probability(grid), color=COLORS["logistic"])
    ax.axhline(0.5, color=COLORS["guide"], linewidth=STYLE.LINEWIDTH_THIN, linestyle=":")
    ax.axvline(0.0, color=COLORS["guide"], linewidth=STYLE.LINEWIDTH_THIN, linestyle=":")
    ax.set_ylim(-0.02, 1.02)
    set_axis_labels(ax, x=LABELS["sigmoid_x"], y=LABELS["sigmoid_y"])
    clean_axis(ax, grid_axis="both")
    return finalize_figure(
        fig,
        title="The logistic function",
        savepath=os.path.join(output_dir, "sigmoid"),
    )
