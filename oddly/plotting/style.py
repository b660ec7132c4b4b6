"""Centralized plotting style, labels and save helpers."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

OUTPUT_FORMATS: tuple[str, ...] = ("png", "pdf", "svg")
FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 11.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    MARKERSIZE: float = 6.0
    ALPHA_POINTS: float = 0.35
    ALPHA_BAND: float = 0.20
    GRID_ALPHA: float = 0.20
    JITTER: float = 0.04
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)
    FIGSIZE_TRIPLE: tuple[float, float] = (13.5, 4.2)


STYLE = StyleConfig()

COLORS = {
    "points": "#4A4A4A",
    "linear": "#d62728",
    "logistic": "#1f77b4",
    "band": "#1f77b4",
    "logit_band": "#ff7f0e",
    "guide": "#9A9A9A",
}

LABELS = {
    "birthyear": "Birth year",
    "is_happy": "Happy (1) / not happy (0)",
    "probability": r"$P(\mathrm{happy})$",
    "odds": r"Odds of being happy",
    "log_odds": r"Log-odds of being happy",
    "sigmoid_x": r"Log-odds $\ell$",
    "sigmoid_y": r"$1 / (1 + e^{-\ell})$",
}


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib style scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "figure.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.default": "regular",
            "axes.titlepad": 8,
            "axes.labelpad": 6,
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": STYLE.GRID_ALPHA,
            "grid.linestyle": ":",
            "grid.linewidth": 0.7,
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "figure.dpi": 120,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def set_global_style() -> None:
    """Apply global plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style(font_scale=1.0)
        _STYLE_STATE["initialized"] = True


def clean_axis(ax: Axes, *, grid_axis: str = "y", nbins: int = 6) -> None:
    """Apply consistent ticks, grid and spines to one axis."""
    ax.tick_params(axis="both", which="major", labelsize=STYLE.TICK_FONTSIZE, width=1.0)
    ax.xaxis.set_major_locator(MaxNLocator(nbins=nbins, min_n_ticks=4))
    ax.yaxis.set_major_locator(MaxNLocator(nbins=nbins, min_n_ticks=4))
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.grid(False)
    if grid_axis in {"x", "y", "both"}:
        ax.grid(True, axis=grid_axis, alpha=STYLE.GRID_ALPHA, linestyle=":", linewidth=0.7)


def set_axis_labels(ax: Axes, x: str | None = None, y: str | None = None) -> None:
    if x is not None:
        ax.set_xlabel(x, fontsize=STYLE.LABEL_FONTSIZE, labelpad=6)
    if y is not None:
        ax.set_ylabel(y, fontsize=STYLE.LABEL_FONTSIZE, labelpad=6)


def save_figure(
    fig: Figure,
    savepath_base: str | Path,
    formats: Sequence[str] = OUTPUT_FORMATS,
    dpi: int = FIGURE_DPI,
) -> Path:
    """Save a figure to multiple formats using one extensionless base path."""
    base = Path(savepath_base)
    if base.suffix:
        base = base.with_suffix("")
    base.parent.mkdir(parents=True, exist_ok=True)
    for ext in formats:
        fig.savefig(
            str(base.with_suffix(f".{ext}")),
            dpi=dpi if ext == "png" else None,
            bbox_inches="tight",
            pad_inches=0.12,
        )
    return base.with_suffix(f".{formats[0]}")


def finalize_figure(
    fig: Figure,
    *,
    title: str | None = None,
    savepath: str | Path | None = None,
    formats: Sequence[str] = OUTPUT_FORMATS,
    close: bool = True,
) -> str | None:
    """Finalize layout and title, optionally save, and close the figure."""
    if title:
        fig.suptitle(title, fontsize=STYLE.TITLE_FONTSIZE)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        fig.tight_layout(pad=1.2)

    saved = None
    if savepath is not None:
        saved = str(save_figure(fig, savepath, formats=formats))
    if close:
        plt.close(fig)
    return saved

