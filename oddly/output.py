"""Write samples, predictions and the narrative summary to reproducible files.

This module is the output boundary between in-memory analysis and the
artifacts a reader of the tutorial opens.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Tuple

import pandas as pd

from .schema import COLUMNS, Sample

logger = logging.getLogger(__name__)

PREDICTION_COLUMNS: Tuple[str, ...] = (
    "x",
    "centered_x",
    "outcome",
    "log_odds",
    "odds",
    "probability",
    "se",
    "lower",
    "upper",
    "logit_lower",
    "logit_upper",
    "linear_fit",
)


def write_sample(sample: Sample, path: str) -> str:
    """Write a sample as a tab-separated file.

    Args:
        sample (Sample): Sample to serialize.
        path (str): Destination file; parent directories are created.

    Returns:
        str: ``path``.

    Note:
        The header is ``birthyear<TAB>is_happy`` and every row, the last one
        included, ends with ``\\n``. Identical samples produce identical bytes.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    frame = sample.to_frame()
    with open(path, "w", newline="") as fh:
        frame.to_csv(fh, sep="\t", index=False, lineterminator="\n")
    logger.info("Wrote %d sample rows to %s", len(frame), path)
    return path


def save_predictions_to_csv(
    predictions: pd.DataFrame, output_dir: str = "output"
) -> str:
    """Save per-point predictions and confidence bands to CSV.

    Args:
        predictions (pandas.DataFrame): Output of
            ``oddly.analysis.build_predictions``.
        output_dir (str): Directory where the CSV is written.

    Returns:
        str: Path to ``predictions.csv``.

    Raises:
        KeyError: If any of the expected prediction columns is missing.
    """
    missing = [c for c in PREDICTION_COLUMNS if c not in predictions.columns]
    if missing:
        raise KeyError(f"Prediction table missing columns: {missing}")

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "predictions.csv")
    table = predictions[list(PREDICTION_COLUMNS)].rename(
        columns={"x": COLUMNS.predictor, "outcome": COLUMNS.outcome}
    )
    table.to_csv(path, index=False)
    logger.info("Saved predictions to %s", path)
    return path


def save_coefficients_to_csv(table: pd.DataFrame, output_dir: str = "output") -> str:
    """Save the logistic coefficient table to ``coefficients.csv``."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "coefficients.csv")
    table.to_csv(path)
    logger.info("Saved coefficient table to %s", path)
    return path


def save_summary(lines: Iterable[str], output_dir: str = "output") -> str:
    """Write the narrative summary, one line per entry, to ``summary.txt``."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "summary.txt")
    with open(path, "w") as fh:
        fh.writelines(f"{line}\n" for line in lines)
    logger.info("Saved summary to %s", path)
    return path
