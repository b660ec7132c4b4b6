"""
Handles TSV parsing, validation and predictor centering.
"""

# Input contract: a tab-separated file whose header is exactly
# ``birthyear<TAB>is_happy``. Any deviation fails the load; nothing is
# coerced or dropped.

import os

import numpy as np
import pandas as pd

from .schema import COLUMNS, Sample


class DataFormatError(ValueError):
    """Raised when a sample file or frame does not match the expected layout."""


def sample_from_frame(df):
    """Validate a two-column DataFrame and convert it into a :class:`Sample`.

    Args:
        df: DataFrame with ``birthyear`` and ``is_happy`` columns, in that
            order and with no others.

    Returns:
        Sample: Pairs in the row order of ``df``.

    Raises:
        DataFormatError: If columns are wrong, any value is missing or
            non-numeric, or ``is_happy`` contains anything other than 0/1.
    """
    expected = [COLUMNS.predictor, COLUMNS.outcome]
    columns = [str(c).strip() for c in df.columns]
    if columns != expected:
        raise DataFormatError(
            f"Expected columns {expected}, found {columns}"
        )
    if df.empty:
        raise DataFormatError("Sample contains no data rows.")

    x = pd.to_numeric(df.iloc[:, 0], errors="coerce")
    y = pd.to_numeric(df.iloc[:, 1], errors="coerce")

    bad_x = x.isna() | ~np.isfinite(x.astype(float))
    if bad_x.any():
        row = int(np.flatnonzero(bad_x.to_numpy())[0])
        raise DataFormatError(
            f"Non-numeric {COLUMNS.predictor} value {df.iloc[row, 0]!r} at data row {row + 1}"
        )
    bad_y = y.isna() | ~y.isin([0, 1])
    if bad_y.any():
        row = int(np.flatnonzero(bad_y.to_numpy())[0])
        raise DataFormatError(
            f"{COLUMNS.outcome} must be 0 or 1, got {df.iloc[row, 1]!r} at data row {row + 1}"
        )

    return Sample(x=x.to_numpy(dtype=float), y=y.to_numpy(dtype=int).astype(bool))


def load_sample(filepath):
    """
    Load a sample from a tab-separated file.

    Args:
        filepath (str): Path to the TSV file.

    Returns:
        Sample: Validated sample in file order.

    Raises:
        FileNotFoundError: If ``filepath`` does not exist.
        DataFormatError: If the file is empty or malformed.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Sample file not found: {filepath}")
    try:
        # Header read as a data row: the first line fixes the field count, so
        # rows with an extra field cannot be absorbed into an implicit index.
        raw = pd.read_csv(
            filepath, sep="\t", header=None, dtype=str, keep_default_na=False
        )
    except pd.errors.EmptyDataError as exc:
        raise DataFormatError(f"Sample file is empty: {filepath}") from exc
    except pd.errors.ParserError as exc:
        raise DataFormatError(f"Could not parse {filepath}: {exc}") from exc

    df = raw.iloc[1:].reset_index(drop=True)
    df.columns = [str(c) for c in raw.iloc[0]]

    try:
        return sample_from_frame(df.replace("", np.nan))
    except DataFormatError as exc:
        raise DataFormatError(f"{filepath}: {exc}") from exc


def center(x):
    """Subtract the mean so zero corresponds to the average predictor value.

    Returns:
        tuple[numpy.ndarray, float]: Centered values and the mean removed.
    """
    x_arr = np.asarray(x, dtype=float)
    if x_arr.size == 0:
        raise ValueError("Cannot center an empty array.")
    mean = float(np.mean(x_arr))
    return x_arr - mean, mean
