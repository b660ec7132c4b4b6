"""Tests for the sample, prediction and summary writers."""

import numpy as np
import pandas as pd
import pytest

from oddly.data_processing import load_sample
from oddly.output import (
    PREDICTION_COLUMNS,
    save_predictions_to_csv,
    save_summary,
    write_sample,
)
from oddly.schema import Sample


def test_write_sample_exact_bytes(tmp_path):
    sample = Sample(x=np.array([1900, 1901, 1999]), y=np.array([True, False, True]))
    path = tmp_path / "out" / "sample.tsv"
    write_sample(sample, str(path))
    assert path.read_bytes() == b"birthyear\tis_happy\n1900\t1\n1901\t0\n1999\t1\n"


def test_written_sample_loads_back(tmp_path):
    sample = Sample(x=np.array([1900, 1950]), y=np.array([False, True]))
    path = str(tmp_path / "sample.tsv")
    write_sample(sample, path)
    loaded = load_sample(path)
    assert np.array_equal(loaded.x, sample.x)
    assert np.array_equal(loaded.y, sample.y)


def test_sample_rejects_mismatched_lengths():
    with pytest.raises(ValueError, match="equal length"):
        Sample(x=np.array([1.0, 2.0]), y=np.array([True]))


def test_save_predictions_requires_columns(tmp_path):
    with pytest.raises(KeyError, match="probability"):
        save_predictions_to_csv(pd.DataFrame({"x": [1.0]}), output_dir=str(tmp_path))


def test_save_predictions_renames_key_columns(tmp_path):
    preds = pd.DataFrame({col: [0.5, 0.25] for col in PREDICTION_COLUMNS})
    path = save_predictions_to_csv(preds, output_dir=str(tmp_path))
    written = pd.read_csv(path)
    assert written.columns[0] == "birthyear"
    assert "is_happy" in written.columns
    assert len(written) == 2


def test_save_summary_writes_lines(tmp_path):
    path = save_summary(["first", "second"], output_dir=str(tmp_path))
    with open(path) as fh:
        assert fh.read() == "first\nsecond\n"
