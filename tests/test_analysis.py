import os
import warnings

import numpy as np
import pytest

from oddly.analysis import build_predictions, fit_models, render_figures, run_tutorial
from oddly.output import PREDICTION_COLUMNS
from oddly.schema import Sample, SimulationConfig
from oddly.simulation import simulate_tutorial_sample
from oddly.stats.regression import logistic_regression


@pytest.fixture
def sample():
    return simulate_tutorial_sample(SimulationConfig(seed=0, n=250))


def test_fit_models_returns_both_fits(sample):
    results = fit_models(sample)
    assert set(results) >= {
        "linear_fit",
        "logistic_fit",
        "coefficients",
        "linear_info",
        "logistic_info",
        "summary_lines",
    }
    assert results["logistic_fit"].centered
    assert results["logistic_info"]["odds_ratio"] == pytest.approx(
        np.exp(results["logistic_fit"].slope)
    )


def test_build_predictions_columns_and_bands(sample):
    fit = logistic_regression(sample.x, sample.y)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        preds = build_predictions(sample, fit)
    assert len(preds) == len(sample)
    assert np.allclose(preds["probability"], fit.fitted)
    assert np.allclose(preds["odds"], np.exp(preds["log_odds"]))
    assert np.allclose(preds["centered_x"], sample.x - sample.x.mean())
    assert np.all(preds["lower"] <= preds["probability"])
    assert np.all(preds["upper"] >= preds["probability"])
    assert np.all((preds["logit_lower"] > 0) & (preds["logit_upper"] < 1))
    assert np.allclose(
        preds["upper"] - preds["probability"], preds["probability"] - preds["lower"]
    )
    assert preds["outcome"].tolist() == sample.y.astype(int).tolist()


def test_build_predictions_warns_when_band_leaves_unit_interval():
    # Near-separable data push fitted probabilities towards 0 and 1.
    x = np.arange(20, dtype=float)
    y = np.array([1] * 9 + [0, 1] + [0] * 9, dtype=bool)
    small = Sample(x=x, y=y)
    fit = logistic_regression(small.x, small.y)
    with pytest.warns(RuntimeWarning, match="outside \\[0, 1\\]"):
        preds = build_predictions(small, fit)
    assert (preds["lower"] < 0).any() or (preds["upper"] > 1).any()
    assert ((preds["logit_lower"] > 0) & (preds["logit_upper"] < 1)).all()


def test_build_predictions_rejects_uncentered_fit(sample):
    fit = logistic_regression(sample.x, sample.y, center=False)
    with pytest.raises(ValueError, match="centered"):
        build_predictions(sample, fit)


def test_build_predictions_rejects_fit_from_other_sample(sample):
    other = Sample(x=sample.x + 10.0, y=sample.y)
    fit = logistic_regression(other.x, other.y)
    with pytest.raises(ValueError, match="centered at"):
        build_predictions(sample, fit)


def test_run_tutorial_writes_artifacts(tmp_path, sample):
    results = run_tutorial(sample, output_dir=str(tmp_path), make_plots=False)
    for path in results["artifacts"].values():
        assert os.path.exists(path)
    assert results["figures"] == {}
    assert set(PREDICTION_COLUMNS) <= set(results["predictions"].columns)
    with open(results["artifacts"]["sample"], "rb") as fh:
        assert fh.readline() == b"birthyear\tis_happy\n"


def test_run_tutorial_renders_figures(tmp_path, sample):
    results = run_tutorial(sample, output_dir=str(tmp_path))
    assert set(results["figures"]) == {"linear_fit", "logistic_fit", "link_scales", "sigmoid"}
    for path in results["figures"].values():
        assert os.path.exists(path)


def test_render_figures_returns_png_paths(tmp_path, sample):
    results = fit_models(sample)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        results["predictions"] = build_predictions(
            sample, results["logistic_fit"], results["linear_fit"]
        )
    figures = render_figures(sample, results, str(tmp_path))
    assert set(figures) == {"linear_fit", "logistic_fit", "link_scales", "sigmoid"}
    for path in figures.values():
        assert path.endswith(".png")
        assert os.path.exists(path)
