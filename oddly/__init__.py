"""
A Python package contrasting linear and logistic regression on a binary outcome.

Simulates (or loads) a birth-year/happiness sample, fits an ordinary
least-squares line and a logit model, and converts the logit fit between
probability, odds and log-odds.

Modules:
    - simulation: Seeded synthetic sample generator.
    - odds: Probability/odds/log-odds conversions, odds ratios and bands.
    - data_processing: Loads and validates tab-separated sample files.
    - analysis: Fits both models and assembles per-point predictions.
    - plotting: Renders the tutorial figures.
    - output: Writes samples, predictions and summaries.
"""

__version__ = "1.0.0"

from .analysis import build_predictions, fit_models, run_tutorial
from .data_processing import DataFormatError, center, load_sample
from .odds import (
    NumericDomainError,
    confidence_band,
    log_odds_to_odds,
    log_odds_to_probability,
    logit_confidence_band,
    odds_ratio,
    odds_to_log_odds,
    odds_to_probability,
    predict_log_odds,
    predict_probabilities,
    probability_to_log_odds,
    probability_to_odds,
)
from .output import write_sample
from .schema import Sample, SimulationConfig
from .simulation import (
    linear_probability_ramp,
    make_rng,
    simulate_sample,
    simulate_tutorial_sample,
)
from .stats.regression import LogisticFit, linear_regression, logistic_regression

__all__ = [
    # Data
    "Sample",
    "SimulationConfig",
    "DataFormatError",
    "center",
    "load_sample",
    "write_sample",
    # Simulation
    "make_rng",
    "linear_probability_ramp",
    "simulate_sample",
    "simulate_tutorial_sample",
    # Conversions
    "NumericDomainError",
    "log_odds_to_odds",
    "odds_to_log_odds",
    "odds_to_probability",
    "probability_to_odds",
    "probability_to_log_odds",
    "log_odds_to_probability",
    "predict_log_odds",
    "predict_probabilities",
    "odds_ratio",
    "confidence_band",
    "logit_confidence_band",
    # Models
    "LogisticFit",
    "linear_regression",
    "logistic_regression",
    # Pipeline
    "build_predictions",
    "fit_models",
    "run_tutorial",
]
