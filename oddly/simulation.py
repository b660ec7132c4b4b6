"""Simulate the birth-year/happiness sample used throughout the tutorial.

Birth years are drawn uniformly with replacement from an integer range and
sorted; each respondent's outcome is one Bernoulli trial whose success
probability falls linearly with birth year. All randomness flows through an
explicitly passed :class:`numpy.random.Generator`, so two calls with equally
seeded generators return identical samples.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from .schema import Sample, SimulationConfig

logger = logging.getLogger(__name__)

ProbabilityFn = Callable[[np.ndarray], np.ndarray]


def make_rng(seed: int) -> np.random.Generator:
    """Return a fresh PCG64 generator seeded with ``seed``."""
    return np.random.default_rng(int(seed))


def linear_probability_ramp(
    lo: int, hi: int, p_start: float = 0.7, p_end: float = 0.3
) -> ProbabilityFn:
    """Build a success probability that falls linearly across ``[lo, hi]``.

    Args:
        lo (int): Lowest predictor value (inclusive).
        hi (int): Highest predictor value (inclusive).
        p_start (float, optional): Probability at ``x = lo``. Defaults to
            ``0.7``.
        p_end (float, optional): Probability reached one step past ``hi``.
            Defaults to ``0.3``.

    Returns:
        Callable: ``p(x) = p_start - (p_start - p_end) * (x - lo) / (hi - lo + 1)``
        clipped to ``[0, 1]``.

    Note:
        The scale is the number of integers in ``[lo, hi]``, so for
        ``lo=1900, hi=1999`` the ramp is ``0.7 - 0.4 * (x - 1900) / 100``.
    """
    if hi <= lo:
        raise ValueError(f"Predictor range must satisfy hi > lo, got [{lo}, {hi}]")
    span = float(hi - lo + 1)
    drop = float(p_start) - float(p_end)

    def probability(x: np.ndarray) -> np.ndarray:
        x_arr = np.asarray(x, dtype=float)
        return np.clip(float(p_start) - drop * (x_arr - lo) / span, 0.0, 1.0)

    return probability


def simulate_sample(
    rng: np.random.Generator,
    n: int,
    lo: int,
    hi: int,
    probability: ProbabilityFn,
) -> Sample:
    """Draw ``n`` sorted predictor values and one Bernoulli outcome for each.

    Args:
        rng (numpy.random.Generator): Seeded generator; consumed in place.
        n (int): Number of sample points; must be positive.
        lo (int): Lowest predictor value (inclusive).
        hi (int): Highest predictor value (inclusive); must exceed ``lo``.
        probability (Callable): Vectorized map from predictor values to
            success probabilities in ``[0, 1]``.

    Returns:
        Sample: ``n`` pairs sorted by predictor ascending.

    Raises:
        ValueError: If ``n <= 0``, ``hi <= lo`` or ``probability`` returns
            values outside ``[0, 1]``.
    """
    if int(n) <= 0:
        raise ValueError(f"Sample size must be positive, got {n}")
    if hi <= lo:
        raise ValueError(f"Predictor range must satisfy hi > lo, got [{lo}, {hi}]")

    x = np.sort(rng.integers(int(lo), int(hi), size=int(n), endpoint=True), kind="stable")
    p = np.asarray(probability(x), dtype=float)
    if p.shape != x.shape:
        raise ValueError(
            f"Probability function returned shape {p.shape}, expected {x.shape}"
        )
    if np.any(~np.isfinite(p)) or np.any((p < 0) | (p > 1)):
        raise ValueError("Probability function must return values in [0, 1].")

    y = rng.random(int(n)) < p
    logger.debug("Simulated %d points over [%d, %d], %d successes", n, lo, hi, int(y.sum()))
    return Sample(x=x, y=y)


def simulate_tutorial_sample(config: SimulationConfig | None = None) -> Sample:
    """Simulate the tutorial sample from a :class:`SimulationConfig`."""
    cfg = config or SimulationConfig()
    rng = make_rng(cfg.seed)
    ramp = linear_probability_ramp(cfg.lo, cfg.hi, cfg.p_start, cfg.p_end)
    return simulate_sample(rng, cfg.n, cfg.lo, cfg.hi, ramp)
