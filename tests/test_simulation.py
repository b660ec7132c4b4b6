import numpy as np
import pytest

from oddly.output import write_sample
from oddly.schema import SimulationConfig
from oddly.simulation import (
    linear_probability_ramp,
    make_rng,
    simulate_sample,
    simulate_tutorial_sample,
)


def test_ramp_matches_tutorial_policy():
    ramp = linear_probability_ramp(1900, 1999)
    x = np.array([1900, 1925, 1950, 1999, 2000])
    expected = 0.7 - 0.4 * (x - 1900) / 100
    assert np.allclose(ramp(x), expected)
    assert ramp(np.array([1900]))[0] == pytest.approx(0.7)
    assert ramp(np.array([1950]))[0] == pytest.approx(0.5)


def test_ramp_rejects_empty_range():
    with pytest.raises(ValueError):
        linear_probability_ramp(1999, 1900)


def test_sample_shape_sorted_and_in_range():
    sample = simulate_sample(make_rng(0), 250, 1900, 1999, linear_probability_ramp(1900, 1999))
    assert len(sample) == 250
    assert np.all(np.diff(sample.x) >= 0)
    assert sample.x.min() >= 1900
    assert sample.x.max() <= 1999
    assert np.all(sample.x == np.round(sample.x))
    assert sample.y.dtype == bool


def test_same_seed_gives_identical_samples():
    a = simulate_tutorial_sample(SimulationConfig(seed=0, n=250, lo=1900, hi=1999))
    b = simulate_tutorial_sample(SimulationConfig(seed=0, n=250, lo=1900, hi=1999))
    assert np.array_equal(a.x, b.x)
    assert np.array_equal(a.y, b.y)


def test_same_seed_gives_byte_identical_files(tmp_path):
    first = tmp_path / "a.tsv"
    second = tmp_path / "b.tsv"
    write_sample(simulate_tutorial_sample(), str(first))
    write_sample(simulate_tutorial_sample(), str(second))
    assert first.read_bytes() == second.read_bytes()


def test_tutorial_sample_for_seed_zero():
    sample = simulate_tutorial_sample(SimulationConfig(seed=0, n=250, lo=1900, hi=1999))
    assert sample.x[0] == 1900
    assert sample.x[-1] == 1999
    assert int(sample.y.sum()) == 115


def test_different_seeds_differ():
    a = simulate_tutorial_sample(SimulationConfig(seed=0))
    b = simulate_tutorial_sample(SimulationConfig(seed=1))
    assert not (np.array_equal(a.x, b.x) and np.array_equal(a.y, b.y))


def test_generator_is_explicit_not_global():
    np.random.seed(123)
    before = np.random.random()
    np.random.seed(123)
    simulate_tutorial_sample()
    assert np.random.random() == before


def test_outcomes_follow_probability():
    rng = make_rng(7)
    always = simulate_sample(rng, 200, 0, 10, lambda x: np.ones_like(x, dtype=float))
    never = simulate_sample(rng, 200, 0, 10, lambda x: np.zeros_like(x, dtype=float))
    assert always.y.all()
    assert not never.y.any()

    half = simulate_sample(rng, 20000, 0, 10, lambda x: np.full(len(x), 0.5))
    assert half.y.mean() == pytest.approx(0.5, abs=0.02)


def test_ramp_produces_declining_success_rate():
    sample = simulate_tutorial_sample(SimulationConfig(seed=3, n=20000))
    early = sample.y[sample.x < 1925].mean()
    late = sample.y[sample.x >= 1975].mean()
    assert early > late
    assert early == pytest.approx(0.65, abs=0.03)
    assert late == pytest.approx(0.35, abs=0.03)


@pytest.mark.parametrize("n", [0, -5])
def test_non_positive_size_raises(n):
    with pytest.raises(ValueError, match="Sample size"):
        simulate_sample(make_rng(0), n, 1900, 1999, linear_probability_ramp(1900, 1999))


def test_invalid_range_raises():
    with pytest.raises(ValueError, match="hi > lo"):
        simulate_sample(make_rng(0), 10, 1999, 1999, lambda x: np.full(len(x), 0.5))


def test_probability_outside_unit_interval_raises():
    with pytest.raises(ValueError, match=r"\[0, 1\]"):
        simulate_sample(make_rng(0), 10, 0, 5, lambda x: np.full(len(x), 1.5))


def test_seed_from_environment(monkeypatch):
    monkeypatch.setenv("ODDLY_SEED", "42")
    assert SimulationConfig.from_env().seed == 42
    assert SimulationConfig.from_env(seed=5).seed == 5
    monkeypatch.setenv("ODDLY_SEED", "abc")
    with pytest.raises(ValueError, match="ODDLY_SEED"):
        SimulationConfig.from_env()
