"""Define standardized column names, the sample container and run configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

import numpy as np
import pandas as pd

SEED_ENV_VAR = "ODDLY_SEED"


@dataclass(frozen=True)
class SampleColumns:
    """Container for standardized column labels.

    These names are used for the input/output TSV files and for every
    DataFrame built from a sample, so loading, fitting and plotting agree on
    one vocabulary.

    Attributes:
        predictor: Column name for the continuous predictor (birth year,
            integer calendar years).

        outcome: Column name for the binary outcome. Encoded as ``0``/``1``
            on disk; ``1`` means the respondent reported being happy.
    """

    predictor: str = "birthyear"
    outcome: str = "is_happy"


COLUMNS = SampleColumns()


@dataclass(frozen=True, eq=False)
class Sample:
    """Ordered, immutable sequence of ``(predictor, outcome)`` pairs.

    Attributes:
        x: Predictor values (birth years) as a read-only float array.
        y: Outcome values as a read-only boolean array of the same length.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        x = np.array(self.x, dtype=float)
        y = np.array(self.y, dtype=bool)
        if x.ndim != 1 or y.ndim != 1 or len(x) != len(y):
            raise ValueError(
                f"Sample arrays must be one-dimensional and of equal length, "
                f"got shapes {x.shape} and {y.shape}"
            )
        x.setflags(write=False)
        y.setflags(write=False)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __len__(self) -> int:
        return len(self.x)

    def __iter__(self):
        return iter(zip(self.x.tolist(), self.y.tolist()))

    def to_frame(self) -> pd.DataFrame:
        """Return the sample as a DataFrame with 0/1 integer outcomes."""
        return pd.DataFrame(
            {
                COLUMNS.predictor: self.x.astype(int)
                if np.all(np.mod(self.x, 1) == 0)
                else self.x,
                COLUMNS.outcome: self.y.astype(int),
            }
        )


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of the simulated tutorial sample.

    Attributes:
        seed: Seed for the explicitly constructed random generator.
        n: Number of sample points.
        lo: Lowest birth year that can be drawn (inclusive).
        hi: Highest birth year that can be drawn (inclusive).
        p_start: Success probability at ``lo``.
        p_end: Success probability one step past ``hi``.
    """

    seed: int = 0
    n: int = 250
    lo: int = 1900
    hi: int = 1999
    p_start: float = 0.7
    p_end: float = 0.3

    @classmethod
    def from_env(cls, **overrides) -> "SimulationConfig":
        """Build a config, taking the seed from ``ODDLY_SEED`` when set."""
        raw = os.environ.get(SEED_ENV_VAR)
        if raw is not None and "seed" not in overrides:
            try:
                overrides["seed"] = int(raw)
            except ValueError as exc:
                raise ValueError(
                    f"{SEED_ENV_VAR} must be an integer, got {raw!r}"
                ) from exc
        return cls(**overrides)
