"""
Result types shared by the sampling-theory module.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class PopulationConfig:
    """
    Recipe for a synthetic finite population.

    distribution is a family tag ('normal', 'uniform', 'exponential',
    'binomial', 'poisson'); missing params fall back to the family
    defaults in population.POPULATION_DEFAULTS.
    """
    size: int
    distribution: str
    params: Mapping[str, float]


@dataclass(frozen=True)
class SampleResult:
    """
    One draw from a finite population.

    indices point back into the population array the sample was drawn
    from; the population itself is never modified.
    """
    values: NDArray[np.floating[Any]]
    indices: NDArray[np.intp]
    mean: float
    standard_deviation: float
    standard_error: float

    @property
    def size(self) -> int:
        return int(self.values.shape[0])


@dataclass(frozen=True)
class ConfidenceInterval:
    """
    Interval estimate.

    upper - lower == 2 * margin_of_error always holds. For the symmetric
    intervals of estimation.py, point_estimate is the midpoint.
    """
    lower: float
    upper: float
    point_estimate: float
    margin_of_error: float
    confidence_level: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class BootstrapResult:
    """
    Bootstrap distribution of a statistic.

    bootstrap_statistics holds one value per iteration in generation
    order. percentile_ci is not centred on original_statistic, and for
    skewed statistics original_statistic can fall outside it.
    """
    original_statistic: float
    bootstrap_statistics: NDArray[np.floating[Any]]
    standard_error: float
    percentile_ci: ConfidenceInterval

    @property
    def iterations(self) -> int:
        return int(self.bootstrap_statistics.shape[0])


@dataclass(frozen=True)
class SampleStatistics:
    """Descriptive summary of a sample (sample SD uses n - 1)."""
    n: int
    mean: float
    std_dev: float
    se: float
    min: float
    max: float


@dataclass(frozen=True)
class Stratum:
    """A named partition of a population and its share of the total."""
    name: str
    values: NDArray[np.floating[Any]]
    proportion: float


def summarize(values: NDArray[np.floating[Any]]) -> tuple[float, float, float]:
    """(mean, sample SD, SE) with SD and SE reported as 0 below two values."""
    n = values.shape[0]
    if n == 0:
        return 0.0, 0.0, 0.0
    mean = float(np.mean(values))
    if n < 2:
        return mean, 0.0, 0.0
    sd = float(np.std(values, ddof=1))
    return mean, sd, sd / math.sqrt(n)
