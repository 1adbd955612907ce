"""
Nonparametric bootstrap.

The sample is resampled with replacement, the statistic is recomputed on
every resample, and the spread of those values estimates the statistic's
sampling distribution.
"""

from __future__ import annotations

import math
import warnings
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from snakemath.core.defaults import DEFAULT_CONF_LEVEL
from snakemath.core.exceptions import NumericalError
from snakemath.core.random import RandomSource, as_generator
from snakemath.core.validation import (
    check_conf_level,
    check_positive_integer,
    check_vector,
)
from snakemath.sampling._common import BootstrapResult, ConfidenceInterval

Statistic = Callable[[NDArray[np.floating[Any]]], float]


def bootstrap_resample(
    sample: ArrayLike,
    *,
    seed: RandomSource = None,
) -> NDArray[np.floating[Any]]:
    """One resample of the same size, drawn with replacement."""
    data = check_vector(sample, "sample", min_samples=1)
    rng = as_generator(seed)
    return data[rng.integers(0, data.shape[0], size=data.shape[0])]


def _evaluate(statistic: Statistic, data: NDArray[np.floating[Any]]) -> float:
    value = float(statistic(data))
    if not math.isfinite(value):
        raise NumericalError(f"statistic returned a non-finite value ({value})")
    return value


def bootstrap(
    sample: ArrayLike,
    iterations: int = 1000,
    statistic: Statistic = np.mean,
    conf_level: float = DEFAULT_CONF_LEVEL,
    *,
    seed: RandomSource = None,
) -> BootstrapResult:
    """
    Bootstrap standard error and percentile interval for `statistic`.

    Args:
        sample: Non-empty 1D sample
        iterations: Number of resamples B (>= 1)
        statistic: Function of a 1D array returning a finite scalar
        conf_level: Coverage of the percentile interval
        seed: Random source; the same seed reproduces the same run

    Returns:
        BootstrapResult with exactly `iterations` statistics in the order
        they were generated. The SE is the sample SD (ddof=1) of those
        statistics, 0 when B = 1. The interval is the
        [(1 - conf)/2, 1 - (1 - conf)/2] quantile pair of the bootstrap
        distribution (linear interpolation).
    """
    data = check_vector(sample, "sample", min_samples=1)
    iterations = check_positive_integer(iterations, "iterations")
    conf_level = check_conf_level(conf_level)
    rng = as_generator(seed)

    n = data.shape[0]
    original = _evaluate(statistic, data)
    stats = np.empty(iterations, dtype=np.float64)
    for i in range(iterations):
        stats[i] = _evaluate(statistic, data[rng.integers(0, n, size=n)])

    if iterations < 100:
        warnings.warn(
            f"bootstrap with {iterations} iterations gives unstable percentile "
            "intervals; 1000 or more is typical",
            stacklevel=2,
        )

    se = float(np.std(stats, ddof=1)) if iterations > 1 else 0.0

    tail = (1.0 - conf_level) / 2.0
    lower, upper = (float(q) for q in np.quantile(stats, [tail, 1.0 - tail]))
    ci = ConfidenceInterval(
        lower=lower,
        upper=upper,
        point_estimate=original,
        margin_of_error=(upper - lower) / 2.0,
        confidence_level=conf_level,
    )
    return BootstrapResult(
        original_statistic=original,
        bootstrap_statistics=stats,
        standard_error=se,
        percentile_ci=ci,
    )
