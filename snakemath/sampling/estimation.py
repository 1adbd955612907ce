"""
Standard errors, confidence intervals and sample-size planning.

Intervals for a mean use the exact Student-t critical value with n - 1
degrees of freedom. Intervals for a proportion and the sample-size
formulas use the normal critical value (known-variance planning).
"""

from __future__ import annotations

import math

from numpy.typing import ArrayLike

from snakemath.core.defaults import DEFAULT_CONF_LEVEL
from snakemath.core.exceptions import InsufficientDataError, ValidationError
from snakemath.core.special import t_critical_value, z_critical_value
from snakemath.core.validation import (
    check_conf_level,
    check_nonnegative_integer,
    check_positive,
    check_positive_integer,
    check_probability,
    check_scalar,
    check_vector,
)
from snakemath.sampling._common import ConfidenceInterval, SampleStatistics, summarize


def _check_std_dev(std_dev: float) -> float:
    std_dev = check_scalar(std_dev, "std_dev")
    if std_dev < 0:
        raise ValidationError(f"std_dev: must be >= 0, got {std_dev}")
    return std_dev


# --- Standard errors ---

def standard_error_mean(std_dev: float, n: int) -> float:
    """SE of the sample mean: std_dev / sqrt(n)."""
    std_dev = _check_std_dev(std_dev)
    n = check_positive_integer(n, "n")
    return std_dev / math.sqrt(n)


def standard_error_proportion(proportion: float, n: int) -> float:
    """SE of a sample proportion: sqrt(p (1 - p) / n)."""
    proportion = check_probability(proportion, "proportion")
    n = check_positive_integer(n, "n")
    return math.sqrt(proportion * (1.0 - proportion) / n)


def finite_population_correction(n: int, population_size: int) -> float:
    """
    sqrt((N - n) / (N - 1)), the factor applied to an SE when sampling
    without replacement from a population of size N.

    Returns 0 when the sample is the whole population.
    """
    n = check_positive_integer(n, "n")
    population_size = check_positive_integer(population_size, "population_size")
    if n > population_size:
        raise ValidationError(
            f"n ({n}) cannot exceed population_size ({population_size})"
        )
    if population_size == 1 or n == population_size:
        return 0.0
    return math.sqrt((population_size - n) / (population_size - 1))


# --- Confidence intervals ---

def confidence_interval_mean(
    mean: float,
    std_dev: float,
    n: int,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> ConfidenceInterval:
    """
    mean +/- t(1 - alpha/2, n - 1) * std_dev / sqrt(n).

    Requires n >= 2 for the t degrees of freedom.
    """
    mean = check_scalar(mean, "mean")
    std_dev = _check_std_dev(std_dev)
    n = check_positive_integer(n, "n")
    conf_level = check_conf_level(conf_level)
    if n < 2:
        raise InsufficientDataError(
            "n: a t interval needs at least 2 observations", required=2, actual=n
        )

    margin = t_critical_value(n - 1, 1.0 - conf_level) * std_dev / math.sqrt(n)
    return ConfidenceInterval(
        lower=mean - margin,
        upper=mean + margin,
        point_estimate=mean,
        margin_of_error=margin,
        confidence_level=conf_level,
    )


def confidence_interval_proportion(
    successes: int,
    n: int,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> ConfidenceInterval:
    """
    Wald interval p_hat +/- z * sqrt(p_hat (1 - p_hat) / n).

    The bounds are not clipped to [0, 1], so the interval stays symmetric
    about p_hat. Callers displaying it should clip.
    """
    successes = check_nonnegative_integer(successes, "successes")
    n = check_positive_integer(n, "n")
    conf_level = check_conf_level(conf_level)
    if successes > n:
        raise ValidationError(f"successes ({successes}) cannot exceed n ({n})")

    p_hat = successes / n
    margin = z_critical_value(1.0 - conf_level) * standard_error_proportion(p_hat, n)
    return ConfidenceInterval(
        lower=p_hat - margin,
        upper=p_hat + margin,
        point_estimate=p_hat,
        margin_of_error=margin,
        confidence_level=conf_level,
    )


# --- Sample-size planning ---

def sample_size_for_mean(
    margin_of_error: float,
    std_dev: float,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> int:
    """
    Smallest n with z * std_dev / sqrt(n) <= margin_of_error.

    ceil((z * std_dev / E)^2); sample_size_for_mean(3, 15) == 97.
    """
    margin_of_error = check_positive(margin_of_error, "margin_of_error")
    std_dev = check_positive(std_dev, "std_dev")
    conf_level = check_conf_level(conf_level)
    z = z_critical_value(1.0 - conf_level)
    return math.ceil((z * std_dev / margin_of_error) ** 2)


def sample_size_for_proportion(
    margin_of_error: float,
    proportion: float = 0.5,
    conf_level: float = DEFAULT_CONF_LEVEL,
) -> int:
    """
    ceil(z^2 p (1 - p) / E^2).

    proportion = 0.5 is the conservative default, giving the largest n.
    Returns at least 1.
    """
    margin_of_error = check_positive(margin_of_error, "margin_of_error")
    proportion = check_probability(proportion, "proportion")
    conf_level = check_conf_level(conf_level)
    z = z_critical_value(1.0 - conf_level)
    return max(1, math.ceil(z * z * proportion * (1.0 - proportion) / margin_of_error ** 2))


# --- Descriptives ---

def calculate_sample_statistics(values: ArrayLike) -> SampleStatistics:
    """n, mean, sample SD, SE, min and max of a non-empty sample."""
    arr = check_vector(values, "values", min_samples=1)
    mean, sd, se = summarize(arr)
    return SampleStatistics(
        n=int(arr.shape[0]),
        mean=mean,
        std_dev=sd,
        se=se,
        min=float(arr.min()),
        max=float(arr.max()),
    )
