"""
Probability distributions: normal, binomial, Poisson, exponential and
uniform.

Build a DistributionSpec with one of its factories and pass it to the
unified functions:

    >>> from snakemath.distributions import DistributionSpec, get_cdf
    >>> get_cdf(DistributionSpec.normal(0, 1), 1.96)
    0.9750021048517795
"""

from snakemath.distributions._common import DistributionStats, HistogramBin, PlotRange
from snakemath.distributions._families import (
    binomial_cdf,
    binomial_pmf,
    binomial_quantile,
    exponential_cdf,
    exponential_pdf,
    exponential_quantile,
    normal_cdf,
    normal_pdf,
    normal_quantile,
    poisson_cdf,
    poisson_pmf,
    poisson_quantile,
    uniform_cdf,
    uniform_pdf,
    uniform_quantile,
)
from snakemath.distributions.design import (
    DISCRETE_FAMILIES,
    FAMILY_PARAMS,
    DistributionSpec,
    Family,
    ParamIssue,
    is_valid_params,
    parse_family,
    require_valid,
    validate_params,
)
from snakemath.distributions.histogram import create_histogram, sturges_bin_count
from snakemath.distributions.presets import (
    DISTRIBUTION_PRESETS,
    DistributionPreset,
    get_preset,
)
from snakemath.distributions.solvers import (
    generate_samples,
    get_cdf,
    get_discrete_x_values,
    get_distribution_stats,
    get_pdf,
    get_quantile,
    get_suggested_range,
    is_discrete,
    probability_between,
    probability_greater_equal,
    probability_greater_than,
    probability_less_equal,
    probability_less_than,
    sample,
)

__all__ = [
    # Specification
    "DistributionSpec",
    "Family",
    "FAMILY_PARAMS",
    "DISCRETE_FAMILIES",
    "ParamIssue",
    "parse_family",
    "validate_params",
    "is_valid_params",
    "require_valid",
    # Results
    "DistributionStats",
    "HistogramBin",
    "PlotRange",
    # Unified API
    "get_pdf",
    "get_cdf",
    "get_quantile",
    "generate_samples",
    "sample",
    "get_distribution_stats",
    "get_suggested_range",
    "is_discrete",
    "get_discrete_x_values",
    "probability_less_than",
    "probability_less_equal",
    "probability_greater_than",
    "probability_greater_equal",
    "probability_between",
    "create_histogram",
    "sturges_bin_count",
    # Per-family functions
    "normal_pdf",
    "normal_cdf",
    "normal_quantile",
    "binomial_pmf",
    "binomial_cdf",
    "binomial_quantile",
    "poisson_pmf",
    "poisson_cdf",
    "poisson_quantile",
    "exponential_pdf",
    "exponential_cdf",
    "exponential_quantile",
    "uniform_pdf",
    "uniform_cdf",
    "uniform_quantile",
    # Presets
    "DistributionPreset",
    "DISTRIBUTION_PRESETS",
    "get_preset",
]
