"""
SnakeMath: interactive-statistics computing for Python.

Probability distributions, sampling theory, correlation and regression,
and hypothesis testing on numpy/scipy.

Submodules:
    core: Exceptions, validation, special functions, result envelope
    distributions: Normal, binomial, Poisson, exponential, uniform
    sampling: Sampling methods, confidence intervals, bootstrap
    correlation: Pearson's r, OLS regression, diagnostics, datasets
    hypothesis: t and z tests, effect sizes, power
"""

__version__ = "0.1.0"

from snakemath import core
from snakemath import distributions
from snakemath import sampling
from snakemath import correlation
from snakemath import hypothesis

__all__ = [
    "__version__",
    "core",
    "distributions",
    "sampling",
    "correlation",
    "hypothesis",
]
