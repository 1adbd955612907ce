"""
Core infrastructure for SnakeMath.

Shared abstractions used by every domain sub-package (distributions,
sampling, correlation, hypothesis).

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    result: Generic Result[P] envelope
    special: Special functions and numeric primitives
    random: Seed / Generator handling
    records: Conversion of results to JSON-safe structures
    defaults: Policy thresholds and default levels
"""

from snakemath.core.result import Result
from snakemath.core.random import RandomSource, as_generator
from snakemath.core.records import to_record
from snakemath.core.exceptions import (
    SnakeMathError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    NumericalError,
    DegenerateInputError,
    SingularMatrixError,
)
from snakemath.core.special import (
    factorial,
    log_factorial,
    binomial_coefficient,
    log_binomial_coefficient,
    erf,
    standard_normal_pdf,
    standard_normal_cdf,
    standard_normal_quantile,
    z_critical_value,
    t_cdf,
    t_quantile,
    t_critical_value,
)

__all__ = [
    # Result
    "Result",
    # Randomness / records
    "RandomSource",
    "as_generator",
    "to_record",
    # Exceptions
    "SnakeMathError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "NumericalError",
    "DegenerateInputError",
    "SingularMatrixError",
    # Special functions
    "factorial",
    "log_factorial",
    "binomial_coefficient",
    "log_binomial_coefficient",
    "erf",
    "standard_normal_pdf",
    "standard_normal_cdf",
    "standard_normal_quantile",
    "z_critical_value",
    "t_cdf",
    "t_quantile",
    "t_critical_value",
]
