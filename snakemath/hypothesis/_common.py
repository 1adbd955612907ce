"""
Common types for hypothesis testing.

Defines HTestParams, the payload every test returns, and the valid
alternative and test-type tags.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


VALID_ALTERNATIVES = ("two-sided", "less", "greater")

TEST_TYPES = ("one-sample-t", "two-sample-t", "one-prop-z", "two-prop-z")


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Every test returns this same structure.

    Attributes
    ----------
    statistic : float
        Test statistic. +/-inf when the standard error is zero and the
        estimate differs from the null value.
    statistic_name : str
        "t" or "z".
    df : float or None
        Degrees of freedom for t tests (fractional for Welch), None for
        z tests.
    p_value : float
        p-value for the chosen alternative, in [0, 1].
    conf_int : tuple of float
        Two-sided (1 - alpha) confidence interval for the estimated
        quantity (mean, difference in means, proportion or difference in
        proportions), whatever the alternative.
    alpha : float
        Significance level. reject_null is p_value < alpha.
    estimate : dict
        Point estimate(s), e.g. {"mean of x": 5.1}.
    null_value : dict
        Hypothesised value under H0, e.g. {"mean": 0}.
    alternative : str
        "two-sided", "less" or "greater".
    effect_size : float or None
        Cohen's d (t tests) or Cohen's h (z tests). None when undefined
        (zero standard deviation).
    effect_size_name : str
        "Cohen's d" or "Cohen's h".
    effect_size_interpretation : str or None
        negligible / small / medium / large.
    method : str
        Human-readable method name, e.g. "Welch Two Sample t-test".
    data_name : str
        Description of the data, e.g. "x and y".
    """
    statistic: float
    statistic_name: str
    df: float | None
    p_value: float
    conf_int: tuple[float, float]
    alpha: float
    estimate: dict[str, float]
    null_value: dict[str, float]
    alternative: str
    effect_size: float | None
    effect_size_name: str
    effect_size_interpretation: str | None
    method: str
    data_name: str
    extras: dict[str, Any] = field(default_factory=dict)

    @property
    def conf_level(self) -> float:
        return 1.0 - self.alpha

    @property
    def reject_null(self) -> bool:
        return self.p_value < self.alpha
