"""
Solver dispatch for hypothesis tests.

Provides one_sample_t_test(), two_sample_t_test(), one_prop_z_test(),
two_prop_z_test() on summary statistics, and t_test() on raw data.
Every function also accepts a prebuilt HypothesisDesign.
"""

from __future__ import annotations

from typing import Literal

from numpy.typing import ArrayLike

from snakemath.core.defaults import DEFAULT_ALPHA
from snakemath.core.exceptions import ValidationError
from snakemath.hypothesis.backends.cpu import CPUHypothesisBackend
from snakemath.hypothesis.design import HypothesisDesign
from snakemath.hypothesis.solution import HTestSolution


Alternative = Literal["two-sided", "less", "greater"]


def _solve(design: HypothesisDesign, expected: str) -> HTestSolution:
    if design.test_type != expected:
        raise ValidationError(
            f"Expected a {expected!r} design, got {design.test_type!r}"
        )
    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


def one_sample_t_test(
    mean: float | HypothesisDesign,
    std_dev: float | None = None,
    n: int | None = None,
    mu: float = 0.0,
    *,
    alternative: Alternative = "two-sided",
    alpha: float = DEFAULT_ALPHA,
) -> HTestSolution:
    """
    One-sample t-test from summary statistics.

    Parameters
    ----------
    mean, std_dev, n : float, float, int
        Sample mean, sample standard deviation (n - 1 denominator) and
        sample size (n >= 2). Alternatively pass a HypothesisDesign as
        the first argument.
    mu : float
        Hypothesised population mean.
    alternative : str
        "two-sided" (default), "less" or "greater".
    alpha : float
        Significance level; the interval has confidence 1 - alpha.

    Returns
    -------
    HTestSolution
        t statistic with n - 1 df, p-value, confidence interval for the
        mean, Cohen's d.
    """
    if isinstance(mean, HypothesisDesign):
        return _solve(mean, "one-sample-t")
    if std_dev is None or n is None:
        raise ValidationError("one_sample_t_test: std_dev and n are required")
    design = HypothesisDesign.for_one_sample_t(
        mean, std_dev, n, mu, alternative=alternative, alpha=alpha,
    )
    return _solve(design, "one-sample-t")


def two_sample_t_test(
    mean1: float | HypothesisDesign,
    std_dev1: float | None = None,
    n1: int | None = None,
    mean2: float | None = None,
    std_dev2: float | None = None,
    n2: int | None = None,
    *,
    alternative: Alternative = "two-sided",
    alpha: float = DEFAULT_ALPHA,
    var_equal: bool = False,
) -> HTestSolution:
    """
    Two-sample t-test from group summaries. H0: mean1 = mean2.

    var_equal=False (default) uses Welch's test with Welch-Satterthwaite
    degrees of freedom; var_equal=True uses the pooled-variance test
    with n1 + n2 - 2 df. The interval is for mean1 - mean2 and Cohen's d
    uses the pooled standard deviation either way.
    """
    if isinstance(mean1, HypothesisDesign):
        return _solve(mean1, "two-sample-t")
    if None in (std_dev1, n1, mean2, std_dev2, n2):
        raise ValidationError("two_sample_t_test: both group summaries are required")
    design = HypothesisDesign.for_two_sample_t(
        mean1, std_dev1, n1, mean2, std_dev2, n2,
        alternative=alternative, alpha=alpha, var_equal=var_equal,
    )
    return _solve(design, "two-sample-t")


def one_prop_z_test(
    successes: int | HypothesisDesign,
    n: int | None = None,
    p0: float | None = None,
    *,
    alternative: Alternative = "two-sided",
    alpha: float = DEFAULT_ALPHA,
) -> HTestSolution:
    """
    One-proportion z-test. H0: p = p0.

    The statistic uses the null standard error sqrt(p0 (1 - p0) / n);
    the interval uses sqrt(p_hat (1 - p_hat) / n).
    """
    if isinstance(successes, HypothesisDesign):
        return _solve(successes, "one-prop-z")
    if n is None or p0 is None:
        raise ValidationError("one_prop_z_test: n and p0 are required")
    design = HypothesisDesign.for_one_prop_z(
        successes, n, p0, alternative=alternative, alpha=alpha,
    )
    return _solve(design, "one-prop-z")


def two_prop_z_test(
    successes1: int | HypothesisDesign,
    n1: int | None = None,
    successes2: int | None = None,
    n2: int | None = None,
    *,
    alternative: Alternative = "two-sided",
    alpha: float = DEFAULT_ALPHA,
) -> HTestSolution:
    """
    Two-proportion z-test with pooled SE under H0: p1 = p2.

    The interval for p1 - p2 uses the unpooled standard error.
    """
    if isinstance(successes1, HypothesisDesign):
        return _solve(successes1, "two-prop-z")
    if None in (n1, successes2, n2):
        raise ValidationError("two_prop_z_test: both groups are required")
    design = HypothesisDesign.for_two_prop_z(
        successes1, n1, successes2, n2, alternative=alternative, alpha=alpha,
    )
    return _solve(design, "two-prop-z")


def t_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    mu: float = 0.0,
    alternative: Alternative = "two-sided",
    alpha: float = DEFAULT_ALPHA,
    var_equal: bool = False,
) -> HTestSolution:
    """
    t-test on raw data.

    With only x, tests H0: mean(x) = mu. With y, compares the two
    sample means (Welch unless var_equal=True); mu must then be 0.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_t_test(
            x, y, mu=mu, alternative=alternative, alpha=alpha, var_equal=var_equal,
        )
    if design.test_type not in ("one-sample-t", "two-sample-t"):
        raise ValidationError(f"t_test: expected a t design, got {design.test_type!r}")
    return _solve(design, design.test_type)
