"""Text helpers for reporting test results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from snakemath.core.validation import check_probability

if TYPE_CHECKING:
    from snakemath.hypothesis.solution import HTestSolution


def format_p_value(p_value: float) -> str:
    """
    "< 0.0001" below 1e-4, two-digit scientific below 1e-3, otherwise
    four decimals.

    >>> format_p_value(0.00052)
    '5.20e-04'
    >>> format_p_value(0.0431)
    '0.0431'
    """
    p_value = check_probability(p_value, "p_value")
    if p_value < 0.0001:
        return "< 0.0001"
    if p_value < 0.001:
        return f"{p_value:.2e}"
    return f"{p_value:.4f}"


def significance_stars(p_value: float) -> str:
    """'***' below 0.001, '**' below 0.01, '*' below 0.05, else ''."""
    p_value = check_probability(p_value, "p_value")
    if p_value < 0.001:
        return "***"
    if p_value < 0.01:
        return "**"
    if p_value < 0.05:
        return "*"
    return ""


def describe_test_result(solution: HTestSolution, context: str | None = None) -> str:
    """
    One-sentence plain-language description of a test result.

    e.g. "The result is statistically significant (p = 0.0021) with a
    large effect size (0.92)."
    """
    significance = (
        "statistically significant" if solution.reject_null
        else "not statistically significant"
    )

    effect = ""
    if solution.effect_size is not None and solution.effect_size != 0.0:
        effect = (
            f" with a {solution.effect_size_interpretation} effect size "
            f"({solution.effect_size:.2f})"
        )

    text = f"The result is {significance} (p = {format_p_value(solution.p_value)}){effect}."
    if context:
        text = f"{text} {context}"
    return text
