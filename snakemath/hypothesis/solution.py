"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides a plain-text
summary() report.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from snakemath.core.result import Result
from snakemath.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from snakemath.hypothesis.design import HypothesisDesign


_ALTERNATIVE_TEXT = {
    "two-sided": "is not equal to",
    "less": "is less than",
    "greater": "is greater than",
}


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. All test fields are available as
    properties; summary() gives a printable report.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    # --- Standard test fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value (t or z)."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def df(self) -> float | None:
        """Degrees of freedom; None for z tests."""
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def conf_int(self) -> tuple[float, float]:
        """Two-sided (1 - alpha) confidence interval."""
        return self._result.params.conf_int

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def reject_null(self) -> bool:
        """True when p_value < alpha."""
        return self._result.params.reject_null

    @property
    def estimate(self) -> dict[str, float]:
        return self._result.params.estimate

    @property
    def null_value(self) -> dict[str, float]:
        return self._result.params.null_value

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    # --- Effect size ---

    @property
    def effect_size(self) -> float | None:
        return self._result.params.effect_size

    @property
    def effect_size_name(self) -> str:
        return self._result.params.effect_size_name

    @property
    def effect_size_interpretation(self) -> str | None:
        return self._result.params.effect_size_interpretation

    @property
    def standard_error(self) -> float | None:
        return self._result.params.extras.get('standard_error')

    @property
    def extras(self) -> dict[str, Any]:
        return self._result.params.extras

    # --- Metadata ---

    @property
    def design(self) -> 'HypothesisDesign | None':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as a plain-text report.

        Produces output like:
            Welch Two Sample t-test

        data:  x and y
        t = 2.2345, df = 17.43, p-value = 0.0389
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         0.1234567  4.5678901
        sample estimates:
        mean of group 1 mean of group 2
               5.123456        2.789012
        effect size (Cohen's d): 1.0012 (large)
        """
        from snakemath.hypothesis.formatting import format_p_value

        p = self._result.params
        lines = [f"\t{p.method}", "", f"data:  {p.data_name}"]

        parts = [f"{p.statistic_name} = {_format_number(p.statistic, '.5g')}"]
        if p.df is not None:
            parts.append(f"df = {p.df:.5g}")
        parts.append(f"p-value = {format_p_value(p.p_value)}")
        lines.append(", ".join(parts))

        nv_name, nv_val = next(iter(p.null_value.items()))
        lines.append(
            f"alternative hypothesis: true {nv_name} "
            f"{_ALTERNATIVE_TEXT[p.alternative]} {nv_val:g}"
        )

        pct = round(p.conf_level * 100, 2)
        lines.append(f"{pct:g} percent confidence interval:")
        lo, hi = p.conf_int
        lines.append(f" {_format_number(lo)}  {_format_number(hi)}")

        lines.append("sample estimates:")
        width = max(len(name) for name in p.estimate)
        lines.append(" ".join(f"{name:>{width}s}" for name in p.estimate))
        lines.append(" ".join(f"{val:>{width}.7g}" for val in p.estimate.values()))

        if p.effect_size is not None:
            lines.append(
                f"effect size ({p.effect_size_name}): {p.effect_size:.4f} "
                f"({p.effect_size_interpretation})"
            )
        for w in self._result.warnings:
            lines.append(f"warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )


def _format_number(x: float, spec: str = '.7g') -> str:
    """Format a number, handling infinity."""
    if math.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return format(x, spec)
