"""
Heuristic assumption checks for the t and z tests.

These are advisories: a failed check adds a warning, never an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from snakemath.core.defaults import (
    MIN_CLT_SAMPLE_SIZE,
    MIN_EXPECTED_COUNT_ONE_PROP,
    MIN_EXPECTED_COUNT_TWO_PROP,
)
from snakemath.core.exceptions import ValidationError
from snakemath.hypothesis._common import TEST_TYPES


@dataclass(frozen=True)
class AssumptionCheck:
    valid: bool
    warnings: tuple[str, ...] = field(default_factory=tuple)


def _get(data: Mapping[str, float], key: str, test_type: str) -> float:
    if key not in data:
        raise ValidationError(f"{test_type}: assumption check needs {key!r}")
    return float(data[key])


def check_test_assumptions(test_type: str, data: Mapping[str, float]) -> AssumptionCheck:
    """
    Check the large-sample conditions behind each test.

    Keys read from `data`:
        one-sample-t  n
        two-sample-t  n1, n2
        one-prop-z    n, p0
        two-prop-z    successes1, n1, successes2, n2

    t tests: every group should have at least 30 observations, or the
    data should be close to normal. One-proportion z: n p0 and
    n (1 - p0) should both be at least 10. Two-proportion z: the
    observed successes and failures in each group should be at least 5.
    """
    if test_type not in TEST_TYPES:
        raise ValidationError(f"Unknown test_type: {test_type!r}; expected one of {TEST_TYPES}")

    warnings: list[str] = []

    if test_type == "one-sample-t":
        n = _get(data, "n", test_type)
        if n < MIN_CLT_SAMPLE_SIZE:
            warnings.append(
                f"Sample size {n:g} < {MIN_CLT_SAMPLE_SIZE}: the t-test relies on the "
                "data being approximately normal"
            )

    elif test_type == "two-sample-t":
        smallest = min(_get(data, "n1", test_type), _get(data, "n2", test_type))
        if smallest < MIN_CLT_SAMPLE_SIZE:
            warnings.append(
                f"Smallest group size {smallest:g} < {MIN_CLT_SAMPLE_SIZE}: the t-test "
                "relies on both groups being approximately normal"
            )

    elif test_type == "one-prop-z":
        n = _get(data, "n", test_type)
        p0 = _get(data, "p0", test_type)
        if min(n * p0, n * (1.0 - p0)) < MIN_EXPECTED_COUNT_ONE_PROP:
            warnings.append(
                f"Normal approximation may be poor: need n*p0 >= {MIN_EXPECTED_COUNT_ONE_PROP} "
                f"and n*(1-p0) >= {MIN_EXPECTED_COUNT_ONE_PROP}"
            )

    else:
        counts = []
        for group in ("1", "2"):
            n = _get(data, f"n{group}", test_type)
            successes = _get(data, f"successes{group}", test_type)
            counts.extend((successes, n - successes))
        if min(counts) < MIN_EXPECTED_COUNT_TWO_PROP:
            warnings.append(
                f"Some success or failure counts are below {MIN_EXPECTED_COUNT_TWO_PROP}: "
                "normal approximation may be poor"
            )

    return AssumptionCheck(valid=not warnings, warnings=tuple(warnings))
