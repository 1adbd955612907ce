"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Tests run on summary statistics; `for_t_test`
summarises raw data first. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from snakemath.core.defaults import DEFAULT_ALPHA
from snakemath.core.exceptions import InsufficientDataError, ValidationError
from snakemath.core.validation import (
    check_nonnegative_integer,
    check_open_probability,
    check_scalar,
    check_vector,
)
from snakemath.hypothesis._common import VALID_ALTERNATIVES


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


def _validate_alpha(alpha: float) -> float:
    return check_open_probability(alpha, "alpha")


def _validate_std_dev(value: float, name: str) -> float:
    value = check_scalar(value, name)
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")
    return value


def _validate_group_size(value: int, name: str, minimum: int) -> int:
    n = check_nonnegative_integer(value, name)
    if n < minimum:
        raise InsufficientDataError(
            f"{name}: requires at least {minimum}, got {n}",
            required=minimum,
            actual=n,
        )
    return n


def _validate_successes(successes: int, n: int, name: str) -> int:
    successes = check_nonnegative_integer(successes, name)
    if successes > n:
        raise ValidationError(f"{name} ({successes}) cannot exceed the sample size ({n})")
    return successes


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Group summaries (t tests)
    _mean1: float = 0.0
    _std_dev1: float = 0.0
    _n1: int = 0
    _mean2: float = 0.0
    _std_dev2: float = 0.0
    _n2: int = 0

    # Counts (z tests); _n1 / _n2 hold the trial counts
    _successes1: int = 0
    _successes2: int = 0

    # Null value: mean (one-sample t) or proportion (one-prop z)
    _null_value: float = 0.0

    # Test configuration
    _alternative: str = "two-sided"
    _alpha: float = DEFAULT_ALPHA
    _var_equal: bool = False

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def mean1(self) -> float:
        return self._mean1

    @property
    def std_dev1(self) -> float:
        return self._std_dev1

    @property
    def n1(self) -> int:
        return self._n1

    @property
    def mean2(self) -> float:
        return self._mean2

    @property
    def std_dev2(self) -> float:
        return self._std_dev2

    @property
    def n2(self) -> int:
        return self._n2

    @property
    def successes1(self) -> int:
        return self._successes1

    @property
    def successes2(self) -> int:
        return self._successes2

    @property
    def null_value(self) -> float:
        return self._null_value

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def var_equal(self) -> bool:
        return self._var_equal

    @property
    def data_name(self) -> str:
        return self._data_name

    def assumption_data(self) -> dict[str, float]:
        """The summary values check_test_assumptions reads for this test."""
        if self.test_type == "one-sample-t":
            return {"n": self._n1}
        if self.test_type == "two-sample-t":
            return {"n1": self._n1, "n2": self._n2}
        if self.test_type == "one-prop-z":
            return {"n": self._n1, "p0": self._null_value}
        if self.test_type == "two-prop-z":
            return {
                "successes1": self._successes1, "n1": self._n1,
                "successes2": self._successes2, "n2": self._n2,
            }
        raise ValueError(f"Unknown test_type: {self.test_type!r}")

    # --- Factory classmethods ---

    @classmethod
    def for_one_sample_t(
        cls,
        mean: float,
        std_dev: float,
        n: int,
        mu: float = 0.0,
        *,
        alternative: str = "two-sided",
        alpha: float = DEFAULT_ALPHA,
        data_name: str = "sample summary",
    ) -> HypothesisDesign:
        """H0: population mean = mu, from a sample mean, SD and size (n >= 2)."""
        return cls(
            test_type="one-sample-t",
            _mean1=check_scalar(mean, "mean"),
            _std_dev1=_validate_std_dev(std_dev, "std_dev"),
            _n1=_validate_group_size(n, "n", 2),
            _null_value=check_scalar(mu, "mu"),
            _alternative=_validate_alternative(alternative),
            _alpha=_validate_alpha(alpha),
            _data_name=data_name,
        )

    @classmethod
    def for_two_sample_t(
        cls,
        mean1: float,
        std_dev1: float,
        n1: int,
        mean2: float,
        std_dev2: float,
        n2: int,
        *,
        alternative: str = "two-sided",
        alpha: float = DEFAULT_ALPHA,
        var_equal: bool = False,
        data_name: str = "group 1 and group 2",
    ) -> HypothesisDesign:
        """H0: mean1 = mean2, from group summaries (each n >= 2)."""
        return cls(
            test_type="two-sample-t",
            _mean1=check_scalar(mean1, "mean1"),
            _std_dev1=_validate_std_dev(std_dev1, "std_dev1"),
            _n1=_validate_group_size(n1, "n1", 2),
            _mean2=check_scalar(mean2, "mean2"),
            _std_dev2=_validate_std_dev(std_dev2, "std_dev2"),
            _n2=_validate_group_size(n2, "n2", 2),
            _alternative=_validate_alternative(alternative),
            _alpha=_validate_alpha(alpha),
            _var_equal=bool(var_equal),
            _data_name=data_name,
        )

    @classmethod
    def for_one_prop_z(
        cls,
        successes: int,
        n: int,
        p0: float,
        *,
        alternative: str = "two-sided",
        alpha: float = DEFAULT_ALPHA,
        data_name: str = "",
    ) -> HypothesisDesign:
        """H0: population proportion = p0, with 0 < p0 < 1."""
        n = _validate_group_size(n, "n", 1)
        successes = _validate_successes(successes, n, "successes")
        return cls(
            test_type="one-prop-z",
            _successes1=successes,
            _n1=n,
            _null_value=check_open_probability(p0, "p0"),
            _alternative=_validate_alternative(alternative),
            _alpha=_validate_alpha(alpha),
            _data_name=data_name or f"{successes} out of {n}",
        )

    @classmethod
    def for_two_prop_z(
        cls,
        successes1: int,
        n1: int,
        successes2: int,
        n2: int,
        *,
        alternative: str = "two-sided",
        alpha: float = DEFAULT_ALPHA,
        data_name: str = "",
    ) -> HypothesisDesign:
        """H0: p1 = p2."""
        n1 = _validate_group_size(n1, "n1", 1)
        n2 = _validate_group_size(n2, "n2", 1)
        successes1 = _validate_successes(successes1, n1, "successes1")
        successes2 = _validate_successes(successes2, n2, "successes2")
        return cls(
            test_type="two-prop-z",
            _successes1=successes1,
            _n1=n1,
            _successes2=successes2,
            _n2=n2,
            _alternative=_validate_alternative(alternative),
            _alpha=_validate_alpha(alpha),
            _data_name=data_name or f"{successes1}/{n1} and {successes2}/{n2}",
        )

    @classmethod
    def for_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike | None = None,
        *,
        mu: float = 0.0,
        alternative: str = "two-sided",
        alpha: float = DEFAULT_ALPHA,
        var_equal: bool = False,
    ) -> HypothesisDesign:
        """
        Summarise raw data and build a one- or two-sample t design.

        Each sample needs at least 2 finite observations. With y, mu must
        be 0 (the null difference in means is always 0).
        """
        x_arr = check_vector(x, "x", min_samples=2)
        if y is None:
            return cls.for_one_sample_t(
                float(np.mean(x_arr)),
                float(np.std(x_arr, ddof=1)),
                x_arr.shape[0],
                mu,
                alternative=alternative,
                alpha=alpha,
                data_name="x",
            )

        if check_scalar(mu, "mu") != 0.0:
            raise ValidationError(
                f"mu: the two-sample test has null difference 0, got {mu}"
            )
        y_arr = check_vector(y, "y", min_samples=2)
        return cls.for_two_sample_t(
            float(np.mean(x_arr)),
            float(np.std(x_arr, ddof=1)),
            x_arr.shape[0],
            float(np.mean(y_arr)),
            float(np.std(y_arr, ddof=1)),
            y_arr.shape[0],
            alternative=alternative,
            alpha=alpha,
            var_equal=var_equal,
            data_name="x and y",
        )

    @classmethod
    def from_dict(cls, test_type: str, data: dict[str, Any], **options: Any) -> HypothesisDesign:
        """
        Build from a test-type tag and a dict of summary values, the
        shape the presets and the URL-state layer use.

        Keys per test type:
            one-sample-t  mean, std_dev, n, mu
            two-sample-t  mean1, std_dev1, n1, mean2, std_dev2, n2
            one-prop-z    successes, n, p0
            two-prop-z    successes1, n1, successes2, n2
        """
        try:
            if test_type == "one-sample-t":
                return cls.for_one_sample_t(
                    data["mean"], data["std_dev"], data["n"], data.get("mu", 0.0), **options
                )
            if test_type == "two-sample-t":
                return cls.for_two_sample_t(
                    data["mean1"], data["std_dev1"], data["n1"],
                    data["mean2"], data["std_dev2"], data["n2"],
                    **options,
                )
            if test_type == "one-prop-z":
                return cls.for_one_prop_z(data["successes"], data["n"], data["p0"], **options)
            if test_type == "two-prop-z":
                return cls.for_two_prop_z(
                    data["successes1"], data["n1"], data["successes2"], data["n2"], **options
                )
        except KeyError as e:
            raise ValidationError(f"{test_type}: missing value {e.args[0]!r}") from None
        raise ValidationError(f"Unknown test_type: {test_type!r}")

    def __repr__(self) -> str:
        return f"HypothesisDesign(test_type={self.test_type!r}, alternative={self._alternative!r})"
