"""
Tests for special functions, checked against scipy.stats / scipy.special.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import special as sp_special
from scipy import stats as sp_stats

from snakemath.core.exceptions import ValidationError
from snakemath.core.special import (
    binomial_coefficient,
    erf,
    factorial,
    log_binomial_coefficient,
    log_factorial,
    standard_normal_cdf,
    standard_normal_pdf,
    standard_normal_quantile,
    t_cdf,
    t_critical_value,
    t_quantile,
    z_critical_value,
)


class TestCombinatorics:

    def test_factorial_small(self):
        assert factorial(0) == 1.0
        assert factorial(5) == 120.0

    def test_factorial_overflow_is_inf(self):
        assert factorial(170) < math.inf
        assert factorial(171) == math.inf

    def test_factorial_rejects_negative(self):
        with pytest.raises(ValidationError):
            factorial(-1)

    def test_log_factorial_large(self):
        assert log_factorial(1000) == pytest.approx(sp_special.gammaln(1001.0))

    def test_binomial_coefficient(self):
        assert binomial_coefficient(5, 2) == 10.0
        assert binomial_coefficient(20, 10) == 184756.0

    def test_binomial_coefficient_out_of_range(self):
        assert binomial_coefficient(5, 6) == 0.0
        assert binomial_coefficient(5, -1) == 0.0

    def test_binomial_coefficient_large_n_finite(self):
        value = binomial_coefficient(1000, 500)
        assert math.isfinite(value)
        assert math.log(value) == pytest.approx(log_binomial_coefficient(1000, 500), rel=1e-10)

    def test_log_binomial_outside_support(self):
        assert log_binomial_coefficient(5, 7) == -math.inf


class TestStandardNormal:

    def test_erf(self):
        assert erf(0.0) == 0.0
        assert erf(1.0) == pytest.approx(0.8427007929497149, rel=1e-12)

    def test_cdf_known_values(self):
        assert standard_normal_cdf(0.0) == pytest.approx(0.5)
        assert standard_normal_cdf(1.96) == pytest.approx(0.975, abs=1e-3)

    def test_cdf_array_matches_scipy(self):
        z = np.linspace(-4, 4, 17)
        assert_allclose(standard_normal_cdf(z), sp_stats.norm.cdf(z), rtol=1e-12)
        assert_allclose(standard_normal_pdf(z), sp_stats.norm.pdf(z), rtol=1e-12)

    def test_scalar_returns_float(self):
        assert isinstance(standard_normal_cdf(0.3), float)

    def test_quantile(self):
        assert standard_normal_quantile(0.975) == pytest.approx(1.95996, abs=1e-3)
        assert standard_normal_quantile(0.5) == 0.0

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5])
    def test_quantile_rejects_closed_endpoints(self, p):
        with pytest.raises(ValidationError):
            standard_normal_quantile(p)

    def test_z_critical_value(self):
        assert z_critical_value(0.05) == pytest.approx(1.959964, rel=1e-6)
        assert z_critical_value(0.05, two_tailed=False) == pytest.approx(1.644854, rel=1e-6)


class TestStudentT:

    def test_t_cdf_symmetry(self):
        assert t_cdf(0.0, 5) == pytest.approx(0.5)
        assert t_cdf(-1.3, 7) == pytest.approx(1 - t_cdf(1.3, 7))

    def test_t_quantile_matches_scipy(self):
        assert t_quantile(0.9, 12) == pytest.approx(sp_stats.t.ppf(0.9, 12))

    def test_t_critical_small_df(self):
        assert t_critical_value(4, 0.05) == pytest.approx(2.776445, rel=1e-6)

    def test_t_critical_approaches_z(self):
        assert t_critical_value(1e6, 0.05) == pytest.approx(z_critical_value(0.05), rel=1e-5)

    def test_t_rejects_bad_df(self):
        with pytest.raises(ValidationError):
            t_cdf(1.0, 0)
