"""
Tests for the one- and two-proportion z-tests.
"""

import math

import pytest
from scipy import stats as sp_stats

from snakemath.core.exceptions import ValidationError
from snakemath.hypothesis import one_prop_z_test, two_prop_z_test


class TestOnePropZTest:

    def test_statistic_uses_null_se(self):
        result = one_prop_z_test(28, 1000, 0.02, alternative="greater")
        z = (0.028 - 0.02) / math.sqrt(0.02 * 0.98 / 1000)
        assert result.statistic == pytest.approx(z)
        assert result.p_value == pytest.approx(sp_stats.norm.sf(z))
        assert result.df is None
        assert result.statistic_name == "z"

    def test_ci_uses_estimate_se(self):
        result = one_prop_z_test(45, 100, 0.5)
        margin = sp_stats.norm.ppf(0.975) * math.sqrt(0.45 * 0.55 / 100)
        assert result.conf_int == pytest.approx((0.45 - margin, 0.45 + margin))
        assert result.estimate == {"p": 0.45}

    def test_two_sided(self):
        result = one_prop_z_test(60, 100, 0.5)
        assert result.statistic == pytest.approx(2.0)
        assert result.p_value == pytest.approx(2 * sp_stats.norm.sf(2.0))
        assert result.reject_null

    def test_cohens_h(self):
        result = one_prop_z_test(60, 100, 0.4)
        h = 2 * math.asin(math.sqrt(0.6)) - 2 * math.asin(math.sqrt(0.4))
        assert result.effect_size == pytest.approx(h)
        assert result.effect_size_name == "Cohen's h"

    def test_all_successes(self):
        result = one_prop_z_test(20, 20, 0.5)
        assert result.conf_int == (1.0, 1.0)
        assert result.statistic > 0

    def test_expected_count_warning(self):
        result = one_prop_z_test(3, 100, 0.05)
        assert result.info["assumptions_valid"] is False
        assert result.warnings

    @pytest.mark.parametrize("p0", [0.0, 1.0])
    def test_p0_open_interval(self, p0):
        with pytest.raises(ValidationError):
            one_prop_z_test(5, 10, p0)

    def test_successes_exceed_n(self):
        with pytest.raises(ValidationError):
            one_prop_z_test(11, 10, 0.5)


class TestTwoPropZTest:

    def test_pooled_statistic(self):
        result = two_prop_z_test(45, 1000, 52, 1000)
        pooled = 97 / 2000
        se = math.sqrt(pooled * (1 - pooled) * (2 / 1000))
        z = (0.045 - 0.052) / se
        assert result.statistic == pytest.approx(z)
        assert result.p_value == pytest.approx(2 * sp_stats.norm.sf(abs(z)))
        assert not result.reject_null
        assert result.extras["pooled_proportion"] == pytest.approx(pooled)

    def test_ci_unpooled(self):
        result = two_prop_z_test(45, 1000, 52, 1000)
        se = math.sqrt(0.045 * 0.955 / 1000 + 0.052 * 0.948 / 1000)
        margin = sp_stats.norm.ppf(0.975) * se
        assert result.conf_int == pytest.approx((-0.007 - margin, -0.007 + margin))

    def test_less_alternative(self):
        result = two_prop_z_test(45, 1000, 70, 1000, alternative="less")
        assert result.p_value < 0.05
        assert result.reject_null

    def test_degenerate_pooled(self):
        result = two_prop_z_test(0, 50, 0, 60)
        assert result.statistic == 0.0
        assert result.p_value == 1.0
        assert any("degenerate" in w for w in result.warnings)

    def test_small_count_warning(self):
        result = two_prop_z_test(3, 100, 50, 100)
        assert any("below 5" in w for w in result.warnings)

    def test_missing_group(self):
        with pytest.raises(ValidationError):
            two_prop_z_test(3, 100)
