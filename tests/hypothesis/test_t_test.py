"""
Tests for the t-tests.

Raw-data reference values match R t.test(); summary-statistic values are
checked against scipy.stats.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats as sp_stats

from snakemath.core.exceptions import InsufficientDataError, ValidationError
from snakemath.hypothesis import (
    HypothesisDesign,
    one_prop_z_test,
    one_sample_t_test,
    t_test,
    two_sample_t_test,
)


class TestOneSampleTTest:
    """One-sample t-test: H0: mean(x) = mu."""

    def test_basic(self):
        """t.test(1:5, mu=3) -> t=0, df=4, p=1."""
        result = t_test([1, 2, 3, 4, 5], mu=3)
        assert result.statistic == pytest.approx(0.0, abs=1e-15)
        assert result.df == 4.0
        assert result.p_value == pytest.approx(1.0, abs=1e-15)
        assert result.method == "One Sample t-test"
        assert result.alternative == "two-sided"
        assert result.estimate == {"mean of x": pytest.approx(3.0)}
        assert result.null_value == {"mean": 3.0}

    def test_basic_mu0(self):
        """t.test(1:5) -> t=4.2426, df=4, p=0.01324."""
        result = t_test([1, 2, 3, 4, 5])
        assert result.statistic == pytest.approx(4.2426406871192848, rel=1e-10)
        assert result.p_value == pytest.approx(0.013235599563682695, rel=1e-10)

    def test_ci(self):
        result = t_test([1, 2, 3, 4, 5], mu=3)
        assert_allclose(result.conf_int, [1.036757, 4.963243], rtol=1e-5)

    def test_alternative_greater(self):
        result = t_test([1, 2, 3, 4, 5], mu=0, alternative="greater")
        assert result.p_value == pytest.approx(0.0066177997818413, rel=1e-10)

    def test_alternative_less(self):
        result = t_test([1, 2, 3, 4, 5], mu=0, alternative="less")
        assert result.p_value == pytest.approx(0.99338220021815871, rel=1e-10)

    def test_ci_two_sided_for_one_sided_alternative(self):
        two = t_test([1, 2, 3, 4, 5], alternative="two-sided")
        one = t_test([1, 2, 3, 4, 5], alternative="greater")
        assert one.conf_int == pytest.approx(two.conf_int)

    def test_summary_statistics(self):
        result = one_sample_t_test(95, 15, 30, mu=100)
        t = -5 / (15 / math.sqrt(30))
        assert result.statistic == pytest.approx(t)
        assert result.df == 29
        assert result.p_value == pytest.approx(2 * sp_stats.t.sf(abs(t), 29))
        assert result.effect_size == pytest.approx(-1 / 3)
        assert result.effect_size_interpretation == "small"
        assert result.standard_error == pytest.approx(15 / math.sqrt(30))

    def test_matches_raw_data(self, rng):
        x = rng.normal(10, 2, size=25)
        raw = t_test(x, mu=9.5)
        summary = one_sample_t_test(np.mean(x), np.std(x, ddof=1), 25, mu=9.5)
        assert raw.statistic == pytest.approx(summary.statistic)
        assert raw.p_value == pytest.approx(sp_stats.ttest_1samp(x, 9.5).pvalue)

    def test_reject_null(self):
        assert one_sample_t_test(95, 15, 30, mu=100, alpha=0.1).reject_null
        assert not one_sample_t_test(95, 15, 30, mu=100, alpha=0.05).reject_null

    def test_conf_level_follows_alpha(self):
        result = one_sample_t_test(10, 2, 16, alpha=0.01)
        margin = sp_stats.t.ppf(0.995, 15) * 0.5
        assert result.conf_level == pytest.approx(0.99)
        assert result.conf_int == pytest.approx((10 - margin, 10 + margin))

    def test_zero_sd_equal_mean(self):
        result = one_sample_t_test(5.0, 0.0, 10, mu=5.0)
        assert result.statistic == 0.0
        assert result.p_value == 1.0
        assert result.effect_size is None
        assert result.conf_int == (5.0, 5.0)
        assert any("zero" in w for w in result.warnings)

    def test_zero_sd_different_mean(self):
        result = one_sample_t_test(6.0, 0.0, 10, mu=5.0)
        assert result.statistic == math.inf
        assert result.p_value == 0.0
        assert one_sample_t_test(6.0, 0.0, 10, mu=5.0, alternative="less").p_value == 1.0

    def test_small_sample_warning(self):
        result = one_sample_t_test(1.0, 1.0, 10)
        assert result.info["assumptions_valid"] is False
        assert any("30" in w for w in result.warnings)
        assert one_sample_t_test(1.0, 1.0, 40).info["assumptions_valid"] is True


class TestTwoSampleTTest:
    """Two-sample t-test (Welch and pooled)."""

    def test_welch_default(self):
        """t.test(1:5, 4:8) -> Welch (default)."""
        result = t_test([1, 2, 3, 4, 5], [4, 5, 6, 7, 8])
        assert result.statistic == pytest.approx(-3.0, rel=1e-10)
        assert result.df == pytest.approx(8.0, rel=1e-10)
        assert result.p_value == pytest.approx(0.017071681233782634, rel=1e-10)
        assert result.method == "Welch Two Sample t-test"
        assert result.data_name == "x and y"

    def test_welch_ci(self):
        result = t_test([1, 2, 3, 4, 5], [4, 5, 6, 7, 8])
        assert_allclose(result.conf_int, [-5.306004135204166, -0.693995864795834], rtol=1e-5)

    def test_pooled(self):
        result = t_test([1, 2, 3, 4, 5], [4, 5, 6, 7, 8], var_equal=True)
        assert result.statistic == pytest.approx(-3.0, rel=1e-10)
        assert result.df == 8.0
        assert result.method == "Two Sample t-test"

    def test_welch_fractional_df(self):
        result = t_test([1, 2, 3, 4, 5], [2, 4, 5, 4, 5, 10, 1, 3])
        assert result.df != int(result.df)

    @pytest.mark.parametrize("equal_var", [False, True])
    def test_matches_scipy_from_stats(self, equal_var):
        result = two_sample_t_test(4.3, 0.8, 100, 3.9, 1.0, 150, var_equal=equal_var)
        ref = sp_stats.ttest_ind_from_stats(4.3, 0.8, 100, 3.9, 1.0, 150, equal_var=equal_var)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-10)
        assert result.p_value == pytest.approx(ref.pvalue, rel=1e-8)

    def test_welch_satterthwaite(self):
        result = two_sample_t_test(10, 2, 12, 8, 4, 20)
        v1, v2 = 4 / 12, 16 / 20
        df = (v1 + v2) ** 2 / (v1 ** 2 / 11 + v2 ** 2 / 19)
        assert result.df == pytest.approx(df)

    def test_effect_size_uses_pooled_sd(self):
        result = two_sample_t_test(4.2, 1.5, 50, 5.8, 1.7, 50)
        pooled = math.sqrt((49 * 1.5 ** 2 + 49 * 1.7 ** 2) / 98)
        assert result.effect_size == pytest.approx((4.2 - 5.8) / pooled)
        assert result.effect_size_interpretation == "large"

    def test_one_sided(self):
        greater = two_sample_t_test(5.5, 1, 40, 5.0, 1, 40, alternative="greater")
        less = two_sample_t_test(5.5, 1, 40, 5.0, 1, 40, alternative="less")
        assert greater.p_value + less.p_value == pytest.approx(1.0)
        assert greater.p_value < 0.5

    def test_both_sds_zero(self):
        result = two_sample_t_test(3.0, 0.0, 5, 3.0, 0.0, 5)
        assert result.statistic == 0.0
        assert result.p_value == 1.0
        assert result.effect_size is None

    def test_mu_with_two_samples_rejected(self):
        with pytest.raises(ValidationError):
            t_test([1, 2, 3], [4, 5, 6], mu=1)


class TestInputValidation:

    def test_too_few_observations(self):
        with pytest.raises(InsufficientDataError):
            t_test([1.0])
        with pytest.raises(InsufficientDataError):
            one_sample_t_test(1.0, 1.0, 1)

    def test_negative_sd(self):
        with pytest.raises(ValidationError):
            one_sample_t_test(1.0, -1.0, 10)

    def test_bad_alternative(self):
        with pytest.raises(ValidationError, match="alternative"):
            one_sample_t_test(1.0, 1.0, 10, alternative="two.sided")

    @pytest.mark.parametrize("alpha", [0.0, 1.0, 1.5])
    def test_bad_alpha(self, alpha):
        with pytest.raises(ValidationError):
            one_sample_t_test(1.0, 1.0, 10, alpha=alpha)

    def test_missing_arguments(self):
        with pytest.raises(ValidationError):
            one_sample_t_test(1.0)

    def test_design_input(self):
        design = HypothesisDesign.for_one_sample_t(5.0, 1.0, 20, 4.0)
        assert one_sample_t_test(design).design is design
        assert t_test(design).statistic == pytest.approx(one_sample_t_test(design).statistic)

    def test_wrong_design_type(self):
        design = HypothesisDesign.for_one_sample_t(5.0, 1.0, 20)
        with pytest.raises(ValidationError):
            two_sample_t_test(design)
        with pytest.raises(ValidationError):
            t_test(HypothesisDesign.for_one_prop_z(5, 20, 0.5))

    def test_no_backend_keyword(self):
        with pytest.raises(TypeError):
            one_prop_z_test(5, 20, 0.5, backend="cpu")
        assert one_prop_z_test(5, 20, 0.5).backend_name == "cpu_hypothesis"
