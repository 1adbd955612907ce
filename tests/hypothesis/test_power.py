"""
Tests for effect sizes, power planning and assumption checks.
"""

import math

import pytest
from scipy import stats as sp_stats

from snakemath.core.exceptions import (
    DegenerateInputError,
    InsufficientDataError,
    ValidationError,
)
from snakemath.hypothesis import (
    calculate_power,
    check_test_assumptions,
    cohens_d,
    cohens_d_two_groups,
    cohens_h,
    generate_power_curve,
    interpret_cohens_d,
    interpret_cohens_h,
    pooled_std_dev,
    sample_size_for_power,
    sample_size_for_proportions,
)


class TestEffectSize:

    def test_cohens_d(self):
        assert cohens_d(105, 100, 10) == pytest.approx(0.5)
        assert cohens_d(95, 100, 10) == pytest.approx(-0.5)

    def test_cohens_d_zero_sd(self):
        with pytest.raises(DegenerateInputError):
            cohens_d(1.0, 0.0, 0.0)

    def test_pooled_std_dev_equal_groups(self):
        assert pooled_std_dev(2.0, 10, 2.0, 25) == pytest.approx(2.0)

    def test_cohens_d_two_groups(self):
        d = cohens_d_two_groups(4.2, 1.5, 50, 5.8, 1.7, 50)
        assert d == pytest.approx(-1.6 / math.sqrt((1.5 ** 2 + 1.7 ** 2) / 2))

    def test_cohens_h(self):
        assert cohens_h(0.5, 0.5) == 0.0
        assert cohens_h(0.6, 0.4) == pytest.approx(0.402715, abs=1e-6)
        assert cohens_h(0.4, 0.6) == pytest.approx(-cohens_h(0.6, 0.4))

    @pytest.mark.parametrize("value, label", [
        (0.1, "negligible"),
        (0.2, "small"),
        (0.5, "medium"),
        (-0.79, "medium"),
        (0.8, "large"),
        (-2.0, "large"),
    ])
    def test_interpretation(self, value, label):
        assert interpret_cohens_d(value) == label
        assert interpret_cohens_h(value) == label


class TestCalculatePower:

    def test_two_sample_matches_formula(self):
        z = sp_stats.norm.ppf(0.975)
        delta = 0.5 * math.sqrt(32)
        expected = sp_stats.norm.cdf(delta - z) + sp_stats.norm.cdf(-delta - z)
        assert calculate_power(0.5, 64) == pytest.approx(expected)

    def test_one_sample_one_tailed(self):
        z = sp_stats.norm.ppf(0.95)
        expected = sp_stats.norm.cdf(0.3 * math.sqrt(50) - z)
        assert calculate_power(0.3, 50, test_type="one-sample", two_tailed=False) == pytest.approx(expected)

    def test_zero_effect_gives_alpha(self):
        assert calculate_power(0.0, 40) == pytest.approx(0.05)
        assert calculate_power(0.0, 40, alpha=0.01) == pytest.approx(0.01)

    def test_sign_ignored(self):
        assert calculate_power(-0.4, 30) == pytest.approx(calculate_power(0.4, 30))

    def test_increases_with_n_and_effect(self):
        assert calculate_power(0.5, 20) < calculate_power(0.5, 80)
        assert calculate_power(0.2, 50) < calculate_power(0.8, 50)

    def test_too_few_observations(self):
        with pytest.raises(InsufficientDataError):
            calculate_power(0.5, 1)

    def test_unknown_test_type(self):
        with pytest.raises(ValidationError):
            calculate_power(0.5, 20, test_type="paired")


class TestSampleSize:

    def test_two_sample_medium_effect(self):
        assert sample_size_for_power(0.5) == 63

    def test_one_sample_medium_effect(self):
        assert sample_size_for_power(0.5, test_type="one-sample") == 32

    @pytest.mark.parametrize("d", [0.2, 0.5, 0.8, 1.5])
    def test_smallest_n_reaching_power(self, d):
        n = sample_size_for_power(d, power=0.9)
        assert calculate_power(d, n) >= 0.9
        if n > 2:
            assert calculate_power(d, n - 1) < 0.9

    def test_minimum_two(self):
        assert sample_size_for_power(10.0) == 2

    def test_zero_effect_rejected(self):
        with pytest.raises(ValidationError):
            sample_size_for_power(0.0)

    def test_proportions(self):
        assert sample_size_for_proportions(0.5, 0.6) == 388
        assert sample_size_for_proportions(0.6, 0.5) == 388

    def test_proportions_equal_rejected(self):
        with pytest.raises(ValidationError):
            sample_size_for_proportions(0.3, 0.3)


class TestPowerCurve:

    def test_grid(self):
        curve = generate_power_curve(0.5, max_n=100)
        ns = [point.n for point in curve]
        assert ns[:3] == [2, 3, 4]
        assert ns[-1] <= 100
        assert all(b > a for a, b in zip(ns, ns[1:]))

    def test_monotone(self):
        powers = [point.power for point in generate_power_curve(0.5)]
        assert all(b >= a for a, b in zip(powers, powers[1:]))
        assert powers[-1] > 0.9

    def test_points_match_calculate_power(self):
        for point in generate_power_curve(0.3, test_type="one-sample", max_n=60):
            assert point.power == pytest.approx(calculate_power(0.3, point.n, test_type="one-sample"))


class TestAssumptions:

    def test_one_sample(self):
        assert not check_test_assumptions("one-sample-t", {"n": 12}).valid
        assert check_test_assumptions("one-sample-t", {"n": 30}).valid

    def test_two_sample_uses_smaller_group(self):
        check = check_test_assumptions("two-sample-t", {"n1": 100, "n2": 20})
        assert not check.valid
        assert "20" in check.warnings[0]

    def test_one_prop_expected_counts(self):
        assert not check_test_assumptions("one-prop-z", {"n": 100, "p0": 0.05}).valid
        assert check_test_assumptions("one-prop-z", {"n": 1000, "p0": 0.02}).valid

    def test_two_prop_counts(self):
        data = {"successes1": 45, "n1": 1000, "successes2": 52, "n2": 1000}
        assert check_test_assumptions("two-prop-z", data).valid
        data["successes1"] = 4
        assert not check_test_assumptions("two-prop-z", data).valid

    def test_missing_key(self):
        with pytest.raises(ValidationError):
            check_test_assumptions("two-sample-t", {"n1": 40})

    def test_unknown_test_type(self):
        with pytest.raises(ValidationError):
            check_test_assumptions("chi-square", {"n": 40})
