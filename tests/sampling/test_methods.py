"""
Tests for populations and sample selection designs.
"""

import numpy as np
import pytest

from snakemath.core.exceptions import ValidationError
from snakemath.distributions import Family
from snakemath.sampling import (
    POPULATION_DEFAULTS,
    SAMPLING_PRESETS,
    PopulationConfig,
    allocate_sample,
    cluster_sample,
    create_strata,
    generate_population,
    get_sampling_preset,
    population_spec,
    simple_random_sample,
    stratified_sample,
    systematic_sample,
)


@pytest.fixture
def population():
    return np.arange(100, dtype=float)


# ═══════════════════════════════════════════════════════════════════════
# Populations
# ═══════════════════════════════════════════════════════════════════════


class TestPopulation:

    def test_generate_size_and_reproducible(self):
        config = PopulationConfig(500, "normal", {"mu": 50, "sigma": 10})
        a = generate_population(config, seed=11)
        b = generate_population(config, seed=11)
        assert a.shape == (500,)
        np.testing.assert_array_equal(a, b)

    def test_defaults_fill_missing_params(self):
        spec = population_spec(PopulationConfig(10, "binomial", {"p": 0.3}))
        assert spec.n == POPULATION_DEFAULTS[Family.BINOMIAL]["n"]
        assert spec.p == 0.3

    def test_bernoulli_population(self):
        values = generate_population(PopulationConfig(200, "binomial", {"p": 0.5}), seed=2)
        assert set(np.unique(values)) <= {0.0, 1.0}

    def test_unknown_family(self):
        with pytest.raises(ValidationError):
            generate_population(PopulationConfig(10, "cauchy", {}))

    def test_unknown_param(self):
        with pytest.raises(ValidationError, match="unknown parameter"):
            population_spec(PopulationConfig(10, "normal", {"lambda": 2}))

    def test_invalid_param_value(self):
        with pytest.raises(ValidationError):
            generate_population(PopulationConfig(10, "normal", {"sigma": -1}))

    def test_zero_size(self):
        with pytest.raises(ValidationError):
            generate_population(PopulationConfig(0, "uniform", {}))

    def test_presets_resolve(self):
        for preset in SAMPLING_PRESETS:
            population_spec(preset.population_config)
            assert preset.sample_size <= preset.population_config.size
        assert get_sampling_preset("election-poll").sample_size == 1000
        with pytest.raises(ValidationError):
            get_sampling_preset("missing")


class TestStrata:

    def test_sorted_contiguous(self, rng):
        strata = create_strata(rng.normal(size=103), 4)
        assert [s.name for s in strata] == ["Stratum 1", "Stratum 2", "Stratum 3", "Stratum 4"]
        assert sum(s.values.shape[0] for s in strata) == 103
        sizes = [s.values.shape[0] for s in strata]
        assert max(sizes) - min(sizes) <= 1
        for lower, upper in zip(strata, strata[1:]):
            assert lower.values.max() <= upper.values.min()
        assert sum(s.proportion for s in strata) == pytest.approx(1.0)

    def test_too_many_strata(self):
        with pytest.raises(ValidationError):
            create_strata([1.0, 2.0], 3)


# ═══════════════════════════════════════════════════════════════════════
# Selection designs
# ═══════════════════════════════════════════════════════════════════════


class TestSimpleRandomSample:

    def test_without_replacement(self, population):
        result = simple_random_sample(population, 30, seed=1)
        assert result.size == 30
        assert len(set(result.indices.tolist())) == 30
        np.testing.assert_array_equal(result.values, population[result.indices])

    def test_statistics(self, population):
        result = simple_random_sample(population, 30, seed=1)
        assert result.mean == pytest.approx(np.mean(result.values))
        assert result.standard_deviation == pytest.approx(np.std(result.values, ddof=1))
        assert result.standard_error == pytest.approx(result.standard_deviation / np.sqrt(30))

    def test_whole_population(self, population):
        result = simple_random_sample(population, 100, seed=1)
        assert sorted(result.indices.tolist()) == list(range(100))

    def test_population_untouched(self, population):
        before = population.copy()
        simple_random_sample(population, 10, seed=3)
        np.testing.assert_array_equal(population, before)

    @pytest.mark.parametrize("n", [0, 101])
    def test_bad_size(self, population, n):
        with pytest.raises(ValidationError):
            simple_random_sample(population, n)

    def test_single_element_sample(self, population):
        result = simple_random_sample(population, 1, seed=0)
        assert result.standard_deviation == 0.0
        assert result.standard_error == 0.0


class TestSystematicSample:

    def test_fixed_start(self, population):
        result = systematic_sample(population, 10, random_start=False)
        np.testing.assert_array_equal(result.indices, np.arange(0, 100, 10))

    def test_random_start_exact_size(self, population):
        result = systematic_sample(population, 7, seed=4)
        k = 100 // 7
        assert result.size == 7
        assert 0 <= result.indices[0] < k
        assert np.all(np.diff(result.indices) == k)
        assert result.indices[-1] < 100


class TestStratifiedSample:

    def test_proportional_allocation(self, population):
        strata = create_strata(population, 4)
        assert allocate_sample(strata, 20) == [5, 5, 5, 5]
        result = stratified_sample(strata, 20, seed=5)
        assert result.size == 20
        # five from each quarter of the sorted population
        counts = np.bincount(result.indices // 25, minlength=4)
        np.testing.assert_array_equal(counts, [5, 5, 5, 5])

    def test_equal_allocation_remainder_to_last(self, population):
        strata = create_strata(population, 4)
        assert allocate_sample(strata, 10, proportional=False) == [2, 2, 2, 4]

    def test_small_stratum_gets_one(self):
        strata = create_strata(np.arange(100.0), 50)
        sizes = allocate_sample(strata, 10)
        assert all(size >= 1 for size in sizes)

    def test_empty_strata(self):
        with pytest.raises(ValidationError):
            stratified_sample([], 5)


class TestClusterSample:

    def test_contiguous_clusters(self, population):
        result = cluster_sample(population, 10, 3, seed=6)
        assert result.size == 30
        clusters = set((result.indices // 10).tolist())
        assert len(clusters) == 3

    def test_labelled_clusters(self):
        values = np.arange(12.0)
        labels = np.array(["a", "b", "c"] * 4)
        result = cluster_sample(values, 3, 1, labels=labels, seed=0)
        assert result.size == 4
        assert len(set(labels[result.indices])) == 1

    def test_label_count_mismatch(self):
        with pytest.raises(ValidationError):
            cluster_sample(np.arange(6.0), 4, 1, labels=[0, 0, 1, 1, 2, 2])

    def test_select_more_than_available(self, population):
        with pytest.raises(ValidationError):
            cluster_sample(population, 5, 6)
