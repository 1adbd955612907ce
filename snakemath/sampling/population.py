"""
Synthetic finite populations used as ground truth for sampling demos.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from snakemath.core.exceptions import ValidationError
from snakemath.core.random import RandomSource
from snakemath.core.validation import check_positive_integer, check_vector
from snakemath.distributions import DistributionSpec, Family, generate_samples, parse_family
from snakemath.sampling._common import PopulationConfig, Stratum

# Parameters used when a PopulationConfig leaves one out. A binomial
# population without n is a Bernoulli population of 0/1 outcomes.
POPULATION_DEFAULTS: dict[Family, dict[str, float]] = {
    Family.NORMAL: {"mu": 0.0, "sigma": 1.0},
    Family.UNIFORM: {"a": 0.0, "b": 1.0},
    Family.EXPONENTIAL: {"lambda": 1.0},
    Family.POISSON: {"lambda": 1.0},
    Family.BINOMIAL: {"n": 1, "p": 0.5},
}


def population_spec(config: PopulationConfig) -> DistributionSpec:
    """Resolve a PopulationConfig to a validated DistributionSpec."""
    family = parse_family(config.distribution)
    unknown = set(config.params) - set(POPULATION_DEFAULTS[family])
    if unknown:
        raise ValidationError(
            f"{family.value} population: unknown parameter(s) {sorted(unknown)}"
        )
    params = {**POPULATION_DEFAULTS[family], **config.params}
    return DistributionSpec.from_dict({"type": family.value, "params": params})


def generate_population(
    config: PopulationConfig,
    *,
    seed: RandomSource = None,
) -> NDArray[np.floating[Any]]:
    """
    Draw `config.size` values from the configured distribution.

    The result is a fixed finite population for the sampling methods to
    draw from, not itself a statistical sample.
    """
    size = check_positive_integer(config.size, "size")
    return generate_samples(population_spec(config), size, seed=seed)


def create_strata(population: ArrayLike, num_strata: int) -> list[Stratum]:
    """
    Partition `population` into `num_strata` strata by value.

    The population is sorted and split into contiguous runs whose sizes
    differ by at most one, so stratum i holds lower values than stratum
    i + 1. Each stratum's proportion is its share of the population.
    """
    values = check_vector(population, "population", min_samples=1)
    num_strata = check_positive_integer(num_strata, "num_strata")
    if num_strata > values.shape[0]:
        raise ValidationError(
            f"num_strata ({num_strata}) cannot exceed population size ({values.shape[0]})"
        )

    total = values.shape[0]
    chunks = np.array_split(np.sort(values), num_strata)
    return [
        Stratum(name=f"Stratum {i + 1}", values=chunk, proportion=chunk.shape[0] / total)
        for i, chunk in enumerate(chunks)
    ]
