"""
Sample selection from a finite population.

Four designs, all returning a SampleResult whose indices refer back
into the population array:

    simple_random_sample  uniform without replacement
    systematic_sample     every k-th element, k = floor(N / n)
    stratified_sample     allocation across pre-partitioned strata
    cluster_sample        whole groups chosen at random

Without-replacement designs raise ValidationError when n < 1 or n
exceeds the population size.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from snakemath.core.exceptions import ValidationError
from snakemath.core.random import RandomSource, as_generator
from snakemath.core.validation import (
    check_array,
    check_positive_integer,
    check_vector,
)
from snakemath.sampling._common import SampleResult, Stratum, summarize


def _check_sample_size(n: int, population_size: int) -> int:
    n = check_positive_integer(n, "n")
    if n > population_size:
        raise ValidationError(
            f"n: sample size ({n}) cannot exceed population size ({population_size})"
        )
    return n


def _result(population: NDArray[np.floating[Any]], indices: NDArray[np.intp]) -> SampleResult:
    values = population[indices]
    mean, sd, se = summarize(values)
    return SampleResult(
        values=values,
        indices=indices,
        mean=mean,
        standard_deviation=sd,
        standard_error=se,
    )


def simple_random_sample(
    population: ArrayLike,
    n: int,
    *,
    seed: RandomSource = None,
) -> SampleResult:
    """Every subset of size n is equally likely."""
    pop = check_vector(population, "population", min_samples=1)
    n = _check_sample_size(n, pop.shape[0])
    rng = as_generator(seed)
    indices = rng.choice(pop.shape[0], size=n, replace=False)
    return _result(pop, np.asarray(indices, dtype=np.intp))


def systematic_sample(
    population: ArrayLike,
    n: int,
    random_start: bool = True,
    *,
    seed: RandomSource = None,
) -> SampleResult:
    """
    Take every k-th element with k = floor(N / n).

    The start offset is drawn uniformly from [0, k) when random_start,
    and is 0 otherwise. Exactly n elements are returned.
    """
    pop = check_vector(population, "population", min_samples=1)
    n = _check_sample_size(n, pop.shape[0])
    k = pop.shape[0] // n
    start = int(as_generator(seed).integers(0, k)) if random_start else 0
    indices = start + k * np.arange(n, dtype=np.intp)
    return _result(pop, indices)


def allocate_sample(
    strata: Sequence[Stratum],
    n: int,
    proportional: bool = True,
) -> list[int]:
    """
    Per-stratum sample sizes for a stratified sample of total size n.

    Proportional allocation gives round(proportion * n), at least one
    per non-empty stratum. Equal allocation gives floor(n / H) to each
    of the H strata, the last taking the remainder. Every allocation is
    capped at the stratum size, so the total can differ from n.
    """
    sizes = []
    h = len(strata)
    for i, stratum in enumerate(strata):
        available = int(np.asarray(stratum.values).shape[0])
        if proportional:
            size = int(round(stratum.proportion * n))
            if size == 0 and available > 0:
                size = 1
        else:
            size = n // h + (n % h if i == h - 1 else 0)
        sizes.append(min(size, available))
    return sizes


def stratified_sample(
    strata: Sequence[Stratum],
    n: int,
    proportional: bool = True,
    *,
    seed: RandomSource = None,
) -> SampleResult:
    """
    Simple random sample within each stratum, allocated by allocate_sample.

    Indices refer to the concatenation of the strata in the given order
    (the sorted population when strata come from create_strata).
    """
    if not strata:
        raise ValidationError("strata: at least one stratum is required")
    arrays = [check_array(s.values, f"strata[{i}].values").ravel() for i, s in enumerate(strata)]
    combined = np.concatenate(arrays)
    n = _check_sample_size(n, combined.shape[0])
    rng = as_generator(seed)

    picked = []
    offset = 0
    for values, size in zip(arrays, allocate_sample(strata, n, proportional)):
        if size > 0:
            local = rng.choice(values.shape[0], size=size, replace=False)
            picked.append(np.asarray(local, dtype=np.intp) + offset)
        offset += values.shape[0]

    indices = np.concatenate(picked) if picked else np.empty(0, dtype=np.intp)
    return _result(combined, indices)


def cluster_sample(
    population: ArrayLike,
    num_clusters: int,
    clusters_to_select: int,
    *,
    labels: ArrayLike | None = None,
    seed: RandomSource = None,
) -> SampleResult:
    """
    Select whole clusters at random and return all their members.

    Without labels the population is cut into num_clusters contiguous
    groups whose sizes differ by at most one. With labels, each distinct
    label is one cluster and num_clusters must equal their count.

    The returned sample size is the total size of the chosen clusters,
    not a fixed n.
    """
    pop = check_vector(population, "population", min_samples=1)
    num_clusters = check_positive_integer(num_clusters, "num_clusters")
    clusters_to_select = check_positive_integer(clusters_to_select, "clusters_to_select")
    if clusters_to_select > num_clusters:
        raise ValidationError(
            f"clusters_to_select ({clusters_to_select}) cannot exceed "
            f"num_clusters ({num_clusters})"
        )
    if num_clusters > pop.shape[0]:
        raise ValidationError(
            f"num_clusters ({num_clusters}) cannot exceed population size ({pop.shape[0]})"
        )

    all_indices = np.arange(pop.shape[0], dtype=np.intp)
    if labels is None:
        groups = np.array_split(all_indices, num_clusters)
    else:
        label_arr = np.asarray(labels)
        if label_arr.shape != pop.shape:
            raise ValidationError(
                f"labels: expected shape {pop.shape}, got {label_arr.shape}"
            )
        unique = np.unique(label_arr)
        if unique.shape[0] != num_clusters:
            raise ValidationError(
                f"num_clusters ({num_clusters}) does not match the "
                f"{unique.shape[0]} distinct labels"
            )
        groups = [all_indices[label_arr == label] for label in unique]

    chosen = as_generator(seed).choice(num_clusters, size=clusters_to_select, replace=False)
    indices = np.concatenate([groups[c] for c in chosen])
    return _result(pop, indices)
