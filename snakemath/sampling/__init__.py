"""
Sampling theory: finite populations, selection designs, standard errors,
confidence intervals, the bootstrap and sample-size planning.
"""

from snakemath.sampling._common import (
    BootstrapResult,
    ConfidenceInterval,
    PopulationConfig,
    SampleResult,
    SampleStatistics,
    Stratum,
)
from snakemath.sampling.bootstrap import bootstrap, bootstrap_resample
from snakemath.sampling.estimation import (
    calculate_sample_statistics,
    confidence_interval_mean,
    confidence_interval_proportion,
    finite_population_correction,
    sample_size_for_mean,
    sample_size_for_proportion,
    standard_error_mean,
    standard_error_proportion,
)
from snakemath.sampling.methods import (
    allocate_sample,
    cluster_sample,
    simple_random_sample,
    stratified_sample,
    systematic_sample,
)
from snakemath.sampling.population import (
    POPULATION_DEFAULTS,
    create_strata,
    generate_population,
    population_spec,
)
from snakemath.sampling.presets import (
    SAMPLING_PRESETS,
    SamplingPreset,
    get_sampling_preset,
)

__all__ = [
    # Results
    "PopulationConfig",
    "SampleResult",
    "SampleStatistics",
    "ConfidenceInterval",
    "BootstrapResult",
    "Stratum",
    # Populations
    "POPULATION_DEFAULTS",
    "population_spec",
    "generate_population",
    "create_strata",
    # Selection
    "simple_random_sample",
    "systematic_sample",
    "stratified_sample",
    "allocate_sample",
    "cluster_sample",
    # Estimation
    "standard_error_mean",
    "standard_error_proportion",
    "finite_population_correction",
    "confidence_interval_mean",
    "confidence_interval_proportion",
    "sample_size_for_mean",
    "sample_size_for_proportion",
    "calculate_sample_statistics",
    # Bootstrap
    "bootstrap",
    "bootstrap_resample",
    # Presets
    "SamplingPreset",
    "SAMPLING_PRESETS",
    "get_sampling_preset",
]
