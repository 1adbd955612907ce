"""Named sampling scenarios for the sampling explorer."""

from dataclasses import dataclass

from snakemath.core.exceptions import ValidationError
from snakemath.sampling._common import PopulationConfig


@dataclass(frozen=True)
class SamplingPreset:
    id: str
    name: str
    description: str
    population_config: PopulationConfig
    sample_size: int
    scenario: str


SAMPLING_PRESETS: tuple[SamplingPreset, ...] = (
    SamplingPreset(
        "user-survey", "User Survey",
        "Customer satisfaction survey with normal distribution",
        PopulationConfig(1000, "normal", {"mu": 50, "sigma": 15}),
        50,
        "Estimate average satisfaction score from a subset of users",
    ),
    SamplingPreset(
        "quality-inspection", "Quality Inspection",
        "Manufacturing defect rate estimation",
        PopulationConfig(10000, "binomial", {"p": 0.02}),
        200,
        "Estimate defect rate without inspecting every item",
    ),
    SamplingPreset(
        "performance-benchmark", "Performance Benchmark",
        "API response times with exponential distribution",
        # mean response time 100 ms
        PopulationConfig(5000, "exponential", {"lambda": 0.01}),
        100,
        "Profile API performance by sampling requests",
    ),
    SamplingPreset(
        "election-poll", "Election Poll",
        "Voter preference estimation",
        PopulationConfig(100000, "binomial", {"p": 0.52}),
        1000,
        "Estimate candidate support from a representative sample",
    ),
    SamplingPreset(
        "ab-test", "A/B Test",
        "Website conversion rate experiment",
        PopulationConfig(50000, "binomial", {"p": 0.05}),
        5000,
        "Estimate conversion rate to detect small improvements",
    ),
)


def get_sampling_preset(preset_id: str) -> SamplingPreset:
    for preset in SAMPLING_PRESETS:
        if preset.id == preset_id:
            return preset
    raise ValidationError(f"Unknown sampling preset: {preset_id!r}")
