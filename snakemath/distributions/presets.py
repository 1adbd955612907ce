"""Named example distributions for the explorer UI."""

from dataclasses import dataclass

from snakemath.core.exceptions import ValidationError
from snakemath.distributions.design import DistributionSpec


@dataclass(frozen=True)
class DistributionPreset:
    id: str
    name: str
    description: str
    distribution: DistributionSpec
    use_case: str


DISTRIBUTION_PRESETS: tuple[DistributionPreset, ...] = (
    DistributionPreset(
        "iq-scores", "IQ Scores",
        "IQ scores follow a normal distribution with mean 100 and std dev 15",
        DistributionSpec.normal(100, 15),
        "Classic normal distribution example",
    ),
    DistributionPreset(
        "standard-normal", "Standard Normal",
        "The standard normal distribution with mu=0 and sigma=1",
        DistributionSpec.normal(0, 1),
        "Reference for z-scores",
    ),
    DistributionPreset(
        "coin-flips", "Coin Flips (20)",
        "20 fair coin flips, counting heads",
        DistributionSpec.binomial(20, 0.5),
        "Fair coin tossing",
    ),
    DistributionPreset(
        "biased-die", "Counting Sixes",
        "60 rolls of a fair die, counting sixes",
        DistributionSpec.binomial(60, 1 / 6),
        "Success counting with low probability",
    ),
    DistributionPreset(
        "quality-control", "Quality Control",
        "100 items with 2% defect rate",
        DistributionSpec.binomial(100, 0.02),
        "Manufacturing defect monitoring",
    ),
    DistributionPreset(
        "server-requests", "Server Requests",
        "Average 10 requests per second",
        DistributionSpec.poisson(10),
        "Modeling arrival rates",
    ),
    DistributionPreset(
        "rare-events", "Rare Events",
        "Average 2 events per time period",
        DistributionSpec.poisson(2),
        "Rare event counting",
    ),
    DistributionPreset(
        "api-timeouts", "API Timeouts",
        "Time between failures with rate 0.5/hour",
        DistributionSpec.exponential(0.5),
        "Modeling wait times",
    ),
    DistributionPreset(
        "component-lifetime", "Component Lifetime",
        "Component failure rate of 0.1/year",
        DistributionSpec.exponential(0.1),
        "Reliability engineering",
    ),
    DistributionPreset(
        "random-numbers", "Random Numbers",
        "Uniform distribution between 0 and 1",
        DistributionSpec.uniform(0, 1),
        "Basic RNG simulation",
    ),
    DistributionPreset(
        "dice-roll", "Dice Roll",
        "Single fair die (continuous approximation)",
        DistributionSpec.uniform(1, 7),
        "Uniform outcome selection",
    ),
)


def get_preset(preset_id: str) -> DistributionPreset:
    """Look up a preset by id; unknown ids raise ValidationError."""
    for preset in DISTRIBUTION_PRESETS:
        if preset.id == preset_id:
            return preset
    raise ValidationError(f"Unknown distribution preset: {preset_id!r}")
