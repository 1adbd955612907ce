"""
Policy constants for SnakeMath.

Thresholds below are conventions, not laws of statistics. They are kept
in one place so the UI layer and the tests read the same values, and
every operation that uses one accepts a keyword override.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class StrengthScale:
    """
    Ordered magnitude cut-points mapped to labels.

    A magnitude m gets labels[i] for the first i with m < cutoffs[i],
    and labels[-1] when it exceeds every cutoff.
    """
    cutoffs: tuple[float, ...]
    labels: tuple[str, ...]
    name: str

    def __post_init__(self):
        if len(self.labels) != len(self.cutoffs) + 1:
            raise ValueError(
                f"{self.name}: need {len(self.cutoffs) + 1} labels for "
                f"{len(self.cutoffs)} cutoffs, got {len(self.labels)}"
            )

    def classify(self, magnitude: float) -> str:
        for cutoff, label in zip(self.cutoffs, self.labels):
            if magnitude < cutoff:
                return label
        return self.labels[-1]


# |r|: [0, 0.1) negligible, [0.1, 0.3) weak, [0.3, 0.5) moderate,
# [0.5, 0.7) strong, [0.7, 1.0] very-strong
CORRELATION_STRENGTH = StrengthScale(
    cutoffs=(0.1, 0.3, 0.5, 0.7),
    labels=('negligible', 'weak', 'moderate', 'strong', 'very-strong'),
    name='correlation_strength',
)

# Cohen (1988) conventions, shared by d and h
COHEN_EFFECT_SIZE = StrengthScale(
    cutoffs=(0.2, 0.5, 0.8),
    labels=('negligible', 'small', 'medium', 'large'),
    name='cohen_effect_size',
)

DEFAULT_CONF_LEVEL = 0.95
DEFAULT_ALPHA = 0.05
DEFAULT_POWER = 0.8

# Cook's distance cut-off is factor * 4 / n
COOKS_DISTANCE_FACTOR = 1.0

# Sturges' rule bin count is capped at this value
MAX_AUTO_BINS = 30

# Below this many observations the t-test normality assumption is flagged
MIN_CLT_SAMPLE_SIZE = 30

# Expected successes/failures below these counts flag proportion z-tests
MIN_EXPECTED_COUNT_ONE_PROP = 10
MIN_EXPECTED_COUNT_TWO_PROP = 5
