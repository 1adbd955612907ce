"""
Named hypothesis-test scenarios.

Each preset carries summary data in the shape HypothesisDesign.from_dict
reads, so `get_test_preset(id).to_design()` is ready to solve.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from snakemath.core.exceptions import ValidationError
from snakemath.hypothesis.design import HypothesisDesign


@dataclass(frozen=True)
class HypothesisTestPreset:
    id: str
    name: str
    description: str
    test_type: str
    scenario: str
    data: dict[str, float] = field(default_factory=dict)

    def to_design(self, **options: Any) -> HypothesisDesign:
        """Build the design; options (alternative, alpha, ...) pass through."""
        return HypothesisDesign.from_dict(
            self.test_type, self.data, data_name=self.name, **options
        )


HYPOTHESIS_TEST_PRESETS: tuple[HypothesisTestPreset, ...] = (
    HypothesisTestPreset(
        id="ab-test",
        name="A/B Test",
        description="Compare conversion rates between control and treatment",
        test_type="two-prop-z",
        scenario="Website A/B test: Is the new design better?",
        data={"successes1": 45, "n1": 1000, "successes2": 52, "n2": 1000},
    ),
    HypothesisTestPreset(
        id="quality-control",
        name="Quality Control",
        description="Test if defect rate exceeds acceptable threshold",
        test_type="one-prop-z",
        scenario="Manufacturing QC: Is defect rate above 2%?",
        data={"successes": 28, "n": 1000, "p0": 0.02},
    ),
    HypothesisTestPreset(
        id="drug-trial",
        name="Drug Trial",
        description="Compare treatment effect between drug and placebo",
        test_type="two-sample-t",
        scenario="Clinical trial: Does the drug reduce symptoms?",
        data={"mean1": 4.2, "std_dev1": 1.5, "n1": 50, "mean2": 5.8, "std_dev2": 1.7, "n2": 50},
    ),
    HypothesisTestPreset(
        id="benchmark",
        name="Performance Benchmark",
        description="Test if new algorithm is faster than baseline",
        test_type="one-sample-t",
        scenario="Algorithm optimization: Is response time under 100ms?",
        data={"mean": 95, "std_dev": 15, "n": 30, "mu": 100},
    ),
    HypothesisTestPreset(
        id="survey",
        name="Survey Analysis",
        description="Compare satisfaction scores between groups",
        test_type="two-sample-t",
        scenario="Customer satisfaction: Premium vs Free users",
        data={"mean1": 4.3, "std_dev1": 0.8, "n1": 100, "mean2": 3.9, "std_dev2": 1.0, "n2": 150},
    ),
)


def get_test_preset(preset_id: str) -> HypothesisTestPreset:
    for preset in HYPOTHESIS_TEST_PRESETS:
        if preset.id == preset_id:
            return preset
    known = ", ".join(p.id for p in HYPOTHESIS_TEST_PRESETS)
    raise ValidationError(f"Unknown hypothesis test preset {preset_id!r}; known: {known}")
