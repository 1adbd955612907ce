"""
Hypothesis testing module.

Public API:
    one_sample_t_test(mean, std_dev, n, mu)  - t-test on a sample summary
    two_sample_t_test(...)                   - Welch (default) or pooled t-test
    one_prop_z_test(successes, n, p0)        - one-proportion z-test
    two_prop_z_test(x1, n1, x2, n2)          - two-proportion z-test (pooled SE)
    t_test(x, y)                             - t-test on raw data
    calculate_power / sample_size_for_power  - power planning
    cohens_d / cohens_h                      - standardized effect sizes
    check_test_assumptions                   - large-sample advisories
"""

from snakemath.hypothesis._common import HTestParams, TEST_TYPES, VALID_ALTERNATIVES
from snakemath.hypothesis.assumptions import AssumptionCheck, check_test_assumptions
from snakemath.hypothesis.design import HypothesisDesign
from snakemath.hypothesis.effect_size import (
    cohens_d,
    cohens_d_two_groups,
    cohens_h,
    interpret_cohens_d,
    interpret_cohens_h,
    pooled_std_dev,
)
from snakemath.hypothesis.formatting import (
    describe_test_result,
    format_p_value,
    significance_stars,
)
from snakemath.hypothesis.power import (
    PowerPoint,
    calculate_power,
    generate_power_curve,
    sample_size_for_power,
    sample_size_for_proportions,
)
from snakemath.hypothesis.presets import (
    HYPOTHESIS_TEST_PRESETS,
    HypothesisTestPreset,
    get_test_preset,
)
from snakemath.hypothesis.solution import HTestSolution
from snakemath.hypothesis.solvers import (
    one_prop_z_test,
    one_sample_t_test,
    t_test,
    two_prop_z_test,
    two_sample_t_test,
)

__all__ = [
    # Tests
    "one_sample_t_test",
    "two_sample_t_test",
    "one_prop_z_test",
    "two_prop_z_test",
    "t_test",
    # Types
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
    "TEST_TYPES",
    "VALID_ALTERNATIVES",
    # Effect sizes
    "cohens_d",
    "cohens_d_two_groups",
    "cohens_h",
    "pooled_std_dev",
    "interpret_cohens_d",
    "interpret_cohens_h",
    # Power
    "PowerPoint",
    "calculate_power",
    "sample_size_for_power",
    "sample_size_for_proportions",
    "generate_power_curve",
    # Assumptions
    "AssumptionCheck",
    "check_test_assumptions",
    # Reporting
    "format_p_value",
    "significance_stars",
    "describe_test_result",
    # Presets
    "HypothesisTestPreset",
    "HYPOTHESIS_TEST_PRESETS",
    "get_test_preset",
]
