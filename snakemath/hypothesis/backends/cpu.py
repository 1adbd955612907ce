"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type and
attaches the assumption advisories to the result warnings.
"""

from __future__ import annotations

from snakemath.core.result import Result
from snakemath.core.timing import Timer
from snakemath.hypothesis._common import HTestParams
from snakemath.hypothesis.assumptions import check_test_assumptions
from snakemath.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "one-sample-t":
                from snakemath.hypothesis.backends._t_test import t_one_sample
                params, warnings_list = t_one_sample(design)
            elif test_type == "two-sample-t":
                from snakemath.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_type == "one-prop-z":
                from snakemath.hypothesis.backends._z_test import one_prop_z
                params, warnings_list = one_prop_z(design)
            elif test_type == "two-prop-z":
                from snakemath.hypothesis.backends._z_test import two_prop_z
                params, warnings_list = two_prop_z(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        with timer.section("assumptions"):
            check = check_test_assumptions(test_type, design.assumption_data())
            warnings_list = [*warnings_list, *check.warnings]

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type, 'assumptions_valid': check.valid},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
