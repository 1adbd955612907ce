"""
Generic result container for SnakeMath computations that go through a
backend (hypothesis tests).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test type, inputs)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Domain-specific payload (test statistics, estimates)
        info: Structured metadata (test type, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal advisories encountered during computation

    Examples:
        >>> Result(
        ...     params=HTestParams(...),
        ...     info={'test_type': 'one-sample-t'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_hypothesis'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
