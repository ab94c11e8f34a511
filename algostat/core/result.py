"""
Generic result container for all AlgoStat computations.

The Result class provides a standardized envelope that all domain-specific
results use. Domains define their own frozen parameter payloads and wrap
Result[P] in a user-facing Solution class.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test type, method, search bounds)
    - timing is optional (don't burden unit tests)
    - warnings carry non-fatal diagnostics, including the reason a
      result was marked invalid
    - Immutable (frozen=True): results never change after a call returns
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (statistics, p-values, estimates)
        info: Structured metadata (test type, method, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=HTestParams(...),
        ...     info={'test_type': 't_two_sample'},
        ...     timing={'total_seconds': 0.001},
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
