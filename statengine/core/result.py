"""
Generic result container for all statengine computations.

Every domain wraps its own parameter payload in this envelope, which
carries timing, backend identification and non-fatal warnings alongside
the numbers.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, iterations, sample sizes)
    - timing is optional
    - Immutable (frozen=True)
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
        params: Domain-specific payload (statistics, coefficients, ...)
        info: Structured metadata (method, sample sizes, iterations)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=TTestParams(...),
        ...     info={'test_kind': 'one_sample_t'},
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
