"""
Common types for the test advisor.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DATA_TYPES = ("numeric", "categorical")

NUMERIC_TYPE_THRESHOLD = 0.8
SMALL_SAMPLE_THRESHOLD = 30
SMALL_SAMPLE_PENALTY = 0.9


@dataclass(frozen=True)
class TestSuggestion:
    """
    One recommended test.

    test_name is accepted by run_test(); confidence lies in (0, 1].
    """
    __test__ = False  # not a pytest test class

    test_name: str
    test_type: str
    reason: str
    assumptions: tuple[str, ...]
    confidence: float
    alternatives: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return f"{self.test_name} ({self.test_type}, confidence {self.confidence:.2f}): {self.reason}"
