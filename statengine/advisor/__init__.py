"""
Test suggestion advisor.

Public API:
    infer_data_type(values)                       - 'numeric' or 'categorical'
    suggest_tests(data_types, sample_sizes, ...)  - ranked TestSuggestion tuple
    run_test(name_or_suggestion, *args)           - run a suggested test

Example:
    >>> from statengine.advisor import suggest_tests
    >>> suggest_tests({'score': 'numeric'}, {'score': 50})[0].test_name
    'Normality Tests'
"""

from statengine.advisor._common import (
    TestSuggestion,
    NUMERIC_TYPE_THRESHOLD,
    SMALL_SAMPLE_THRESHOLD,
)
from statengine.advisor.inference import infer_data_type
from statengine.advisor.suggest import suggest_tests
from statengine.advisor.dispatch import run_test, TEST_REGISTRY

__all__ = [
    "infer_data_type",
    "suggest_tests",
    "run_test",
    "TestSuggestion",
    "TEST_REGISTRY",
    "NUMERIC_TYPE_THRESHOLD",
    "SMALL_SAMPLE_THRESHOLD",
]
