"""
Core infrastructure for statengine.

Shared abstractions used by every domain subpackage.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input cleaning and parameter validators
    assumptions: AssumptionCheck records and the shared checks
    compute: Timing, ranking and linear algebra kernels
"""

from statengine.core.result import Result
from statengine.core.assumptions import AssumptionCheck
from statengine.core.exceptions import (
    StatEngineError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    MismatchedLengthsError,
    InvalidParameterError,
    NonNumericDataError,
    UnsupportedConfigurationError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "Result",
    "AssumptionCheck",
    "StatEngineError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "MismatchedLengthsError",
    "InvalidParameterError",
    "NonNumericDataError",
    "UnsupportedConfigurationError",
    "NumericalError",
    "SingularMatrixError",
]
