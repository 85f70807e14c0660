"""
Exception hierarchy for statengine.

All exceptions inherit from StatEngineError so callers can catch any
library error with a single clause. Validation failures are raised by the
design factories before any computation runs; no partial result is ever
returned.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the parameter and give actual vs expected values
    - Never catch and re-raise with less information
"""


class StatEngineError(Exception):
    """Base exception for all statengine errors."""
    pass


class ValidationError(StatEngineError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Too few valid observations (or groups) for the requested computation.

    Attributes:
        required: Minimum number of observations needed
        actual: Number of valid observations supplied
    """

    def __init__(
        self,
        message: str,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.required = required
        self.actual = actual


class MismatchedLengthsError(DimensionError):
    """
    Paired inputs have different lengths.

    Attributes:
        lengths: Mapping of parameter name to its length
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths or {}


class InvalidParameterError(ValidationError):
    """
    A keyword parameter is outside its allowed domain.

    Attributes:
        name: Parameter name
        value: Offending value
    """

    def __init__(self, message: str, name: str | None = None, value: object = None):
        super().__init__(message)
        self.name = name
        self.value = value


class NonNumericDataError(ValidationError):
    """
    A numeric operation was given values that are not numbers.

    Attributes:
        name: Parameter name
        n_invalid: Number of values that could not be read as numbers
    """

    def __init__(self, message: str, name: str | None = None, n_invalid: int = 0):
        super().__init__(message)
        self.name = name
        self.n_invalid = n_invalid


class UnsupportedConfigurationError(StatEngineError):
    """
    The requested combination of test, data types or options is not supported.
    """
    pass


class NumericalError(StatEngineError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of columns)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank

