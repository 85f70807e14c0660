"""
Input validation utilities for statengine.

These validators follow the "fail fast, fail loud" principle: they raise
immediately with a clear message rather than silently correcting input.

Samples may contain missing entries (None or NaN). Missing entries are
counted and excluded; anything else that cannot be read as a number is
rejected by the numeric converters.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Missing values are never imputed
"""

from typing import Any, Iterable, Mapping, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from statengine.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    InvalidParameterError,
    MismatchedLengthsError,
    NonNumericDataError,
)


def is_missing(value: Any) -> bool:
    """True for None and floating NaN."""
    if value is None:
        return True
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False


def parse_number(value: Any) -> float | None:
    """
    Read a single value as a float.

    Returns None when the value is not a number. Booleans are not numbers;
    strings are parsed after stripping whitespace.
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return None


def _as_1d(values: ArrayLike, name: str) -> NDArray:
    if isinstance(values, (str, bytes)):
        raise DimensionError(f"{name}: expected a sequence of values, got a string")
    try:
        arr = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise DimensionError(f"{name}: cannot convert to array: {e}") from e
    if arr.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D sequence, got {arr.ndim}D with shape {arr.shape}"
        )
    return arr


def to_float_array(
    values: ArrayLike,
    name: str,
    *,
    allow_infinite: bool = False,
) -> NDArray[np.floating[Any]]:
    """
    Convert a nullable numeric sequence to float64, missing entries as NaN.

    With allow_infinite, +-inf pass through for the caller to handle.

    Raises:
        DimensionError: If input is not one-dimensional
        NonNumericDataError: If a non-missing entry is not a number, or is
            infinite and allow_infinite is False
    """
    arr = _as_1d(values, name)

    if np.issubdtype(arr.dtype, np.number) and arr.dtype != np.bool_:
        out = arr.astype(np.float64)
    else:
        out = np.empty(len(arr), dtype=np.float64)
        n_invalid = 0
        for i, v in enumerate(arr.tolist()):
            if is_missing(v):
                out[i] = np.nan
                continue
            parsed = parse_number(v)
            if parsed is None:
                n_invalid += 1
                continue
            out[i] = parsed
        if n_invalid:
            raise NonNumericDataError(
                f"{name}: {n_invalid} value(s) cannot be read as numbers",
                name=name,
                n_invalid=n_invalid,
            )

    if not allow_infinite and np.any(np.isinf(out)):
        n_inf = int(np.sum(np.isinf(out)))
        raise NonNumericDataError(
            f"{name}: contains {n_inf} infinite value(s)",
            name=name,
            n_invalid=n_inf,
        )
    return out


def clean_sample(values: ArrayLike, name: str) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Drop missing entries from a numeric sample.

    Returns:
        (valid values as float64, number of missing entries)
    """
    arr = to_float_array(values, name)
    mask = np.isnan(arr)
    return arr[~mask], int(np.sum(mask))


def clean_pairs(
    x: ArrayLike,
    y: ArrayLike,
    names: tuple[str, str],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]], int]:
    """
    Align two numeric samples element-wise and drop incomplete pairs.

    Returns:
        (x values, y values, number of dropped pairs)

    Raises:
        MismatchedLengthsError: If the raw sequences differ in length
    """
    x_arr = to_float_array(x, names[0])
    y_arr = to_float_array(y, names[1])
    check_consistent_length(x_arr, y_arr, names=names)
    mask = ~(np.isnan(x_arr) | np.isnan(y_arr))
    return x_arr[mask], y_arr[mask], int(np.sum(~mask))


def as_group_mapping(groups: Any) -> dict[str, Any]:
    """
    Mapping label -> sample; a plain sequence of samples, or the rows of a
    2D array, are labelled group1, group2, ...

    Raises:
        DimensionError: If groups is neither a mapping, a sequence of samples
            nor a 2D array
    """
    if isinstance(groups, Mapping):
        return {str(k): v for k, v in groups.items()}
    if isinstance(groups, np.ndarray):
        if groups.ndim == 2 or (groups.ndim == 1 and groups.dtype == object):
            return {f"group{i + 1}": g for i, g in enumerate(groups)}
        raise DimensionError(
            f"groups: expected a 2D array with one row per group, "
            f"got {groups.ndim}D with shape {groups.shape}"
        )
    if isinstance(groups, (str, bytes)) or not isinstance(groups, Sequence):
        raise DimensionError(
            f"groups must be a mapping of label -> sample or a sequence of samples, "
            f"got {type(groups).__name__}"
        )
    return {f"group{i + 1}": g for i, g in enumerate(groups)}


def to_labels(values: Iterable[Any], name: str) -> list[str | None]:
    """Convert a categorical sequence to string labels, missing as None."""
    arr = _as_1d(values, name)
    return [None if is_missing(v) else str(v) for v in arr.tolist()]


def check_consistent_length(*arrays: Sequence, names: tuple[str, ...]) -> None:
    """
    Verify all sequences have the same length.

    Raises:
        ValueError: If number of names doesn't match number of arrays
        MismatchedLengthsError: If lengths differ
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )
    lengths = {name: len(arr) for name, arr in zip(names, arrays)}
    if len(set(lengths.values())) > 1:
        details = ", ".join(f"{name}={length}" for name, length in lengths.items())
        raise MismatchedLengthsError(f"Inconsistent lengths: {details}", lengths=lengths)


def check_min_samples(n: int, required: int, name: str, what: str = "observations") -> None:
    """
    Verify at least `required` valid observations are available.

    Raises:
        InsufficientDataError: If n < required
    """
    if n < required:
        raise InsufficientDataError(
            f"{name}: requires at least {required} non-missing {what}, got {n}",
            required=required,
            actual=n,
        )


def check_alpha(alpha: float) -> float:
    """Significance level must lie strictly in (0, 1)."""
    return check_probability(alpha, 'alpha')


def check_probability(value: float, name: str) -> float:
    """Value must lie strictly in (0, 1)."""
    if isinstance(value, bool) or not isinstance(value, (int, float, np.floating)):
        raise InvalidParameterError(
            f"{name} must be a number in (0, 1), got {value!r}", name=name, value=value
        )
    if not (0.0 < float(value) < 1.0):
        raise InvalidParameterError(
            f"{name} must be in (0, 1), got {value}", name=name, value=value
        )
    return float(value)


def check_positive_int(value: int, name: str) -> int:
    """Value must be an integer >= 1."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise InvalidParameterError(
            f"{name} must be a positive integer, got {value!r}", name=name, value=value
        )
    return int(value)


def check_choice(value: str, choices: tuple[str, ...], name: str) -> str:
    """Value must be one of the allowed strings."""
    if value not in choices:
        raise InvalidParameterError(
            f"{name} must be one of {choices}, got {value!r}", name=name, value=value
        )
    return value
