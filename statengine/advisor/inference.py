"""
Column type inference.

This is a standalone utility function (no Design/Backend pipeline).
"""

from __future__ import annotations

from typing import Iterable, Any

from statengine.core.validation import is_missing, parse_number
from statengine.advisor._common import NUMERIC_TYPE_THRESHOLD


def infer_data_type(values: Iterable[Any]) -> str:
    """
    Classify a column as 'numeric' or 'categorical'.

    Parameters
    ----------
    values : iterable
        Raw column values; None and NaN are ignored.

    Returns
    -------
    str
        'numeric' when more than 80% of the non-missing values parse as
        numbers, otherwise 'categorical'. An all-missing column is
        'categorical'.
    """
    present = [v for v in values if not is_missing(v)]
    if not present:
        return "categorical"
    n_numeric = sum(1 for v in present if parse_number(v) is not None)
    return "numeric" if n_numeric / len(present) > NUMERIC_TYPE_THRESHOLD else "categorical"
