"""
Cross-tabulation of two categorical variables.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from statengine.core.validation import to_labels, check_consistent_length
from statengine.hypothesis._common import ContingencyTableParams


def build_contingency_table(
    row_data: ArrayLike,
    column_data: ArrayLike,
    *,
    row_variable: str = "row",
    column_variable: str = "column",
) -> ContingencyTableParams:
    """
    Count co-occurrences of row and column labels.

    Values are compared as strings. A pair is skipped when either side
    is missing. Labels are sorted.
    """
    rows = to_labels(row_data, 'row_data')
    cols = to_labels(column_data, 'column_data')
    check_consistent_length(rows, cols, names=('row_data', 'column_data'))

    pairs = [(r, c) for r, c in zip(rows, cols) if r is not None and c is not None]
    row_labels = tuple(sorted({r for r, _ in pairs}))
    column_labels = tuple(sorted({c for _, c in pairs}))
    row_index = {lab: i for i, lab in enumerate(row_labels)}
    col_index = {lab: j for j, lab in enumerate(column_labels)}

    counts = np.zeros((len(row_labels), len(column_labels)), dtype=np.int64)
    for r, c in pairs:
        counts[row_index[r], col_index[c]] += 1

    return ContingencyTableParams(
        row_variable=row_variable,
        column_variable=column_variable,
        row_labels=row_labels,
        column_labels=column_labels,
        counts=counts,
        row_totals=counts.sum(axis=1),
        column_totals=counts.sum(axis=0),
        grand_total=int(counts.sum()),
        n_excluded=len(rows) - len(pairs),
    )


def format_table(params: ContingencyTableParams) -> str:
    """Counts with margins as a fixed-width text table."""
    header = [f"{params.row_variable} \\ {params.column_variable}"] + list(params.column_labels) + ["Total"]
    body: list[list[Any]] = []
    for i, lab in enumerate(params.row_labels):
        body.append([lab] + [int(v) for v in params.counts[i]] + [int(params.row_totals[i])])
    body.append(["Total"] + [int(v) for v in params.column_totals] + [params.grand_total])

    widths = [
        max(len(str(row[j])) for row in [header] + body)
        for j in range(len(header))
    ]
    lines = ["  ".join(str(v).rjust(w) for v, w in zip(header, widths))]
    for row in body:
        lines.append("  ".join(str(v).rjust(w) for v, w in zip(row, widths)))
    return "\n".join(lines)
