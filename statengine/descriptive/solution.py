"""
Descriptive statistics solution types.

User-facing wrappers around Result[DescriptiveParams], Result[OutlierParams]
and Result[FrequencyParams].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from statengine.core.result import Result
from statengine.core.solution import ResultAccessors
from statengine.descriptive._common import (
    DescriptiveParams,
    OutlierParams,
    FrequencyParams,
    HistogramBin,
)

if TYPE_CHECKING:
    from statengine.descriptive.design import DescriptiveDesign


@dataclass
class DescriptiveSolution(ResultAccessors):
    """
    Summary statistics of one numeric sample.

    count + null_count equals the length of the input sequence.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign | None' = None

    @property
    def count(self) -> int:
        return self._result.params.count

    @property
    def null_count(self) -> int:
        return self._result.params.null_count

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mode(self) -> tuple[float, ...]:
        """Most frequent value(s); empty when all frequencies are equal."""
        return self._result.params.modes

    @property
    def standard_deviation(self) -> float:
        return self._result.params.standard_deviation

    @property
    def sd(self) -> float:
        return self._result.params.standard_deviation

    @property
    def variance(self) -> float:
        return self._result.params.variance

    @property
    def min(self) -> float:
        return self._result.params.minimum

    @property
    def max(self) -> float:
        return self._result.params.maximum

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def quartiles(self) -> tuple[float, float, float]:
        """(Q1, Q2, Q3)."""
        return self._result.params.quartiles

    @property
    def iqr(self) -> float:
        return self._result.params.iqr

    @property
    def skewness(self) -> float:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis (0 for a normal distribution)."""
        return self._result.params.kurtosis

    def to_dict(self) -> dict[str, Any]:
        p = self._result.params
        return {
            'count': p.count,
            'null_count': p.null_count,
            'mean': p.mean,
            'median': p.median,
            'mode': list(p.modes),
            'standard_deviation': p.standard_deviation,
            'variance': p.variance,
            'min': p.minimum,
            'max': p.maximum,
            'range': p.range,
            'quartiles': list(p.quartiles),
            'iqr': p.iqr,
            'skewness': p.skewness,
            'kurtosis': p.kurtosis,
        }

    def summary(self) -> str:
        p = self._result.params
        if p.count == 0:
            return f"No non-missing observations ({p.null_count} missing)."

        q1, q2, q3 = p.quartiles
        row_labels = ["Min.", "1st Qu.", "Median", "Mean", "3rd Qu.", "Max."]
        row_values = [p.minimum, q1, q2, p.mean, q3, p.maximum]
        width = max(len(f"{v:.6g}") for v in row_values)
        lines = [
            "  ".join(lbl.rjust(max(width, len(lbl))) for lbl in row_labels),
            "  ".join(f"{v:.6g}".rjust(max(width, len(lbl))) for v, lbl in zip(row_values, row_labels)),
            "",
            f"n = {p.count}, missing = {p.null_count}",
            f"sd = {p.standard_deviation:.6g}, variance = {p.variance:.6g}, IQR = {p.iqr:.6g}",
            f"skewness = {p.skewness:.4g}, kurtosis = {p.kurtosis:.4g}",
            "mode: " + (", ".join(f"{m:g}" for m in p.modes) if p.modes else "none"),
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return f"DescriptiveSolution(count={p.count}, mean={p.mean:.6g}, sd={p.standard_deviation:.6g})"


@dataclass
class OutlierSolution(ResultAccessors):
    """Values flagged by one outlier rule."""
    _result: Result[OutlierParams]
    _design: 'DescriptiveDesign | None' = None

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def threshold(self) -> float:
        return self._result.params.threshold

    @property
    def lower_fence(self) -> float:
        return self._result.params.lower_fence

    @property
    def upper_fence(self) -> float:
        return self._result.params.upper_fence

    @property
    def indices(self) -> tuple[int, ...]:
        """Positions of the outliers in the input sequence."""
        return self._result.params.indices

    @property
    def outliers(self) -> tuple[float, ...]:
        return self._result.params.values

    @property
    def scores(self) -> NDArray[np.floating[Any]] | None:
        """z or modified-z score of every non-missing value (None for 'iqr')."""
        return self._result.params.scores

    @property
    def n_outliers(self) -> int:
        return len(self._result.params.indices)

    def summary(self) -> str:
        p = self._result.params
        lines = [
            f"Outlier detection ({p.method}, threshold = {p.threshold:g})",
            f"fences: [{p.lower_fence:.6g}, {p.upper_fence:.6g}]",
            f"{len(p.indices)} of {p.n} values flagged",
        ]
        for i, v in zip(p.indices, p.values):
            lines.append(f"  [{i}] {v:g}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"OutlierSolution(method={self.method!r}, n_outliers={self.n_outliers})"


@dataclass
class FrequencySolution(ResultAccessors):
    """Frequency table of a categorical or binned numeric variable."""
    _result: Result[FrequencyParams]
    _design: 'DescriptiveDesign | None' = None

    @property
    def frequencies(self) -> dict[str, int]:
        return self._result.params.frequencies

    @property
    def relative_frequencies(self) -> dict[str, float]:
        return self._result.params.relative_frequencies

    @property
    def cumulative_frequencies(self) -> dict[str, int]:
        return self._result.params.cumulative_frequencies

    @property
    def histogram(self) -> tuple[HistogramBin, ...]:
        """Equal-width bins; empty for categorical data."""
        return self._result.params.histogram

    @property
    def total(self) -> int:
        return self._result.params.total

    @property
    def null_count(self) -> int:
        return self._result.params.null_count

    def summary(self) -> str:
        p = self._result.params
        width = max((len(k) for k in p.frequencies), default=5)
        lines = [f"{'value'.ljust(width)}  {'count':>7}  {'rel.':>7}  {'cum.':>7}"]
        for key, count in p.frequencies.items():
            lines.append(
                f"{key.ljust(width)}  {count:>7d}  "
                f"{p.relative_frequencies[key]:>7.4f}  {p.cumulative_frequencies[key]:>7d}"
            )
        lines.append(f"total = {p.total}, missing = {p.null_count}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        kind = 'histogram' if self.histogram else 'categorical'
        return f"FrequencySolution({kind}, levels={len(self.frequencies)}, total={self.total})"
