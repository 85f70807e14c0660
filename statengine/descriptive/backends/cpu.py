"""
CPU backend for descriptive statistics.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from statengine.core.result import Result
from statengine.core.compute.timing import Timer
from statengine.descriptive.design import DescriptiveDesign
from statengine.descriptive._common import (
    DescriptiveParams,
    OutlierParams,
    FrequencyParams,
    HistogramBin,
    MODIFIED_Z_CONSTANT,
)
from statengine.descriptive._moments import sample_skewness, sample_kurtosis, sample_modes
from statengine.descriptive._quantile_types import sample_quantile


class CPUDescriptiveBackend:
    """CPU backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: DescriptiveDesign) -> Result:
        """Dispatch on design.kind."""
        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section(design.kind):
            if design.kind == 'describe':
                params = self._describe(design)
                if design.n_infinite:
                    warnings_list.append(
                        f"{design.n_infinite} infinite value(s) excluded and counted as missing"
                    )
            elif design.kind == 'outliers':
                params = self._outliers(design, warnings_list)
            elif design.kind == 'histogram':
                params = self._histogram(design, warnings_list)
            elif design.kind == 'categorical':
                params = self._categorical(design)
            else:
                raise ValueError(f"Unknown design kind: {design.kind!r}")

        timer.stop()

        return Result(
            params=params,
            info={'kind': design.kind, 'n': design.n, 'null_count': design.null_count},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _describe(self, design: DescriptiveDesign) -> DescriptiveParams:
        x = design.values
        n = len(x)

        if n == 0:
            nan = float('nan')
            return DescriptiveParams(
                count=0, null_count=design.null_count,
                mean=nan, median=nan, modes=(),
                standard_deviation=nan, variance=nan,
                minimum=nan, maximum=nan, range=nan,
                quartiles=(nan, nan, nan), iqr=nan,
                skewness=nan, kurtosis=nan,
                quantile_type=design.quantile_type,
            )

        xs = np.sort(x)
        variance = float(np.var(x, ddof=1)) if n > 1 else 0.0
        q1, q2, q3 = sample_quantile(xs, np.array([0.25, 0.5, 0.75]), design.quantile_type)

        return DescriptiveParams(
            count=n,
            null_count=design.null_count,
            mean=float(np.mean(x)),
            median=float(np.median(x)),
            modes=sample_modes(x),
            standard_deviation=float(np.sqrt(variance)),
            variance=variance,
            minimum=float(xs[0]),
            maximum=float(xs[-1]),
            range=float(xs[-1] - xs[0]),
            quartiles=(float(q1), float(q2), float(q3)),
            iqr=float(q3 - q1),
            skewness=sample_skewness(x),
            kurtosis=sample_kurtosis(x),
            quantile_type=design.quantile_type,
        )

    def _outliers(self, design: DescriptiveDesign, warnings_list: list[str]) -> OutlierParams:
        x = design.values
        method = design.method
        threshold = design.threshold
        scores: NDArray[np.floating[Any]] | None = None

        if len(x) == 0:
            return OutlierParams(
                method=method, threshold=threshold,
                lower_fence=np.nan, upper_fence=np.nan,
                indices=(), values=(), scores=None, n=0,
            )

        if method == 'iqr':
            q1, q3 = sample_quantile(np.sort(x), np.array([0.25, 0.75]), design.quantile_type)
            iqr = q3 - q1
            lower, upper = q1 - threshold * iqr, q3 + threshold * iqr
            flagged = (x < lower) | (x > upper)

        elif method == 'zscore':
            mean = np.mean(x)
            sd = np.std(x, ddof=1) if len(x) > 1 else 0.0
            if sd == 0:
                warnings_list.append("standard deviation is zero; no z-score outliers")
                scores = np.zeros(len(x))
                lower, upper = mean, mean
                flagged = np.zeros(len(x), dtype=bool)
            else:
                scores = (x - mean) / sd
                lower, upper = mean - threshold * sd, mean + threshold * sd
                flagged = np.abs(scores) > threshold

        else:  # modified_zscore
            median = np.median(x)
            mad = np.median(np.abs(x - median))
            if mad == 0:
                warnings_list.append("median absolute deviation is zero; no modified z-score outliers")
                scores = np.zeros(len(x))
                lower, upper = median, median
                flagged = np.zeros(len(x), dtype=bool)
            else:
                scores = MODIFIED_Z_CONSTANT * (x - median) / mad
                half_width = threshold * mad / MODIFIED_Z_CONSTANT
                lower, upper = median - half_width, median + half_width
                flagged = np.abs(scores) > threshold

        return OutlierParams(
            method=method,
            threshold=threshold,
            lower_fence=float(lower),
            upper_fence=float(upper),
            indices=tuple(int(i) for i in design.positions[flagged]),
            values=tuple(float(v) for v in x[flagged]),
            scores=scores,
            n=len(x),
        )

    def _histogram(self, design: DescriptiveDesign, warnings_list: list[str]) -> FrequencyParams:
        x = design.values
        k = design.bin_count
        total = len(x)

        bins: list[HistogramBin] = []
        if total > 0:
            lo, hi = float(np.min(x)), float(np.max(x))
            width = (hi - lo) / k
            if width > 0:
                idx = np.minimum(np.floor((x - lo) / width).astype(np.int64), k - 1)
            else:
                warnings_list.append("all values are identical; histogram has a single bin")
                k = 1
                idx = np.zeros(total, dtype=np.int64)
            counts = np.bincount(idx, minlength=k)
            edges = [(lo + i * width, hi if i == k - 1 else lo + (i + 1) * width) for i in range(k)]
            labels = _bin_labels(edges)
            for i, (lower, upper) in enumerate(edges):
                bins.append(HistogramBin(
                    lower=lower,
                    upper=upper,
                    count=int(counts[i]),
                    relative_frequency=float(counts[i] / total),
                    label=labels[i],
                ))

        frequencies = {b.label: b.count for b in bins}
        return _frequency_params(frequencies, tuple(bins), total, design.null_count)

    def _categorical(self, design: DescriptiveDesign) -> FrequencyParams:
        frequencies: dict[str, int] = {}
        for label in design.labels:
            frequencies[label] = frequencies.get(label, 0) + 1
        return _frequency_params(frequencies, (), len(design.labels), design.null_count)


def _bin_labels(edges: list[tuple[float, float]]) -> list[str]:
    """Bin labels "lower-upper" at the fewest significant digits (6 or more) that keep them unique."""
    for digits in range(6, 18):
        labels = [f"{lower:.{digits}g}-{upper:.{digits}g}" for lower, upper in edges]
        if len(set(labels)) == len(labels):
            return labels
    # edges that coincide in floating point: number the bins
    return [f"{lower!r}-{upper!r} #{i + 1}" for i, (lower, upper) in enumerate(edges)]


def _frequency_params(
    frequencies: dict[str, int],
    histogram: tuple[HistogramBin, ...],
    total: int,
    null_count: int,
) -> FrequencyParams:
    relative: dict[str, float] = {}
    cumulative: dict[str, int] = {}
    running = 0
    for key, count in frequencies.items():
        relative[key] = count / total
        running += count
        cumulative[key] = running
    return FrequencyParams(
        frequencies=frequencies,
        relative_frequencies=relative,
        cumulative_frequencies=cumulative,
        histogram=histogram,
        total=total,
        null_count=null_count,
    )
