"""
Descriptive statistics.

Public API:
    describe(sample)              - mean, median, mode, spread, quartiles, shape
    quantile(sample, probs)       - Hyndman-Fan sample quantiles (types 1-9)
    percentiles(sample, points)   - percentiles keyed by point
    detect_outliers(sample)       - IQR, z-score and modified z-score rules
    frequency_analysis(values)    - frequency tables and histograms
"""

from statengine.descriptive.solvers import (
    describe,
    quantile,
    percentiles,
    detect_outliers,
    frequency_analysis,
)
from statengine.descriptive.design import DescriptiveDesign
from statengine.descriptive._common import (
    DescriptiveParams,
    OutlierParams,
    FrequencyParams,
    HistogramBin,
)
from statengine.descriptive.solution import (
    DescriptiveSolution,
    OutlierSolution,
    FrequencySolution,
)

__all__ = [
    "describe",
    "quantile",
    "percentiles",
    "detect_outliers",
    "frequency_analysis",
    "DescriptiveDesign",
    "DescriptiveParams",
    "OutlierParams",
    "FrequencyParams",
    "HistogramBin",
    "DescriptiveSolution",
    "OutlierSolution",
    "FrequencySolution",
]
