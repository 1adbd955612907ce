"""
Histogram binning of empirical samples.

Bins partition [min(data), max(data)] into equal-width intervals, the
last one closed on both sides. Densities integrate to 1 so a histogram
can be overlaid on a PDF.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from snakemath.core.defaults import MAX_AUTO_BINS
from snakemath.core.validation import check_positive_integer, check_vector
from snakemath.distributions._common import HistogramBin


def sturges_bin_count(n: int, max_bins: int = MAX_AUTO_BINS) -> int:
    """ceil(log2(n) + 1), capped at max_bins."""
    n = check_positive_integer(n, "n")
    return min(math.ceil(math.log2(n) + 1), max_bins)


def create_histogram(data: ArrayLike, bin_count: int | None = None) -> list[HistogramBin]:
    """
    Bin `data` into `bin_count` equal-width bins.

    Args:
        data: 1D finite sample. An empty sample gives an empty list.
        bin_count: Number of bins; Sturges' rule when None.

    Returns:
        list of HistogramBin in ascending order. When every value is the
        same, a single zero-width bin holding all of them with density 1.
    """
    values = check_vector(data, "data")
    if values.size == 0:
        return []

    if bin_count is None:
        bin_count = sturges_bin_count(values.size)
    else:
        bin_count = check_positive_integer(bin_count, "bin_count")

    lo = float(values.min())
    hi = float(values.max())
    if lo == hi:
        return [HistogramBin(lo, hi, int(values.size), 1.0)]

    counts, edges = np.histogram(values, bins=bin_count, range=(lo, hi))
    width = (hi - lo) / bin_count
    total = values.size
    return [
        HistogramBin(
            bin_start=float(edges[i]),
            bin_end=float(edges[i + 1]),
            count=int(counts[i]),
            density=float(counts[i]) / (total * width),
        )
        for i in range(bin_count)
    ]
