"""Shared result types for the distribution engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DistributionStats:
    """
    Closed-form summary statistics of a distribution.

    mode is a float, a pair of floats when the distribution is bimodal
    (binomial with integer (n+1)p, Poisson with integer lambda), or None
    when every point of the support is a mode (uniform).
    """
    mean: float
    variance: float
    std_dev: float
    mode: float | tuple[float, float] | None
    skewness: float


@dataclass(frozen=True)
class PlotRange:
    """x-axis window that covers the visually relevant support."""
    min: float
    max: float


@dataclass(frozen=True)
class HistogramBin:
    """
    One histogram bin [bin_start, bin_end).

    The final bin of a histogram is closed on the right so the maximum
    observation is counted. density is count / (total * width).
    """
    bin_start: float
    bin_end: float
    count: int
    density: float

    @property
    def width(self) -> float:
        return self.bin_end - self.bin_start

    @property
    def midpoint(self) -> float:
        return 0.5 * (self.bin_start + self.bin_end)
