"""
Reference and synthetic datasets for correlation demos.

Anscombe's quartet and the named presets are static data. Points are
stored as parallel x / y tuples.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from snakemath.core.exceptions import ValidationError
from snakemath.core.random import RandomSource, as_generator
from snakemath.core.validation import check_positive, check_positive_integer, check_scalar
from snakemath.correlation._common import Point


@dataclass(frozen=True)
class PairedDataset:
    id: str
    name: str
    description: str
    x: tuple[float, ...]
    y: tuple[float, ...]

    @property
    def points(self) -> list[Point]:
        return [Point(xi, yi) for xi, yi in zip(self.x, self.y)]

    def arrays(self) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        return np.array(self.x, dtype=np.float64), np.array(self.y, dtype=np.float64)


@dataclass(frozen=True)
class CorrelationPreset(PairedDataset):
    expected_r: float = 0.0
    lesson: str = ""


# ═══════════════════════════════════════════════════════════════════════
# Anscombe's quartet
# ═══════════════════════════════════════════════════════════════════════
# Four datasets sharing mean(x) = 9, var(x) = 11, mean(y) ~ 7.50,
# var(y) ~ 4.12, r ~ 0.816 and the fit y = 3.00 + 0.500 x.

_ANSCOMBE_X = (10.0, 8.0, 13.0, 9.0, 11.0, 14.0, 6.0, 4.0, 12.0, 7.0, 5.0)

ANSCOMBE_QUARTET: tuple[PairedDataset, ...] = (
    PairedDataset(
        "anscombe-1", "Anscombe I", "Linear relationship with normal scatter",
        _ANSCOMBE_X,
        (8.04, 6.95, 7.58, 8.81, 8.33, 9.96, 7.24, 4.26, 10.84, 4.82, 5.68),
    ),
    PairedDataset(
        "anscombe-2", "Anscombe II", "Curved (quadratic) relationship",
        _ANSCOMBE_X,
        (9.14, 8.14, 8.74, 8.77, 9.26, 8.10, 6.13, 3.10, 9.13, 7.26, 4.74),
    ),
    PairedDataset(
        "anscombe-3", "Anscombe III", "Linear with one influential outlier",
        _ANSCOMBE_X,
        (7.46, 6.77, 12.74, 7.11, 7.81, 8.84, 6.08, 5.39, 8.15, 6.42, 5.73),
    ),
    PairedDataset(
        "anscombe-4", "Anscombe IV", "No relationship except one high-leverage point",
        (8.0, 8.0, 8.0, 8.0, 8.0, 8.0, 8.0, 19.0, 8.0, 8.0, 8.0),
        (6.58, 5.76, 7.71, 8.84, 8.47, 7.04, 5.25, 12.50, 5.56, 7.91, 6.89),
    ),
)


def get_anscombe_quartet() -> tuple[PairedDataset, ...]:
    return ANSCOMBE_QUARTET


def get_anscombe_dataset(dataset_id: str) -> PairedDataset:
    for dataset in ANSCOMBE_QUARTET:
        if dataset.id == dataset_id:
            return dataset
    raise ValidationError(f"Unknown Anscombe dataset: {dataset_id!r}")


# ═══════════════════════════════════════════════════════════════════════
# Presets
# ═══════════════════════════════════════════════════════════════════════

_ONE_TO_TEN = tuple(float(i) for i in range(1, 11))

CORRELATION_PRESETS: tuple[CorrelationPreset, ...] = (
    CorrelationPreset(
        "strong-positive", "Strong Positive", "Clear positive linear relationship",
        _ONE_TO_TEN,
        (2.1, 4.2, 5.8, 8.1, 9.9, 12.2, 13.8, 16.1, 17.9, 20.2),
        expected_r=0.95,
        lesson="When r is close to +1, as x increases, y reliably increases.",
    ),
    CorrelationPreset(
        "strong-negative", "Strong Negative", "Clear negative linear relationship",
        _ONE_TO_TEN,
        (19.8, 17.9, 16.1, 13.8, 12.2, 9.9, 8.1, 5.8, 4.2, 2.1),
        expected_r=-0.95,
        lesson="When r is close to -1, as x increases, y reliably decreases.",
    ),
    CorrelationPreset(
        "no-correlation", "No Correlation", "Random scatter with no pattern",
        _ONE_TO_TEN,
        (8.0, 3.0, 12.0, 5.0, 9.0, 2.0, 11.0, 6.0, 4.0, 10.0),
        expected_r=0.0,
        lesson="When r is near 0, knowing x tells you nothing about y linearly.",
    ),
    CorrelationPreset(
        "moderate-positive", "Moderate Positive", "Positive trend with noticeable scatter",
        _ONE_TO_TEN,
        (3.0, 2.0, 5.0, 4.0, 8.0, 6.0, 9.0, 7.0, 12.0, 10.0),
        expected_r=0.65,
        lesson="Moderate correlation shows a trend but with significant variability.",
    ),
    CorrelationPreset(
        "nonlinear-quadratic", "Non-Linear (Quadratic)",
        "Curved relationship that linear regression misses",
        _ONE_TO_TEN,
        (10.0, 5.0, 2.0, 1.0, 0.5, 1.0, 2.0, 5.0, 10.0, 17.0),
        expected_r=0.0,
        lesson="Correlation measures linear relationship only; a clear curve can have r near 0.",
    ),
    CorrelationPreset(
        "outlier-impact", "Outlier Impact", "One outlier dramatically affecting correlation",
        (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 15.0),
        (2.0, 2.1, 1.9, 2.2, 1.8, 2.1, 2.0, 1.9, 2.1, 15.0),
        expected_r=0.9,
        lesson="A single outlier can drastically change r. Always plot the data.",
    ),
    CorrelationPreset(
        "heteroscedasticity", "Heteroscedasticity", "Variance increases with x (fan shape)",
        _ONE_TO_TEN,
        (2.0, 4.2, 5.5, 9.0, 8.0, 14.0, 10.0, 18.0, 12.0, 22.0),
        expected_r=0.7,
        lesson="When variance changes with x, regression assumptions are violated.",
    ),
    CorrelationPreset(
        "clustering", "Two Clusters", "Two distinct groups creating false correlation",
        (2.0, 2.5, 3.0, 2.2, 2.8, 8.0, 8.5, 9.0, 8.2, 8.8),
        (3.0, 2.5, 3.5, 2.8, 3.2, 8.0, 7.5, 8.5, 7.8, 8.2),
        expected_r=0.85,
        lesson="Aggregating different groups can create spurious correlations (Simpson's paradox).",
    ),
)


def get_correlation_preset(preset_id: str) -> CorrelationPreset:
    for preset in CORRELATION_PRESETS:
        if preset.id == preset_id:
            return preset
    raise ValidationError(f"Unknown correlation preset: {preset_id!r}")


# ═══════════════════════════════════════════════════════════════════════
# Synthetic data
# ═══════════════════════════════════════════════════════════════════════

def _standardize(values: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    return (values - values.mean()) / values.std(ddof=1)


def generate_correlated_data(
    n: int,
    target_r: float,
    x_mean: float = 0.0,
    x_std: float = 1.0,
    y_mean: float = 0.0,
    y_std: float = 1.0,
    *,
    seed: RandomSource = None,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Two series whose population correlation is target_r.

    y = target_r * z_x + sqrt(1 - target_r^2) * noise, with z_x and the
    noise independent standard normals; both series are then rescaled
    to the requested means and standard deviations. The sample means
    and SDs match exactly. The sample correlation is only close to
    target_r, and the match improves with n. |target_r| = 1 gives an
    exact linear relationship.
    """
    n = check_positive_integer(n, "n")
    target_r = check_scalar(target_r, "target_r")
    if not -1.0 <= target_r <= 1.0:
        raise ValidationError(f"target_r: must be in [-1, 1], got {target_r}")
    x_mean = check_scalar(x_mean, "x_mean")
    y_mean = check_scalar(y_mean, "y_mean")
    x_std = check_positive(x_std, "x_std")
    y_std = check_positive(y_std, "y_std")
    if n < 3:
        raise ValidationError(f"n: need at least 3 points, got {n}")

    if n < 10:
        warnings.warn(
            f"generate_correlated_data with n={n}: the sample correlation "
            "can differ substantially from target_r",
            stacklevel=2,
        )

    rng = as_generator(seed)
    zx = _standardize(rng.standard_normal(n))
    noise = _standardize(rng.standard_normal(n))
    zy = _standardize(target_r * zx + math.sqrt(1.0 - target_r * target_r) * noise)
    return x_mean + x_std * zx, y_mean + y_std * zy
