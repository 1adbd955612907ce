"""
Correlation and regression: Pearson's r, simple and two-predictor OLS,
residual and influence diagnostics, and reference datasets.

Functions take paired x / y series; use points_to_arrays to convert a
sequence of Point values first.
"""

from snakemath.correlation._common import (
    CoefficientInterval,
    CorrelationInterpretation,
    LinearRegressionResult,
    MultipleRegressionResult,
    Point,
    RegressionConfidenceIntervals,
    ResidualAnalysis,
)
from snakemath.correlation._influence import (
    cooks_distance,
    identify_outliers,
    leverage,
    leverage_values,
)
from snakemath.correlation._residuals import (
    analyze_residuals,
    calculate_residuals,
    r_squared_from_residuals,
    standard_error_of_estimate,
    standardized_residuals,
    total_sum_of_squares,
)
from snakemath.correlation._utils import (
    arrays_to_points,
    format_correlation,
    format_r_squared,
    format_regression_equation,
    generate_regression_line_points,
    points_to_arrays,
)
from snakemath.correlation.datasets import (
    ANSCOMBE_QUARTET,
    CORRELATION_PRESETS,
    CorrelationPreset,
    PairedDataset,
    generate_correlated_data,
    get_anscombe_dataset,
    get_anscombe_quartet,
    get_correlation_preset,
)
from snakemath.correlation.solvers import (
    coefficient_of_determination,
    interpret_correlation,
    linear_regression,
    multiple_regression,
    pearson_correlation,
    predict_y,
    regression_confidence_intervals,
)

__all__ = [
    # Results
    "Point",
    "CorrelationInterpretation",
    "LinearRegressionResult",
    "MultipleRegressionResult",
    "RegressionConfidenceIntervals",
    "CoefficientInterval",
    "ResidualAnalysis",
    # Correlation and fitting
    "pearson_correlation",
    "interpret_correlation",
    "coefficient_of_determination",
    "linear_regression",
    "predict_y",
    "regression_confidence_intervals",
    "multiple_regression",
    # Residuals
    "calculate_residuals",
    "analyze_residuals",
    "standardized_residuals",
    "standard_error_of_estimate",
    "total_sum_of_squares",
    "r_squared_from_residuals",
    # Influence
    "leverage",
    "leverage_values",
    "cooks_distance",
    "identify_outliers",
    # Datasets
    "PairedDataset",
    "CorrelationPreset",
    "ANSCOMBE_QUARTET",
    "CORRELATION_PRESETS",
    "get_anscombe_quartet",
    "get_anscombe_dataset",
    "get_correlation_preset",
    "generate_correlated_data",
    # Utilities
    "points_to_arrays",
    "arrays_to_points",
    "generate_regression_line_points",
    "format_correlation",
    "format_r_squared",
    "format_regression_equation",
]
