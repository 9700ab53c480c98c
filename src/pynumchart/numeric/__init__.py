"""
Numeric and statistical components for PyNumChart.

This package contains the chart adapters for NumPy, SciPy and pandas objects
and the result wrappers they consume.
"""

from pynumchart.numeric.core import (
    update_bracket,
    update_function,
    update_function_fit,
    update_histogram,
    update_least_squares,
    update_matrix,
    update_matrix_xy,
    update_parameterized_function,
    update_peaks,
    update_polynomial,
    update_polynomial_fit,
    update_spline,
    update_vector,
    update_vectors,
    update_xy,
)
from pynumchart.numeric.results import (
    PCA,
    Bracket,
    ClusterSet,
    FunctionFit,
    GoodnessOfFit,
    Histogram,
    LeastSquares,
    LinearRegression,
    PeakFinder,
    PolynomialFit,
)
from pynumchart.numeric.stats import (
    update_clusters,
    update_column,
    update_column_list,
    update_columns,
    update_distribution,
    update_frame,
    update_frame_xy,
    update_goodness_of_fit,
    update_linear_regression,
    update_pca,
    update_pca_scores,
)

__all__ = [
    # Vector, matrix and function charts
    "update_vector",
    "update_xy",
    "update_vectors",
    "update_matrix",
    "update_matrix_xy",
    "update_least_squares",
    "update_function",
    "update_polynomial",
    "update_spline",
    "update_parameterized_function",
    "update_peaks",
    "update_bracket",
    "update_histogram",
    "update_polynomial_fit",
    "update_function_fit",
    # Statistical charts
    "update_column",
    "update_columns",
    "update_column_list",
    "update_frame",
    "update_frame_xy",
    "update_distribution",
    "update_linear_regression",
    "update_clusters",
    "update_pca",
    "update_pca_scores",
    "update_goodness_of_fit",
    # Result wrappers
    "LeastSquares",
    "PolynomialFit",
    "FunctionFit",
    "PeakFinder",
    "Bracket",
    "Histogram",
    "ClusterSet",
    "PCA",
    "LinearRegression",
    "GoodnessOfFit",
]
