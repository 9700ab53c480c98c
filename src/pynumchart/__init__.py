"""
PyNumChart: charts for numeric and statistical results

A library for binding NumPy, SciPy and pandas results to charts that keep
caller customisation across refreshes, rendered with matplotlib.
"""

# Import from chart subpackage
from pynumchart.chart import (
    AxisUnit,
    Chart,
    Series,
    SeriesKind,
    bind,
    new_chart,
    render,
    save,
    show,
    to_chart,
)
from pynumchart.config import DEFAULT_STYLE, ChartStyle, configure_logging
from pynumchart.errors import (
    ChartDataError,
    IndexRangeError,
    InvalidArgumentError,
    SizeMismatchError,
)

# Import from numeric subpackage
from pynumchart.numeric import (
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
    update_bracket,
    update_clusters,
    update_column,
    update_column_list,
    update_columns,
    update_distribution,
    update_frame,
    update_frame_xy,
    update_function,
    update_function_fit,
    update_goodness_of_fit,
    update_histogram,
    update_least_squares,
    update_linear_regression,
    update_matrix,
    update_matrix_xy,
    update_parameterized_function,
    update_pca,
    update_pca_scores,
    update_peaks,
    update_polynomial,
    update_polynomial_fit,
    update_spline,
    update_vector,
    update_vectors,
    update_xy,
)

__all__ = [
    # General charting
    "Chart",
    "Series",
    "SeriesKind",
    "AxisUnit",
    "bind",
    "new_chart",
    "to_chart",
    "render",
    "show",
    "save",
    # Configuration and errors
    "ChartStyle",
    "DEFAULT_STYLE",
    "configure_logging",
    "ChartDataError",
    "SizeMismatchError",
    "IndexRangeError",
    "InvalidArgumentError",
    # Numeric charts
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
