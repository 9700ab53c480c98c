"""
Chart adapters for pandas data and statistical results.
"""

from typing import Any, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import scipy.stats
from loguru import logger

from pynumchart.chart.binding import (
    bind,
    bind_xy,
    check_index,
    partition_clusters,
    sample_points,
)
from pynumchart.chart.model import NO_MARKER, Chart, Series, SeriesKind
from pynumchart.chart.units import AxisUnit
from pynumchart.config import ChartStyle, resolve_style
from pynumchart.errors import InvalidArgumentError
from pynumchart.numeric.adapters import column_values, is_numeric_column
from pynumchart.numeric.results import PCA, ClusterSet, GoodnessOfFit, LinearRegression

# Probability range sampled for distributions
DISTRIBUTION_LOWER_PROBABILITY = 0.0001
DISTRIBUTION_UPPER_PROBABILITY = 0.9999

DISTRIBUTION_FUNCTIONS = ("pdf", "cdf")


def _unit(x_unit: Optional[AxisUnit]) -> AxisUnit:
    return x_unit if x_unit is not None else AxisUnit()


def _column_name(column: pd.Series, default: str = "Value") -> str:
    return default if column.name is None else str(column.name)


def update_column(
    chart: Chart,
    y: pd.Series,
    x_unit: Optional[AxisUnit] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot a numeric pandas column against an implicit x-axis.

    Raises
    ------
    InvalidArgumentError
        If the column is not numeric.
    """
    unit = _unit(x_unit)
    values = column_values(y)
    name = _column_name(y)
    series = bind_xy(unit.values(len(values)), values, SeriesKind.LINE, NO_MARKER, name)
    return bind(chart, series, "Column", unit.name, name, style)


def update_columns(
    chart: Chart, x: pd.Series, y: pd.Series, style: Optional[ChartStyle] = None
) -> Chart:
    """
    Scatter one numeric column against another.

    Raises
    ------
    InvalidArgumentError
        If either column is not numeric.
    SizeMismatchError
        If the columns differ in length.
    """
    style = resolve_style(style)
    series = bind_xy(column_values(x), column_values(y), SeriesKind.SCATTER, style.marker)
    return bind(
        chart, series, "Column vs. Column", _column_name(x, "x"), _column_name(y, "y"), style
    )


def update_column_list(
    chart: Chart,
    data: Sequence[pd.Series],
    x_unit: Optional[AxisUnit] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """Plot each numeric column of `data` as a line; non-numeric columns are skipped."""
    unit = _unit(x_unit)
    series_list = []
    for column in data:
        if not is_numeric_column(column):
            logger.debug(f"Skipping non-numeric column '{column.name}'")
            continue
        values = column_values(column)
        series_list.append(
            bind_xy(
                unit.values(len(values)), values, SeriesKind.LINE, NO_MARKER, _column_name(column)
            )
        )
    return bind(chart, series_list, "Column[]", unit.name, "Value", style)


def update_frame(
    chart: Chart,
    df: pd.DataFrame,
    x_unit: Optional[AxisUnit] = None,
    col_indices: Optional[Sequence[int]] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot DataFrame columns as lines against an implicit x-axis.

    Parameters
    ----------
    chart : Chart
        Chart to update.
    df : pd.DataFrame
        The data.
    x_unit : Optional[AxisUnit], default=None
        Generates the x values; defaults to the row position.
    col_indices : Optional[Sequence[int]], default=None
        Positions of the columns to plot. Every numeric column when omitted.
    style : Optional[ChartStyle], default=None
        Chart style.

    Returns
    -------
    Chart
        The updated chart.

    Raises
    ------
    IndexRangeError
        If a column position is out of range.
    InvalidArgumentError
        If a selected column is not numeric.
    """
    unit = _unit(x_unit)
    if col_indices is None:
        columns = [df.iloc[:, i] for i in range(df.shape[1]) if is_numeric_column(df.iloc[:, i])]
    else:
        columns = [df.iloc[:, check_index(int(i), df.shape[1], "column index")] for i in col_indices]

    x = unit.values(len(df))
    series_list = [
        bind_xy(x, column_values(c), SeriesKind.LINE, NO_MARKER, _column_name(c)) for c in columns
    ]
    return bind(chart, series_list, "DataFrame", unit.name, "Value", style)


def update_frame_xy(
    chart: Chart, df: pd.DataFrame, x_col: int, y_col: int, style: Optional[ChartStyle] = None
) -> Chart:
    """Scatter two DataFrame columns, selected by position; axis titles are the column names."""
    style = resolve_style(style)
    cols = df.shape[1]
    x = df.iloc[:, check_index(x_col, cols, "column index")]
    y = df.iloc[:, check_index(y_col, cols, "column index")]
    series = bind_xy(column_values(x), column_values(y), SeriesKind.SCATTER, style.marker)
    return bind(chart, series, "DataFrame", _column_name(x, "x"), _column_name(y, "y"), style)


def _is_discrete(dist: Any) -> bool:
    return isinstance(getattr(dist, "dist", None), scipy.stats.rv_discrete)


def _distribution_parameters(dist: Any) -> List[Tuple[str, float]]:
    """Name/value pairs of a frozen distribution's shapes, loc and scale."""
    generator = dist.dist
    names = [s.strip() for s in generator.shapes.split(",")] if generator.shapes else []
    names.append("loc")
    if not _is_discrete(dist):
        names.append("scale")

    args = list(dist.args)
    kwds = dict(dist.kwds)
    defaults = {"loc": 0.0, "scale": 1.0}
    params = []
    for i, name in enumerate(names):
        if i < len(args):
            value = args[i]
        else:
            value = kwds.get(name, defaults.get(name))
        if value is not None:
            params.append((name, float(value)))
    return params


def update_distribution(
    chart: Chart,
    dist: Any,
    function: str = "pdf",
    num_values: int = 100,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot the density or cumulative distribution of a frozen SciPy distribution.

    Continuous distributions are sampled at `num_values` points between the
    0.0001 and 0.9999 quantiles and drawn as a line. Discrete distributions are
    drawn as columns at every integer in that range, and "pdf" plots the PMF.

    Parameters
    ----------
    chart : Chart
        Chart to update.
    dist : scipy.stats frozen distribution
        e.g. ``scipy.stats.norm(0, 1)`` or ``scipy.stats.poisson(3)``.
    function : str, default="pdf"
        "pdf" or "cdf".
    num_values : int, default=100
        Number of samples for continuous distributions.
    style : Optional[ChartStyle], default=None
        Chart style.

    Returns
    -------
    Chart
        The updated chart.

    Raises
    ------
    InvalidArgumentError
        If `function` is not "pdf" or "cdf".
    """
    if function not in DISTRIBUTION_FUNCTIONS:
        raise InvalidArgumentError(
            f"Invalid distribution function '{function}'. Valid options: {list(DISTRIBUTION_FUNCTIONS)}"
        )

    lower = dist.ppf(DISTRIBUTION_LOWER_PROBABILITY)
    upper = dist.ppf(DISTRIBUTION_UPPER_PROBABILITY)
    discrete = _is_discrete(dist)

    if discrete:
        x = np.arange(np.floor(lower), np.ceil(upper) + 1.0, dtype=np.float64)
        evaluate = dist.pmf if function == "pdf" else dist.cdf
        kind = SeriesKind.COLUMN
        y_title = "PMF" if function == "pdf" else "CDF"
    else:
        x = sample_points(lower, upper, num_values)
        evaluate = getattr(dist, function)
        kind = SeriesKind.LINE
        y_title = function.upper()

    name = dist.dist.name
    series = bind_xy(x, evaluate(x), kind, NO_MARKER, name)
    params = ", ".join(f"{k} = {v:g}" for k, v in _distribution_parameters(dist))
    titles = [f"{name} distribution", params]
    return bind(chart, series, titles, "x", y_title, style)


def update_linear_regression(
    chart: Chart,
    regression: LinearRegression,
    predictor_index: int,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot observations and the fitted line against one predictor.

    The "Predicted" line joins the predictions at the smallest and largest
    value of the chosen predictor, with every other predictor held at zero.

    Raises
    ------
    IndexRangeError
        If `predictor_index` is not a predictor column.
    """
    style = resolve_style(style)
    matrix = regression.predictor_matrix
    check_index(predictor_index, matrix.shape[1], "predictor index")

    x = matrix[:, predictor_index]
    observed = bind_xy(x, regression.observations, SeriesKind.SCATTER, style.marker, "Observed")

    predicted = Series(kind=SeriesKind.LINE, label="Predicted")
    if len(x):
        projection = np.zeros_like(matrix)
        projection[:, predictor_index] = x
        yhat = regression.predicted_observations(projection)
        order = np.argsort(x, kind="stable")
        for i in (order[0], order[-1]):
            predicted.add(x[i], yhat[i])

    return bind(
        chart,
        [observed, predicted],
        "LinearRegression",
        f"Independent Variable {predictor_index}",
        "Dependent Variable",
        style,
    )


def update_clusters(
    chart: Chart,
    clusters: ClusterSet,
    data: Any,
    x_col: int,
    y_col: int,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """Scatter two data columns with one series per cluster."""
    style = resolve_style(style)
    series_list = partition_clusters(clusters, data, x_col, y_col, style.marker)
    return bind(chart, series_list, "ClusterSet", f"Col {x_col}", f"Col {y_col}", style)


def update_pca(chart: Chart, pca: PCA, style: Optional[ChartStyle] = None) -> Chart:
    """Plot the variance proportions and their cumulative sum per principal component."""
    proportions = np.asarray(pca.variance_proportions, dtype=np.float64)
    x = np.arange(len(proportions), dtype=np.float64)
    series_list = [
        bind_xy(x, proportions, SeriesKind.LINE, NO_MARKER, "Variance Proportions"),
        bind_xy(
            x,
            pca.cumulative_variance_proportions,
            SeriesKind.LINE,
            NO_MARKER,
            "Cumulative Variance Proportions",
        ),
    ]
    return bind(chart, series_list, "PCA", "Principal Component", "Proportion", style)


def update_pca_scores(
    chart: Chart, pca: PCA, x_index: int, y_index: int, style: Optional[ChartStyle] = None
) -> Chart:
    """Scatter the scores of two principal components."""
    style = resolve_style(style)
    scores = np.asarray(pca.scores, dtype=np.float64)
    check_index(x_index, scores.shape[1], "component index")
    check_index(y_index, scores.shape[1], "component index")
    series = bind_xy(scores[:, x_index], scores[:, y_index], SeriesKind.SCATTER, style.marker)
    return bind(chart, series, "PCA Scores", f"PCA {x_index}", f"PCA {y_index}", style)


def update_goodness_of_fit(
    chart: Chart, gof: GoodnessOfFit, alpha: float = 0.05, style: Optional[ChartStyle] = None
) -> Chart:
    """
    Plot fitted parameter values with ``1 - alpha`` confidence interval error bars.

    Parameters
    ----------
    chart : Chart
        Chart to update.
    gof : GoodnessOfFit
        Regression goodness of fit.
    alpha : float, default=0.05
        Significance level of the intervals.
    style : Optional[ChartStyle], default=None
        Chart style.

    Returns
    -------
    Chart
        The updated chart.
    """
    series = Series(kind=SeriesKind.COLUMN, label="Parameters", error_bars=True)
    for i, param in enumerate(gof.parameters):
        lo, hi = param.confidence_interval(alpha)
        series.add(i, param.value, error=(param.value - lo, hi - param.value))

    titles = [
        "GoodnessOfFit",
        f"R2 = {gof.r_squared:.4f}, Adjusted R2 = {gof.adjusted_r_squared:.4f}",
        f"F-statistic: {gof.f_statistic:.4g} on {gof.model_degrees_of_freedom} and "
        f"{gof.error_degrees_of_freedom} DF, p-value: {gof.f_statistic_p_value:.4g}",
    ]
    return bind(chart, series, titles, "Parameter", "Value", style)
