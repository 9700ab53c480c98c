"""
Chart adapters for vectors, matrices, functions and fit results.

Every adapter converts its input into prepared series and default titles,
raising before anything is bound, then hands them to `bind`. Call an adapter
on an existing chart to refresh it, or through `to_chart` to build a new one.
"""

from typing import Any, Callable, Mapping, Optional, Sequence

import numpy as np

from pynumchart.chart.binding import (
    bind,
    bind_xy,
    bind_y,
    check_index,
    label_points,
    sample_function,
)
from pynumchart.chart.model import NO_MARKER, Chart, SeriesKind
from pynumchart.chart.units import AxisUnit
from pynumchart.config import ChartStyle, resolve_style
from pynumchart.errors import SizeMismatchError
from pynumchart.numeric.adapters import format_polynomial, real_matrix, real_view
from pynumchart.numeric.results import (
    Bracket,
    FunctionFit,
    Histogram,
    LeastSquares,
    PeakFinder,
    PolynomialFit,
)


def _unit(x_unit: Optional[AxisUnit]) -> AxisUnit:
    return x_unit if x_unit is not None else AxisUnit()


def update_vector(
    chart: Chart,
    y: Any,
    x_unit: Optional[AxisUnit] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot a real or complex vector against an implicit x-axis.

    Complex vectors are plotted as magnitudes.

    Parameters
    ----------
    chart : Chart
        Chart to update.
    y : array-like
        The vector.
    x_unit : Optional[AxisUnit], default=None
        Generates the x values; defaults to the sample index.
    style : Optional[ChartStyle], default=None
        Chart style.

    Returns
    -------
    Chart
        The updated chart.
    """
    unit = _unit(x_unit)
    values, is_complex = real_view(y)
    series = bind_xy(unit.values(len(values)), values, SeriesKind.LINE, NO_MARKER)
    title = "ComplexVector" if is_complex else "Vector"
    y_title = "Abs(Value)" if is_complex else "Value"
    return bind(chart, series, title, unit.name, y_title, style)


def update_xy(chart: Chart, x: Any, y: Any, style: Optional[ChartStyle] = None) -> Chart:
    """Scatter one vector against another; complex vectors are plotted as magnitudes."""
    style = resolve_style(style)
    x_values, x_complex = real_view(x)
    y_values, y_complex = real_view(y)
    series = bind_xy(x_values, y_values, SeriesKind.SCATTER, style.marker)
    return bind(
        chart,
        series,
        "Vector vs. Vector",
        "Abs(x)" if x_complex else "x",
        "Abs(y)" if y_complex else "y",
        style,
    )


def update_vectors(
    chart: Chart,
    data: Sequence[Any],
    x_unit: Optional[AxisUnit] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """Plot several vectors as lines labelled "Vector 0", "Vector 1", ..."""
    unit = _unit(x_unit)
    series_list = []
    for i, vector in enumerate(data):
        values, _ = real_view(vector)
        series_list.append(
            bind_xy(unit.values(len(values)), values, SeriesKind.LINE, NO_MARKER, f"Vector {i}")
        )
    return bind(chart, series_list, "Vector[]", unit.name, "Value", style)


def update_matrix(
    chart: Chart,
    data: Any,
    x_unit: Optional[AxisUnit] = None,
    col_indices: Optional[Sequence[int]] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot matrix columns as lines against an implicit x-axis.

    Parameters
    ----------
    chart : Chart
        Chart to update.
    data : array-like
        2-D matrix; complex entries are plotted as magnitudes.
    x_unit : Optional[AxisUnit], default=None
        Generates the x values; defaults to the row index.
    col_indices : Optional[Sequence[int]], default=None
        Columns to plot. All columns when omitted.
    style : Optional[ChartStyle], default=None
        Chart style.

    Returns
    -------
    Chart
        The updated chart.

    Raises
    ------
    IndexRangeError
        If a column index is out of range. Nothing is bound in that case.
    """
    unit = _unit(x_unit)
    matrix, _ = real_matrix(data)
    rows, cols = matrix.shape
    if col_indices is None:
        col_indices = range(cols)
    col_indices = [check_index(int(c), cols, "column index") for c in col_indices]

    x = unit.values(rows)
    series_list = [
        bind_xy(x, matrix[:, c], SeriesKind.LINE, NO_MARKER, f"Col {c}") for c in col_indices
    ]
    return bind(chart, series_list, "Matrix", unit.name, "Value", style)


def update_matrix_xy(
    chart: Chart, data: Any, x_col: int, y_col: int, style: Optional[ChartStyle] = None
) -> Chart:
    """Scatter one matrix column against another."""
    style = resolve_style(style)
    matrix, _ = real_matrix(data)
    cols = matrix.shape[1]
    check_index(x_col, cols, "column index")
    check_index(y_col, cols, "column index")
    series = bind_xy(matrix[:, x_col], matrix[:, y_col], SeriesKind.SCATTER, style.marker)
    return bind(chart, series, "Matrix", f"Col {x_col}", f"Col {y_col}", style)


def update_least_squares(
    chart: Chart,
    lsq: LeastSquares,
    y: Any,
    x_unit: Optional[AxisUnit] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot observations and the least squares prediction.

    Raises
    ------
    SizeMismatchError
        If `y` and ``lsq.yhat`` differ in length.
    """
    style = resolve_style(style)
    unit = _unit(x_unit)
    y_values, _ = real_view(y)
    yhat = np.asarray(lsq.yhat, dtype=np.float64)
    if len(y_values) != len(yhat):
        raise SizeMismatchError("y and yhat of unequal length", len(y_values), len(yhat))

    x = unit.values(len(y_values))
    series_list = [
        bind_xy(x, y_values, SeriesKind.SCATTER, style.marker, "Y"),
        bind_xy(x, yhat, SeriesKind.LINE, NO_MARKER, "YHat"),
    ]
    titles = ["LeastSquares", f"RSS = {lsq.residual_sum_of_squares:.4g}"]
    return bind(chart, series_list, titles, unit.name, "Value", style)


def update_function(
    chart: Chart,
    f: Callable[[float], float],
    xmin: float,
    xmax: float,
    num_values: int,
    point_labels: Optional[Mapping[float, str]] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot a function sampled at evenly spaced points.

    Parameters
    ----------
    chart : Chart
        Chart to update.
    f : Callable[[float], float]
        The function.
    xmin, xmax : float
        Sampling range.
    num_values : int
        Number of samples.
    point_labels : Optional[Mapping[float, str]], default=None
        Key x-values to mark and label on the curve.
    style : Optional[ChartStyle], default=None
        Chart style.

    Returns
    -------
    Chart
        The updated chart.
    """
    style = resolve_style(style)
    series = sample_function(f, xmin, xmax, num_values)
    if point_labels:
        label_points(series, f, point_labels, style.marker, style.point_label_orientation)
    return bind(chart, series, "Function", "x", "f(x)", style)


def update_polynomial(
    chart: Chart,
    poly: Any,
    xmin: float,
    xmax: float,
    num_values: int,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """Plot a `numpy.polynomial.Polynomial`, with its formula as subtitle."""
    series = sample_function(poly, xmin, xmax, num_values)
    titles = ["Polynomial", f"f(x) = {format_polynomial(poly)}"]
    return bind(chart, series, titles, "x", "f(x)", style)


def update_spline(
    chart: Chart,
    spline: Any,
    num_values: int,
    xmin: Optional[float] = None,
    xmax: Optional[float] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot a SciPy spline with its knots.

    Parameters
    ----------
    chart : Chart
        Chart to update.
    spline : scipy.interpolate.PPoly-like
        Callable spline exposing its breakpoints as ``spline.x``
        (`CubicSpline`, `Akima1DInterpolator`, ...).
    num_values : int
        Number of samples of the spline.
    xmin, xmax : Optional[float], default=None
        Sampling range; defaults to the span of the knots.
    style : Optional[ChartStyle], default=None
        Chart style.

    Returns
    -------
    Chart
        The updated chart.
    """
    style = resolve_style(style)
    knots = np.asarray(spline.x, dtype=np.float64)
    lo = knots[0] if xmin is None else xmin
    hi = knots[-1] if xmax is None else xmax

    points = bind_xy(knots, spline(knots), SeriesKind.SCATTER, style.marker, "Points")
    curve = sample_function(lambda v: float(spline(v)), lo, hi, num_values)
    curve.label = "Spline"
    return bind(chart, [points, curve], "Spline", "x", "f(x)", style)


def update_parameterized_function(
    chart: Chart,
    f: Callable[..., float],
    parameters: Sequence[float],
    xmin: float,
    xmax: float,
    num_values: int,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """Plot ``f(x, *parameters)`` with the parameters held fixed."""
    params = list(parameters)
    series = sample_function(lambda x: f(x, *params), xmin, xmax, num_values)
    return bind(chart, series, "ParameterizedFunction", "x", "f(x)", style)


def update_peaks(
    chart: Chart,
    finder: PeakFinder,
    xmin: Optional[float] = None,
    xmax: Optional[float] = None,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot the peak finder input and its located peaks.

    Each peak is labelled with its "(x, y)" location. Both series are clipped
    to ``[xmin, xmax]`` when given; call ``finder.locate_peaks()`` first.

    Parameters
    ----------
    chart : Chart
        Chart to update.
    finder : PeakFinder
        Peak finder with located peaks.
    xmin, xmax : Optional[float], default=None
        Display range along x.
    style : Optional[ChartStyle], default=None
        Chart style.

    Returns
    -------
    Chart
        The updated chart.
    """
    style = resolve_style(style)
    y = finder.input_data
    x = np.arange(len(y), dtype=np.float64) * finder.abscissa_interval
    lo = -np.inf if xmin is None else xmin
    hi = np.inf if xmax is None else xmax

    keep = (x >= lo) & (x <= hi)
    data = bind_xy(x[keep], y[keep], SeriesKind.LINE, NO_MARKER, "Input Data")

    peaks = [p for p in finder.peaks if lo <= p.x <= hi]
    marks = bind_xy(
        [p.x for p in peaks], [p.y for p in peaks], SeriesKind.SCATTER, style.marker, "Peaks"
    )
    marks.label_orientation = style.point_label_orientation
    for point in marks:
        point.label = f"({point.x:.2f}, {point.y:.2f})"

    return bind(chart, [data, marks], "PeakFinder", "x", "y", style)


def update_bracket(
    chart: Chart, bracket: Bracket, num_values: int, style: Optional[ChartStyle] = None
) -> Chart:
    """
    Plot the bracketed function with its three bracket points labelled.

    The function is sampled over the bracket widened by a quarter of its
    range on each side.
    """
    style = resolve_style(style)
    margin = (bracket.upper - bracket.lower) / 4.0
    series = sample_function(
        bracket.function, bracket.lower - margin, bracket.upper + margin, num_values
    )
    labels = {bracket.lower: "Lower", bracket.interior: "Interior", bracket.upper: "Upper"}
    label_points(series, bracket.function, labels, style.marker, style.point_label_orientation)
    return bind(chart, series, "Bracket", "x", "f(x)", style)


def update_histogram(
    chart: Chart, histogram: Histogram, style: Optional[ChartStyle] = None
) -> Chart:
    """Plot histogram counts as horizontal bars, one per bin."""
    series = bind_y(histogram.counts, SeriesKind.BAR, NO_MARKER)
    return bind(chart, series, "Histogram", "Count", "Bin", style)


def update_polynomial_fit(
    chart: Chart,
    fit: PolynomialFit,
    x: Any,
    y: Any,
    num_values: int,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """Plot the fitted data points and the least squares polynomial over their x span."""
    style = resolve_style(style)
    points = bind_xy(x, y, SeriesKind.SCATTER, style.marker, "Points")
    xs = points.x_values
    lo, hi = (xs.min(), xs.max()) if len(xs) else (0.0, 0.0)
    curve = sample_function(fit.polynomial, lo, hi, num_values if len(xs) else 0)
    curve.label = "Polynomial"
    titles = ["PolynomialLeastSquares", f"f(x) = {fit.format()}"]
    return bind(chart, [points, curve], titles, "x", "f(x)", style)


def update_function_fit(
    chart: Chart,
    fit: FunctionFit,
    x: Any,
    y: Any,
    solution: Sequence[float],
    num_values: int,
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Plot the fitted data points and the model evaluated at `solution`.

    Parameters
    ----------
    chart : Chart
        Chart to update.
    fit : FunctionFit
        The fitter; supplies the model function.
    x, y : array-like
        The fitted observations.
    solution : Sequence[float]
        Parameter values, usually ``fit.fit(x, y, start)``.
    num_values : int
        Number of samples of the model over the x span of the data.
    style : Optional[ChartStyle], default=None
        Chart style.

    Returns
    -------
    Chart
        The updated chart.
    """
    style = resolve_style(style)
    params = list(np.asarray(solution, dtype=np.float64))
    points = bind_xy(x, y, SeriesKind.SCATTER, style.marker, "Points")
    xs = points.x_values
    lo, hi = (xs.min(), xs.max()) if len(xs) else (0.0, 0.0)
    model = lambda v: float(fit.function(v, *params))  # noqa: E731
    curve = sample_function(model, lo, hi, num_values if len(xs) else 0)
    curve.label = "Function"
    title = "BoundedFunctionFitter" if fit.bounded else "FunctionFitter"
    return bind(chart, [points, curve], title, "x", "f(x)", style)
