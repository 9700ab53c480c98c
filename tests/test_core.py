"""Tests for the vector, matrix, function and fit chart adapters."""

import numpy as np
import pytest
from numpy.polynomial import Polynomial
from pytest import approx
from scipy.interpolate import CubicSpline

from pynumchart.chart import AxisUnit, Chart, SeriesKind
from pynumchart.errors import IndexRangeError, SizeMismatchError
from pynumchart.numeric import (
    Bracket,
    FunctionFit,
    Histogram,
    LeastSquares,
    PeakFinder,
    PolynomialFit,
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


def _texts(chart: Chart):
    return [t.text for t in chart.titles]


def test_update_vector_real(chart: Chart) -> None:
    """A real vector is plotted against the axis unit."""

    update_vector(chart, [1.0, 2.0, 3.0], AxisUnit(0.0, 0.1, "Time (s)"))

    assert _texts(chart) == ["Vector"]
    assert chart.x_axis.title == "Time (s)"
    assert chart.y_axis.title == "Value"
    assert list(chart.series[0].x_values) == approx([0.0, 0.1, 0.2])


def test_update_vector_complex_uses_magnitude(chart: Chart) -> None:
    """Complex vectors are plotted as magnitudes with Abs titles."""

    update_vector(chart, np.array([3 + 4j, 1j]))

    assert _texts(chart) == ["ComplexVector"]
    assert chart.y_axis.title == "Abs(Value)"
    assert list(chart.series[0].y_values) == approx([5.0, 1.0])
    assert chart.x_axis.title == "Index"


def test_update_xy_scatter(chart: Chart) -> None:
    """Two vectors make one scatter series."""

    update_xy(chart, [1, 2], np.array([1 + 1j, 2j]))

    assert chart.series[0].kind == SeriesKind.SCATTER
    assert chart.x_axis.title == "x"
    assert chart.y_axis.title == "Abs(y)"
    assert _texts(chart) == ["Vector vs. Vector"]


def test_update_vectors_labels_each_vector(chart: Chart) -> None:
    """Each vector gets its own labelled line and a legend is added."""

    update_vectors(chart, [[1, 2, 3], [4, 5]])

    assert [s.label for s in chart.series] == ["Vector 0", "Vector 1"]
    assert len(chart.series[1]) == 2
    assert len(chart.legends) == 1
    assert _texts(chart) == ["Vector[]"]


def test_update_matrix_selected_columns(chart: Chart) -> None:
    """Selected columns are plotted in the order given."""

    data = np.arange(12.0).reshape(4, 3)

    update_matrix(chart, data, col_indices=[2, 0])

    assert [s.label for s in chart.series] == ["Col 2", "Col 0"]
    assert list(chart.series[0].y_values) == [2.0, 5.0, 8.0, 11.0]
    assert _texts(chart) == ["Matrix"]


def test_update_matrix_validates_before_binding(chart: Chart) -> None:
    """An out-of-range column index leaves the chart empty."""

    with pytest.raises(IndexRangeError):
        update_matrix(chart, np.zeros((4, 3)), col_indices=[0, 3])

    assert len(chart.series) == 0
    assert chart.titles == []


def test_update_matrix_xy(chart: Chart) -> None:
    """Two matrix columns make one scatter with "Col i" axis titles."""

    data = np.arange(6.0).reshape(3, 2)

    update_matrix_xy(chart, data, 1, 0)

    assert chart.x_axis.title == "Col 1"
    assert chart.y_axis.title == "Col 0"
    assert [(p.x, p.y) for p in chart.series[0]] == [(1.0, 0.0), (3.0, 2.0), (5.0, 4.0)]
    with pytest.raises(IndexRangeError):
        update_matrix_xy(chart, data, 2, 0)


def test_update_least_squares(chart: Chart) -> None:
    """Observations and predictions are plotted with the RSS as subtitle."""

    x = np.arange(5.0)
    y = 1.0 + 2.0 * x
    lsq = LeastSquares(np.column_stack([np.ones(5), x]), y)

    update_least_squares(chart, lsq, y)

    assert [s.label for s in chart.series] == ["Y", "YHat"]
    assert chart.series[0].kind == SeriesKind.SCATTER
    assert chart.series[1].kind == SeriesKind.LINE
    assert chart.titles[0].text == "LeastSquares"
    assert chart.titles[1].text.startswith("RSS = ")
    assert list(chart.series[1].y_values) == approx(list(y))


def test_update_least_squares_rejects_mismatch(chart: Chart) -> None:
    """y and yhat must have the same length."""

    lsq = LeastSquares(np.column_stack([np.ones(3), np.arange(3.0)]), [1.0, 2.0, 3.0])

    with pytest.raises(SizeMismatchError):
        update_least_squares(chart, lsq, [1.0, 2.0])


def test_update_function_with_point_labels(chart: Chart) -> None:
    """Labelled key values are marked on the sampled curve."""

    update_function(chart, np.sin, 0.0, 3.0, 4, {1.5: "mid"})

    series = chart.series[0]
    assert len(series) == 5
    labelled = [p for p in series if p.label]
    assert len(labelled) == 1
    assert labelled[0].x == approx(1.5)
    assert labelled[0].y == approx(np.sin(1.5))
    assert labelled[0].marker == "o"
    assert chart.x_axis.title == "x"
    assert chart.y_axis.title == "f(x)"


def test_update_polynomial_formats_formula(chart: Chart) -> None:
    """The subtitle shows the polynomial with two decimals."""

    update_polynomial(chart, Polynomial([4, 2, 5, -2, 3]), -1.0, 1.0, 10)

    assert _texts(chart) == ["Polynomial", "f(x) = 4.00 + 2.00x + 5.00x^2 - 2.00x^3 + 3.00x^4"]
    assert len(chart.series[0]) == 10


def test_update_spline_plots_knots_and_curve(chart: Chart) -> None:
    """Knots are scattered and the spline is sampled over the knot span."""

    spline = CubicSpline([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 0.0, 1.0])

    update_spline(chart, spline, 10)

    points, curve = chart.series
    assert points.label == "Points"
    assert len(points) == 4
    assert curve.label == "Spline"
    assert len(curve) == 10
    assert curve[0].x == approx(0.0)
    assert curve[-1].x == approx(3.0)


def test_update_parameterized_function(chart: Chart) -> None:
    """Parameters are passed after x."""

    update_parameterized_function(chart, lambda x, a, b: a * x + b, (2.0, 1.0), 0.0, 1.0, 3)

    assert list(chart.series[0].y_values) == approx([1.0, 2.0, 3.0])
    assert _texts(chart) == ["ParameterizedFunction"]


def test_update_peaks_clips_and_labels(chart: Chart) -> None:
    """Peaks of a sine wave are labelled with their location, clipped to the range."""

    step = 0.1
    finder = PeakFinder(np.sin(step * np.arange(201)), 5, 2, abscissa_interval=step)
    finder.locate_peaks()

    update_peaks(chart, finder, 5.0, 20.0)

    data, peaks = chart.series
    assert data.label == "Input Data"
    assert peaks.label == "Peaks"
    assert data.x_values.min() >= 5.0
    assert data.x_values.max() <= 20.0
    assert len(peaks) == 2
    assert peaks[0].label.startswith("(7.85")
    assert _texts(chart) == ["PeakFinder"]


def test_update_bracket_labels_three_points(chart: Chart) -> None:
    """The bracket points are labelled on the function curve."""

    bracket = Bracket(lambda x: (x - 2.0) ** 2, 0.0, 1.0)

    update_bracket(chart, bracket, 20)

    labels = sorted(p.label for p in chart.series[0] if p.label)
    assert labels == ["Interior", "Lower", "Upper"]
    xs = chart.series[0].x_values
    assert np.all(np.diff(xs) > 0)
    margin = (bracket.upper - bracket.lower) / 4.0
    assert xs[0] == approx(bracket.lower - margin)
    assert _texts(chart) == ["Bracket"]


def test_update_bracket_keeps_existing_title(chart: Chart) -> None:
    """A caller title survives a bracket refresh."""

    bracket = Bracket(lambda x: (x - 2.0) ** 2, 0.0, 1.0)
    update_bracket(chart, bracket, 20)
    chart.titles[0].text = "Minimum search"

    update_bracket(chart, bracket, 20)

    assert _texts(chart) == ["Minimum search"]


def test_update_histogram(chart: Chart) -> None:
    """Histogram counts become one horizontal bar series."""

    update_histogram(chart, Histogram([1, 2, 2, 3, 3, 3], bins=3))

    assert chart.series[0].kind == SeriesKind.BAR
    assert list(chart.series[0].y_values) == [1.0, 2.0, 3.0]
    assert chart.x_axis.title == "Count"
    assert chart.y_axis.title == "Bin"


def test_update_polynomial_fit(chart: Chart) -> None:
    """Data points and the fitted polynomial over the data span."""

    x = np.arange(5.0)
    y = 1.0 + x**2
    fit = PolynomialFit(x, y, 2)

    update_polynomial_fit(chart, fit, x, y, 9)

    points, curve = chart.series
    assert points.label == "Points"
    assert curve.label == "Polynomial"
    assert list(curve.x_values) == approx(list(np.linspace(0.0, 4.0, 9)))
    assert list(curve.y_values) == approx(list(1.0 + np.linspace(0.0, 4.0, 9) ** 2))
    assert chart.titles[0].text == "PolynomialLeastSquares"
    assert chart.titles[1].text.startswith("f(x) = 1.00")


@pytest.mark.parametrize(
    "bounds, title",
    [(None, "FunctionFitter"), (([0.0, 0.0], [10.0, 10.0]), "BoundedFunctionFitter")],
)
def test_update_function_fit(chart: Chart, bounds, title: str) -> None:
    """The fitted model is drawn through the data; bounded fits get their own title."""

    x = np.arange(6.0)
    y = 2.0 * x + 1.0
    fit = FunctionFit(lambda v, a, b: a * v + b, bounds)
    solution = fit.fit(x, y, [1.0, 1.0])

    update_function_fit(chart, fit, x, y, solution, 11)

    points, curve = chart.series
    assert points.label == "Points"
    assert curve.label == "Function"
    assert len(curve) == 11
    assert curve[-1].y == approx(11.0, rel=1e-4)
    assert _texts(chart) == [title]
