"""
The chart binding policy.

`bind` merges prepared series and default titles into a chart: axis titles and
chart titles are only filled in where the caller has not set them, series are
replaced positionally, and a legend is added once for multi-series charts.
The remaining functions are pure conversions that prepare series for `bind`
and raise before anything is mutated.
"""

from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

import numpy as np
from loguru import logger

from pynumchart.chart.model import (
    NO_MARKER,
    Chart,
    Legend,
    Point,
    Series,
    SeriesKind,
    Title,
)
from pynumchart.config import ChartStyle, resolve_style
from pynumchart.errors import IndexRangeError, InvalidArgumentError, SizeMismatchError

TitleSpec = Union[str, Sequence[str], None]


def new_chart(style: Optional[ChartStyle] = None) -> Chart:
    """
    Create an empty chart of the default size with no legend.

    Parameters
    ----------
    style : Optional[ChartStyle], default=None
        Style supplying the chart size. Defaults to `DEFAULT_STYLE`.

    Returns
    -------
    Chart
        A new chart.
    """
    style = resolve_style(style)
    return Chart(size=style.size, dpi=style.dpi)


def bind(
    chart: Chart,
    series: Union[Series, Sequence[Series], None],
    titles: TitleSpec,
    x_title: Optional[str],
    y_title: Optional[str],
    style: Optional[ChartStyle] = None,
) -> Chart:
    """
    Merge series, titles and axis titles into `chart`.

    Parameters
    ----------
    chart : Chart
        The chart to update in place.
    series : Union[Series, Sequence[Series], None]
        Prepared series. Series ``i`` replaces ``chart.series[i]``, or is
        appended if the chart has fewer series.
    titles : Union[str, Sequence[str], None]
        Title strings. The first is the main title. Added only if the chart has
        no titles yet.
    x_title, y_title : Optional[str]
        Axis titles. Each is set only if that axis has no title yet.
    style : Optional[ChartStyle], default=None
        Fonts, grid colour and marker size to apply. Defaults to `DEFAULT_STYLE`.

    Returns
    -------
    Chart
        The same chart, mutated.
    """
    style = resolve_style(style)

    if isinstance(series, Series):
        series_list: List[Series] = [series]
    else:
        series_list = list(series) if series is not None else []

    if isinstance(titles, str):
        title_list: List[str] = [titles]
    else:
        title_list = list(titles) if titles is not None else []

    # Axis titles only if not already set on the chart
    if not chart.x_axis.title and x_title:
        chart.x_axis.title = x_title
        chart.x_axis.title_font = style.axis_title_font
        chart.x_axis.grid_color = style.major_grid_color
    if not chart.y_axis.title and y_title:
        chart.y_axis.title = y_title
        chart.y_axis.title_font = style.axis_title_font
        chart.y_axis.grid_color = style.major_grid_color

    # Titles only if none exist
    if not chart.titles and title_list:
        subtitle_font = chart.x_axis.title_font or style.axis_title_font
        for i, text in enumerate(title_list):
            font = style.title_font if i == 0 else subtitle_font
            chart.titles.append(Title(text=text, font=font))
        logger.debug(f"Added titles {title_list}")

    replaced = 0
    for i, s in enumerate(series_list):
        s.color = chart.color(i)
        s.marker_size = style.marker_size
        if chart.series.upsert(i, s):
            replaced += 1
    if series_list:
        logger.debug(
            f"Bound {len(series_list)} series: {replaced} replaced, {len(series_list) - replaced} appended"
        )

    if len(series_list) > 1 and not chart.legends:
        chart.legends.append(Legend(show_border=True, representation="rectangle"))
        logger.debug("Legend added")

    return chart


def to_chart(
    update: Callable[..., Any],
    *args: Any,
    style: Optional[ChartStyle] = None,
    **kwargs: Any,
) -> Chart:
    """
    Apply an ``update_*`` adapter to a new default chart.

    Parameters
    ----------
    update : Callable
        An adapter with signature ``update(chart, *args, style=None, **kwargs)``.
    *args, **kwargs
        Passed to the adapter.
    style : Optional[ChartStyle], default=None
        Style for the new chart and the binding.

    Returns
    -------
    Chart
        The newly populated chart.

    Examples
    --------
    >>> chart = to_chart(update_vector, np.array([1.0, 4.0, 9.0]))
    """
    chart = new_chart(style)
    update(chart, *args, style=style, **kwargs)
    return chart


def _as_float_array(values: Any) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(-1)


def bind_xy(
    x: Any,
    y: Any,
    kind: str = SeriesKind.LINE,
    marker: str = NO_MARKER,
    label: str = "",
) -> Series:
    """
    Pair two numeric sequences into a series.

    Parameters
    ----------
    x, y : array-like
        Real-valued sequences of equal length.
    kind : str, default=SeriesKind.LINE
        Rendering kind.
    marker : str, default=NO_MARKER
        Matplotlib marker code.
    label : str, default=""
        Series label.

    Returns
    -------
    Series
        A new series with point ``i`` equal to ``(x[i], y[i])``.

    Raises
    ------
    SizeMismatchError
        If x and y have different lengths.
    """
    x_arr = _as_float_array(x)
    y_arr = _as_float_array(y)
    if len(x_arr) != len(y_arr):
        raise SizeMismatchError("x,y data of unequal length", len(x_arr), len(y_arr))

    series = Series(kind=kind, marker=marker, label=label)
    for xi, yi in zip(x_arr, y_arr):
        series.add(xi, yi)
    return series


def bind_y(
    y: Any, kind: str = SeriesKind.LINE, marker: str = NO_MARKER, label: str = ""
) -> Series:
    """Bind `y` against its indices 0, 1, ..., n-1."""
    y_arr = _as_float_array(y)
    return bind_xy(np.arange(len(y_arr), dtype=np.float64), y_arr, kind, marker, label)


def check_index(index: int, count: int, what: str = "index") -> int:
    """
    Return `index` if it lies in ``[0, count)``.

    Raises
    ------
    IndexRangeError
        If the index is out of range.
    """
    if index < 0 or index > count - 1:
        raise IndexRangeError(index, count, what)
    return index


def check_matrix(data: np.ndarray) -> np.ndarray:
    """Return `data` if it is 2-D, else raise `InvalidArgumentError`."""
    if data.ndim != 2:
        raise InvalidArgumentError(f"Expected a 2-D matrix, got {data.ndim} dimension(s).")
    return data


def select_column(matrix: Any, index: int) -> np.ndarray:
    """Return column `index` of a 2-D array, range-checked."""
    data = np.asarray(matrix)
    check_matrix(data)
    check_index(index, data.shape[1], "column index")
    return data[:, index]


def select_row(matrix: Any, index: int) -> np.ndarray:
    """Return row `index` of a 2-D array, range-checked."""
    data = np.asarray(matrix)
    check_matrix(data)
    check_index(index, data.shape[0], "row index")
    return data[index, :]


def evaluate(f: Callable[[float], float], x: np.ndarray) -> np.ndarray:
    """Evaluate a scalar function pointwise."""
    return np.array([f(xi) for xi in x], dtype=np.float64)


def sample_points(xmin: float, xmax: float, num_values: int) -> np.ndarray:
    """
    Evenly spaced sample positions from xmin to xmax inclusive.

    The bounds are swapped if given in the wrong order; ``num_values <= 0``
    gives an empty array.
    """
    if xmin > xmax:
        xmin, xmax = xmax, xmin
    if num_values <= 0:
        return np.array([], dtype=np.float64)
    return np.linspace(xmin, xmax, num_values, dtype=np.float64)


def sample_function(
    f: Callable[[float], float],
    xmin: float,
    xmax: float,
    num_values: int,
    kind: str = SeriesKind.LINE,
    marker: str = NO_MARKER,
) -> Series:
    """
    Sample a function at evenly spaced points.

    Parameters
    ----------
    f : Callable[[float], float]
        The function to interpolate over.
    xmin, xmax : float
        Sampling range; swapped if ``xmin > xmax``.
    num_values : int
        Number of interpolated values. Zero or fewer gives an empty series.
    kind : str, default=SeriesKind.LINE
        Rendering kind.
    marker : str, default=NO_MARKER
        Matplotlib marker code.

    Returns
    -------
    Series
        A series of `num_values` points with increasing x.
    """
    x = sample_points(xmin, xmax, num_values)
    return bind_xy(x, evaluate(f, x), kind, marker)


def label_points(
    series: Series,
    f: Callable[[float], float],
    point_labels: Mapping[float, str],
    marker: str,
    orientation: str = "up",
) -> Series:
    """
    Label key x-values on a sampled, x-sorted series.

    A sample whose x equals a key is labelled directly. Otherwise ``(key, f(key))``
    is inserted between the bracketing samples and labelled. Keys outside the
    sampled range are skipped.

    Parameters
    ----------
    series : Series
        Series with increasing x values, modified in place.
    f : Callable[[float], float]
        Function used to evaluate inserted points.
    point_labels : Mapping[float, str]
        Key x-values mapped to label text.
    marker : str
        Marker drawn at labelled points.
    orientation : str, default="up"
        Label text orientation.

    Returns
    -------
    Series
        The same series.
    """
    series.label_orientation = orientation
    for key, text in point_labels.items():
        xs = series.x_values
        if len(xs) == 0:
            break
        idx = int(np.searchsorted(xs, key))
        if idx < len(xs) and xs[idx] == key:
            point = series[idx]
        elif 0 < idx < len(xs):
            point = Point(float(key), float(f(key)))
            series.insert(idx, point)
        else:
            logger.debug(f"Point label '{text}' at x={key} is outside the sampled range")
            continue
        point.label = text
        point.marker = marker
    return series


def partition_clusters(
    clusters: Any,
    data: Any,
    x_col: int,
    y_col: int,
    marker: str,
) -> List[Series]:
    """
    Split the rows of `data` into one scatter series per cluster.

    Parameters
    ----------
    clusters : ClusterSet-like
        Exposes ``number_of_clusters`` and ``cluster(i)`` returning member row indices.
    data : array-like
        2-D data matrix.
    x_col, y_col : int
        Columns supplying x and y.
    marker : str
        Marker code for the scatter series.

    Returns
    -------
    List[Series]
        Series labelled "Cluster 0", "Cluster 1", ...

    Raises
    ------
    IndexRangeError
        If a column or member row index is out of range.
    """
    matrix = np.asarray(data, dtype=np.float64)
    rows, cols = matrix.shape
    check_index(x_col, cols, "column index")
    check_index(y_col, cols, "column index")

    series_list = []
    for i in range(clusters.number_of_clusters):
        s = Series(kind=SeriesKind.SCATTER, marker=marker, label=f"Cluster {i}")
        for row in _members(clusters.cluster(i)):
            check_index(row, rows, "row index")
            s.add(matrix[row, x_col], matrix[row, y_col])
        series_list.append(s)
    return series_list


def _members(indices: Iterable[Any]) -> List[int]:
    return [int(i) for i in indices]
