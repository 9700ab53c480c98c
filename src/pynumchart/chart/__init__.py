"""
General-purpose charting components for PyNumChart.

This package holds the chart model, the binding policy that merges prepared
series and titles into a chart, and the matplotlib renderer.
"""

from pynumchart.chart.binding import (
    bind,
    bind_xy,
    bind_y,
    check_index,
    check_matrix,
    label_points,
    new_chart,
    partition_clusters,
    sample_function,
    select_column,
    select_row,
    to_chart,
)
from pynumchart.chart.model import (
    NO_MARKER,
    Axis,
    Chart,
    Legend,
    Point,
    Series,
    SeriesCollection,
    SeriesKind,
    Title,
)
from pynumchart.chart.render import render, save, show
from pynumchart.chart.units import AxisUnit

__all__ = [
    # Model
    "Chart",
    "Series",
    "SeriesCollection",
    "SeriesKind",
    "Point",
    "Title",
    "Axis",
    "Legend",
    "NO_MARKER",
    "AxisUnit",
    # Binding
    "bind",
    "new_chart",
    "to_chart",
    "bind_xy",
    "bind_y",
    "check_index",
    "check_matrix",
    "select_column",
    "select_row",
    "sample_function",
    "label_points",
    "partition_clusters",
    # Rendering
    "render",
    "show",
    "save",
]
