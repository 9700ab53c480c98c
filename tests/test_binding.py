"""Tests for the chart binding policy and the pure conversions."""

import numpy as np
import pytest
from pytest import approx

from pynumchart.chart import (
    AxisUnit,
    Chart,
    Series,
    SeriesKind,
    Title,
    bind,
    bind_xy,
    bind_y,
    check_index,
    label_points,
    new_chart,
    partition_clusters,
    sample_function,
    select_column,
    select_row,
    to_chart,
)
from pynumchart.config import DEFAULT_STYLE, ChartStyle
from pynumchart.errors import IndexRangeError, InvalidArgumentError, SizeMismatchError
from pynumchart.numeric import ClusterSet, update_vector, update_xy


def _series(label: str) -> Series:
    return bind_xy([0.0, 1.0], [1.0, 2.0], label=label)


def test_bind_xy_pairs_points_in_order() -> None:
    """Pairing x=[0,1,2], y=[10,20,30] gives (0,10), (1,20), (2,30)."""

    series = bind_xy([0, 1, 2], [10, 20, 30], SeriesKind.LINE)

    assert len(series) == 3
    assert [(p.x, p.y) for p in series] == [(0, 10), (1, 20), (2, 30)]
    assert series.kind == SeriesKind.LINE


def test_bind_xy_rejects_unequal_lengths() -> None:
    """Unequal x/y lengths raise a size-mismatch error carrying both lengths."""

    with pytest.raises(SizeMismatchError) as excinfo:
        bind_xy([0, 1], [10, 20, 30])

    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 3
    assert isinstance(excinfo.value, ValueError)


def test_size_mismatch_leaves_chart_untouched(chart: Chart) -> None:
    """A failing adapter does not mutate the target chart."""

    with pytest.raises(SizeMismatchError):
        update_xy(chart, [0, 1], [10, 20, 30])

    assert len(chart.series) == 0
    assert chart.titles == []
    assert chart.x_axis.title == ""
    assert chart.y_axis.title == ""


def test_bind_y_uses_implicit_index() -> None:
    """bind_y plots values against 0..n-1."""

    series = bind_y([5.0, 6.0, 7.0])

    assert list(series.x_values) == [0.0, 1.0, 2.0]
    assert list(series.y_values) == [5.0, 6.0, 7.0]


def test_axis_unit_values_form_arithmetic_progression() -> None:
    """AxisUnit generates start, start+step, start+2*step, ..."""

    unit = AxisUnit(1.0, 0.5, "Time (s)")

    assert list(unit.values(4)) == approx([1.0, 1.5, 2.0, 2.5])
    assert len(unit.values(0)) == 0
    assert len(unit.values(-3)) == 0


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_check_index_rejects_out_of_range(index: int) -> None:
    """Indices outside [0, count) raise a range error."""

    with pytest.raises(IndexRangeError) as excinfo:
        check_index(index, 3)

    assert excinfo.value.index == index
    assert isinstance(excinfo.value, IndexError)


def test_select_column_and_row() -> None:
    """Column and row selection return the right slice and range-check the index."""

    matrix = np.arange(6).reshape(2, 3)

    assert list(select_column(matrix, 2)) == [2, 5]
    assert list(select_row(matrix, 1)) == [3, 4, 5]
    with pytest.raises(IndexRangeError):
        select_column(matrix, 3)
    with pytest.raises(IndexRangeError):
        select_row(matrix, 2)


def test_select_column_and_row_require_a_matrix() -> None:
    """A 1-D array has no columns or rows to select."""

    vector = np.array([1.0, 2.0])

    with pytest.raises(InvalidArgumentError, match="2-D"):
        select_column(vector, 0)
    with pytest.raises(InvalidArgumentError, match="2-D"):
        select_row(vector, 0)


def test_bind_populates_titles_on_empty_chart(chart: Chart) -> None:
    """An empty chart receives the supplied titles in order; the first uses the title font."""

    bind(chart, _series("a"), ["Main", "Sub"], "x", "y")

    assert [t.text for t in chart.titles] == ["Main", "Sub"]
    assert chart.titles[0].font == DEFAULT_STYLE.title_font
    assert chart.titles[1].font == DEFAULT_STYLE.axis_title_font


def test_bind_accepts_single_title_string(chart: Chart) -> None:
    """A plain string is one title, not a sequence of characters."""

    bind(chart, _series("a"), "Vector", "x", "y")

    assert [t.text for t in chart.titles] == ["Vector"]


def test_bind_keeps_existing_titles(chart: Chart) -> None:
    """Existing titles are left unchanged whatever titles are supplied."""

    chart.titles.append(Title("Mine"))
    chart.titles.append(Title("Also mine"))

    bind(chart, _series("a"), ["Main", "Sub", "Third"], "x", "y")

    assert [t.text for t in chart.titles] == ["Mine", "Also mine"]


def test_bind_sets_axis_titles_independently(chart: Chart) -> None:
    """Each axis title is only set when that axis has none."""

    chart.x_axis.title = "Days"

    bind(chart, _series("a"), "T", "x", "y")

    assert chart.x_axis.title == "Days"
    assert chart.x_axis.grid_color is None
    assert chart.y_axis.title == "y"
    assert chart.y_axis.title_font == DEFAULT_STYLE.axis_title_font
    assert chart.y_axis.grid_color == DEFAULT_STYLE.major_grid_color


def test_bind_ignores_empty_axis_title(chart: Chart) -> None:
    """An empty axis title leaves the axis blank."""

    bind(chart, _series("a"), "T", "", None)

    assert chart.x_axis.title == ""
    assert chart.y_axis.title == ""


def test_bind_replaces_series_positionally() -> None:
    """Binding N series into M >= N replaces [0, N) and keeps [N, M)."""

    chart = new_chart()
    bind(chart, [_series("old0"), _series("old1"), _series("old2")], None, None, None)
    kept = chart.series[2]

    bind(chart, [_series("new0"), _series("new1")], None, None, None)

    assert len(chart.series) == 3
    assert [s.label for s in chart.series] == ["new0", "new1", "old2"]
    assert chart.series[2] is kept


def test_bind_appends_series_past_the_end() -> None:
    """Binding N series into M < N replaces [0, M) and appends the rest."""

    chart = new_chart()
    bind(chart, _series("old0"), None, None, None)

    bind(chart, [_series("new0"), _series("new1"), _series("new2")], None, None, None)

    assert [s.label for s in chart.series] == ["new0", "new1", "new2"]


def test_bind_notifies_listeners_once_per_series() -> None:
    """Subscribed listeners survive replacement and hear about every bound series."""

    chart = new_chart()
    bind(chart, _series("old0"), None, None, None)
    events = []
    chart.series.subscribe(lambda collection, index: events.append(index))

    bind(chart, [_series("new0"), _series("new1")], None, None, None)
    bind(chart, [_series("newer0")], None, None, None)

    assert events == [0, 1, 0]


def test_bind_assigns_palette_colours_and_marker_size() -> None:
    """Series i gets palette colour i (cycling) and the style marker size."""

    chart = Chart(palette=["red", "blue"])
    style = ChartStyle(marker_size=3.0)

    bind(chart, [_series("a"), _series("b"), _series("c")], None, None, None, style)

    assert [s.color for s in chart.series] == ["red", "blue", "red"]
    assert all(s.marker_size == 3.0 for s in chart.series)


def test_single_series_never_adds_legend(chart: Chart) -> None:
    """Binding one series adds no legend."""

    bind(chart, _series("a"), None, None, None)
    bind(chart, _series("a"), None, None, None)

    assert chart.legends == []


def test_multiple_series_add_exactly_one_legend(chart: Chart) -> None:
    """Two or more series add one bordered legend, never a second."""

    bind(chart, [_series("a"), _series("b")], None, None, None)
    bind(chart, [_series("a"), _series("b"), _series("c")], None, None, None)

    assert len(chart.legends) == 1
    assert chart.legends[0].show_border is True
    assert chart.legends[0].representation == "rectangle"


def test_new_chart_uses_style_size() -> None:
    """new_chart takes its size from the style and has no legend."""

    chart = new_chart(ChartStyle(size=(800, 600)))

    assert chart.size == (800, 600)
    assert chart.legends == []
    assert len(chart.series) == 0


def test_to_chart_applies_adapter_to_fresh_chart() -> None:
    """to_chart returns a new chart populated by the adapter."""

    chart = to_chart(update_vector, [1.0, 4.0, 9.0])

    assert len(chart.series) == 1
    assert chart.titles[0].text == "Vector"
    assert list(chart.series[0].y_values) == [1.0, 4.0, 9.0]


def test_refresh_keeps_customisation(chart: Chart) -> None:
    """Calling an adapter again keeps caller-edited titles and replaces the data."""

    update_vector(chart, [1.0, 2.0])
    chart.titles[0].text = "Custom"
    chart.y_axis.title = "Volts"

    update_vector(chart, [3.0, 4.0, 5.0])

    assert [t.text for t in chart.titles] == ["Custom"]
    assert chart.y_axis.title == "Volts"
    assert len(chart.series) == 1
    assert list(chart.series[0].y_values) == [3.0, 4.0, 5.0]


def test_sample_function_evenly_spaced_inclusive() -> None:
    """N samples run from xmin to xmax inclusive in arithmetic progression."""

    series = sample_function(lambda x: x * x, 0.0, 1.0, 5)

    assert list(series.x_values) == approx([0.0, 0.25, 0.5, 0.75, 1.0])
    assert list(series.y_values) == approx([0.0, 0.0625, 0.25, 0.5625, 1.0])


@pytest.mark.parametrize("num_values", [0, -1])
def test_sample_function_non_positive_count_is_empty(num_values: int) -> None:
    """N <= 0 gives an empty series."""

    assert len(sample_function(lambda x: x, 0.0, 1.0, num_values)) == 0


def test_sample_function_swaps_reversed_bounds() -> None:
    """xmin > xmax is swapped so x always increases."""

    series = sample_function(lambda x: x, 2.0, -2.0, 3)

    assert list(series.x_values) == approx([-2.0, 0.0, 2.0])


def test_label_points_labels_exact_and_inserts_between() -> None:
    """Exact keys label the sample; other keys insert a point that keeps x sorted."""

    f = lambda x: x * x  # noqa: E731
    series = sample_function(f, 0.0, 4.0, 5)

    label_points(series, f, {2.0: "two", 2.5: "mid", 4.0: "end", 10.0: "out"}, "s")

    xs = series.x_values
    assert len(series) == 6
    assert np.all(np.diff(xs) > 0)
    assert series[2].label == "two"
    assert series[2].marker == "s"
    assert series[3].x == approx(2.5)
    assert series[3].y == approx(6.25)
    assert series[3].label == "mid"
    assert series[5].label == "end"
    assert all(p.label != "out" for p in series)


def test_partition_clusters_one_series_per_cluster() -> None:
    """Rows are split into "Cluster i" scatter series from the chosen columns."""

    data = np.array([[0.0, 1.0, 9.0], [2.0, 3.0, 9.0], [4.0, 5.0, 9.0]])
    clusters = ClusterSet([0, 1, 0])

    series_list = partition_clusters(clusters, data, 0, 1, "o")

    assert [s.label for s in series_list] == ["Cluster 0", "Cluster 1"]
    assert all(s.kind == SeriesKind.SCATTER for s in series_list)
    assert [(p.x, p.y) for p in series_list[0]] == [(0.0, 1.0), (4.0, 5.0)]
    assert [(p.x, p.y) for p in series_list[1]] == [(2.0, 3.0)]


def test_partition_clusters_rejects_bad_indices() -> None:
    """Out-of-range columns or member rows raise a range error."""

    class Clusters:
        number_of_clusters = 1

        def cluster(self, index):
            return [0, 5]

    data = np.zeros((3, 2))

    with pytest.raises(IndexRangeError):
        partition_clusters(Clusters(), data, 0, 1, "o")
    with pytest.raises(IndexRangeError):
        partition_clusters(ClusterSet([0, 0, 0]), data, 0, 2, "o")
