from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from pynumchart.config import DEFAULT_DPI, DEFAULT_SIZE, Font


class SeriesKind:
    """Rendering kinds understood by the renderer."""

    LINE = "line"
    SCATTER = "scatter"
    COLUMN = "column"  # vertical bars
    BAR = "bar"  # horizontal bars

    ALL = (LINE, SCATTER, COLUMN, BAR)


NO_MARKER = ""


@dataclass
class Point:
    """
    A single plotted (x, y) pair.

    ``error`` holds optional (below, above) error-bar extents; ``label`` and
    ``marker`` annotate just this point.
    """

    x: float
    y: float
    error: Optional[Tuple[float, float]] = None
    label: Optional[str] = None
    marker: Optional[str] = None


@dataclass
class Series:
    """
    One named, styled collection of plotted points.

    Created fresh by the binding functions and owned by the chart it is bound to.
    """

    kind: str = SeriesKind.LINE
    label: str = ""
    marker: str = NO_MARKER
    color: Optional[str] = None
    marker_size: Optional[float] = None
    points: List[Point] = field(default_factory=list)
    error_bars: bool = False
    label_orientation: str = "up"

    def add(self, x: float, y: float, **kwargs) -> Point:
        point = Point(float(x), float(y), **kwargs)
        self.points.append(point)
        return point

    def insert(self, index: int, point: Point) -> None:
        self.points.insert(index, point)

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    @property
    def x_values(self) -> np.ndarray:
        return np.array([p.x for p in self.points], dtype=np.float64)

    @property
    def y_values(self) -> np.ndarray:
        return np.array([p.y for p in self.points], dtype=np.float64)


@dataclass
class Title:
    text: str
    font: Optional[Font] = None


@dataclass
class Axis:
    """An axis descriptor. An empty ``title`` counts as "not set"."""

    title: str = ""
    title_font: Optional[Font] = None
    grid_color: Optional[str] = None


@dataclass
class Legend:
    show_border: bool = True
    representation: str = "rectangle"


SeriesListener = Callable[["SeriesCollection", int], None]


class SeriesCollection:
    """
    Ordered, index-addressable, growable list of series.

    Listeners subscribed here stay attached when individual series are replaced.
    """

    def __init__(self, series: Optional[List[Series]] = None):
        self._items: List[Series] = list(series) if series else []
        self._listeners: List[SeriesListener] = []

    def subscribe(self, callback: SeriesListener) -> None:
        """Register ``callback(collection, index)``, called once per change."""
        self._listeners.append(callback)

    def _notify(self, index: int) -> None:
        for callback in self._listeners:
            callback(self, index)

    def upsert(self, index: int, series: Series) -> bool:
        """
        Replace the series at `index`, or append when `index` is past the end.

        Parameters
        ----------
        index : int
            Target position.
        series : Series
            Series to place there.

        Returns
        -------
        bool
            True if an existing series was replaced, False if appended.
        """
        if index < len(self._items):
            self._items[index] = series
            self._notify(index)
            return True
        self._items.append(series)
        self._notify(len(self._items) - 1)
        return False

    def append(self, series: Series) -> None:
        self._items.append(series)
        self._notify(len(self._items) - 1)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Series:
        return self._items[index]

    def __iter__(self) -> Iterator[Series]:
        return iter(self._items)


def default_palette() -> List[str]:
    """Colours of matplotlib's active property cycle."""
    colors = plt.rcParams["axes.prop_cycle"].by_key().get("color", [])
    return list(colors) if colors else ["C0"]


class Chart:
    """
    The container of series, titles, axis descriptors and legends.

    Caller-owned and mutable; binding functions update it in place and return it.
    """

    def __init__(
        self,
        size: Tuple[int, int] = DEFAULT_SIZE,
        palette: Optional[List[str]] = None,
        background: Optional[str] = None,
        dpi: int = DEFAULT_DPI,
    ):
        self.size = size
        self.dpi = dpi
        self.series = SeriesCollection()
        self.titles: List[Title] = []
        self.x_axis = Axis()
        self.y_axis = Axis()
        self.legends: List[Legend] = []
        self.palette = palette if palette is not None else default_palette()
        self.background = background

    def color(self, index: int) -> str:
        """Colour at position `index` of the active palette, cycling."""
        return self.palette[index % len(self.palette)]

    def __repr__(self) -> str:
        titles = [t.text for t in self.titles]
        return f"Chart(size={self.size}, series={len(self.series)}, titles={titles})"
