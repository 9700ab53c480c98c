from typing import Any, Dict, Optional

import matplotlib.figure
import matplotlib.pyplot as plt
import numpy as np
from loguru import logger
from matplotlib.patches import Patch

from pynumchart.chart.model import NO_MARKER, Chart, Series, SeriesKind
from pynumchart.config import Font

# Rendering constants
LABEL_OFFSET_POINTS = 6
BAR_WIDTH_FRACTION = 0.8


def _font_kwargs(font: Optional[Font]) -> Dict[str, Any]:
    if font is None:
        return {}
    return {"fontfamily": font.family, "fontsize": font.size, "fontweight": font.weight}


def _bar_width(x: np.ndarray) -> float:
    if len(x) < 2:
        return BAR_WIDTH_FRACTION
    return BAR_WIDTH_FRACTION * float(np.min(np.diff(np.sort(x))) or 1.0)


def _draw_series(ax, series: Series) -> None:
    x = series.x_values
    y = series.y_values
    marker = series.marker or None
    marker_size = series.marker_size

    if series.kind == SeriesKind.LINE:
        ax.plot(
            x, y, color=series.color, marker=marker, markersize=marker_size, label=series.label
        )
    elif series.kind == SeriesKind.SCATTER:
        ax.plot(
            x,
            y,
            linestyle="none",
            color=series.color,
            marker=marker or "o",
            markersize=marker_size,
            label=series.label,
        )
    elif series.kind == SeriesKind.COLUMN:
        ax.bar(x, y, width=_bar_width(x), color=series.color, label=series.label)
    elif series.kind == SeriesKind.BAR:
        ax.barh(x, y, height=_bar_width(x), color=series.color, label=series.label)
    else:
        raise ValueError(
            f"Unknown series kind '{series.kind}'. Valid options: {list(SeriesKind.ALL)}"
        )

    if series.error_bars and len(series):
        below = np.array([p.error[0] if p.error else 0.0 for p in series])
        above = np.array([p.error[1] if p.error else 0.0 for p in series])
        ax.errorbar(x, y, yerr=np.vstack([below, above]), fmt="none", ecolor="black")

    rotation = 90 if series.label_orientation == "up" else 0
    for p in series:
        if p.marker and p.marker != NO_MARKER and series.marker == NO_MARKER:
            ax.plot(
                [p.x], [p.y], linestyle="none", marker=p.marker, color=series.color,
                markersize=marker_size,
            )
        if p.label:
            ax.annotate(
                p.label,
                (p.x, p.y),
                textcoords="offset points",
                xytext=(0, LABEL_OFFSET_POINTS),
                ha="left" if rotation else "center",
                rotation=rotation,
            )


def render(chart: Chart) -> matplotlib.figure.Figure:
    """
    Draw a chart onto a new matplotlib figure.

    Parameters
    ----------
    chart : Chart
        The populated chart.

    Returns
    -------
    matplotlib.figure.Figure
        The figure. The caller owns it and should close it when done.

    Raises
    ------
    ValueError
        If a series has an unknown kind.
    """
    width, height = chart.size
    fig, ax = plt.subplots(figsize=(width / chart.dpi, height / chart.dpi), dpi=chart.dpi)
    if chart.background is not None:
        fig.patch.set_facecolor(chart.background)
        ax.set_facecolor(chart.background)

    logger.debug(f"Rendering {chart!r}")
    for series in chart.series:
        _draw_series(ax, series)

    if chart.titles:
        main, *subtitles = chart.titles
        fig.suptitle(main.text, **_font_kwargs(main.font))
        if subtitles:
            ax.set_title("\n".join(t.text for t in subtitles), **_font_kwargs(subtitles[0].font))

    if chart.x_axis.title:
        ax.set_xlabel(chart.x_axis.title, **_font_kwargs(chart.x_axis.title_font))
    if chart.y_axis.title:
        ax.set_ylabel(chart.y_axis.title, **_font_kwargs(chart.y_axis.title_font))
    if chart.x_axis.grid_color:
        ax.grid(True, axis="x", which="major", color=chart.x_axis.grid_color)
    if chart.y_axis.grid_color:
        ax.grid(True, axis="y", which="major", color=chart.y_axis.grid_color)

    if chart.legends and len(chart.series):
        legend = chart.legends[0]
        if legend.representation == "rectangle":
            handles = [
                Patch(facecolor=s.color, label=s.label or f"Series {i}")
                for i, s in enumerate(chart.series)
            ]
            ax.legend(handles=handles, frameon=legend.show_border)
        else:
            ax.legend(frameon=legend.show_border)

    fig.tight_layout()
    return fig


def show(chart: Chart) -> None:
    """
    Show the chart in a blocking window.

    The rendered figure is closed when the window is closed; the chart itself
    is unaffected and can be shown again.
    """
    fig = render(chart)
    plt.show()
    plt.close(fig)


def save(chart: Chart, filepath: str) -> None:
    """
    Save the chart image to a file.

    Parameters
    ----------
    chart : Chart
        The chart.
    filepath : str
        Destination. The extension selects the format (png, pdf, svg, jpg, ...).
    """
    fig = render(chart)
    try:
        fig.savefig(filepath)
    finally:
        plt.close(fig)
    logger.info(f"Chart saved to {filepath}")
