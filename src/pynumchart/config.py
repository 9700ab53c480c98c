import sys
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from loguru import logger

# Default styling constants
DEFAULT_SIZE = (500, 500)
DEFAULT_FONT_FAMILY = "Trebuchet MS"
DEFAULT_TITLE_FONT_SIZE = 12.0
DEFAULT_AXIS_TITLE_FONT_SIZE = 10.0
DEFAULT_MAJOR_GRID_COLOR = "lightgray"
DEFAULT_MARKER = "o"  # circle
DEFAULT_MARKER_SIZE = 7.0
DEFAULT_POINT_LABEL_ORIENTATION = "up"
DEFAULT_DPI = 100

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"


@dataclass(frozen=True)
class Font:
    """A font description: family, point size and weight."""

    family: str = DEFAULT_FONT_FAMILY
    size: float = DEFAULT_TITLE_FONT_SIZE
    bold: bool = True

    @property
    def weight(self) -> str:
        return "bold" if self.bold else "normal"


@dataclass(frozen=True)
class ChartStyle:
    """
    Default look applied to new charts and to newly bound titles and series.

    Passed explicitly to `new_chart`, `bind` and every ``update_*`` adapter;
    ``None`` in those calls means `DEFAULT_STYLE`.

    Attributes
    ----------
    size : Tuple[int, int]
        Chart size in pixels (width, height).
    title_font : Font
        Font of the main (first) title.
    axis_title_font : Font
        Font of axis titles and of subtitles.
    major_grid_color : str
        Major grid line colour set alongside a new axis title.
    marker : str
        Matplotlib marker code used for scatter-like series.
    marker_size : float
        Marker size given to every bound series.
    point_label_orientation : str
        "up" (rotated) or "horizontal" text for single-point labels.
    dpi : int
        Dots per inch used to turn the pixel size into a figure size.
    """

    size: Tuple[int, int] = DEFAULT_SIZE
    title_font: Font = field(default_factory=lambda: Font(size=DEFAULT_TITLE_FONT_SIZE))
    axis_title_font: Font = field(
        default_factory=lambda: Font(size=DEFAULT_AXIS_TITLE_FONT_SIZE)
    )
    major_grid_color: str = DEFAULT_MAJOR_GRID_COLOR
    marker: str = DEFAULT_MARKER
    marker_size: float = DEFAULT_MARKER_SIZE
    point_label_orientation: str = DEFAULT_POINT_LABEL_ORIENTATION
    dpi: int = DEFAULT_DPI

    def with_overrides(self, overrides: Mapping[str, Any]) -> "ChartStyle":
        """
        Return a copy with configuration-dictionary overrides applied.

        Parameters
        ----------
        overrides : Mapping[str, Any]
            Upper-case configuration keys, e.g. ``{"SIZE": (800, 600), "MARKER": "s"}``.

        Returns
        -------
        ChartStyle
            A new style; this one is left unchanged.

        Raises
        ------
        KeyError
            If a key is not a known style setting.
        """
        changes: Dict[str, Any] = {}
        title_font = self.title_font
        axis_title_font = self.axis_title_font

        for key, value in overrides.items():
            if key == "SIZE":
                changes["size"] = (int(value[0]), int(value[1]))
            elif key == "FONT_FAMILY":
                title_font = replace(title_font, family=value)
                axis_title_font = replace(axis_title_font, family=value)
            elif key == "TITLE_FONT_SIZE":
                title_font = replace(title_font, size=float(value))
            elif key == "AXIS_TITLE_FONT_SIZE":
                axis_title_font = replace(axis_title_font, size=float(value))
            elif key == "MAJOR_GRID_COLOR":
                changes["major_grid_color"] = value
            elif key == "MARKER":
                changes["marker"] = value
            elif key == "MARKER_SIZE":
                changes["marker_size"] = float(value)
            elif key == "POINT_LABEL_ORIENTATION":
                changes["point_label_orientation"] = value
            elif key == "DPI":
                changes["dpi"] = int(value)
            else:
                raise KeyError(f"Unknown chart style setting: {key}")

        logger.debug(f"Style overrides applied: {sorted(overrides)}")
        return replace(
            self, title_font=title_font, axis_title_font=axis_title_font, **changes
        )


DEFAULT_STYLE = ChartStyle()


def resolve_style(style: Optional[ChartStyle]) -> ChartStyle:
    """Return `style`, or `DEFAULT_STYLE` when it is None."""
    return DEFAULT_STYLE if style is None else style


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure loguru logging with specified level.

    Parameters
    ----------
    log_level : str, default="INFO"
        Logging level: DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=LOG_FORMAT,
        colorize=True,
    )
