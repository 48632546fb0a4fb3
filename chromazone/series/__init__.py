"""Series configuration and line/point styling built on the zone engine."""

from .config import SeriesColorConfig
from .styler import (
    AreaSeriesStyler,
    LineStyle,
    PointStyle,
    SeriesStyle,
    resolve_line_style,
    resolve_point_style,
    resolve_point_styles,
)

__all__ = [
    "SeriesColorConfig",
    "AreaSeriesStyler",
    "LineStyle",
    "PointStyle",
    "SeriesStyle",
    "resolve_line_style",
    "resolve_point_style",
    "resolve_point_styles",
]
