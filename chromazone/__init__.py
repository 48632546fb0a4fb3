"""
Chromazone - Value-Dependent Series Coloring
============================================

Computes colors and gradients for line/area chart series whose styling
depends on the plotted values.

Key Features
------------
- CSS color normalization (hex, rgb[a], hsl[a]) with alpha injection
- Zone rules (ordered value bands) and threshold rules (two colors split
  at a value)
- Multi-stop vertical gradients partitioning a chart area by value
- Per-point styles and line paints for a whole series

Quick Start
-----------
>>> from chromazone import (
...     SurfaceRect, LinearScale, StopListSurface,
...     ColorZone, build_zone_gradient, color_for_value,
... )
>>> rect = SurfaceRect(top=0, bottom=200)
>>> scale = LinearScale.vertical((0, 100), rect)
>>> zones = [ColorZone(0, 50, "#2e7d32"), ColorZone(50, 100, "#c62828", opacity=0.8)]
>>> color_for_value(75, zones)
'#c62828'
>>> gradient = build_zone_gradient(StopListSurface(), rect, scale, zones, fill_opacity=0.6)
>>> gradient.colors[0]
'rgba(198,40,40,0.8)'

Integration
-----------
Nothing is registered on import. Applications wire the area styler in
explicitly:

>>> from chromazone import StylerRegistry, register_area_styler
>>> registry = register_area_styler(StylerRegistry())
>>> "area" in registry
True
"""

from .colors import ColorParser, ParsedColor, normalize_color, parse_color
from .geometry import LinearScale, SurfaceRect
from .gradients import (
    GradientStop,
    GradientSurface,
    LinearGradient,
    StopListSurface,
    build_threshold_gradient,
    build_zone_gradient,
    normalize_position,
)
from .registry import StylerRegistry, register_area_styler
from .series import (
    AreaSeriesStyler,
    LineStyle,
    PointStyle,
    SeriesColorConfig,
    SeriesStyle,
    resolve_line_style,
    resolve_point_style,
    resolve_point_styles,
)
from .zones import ColorZone, color_for_value, np_colors_for_values, threshold_zones

__version__ = "1.0.0"

__all__ = [
    # colors
    "ColorParser",
    "ParsedColor",
    "normalize_color",
    "parse_color",
    # zones
    "ColorZone",
    "color_for_value",
    "np_colors_for_values",
    "threshold_zones",
    # geometry
    "LinearScale",
    "SurfaceRect",
    # gradients
    "GradientStop",
    "GradientSurface",
    "LinearGradient",
    "StopListSurface",
    "build_threshold_gradient",
    "build_zone_gradient",
    "normalize_position",
    # series
    "AreaSeriesStyler",
    "LineStyle",
    "PointStyle",
    "SeriesColorConfig",
    "SeriesStyle",
    "resolve_line_style",
    "resolve_point_style",
    "resolve_point_styles",
    # integration
    "StylerRegistry",
    "register_area_styler",
]
