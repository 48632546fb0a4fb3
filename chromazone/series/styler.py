from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Mapping, Optional, Sequence, Union

from ..colors.color_parser import normalize_color
from ..geometry import SurfaceRect
from ..gradients.linear_gradient import GradientSurface
from ..gradients.zone_gradient import build_threshold_gradient, build_zone_gradient
from ..types.color_types import Scalar, ValueToPixel
from ..zones.resolver import color_for_value
from .config import SeriesColorConfig

logger = logging.getLogger(__name__)

# A resolved fill/stroke: color string or a gradient object from the surface.
Paint = Any


@dataclass(frozen=True)
class LineStyle:
    border_color: Optional[Paint] = None
    background_color: Optional[Paint] = None
    border_width: float = 2
    fill: Any = "origin"
    tension: float = 0.1


@dataclass(frozen=True)
class PointStyle:
    background_color: Optional[str] = None
    border_color: Optional[str] = None
    hover_background_color: Optional[str] = None
    hover_border_color: Optional[str] = None
    radius: Optional[float] = None
    hover_radius: Optional[float] = None


@dataclass(frozen=True)
class SeriesStyle:
    line: LineStyle
    points: List[Optional[PointStyle]] = field(default_factory=list)


def resolve_line_style(
    config: SeriesColorConfig,
    surface: GradientSurface,
    rect: SurfaceRect,
    value_to_pixel: ValueToPixel,
) -> LineStyle:
    """
    Compute stroke and fill paints for the series line.

    Zones win over the threshold pair, which wins over a lone ``color``.
    User-set ``border_color``/``background_color`` are kept as given.
    """
    border = config.border_color
    background = config.background_color
    opacities = {"border": 1, "background": config.fill_opacity}

    def paint(kind: str) -> Optional[Paint]:
        alpha = opacities[kind]
        if config.color_zones:
            return build_zone_gradient(surface, rect, value_to_pixel, config.color_zones, alpha)
        if config.color is not None and config.negative_color is not None:
            return build_threshold_gradient(
                surface, rect, value_to_pixel,
                config.color, config.negative_color, config.threshold, alpha,
            )
        if config.color is not None:
            return normalize_color(config.color, alpha)
        return None

    if config.has_color_rules:
        logger.debug("Resolving line paints for %s", config)
        if border is None:
            border = paint("border")
        if background is None:
            background = paint("background")

    return LineStyle(
        border_color=border,
        background_color=background,
        border_width=config.border_width if config.show_line else 0,
        fill=config.fill,
        tension=config.tension,
    )


def resolve_point_style(value: Optional[Scalar], config: SeriesColorConfig) -> Optional[PointStyle]:
    """
    Style for a single point, or None for a missing value.

    Backgrounds use ``point_opacity``, borders stay opaque, and hover
    fields mirror the regular ones. Radii come from the config even when
    no color applies.
    """
    if value is None:
        return None
    radii = {"radius": config.point_radius, "hover_radius": config.point_hover_radius}
    resolved = color_for_value(
        value, config.color_zones, config.color, config.negative_color, config.threshold
    )
    if resolved is None:
        return PointStyle(**radii)
    background = normalize_color(resolved, config.point_opacity)
    border = normalize_color(resolved, 1)
    return PointStyle(background, border, background, border, **radii)


def resolve_point_styles(
    values: Sequence[Optional[Scalar]], config: SeriesColorConfig
) -> List[Optional[PointStyle]]:
    return [resolve_point_style(v, config) for v in values]


class AreaSeriesStyler:
    """Styles one area series: line paints plus value-colored points."""

    id: ClassVar[str] = "area"
    defaults: ClassVar[SeriesColorConfig] = SeriesColorConfig()

    def __init__(self, options: Union[SeriesColorConfig, Mapping[str, Any], None] = None) -> None:
        if isinstance(options, SeriesColorConfig):
            self.config = options
        else:
            self.config = SeriesColorConfig.from_options(options)

    def update(
        self,
        surface: GradientSurface,
        rect: SurfaceRect,
        value_to_pixel: ValueToPixel,
        values: Sequence[Optional[Scalar]] = (),
    ) -> SeriesStyle:
        """Recompute styles; call again whenever the layout or scale changes."""
        line = resolve_line_style(self.config, surface, rect, value_to_pixel)
        points: List[Optional[PointStyle]] = []
        if self.config.color_points_by_value:
            points = resolve_point_styles(values, self.config)
        return SeriesStyle(line, points)
