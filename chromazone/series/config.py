from __future__ import annotations
import re
from dataclasses import dataclass, field, fields
from typing import Any, List, Mapping, Optional

from ..types.color_types import Color, Scalar
from ..zones.zone import ColorZone, coerce_zones


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


@dataclass(frozen=True)
class SeriesColorConfig:
    """
    Per-series coloring options with their defaults.

    Attributes:
        color: Line color, and the color at or above ``threshold``
        negative_color: Color below ``threshold``
        threshold: Split value between ``color`` and ``negative_color``
        fill_opacity: Alpha of the area fill
        point_opacity: Alpha of point backgrounds
        color_zones: Zones, taking precedence over the threshold rule
        color_points_by_value: Color each point by its own value
        show_line: Draw the line stroke; False forces ``border_width`` to 0
        border_color: User stroke override, left untouched when set
        background_color: User fill override, left untouched when set
        point_radius: Point radius passed on to each point style
        point_hover_radius: Hovered point radius passed on to each point style
    """

    color: Optional[Color] = None
    negative_color: Optional[Color] = None
    threshold: Scalar = 0
    fill_opacity: Scalar = 0.6
    point_opacity: Scalar = 1
    color_zones: Optional[List[ColorZone]] = None
    color_points_by_value: bool = True
    show_line: bool = True
    border_color: Optional[Color] = None
    background_color: Optional[Color] = None
    fill: Any = "origin"
    tension: float = 0.1
    border_width: float = 2
    point_radius: float = 3
    point_hover_radius: float = 5
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def has_color_rules(self) -> bool:
        return bool(self.color_zones) or self.color is not None or self.negative_color is not None

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> SeriesColorConfig:
        """
        Merge host dataset options over the defaults.

        camelCase keys (``negativeColor``, ``colorZones``) are accepted.
        Keys without a matching field are kept in ``extra``.
        """
        known = {f.name for f in fields(cls)} - {"extra"}
        values: dict = {}
        extra: dict = {}
        for key, value in {**(options or {}), **overrides}.items():
            name = _snake_case(key)
            if name in known:
                values[name] = value
            else:
                extra[key] = value
        if values.get("color_zones") is not None:
            values["color_zones"] = coerce_zones(values["color_zones"])
        return cls(**values, extra=extra)
