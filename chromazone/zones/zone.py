from __future__ import annotations
import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..types.color_types import Color, Scalar

logger = logging.getLogger(__name__)


class ColorZone:
    """
    A value band drawn in a single color.

    ``from_`` and ``to`` are data values and may be given in either order;
    the band covers the closed interval between them. ``opacity`` overrides
    the fill opacity of the series for this band only.
    """
    __slots__ = ('from_', 'to', 'color', 'opacity', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, from_: Scalar, to: Scalar, color: Color, opacity: Optional[Scalar] = None) -> None:
        self.from_ = from_
        self.to = to
        self.color = color
        self.opacity = opacity
        super().__setattr__('_is_frozen', True)

    @property
    def low(self) -> Scalar:
        return min(self.from_, self.to)

    @property
    def high(self) -> Scalar:
        return max(self.from_, self.to)

    def contains(self, value: Scalar) -> bool:
        """Check whether ``value`` lies in ``[min(from_, to), max(from_, to)]``."""
        return self.low <= value <= self.high

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorZone):
            return NotImplemented
        return (self.from_, self.to, self.color, self.opacity) == (
            other.from_, other.to, other.color, other.opacity
        )

    def __hash__(self) -> int:
        return hash((self.from_, self.to, repr(self.color), self.opacity))

    def __repr__(self) -> str:
        extra = f", opacity={self.opacity}" if self.opacity is not None else ""
        return f"ColorZone(from_={self.from_}, to={self.to}, color={self.color!r}{extra})"


ZoneInput = Union[ColorZone, Mapping[str, Any]]


def coerce_zone(zone: ZoneInput) -> ColorZone:
    """Accept a ``ColorZone`` or a ``{"from", "to", "color", "opacity"}`` mapping."""
    if isinstance(zone, ColorZone):
        return zone
    if isinstance(zone, Mapping):
        start = zone["from"] if "from" in zone else zone["from_"]
        return ColorZone(start, zone["to"], zone["color"], zone.get("opacity"))
    raise TypeError(f"Unsupported zone type: {type(zone).__name__}")


def coerce_zones(
    zones: Optional[Iterable[ZoneInput]], skip_invalid: bool = False
) -> Optional[List[ColorZone]]:
    """
    Coerce every entry with :func:`coerce_zone`, keeping order.

    With ``skip_invalid`` entries that cannot be read as a zone (wrong type,
    missing keys) are dropped instead of raising.
    """
    if zones is None:
        return None
    if not skip_invalid:
        return [coerce_zone(z) for z in zones]
    result = []
    for zone in zones:
        try:
            result.append(coerce_zone(zone))
        except (KeyError, TypeError):
            logger.debug("Skipping malformed zone %r", zone)
    return result


def threshold_zones(color: Color, negative_color: Color, threshold: Scalar = 0) -> List[ColorZone]:
    """
    Express a threshold rule as two zones.

    Values above ``threshold`` get ``color``, values below get
    ``negative_color``. The split value itself belongs to both bands; the
    positive band is listed first so it wins point lookups.
    """
    return [
        ColorZone(math.inf, threshold, color),
        ColorZone(threshold, -math.inf, negative_color),
    ]
