from __future__ import annotations
import logging
import math
from typing import Optional, Sequence

from boundednumbers.functions import clamp

from ..colors.color_parser import normalize_color
from ..geometry import SurfaceRect
from ..types.color_types import Color, Scalar, ValueToPixel
from ..zones.zone import ZoneInput, coerce_zones, threshold_zones
from .linear_gradient import ColorStopGradient, GradientSurface

logger = logging.getLogger(__name__)


def normalize_position(pixel: float, rect: SurfaceRect) -> float:
    """
    Map a surface pixel to a gradient offset in ``[0, 1]``.

    The offset runs from ``rect.top`` (0) to ``rect.bottom`` (1). Pixels
    outside the rectangle are clamped. A rectangle without positive height
    maps everything to 0.
    """
    height = rect.height
    if height <= 0:
        return 0.0
    t = (pixel - rect.top) / height
    if math.isnan(t):
        return 0.0
    return float(clamp(t, 0.0, 1.0))


def build_zone_gradient(
    surface: GradientSurface,
    rect: SurfaceRect,
    value_to_pixel: ValueToPixel,
    zones: Optional[Sequence[ZoneInput]],
    fill_opacity: Scalar = 1,
) -> ColorStopGradient:
    """
    Build a vertical gradient painting each zone in its own flat color.

    Zones are applied by descending ``from_`` on a sorted copy, so the
    caller's order (which decides point colors) is left alone. Each zone
    adds two stops of the same color at its normalized start and end;
    zones collapsing to a single offset add nothing.

    Args:
        surface: Surface creating the gradient object
        rect: Chart area the gradient spans, top to bottom
        value_to_pixel: Data value to surface pixel mapping
        zones: ``ColorZone`` objects or zone mappings; None or empty yields a
            gradient without stops, malformed entries are skipped
        fill_opacity: Alpha for zones without their own ``opacity``

    Returns:
        The gradient created by ``surface`` with the zone stops added
    """
    gradient = surface.create_linear_gradient(0, rect.top, 0, rect.bottom)
    if rect.height <= 0:
        logger.debug("Surface height %s is not positive, zone offsets collapse to 0", rect.height)

    zones = coerce_zones(zones, skip_invalid=True) or []
    for zone in sorted(zones, key=lambda z: z.from_, reverse=True):
        start = normalize_position(value_to_pixel(zone.from_), rect)
        end = normalize_position(value_to_pixel(zone.to), rect)
        if start == end:
            logger.debug("Skipping %r, collapses to offset %s", zone, start)
            continue

        alpha = zone.opacity if zone.opacity is not None else fill_opacity
        color = normalize_color(zone.color, alpha)
        gradient.add_color_stop(start, color)
        gradient.add_color_stop(end, color)

    return gradient


def build_threshold_gradient(
    surface: GradientSurface,
    rect: SurfaceRect,
    value_to_pixel: ValueToPixel,
    color: Color,
    negative_color: Color,
    threshold: Scalar = 0,
    fill_opacity: Scalar = 1,
) -> ColorStopGradient:
    """Two-band gradient: ``color`` above ``threshold``, ``negative_color`` below."""
    return build_zone_gradient(
        surface,
        rect,
        value_to_pixel,
        threshold_zones(color, negative_color, threshold),
        fill_opacity,
    )
