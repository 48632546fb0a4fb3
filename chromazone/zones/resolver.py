from __future__ import annotations
import math
from typing import List, Optional, Sequence, Union

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Color, Scalar
from .zone import ZoneInput, coerce_zones


def color_for_value(
    value: Scalar,
    zones: Optional[Sequence[ZoneInput]] = None,
    color: Optional[Color] = None,
    negative_color: Optional[Color] = None,
    threshold: Scalar = 0,
) -> Optional[Color]:
    """
    Pick the color assigned to ``value``.

    Zones are scanned in the given order and the first one containing
    ``value`` wins. Without zones, the threshold rule applies: values below
    ``threshold`` take ``negative_color`` when it is set, everything else
    takes ``color``. A NaN value (a gap in the series) gets no color.

    Args:
        value: Data value
        zones: Ordered ``ColorZone`` objects or ``{"from", "to", "color"}``
            mappings; overlaps resolve to the earliest entry, malformed
            entries are skipped
        color: Color at or above the threshold
        negative_color: Color below the threshold
        threshold: Split value

    Returns:
        The assigned color, or None when nothing applies
    """
    if isinstance(value, float) and math.isnan(value):
        return None
    for zone in coerce_zones(zones, skip_invalid=True) or ():
        if zone.contains(value):
            return zone.color
    # Values outside every zone fall back to the threshold rule.
    if negative_color is not None and value < threshold:
        return negative_color
    return color


def np_colors_for_values(
    values: Union[Sequence[Scalar], NDArray],
    zones: Optional[Sequence[ZoneInput]] = None,
    color: Optional[Color] = None,
    negative_color: Optional[Color] = None,
    threshold: Scalar = 0,
) -> List[Optional[Color]]:
    """
    Vectorized: resolve colors for a whole series.

    Same rules as :func:`color_for_value`, NaN entries included.

    Returns:
        List of colors aligned with ``values``
    """
    arr = np.asarray(values, dtype=float)
    out: List[Optional[Color]] = [None] * arr.size
    flat = arr.reshape(-1)
    pending = ~np.isnan(flat)

    for zone in coerce_zones(zones, skip_invalid=True) or ():
        hit = pending & (flat >= zone.low) & (flat <= zone.high)
        for i in np.flatnonzero(hit):
            out[i] = zone.color
        pending &= ~hit

    if negative_color is not None:
        below = pending & (flat < threshold)
        for i in np.flatnonzero(below):
            out[i] = negative_color
        pending &= ~below
    for i in np.flatnonzero(pending):
        out[i] = color
    return out
