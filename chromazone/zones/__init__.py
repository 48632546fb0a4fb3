"""Value zones and value-to-color resolution."""

from .zone import ColorZone, ZoneInput, coerce_zone, coerce_zones, threshold_zones
from .resolver import color_for_value, np_colors_for_values

__all__ = [
    "ColorZone",
    "ZoneInput",
    "coerce_zone",
    "coerce_zones",
    "threshold_zones",
    "color_for_value",
    "np_colors_for_values",
]
