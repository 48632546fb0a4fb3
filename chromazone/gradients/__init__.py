"""
Zone Gradients
==============

Builds vertical multi-stop gradients that partition a chart area by
value zones or by a single threshold.

>>> from chromazone.geometry import SurfaceRect, LinearScale
>>> from chromazone.gradients import StopListSurface, build_threshold_gradient
>>> rect = SurfaceRect(top=0, bottom=100)
>>> scale = LinearScale.vertical((-50, 50), rect)
>>> g = build_threshold_gradient(StopListSurface(), rect, scale, "#00ff00", "#ff0000")
>>> [float(p) for p in g.positions]
[0.0, 0.5, 0.5, 1.0]
"""

from .linear_gradient import ColorStopGradient, GradientStop, GradientSurface, LinearGradient, StopListSurface
from .zone_gradient import build_threshold_gradient, build_zone_gradient, normalize_position

__all__ = [
    "ColorStopGradient",
    "GradientStop",
    "GradientSurface",
    "LinearGradient",
    "StopListSurface",
    "build_threshold_gradient",
    "build_zone_gradient",
    "normalize_position",
]
