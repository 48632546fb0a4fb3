from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from .types.color_types import Scalar


@dataclass(frozen=True)
class SurfaceRect:
    """Chart area in surface pixels. ``top`` is above ``bottom`` on screen."""

    top: float
    bottom: float
    left: float = 0.0
    right: float = 0.0

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def width(self) -> float:
        return self.right - self.left


class LinearScale:
    """
    Linear mapping from a data domain to a pixel range.

    The usual vertical axis maps ``domain[0]`` to the bottom pixel and
    ``domain[1]`` to the top one, so ``pixel_range`` is often descending.
    Values outside the domain extrapolate; infinities map to infinities.
    """

    __slots__ = ('domain', 'pixel_range')

    def __init__(self, domain: Tuple[Scalar, Scalar], pixel_range: Tuple[Scalar, Scalar]) -> None:
        if domain[0] == domain[1]:
            raise ValueError("Scale domain must not be empty")
        self.domain = (float(domain[0]), float(domain[1]))
        self.pixel_range = (float(pixel_range[0]), float(pixel_range[1]))

    @classmethod
    def vertical(cls, domain: Tuple[Scalar, Scalar], rect: SurfaceRect) -> LinearScale:
        return cls(domain, (rect.bottom, rect.top))

    def value_to_pixel(self, value: Union[Scalar, NDArray]) -> Union[float, NDArray]:
        d0, d1 = self.domain
        p0, p1 = self.pixel_range
        slope = (p1 - p0) / (d1 - d0)
        if isinstance(value, np.ndarray):
            return p0 + (value.astype(float) - d0) * slope
        if slope == 0:
            return p0
        return p0 + (float(value) - d0) * slope

    __call__ = value_to_pixel
