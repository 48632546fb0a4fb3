from __future__ import annotations
from typing import Iterator, List, NamedTuple, Protocol, Tuple, runtime_checkable

import numpy as np
from numpy import ndarray as NDArray


class GradientStop(NamedTuple):
    position: float
    color: str


@runtime_checkable
class ColorStopGradient(Protocol):
    """Anything accepting ``(position, color)`` stops, e.g. a canvas gradient."""

    def add_color_stop(self, position: float, color: str) -> None: ...


@runtime_checkable
class GradientSurface(Protocol):
    """Drawing surface able to create a linear gradient over a segment."""

    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> ColorStopGradient: ...


class LinearGradient:
    """
    Stop list for a linear gradient between two surface points.

    Stops are kept in insertion order, which is the order renderers apply
    them in. Two stops may share a position to produce a hard edge.
    """

    __slots__ = ('start', 'end', '_stops')

    def __init__(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.start: Tuple[float, float] = (x0, y0)
        self.end: Tuple[float, float] = (x1, y1)
        self._stops: List[GradientStop] = []

    def add_color_stop(self, position: float, color: str) -> None:
        self._stops.append(GradientStop(float(position), color))

    @property
    def stops(self) -> Tuple[GradientStop, ...]:
        return tuple(self._stops)

    @property
    def positions(self) -> NDArray:
        return np.array([s.position for s in self._stops], dtype=float)

    @property
    def colors(self) -> List[str]:
        return [s.color for s in self._stops]

    @property
    def is_empty(self) -> bool:
        return not self._stops

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[GradientStop]:
        return iter(self._stops)

    def __repr__(self) -> str:
        return f"LinearGradient(start={self.start}, end={self.end}, stops={self._stops!r})"


class StopListSurface:
    """Surface producing plain :class:`LinearGradient` objects."""

    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> LinearGradient:
        return LinearGradient(x0, y0, x1, y1)
