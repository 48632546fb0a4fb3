from __future__ import annotations
from typing import Any, Callable, Dict, Iterator

from .series.styler import AreaSeriesStyler

StylerFactory = Callable[..., Any]


class StylerRegistry:
    """Named styler factories, filled explicitly by the integrating application."""

    def __init__(self) -> None:
        self._factories: Dict[str, StylerFactory] = {}

    def register(self, name: str, factory: StylerFactory) -> None:
        if name in self._factories:
            raise ValueError(f"Styler {name!r} is already registered")
        self._factories[name] = factory

    def get(self, name: str) -> StylerFactory:
        try:
            return self._factories[name]
        except KeyError:
            raise KeyError(f"No styler registered under {name!r}") from None

    def create(self, name: str, *args: Any, **kwargs: Any) -> Any:
        return self.get(name)(*args, **kwargs)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)


def register_area_styler(registry: StylerRegistry) -> StylerRegistry:
    registry.register(AreaSeriesStyler.id, AreaSeriesStyler)
    return registry
