"""Things that can be drawn, and an ordered collection of them."""

from __future__ import annotations

import abc
import enum
from collections.abc import Iterator
from typing import Any


class Color(enum.Enum):
    """Named colours available to drawable objects."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    ORANGE = "orange"
    YELLOW = "yellow"
    VIOLET = "violet"
    INDIGO = "indigo"
    WHITE = "white"


class Renderable(abc.ABC):
    """An object that draws itself onto a renderer.

    ``visible`` starts out True.
    """

    def __init__(self) -> None:
        self.visible = True

    @abc.abstractmethod
    def render(self, renderer: Any, debug: bool) -> None:
        """Draw onto ``renderer``; ``debug`` asks for debugging output."""


class Renderables:
    """An ordered collection of renderable objects, drawn in insertion order."""

    def __init__(self) -> None:
        self._items: list[Renderable] = []

    def append(self, renderable: Renderable) -> None:
        """Add an object to be drawn after those already held."""
        self._items.append(renderable)

    def render_all(self, renderer: Any, debug: bool) -> None:
        """Draw every object in the order it was added."""
        for item in self._items:
            item.render(renderer, debug)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Renderable]:
        return iter(self._items)