"""The base class of every renderable XAML object and the window it lives in."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from xamlkit.events import EventDispatcher, EventType
from xamlkit.properties import (
    HorizontalAlignment,
    Thickness,
    Vec2,
    VerticalAlignment,
    Visibility,
)

__all__ = ["Window", "XamlObject"]

_FLT_MIN = 1.1754943508222875e-38
_FLT_MAX = 3.4028234663852886e38


@dataclass
class Window:
    """The size of the window objects are laid out in."""

    width: float = 0.0
    height: float = 0.0


ClickHandler = Callable[["XamlObject"], None]


class XamlObject:
    """A node of the visual tree with layout state and click handling.

    ``rendered_min`` and ``rendered_max`` hold the corners of the area the
    object itself actually covers; ``min_rendered()`` and ``max_rendered()``
    also take the derived elements it is built from into account.
    """

    def __init__(
        self,
        window: Optional[Window] = None,
        events: Optional[EventDispatcher] = None,
    ) -> None:
        self.window = window if window is not None else Window()
        self.events = events
        self.children: list[XamlObject] = []
        self.derived_elements: list[XamlObject] = []
        self.height: float = 0
        self.width: float = 0
        self.row = 0
        self.column = 0
        self.name = ""
        self.margin = Thickness()
        self.visibility = Visibility.VISIBLE
        self.horizontal_alignment = HorizontalAlignment.STRETCH
        self.vertical_alignment = VerticalAlignment.STRETCH
        self.min_coord = Vec2(0.0, 0.0)
        self.max_coord = Vec2(float(self.window.width), float(self.window.height))
        self.rendered_min = Vec2(0.0, 0.0)
        self.rendered_max = Vec2(0.0, 0.0)
        self.local_min = Vec2(0.0, 0.0)
        self.local_max = Vec2(0.0, 0.0)
        self._on_click: Optional[ClickHandler] = None

    @property
    def on_click(self) -> Optional[ClickHandler]:
        """The handler called with this object when it is clicked."""
        return self._on_click

    @on_click.setter
    def on_click(self, handler: Optional[ClickHandler]) -> None:
        if self.events is not None:
            if self._on_click is not None and handler is None:
                self.events.remove(EventType.CLICK, self)
            elif self._on_click is None and handler is not None:
                self.events.add(EventType.CLICK, self)
        self._on_click = handler

    def update(self) -> None:
        """Recompute the local area from the bounding box and the margin."""
        self.local_max.x = self.max_coord.x - self.margin.right
        self.local_max.y = self.max_coord.y - self.margin.top
        self.local_min.x = self.min_coord.x + self.margin.left
        self.local_min.y = self.min_coord.y + self.margin.bottom
        if self.local_max.x < self.local_min.x:
            self.local_max.x = self.local_min.x
        if self.local_max.y < self.local_min.y:
            self.local_max.y = self.local_min.y

    def initialize(self) -> None:
        """Prepare the object and its children for drawing."""
        for child in self.children:
            child.initialize()
        self.update()

    def draw(self) -> None:
        """Draw the object's children."""
        for child in self.children:
            child.draw()

    def set_bounding_box(self, minimum: Vec2, maximum: Vec2) -> None:
        """Set the area the object may render in and pass it down the tree."""
        self.min_coord = Vec2(minimum.x, minimum.y)
        self.max_coord = Vec2(maximum.x, maximum.y)
        for child in self.children:
            child.set_bounding_box(minimum, maximum)
        for derived in self.derived_elements:
            derived.set_bounding_box(minimum, maximum)
        self.update()

    def max_rendered(self) -> Vec2:
        """The upper right corner of everything the object renders."""
        result = Vec2(_FLT_MIN, _FLT_MIN)
        for part in (*self.derived_elements, self):
            result.x = max(result.x, part.rendered_max.x)
            result.y = max(result.y, part.rendered_max.y)
        return result

    def min_rendered(self) -> Vec2:
        """The lower left corner of everything the object renders."""
        result = Vec2(_FLT_MAX, _FLT_MAX)
        for part in (*self.derived_elements, self):
            result.x = min(result.x, part.rendered_min.x)
            result.y = min(result.y, part.rendered_min.y)
        return result

    def click(self) -> None:
        """Call the click handler, if there is one."""
        if self._on_click is not None:
            self._on_click(self)

    def animation_update(self, arg: int) -> None:
        """React to a due animation event by updating the layout."""
        self.update()