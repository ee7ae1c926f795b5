"""A filled rectangle laid out inside its bounding box."""

from __future__ import annotations

from typing import Optional

from xamlkit.events import EventDispatcher
from xamlkit.properties import HorizontalAlignment, Vec2, VerticalAlignment
from xamlkit.xamlobject import Window, XamlObject

__all__ = ["color_components", "Rectangle", "QUAD_INDICES"]

QUAD_INDICES = (0, 1, 2, 1, 2, 3)


def color_components(fill: int) -> tuple[float, float, float, float]:
    """Split an ``0xAARRGGBB`` colour into red, green, blue, alpha in [0, 1]."""
    a = ((fill & 0xFF000000) >> 24) / 255.0
    r = ((fill & 0x00FF0000) >> 16) / 255.0
    g = ((fill & 0x0000FF00) >> 8) / 255.0
    b = (fill & 0x000000FF) / 255.0
    return (r, g, b, a)


class Rectangle(XamlObject):
    """A solid rectangle.

    ``vertices`` holds four corners as ``x, y, u, v`` quadruples, in the
    order top left, top right, bottom left, bottom right.
    """

    def __init__(
        self,
        window: Optional[Window] = None,
        events: Optional[EventDispatcher] = None,
    ) -> None:
        super().__init__(window, events)
        self.fill = 0xFF000000
        self.vertices: tuple[float, ...] = (0.0,) * 16

    @property
    def color(self) -> tuple[float, float, float, float]:
        """The fill as red, green, blue, alpha."""
        return color_components(self.fill)

    def _horizontal(self) -> tuple[float, float]:
        low, high, width = self.local_min.x, self.local_max.x, self.width
        align = self.horizontal_alignment
        if align is HorizontalAlignment.RIGHT:
            return max(high - width, low), high
        if align is HorizontalAlignment.LEFT:
            return low, min(low + width, high)
        mid = (low + high) / 2
        if align is HorizontalAlignment.CENTER:
            return max(mid - width / 2, low), min(mid + width / 2, high)
        if width == 0:
            return low, high
        return min(mid - width / 2, low), max(mid + width / 2, high)

    def _vertical(self) -> tuple[float, float]:
        """Return the top and bottom edges."""
        low, high, height = self.local_min.y, self.local_max.y, self.height
        align = self.vertical_alignment
        if align is VerticalAlignment.TOP:
            return high, max(high - height, low)
        if align is VerticalAlignment.BOTTOM:
            return min(low + height, high), low
        mid = (low + high) / 2
        if align is VerticalAlignment.CENTER:
            return mid + height / 2, mid - height / 2
        if height == 0:
            return high, low
        return min(mid + height / 2, low), max(mid - height / 2, high)

    def update(self) -> None:
        """Lay the rectangle out and recompute its vertices and rendered area."""
        super().update()
        left, right = self._horizontal()
        top, bottom = self._vertical()
        self.vertices = (
            left, top, 0.0, 1.0,
            right, top, 1.0, 1.0,
            left, bottom, 0.0, 0.0,
            right, bottom, 1.0, 0.0,
        )
        self.rendered_min = Vec2(left, bottom)
        self.rendered_max = Vec2(right, top)