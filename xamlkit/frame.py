"""The root object of a XAML page, covering the whole window."""

from __future__ import annotations

from typing import Optional

from xamlkit.events import EventDispatcher
from xamlkit.properties import Vec2
from xamlkit.rectangle import color_components
from xamlkit.xamlobject import Window, XamlObject

__all__ = ["Frame"]


class Frame(XamlObject):
    """A page root filled with a background colour."""

    def __init__(
        self,
        window: Optional[Window] = None,
        events: Optional[EventDispatcher] = None,
    ) -> None:
        super().__init__(window, events)
        self.width = 640
        self.height = 480
        self._fill = 0xFF000000
        self.rendered_max = Vec2(float(self.window.width), float(self.window.height))
        self.rendered_min = Vec2(0.0, 0.0)
        self.vertices: tuple[float, ...] = ()

    @property
    def fill(self) -> int:
        """The background colour as ``0xAARRGGBB``."""
        return self._fill

    @fill.setter
    def fill(self, value: int) -> None:
        self._fill = value
        self.update()

    @property
    def color(self) -> tuple[float, float, float, float]:
        """The background as red, green, blue, alpha."""
        return color_components(self._fill)

    def initialize(self) -> None:
        """Cover the window, build the background quad and prepare children."""
        width = float(self.window.width)
        height = float(self.window.height)
        self.set_bounding_box(Vec2(0.0, 0.0), Vec2(width, height))
        self.vertices = (
            0.0, 0.0, 0.0, 1.0,
            width, 0.0, 1.0, 1.0,
            0.0, height, 0.0, 0.0,
            width, height, 1.0, 0.0,
        )
        self.update()
        for child in self.children:
            child.initialize()

    def update(self) -> None:
        """A frame always covers the window, so there is nothing to lay out."""

    def draw(self) -> None:
        """Draw the background and then every child."""
        self.update()
        for child in self.children:
            child.draw()