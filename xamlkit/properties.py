"""Layout property types shared by XAML objects and the code generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VerticalAlignment(Enum):
    """How an element is placed vertically inside its bounding box."""

    STRETCH = "Stretch"
    CENTER = "Center"
    TOP = "Top"
    BOTTOM = "Bottom"


class HorizontalAlignment(Enum):
    """How an element is placed horizontally inside its bounding box."""

    STRETCH = "Stretch"
    CENTER = "Center"
    RIGHT = "Right"
    LEFT = "Left"


class TextAlignment(Enum):
    """How lines of text are aligned inside a text block."""

    CENTER = "Center"
    END = "End"
    START = "Start"


class TextWrapping(Enum):
    """Whether and how text wraps onto new lines."""

    NO_WRAP = "NoWrap"
    WRAP = "Wrap"
    WRAP_WHOLE_WORDS = "WrapWholeWords"


class Visibility(Enum):
    """Whether an element takes part in rendering."""

    VISIBLE = "Visible"
    COLLAPSED = "Collapsed"


@dataclass
class Vec2:
    """A pair of coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Thickness:
    """Margin widths on the four sides of an element."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @classmethod
    def uniform(cls, value: int) -> Thickness:
        """Return a thickness with the same width on every side."""
        return cls(value, value, value, value)

    def __add__(self, other: Thickness) -> Thickness:
        """Sum two thicknesses side by side.

        The summed right widths are stored as the top and the summed top
        widths as the right, matching the established layout behaviour.
        """
        if not isinstance(other, Thickness):
            return NotImplemented
        return Thickness(
            self.left + other.left,
            self.right + other.right,
            self.top + other.top,
            self.bottom + other.bottom,
        )