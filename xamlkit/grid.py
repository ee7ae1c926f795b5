"""A grid that lays its children out in rows and columns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from xamlkit.events import EventDispatcher
from xamlkit.properties import Vec2
from xamlkit.xamlobject import Window, XamlObject

__all__ = [
    "ColumnDefinition",
    "RowDefinition",
    "ColumnDefinitionCollection",
    "RowDefinitionCollection",
    "Grid",
]


@dataclass
class ColumnDefinition:
    """The width of one grid column."""

    width: int = 0


@dataclass
class RowDefinition:
    """The height of one grid row."""

    height: int = 0


@dataclass
class ColumnDefinitionCollection:
    """The columns of a grid, left to right."""

    children: list[ColumnDefinition] = field(default_factory=list)


@dataclass
class RowDefinitionCollection:
    """The rows of a grid, top to bottom."""

    children: list[RowDefinition] = field(default_factory=list)


def _cell(starts: list[float], sizes: list[float], index: int, what: str) -> tuple[float, float]:
    if not 0 <= index < len(starts):
        raise IndexError(f"{what} {index} is not defined in the grid")
    return starts[index], sizes[index]


class Grid(XamlObject):
    """A container that places each child in the cell named by its row and column.

    Rows are stacked downwards from the top of the bounding box and columns
    run rightwards from its left edge.
    """

    def __init__(
        self,
        window: Optional[Window] = None,
        events: Optional[EventDispatcher] = None,
    ) -> None:
        super().__init__(window, events)
        self.column_definitions: Optional[ColumnDefinitionCollection] = ColumnDefinitionCollection()
        self.row_definitions: Optional[RowDefinitionCollection] = RowDefinitionCollection()

    def initialize(self) -> None:
        """Prepare every child for drawing."""
        for child in self.children:
            child.initialize()

    def update(self) -> None:
        """Update the layout of every child."""
        for child in self.children:
            child.update()

    def draw(self) -> None:
        """Draw every child."""
        for child in self.children:
            child.draw()

    def _rows(self, minimum: Vec2, maximum: Vec2) -> tuple[list[float], list[float]]:
        if self.row_definitions is None:
            return [minimum.y], [maximum.y - minimum.y]
        starts: list[float] = []
        heights: list[float] = []
        position = maximum.y
        for row in self.row_definitions.children:
            height = float(row.height)
            heights.append(height)
            position -= height
            starts.append(position)
        return starts, heights

    def _columns(self, minimum: Vec2, maximum: Vec2) -> tuple[list[float], list[float]]:
        if self.column_definitions is None:
            return [maximum.x], [maximum.x - minimum.x]
        starts: list[float] = []
        widths: list[float] = []
        position = minimum.x
        for column in self.column_definitions.children:
            width = float(column.width)
            widths.append(width)
            starts.append(position)
            position += width
        return starts, widths

    def set_bounding_box(self, minimum: Vec2, maximum: Vec2) -> None:
        """Give each child the bounding box of its cell.

        Raises IndexError when a child names a row or column the grid lacks.
        """
        row_starts, row_heights = self._rows(minimum, maximum)
        column_starts, column_widths = self._columns(minimum, maximum)
        for child in self.children:
            y, height = _cell(row_starts, row_heights, child.row, "row")
            x, width = _cell(column_starts, column_widths, child.column, "column")
            child.set_bounding_box(Vec2(x, y), Vec2(x + width, y + height))