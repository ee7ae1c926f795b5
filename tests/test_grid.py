import pytest

from xamlkit.grid import (
    ColumnDefinition,
    ColumnDefinitionCollection,
    Grid,
    RowDefinition,
    RowDefinitionCollection,
)
from xamlkit.properties import Vec2
from xamlkit.xamlobject import Window, XamlObject


class Recorder(XamlObject):
    def __init__(self, log, label, window=None):
        super().__init__(window)
        self.log = log
        self.label = label

    def initialize(self):
        self.log.append(("initialize", self.label))

    def update(self):
        self.log.append(("update", self.label))
        super().update()

    def draw(self):
        self.log.append(("draw", self.label))


def make_grid(rows, columns):
    grid = Grid(Window(640, 480))
    grid.row_definitions = RowDefinitionCollection([RowDefinition(h) for h in rows])
    grid.column_definitions = ColumnDefinitionCollection([ColumnDefinition(w) for w in columns])
    return grid


def test_new_grid_has_empty_definitions():
    grid = Grid()
    assert grid.row_definitions.children == []
    assert grid.column_definitions.children == []
    assert grid.children == []


def test_definition_defaults():
    assert ColumnDefinition().width == 0
    assert RowDefinition().height == 0


def test_children_placed_in_cells():
    grid = make_grid([100, 50], [200, 300])
    first = XamlObject()
    second = XamlObject()
    second.row = 1
    second.column = 1
    grid.children = [first, second]
    grid.set_bounding_box(Vec2(10, 20), Vec2(600, 480))

    assert first.min_coord == Vec2(10, 480 - 100)
    assert first.max_coord == Vec2(10 + 200, 480)
    assert second.min_coord == Vec2(10 + 200, 480 - 100 - 50)
    assert second.max_coord == Vec2(10 + 200 + 300, 480 - 100)


def test_cell_sizes_match_definitions():
    grid = make_grid([30, 70, 40], [15, 25])
    cells = []
    for row in range(3):
        for column in range(2):
            child = XamlObject()
            child.row = row
            child.column = column
            cells.append(child)
    grid.children = cells
    grid.set_bounding_box(Vec2(0, 0), Vec2(100, 200))
    heights = [child.max_coord.y - child.min_coord.y for child in cells]
    widths = [child.max_coord.x - child.min_coord.x for child in cells]
    assert heights == [30, 30, 70, 70, 40, 40]
    assert widths == [15, 25, 15, 25, 15, 25]


def test_rows_stack_downwards_without_gaps():
    grid = make_grid([10, 20, 30], [5])
    children = []
    for row in range(3):
        child = XamlObject()
        child.row = row
        children.append(child)
    grid.children = children
    grid.set_bounding_box(Vec2(0, 0), Vec2(50, 300))
    assert children[0].max_coord.y == 300
    assert [c.max_coord.y for c in children[1:]] == [c.min_coord.y for c in children[:-1]]


def test_without_row_definitions_uses_whole_height():
    grid = make_grid([], [40])
    grid.row_definitions = None
    child = XamlObject()
    grid.children = [child]
    grid.set_bounding_box(Vec2(5, 10), Vec2(100, 90))
    assert child.min_coord.y == 10
    assert child.max_coord.y == 90


def test_without_column_definitions_starts_at_right_edge():
    grid = make_grid([40], [])
    grid.column_definitions = None
    child = XamlObject()
    grid.children = [child]
    grid.set_bounding_box(Vec2(5, 10), Vec2(100, 90))
    assert child.min_coord.x == 100
    assert child.max_coord.x - child.min_coord.x == 100 - 5


def test_missing_row_raises():
    grid = make_grid([10], [10])
    child = XamlObject()
    child.row = 1
    grid.children = [child]
    with pytest.raises(IndexError):
        grid.set_bounding_box(Vec2(0, 0), Vec2(100, 100))


def test_missing_column_raises():
    grid = make_grid([10], [10])
    child = XamlObject()
    child.column = 3
    grid.children = [child]
    with pytest.raises(IndexError):
        grid.set_bounding_box(Vec2(0, 0), Vec2(100, 100))


def test_negative_index_raises():
    grid = make_grid([10, 20], [10])
    child = XamlObject()
    child.row = -1
    grid.children = [child]
    with pytest.raises(IndexError):
        grid.set_bounding_box(Vec2(0, 0), Vec2(100, 100))


def test_empty_definitions_reject_default_child():
    grid = Grid()
    grid.children = [XamlObject()]
    with pytest.raises(IndexError):
        grid.set_bounding_box(Vec2(0, 0), Vec2(100, 100))


def test_initialize_update_draw_reach_children_in_order():
    log = []
    grid = Grid()
    grid.children = [Recorder(log, "a"), Recorder(log, "b")]
    grid.initialize()
    grid.update()
    grid.draw()
    assert log == [
        ("initialize", "a"),
        ("initialize", "b"),
        ("update", "a"),
        ("update", "b"),
        ("draw", "a"),
        ("draw", "b"),
    ]


def test_set_bounding_box_updates_child_layout():
    log = []
    grid = make_grid([50], [60])
    child = Recorder(log, "a")
    child.margin = child.margin.uniform(0)
    grid.children = [child]
    grid.set_bounding_box(Vec2(0, 0), Vec2(100, 100))
    assert ("update", "a") in log
    assert child.local_min == child.min_coord
    assert child.local_max == child.max_coord
    assert grid.min_coord == Vec2(0, 0)