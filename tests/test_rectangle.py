import pytest

from xamlkit.properties import HorizontalAlignment, Thickness, Vec2, VerticalAlignment
from xamlkit.rectangle import QUAD_INDICES, Rectangle, color_components
from xamlkit.xamlobject import Window


def make(width=0, height=0, h=HorizontalAlignment.STRETCH, v=VerticalAlignment.STRETCH):
    rect = Rectangle(Window(200, 100))
    rect.width = width
    rect.height = height
    rect.horizontal_alignment = h
    rect.vertical_alignment = v
    rect.set_bounding_box(Vec2(0, 0), Vec2(200, 100))
    return rect


def test_color_components_extremes():
    assert color_components(0xFF000000) == (0.0, 0.0, 0.0, 1.0)
    assert color_components(0xFFFFFFFF) == (1.0, 1.0, 1.0, 1.0)
    assert color_components(0) == (0.0, 0.0, 0.0, 0.0)


def test_color_components_channels_are_separate():
    r, g, b, a = color_components(0x00FF0000)
    assert (r, g, b, a) == (1.0, 0.0, 0.0, 0.0)
    r, g, b, a = color_components(0x000000FF)
    assert (r, g, b, a) == (0.0, 0.0, 1.0, 0.0)


def test_default_fill_and_color():
    rect = Rectangle()
    assert rect.fill == 0xFF000000
    assert rect.color == (0.0, 0.0, 0.0, 1.0)


def test_stretch_fills_box():
    rect = make()
    assert rect.min_rendered() == Vec2(0, 0)
    assert rect.max_rendered() == Vec2(200, 100)


def test_left_and_top():
    rect = make(50, 20, HorizontalAlignment.LEFT, VerticalAlignment.TOP)
    assert rect.rendered_min.x == 0
    assert rect.rendered_max.x == 50
    assert rect.rendered_max.y == 100
    assert rect.rendered_max.y - rect.rendered_min.y == 20


def test_right_and_bottom():
    rect = make(50, 20, HorizontalAlignment.RIGHT, VerticalAlignment.BOTTOM)
    assert rect.rendered_max.x == 200
    assert rect.rendered_max.x - rect.rendered_min.x == 50
    assert rect.rendered_min.y == 0
    assert rect.rendered_max.y == 20


def test_center_is_symmetric():
    rect = make(40, 30, HorizontalAlignment.CENTER, VerticalAlignment.CENTER)
    mid_x = (rect.rendered_min.x + rect.rendered_max.x) / 2
    mid_y = (rect.rendered_min.y + rect.rendered_max.y) / 2
    assert mid_x == pytest.approx(100)
    assert mid_y == pytest.approx(50)
    assert rect.rendered_max.x - rect.rendered_min.x == pytest.approx(40)
    assert rect.rendered_max.y - rect.rendered_min.y == pytest.approx(30)


def test_oversized_left_is_clipped():
    rect = make(500, 0, HorizontalAlignment.LEFT)
    assert rect.rendered_max.x == 200


def test_vertices_match_rendered_area():
    rect = make(50, 20, HorizontalAlignment.LEFT, VerticalAlignment.TOP)
    v = rect.vertices
    assert len(v) == 16
    assert (v[0], v[9]) == (rect.rendered_min.x, rect.rendered_min.y)
    assert (v[4], v[1]) == (rect.rendered_max.x, rect.rendered_max.y)
    assert v[2::4] == (0.0, 1.0, 0.0, 1.0)
    assert v[3::4] == (1.0, 1.0, 0.0, 0.0)


def test_margin_shrinks_stretched_rectangle():
    rect = Rectangle(Window(200, 100))
    rect.margin = Thickness.uniform(10)
    rect.set_bounding_box(Vec2(0, 0), Vec2(200, 100))
    assert rect.rendered_min == Vec2(10, 10)
    assert rect.rendered_max == Vec2(190, 90)


def test_quad_indices_cover_all_rectangle_corners():
    rect = make(50, 20, HorizontalAlignment.LEFT, VerticalAlignment.TOP)
    corners = [tuple(rect.vertices[4 * i : 4 * i + 2]) for i in QUAD_INDICES]
    assert len(corners) == 6
    assert set(corners) == {(0, 100), (50, 100), (0, 80), (50, 80)}