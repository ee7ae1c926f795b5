import pytest

from xamlkit.events import ClickEvent, EventDispatcher, EventType
from xamlkit.properties import Thickness, Vec2, Visibility
from xamlkit.xamlobject import Window, XamlObject


class RecordingObject(XamlObject):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = []

    def draw(self):
        self.calls.append("draw")

    def initialize(self):
        self.calls.append("initialize")

    def update(self):
        super().update()
        self.calls.append("update")


def test_defaults_follow_window():
    obj = XamlObject(Window(320, 240))
    assert obj.max_coord == Vec2(320, 240)
    assert obj.min_coord == Vec2(0, 0)
    assert obj.visibility is Visibility.VISIBLE
    assert obj.width == 0 and obj.height == 0


def test_update_applies_margin():
    obj = XamlObject(Window(100, 50))
    obj.margin = Thickness(1, 2, 3, 4)
    obj.update()
    assert obj.local_max.x + obj.margin.right == obj.max_coord.x
    assert obj.local_max.y + obj.margin.top == obj.max_coord.y
    assert obj.local_min.x - obj.margin.left == obj.min_coord.x
    assert obj.local_min.y - obj.margin.bottom == obj.min_coord.y


def test_update_clamps_when_margin_exceeds_box():
    obj = XamlObject(Window(10, 10))
    obj.margin = Thickness.uniform(20)
    obj.update()
    assert obj.local_max == obj.local_min


def test_set_bounding_box_reaches_children_and_derived():
    parent = XamlObject(Window(100, 100))
    child = RecordingObject(Window(100, 100))
    derived = RecordingObject(Window(100, 100))
    parent.children.append(child)
    parent.derived_elements.append(derived)
    parent.set_bounding_box(Vec2(5, 6), Vec2(50, 60))
    assert [item.min_coord for item in (parent, child, derived)] == [Vec2(5, 6)] * 3
    assert [item.max_coord for item in (parent, child, derived)] == [Vec2(50, 60)] * 3
    assert child.calls == ["update"]
    assert derived.local_max == Vec2(50, 60)


def test_set_bounding_box_copies_vectors():
    obj = XamlObject()
    low = Vec2(1, 2)
    obj.set_bounding_box(low, Vec2(9, 9))
    low.x = 100
    assert obj.min_coord.x == 1


def test_rendered_extents_include_derived():
    obj = XamlObject()
    part = XamlObject()
    obj.derived_elements.append(part)
    obj.rendered_min = Vec2(10, 20)
    obj.rendered_max = Vec2(30, 40)
    part.rendered_min = Vec2(5, 25)
    part.rendered_max = Vec2(35, 38)
    assert obj.min_rendered() == Vec2(5, 20)
    assert obj.max_rendered() == Vec2(35, 40)


def test_initialize_and_draw_visit_children():
    parent = XamlObject()
    child = RecordingObject()
    parent.children.append(child)
    parent.initialize()
    parent.draw()
    assert child.calls == ["initialize", "draw"]


def test_click_calls_handler_with_self():
    obj = XamlObject()
    seen = []
    obj.on_click = seen.append
    obj.click()
    assert seen == [obj]


def test_click_without_handler_is_quiet():
    obj = XamlObject()
    obj.click()
    assert obj.on_click is None


def test_on_click_registers_and_unregisters():
    events = EventDispatcher()
    obj = XamlObject(events=events)
    obj.on_click = lambda sender: None
    assert events.listeners(EventType.CLICK) == [obj]
    obj.on_click = None
    assert events.listeners(EventType.CLICK) == []


def test_click_event_dispatch_reaches_handler():
    events = EventDispatcher()
    obj = XamlObject(events=events)
    obj.rendered_min = Vec2(0, 0)
    obj.rendered_max = Vec2(10, 10)
    hits = []
    obj.on_click = hits.append
    events.post(ClickEvent(5, 5))
    events.handle_events()
    assert hits == [obj]
    assert events.active_element is obj


def test_animation_update_runs_update():
    obj = XamlObject(Window(100, 50))
    obj.margin = Thickness.uniform(5)
    obj.animation_update(3)
    assert obj.local_min == Vec2(5, 5)
    assert obj.local_max == Vec2(95, 45)


@pytest.mark.parametrize("width,height", [(640, 480), (1, 2)])
def test_window_fields(width, height):
    window = Window(width, height)
    assert XamlObject(window).max_coord == Vec2(width, height)