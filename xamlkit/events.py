"""Input events and their dispatch to the objects listening for them."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union

from xamlkit.properties import Vec2

__all__ = [
    "EventType",
    "ClickEvent",
    "TextEvent",
    "KeyDownEvent",
    "UnhandledEventError",
    "EventDispatcher",
]

_log = logging.getLogger(__name__)


class EventType(Enum):
    """The kinds of event an object can listen for."""

    CLICK = "ClickEvent"
    KEY_DOWN = "KeyDownEvent"
    TEXT = "TextEvent"


@dataclass(frozen=True)
class ClickEvent:
    """A press of the primary mouse button at window coordinates."""

    x: float
    y: float
    event_type: ClassVar[EventType] = EventType.CLICK

    @property
    def location(self) -> Vec2:
        """Where the click happened."""
        return Vec2(float(self.x), float(self.y))


@dataclass(frozen=True)
class TextEvent:
    """Text typed by the user, as a string."""

    text: str
    event_type: ClassVar[EventType] = EventType.TEXT


@dataclass(frozen=True)
class KeyDownEvent:
    """A key press; no object handles it yet."""

    event_type: ClassVar[EventType] = EventType.KEY_DOWN


Event = Union[ClickEvent, TextEvent, KeyDownEvent]


class UnhandledEventError(RuntimeError):
    """Raised when an event of a kind that has no handler is processed."""


@dataclass
class EventDispatcher:
    """Queues events and delivers them to registered targets in order."""

    active_element: Any = None
    _listeners: dict[EventType, dict[int, Any]] = field(default_factory=dict, repr=False)
    _queue: deque[Event] = field(default_factory=deque, repr=False)

    def __init__(self) -> None:
        self.active_element = None
        self._listeners = {kind: {} for kind in EventType}
        self._queue = deque()

    def add(self, event_type: EventType, target: Any) -> None:
        """Register ``target`` for events of ``event_type``."""
        self._listeners[event_type].setdefault(id(target), target)

    def remove(self, event_type: EventType, target: Any) -> None:
        """Stop delivering ``event_type`` to ``target``; unknown targets are ignored."""
        self._listeners[event_type].pop(id(target), None)

    def listeners(self, event_type: EventType) -> list[Any]:
        """The targets currently registered for ``event_type``."""
        return list(self._listeners[event_type].values())

    def post(self, event: Event) -> None:
        """Queue an event for the next call to :meth:`handle_events`."""
        self._queue.append(event)

    @property
    def pending(self) -> int:
        """Number of events waiting to be handled."""
        return len(self._queue)

    def handle_events(self) -> None:
        """Deliver every queued event, oldest first."""
        while self._queue:
            event = self._queue.popleft()
            if isinstance(event, ClickEvent):
                self._handle_click(event)
            elif isinstance(event, TextEvent):
                self._handle_text(event)
            else:
                raise UnhandledEventError(f"no handler for {event.event_type.value}")

    def _handle_click(self, event: ClickEvent) -> None:
        location = event.location
        for target in self.listeners(EventType.CLICK):
            upper = target.max_rendered()
            lower = target.min_rendered()
            if lower.x < location.x < upper.x and lower.y < location.y < upper.y:
                _log.warning("Clicked %s", getattr(target, "name", ""))
                self.active_element = target
                target.click()

    def _handle_text(self, event: TextEvent) -> None:
        for target in self.listeners(EventType.TEXT):
            target.text_update(event.text)