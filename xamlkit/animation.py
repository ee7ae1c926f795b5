"""Timed animation events delivered from a background scheduler thread."""

from __future__ import annotations

import heapq
import itertools
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

__all__ = ["AnimationEvent", "AnimationScheduler"]


@dataclass(order=True)
class AnimationEvent:
    """A request to update ``target`` at monotonic time ``time``."""

    time: float
    target: Any = field(default=None, compare=False)
    argument: int = field(default=-1, compare=False)

    @classmethod
    def after(cls, target: Any, delay: float, argument: int = -1) -> AnimationEvent:
        """An event for ``target`` due ``delay`` seconds from now."""
        return cls(time.monotonic() + delay, target, argument)


class AnimationScheduler:
    """Moves timed events to a ready list once they fall due.

    ``wake`` is called each time an event becomes ready, so that a waiting
    event loop can come round and call :meth:`process_pending`.
    """

    def __init__(self, wake: Callable[[], None] | None = None) -> None:
        self._wake = wake
        self._condition = threading.Condition()
        self._waiting: list[tuple[AnimationEvent, int]] = []
        self._counter = itertools.count()
        self._ready: list[AnimationEvent] = []
        self._ready_lock = threading.Lock()
        self._stopping = False
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        """Whether the scheduler thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def add_timeout_event(self, event: AnimationEvent) -> None:
        """Schedule ``event`` and wake the scheduler thread."""
        with self._condition:
            heapq.heappush(self._waiting, (event, next(self._counter)))
            self._condition.notify()

    def start(self) -> None:
        """Start the scheduler thread."""
        if self.running:
            raise RuntimeError("animation scheduler already running")
        with self._condition:
            self._stopping = False
        self._thread = threading.Thread(target=self._run, name="animation", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop the scheduler thread and wait for it to finish."""
        with self._condition:
            self._stopping = True
            self._condition.notify_all()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def process_pending(self) -> list[AnimationEvent]:
        """Deliver every ready event to its target and return them."""
        with self._ready_lock:
            pending, self._ready = self._ready, []
        for event in pending:
            event.target.animation_update(event.argument)
        return pending

    def __enter__(self) -> AnimationScheduler:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()

    def _take_due(self) -> list[AnimationEvent]:
        now = time.monotonic()
        due = []
        while self._waiting and self._waiting[0][0].time <= now:
            due.append(heapq.heappop(self._waiting)[0])
        return due

    def _run(self) -> None:
        while True:
            with self._condition:
                while True:
                    if self._stopping:
                        return
                    due = self._take_due()
                    if due:
                        break
                    if self._waiting:
                        timeout = self._waiting[0][0].time - time.monotonic()
                        self._condition.wait(max(timeout, 0.0))
                    else:
                        self._condition.wait()
            for event in due:
                with self._ready_lock:
                    self._ready.append(event)
                if self._wake is not None:
                    self._wake()