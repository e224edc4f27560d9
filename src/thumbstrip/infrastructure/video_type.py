"""Current video type cell with change notification.

Single writer (the player hook), many readers.  Writes take a lock and
observers are invoked synchronously after the value is stored.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

import structlog

from thumbstrip.domain.entities.video_type import VideoType

log = structlog.get_logger(__name__)

T = TypeVar("T")


class Event(Generic[T]):
    """Synchronous publish/subscribe primitive."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: list[Callable[[T], None]] = []

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register *callback*; returns a function that unsubscribes it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def __call__(self, value: T) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            callback(value)

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)


class VideoTypeState:
    def __init__(self, initial: VideoType = VideoType.MUSIC_VIDEO_TYPE_UNKNOWN) -> None:
        self._lock = threading.Lock()
        self._current = initial
        self.on_change: Event[VideoType] = Event()

    @property
    def current(self) -> VideoType:
        with self._lock:
            return self._current

    def set_from_string(self, name: str) -> None:
        """Switch to the type called *name*; unknown names are ignored."""
        new_type = VideoType.from_name(name)
        if new_type is None:
            return
        with self._lock:
            if self._current is new_type:
                return
            self._current = new_type
        log.debug("video_type_changed", video_type=new_type.name)
        self.on_change(new_type)

    def compare_and_set(self, expected: VideoType, new: VideoType) -> bool:
        """Atomically replace *expected* with *new*; True if the swap happened."""
        with self._lock:
            if self._current is not expected:
                return False
            changed = self._current is not new
            self._current = new
        if changed:
            log.debug("video_type_changed", video_type=new.name)
            self.on_change(new)
        return True
