"""Countdown timer driven one second at a time."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class TimerObserver(Protocol):
    """Receives countdown progress and the end of a countdown."""

    def update(self) -> None:
        ...

    def update_time(self, time: int) -> None:
        ...


def format_time(seconds: int) -> str:
    """Render seconds as MM:SS."""
    sign = -1 if seconds < 0 else 1
    minutes, rest = divmod(abs(seconds), 60)
    return "%02d:%02d" % (sign * minutes, sign * rest)


class Timer:
    """A countdown in seconds; call :meth:`tick` once per elapsed second."""

    def __init__(self, subscriber: Optional[TimerObserver] = None) -> None:
        self.start_time = 0
        self.remaining_time = 0
        self.is_running = False
        self.subscriber = subscriber
        self._started_listeners: list[Callable[[], None]] = []

    @property
    def label(self) -> str:
        return format_time(self.remaining_time)

    def set_time(self, duration: int) -> None:
        self.start_time = duration
        self.remaining_time = duration

    def add_started_listener(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` every time the timer is started with time left."""
        self._started_listeners.append(callback)

    def start(self) -> None:
        if self.remaining_time <= 0:
            return
        for callback in self._started_listeners:
            callback()
        self.is_running = True

    def pause(self) -> None:
        self.is_running = False

    def reset(self) -> None:
        self.is_running = False
        self.remaining_time = self.start_time

    def tick(self) -> None:
        """Advance one second; a stopped timer ignores ticks."""
        if not self.is_running:
            return
        if self.remaining_time > 0:
            self.remaining_time -= 1
            if self.subscriber is not None:
                self.subscriber.update_time(self.remaining_time)
        else:
            self.is_running = False
            if self.subscriber is not None:
                self.subscriber.update()