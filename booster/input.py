"""Input events and their distribution to interested receivers."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable


class EventType(enum.Enum):
    KEY_PRESSED = enum.auto()
    KEY_RELEASED = enum.auto()
    MOUSE_WHEEL_SCROLLED = enum.auto()
    CLOSED = enum.auto()


class Key(enum.Enum):
    A = enum.auto()
    D = enum.auto()
    W = enum.auto()
    SPACE = enum.auto()
    ESCAPE = enum.auto()
    F1 = enum.auto()
    OTHER = enum.auto()


@dataclass(frozen=True)
class Event:
    """A single input event."""

    type: EventType
    key: Key | None = None
    wheel_delta: float = 0.0
    vertical_wheel: bool = True


class InputReceiver:
    """Collects events until its owner handles and clears them."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def add_event(self, event: Event) -> None:
        self.events.append(event)

    def clear_events(self) -> None:
        self.events.clear()


class InputDispatcher:
    """Polls events and hands every one to every registered receiver."""

    def __init__(self, poll_events: Callable[[], Iterable[Event]]) -> None:
        self._poll_events = poll_events
        self._receivers: list[InputReceiver] = []

    def dispatch_input_events(self) -> None:
        for event in self._poll_events():
            for receiver in self._receivers:
                receiver.add_event(event)

    def register_new_input_receiver(self, receiver: InputReceiver) -> None:
        self._receivers.append(receiver)