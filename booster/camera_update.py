"""Camera following the player, with optional wheel zoom."""

from __future__ import annotations

from booster.component import Rect, Update
from booster.input import EventType, InputReceiver


class CameraUpdate(Update):
    """Tracks the player; ``position.width`` carries this frame's zoom factor."""

    ZOOM_IN = 0.95
    ZOOM_OUT = 1.05

    def __init__(self) -> None:
        self.position = Rect()
        self.receives_input = False
        self._receiver: InputReceiver | None = None
        self._followed: Rect | None = None

    def input_receiver(self) -> InputReceiver:
        """Create a receiver for this camera and start handling its events."""
        self._receiver = InputReceiver()
        self.receives_input = True
        return self._receiver

    def handle_input(self) -> None:
        self.position.width = 1.0
        if self._receiver is None:
            return
        for event in self._receiver.events:
            if event.type is EventType.MOUSE_WHEEL_SCROLLED and event.vertical_wheel:
                self.position.width *= self.ZOOM_IN if event.wheel_delta > 0 else self.ZOOM_OUT
        self._receiver.clear_events()

    def assemble(self, level_update, player_update) -> None:
        self._followed = player_update.position

    def update(self, elapsed: float) -> None:
        followed = self._followed
        if followed is None:
            raise RuntimeError("camera has nothing to follow; call assemble first")
        if self.receives_input:
            self.handle_input()
        else:
            self.position.width = 1.0
        self.position.left, self.position.top = followed.left, followed.top