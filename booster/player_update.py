"""Movement of the player: running, boosting, jumping and gravity."""

from __future__ import annotations

from typing import Callable

from booster.component import Clock, Rect, Update
from booster.input import EventType, InputReceiver, Key


class PlayerUpdate(Update):
    """Moves the player's rectangle in response to the held keys."""

    WIDTH = 20.0
    HEIGHT = 16.0
    GRAVITY = 165.0
    RUN_SPEED = 100.0
    BOOST_SPEED = 250.0
    JUMP_DURATION = 0.5
    JUMP_SPEED = 400.0

    _KEY_FLAGS = {
        Key.D: "right_is_held_down",
        Key.A: "left_is_held_down",
        Key.W: "boost_is_held_down",
        Key.SPACE: "space_held_down",
    }

    def __init__(self, sound, time_source: Callable[[], float] | None = None) -> None:
        self._sound = sound
        self.position = Rect()
        self.input_receiver = InputReceiver()
        self.right_is_held_down = False
        self.left_is_held_down = False
        self.boost_is_held_down = False
        self.space_held_down = False
        self.is_grounded = False
        self.in_jump = False
        self._jump_clock = Clock(time_source)
        self._level = None

    def assemble(self, level_update, player_update) -> None:
        self.position.width = self.WIDTH
        self.position.height = self.HEIGHT
        self._level = level_update

    def handle_input(self) -> None:
        """Update the held-key flags from the pending events, then drop them."""
        for event in self.input_receiver.events:
            if event.type not in (EventType.KEY_PRESSED, EventType.KEY_RELEASED):
                continue
            flag = self._KEY_FLAGS.get(event.key)
            if flag is not None:
                setattr(self, flag, event.type is EventType.KEY_PRESSED)
        self.input_receiver.clear_events()

    def update(self, elapsed: float) -> None:
        if self._level is None:
            raise RuntimeError("player update used before assemble")
        if self._level.is_paused:
            return

        self.position.top += self.GRAVITY * elapsed
        self.handle_input()

        if self.is_grounded:
            if self.right_is_held_down:
                self.position.left += elapsed * self.RUN_SPEED
            if self.left_is_held_down:
                self.position.left -= elapsed * self.RUN_SPEED

        if self.boost_is_held_down:
            self.position.top -= elapsed * self.BOOST_SPEED
            if self.right_is_held_down:
                self.position.left += elapsed * self.RUN_SPEED / 2
            if self.left_is_held_down:
                self.position.left -= elapsed * self.RUN_SPEED / 4

        if self.space_held_down and not self.in_jump and self.is_grounded:
            self._sound.play_jump()
            self.in_jump = True
            self._jump_clock.restart()

        if self.in_jump:
            if self._jump_clock.elapsed() < self.JUMP_DURATION / 2:
                self.position.top -= self.JUMP_SPEED * elapsed
            else:
                self.position.top += self.JUMP_SPEED * (elapsed / 4)
            if self._jump_clock.elapsed() > self.JUMP_DURATION:
                self.in_jump = False
            if self.right_is_held_down:
                self.position.left += elapsed * self.RUN_SPEED
            if self.left_is_held_down:
                self.position.left -= elapsed * self.RUN_SPEED

        self.is_grounded = False