"""Fireballs that sweep across the level at the player's height."""

from __future__ import annotations

import random
from typing import Callable

from booster.component import Clock, Rect, Update


class FireballUpdate(Update):
    """Flies back and forth past the player, waiting a random time between passes."""

    SPEED = 250.0
    RANGE = 900.0
    MAX_SPAWN_DISTANCE = 250
    MIN_PAUSE = 1.0
    MAX_PAUSE = 6.0

    def __init__(
        self,
        is_paused: Callable[[], bool],
        sound,
        rng: random.Random | None = None,
        time_source: Callable[[], float] | None = None,
    ) -> None:
        self._is_paused = is_paused
        self._sound = sound
        self._rng = rng or random.Random()
        self.position = Rect()
        self.movement_paused = True
        self.left_to_right = True
        self._pause_clock = Clock(time_source)
        self._target: Rect | None = None
        self._roll_pause()

    @property
    def facing_right(self) -> bool:
        return self.left_to_right

    def random_number(self, low: float, high: float) -> int:
        """Return a uniformly chosen integer in [low, high], bounds truncated."""
        return self._rng.randint(int(low), int(high))

    def _roll_pause(self) -> None:
        self.pause_duration_target = float(self.random_number(self.MIN_PAUSE, self.MAX_PAUSE))

    def _random_height(self) -> int:
        top = self._target.top
        return self.random_number(top - self.MAX_SPAWN_DISTANCE, top + self.MAX_SPAWN_DISTANCE)

    def assemble(self, level_update, player_update) -> None:
        self._roll_pause()
        self._target = player_update.position
        self.position.top = self._random_height()
        self.position.left = self._target.left - self.random_number(200, 400)
        self.position.width = 10
        self.position.height = 10

    def _turn_around(self) -> None:
        self.movement_paused = True
        self._pause_clock.restart()
        self.left_to_right = not self.left_to_right
        self.position.top = self._random_height()
        self._roll_pause()

    def update(self, elapsed: float) -> None:
        if self._is_paused():
            return
        target = self._target
        if target is None:
            raise RuntimeError("fireball has no player to chase; call assemble first")

        if self.movement_paused:
            if self._pause_clock.elapsed() > self.pause_duration_target:
                self.movement_paused = False
                self._sound.play_fireball_launch(target.position, self.position.position)
            return

        step = self.SPEED * elapsed
        if self.left_to_right:
            self.position.left += step
            distance = self.position.left - target.left
        else:
            self.position.left -= step
            distance = target.left - self.position.left
        if distance > self.RANGE:
            self._turn_around()

        if target.intersects(self.position):
            target.top += target.height * 2