"""The level: recycling platforms ahead of the player, timing and game over."""

from __future__ import annotations

import random
from typing import Callable

from booster.component import Rect, Update


class LevelUpdate(Update):
    """Moves the rearmost platform ahead of the others and detects game over."""

    def __init__(self, sound, rng: random.Random | None = None) -> None:
        self._sound = sound
        self._rng = rng or random.Random()
        self.is_paused = True
        self.game_over = True
        self.platform_positions: list[Rect] = []
        self.time = 0.0
        self._time_listener: Callable[[float], None] | None = None
        self._player_position: Rect | None = None
        self._creation_interval = 0.0
        self._since_last_platform = 0.0
        self._next_to_move = 0
        self._move_relative_to = 0

    def add_platform_position(self, position: Rect) -> None:
        self.platform_positions.append(position)

    def connect_to_camera_time(self, target: Callable[[float], None]) -> None:
        """Have ``target`` called with the level time whenever it changes."""
        self._time_listener = target

    def random_number(self, low: int, high: int) -> int:
        """Return a uniformly chosen integer in [low, high]."""
        return self._rng.randint(int(low), int(high))

    def assemble(self, level_update, player_update) -> None:
        self._player_position = player_update.position

    def _set_time(self, value: float) -> None:
        self.time = value
        if self._time_listener is not None:
            self._time_listener(value)

    def _position_level_at_start(self) -> None:
        platforms = self.platform_positions
        start_offset = platforms[0].left
        for i, platform in enumerate(platforms):
            platform.left = i * 100 + start_offset
            platform.top = 0
            platform.width = 100
            platform.height = 20
        middle = platforms[len(platforms) // 2]
        self._player_position.left = middle.left + 2
        self._player_position.top = middle.top - 22
        self._move_relative_to = len(platforms) - 1
        self._next_to_move = 0

    def _move_next_platform(self) -> None:
        relative = self.platform_positions[self._move_relative_to]
        moving = self.platform_positions[self._next_to_move]
        moving.top = relative.top + self.random_number(-40, 40)
        # A lower platform gets a bigger gap.
        if relative.top < moving.top:
            gap = self.random_number(20, 40)
        else:
            gap = self.random_number(0, 20)
        moving.left = relative.left + relative.width + gap
        moving.width = self.random_number(20, 200)
        moving.height = self.random_number(10, 20)
        self._creation_interval = moving.width / 90
        self._move_relative_to = self._next_to_move
        self._next_to_move = (self._next_to_move + 1) % len(self.platform_positions)

    def update(self, elapsed: float) -> None:
        if self.is_paused:
            return
        if self._player_position is None:
            raise RuntimeError("level update used before assemble")
        if self.game_over:
            self.game_over = False
            self._set_time(0.0)
            self._since_last_platform = 0.0
            self._position_level_at_start()

        self._set_time(self.time + elapsed)
        self._since_last_platform += elapsed

        if self._since_last_platform > self._creation_interval:
            self._move_next_platform()
            self._since_last_platform = 0.0

        player_left = self._player_position.left
        if not any(p.left < player_left for p in self.platform_positions):
            self.is_paused = True
            self.game_over = True
            self._sound.pause_music()