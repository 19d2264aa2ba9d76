"""Collision between a platform and the player."""

from __future__ import annotations

from booster.component import Rect, Update


class PlatformUpdate(Update):
    """Pushes the player out of the platform and lands them on its top."""

    def __init__(self) -> None:
        self.position = Rect()
        self._player = None

    def assemble(self, level_update, player_update) -> None:
        self._player = player_update

    def update(self, elapsed: float) -> None:
        if self._player is None:
            raise RuntimeError("platform update used before assemble")
        player = self._player.position
        platform = self.position
        if not platform.intersects(player):
            return

        feet = (player.left + player.width / 2, player.top + player.height)
        right = (player.left + player.width, player.top + player.height / 2)
        left = (player.left, player.top + player.height / 2)
        head = (player.left + player.width / 2, player.top)

        if platform.contains(*feet):
            if feet[1] > platform.top:
                player.top = platform.top - player.height
                self._player.is_grounded = True
        elif platform.contains(*right):
            player.left = platform.left - player.width
        elif platform.contains(*left):
            player.left = platform.left + platform.width
        elif platform.contains(*head):
            player.top = platform.top + platform.height