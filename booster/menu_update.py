"""The pause and game-over menu shown over the player."""

from __future__ import annotations

from typing import Callable

from booster.component import Rect, Update
from booster.input import EventType, InputReceiver, Key


class MenuUpdate(Update):
    """Toggles pause on Escape, quits on F1 while shown, and follows the player."""

    SIZE = 75.0
    HIDDEN = -999.0

    def __init__(self, close_window: Callable[[], None], sound) -> None:
        self._close_window = close_window
        self._sound = sound
        self.position = Rect()
        self.input_receiver = InputReceiver()
        self.is_visible = False
        self.game_over = False
        self._level = None
        self._anchor: Rect | None = None

    def _quit(self) -> None:
        if self._sound.music_is_playing:
            self._sound.stop_music()
        self._close_window()

    def _toggle(self) -> None:
        self.is_visible = not self.is_visible
        self._level.is_paused = not self._level.is_paused
        self.game_over = False
        if not self._level.is_paused:
            # Resuming immediately pauses the music again, as the game always has.
            for action in (self._sound.resume_music, self._sound.play_click,
                           self._sound.pause_music, self._sound.play_click):
                action()

    def handle_input(self) -> None:
        for event in self.input_receiver.events:
            if event.type is EventType.KEY_PRESSED and event.key is Key.F1 and self.is_visible:
                self._quit()
            if event.type is EventType.KEY_RELEASED and event.key is Key.ESCAPE:
                self._toggle()
        self.input_receiver.clear_events()

    def assemble(self, level_update, player_update) -> None:
        self._anchor = player_update.position
        self._level = level_update
        self.position.width = self.position.height = self.SIZE
        self._sound.start_music()
        self._sound.pause_music()

    def update(self, elapsed: float) -> None:
        if self._level is None:
            raise RuntimeError("menu is not attached to a level; call assemble first")
        self.handle_input()
        if self._level.is_paused and not self.is_visible:
            self.is_visible = True
            self.game_over = True
        if self.is_visible:
            self.position.left = self._anchor.left - self.position.width / 2
            self.position.top = self._anchor.top - self.position.height / 2
        else:
            self.position.left = self.position.top = self.HIDDEN