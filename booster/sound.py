"""Sound effects and background music."""

from __future__ import annotations

from pathlib import Path

import pygame

_LAUNCH_OFFSET = 100.0


def launch_pan(
    player_position: tuple[float, float], sound_location: tuple[float, float]
) -> float:
    """Return the sound's horizontal offset from the listener: left when behind the player."""
    if player_position[0] > sound_location[0]:
        return -_LAUNCH_OFFSET
    return _LAUNCH_OFFSET


class SoundEngine:
    """Plays the game's effects and music; with audio disabled only the state is kept."""

    def __init__(self, base_dir: str | Path = ".", enabled: bool = True) -> None:
        self._base_dir = Path(base_dir)
        self.music_is_playing = False
        self.last_launch_pan: float | None = None
        self.enabled = enabled and self._init_mixer()
        self._click = self._load("sound/click.wav")
        self._jump = self._load("sound/jump.wav")
        self._fireball_launch = self._load("sound/fireballLaunch.wav")

    @staticmethod
    def _init_mixer() -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error:
            return False
        return True

    def _load(self, relative: str):
        if not self.enabled:
            return None
        try:
            return pygame.mixer.Sound(str(self._base_dir / relative))
        except (pygame.error, FileNotFoundError):
            return None

    def play_click(self) -> None:
        if self._click is not None:
            self._click.play()

    def play_jump(self) -> None:
        if self._jump is not None:
            self._jump.play()

    def start_music(self) -> None:
        """Start the looping background track from the beginning."""
        if self.enabled:
            try:
                pygame.mixer.music.load(str(self._base_dir / "music/music.wav"))
                pygame.mixer.music.play(loops=-1)
            except (pygame.error, FileNotFoundError):
                pass
        self.music_is_playing = True

    def pause_music(self) -> None:
        if self.enabled:
            pygame.mixer.music.pause()
        self.music_is_playing = False

    def resume_music(self) -> None:
        if self.enabled:
            pygame.mixer.music.unpause()
        self.music_is_playing = True

    def stop_music(self) -> None:
        if self.enabled:
            pygame.mixer.music.stop()
        self.music_is_playing = False

    def play_fireball_launch(
        self,
        player_position: tuple[float, float],
        sound_location: tuple[float, float],
    ) -> None:
        """Play the launch sound panned to the side the fireball comes from."""
        pan = launch_pan(player_position, sound_location)
        self.last_launch_pan = pan
        if self._fireball_launch is None:
            return
        channel = self._fireball_launch.play()
        if channel is not None:
            if pan < 0:
                channel.set_volume(1.0, 0.0)
            else:
                channel.set_volume(0.0, 1.0)