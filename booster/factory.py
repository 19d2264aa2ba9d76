"""Building the level's game objects and wiring them together."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from booster.camera_graphics import CameraGraphics, Window
from booster.camera_update import CameraUpdate
from booster.component import Canvas, Rect
from booster.fireball_graphics import FireballGraphics
from booster.fireball_update import FireballUpdate
from booster.game_object import GameObject
from booster.input import InputDispatcher
from booster.level_update import LevelUpdate
from booster.menu_graphics import MenuGraphics
from booster.menu_update import MenuUpdate
from booster.platform_graphics import PlatformGraphics
from booster.platform_update import PlatformUpdate
from booster.player_graphics import PlayerGraphics
from booster.player_update import PlayerUpdate
from booster.rain_graphics import RainGraphics

logger = logging.getLogger(__name__)


class Factory:
    """Knows how to assemble every game object of a level."""

    PLAYER_TEX = Rect(0, 0, 80, 96)
    PLATFORM_TEX = Rect(607, 0, 10, 10)
    FIREBALL_TEX = Rect(870, 0, 32, 32)
    RAIN_TEX = Rect(0, 100, 100, 100)
    CAM_TEX = Rect(610, 36, 40, 30)
    MAP_CAM_TEX = Rect(665, 0, 100, 70)
    TOP_MENU_TEX = Rect(770, 0, 100, 100)

    CAM_VIEW_WIDTH = 300.0
    CAM_SCREEN_RATIO = Rect(0.0, 0.0, 1.0, 1.0)
    MAP_CAM_VIEW_WIDTH = 800.0
    MAP_CAM_VIEW_HEIGHT = MAP_CAM_VIEW_WIDTH / 2
    MAP_CAM_SCREEN_RATIO = Rect(0.3, 0.84, 0.4, 0.15)

    PLATFORM_COUNT = 8
    FIREBALL_COUNT = 12
    RAIN_COVERAGE_PER_OBJECT = 25
    RAIN_AREA = 350

    def __init__(
        self,
        window: Window,
        sound,
        screen_size: tuple[int, int],
        asset_dir: str | Path = ".",
    ) -> None:
        self._window = window
        self._sound = sound
        self._screen_size = screen_size
        self._asset_dir = Path(asset_dir)
        try:
            self.texture = pygame.image.load(str(self._asset_dir / "graphics/texture.png"))
        except (pygame.error, OSError):
            self.texture = None
            logger.warning("Texture not loaded")
        else:
            window.texture = self.texture

    @staticmethod
    def _copy(rect: Rect) -> Rect:
        return Rect(rect.left, rect.top, rect.width, rect.height)

    def load_level(
        self,
        game_objects: list[GameObject],
        canvas: Canvas,
        input_dispatcher: InputDispatcher,
    ) -> None:
        """Create the level's objects, append them in draw order and register their input."""
        sound = self._sound

        level = GameObject()
        level_update = LevelUpdate(sound)
        level.add_component(level_update)
        game_objects.append(level)

        player = GameObject()
        player_update = PlayerUpdate(sound)
        player_update.assemble(level_update, None)
        player.add_component(player_update)
        input_dispatcher.register_new_input_receiver(player_update.input_receiver)
        player_graphics = PlayerGraphics()
        player_graphics.assemble(canvas, player_update, self._copy(self.PLAYER_TEX))
        player.add_component(player_graphics)
        game_objects.append(player)

        level_update.assemble(None, player_update)

        for _ in range(self.PLATFORM_COUNT):
            platform = GameObject()
            platform_update = PlatformUpdate()
            platform_update.assemble(None, player_update)
            platform.add_component(platform_update)
            platform_graphics = PlatformGraphics()
            platform_graphics.assemble(canvas, platform_update, self._copy(self.PLATFORM_TEX))
            platform.add_component(platform_graphics)
            game_objects.append(platform)
            level_update.add_platform_position(platform_update.position)

        for _ in range(self.FIREBALL_COUNT):
            fireball = GameObject()
            fireball_update = FireballUpdate(lambda: level_update.is_paused, sound)
            fireball_update.assemble(level_update, player_update)
            fireball.add_component(fireball_update)
            fireball_graphics = FireballGraphics()
            fireball_graphics.assemble(canvas, fireball_update, self._copy(self.FIREBALL_TEX))
            fireball.add_component(fireball_graphics)
            game_objects.append(fireball)

        coverage = self.RAIN_COVERAGE_PER_OBJECT
        half = self.RAIN_AREA // 2
        for h in range(-half, half, coverage):
            for v in range(-half, half, coverage):
                rain = GameObject()
                rain_graphics = RainGraphics(player_update.position, h, v, coverage)
                rain_graphics.assemble(canvas, None, self._copy(self.RAIN_TEX))
                rain.add_component(rain_graphics)
                game_objects.append(rain)

        width, height = self._screen_size
        ratio = float(width) / float(height)

        camera = GameObject()
        camera_update = CameraUpdate()
        camera_update.assemble(None, player_update)
        camera.add_component(camera_update)
        camera_graphics = CameraGraphics(
            self._window,
            (self.CAM_VIEW_WIDTH, self.CAM_VIEW_WIDTH / ratio),
            self._copy(self.CAM_SCREEN_RATIO),
            self._asset_dir,
        )
        camera_graphics.assemble(canvas, camera_update, self._copy(self.CAM_TEX))
        camera.add_component(camera_graphics)
        game_objects.append(camera)

        def show_time(value: float) -> None:
            camera_graphics.time = value

        level_update.connect_to_camera_time(show_time)

        map_camera = GameObject()
        map_camera_update = CameraUpdate()
        map_camera_update.assemble(None, player_update)
        map_camera.add_component(map_camera_update)
        input_dispatcher.register_new_input_receiver(map_camera_update.input_receiver())
        map_camera_graphics = CameraGraphics(
            self._window,
            (self.MAP_CAM_VIEW_WIDTH, self.MAP_CAM_VIEW_HEIGHT / ratio),
            self._copy(self.MAP_CAM_SCREEN_RATIO),
            self._asset_dir,
        )
        map_camera_graphics.assemble(canvas, map_camera_update, self._copy(self.MAP_CAM_TEX))
        map_camera.add_component(map_camera_graphics)
        game_objects.append(map_camera)

        menu = GameObject()
        menu_update = MenuUpdate(self._window.close, sound)
        menu_update.assemble(level_update, player_update)
        input_dispatcher.register_new_input_receiver(menu_update.input_receiver)
        menu.add_component(menu_update)
        menu_graphics = MenuGraphics()
        menu_graphics.assemble(canvas, menu_update, self._copy(self.TOP_MENU_TEX))
        menu.add_component(menu_graphics)
        game_objects.append(menu)