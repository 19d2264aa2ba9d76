import pygame
import pytest

from booster.camera_graphics import CameraGraphics, Window
from booster.component import Canvas, Graphics
from booster.factory import Factory
from booster.fireball_update import FireballUpdate
from booster.input import Event, EventType, InputDispatcher, Key
from booster.level_update import LevelUpdate
from booster.menu_update import MenuUpdate
from booster.platform_update import PlatformUpdate
from booster.player_update import PlayerUpdate
from booster.sound import SoundEngine

SCREEN = (1920, 1080)


def _build(tmp_path):
    window = Window(pygame.Surface((320, 180)))
    sound = SoundEngine(tmp_path, enabled=False)
    factory = Factory(window, sound, SCREEN, tmp_path)
    pending = []
    dispatcher = InputDispatcher(lambda: list(pending))
    game_objects = []
    canvas = Canvas()
    factory.load_level(game_objects, canvas, dispatcher)
    return window, factory, game_objects, canvas, dispatcher, pending


def _components(game_objects, kind):
    return [c for obj in game_objects for c in obj.components if isinstance(c, kind)]


def test_platform_and_fireball_counts(tmp_path):
    _, _, objects, _, _, _ = _build(tmp_path)
    assert len(_components(objects, PlatformUpdate)) == Factory.PLATFORM_COUNT == 8
    assert len(_components(objects, FireballUpdate)) == Factory.FIREBALL_COUNT == 12


def test_every_graphics_component_owns_one_quad(tmp_path):
    _, _, objects, canvas, _, _ = _build(tmp_path)
    assert len(canvas) == 4 * len(_components(objects, Graphics))


def test_level_knows_every_platform(tmp_path):
    _, _, objects, _, _, _ = _build(tmp_path)
    level = objects[0].components[0]
    platforms = _components(objects, PlatformUpdate)
    assert isinstance(level, LevelUpdate)
    assert [id(p) for p in level.platform_positions] == [id(p.position) for p in platforms]


def test_player_receives_dispatched_input(tmp_path):
    _, _, objects, _, dispatcher, pending = _build(tmp_path)
    player = _components(objects, PlayerUpdate)[0]
    pending.append(Event(EventType.KEY_PRESSED, Key.D))
    dispatcher.dispatch_input_events()
    player.handle_input()
    assert player.right_is_held_down is True


def test_level_time_reaches_main_camera(tmp_path):
    _, _, objects, _, _, _ = _build(tmp_path)
    level = objects[0].components[0]
    level.is_paused = False
    objects[0].update(0.5)
    main = [c for c in _components(objects, CameraGraphics) if not c.is_mini_map]
    assert len(main) == 1
    assert main[0].time == level.time == 0.5


def test_camera_views_follow_screen_ratio(tmp_path):
    _, _, objects, _, _, _ = _build(tmp_path)
    cameras = _components(objects, CameraGraphics)
    main = next(c for c in cameras if not c.is_mini_map)
    mini = next(c for c in cameras if c.is_mini_map)
    ratio = SCREEN[0] / SCREEN[1]
    assert main.view.size[0] / main.view.size[1] == pytest.approx(ratio)
    assert mini.view.size[0] == 800.0
    assert mini.view.size[1] == pytest.approx(Factory.MAP_CAM_VIEW_HEIGHT / ratio)


def test_menu_f1_closes_window(tmp_path):
    window, _, objects, _, dispatcher, pending = _build(tmp_path)
    menu = _components(objects, MenuUpdate)[0]
    menu.update(0.0)
    assert menu.is_visible is True
    pending.append(Event(EventType.KEY_PRESSED, Key.F1))
    dispatcher.dispatch_input_events()
    menu.update(0.0)
    assert window.is_open is False


def test_missing_texture_leaves_window_untextured(tmp_path):
    window, factory, _, _, _, _ = _build(tmp_path)
    assert factory.texture is None
    assert window.texture is None


def test_texture_is_loaded_and_given_to_window(tmp_path):
    (tmp_path / "graphics").mkdir()
    pygame.image.save(pygame.Surface((64, 32)), str(tmp_path / "graphics" / "texture.png"))
    window = Window(pygame.Surface((320, 180)))
    factory = Factory(window, SoundEngine(tmp_path, enabled=False), SCREEN, tmp_path)
    assert factory.texture.get_size() == (64, 32)
    assert window.texture is factory.texture