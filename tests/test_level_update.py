import random
from types import SimpleNamespace

import pytest

from booster.component import Rect
from booster.level_update import LevelUpdate
from booster.sound import SoundEngine


@pytest.fixture
def sound():
    return SoundEngine(enabled=False)


@pytest.fixture
def world(sound):
    level = LevelUpdate(sound, random.Random(7))
    player = SimpleNamespace(position=Rect(0, 0, 20, 16))
    platforms = [Rect() for _ in range(8)]
    for platform in platforms:
        level.add_platform_position(platform)
    times = []
    level.connect_to_camera_time(times.append)
    level.assemble(None, player)
    return SimpleNamespace(level=level, player=player, platforms=platforms, times=times)


def start(world, *steps):
    world.level.is_paused = False
    for step in steps or (0.0,):
        world.level.update(step)


def test_random_number_within_bounds(sound):
    level = LevelUpdate(sound, random.Random(1))
    assert {level.random_number(-3, 3) for _ in range(500)} == set(range(-3, 4))


def test_starts_paused_and_does_nothing(world):
    world.level.update(1.0)
    assert world.level.is_paused is True
    assert world.times == []
    assert all(p == Rect() for p in world.platforms)


def test_start_positions_level(world):
    start(world)
    platforms = world.platforms
    assert [p.left for p in platforms] == [i * 100 for i in range(8)]
    assert all(p.size == (100, 20) and p.top == 0 for p in platforms)
    assert world.player.position.position == (platforms[4].left + 2, platforms[4].top - 22)
    assert world.times[-1] == 0.0
    assert world.level.is_paused is False


def test_time_accumulates(world):
    start(world, 0.0, 0.25, 0.25)
    assert world.times[-1] == pytest.approx(0.5)
    assert world.level.time == pytest.approx(0.5)


def test_rearmost_platform_moves_ahead(world):
    start(world)
    last = Rect(**vars(world.platforms[7]))
    world.level.update(0.5)
    moved = world.platforms[0]
    assert last.top - 40 <= moved.top <= last.top + 40
    gap = moved.left - (last.left + last.width)
    assert (20 <= gap <= 40) if moved.top > last.top else (0 <= gap <= 20)
    assert 20 <= moved.width <= 200
    assert 10 <= moved.height <= 20


def test_platforms_cycle_in_order(world):
    start(world, 0.0, *[5.0] * 8)
    lefts = [p.left for p in world.platforms]
    assert lefts == sorted(lefts)


def test_lagging_behind_ends_game(world, sound):
    sound.start_music()
    start(world)
    world.player.position.left = -1000
    world.level.update(0.0)
    assert (world.level.is_paused, world.level.game_over) == (True, True)
    assert sound.music_is_playing is False


def test_restart_resets_time(world):
    start(world, 0.0, 3.0)
    world.player.position.left = -1000
    world.level.update(0.0)
    start(world, 0.1)
    assert world.level.time == pytest.approx(0.1)
    assert world.player.position.left == world.platforms[4].left + 2


def test_no_platforms_raises(sound):
    level = LevelUpdate(sound, random.Random(0))
    level.assemble(None, SimpleNamespace(position=Rect()))
    level.is_paused = False
    with pytest.raises(IndexError):
        level.update(0.1)