from types import SimpleNamespace

import pytest

from booster.input import Event, EventType, Key
from booster.player_update import PlayerUpdate
from booster.sound import SoundEngine


@pytest.fixture
def now():
    return [0.0]


@pytest.fixture
def level():
    return SimpleNamespace(is_paused=False)


def build(now):
    return PlayerUpdate(SoundEngine(enabled=False), lambda: now[0])


@pytest.fixture
def player(now, level):
    p = build(now)
    p.assemble(level, None)
    return p


def send(player, kind, *keys):
    for key in keys:
        player.input_receiver.add_event(Event(kind, key))


def test_assemble_sets_size(player):
    assert player.position.size == (20.0, 16.0)


def test_update_before_assemble_raises(now):
    with pytest.raises(RuntimeError):
        build(now).update(0.1)


def test_paused_update_changes_nothing(player, level):
    level.is_paused = True
    send(player, EventType.KEY_PRESSED, Key.D)
    player.update(0.5)
    assert player.position.position == (0.0, 0.0)
    assert len(player.input_receiver.events) == 1
    assert player.right_is_held_down is False


def test_gravity_pulls_down(player):
    player.update(0.1)
    assert player.position.top == pytest.approx(PlayerUpdate.GRAVITY * 0.1)
    assert player.position.left == 0.0


def test_handle_input_press_and_release(player):
    send(player, EventType.KEY_PRESSED, Key.D, Key.A, Key.W, Key.SPACE)
    player.handle_input()
    held = (player.right_is_held_down, player.left_is_held_down, player.boost_is_held_down, player.space_held_down)
    assert held == (True, True, True, True)
    assert player.input_receiver.events == []
    send(player, EventType.KEY_RELEASED, Key.D, Key.W)
    player.handle_input()
    held = (player.right_is_held_down, player.left_is_held_down, player.boost_is_held_down)
    assert held == (False, True, False)


def test_running_needs_ground(player):
    send(player, EventType.KEY_PRESSED, Key.D)
    player.update(0.1)
    assert player.position.left == 0.0
    player.is_grounded = True
    player.update(0.1)
    assert player.position.left == pytest.approx(PlayerUpdate.RUN_SPEED * 0.1)
    assert player.is_grounded is False


def test_boost_lifts(player):
    send(player, EventType.KEY_PRESSED, Key.W)
    player.update(0.1)
    assert player.position.top == pytest.approx((PlayerUpdate.GRAVITY - PlayerUpdate.BOOST_SPEED) * 0.1)


def test_jump_rises_then_ends(player, now):
    send(player, EventType.KEY_PRESSED, Key.SPACE)
    player.is_grounded = True
    player.update(0.1)
    assert player.in_jump is True
    assert player.position.top == pytest.approx((PlayerUpdate.GRAVITY - PlayerUpdate.JUMP_SPEED) * 0.1)
    top = player.position.top
    now[0] = PlayerUpdate.JUMP_DURATION + 0.1
    player.update(0.1)
    assert player.in_jump is False
    assert player.position.top > top