"""The game's entry point and main loop."""

from __future__ import annotations

import argparse
from typing import Iterable

import pygame

from booster.camera_graphics import Window
from booster.component import Canvas, Clock
from booster.factory import Factory
from booster.game_object import GameObject
from booster.input import Event, EventType, InputDispatcher, Key
from booster.sound import SoundEngine

BACKGROUND_COLOR = (100, 100, 100)

_KEYS = {
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_F1: Key.F1,
}


def translate_event(event: pygame.event.Event) -> Event | None:
    """Convert a pygame event into a game event, or None if the game ignores it."""
    if event.type == pygame.KEYDOWN:
        return Event(EventType.KEY_PRESSED, _KEYS.get(event.key, Key.OTHER))
    if event.type == pygame.KEYUP:
        return Event(EventType.KEY_RELEASED, _KEYS.get(event.key, Key.OTHER))
    if event.type == pygame.MOUSEWHEEL:
        vertical = event.y != 0
        delta = event.y if vertical else event.x
        return Event(
            EventType.MOUSE_WHEEL_SCROLLED,
            wheel_delta=float(delta),
            vertical_wheel=vertical,
        )
    if event.type == pygame.QUIT:
        return Event(EventType.CLOSED)
    return None


def _poll_events() -> list[Event]:
    translated = (translate_event(event) for event in pygame.event.get())
    return [event for event in translated if event is not None]


def run_frame(
    game_objects: Iterable[GameObject],
    canvas: Canvas,
    input_dispatcher: InputDispatcher,
    elapsed: float,
) -> None:
    """Dispatch input, update every object, then draw every object."""
    objects = list(game_objects)
    input_dispatcher.dispatch_input_events()
    for game_object in objects:
        game_object.update(elapsed)
    for game_object in objects:
        game_object.draw(canvas)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="booster", description="Run the Booster game.")
    parser.add_argument("--assets", default=".", help="directory holding the game's assets")
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    pygame.init()
    try:
        info = pygame.display.Info()
        screen_size = (info.current_w, info.current_h)
        flags = 0 if args.windowed else pygame.FULLSCREEN
        surface = pygame.display.set_mode(screen_size, flags)
        pygame.display.set_caption("Booster")

        window = Window(surface)
        sound = SoundEngine(args.assets)
        input_dispatcher = InputDispatcher(_poll_events)
        game_objects: list[GameObject] = []
        canvas = Canvas()
        Factory(window, sound, screen_size, args.assets).load_level(
            game_objects, canvas, input_dispatcher
        )

        clock = Clock()
        while window.is_open:
            elapsed = clock.restart()
            surface.fill(BACKGROUND_COLOR)
            run_frame(game_objects, canvas, input_dispatcher, elapsed)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())