# booster

A side-scrolling platform game drawn with pygame. Platforms are moved ahead of
you as you run; fall behind the rearmost one and the run is over. Fireballs
sweep across the level from both sides, and a patch of rain follows you. A mini
map along the bottom of the screen shows a wider view of the level.

## Installing

```
pip install .
```

## Assets

The game reads these files from an asset directory (the working directory
unless `--assets` says otherwise):

- `graphics/texture.png`: the sprite sheet for the player, platforms,
  fireballs, rain and menu
- `graphics/backgroundTexture.png`: the scrolling background
- `fonts/KOMIKAP_.ttf`: the font of the on-screen clock
- `sound/click.wav`, `sound/jump.wav`, `sound/fireballLaunch.wav`
- `music/music.wav`

A missing file is not fatal. Without the sprite sheet a warning is logged and
no sprites are drawn; without the background there is no background; without
the font pygame's default font is used; missing sounds are silent.

## Playing

```
booster
```

The same entry point runs with `python -m booster.run`. Options:

- `--assets DIR`: directory holding the assets (default `.`)
- `--windowed`: open a window at the desktop size instead of going fullscreen

Controls:

| Key         | Action                                 |
|-------------|----------------------------------------|
| `D`         | run right (while on a platform)        |
| `A`         | run left (while on a platform)         |
| `W`         | boost upwards                          |
| `Space`     | jump (while on a platform)             |
| `Escape`    | show or hide the menu; pause / resume  |
| `F1`        | quit, while the menu is showing        |
| mouse wheel | zoom the mini map                      |

The game starts paused with the menu showing; press `Escape` to begin. When a
run ends the game pauses and the menu switches to its game-over panel; press
`Escape` to start again. The number in the top-left corner is the time, in
seconds, that the current run has lasted. A fireball that touches you knocks
you down by twice your height.

## What it does not do

- Closing the window through the window manager does not quit; use `F1` with
  the menu showing.
- There are no scores kept between runs and nothing is saved.
- The background music is started and paused when the level is built, and
  resuming play leaves it paused; only the sound effects are heard in play.

## Using the pieces

The game is made of small components that work without opening a window.

- `booster.game_object.GameObject` holds components; `update(elapsed)` calls
  `update` on every `booster.component.Update` and `draw(canvas)` calls `draw`
  on every `booster.component.Graphics`, in the order they were added.
- `booster.component.Canvas` is a list of vertices grouped into quads;
  `booster.component.Rect` is the rectangle every position is kept in;
  `booster.component.Clock` measures elapsed seconds from any time source.
- `booster.animator.Animator` steps through the frames of a sprite strip.
- `booster.input.InputDispatcher` hands every polled `Event` to each
  registered `InputReceiver`.
- `booster.sound.SoundEngine(base_dir, enabled=False)` keeps the music state
  without touching the audio device.
- `booster.factory.Factory.load_level` builds and wires the whole level, and
  `booster.run.run_frame` advances it by one frame.

```python
import pygame

from booster.camera_graphics import Window
from booster.component import Canvas
from booster.factory import Factory
from booster.input import Event, EventType, InputDispatcher, Key
from booster.run import run_frame
from booster.sound import SoundEngine

pending = [Event(EventType.KEY_RELEASED, Key.ESCAPE)]  # unpause


def poll():
    events = list(pending)
    pending.clear()
    return events


window = Window(pygame.Surface((800, 600)))
objects, canvas = [], Canvas()
dispatcher = InputDispatcher(poll)
Factory(window, SoundEngine(enabled=False), (800, 600)).load_level(
    objects, canvas, dispatcher
)
for _ in range(60):
    run_frame(objects, canvas, dispatcher, 1 / 60)
```

## Running the tests

```
pip install ".[test]"
pytest
```