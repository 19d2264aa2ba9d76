"""Drawing an animated tile of rain that moves with the player."""

from __future__ import annotations

from typing import Callable

from booster.animator import Animator
from booster.component import Canvas, Graphics, Rect


class RainGraphics(Graphics):
    """A square of rain held at a fixed offset from the player."""

    FRAME_COUNT = 4
    FPS = 8

    def __init__(
        self,
        player_position: Rect,
        horizontal_offset: float,
        vertical_offset: float,
        coverage: int,
        time_source: Callable[[], float] | None = None,
    ) -> None:
        self._player_position = player_position
        self._horizontal_offset = horizontal_offset
        self._vertical_offset = vertical_offset
        self._scale = float(coverage)
        self._time_source = time_source
        self._animator: Animator | None = None
        self._start: int | None = None

    def assemble(self, canvas: Canvas, update, tex_coords: Rect) -> None:
        self._animator = Animator(
            tex_coords.left,
            tex_coords.top,
            self.FRAME_COUNT,
            tex_coords.width * self.FRAME_COUNT,
            tex_coords.height,
            self.FPS,
            self._time_source,
        )
        self._start = canvas.allocate_quad()

    def draw(self, canvas: Canvas) -> None:
        if self._animator is None or self._start is None:
            raise RuntimeError("rain graphics drawn before assemble")
        scale = self._scale
        x = self._player_position.left - (scale / 2 + self._horizontal_offset)
        y = self._player_position.top - (scale / 2 + self._vertical_offset)
        canvas.set_quad_position(self._start, x, y, scale, scale)
        section = self._animator.current_frame(False)
        canvas.set_quad_tex_coords(
            self._start, section.left, section.top, section.width, section.height
        )