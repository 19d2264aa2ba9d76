"""Drawing an animated fireball facing its direction of travel."""

from __future__ import annotations

from typing import Callable

from booster.animator import Animator
from booster.component import Canvas, Graphics, Rect


class FireballGraphics(Graphics):
    """Animates the fireball and mirrors it when it flies right to left."""

    FRAME_COUNT = 3
    FPS = 6

    def __init__(self, time_source: Callable[[], float] | None = None) -> None:
        self._time_source = time_source
        self._fireball = None
        self._animator: Animator | None = None
        self._section: Rect | None = None
        self._start: int | None = None

    def assemble(self, canvas: Canvas, update, tex_coords: Rect) -> None:
        self._fireball = update
        self._animator = Animator(
            tex_coords.left,
            tex_coords.top,
            self.FRAME_COUNT,
            tex_coords.width * self.FRAME_COUNT,
            tex_coords.height,
            self.FPS,
            self._time_source,
        )
        self._section = self._animator.current_frame(False)
        self._start = canvas.allocate_quad()
        canvas.set_quad_tex_coords(
            self._start,
            tex_coords.left,
            tex_coords.top,
            tex_coords.width,
            tex_coords.height,
        )

    def draw(self, canvas: Canvas) -> None:
        fireball = self._fireball
        if fireball is None or self._start is None:
            raise RuntimeError("fireball graphics drawn before assemble")
        pos = fireball.position
        canvas.set_quad_position(self._start, pos.left, pos.top, pos.width, pos.height)
        facing_right = fireball.facing_right
        self._section = self._animator.current_frame(not facing_right)
        section = self._section
        width = section.width if facing_right else -section.width
        canvas.set_quad_tex_coords(
            self._start, section.left, section.top, width, section.height
        )