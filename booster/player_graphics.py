"""Drawing the player: running animation, boost sprite and standing pose."""

from __future__ import annotations

from typing import Callable

from booster.animator import Animator
from booster.component import Canvas, Graphics, Rect


class PlayerGraphics(Graphics):
    """Writes the player's quad and picks the sprite from the held keys."""

    FRAME_COUNT = 6
    FPS = 12
    BOOST_TEX_LEFT = 536
    BOOST_TEX_TOP = 0
    BOOST_TEX_WIDTH = 69
    BOOST_TEX_HEIGHT = 100

    def __init__(self, time_source: Callable[[], float] | None = None) -> None:
        self._time_source = time_source
        self._player = None
        self._animator: Animator | None = None
        self._section: Rect | None = None
        self._standing_section: Rect | None = None
        self._start: int | None = None
        self.last_facing_right = True

    def assemble(self, canvas: Canvas, update, tex_coords: Rect) -> None:
        self._player = update
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
        self._standing_section = self._animator.current_frame(False)
        self._start = canvas.allocate_quad()

    def _set_boost(self, canvas: Canvas, mirrored: bool) -> None:
        if mirrored:
            canvas.set_quad_tex_coords(
                self._start,
                self.BOOST_TEX_LEFT + self.BOOST_TEX_WIDTH,
                self.BOOST_TEX_TOP,
                -self.BOOST_TEX_WIDTH,
                self.BOOST_TEX_HEIGHT,
            )
        else:
            canvas.set_quad_tex_coords(
                self._start,
                self.BOOST_TEX_LEFT,
                self.BOOST_TEX_TOP,
                self.BOOST_TEX_WIDTH,
                self.BOOST_TEX_HEIGHT,
            )

    def draw(self, canvas: Canvas) -> None:
        player = self._player
        if player is None or self._start is None:
            raise RuntimeError("player graphics drawn before assemble")
        pos = player.position
        canvas.set_quad_position(self._start, pos.left, pos.top, pos.width, pos.height)

        running = not player.in_jump and not player.boost_is_held_down
        if player.right_is_held_down and running and player.is_grounded:
            self._section = self._animator.current_frame(False)
        if player.left_is_held_down and running and player.is_grounded:
            self._section = self._animator.current_frame(True)
        else:
            # The facing may have changed while jumping or boosting.
            self.last_facing_right = not player.left_is_held_down

        section = self._section
        width, height = section.width, section.height

        if player.right_is_held_down and running:
            canvas.set_quad_tex_coords(
                self._start, section.left, section.top, width, height
            )
        elif player.left_is_held_down and running:
            canvas.set_quad_tex_coords(
                self._start, section.left, section.top, -width, height
            )
        elif player.boost_is_held_down:
            self._set_boost(
                canvas,
                mirrored=player.left_is_held_down and not player.right_is_held_down,
            )
        else:
            standing = self._standing_section
            if self.last_facing_right:
                canvas.set_quad_tex_coords(
                    self._start, standing.left, standing.top, width, height
                )
            else:
                canvas.set_quad_tex_coords(
                    self._start, standing.left + width, standing.top, -width, height
                )