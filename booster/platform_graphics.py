"""Drawing a platform."""

from __future__ import annotations

from booster.component import Canvas, Graphics, Rect


class PlatformGraphics(Graphics):
    """Stretches a fixed texture region over the platform's rectangle."""

    def __init__(self) -> None:
        self._position: Rect | None = None
        self._start: int | None = None

    def assemble(self, canvas: Canvas, update, tex_coords: Rect) -> None:
        self._position = update.position
        self._start = canvas.allocate_quad()
        canvas.set_quad_tex_coords(
            self._start,
            tex_coords.left,
            tex_coords.top,
            tex_coords.width,
            tex_coords.height,
        )

    def draw(self, canvas: Canvas) -> None:
        pos = self._position
        if pos is None or self._start is None:
            raise RuntimeError("platform graphics drawn before assemble")
        canvas.set_quad_position(self._start, pos.left, pos.top, pos.width, pos.height)