"""Drawing the menu, switching between the pause and game-over panels."""

from __future__ import annotations

from booster.component import Canvas, Graphics, Rect


class MenuGraphics(Graphics):
    """Shows the upper texture panel while paused and the lower one on game over."""

    def __init__(self) -> None:
        self._menu = None
        self._start: int | None = None
        self._tex: Rect | None = None
        self.current_status = False

    def _show_panel(self, canvas: Canvas, game_over: bool) -> None:
        tex = self._tex
        # The game-over panel sits directly below the pause panel.
        top = tex.top + tex.height if game_over else tex.top
        canvas.set_quad_tex_coords(self._start, tex.left, top, tex.width, tex.height)

    def assemble(self, canvas: Canvas, update, tex_coords: Rect) -> None:
        self._menu = update
        self.current_status = update.game_over
        self._tex = Rect(
            tex_coords.left, tex_coords.top, tex_coords.width, tex_coords.height
        )
        self._start = canvas.allocate_quad()
        self._show_panel(canvas, game_over=True)

    def draw(self, canvas: Canvas) -> None:
        menu = self._menu
        if menu is None or self._start is None:
            raise RuntimeError("menu graphics drawn before assemble")
        if menu.game_over and not self.current_status:
            self.current_status = True
            self._show_panel(canvas, game_over=True)
        elif not menu.game_over and self.current_status:
            self.current_status = False
            self._show_panel(canvas, game_over=False)
        pos = menu.position
        canvas.set_quad_position(self._start, pos.left, pos.top, pos.width, pos.height)