"""Cameras: a view onto the world, the window it renders into, and the camera component."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import pygame

from booster.component import Canvas, Graphics, Rect, Vertex

_TEXT_COLOR = (255, 0, 0)
_TEXT_SCALE = 0.2
_FONT_SIZE = 30


class View:
    """A rectangle of the world, centred on ``center``, shown in a part of the window."""

    def __init__(self, size: tuple[float, float], viewport: Rect | None = None) -> None:
        self.size = (float(size[0]), float(size[1]))
        self.viewport = viewport if viewport is not None else Rect(0.0, 0.0, 1.0, 1.0)
        self.center = (self.size[0] / 2, self.size[1] / 2)

    def zoom(self, factor: float) -> None:
        """Scale the visible area by ``factor``; above 1 shows more of the world."""
        self.size = (self.size[0] * factor, self.size[1] * factor)


class Window:
    """Renders world-space drawings onto a surface through the current view."""

    def __init__(self, surface: pygame.Surface, texture: pygame.Surface | None = None) -> None:
        self.surface = surface
        self.texture = texture
        self.is_open = True
        self.view = View(surface.get_size())

    def set_view(self, view: View) -> None:
        self.view = view

    def close(self) -> None:
        self.is_open = False

    def _viewport_pixels(self) -> tuple[float, float, float, float]:
        width, height = self.surface.get_size()
        vp = self.view.viewport
        return (vp.left * width, vp.top * height, vp.width * width, vp.height * height)

    def _to_screen(self, x: float, y: float) -> tuple[float, float]:
        vx, vy, vw, vh = self._viewport_pixels()
        cx, cy = self.view.center
        sw, sh = self.view.size
        return (
            vx + (x - (cx - sw / 2)) * vw / sw,
            vy + (y - (cy - sh / 2)) * vh / sh,
        )

    def map_pixel_to_coords(self, x: float, y: float) -> tuple[float, float]:
        """Return the world point shown at window pixel (x, y) under the current view."""
        vx, vy, vw, vh = self._viewport_pixels()
        cx, cy = self.view.center
        sw, sh = self.view.size
        return (
            cx - sw / 2 + (x - vx) * sw / vw,
            cy - sh / 2 + (y - vy) * sh / vh,
        )

    @contextmanager
    def _clipped(self) -> Iterator[pygame.Rect]:
        vx, vy, vw, vh = self._viewport_pixels()
        clip = pygame.Rect(round(vx), round(vy), round(vw), round(vh))
        previous = self.surface.get_clip()
        self.surface.set_clip(clip)
        try:
            yield clip
        finally:
            self.surface.set_clip(previous)

    def _blit(self, image: pygame.Surface, x0: float, y0: float, x1: float, y1: float) -> None:
        ax, ay = self._to_screen(x0, y0)
        bx, by = self._to_screen(x1, y1)
        left, top = round(min(ax, bx)), round(min(ay, by))
        width = round(max(ax, bx)) - left
        height = round(max(ay, by)) - top
        if width <= 0 or height <= 0:
            return
        target = pygame.Rect(left, top, width, height)
        with self._clipped() as clip:
            if not target.colliderect(clip):
                return
            self.surface.blit(pygame.transform.scale(image, (width, height)), target.topleft)

    def draw_sprite(self, image: pygame.Surface, x: float, y: float) -> None:
        """Draw an image at its natural size with its top-left corner at world (x, y)."""
        width, height = image.get_size()
        self._blit(image, x, y, x + width, y + height)

    def draw_text(self, text: str, font: pygame.font.Font, x: float, y: float) -> None:
        """Draw red text, scaled down, with its top-left corner at world (x, y)."""
        image = font.render(text, True, _TEXT_COLOR)
        width, height = image.get_size()
        self._blit(image, x, y, x + width * _TEXT_SCALE, y + height * _TEXT_SCALE)

    def _draw_quad(self, quad: tuple[Vertex, ...], texture_rect: pygame.Rect) -> None:
        x0, y0 = quad[0].position
        x1, y1 = quad[2].position
        u0, v0 = quad[0].tex_coords
        u1 = quad[1].tex_coords[0]
        v1 = quad[2].tex_coords[1]
        region = pygame.Rect(
            int(min(u0, u1)), int(min(v0, v1)), int(abs(u1 - u0)), int(abs(v1 - v0))
        ).clip(texture_rect)
        if region.width == 0 or region.height == 0:
            return
        image = self.texture.subsurface(region)
        if u1 < u0 or v1 < v0:
            image = pygame.transform.flip(image, u1 < u0, v1 < v0)
        self._blit(image, x0, y0, x1, y1)

    def draw_canvas(self, canvas: Canvas) -> None:
        """Draw every textured quad of the canvas; nothing is drawn without a texture."""
        if self.texture is None:
            return
        texture_rect = self.texture.get_rect()
        vertices = iter(canvas)
        for quad in zip(vertices, vertices, vertices, vertices):
            self._draw_quad(quad, texture_rect)


def _load_font(path: Path) -> pygame.font.Font | None:
    try:
        if not pygame.font.get_init():
            pygame.font.init()
    except pygame.error:
        return None
    for source in (str(path), None):
        try:
            return pygame.font.Font(source, _FONT_SIZE)
        except (pygame.error, OSError):
            continue
    return None


def _load_image(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError):
        return None


class CameraGraphics(Graphics):
    """Follows the camera update, scrolls the background and renders the canvas.

    A viewport narrower than the window makes a zoomable mini map; the full
    window camera also shows the elapsed level time.
    """

    MIN_WIDTH = 640.0
    MAX_WIDTH = 2000.0
    BACKGROUND_PARALLAX = 6

    def __init__(
        self,
        window: Window,
        view_size: tuple[float, float],
        viewport: Rect,
        asset_dir: str | Path = ".",
    ) -> None:
        self._window = window
        self.view = View(view_size, viewport)
        self.is_mini_map = viewport.width < 1
        self.time = 0.0
        assets = Path(asset_dir)
        self._font = None if self.is_mini_map else _load_font(assets / "fonts/KOMIKAP_.ttf")
        self._background = _load_image(assets / "graphics/backgroundTexture.png")
        self.background_position = (0.0, -200.0)
        self.background2_position = (0.0, 0.0)
        self._backgrounds_flipped = False
        self._previous_player = (0.0, 0.0)
        self._position: Rect | None = None
        self._start: int | None = None

    @property
    def time_text(self) -> str:
        """The level time as shown on screen, with six decimal places."""
        return f"{self.time:f}"

    def assemble(self, canvas: Canvas, update, tex_coords: Rect) -> None:
        self._position = update.position
        self._start = canvas.allocate_quad()
        canvas.set_quad_tex_coords(
            self._start, tex_coords.left, tex_coords.top, tex_coords.width, tex_coords.height
        )

    def _scroll_background(self, position: Rect) -> None:
        width = self._background.get_width() if self._background is not None else 0
        dx = (position.left - self._previous_player[0]) / self.BACKGROUND_PARALLAX
        dy = (position.top - self._previous_player[1]) / self.BACKGROUND_PARALLAX
        flipped = self._backgrounds_flipped
        lead = self.background2_position if flipped else self.background_position
        lead = (lead[0] + dx, lead[1] + dy)
        trail = (lead[0] + width, lead[1])
        if position.left > trail[0] + width // 2:
            self._backgrounds_flipped = not flipped
            lead = trail
        if flipped:
            self.background2_position, self.background_position = lead, trail
        else:
            self.background_position, self.background2_position = lead, trail

    def draw(self, canvas: Canvas) -> None:
        pos = self._position
        if pos is None or self._start is None:
            raise RuntimeError("camera graphics drawn before assemble")

        self.view.center = (pos.left, pos.top)
        width, height = self.view.size
        canvas.set_quad_position(
            self._start, pos.left - width / 2, pos.top - height / 2, width, height
        )

        if self.is_mini_map:
            if width < self.MAX_WIDTH and pos.width > 1:
                self.view.zoom(pos.width)
            elif width > self.MIN_WIDTH and pos.width < 1:
                self.view.zoom(pos.width)

        self._window.set_view(self.view)

        self._scroll_background(pos)
        self._previous_player = (pos.left, pos.top)

        if self._background is not None:
            self._window.draw_sprite(self._background, *self.background_position)
            self._window.draw_sprite(self._background, *self.background2_position)

        if not self.is_mini_map and self._font is not None:
            x, y = self._window.map_pixel_to_coords(5, 5)
            self._window.draw_text(self.time_text, self._font, x, y)

        self._window.draw_canvas(canvas)