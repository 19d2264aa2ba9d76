"""Core building blocks: rectangles, the vertex canvas, clocks and component bases."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterator


@dataclass
class Rect:
    """An axis-aligned rectangle with its top-left corner at (left, top)."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.left, self.top)

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def _bounds(self) -> tuple[float, float, float, float]:
        right = self.left + self.width
        bottom = self.top + self.height
        return (
            min(self.left, right),
            min(self.top, bottom),
            max(self.left, right),
            max(self.top, bottom),
        )

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap with a non-empty area."""
        a_left, a_top, a_right, a_bottom = self._bounds()
        b_left, b_top, b_right, b_bottom = other._bounds()
        return max(a_left, b_left) < min(a_right, b_right) and max(
            a_top, b_top
        ) < min(a_bottom, b_bottom)

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies inside; right and bottom edges are excluded."""
        left, top, right, bottom = self._bounds()
        return left <= x < right and top <= y < bottom


@dataclass
class Vertex:
    """One corner of a textured quad: a world position and a texture coordinate."""

    position: tuple[float, float] = (0.0, 0.0)
    tex_coords: tuple[float, float] = (0.0, 0.0)


class Canvas:
    """A growing array of vertices, grouped four at a time into quads."""

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []

    def allocate_quad(self) -> int:
        """Append four vertices and return the index of the first."""
        start = len(self._vertices)
        self._vertices.extend(Vertex() for _ in range(4))
        return start

    def _quad(self, start: int) -> list[Vertex]:
        if start < 0 or start + 4 > len(self._vertices):
            raise IndexError(f"no quad starts at vertex {start}")
        return self._vertices[start : start + 4]

    @staticmethod
    def _corners(x: float, y: float, width: float, height: float):
        return ((x, y), (x + width, y), (x + width, y + height), (x, y + height))

    def set_quad_position(
        self, start: int, x: float, y: float, width: float, height: float
    ) -> None:
        """Place the quad starting at ``start`` over the given rectangle."""
        for vertex, corner in zip(self._quad(start), self._corners(x, y, width, height)):
            vertex.position = corner

    def set_quad_tex_coords(
        self, start: int, left: float, top: float, width: float, height: float
    ) -> None:
        """Map the quad onto a texture region; a negative width mirrors it."""
        for vertex, corner in zip(
            self._quad(start), self._corners(left, top, width, height)
        ):
            vertex.tex_coords = corner

    def __getitem__(self, index: int) -> Vertex:
        return self._vertices[index]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)


class Clock:
    """Measures elapsed seconds from a time source."""

    def __init__(self, time_source: Callable[[], float] | None = None) -> None:
        self._time_source = time_source or time.monotonic
        self._start = self._time_source()

    def restart(self) -> float:
        """Restart the clock and return the seconds that had elapsed."""
        now = self._time_source()
        elapsed = now - self._start
        self._start = now
        return elapsed

    def elapsed(self) -> float:
        return self._time_source() - self._start


class Component:
    """Something attached to a game object."""

    is_graphics = False
    is_update = False


class Graphics(Component, ABC):
    """A component that writes a quad into the canvas each frame."""

    is_graphics = True

    @abstractmethod
    def assemble(self, canvas: Canvas, update, tex_coords: Rect) -> None:
        """Reserve space in the canvas and connect to the matching update."""

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Write the current state into the canvas."""


class Update(Component, ABC):
    """A component that advances game state each frame."""

    is_update = True

    @abstractmethod
    def assemble(self, level_update, player_update) -> None:
        """Connect to the level and the player."""

    @abstractmethod
    def update(self, elapsed: float) -> None:
        """Advance by ``elapsed`` seconds."""