"""Game objects: plain containers of components."""

from __future__ import annotations

from typing import Iterator

from booster.component import Canvas, Component


class GameObject:
    """Holds components and forwards update and draw calls to them in order."""

    def __init__(self) -> None:
        self.components: list[Component] = []

    def add_component(self, component: Component) -> None:
        self.components.append(component)

    def _flagged(self, flag: str) -> Iterator[Component]:
        return (c for c in self.components if getattr(c, flag))

    def update(self, elapsed: float) -> None:
        for component in self._flagged("is_update"):
            component.update(elapsed)

    def draw(self, canvas: Canvas) -> None:
        for component in self._flagged("is_graphics"):
            component.draw(canvas)