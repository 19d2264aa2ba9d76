"""Frame-by-frame sprite sheet animation."""

from __future__ import annotations

from typing import Callable

from booster.component import Clock, Rect


class Animator:
    """Steps through equally wide frames laid out left to right in a texture."""

    def __init__(
        self,
        left_offset: int,
        top_offset: int,
        frame_count: int,
        texture_width: int,
        texture_height: int,
        fps: int,
        time_source: Callable[[], float] | None = None,
    ) -> None:
        self._left_offset = left_offset
        self._current_frame = 0
        self._frame_count = frame_count or 1
        self._frame_width = int(texture_width / self._frame_count)
        self._source_rect = Rect(
            left_offset, top_offset, self._frame_width, texture_height
        )
        fps = fps or 1
        self._frame_period = 1000 // fps
        self._clock = Clock(time_source)

    def current_frame(self, reversed_: bool) -> Rect:
        """Return the texture region of the current frame, advancing it when due.

        A reversed frame is drawn right to left from its left edge, so its
        frame numbers run one higher.
        """
        shift = int(bool(reversed_))
        if int(self._clock.elapsed() * 1000) > self._frame_period:
            self._current_frame += 1
            if self._current_frame >= self._frame_count + shift:
                self._current_frame = shift
            self._clock.restart()
        self._source_rect.left = (
            self._left_offset + self._current_frame * self._frame_width
        )
        return self._source_rect