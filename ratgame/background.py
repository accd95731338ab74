"""Parallax scrolling of the background plane, one speed per tile row."""

from __future__ import annotations

from .config import SCREEN_TILES_H
from .fixed import fix16, fix16_to_int

_SPEED_STEP = fix16(-0.05)
_CENTER_ROW = 11
_CENTER_ROWS = 6


class Background:
    """Horizontal scroll offsets for every tile row of the background.

    Rows near the middle of the screen move slowest; each row further out
    moves one step faster, symmetrically toward the top and bottom edges.
    """

    def __init__(self) -> None:
        self.offset_speed = [0] * SCREEN_TILES_H
        self.offset_pos = [0] * SCREEN_TILES_H
        self.scroll = [0] * SCREEN_TILES_H

        speed = _SPEED_STEP
        for row in range(_CENTER_ROW, -1, -1):
            self._set_offset_speed(row, 1, speed)
            self._set_offset_speed(SCREEN_TILES_H - row - 1, 1, speed)
            speed += _SPEED_STEP
        self._set_offset_speed(_CENTER_ROW, _CENTER_ROWS, _SPEED_STEP)

    def _set_offset_speed(self, start: int, length: int, speed: int) -> None:
        if start + length - 1 >= SCREEN_TILES_H:
            return
        self.offset_speed[start:start + length] = [speed] * length

    def update(self) -> list[int]:
        """Advance every row by its speed and return the integer scroll values."""
        self.offset_pos = [
            pos + speed for pos, speed in zip(self.offset_pos, self.offset_speed)
        ]
        self.scroll = [fix16_to_int(pos) for pos in self.offset_pos]
        return list(self.scroll)