"""Input tracking, debug text helpers and palette effects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Iterable, Sequence

from .config import NUMBER_OF_JOYPADS

MAX_TEXT_LINE = 200


class Button(IntFlag):
    """Joypad button bits."""

    UP = 0x0001
    DOWN = 0x0002
    LEFT = 0x0004
    RIGHT = 0x0008
    B = 0x0010
    C = 0x0020
    A = 0x0040
    START = 0x0080
    Z = 0x0100
    Y = 0x0200
    X = 0x0400
    MODE = 0x0800


class Joypads:
    """Current and previous button states of every joypad."""

    def __init__(self, count: int = NUMBER_OF_JOYPADS) -> None:
        self.buttons = [0] * count
        self.buttons_old = [0] * count

    def update(self, states: Iterable[int]) -> None:
        """Store a new frame of button states, one value per joypad."""
        states = list(states)
        if len(states) != len(self.buttons):
            raise ValueError(
                f"expected {len(self.buttons)} joypad states, got {len(states)}"
            )
        self.buttons_old = self.buttons
        self.buttons = [int(state) & 0xFF for state in states]

    @staticmethod
    def _is_set(value: int, key: int) -> bool:
        return (value & key) == key

    def key_down(self, joy: int, key: int) -> bool:
        """True while the key is held."""
        return self._is_set(self.buttons[joy], key)

    def key_pressed(self, joy: int, key: int) -> bool:
        """True on the frame the key goes down."""
        return self._is_set(self.buttons[joy], key) and not self._is_set(
            self.buttons_old[joy], key
        )

    def key_released(self, joy: int, key: int) -> bool:
        """True on the frame the key goes up."""
        return not self._is_set(self.buttons[joy], key) and self._is_set(
            self.buttons_old[joy], key
        )

    def key_any(self, joy: int) -> bool:
        """True if any button is held."""
        return bool(self.buttons[joy])


@dataclass
class TextLine:
    """Accumulates comma separated numbers for debug output."""

    text: str = ""

    def add_int(self, num: int) -> None:
        """Append a number, zero padded to two digits, if it fits."""
        item = f"{num:02d}"
        if len(item) + len(self.text) + 1 < MAX_TEXT_LINE:
            self.text += item + ","

    def flush(self) -> str:
        """Return the accumulated line and clear it."""
        line, self.text = self.text, ""
        return line


@dataclass
class ColorGlow:
    """Cycles back and forth through a list of colours."""

    colors: Sequence[int]
    index: int = field(default=0, init=False)
    _step: int = field(default=1, init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.colors) < 2:
            raise ValueError("a glow needs at least two colours")

    def step(self) -> int:
        """Return the colour for this frame and advance."""
        color = self.colors[self.index]
        self.index += self._step
        if self.index in (0, len(self.colors) - 1):
            self._step = -self._step
        return color


def format_bits(value: int) -> str:
    """Render a 32-bit value as a string of 32 binary digits."""
    return f"{value & 0xFFFFFFFF:032b}"


def rotate_colors(
    palette: list[int], first_index: int, last_index: int, direction: int
) -> None:
    """Rotate palette entries in place from first_index toward last_index."""
    first_color = palette[first_index]
    i = first_index
    while i != last_index:
        palette[i] = palette[i + direction]
        i += direction
    palette[last_index] = first_color


def rotate_colors_left(palette: list[int], left_index: int, right_index: int) -> None:
    """Shift a palette range one step left, wrapping the first entry to the end."""
    rotate_colors(palette, left_index, right_index, 1)


def rotate_colors_right(palette: list[int], left_index: int, right_index: int) -> None:
    """Shift a palette range one step right, wrapping the last entry to the start."""
    rotate_colors(palette, right_index, left_index, -1)


def clamp(value, low, high):
    """Limit value to the range [low, high]."""
    return min(max(value, low), high)


def wrap(value, low, high):
    """Send values below low to high and values above high to low."""
    if value < low:
        return high
    if value > high:
        return low
    return value