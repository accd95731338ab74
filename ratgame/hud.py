"""The heads-up display line: energy bar and gem counter."""

from __future__ import annotations

from .config import PLAYER_MAX_HEALTH, SCREEN_TILES_W

_TITLE = "ENERGY ||||||||||   GEMS 255"
_TITLE_X = 1
_HEALTH_X = 7
_GEMS_X = 26


class Hud:
    """One row of text showing the player's energy and collected gems."""

    def __init__(self) -> None:
        self.gems = 0
        self.health = PLAYER_MAX_HEALTH
        self._cells = [" "] * SCREEN_TILES_W
        self._draw_text(_TITLE, _TITLE_X)
        self.gem_collected(0)

    def _draw_text(self, text: str, x: int) -> None:
        clipped = text[: max(0, SCREEN_TILES_W - x)]
        self._cells[x:x + len(clipped)] = list(clipped)

    def update_health(self, value: int) -> None:
        """Draw the energy bar with the given number of segments."""
        if not 0 <= value <= PLAYER_MAX_HEALTH:
            raise ValueError(
                f"health must be between 0 and {PLAYER_MAX_HEALTH}, got {value}"
            )
        self.health = value
        self._draw_text("|" * value + " " * (PLAYER_MAX_HEALTH - value), _HEALTH_X)

    def gem_collected(self, value: int) -> None:
        """Add gems to the counter (which wraps at 256) and redraw it."""
        self.gems = (self.gems + value) & 0xFF
        self._draw_text(f"{self.gems:03d}", _GEMS_X)

    def render(self) -> str:
        """The HUD row as text."""
        return "".join(self._cells)