"""The player-controlled mouse: platformer movement and tile pickups."""

from __future__ import annotations

from typing import Optional

from .config import (
    IDX_CHEESE,
    IDX_EMPTY,
    IDX_MOUSE_HOLE,
    IDX_SPIKE,
    IDX_WALL_FIRST,
    IDX_WALL_LAST,
    PLAYER_SPEED,
    SCREEN_H,
    GameState,
)
from .fixed import fix16, fix16_to_int
from .gameobject import SpriteDefinition, create_game_object
from .level import Collision, Level
from .utils import Button, Joypads

ANIM_VERTICAL = 0
ANIM_HORIZONTAL = 1

WALK_ANIM_SPEED = 8

_START_X = 16
_START_MARGIN = 16
_JOY = 0

_ANIM_IDLE_RIGHT = 0
_ANIM_WALK_RIGHT = (4, 1)
_ANIM_WALK_LEFT = (5, 2)
_ANIM_IDLE_LEFT = 3

_GROUND_SPEED = fix16(1)
_JUMP_SPEED = fix16(-4)
_JUMP_CUTOFF = fix16(-2.4)
_GRAVITY = fix16(0.15)
_MAX_FALL_SPEED = fix16(4)


class Player:
    """The player object and the state that drives its movement."""

    def __init__(self, definition: SpriteDefinition) -> None:
        self.obj = create_game_object(
            definition, _START_X, SCREEN_H - definition.h - _START_MARGIN, 0, 0
        )
        self.got_cheese = False
        self.facing_right = True
        self._walk_counter = 0
        self._walk_toggle = False

    def _advance_walk(self) -> None:
        self._walk_counter += 1
        if self._walk_counter >= WALK_ANIM_SPEED:
            self._walk_counter = 0
            self._walk_toggle = not self._walk_toggle

    def _read_input(self, joypads: Joypads, level: Level) -> None:
        obj = self.obj
        if joypads.key_down(_JOY, Button.RIGHT):
            obj.speed_x = PLAYER_SPEED
            self.facing_right = True
            self._advance_walk()
            obj.anim = _ANIM_WALK_RIGHT[self._walk_toggle]
        elif joypads.key_down(_JOY, Button.LEFT):
            obj.speed_x = -PLAYER_SPEED
            self.facing_right = False
            self._advance_walk()
            obj.anim = _ANIM_WALK_LEFT[self._walk_toggle]
        else:
            obj.speed_x = 0
            obj.anim = _ANIM_IDLE_RIGHT if self.facing_right else _ANIM_IDLE_LEFT
            self._walk_counter = 0
            self._walk_toggle = False

        on_ground = bool(level.collision_result & Collision.BOTTOM)
        if on_ground:
            obj.speed_y = _GROUND_SPEED

        if joypads.key_released(_JOY, Button.A) and not on_ground:
            if obj.speed_y < _JUMP_CUTOFF:
                obj.speed_y = _JUMP_CUTOFF

        if joypads.key_pressed(_JOY, Button.A) and on_ground:
            obj.speed_y = _JUMP_SPEED

        obj.speed_y = min(obj.speed_y + _GRAVITY, _MAX_FALL_SPEED)

    def update(self, joypads: Joypads, level: Level) -> Optional[GameState]:
        """Run one frame; return the state to switch to, or None to keep playing."""
        obj = self.obj
        self._read_input(joypads, level)

        obj.next_x = obj.x + obj.speed_x
        obj.next_y = obj.y + obj.speed_y
        level.move_and_slide(obj)
        obj.x = obj.next_x
        obj.y = obj.next_y

        obj.update_boundbox(obj.x, obj.y)
        center_x = obj.box.left + obj.w // 2
        center_y = obj.box.top + obj.h // 2
        tile = level.tile_at(center_x, center_y)

        if tile == IDX_CHEESE:
            level.remove_tile_at(center_x, center_y, IDX_EMPTY)
            self.got_cheese = True
            level.generate_collision_map(IDX_EMPTY, IDX_WALL_FIRST, IDX_WALL_LAST)

        if tile == IDX_SPIKE:
            return GameState.LEVEL_CLEAR

        if tile == IDX_MOUSE_HOLE and self.got_cheese:
            return GameState.RETRY

        obj.update_boundbox(obj.x, obj.y)
        if obj.sprite is not None:
            obj.sprite.x = fix16_to_int(obj.x)
            obj.sprite.y = fix16_to_int(obj.y)
            obj.sprite.anim = obj.anim
        return None

    def on_hit(self, amount: int) -> GameState:
        """The player was hit; return the state the game moves to."""
        return GameState.LEVEL_CLEAR