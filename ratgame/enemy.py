"""Enemies spawned from map objects and their movement behaviours."""

from __future__ import annotations

import logging
import math
from enum import IntEnum

from .config import IDX_CHEESE, IDX_MOUSE_HOLE, IDX_SPIKE
from .fixed import cos_fix16, fix16_mul, sin_fix16
from .gameobject import GameObject, SpriteDefinition, create_game_object
from .level import Level
from .mapobjects import MapObject

logger = logging.getLogger(__name__)

BALL_MAX_SPEED = 3

_ANGLE_STEP = 128
_TILED_Y_OFFSET = 16
_SIZE_OFFSET = -4
_LOOK_AHEAD = 8
_ANIM_LEFT = 0
_ANIM_RIGHT = 1
_BLOCKING_TILES = frozenset({IDX_CHEESE, IDX_SPIKE, IDX_MOUSE_HOLE})

_INIT_FIELDS = (
    "active",
    "sprite",
    "x",
    "y",
    "next_x",
    "next_y",
    "speed_x",
    "speed_y",
    "speed",
    "anim",
    "w",
    "h",
    "w_offset",
    "h_offset",
)


class EnemyType(IntEnum):
    """Behaviour of an enemy, as stored in the map objects."""

    BOUNCER = 0
    WARPER = 1
    CANNON = 2


def _set_anim(obj: GameObject, anim: int) -> None:
    if obj.sprite is not None:
        obj.sprite.anim = anim


def _on_hit(obj: GameObject, amount: int) -> None:
    logger.debug("Enemy hit!")


def init_enemy(
    obj: GameObject, mapobj: MapObject, level: Level, definition: SpriteDefinition
) -> GameObject:
    """Set up obj as the enemy described by mapobj, in screen coordinates."""
    x = math.floor(mapobj.x) - level.screen_x
    y = math.floor(mapobj.y) - level.screen_y - _TILED_Y_OFFSET

    fresh = create_game_object(definition, x, y, _SIZE_OFFSET, _SIZE_OFFSET)
    for name in _INIT_FIELDS:
        setattr(obj, name, getattr(fresh, name))

    angle = mapobj.direction * _ANGLE_STEP
    obj.speed_x = fix16_mul(cos_fix16(angle), mapobj.speed)
    obj.speed_y = fix16_mul(-sin_fix16(angle), mapobj.speed)

    if mapobj.type == EnemyType.BOUNCER:
        obj.update = bouncer_update
        _set_anim(obj, _ANIM_RIGHT if obj.speed_x >= 0 else _ANIM_LEFT)
    elif mapobj.type == EnemyType.WARPER:
        obj.update = warper_update
        _set_anim(obj, _ANIM_RIGHT)
    else:
        obj.update = bouncer_update
        _set_anim(obj, _ANIM_LEFT)
        logger.error(
            "unknown enemy type %d, using the bouncer behaviour", mapobj.type
        )
    obj.on_hit = _on_hit
    return obj


def bouncer_update(obj: GameObject, level: Level) -> None:
    """Move and turn back at walls, screen edges and special tiles ahead."""
    obj.x += obj.speed_x
    obj.y += obj.speed_y
    obj.update_boundbox(obj.x, obj.y)
    box = obj.box
    middle_y = box.top + obj.h // 2

    if obj.speed_x > 0:
        _set_anim(obj, _ANIM_RIGHT)
        ahead = level.tile_at(box.right + _LOOK_AHEAD, middle_y)
        if ahead in _BLOCKING_TILES or level.wall_at(box.right, middle_y):
            obj.speed_x = -obj.speed_x
            _set_anim(obj, _ANIM_LEFT)
    elif obj.speed_x < 0:
        _set_anim(obj, _ANIM_LEFT)
        ahead = level.tile_at(box.left - _LOOK_AHEAD, middle_y)
        if ahead in _BLOCKING_TILES or level.wall_at(box.left, middle_y):
            obj.speed_x = -obj.speed_x
            _set_anim(obj, _ANIM_RIGHT)

    middle_x = box.left + obj.w // 2
    if obj.speed_y < 0:
        if level.wall_at(middle_x, box.top):
            obj.speed_y = -obj.speed_y
    elif obj.speed_y > 0:
        if level.wall_at(middle_x, box.bottom):
            obj.speed_y = -obj.speed_y

    obj.bounce_off_screen()
    obj.sync_sprite()


def warper_update(obj: GameObject, level: Level) -> None:
    """Move, wrap around the screen edges and blink."""
    obj.x += obj.speed_x
    obj.y += obj.speed_y
    obj.update_boundbox(obj.x, obj.y)
    obj.wrap_screen()
    obj.sync_sprite()
    if obj.sprite is not None:
        obj.sprite.visible = not obj.sprite.visible