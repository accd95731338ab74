"""Game objects: position, speed, bounding box and screen-edge behaviour."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import SCREEN_H, SCREEN_H_F16, SCREEN_W, SCREEN_W_F16
from .fixed import fix16, fix16_to_int
from .utils import clamp


@dataclass
class BoundBox:
    """Integer pixel bounds of an object."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0


@dataclass(frozen=True)
class SpriteDefinition:
    """Size and identity of a sprite sheet."""

    name: str
    w: int
    h: int


@dataclass
class Sprite:
    """A sprite placed on screen."""

    definition: SpriteDefinition
    x: int = 0
    y: int = 0
    anim: int = 0
    visible: bool = True


@dataclass(eq=False)
class GameObject:
    """Anything that moves on screen; positions and speeds are fixed point."""

    active: bool = False
    sprite: Optional[Sprite] = None
    x: int = 0
    y: int = 0
    next_x: int = 0
    next_y: int = 0
    speed_x: int = 0
    speed_y: int = 0
    speed: int = 0
    w: int = 0
    h: int = 0
    box: BoundBox = field(default_factory=BoundBox)
    w_offset: int = 0
    h_offset: int = 0
    anim: int = 0
    health: int = 0
    dir: int = 0
    update: Optional[Callable[..., None]] = None
    on_hit: Optional[Callable[..., None]] = None

    def update_boundbox(self, x: int, y: int) -> None:
        """Recompute the integer bounding box for a fixed-point position."""
        left = fix16_to_int(x)
        top = fix16_to_int(y)
        self.box.left = left
        self.box.top = top
        self.box.right = left + self.w
        self.box.bottom = top + self.h

    def clamp_screen(self) -> None:
        """Keep the object inside the screen."""
        self.x = clamp(self.x, 0, fix16(SCREEN_W - self.w))
        self.y = clamp(self.y, 0, fix16(SCREEN_H - self.h))

    def wrap_screen(self) -> None:
        """Move the object to the opposite edge when it leaves the screen."""
        if self.box.left < -(self.w // 2):
            self.x += SCREEN_W_F16
        elif self.box.left > SCREEN_W - self.w // 2:
            self.x -= SCREEN_W_F16

        if self.box.top < -(self.h // 2):
            self.y += SCREEN_H_F16
        elif self.box.top > SCREEN_H - self.h // 2:
            self.y -= SCREEN_H_F16

    def bounce_off_screen(self) -> None:
        """Reverse speed on any axis whose box crossed a screen edge."""
        if self.box.left < 0 or self.box.right > SCREEN_W:
            self.speed_x = -self.speed_x
        if self.box.top < 0 or self.box.bottom > SCREEN_H:
            self.speed_y = -self.speed_y

    def sync_sprite(self) -> None:
        """Refresh the box and move the sprite to match the object."""
        self.update_boundbox(self.x, self.y)
        if self.sprite is not None:
            self.sprite.x = self.box.left + self.w_offset
            self.sprite.y = self.box.top + self.h_offset


def _half_toward_zero(value: int) -> int:
    return int(value / 2)


def create_game_object(
    definition: SpriteDefinition, x: int, y: int, w_offset: int, h_offset: int
) -> GameObject:
    """Create an active object at pixel position (x, y) with a sprite."""
    start_x = fix16(x)
    start_y = fix16(y)
    return GameObject(
        active=True,
        sprite=Sprite(definition, x, y),
        x=start_x,
        y=start_y,
        next_x=start_x,
        next_y=start_y,
        w=definition.w + w_offset,
        h=definition.h + h_offset,
        w_offset=_half_toward_zero(w_offset),
        h_offset=_half_toward_zero(h_offset),
    )


def check_collision(obj1: GameObject, obj2: GameObject) -> bool:
    """True if the bounding boxes of the two objects overlap or touch."""
    obj1.update_boundbox(obj1.x, obj1.y)
    obj2.update_boundbox(obj2.x, obj2.y)
    a, b = obj1.box, obj2.box
    return not (
        a.left > b.right or b.left > a.right or a.top > b.bottom or b.top > a.bottom
    )