from ratgame.config import (
    IDX_CHEESE,
    IDX_EMPTY,
    IDX_MOUSE_HOLE,
    IDX_SPIKE,
    PLAYER_SPEED,
    SCREEN_H,
    SCREEN_TILES_W,
    GameState,
)
from ratgame.fixed import fix16
from ratgame.gameobject import SpriteDefinition
from ratgame.level import Collision, Level, TileMap
from ratgame.player import Player
from ratgame.utils import Button, Joypads

MOUSE = SpriteDefinition("mouse", 16, 16)


def make_level(cells=None, floor=True):
    cells = dict(cells or {})
    if floor:
        for x in range(20):
            cells.setdefault((x, 13), 0)
    tiles = [[cells.get((x, y), IDX_EMPTY) for x in range(20)] for y in range(14)]
    return Level(TileMap(20, 14, tiles))


def frame(player, level, joypads, buttons=0):
    joypads.update([buttons, 0])
    return player.update(joypads, level)


def test_initial_position():
    player = Player(MOUSE)
    assert player.obj.x == fix16(16)
    assert player.obj.y == fix16(SCREEN_H - MOUSE.h - 16)
    assert player.got_cheese is False


def test_lands_on_floor():
    player, level, pads = Player(MOUSE), make_level(), Joypads()
    assert frame(player, level, pads) is None
    assert level.collision_result & Collision.BOTTOM
    assert player.obj.y == fix16(SCREEN_H - MOUSE.h - 16)


def test_jump_from_ground():
    player, level, pads = Player(MOUSE), make_level(), Joypads()
    frame(player, level, pads)
    frame(player, level, pads, Button.A)
    assert player.obj.speed_y == fix16(-4) + fix16(0.15)
    assert player.obj.y < fix16(SCREEN_H - MOUSE.h - 16)


def test_falling_speed_is_capped():
    player, level, pads = Player(MOUSE), make_level(floor=False), Joypads()
    start_y = player.obj.y
    for _ in range(40):
        frame(player, level, pads)
    assert player.obj.speed_y == fix16(4)
    assert player.obj.y > start_y


def test_walk_right_animation_alternates():
    player, level, pads = Player(MOUSE), make_level(), Joypads()
    frame(player, level, pads, Button.RIGHT)
    assert player.obj.speed_x == PLAYER_SPEED
    assert player.obj.sprite.anim == 4
    for _ in range(7):
        frame(player, level, pads, Button.RIGHT)
    assert player.obj.sprite.anim == 1
    assert player.obj.x == fix16(16) + 8 * PLAYER_SPEED


def test_idle_facing_left_after_walking_left():
    player, level, pads = Player(MOUSE), make_level(), Joypads()
    player.obj.x = fix16(100)
    frame(player, level, pads, Button.LEFT)
    assert player.obj.speed_x == -PLAYER_SPEED
    assert player.facing_right is False
    frame(player, level, pads)
    assert player.obj.speed_x == 0
    assert player.obj.sprite.anim == 3


def test_picks_up_cheese():
    player, level, pads = Player(MOUSE), make_level({(1, 12): IDX_CHEESE}), Joypads()
    assert frame(player, level, pads) is None
    assert player.got_cheese is True
    assert level.plane[24 * SCREEN_TILES_W + 2] == 0


def test_spike_ends_level():
    player, level, pads = Player(MOUSE), make_level({(1, 12): IDX_SPIKE}), Joypads()
    assert frame(player, level, pads) is GameState.LEVEL_CLEAR


def test_mouse_hole_without_cheese_does_nothing():
    player, level, pads = Player(MOUSE), make_level({(1, 12): IDX_MOUSE_HOLE}), Joypads()
    assert frame(player, level, pads) is None


def test_mouse_hole_with_cheese_retries():
    player, level, pads = Player(MOUSE), make_level({(1, 12): IDX_MOUSE_HOLE}), Joypads()
    player.got_cheese = True
    assert frame(player, level, pads) is GameState.RETRY


def test_on_hit_clears_level():
    assert Player(MOUSE).on_hit(1) is GameState.LEVEL_CLEAR