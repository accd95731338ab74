"""Game-wide configuration constants and the game state enumeration."""

from enum import Enum, auto

from .fixed import fix16

# Map configuration (maps are made of 16x16 metatiles)
METATILE_W = 16
MAP_METATILES_W = 60
MAP_METATILES_H = 42
HUD_TILES = 1

# Tile indexes used by the level maps
IDX_EMPTY = 10
IDX_WALL_FIRST = 0
IDX_WALL_LAST = 3
IDX_ITEM = 8
IDX_CHEESE = 11
IDX_MOUSE_HOLE = 13
IDX_SPIKE = 4

NUMBER_OF_LEVELS = 5
OFFSCREEN_TILES = 3
NUMBER_OF_JOYPADS = 2

# Player configuration
PLAYER_ACCEL = fix16(0.1)
PLAYER_SPEED = fix16(2)
PLAYER_SPEED45 = fix16(0.707 * 2)
PLAYER_MAX_HEALTH = 10

# Screen and map geometry
SCREEN_W = 320
SCREEN_H = 224
SCREEN_W_F16 = fix16(SCREEN_W)
SCREEN_H_F16 = fix16(SCREEN_H)

MAP_W = MAP_METATILES_W * METATILE_W
MAP_H = MAP_METATILES_H * METATILE_W

MAX_NUMBER_OF_ROOMS = 32
NUMBER_OF_ROOMS = MAP_W // SCREEN_W * MAP_H // SCREEN_H
ROOMS_PER_ROW = MAP_H // SCREEN_H

SCREEN_TILES_W = SCREEN_W // 8
SCREEN_TILES_H = SCREEN_H // 8
SCREEN_METATILES_W = SCREEN_W // METATILE_W
SCREEN_METATILES_H = SCREEN_H // METATILE_W


class GameState(Enum):
    """The screens the game can be in."""

    MENU = auto()
    PLAY = auto()
    CONTROLS = auto()
    CREDITS = auto()
    EXIT = auto()
    LEVEL_CLEAR = auto()
    RETRY = auto()
    YOU_WIN = auto()