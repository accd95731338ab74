"""The current screen of a level: tile buffer, collision map, camera and items."""

from __future__ import annotations

from enum import IntFlag
from typing import Iterator, Optional, Sequence

from .config import (
    IDX_EMPTY,
    IDX_WALL_FIRST,
    IDX_WALL_LAST,
    MAP_H,
    MAP_W,
    METATILE_W,
    OFFSCREEN_TILES,
    ROOMS_PER_ROW,
    SCREEN_H,
    SCREEN_METATILES_H,
    SCREEN_METATILES_W,
    SCREEN_TILES_H,
    SCREEN_TILES_W,
    SCREEN_W,
)
from .fixed import fix16, fix16_to_int
from .gameobject import GameObject
from .utils import TextLine

TILE_INDEX_MASK = 0x7FF

# 20 x 14 metatiles per screen = 280 bits, stored in 9 words of 32 bits.
ROOM_BITMAP_WORDS = 9
_WORD_BITS = 32
_FULL_WORD = 0xFFFFFFFF
_TOP_BIT = 0x80000000

COLLISION_W = SCREEN_METATILES_W + OFFSCREEN_TILES * 2
COLLISION_H = SCREEN_METATILES_H + OFFSCREEN_TILES * 2


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // b
    return q if a >= 0 else -q


class Collision(IntFlag):
    """Sides on which a move was stopped by a wall."""

    NONE = 0
    LEFT = 0b0001
    RIGHT = 0b0010
    HORIZ = 0b0011
    TOP = 0b0100
    BOTTOM = 0b1000
    VERT = 0b1100


class TileMap:
    """A whole level map made of 16x16 metatile indexes.

    Each metatile covers 2x2 tiles of 8x8 pixels; a rectangle taken from the
    map expands every metatile into those four tiles.
    """

    def __init__(self, width: int, height: int, tiles: Sequence[Sequence[int]]) -> None:
        if width < 0 or height < 0:
            raise ValueError("map size must not be negative")
        rows = [list(row) for row in tiles]
        if len(rows) != height:
            raise ValueError(f"expected {height} rows, got {len(rows)}")
        for number, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {number} has {len(row)} tiles, expected {width}")
        self.width = width
        self.height = height
        self._rows = rows

    def _metatile(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._rows[y][x]
        return IDX_EMPTY

    def get_rect(self, x: int, y: int, width: int, height: int) -> list[int]:
        """Return the 8x8 tiles of a metatile rectangle, row by row.

        Positions and sizes are in metatiles; the result has (2*width) x
        (2*height) entries. Areas outside the map read as empty tiles.
        """
        if width < 0 or height < 0:
            raise ValueError("rectangle size must not be negative")
        buffer: list[int] = []
        for my in range(y, y + height):
            row = [self._metatile(mx, my) for mx in range(x, x + width)]
            expanded = [index for index in row for _ in range(2)]
            buffer.extend(expanded)
            buffer.extend(expanded)
        return buffer


class Level:
    """The screen currently shown from a tile map, with its collision data."""

    def __init__(self, tilemap: TileMap) -> None:
        self.tilemap = tilemap
        self.screen_x = 0
        self.screen_y = 0
        self.collision_result = Collision.NONE
        self.collision_map = [[0] * COLLISION_W for _ in range(COLLISION_H)]
        self.tilemap_buffer: list[int] = []
        self.plane: list[int] = []
        self._items: dict[int, list[int]] = {}

        self._load_screen()
        self.plane = list(self.tilemap_buffer)
        self.generate_collision_map(IDX_EMPTY, IDX_WALL_FIRST, IDX_WALL_LAST)

    # -- collision map access -------------------------------------------

    def _read(self, metatile_x: int, metatile_y: int) -> int:
        col = metatile_x + OFFSCREEN_TILES
        row = metatile_y + OFFSCREEN_TILES
        if 0 <= col < COLLISION_W and 0 <= row < COLLISION_H:
            return self.collision_map[row][col]
        return 0

    def _write(self, metatile_x: int, metatile_y: int, value: int) -> None:
        col = metatile_x + OFFSCREEN_TILES
        row = metatile_y + OFFSCREEN_TILES
        if not (0 <= col < COLLISION_W and 0 <= row < COLLISION_H):
            raise IndexError(f"metatile ({metatile_x}, {metatile_y}) is outside the collision map")
        self.collision_map[row][col] = value & 0xFF

    def wall_at(self, x: int, y: int) -> bool:
        """True if the pixel position lies on a wall."""
        return self.tile_at(x, y) == 1

    def tile_at(self, x: int, y: int) -> int:
        """Collision value at a pixel position."""
        return self._read(_tdiv(x, METATILE_W), _tdiv(y, METATILE_W))

    def tile_idx16(self, metatile_x: int, metatile_y: int) -> int:
        """Collision value at a metatile position."""
        return self._read(metatile_x, metatile_y)

    def set_tile_at(self, x: int, y: int, value: int) -> None:
        """Set the collision value at a pixel position."""
        self._write(_tdiv(x, METATILE_W), _tdiv(y, METATILE_W), value)

    # -- tile buffer access ---------------------------------------------

    def _buffer_index(self, tile_x: int, tile_y: int) -> int:
        if not (0 <= tile_x < SCREEN_TILES_W and 0 <= tile_y < SCREEN_TILES_H):
            raise IndexError(f"tile ({tile_x}, {tile_y}) is outside the screen")
        return tile_y * SCREEN_TILES_W + tile_x

    def mapbuff_idx8(self, tile_x: int, tile_y: int) -> int:
        """Tile index of the screen buffer at an 8x8 tile position."""
        return self.tilemap_buffer[self._buffer_index(tile_x, tile_y)] & TILE_INDEX_MASK

    def _set_mapbuff(self, tile_x: int, tile_y: int, value: int) -> None:
        self.tilemap_buffer[self._buffer_index(tile_x, tile_y)] = value

    def _load_screen(self) -> None:
        self.tilemap_buffer = self.tilemap.get_rect(
            self.screen_x // METATILE_W,
            self.screen_y // METATILE_W,
            SCREEN_TILES_W // 2,
            SCREEN_TILES_H // 2,
        )

    @staticmethod
    def _screen_metatiles() -> Iterator[tuple[int, int]]:
        for metatile_y in range(SCREEN_METATILES_H):
            for metatile_x in range(SCREEN_METATILES_W):
                yield metatile_x, metatile_y

    # -- collision map generation and items -----------------------------

    def generate_collision_map(self, empty: int, first_wall: int, last_wall: int) -> None:
        """Rebuild the collision map from the top-left tile of each metatile.

        Empty tiles become 0, walls become 1 and any other tile keeps its index.
        """
        for metatile_x, metatile_y in self._screen_metatiles():
            index = self.mapbuff_idx8(metatile_x * 2, metatile_y * 2)
            if index == empty:
                value = 0
            elif first_wall <= index <= last_wall:
                value = 1
            else:
                value = index
            self._write(metatile_x, metatile_y, value)

    def remove_tile_at(self, x: int, y: int, new_index: int) -> None:
        """Replace the collision value at a pixel position and blank it on screen."""
        self.set_tile_at(x, y, new_index)
        tile_x = _tdiv(x, METATILE_W) * 2
        tile_y = _tdiv(y, METATILE_W) * 2
        for ty in (tile_y, tile_y + 1):
            for tx in (tile_x, tile_x + 1):
                if 0 <= tx < SCREEN_TILES_W and 0 <= ty < SCREEN_TILES_H:
                    self.plane[ty * SCREEN_TILES_W + tx] = 0

    def _remove_tile_from_buffer(self, tile_x: int, tile_y: int, new_index: int) -> None:
        self._write(tile_x // 2, tile_y // 2, new_index)
        for ty in (tile_y, tile_y + 1):
            for tx in (tile_x, tile_x + 1):
                self._set_mapbuff(tx, ty, IDX_EMPTY)

    def _register_room(self, room: int) -> None:
        words = self._items.setdefault(room, [_FULL_WORD] * ROOM_BITMAP_WORDS)
        for number, (metatile_x, metatile_y) in enumerate(self._screen_metatiles()):
            offset, bit = divmod(number, _WORD_BITS)
            mask = _TOP_BIT >> bit
            if self._read(metatile_x, metatile_y) == 0:
                words[offset] &= ~mask & _FULL_WORD
            else:
                words[offset] |= mask

    def _restore_room(self, room: int) -> None:
        words = self._items.get(room)
        if words is None:
            return
        for number, (metatile_x, metatile_y) in enumerate(self._screen_metatiles()):
            offset, bit = divmod(number, _WORD_BITS)
            mask = _TOP_BIT >> bit
            tile_x, tile_y = metatile_x * 2, metatile_y * 2
            if self.mapbuff_idx8(tile_x, tile_y) != IDX_EMPTY and not words[offset] & mask:
                self._remove_tile_from_buffer(tile_x, tile_y, 0)

    def _scroll(self, offset_x: int, offset_y: int) -> None:
        self._register_room(self.current_room())
        self.screen_x = (self.screen_x + offset_x) & 0xFFFF
        self.screen_y = (self.screen_y + offset_y) & 0xFFFF
        self._load_screen()
        self._restore_room(self.current_room())
        self.generate_collision_map(IDX_EMPTY, IDX_WALL_FIRST, IDX_WALL_LAST)
        self.plane = list(self.tilemap_buffer)

    # -- object logic ---------------------------------------------------

    def check_map_boundaries(self, obj: GameObject) -> None:
        """Put an object back inside the map when it has gone past an edge."""
        map_x = fix16_to_int(obj.x) + self.screen_x
        if map_x > MAP_W - obj.w:
            obj.x = fix16(SCREEN_W - obj.w)
        elif map_x < 0:
            obj.x = 0

        map_y = fix16_to_int(obj.y) + self.screen_y
        if map_y > MAP_H - obj.h:
            obj.y = fix16(SCREEN_H - obj.h)
        elif map_y < 0:
            obj.y = 0

    def update_camera(self, obj: GameObject) -> bool:
        """Move to the neighbouring room when the object leaves the screen.

        Returns True if the room changed.
        """
        half_w = obj.w // 2
        half_h = obj.h // 2
        if obj.x > fix16(SCREEN_W - half_w):
            obj.x = 0
            self._scroll(SCREEN_W, 0)
        elif obj.x < fix16(-half_w):
            obj.x = fix16(SCREEN_W - obj.w)
            self._scroll(-SCREEN_W, 0)
        elif obj.y > fix16(SCREEN_H - half_h):
            obj.y = 0
            self._scroll(0, SCREEN_H)
        elif obj.y < fix16(-half_h):
            obj.y = fix16(SCREEN_H - obj.h)
            self._scroll(0, -SCREEN_H)
        else:
            return False
        return True

    def check_wall(self, obj: GameObject) -> bool:
        """True if any 16-pixel step inside the object's box is a wall.

        The object's box must be up to date.
        """
        box = obj.box
        if box.left < 0 or box.top < 0:
            return False
        return any(
            self.wall_at(x, y)
            for x in range(box.left, box.right + 1, METATILE_W)
            for y in range(box.top, box.bottom + 1, METATILE_W)
        )

    def move_and_slide(self, obj: GameObject) -> Collision:
        """Stop the object's projected move (next_x, next_y) at walls.

        The resulting sides are stored in collision_result and returned.
        """
        result = Collision.NONE
        box = obj.box

        obj.update_boundbox(obj.next_x, obj.y)
        if obj.speed_x > 0:
            if (
                self.wall_at(box.right, box.top)
                or self.wall_at(box.right, box.top + obj.h // 2)
                or self.wall_at(box.right, box.bottom - 1)
            ):
                obj.next_x = fix16(_tdiv(box.right, METATILE_W) * METATILE_W - obj.w)
                result |= Collision.RIGHT
        elif obj.speed_x < 0:
            if (
                self.wall_at(box.left, box.top)
                or self.wall_at(box.left, box.top + obj.h // 2)
                or self.wall_at(box.left, box.bottom - 1)
            ):
                obj.next_x = fix16((_tdiv(box.left, METATILE_W) + 1) * METATILE_W)
                result |= Collision.LEFT

        obj.update_boundbox(obj.next_x, obj.next_y)
        if obj.speed_y < 0:
            if (
                self.wall_at(box.left, box.top)
                or self.wall_at(box.left + obj.w // 2, box.top)
                or self.wall_at(box.right - 1, box.top)
            ):
                obj.next_y = fix16((_tdiv(box.top, METATILE_W) + 1) * METATILE_W)
                result |= Collision.TOP
        elif obj.speed_y > 0:
            if (
                self.wall_at(box.left, box.bottom)
                or self.wall_at(box.left + obj.w // 2, box.bottom)
                or self.wall_at(box.right - 1, box.bottom)
            ):
                obj.next_y = fix16(_tdiv(box.bottom, METATILE_W) * METATILE_W - obj.h)
                result |= Collision.BOTTOM

        self.collision_result = result
        return result

    # -- camera ---------------------------------------------------------

    def current_room(self) -> int:
        """Number of the room the camera shows."""
        return (self.screen_y // SCREEN_H * ROOMS_PER_ROW + self.screen_x // SCREEN_W) & 0xFF

    def reset_camera(self) -> None:
        """Point the camera back at the top-left room."""
        self.screen_x = 0
        self.screen_y = 0

    # -- debug output ---------------------------------------------------

    @staticmethod
    def _render(cells: Iterator[tuple[int, int, Optional[int]]]) -> list[str]:
        grid = [[" "] * SCREEN_TILES_W for _ in range(SCREEN_TILES_H)]
        for col, row, value in cells:
            text = "  " if value is None else str(value)
            for i, char in enumerate(text):
                if col + i < SCREEN_TILES_W:
                    grid[row][col + i] = char
        return ["".join(row) for row in grid]

    def render_collision_map(self) -> list[str]:
        """Draw the non-zero collision values as text, one string per tile row."""

        def cells() -> Iterator[tuple[int, int, Optional[int]]]:
            for metatile_x in range(SCREEN_METATILES_W):
                for metatile_y in range(SCREEN_METATILES_H):
                    index = self._read(metatile_x, metatile_y)
                    yield metatile_x * 2, metatile_y * 2, (index or None)

        return self._render(cells())

    def render_tile_map(self) -> list[str]:
        """Draw the non-empty buffer tiles as text, one string per tile row."""

        def cells() -> Iterator[tuple[int, int, Optional[int]]]:
            for tile_x in range(0, SCREEN_TILES_W, 2):
                for tile_y in range(0, SCREEN_TILES_H, 2):
                    index = self.mapbuff_idx8(tile_x, tile_y)
                    yield tile_x, tile_y, (None if index == IDX_EMPTY else index)

        return self._render(cells())

    def dump_tilemap_buffer(self) -> list[str]:
        """List the top-left tile of each metatile, one line per metatile row."""
        line = TextLine()
        lines = []
        for metatile_y in range(SCREEN_METATILES_H):
            for metatile_x in range(SCREEN_METATILES_W):
                line.add_int(self.mapbuff_idx8(metatile_x * 2, metatile_y * 2))
            lines.append(line.flush())
        return lines