# ratgame

This package holds the game logic of a small room-based platformer. You play a
mouse that grabs the cheese and gets back to its hole, while cats patrol each
room. It covers fixed-point arithmetic, tile maps and collision, scrolling
between rooms, pooled enemies, the player, the HUD and the menu state machine.
Text and image requests go to an in-memory `Screen`. You can therefore drive a
whole session from code or from tests.

## Modules

- `ratgame.config` holds the screen, map and tile constants and the `GameState`
  enum.
- `ratgame.fixed` has fixed-point helpers with 6 fractional bits: `fix16`,
  `fix16_to_int`, `fix16_mul`, `sin_fix16` and `cos_fix16`. The angles for
  `sin_fix16` and `cos_fix16` are in 1/1024 of a turn.
- `ratgame.utils` has several helpers:
  - joypad edge detection with `Button` and `Joypads`;
  - a debug text buffer, `TextLine`;
  - palette helpers: `ColorGlow`, `rotate_colors`, `rotate_colors_left` and
    `rotate_colors_right`;
  - `format_bits`, `clamp` and `wrap`.
- `ratgame.gameobject` has `BoundBox`, `SpriteDefinition`, `Sprite` and
  `GameObject`. A `GameObject` keeps its bound box up to date and can clamp to
  the screen, wrap around it or bounce off it. The module also has
  `create_game_object` and `check_collision`.
- `ratgame.objects_pool` has `ObjectsPool`, a fixed set of reusable game
  objects. It supports `acquire`, `release`, `clear`, iteration over the active
  objects and `len`.
- `ratgame.mapobjects` has `MapObject` and `RoomIndex`. `RoomIndex` yields the
  objects placed in a given room.
- `ratgame.level` has `TileMap`, `Level` and the `Collision` flags. `Level`
  handles:
  - the screen tile buffer and collision map;
  - move and slide;
  - the collected items of each room;
  - camera moves between rooms;
  - text dumps for debugging.
- `ratgame.background` has `Background`, which scrolls each tile row of the
  background at its own speed.
- `ratgame.hud` has `Hud`, the energy bar and the gem counter, rendered as one
  line of text.
- `ratgame.enemy` has `EnemyType`, `init_enemy`, `bouncer_update` and
  `warper_update`.
- `ratgame.player` has `Player`, which handles platformer controls, picking up
  the cheese, the spike and the mouse hole.
- `ratgame.game` has `LevelData`, `Screen` and `Game`. `Game` is the menu and
  level state machine. It advances one frame per call to `Game.step(buttons)`,
  where `buttons` are the buttons held on the first joypad.

## Example

```python
from ratgame.config import IDX_EMPTY, GameState
from ratgame.fixed import fix16, fix16_to_int
from ratgame.game import Game, LevelData
from ratgame.gameobject import GameObject, SpriteDefinition
from ratgame.level import TileMap
from ratgame.objects_pool import ObjectsPool
from ratgame.utils import Button, Joypads

assert fix16_to_int(fix16(2.5)) == 2

pool = ObjectsPool(GameObject() for _ in range(3))
first = pool.acquire()
assert len(pool) == 1
pool.release(first)
assert len(pool) == 0

pads = Joypads()
pads.update([Button.A, 0])
assert pads.key_pressed(0, Button.A)
pads.update([Button.A, 0])
assert pads.key_down(0, Button.A) and not pads.key_pressed(0, Button.A)

tiles = [[IDX_EMPTY] * 20 for _ in range(14)]
game = Game(
    [LevelData(TileMap(20, 14, tiles))],
    SpriteDefinition("mouse", 16, 16),
    SpriteDefinition("cat", 16, 16),
)
assert "> Play" in game.screen.text_at(10)
assert game.step(Button.START) is GameState.PLAY
game.step()              # loads the level and runs the first frame
assert game.player is not None
```

## What the package does not do

- It draws no pixels and plays no sound. Images are recorded by name on
  `Screen`, and text is kept as characters.
- It ships no levels, sprites or images. You supply the `TileMap`s, the
  `MapObject`s and the `SpriteDefinition`s yourself.
- It has no command and no window. To run a session, call `Game.step` once per
  frame from your own loop.
- Choosing *Exit* in the menu resets the game to the main menu.

## Tests

The tests use pytest. Install them with the `test` extra.