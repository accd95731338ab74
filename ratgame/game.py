"""The game loop: menus, level flow, player and enemies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .background import Background
from .config import SCREEN_TILES_H, SCREEN_TILES_W, GameState
from .enemy import init_enemy
from .gameobject import GameObject, SpriteDefinition, check_collision
from .level import Level, TileMap
from .mapobjects import MapObject, RoomIndex
from .objects_pool import ObjectsPool
from .player import Player
from .utils import Button, Joypads

MAX_ENEMIES = 30

IMG_MAINMENU = "mainmenu"
IMG_LEVEL_CLEAR = "level_clear"
IMG_RETRY = "retry"
IMG_YOUWIN = "youwin"

_MENU_ENTRIES = (
    ("Play", 10),
    ("Controles", 12),
    ("Credits", 14),
    ("Exit", 16),
)
_MENU_TARGETS = (
    GameState.PLAY,
    GameState.CONTROLS,
    GameState.CREDITS,
    GameState.EXIT,
)
_MENU_X = 15


@dataclass(frozen=True)
class LevelData:
    """A level's map and the objects placed on it, grouped by room."""

    tilemap: TileMap
    objects: Sequence[MapObject] = ()


@dataclass
class Screen:
    """A text plane over a background image."""

    width: int = SCREEN_TILES_W
    height: int = SCREEN_TILES_H
    image: Optional[str] = None
    _rows: list = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rows = [[" "] * self.width for _ in range(self.height)]

    def draw_text(self, text: str, x: int, y: int) -> None:
        """Write text at a tile position, clipped to the screen."""
        if not 0 <= y < self.height:
            return
        row = self._rows[y]
        for offset, char in enumerate(text):
            col = x + offset
            if 0 <= col < self.width:
                row[col] = char

    def clear_text_area(self, x: int, y: int, width: int, height: int) -> None:
        """Blank a rectangle of the text plane."""
        for row in self._rows[max(0, y):max(0, y + height)]:
            for col in range(max(0, x), min(self.width, x + width)):
                row[col] = " "

    def draw_image(self, name: str) -> None:
        """Show a background image."""
        self.image = name

    def text_at(self, y: int) -> str:
        """The text of one row of the plane."""
        return "".join(self._rows[y])


class Game:
    """The whole game, advanced one frame at a time by step()."""

    def __init__(
        self,
        levels: Sequence[LevelData],
        player_sprite: SpriteDefinition,
        enemy_sprite: SpriteDefinition,
    ) -> None:
        self.levels = list(levels)
        if not self.levels:
            raise ValueError("a game needs at least one level")
        self.player_sprite = player_sprite
        self.enemy_sprite = enemy_sprite
        self.screen = Screen()
        self.joypads = Joypads()
        self.state = GameState.MENU
        self.level_number = 1
        self.menu_option = 0
        self.game_started = False
        self.level: Optional[Level] = None
        self.player: Optional[Player] = None
        self.background: Optional[Background] = None
        self.room_index = RoomIndex(())
        self.enemies = ObjectsPool(())
        self.draw_menu()

    @property
    def is_last_level(self) -> bool:
        return self.level_number >= len(self.levels)

    # -- level setup ----------------------------------------------------

    def init_level(self) -> None:
        """Load the current level, player and enemies from scratch."""
        data = self.levels[self.level_number - 1]
        self.background = Background()
        self.level = Level(data.tilemap)
        self.player = Player(self.player_sprite)
        self.room_index = RoomIndex(data.objects)
        self.enemies = ObjectsPool(GameObject() for _ in range(MAX_ENEMIES))
        self.spawn_enemies()

    def spawn_enemies(self) -> None:
        """Activate the enemies placed in the room the camera shows."""
        if self.level is None:
            return
        for mapobj in self.room_index.objects_in_room(self.level.current_room()):
            enemy = self.enemies.acquire()
            if enemy is None:
                return
            init_enemy(enemy, mapobj, self.level, self.enemy_sprite)

    def clear_enemies(self) -> None:
        """Release every active enemy."""
        self.enemies.clear()

    def update_enemies(self) -> None:
        """Move the enemies; one touching the player hits it and disappears."""
        for enemy in self.enemies:
            if enemy.update is not None:
                enemy.update(enemy, self.level)
            if self.player is not None and check_collision(self.player.obj, enemy):
                self.state = self.player.on_hit(1)
                self.enemies.release(enemy)

    def _game_update(self, buttons: int) -> None:
        self.joypads.update([buttons] + [0] * (len(self.joypads.buttons) - 1))
        new_state = self.player.update(self.joypads, self.level)
        if new_state is not None:
            self.state = new_state
        self.update_enemies()
        if self.level.update_camera(self.player.obj):
            self.clear_enemies()
            self.spawn_enemies()

    def _start_level(self) -> None:
        self.init_level()
        self.state = GameState.PLAY
        self.game_started = True

    def _back_to_menu(self) -> None:
        self.level_number = 1
        self.state = GameState.MENU
        self.draw_menu()

    # -- menu -----------------------------------------------------------

    def draw_menu(self) -> None:
        """Draw the main menu with the cursor on the selected entry."""
        self.screen.draw_image(IMG_MAINMENU)
        self.screen.clear_text_area(0, 0, SCREEN_TILES_W, SCREEN_TILES_H)
        for option, (label, row) in enumerate(_MENU_ENTRIES):
            prefix = "> " if option == self.menu_option else "  "
            self.screen.draw_text(prefix + label, _MENU_X, row)

    def update_menu(self, buttons: int) -> None:
        """Move the menu cursor or pick the selected entry."""
        if buttons & Button.DOWN:
            if self.menu_option < len(_MENU_ENTRIES) - 1:
                self.menu_option += 1
            self.draw_menu()
        if buttons & Button.UP:
            if self.menu_option > 0:
                self.menu_option -= 1
            self.draw_menu()
        if buttons & (Button.A | Button.START):
            self.state = _MENU_TARGETS[self.menu_option]

    # -- screens --------------------------------------------------------

    def _text_screen(self, image: Optional[str], lines) -> None:
        if image is not None:
            self.screen.draw_image(image)
        self.screen.clear_text_area(0, 0, SCREEN_TILES_W, SCREEN_TILES_H)
        for text, x, y in lines:
            self.screen.draw_text(text, x, y)

    def _controls(self, buttons: int) -> None:
        self._text_screen(
            None,
            (
                ("Controles:", 15, 10),
                ("Setas: mover", 12, 13),
                ("A: pular/selecionar", 12, 15),
                ("B (S): acao especial", 12, 17),
                ("Start: menu", 12, 19),
                ("Pressione A para voltar", 8, 23),
            ),
        )
        if buttons & Button.A:
            self.state = GameState.MENU
            self.draw_menu()

    def _credits(self, buttons: int) -> None:
        self._text_screen(
            None,
            (
                ("Obrigado por jogar!", 12, 12),
                ("Pressione A para voltar", 8, 20),
            ),
        )
        if buttons & Button.A:
            self.state = GameState.MENU
            self.draw_menu()

    def _hard_reset(self) -> None:
        self.state = GameState.MENU
        self.level_number = 1
        self.menu_option = 0
        self.game_started = False
        self.level = None
        self.player = None
        self.background = None
        self.room_index = RoomIndex(())
        self.enemies = ObjectsPool(())
        self.draw_menu()

    def _level_clear(self, buttons: int) -> None:
        if self.is_last_level:
            lines = (
                ("ULTIMA FASE COMPLETA!", 9, 20),
                ("A: Jogar novamente", 10, 22),
                ("B: Tela de Vitoria", 10, 23),
                ("Start: Menu", 14, 25),
            )
        else:
            lines = (
                ("Fase Completa!", 14, 20),
                ("A: Jogar novamente", 10, 22),
                ("B: Proxima Fase", 10, 23),
                ("Start: Menu", 14, 25),
            )
        self._text_screen(IMG_LEVEL_CLEAR, lines)

        if buttons & Button.A:
            self._start_level()
        elif buttons & Button.B:
            if self.is_last_level:
                self.state = GameState.YOU_WIN
            else:
                self.level_number += 1
                self._start_level()
        elif buttons & Button.START:
            self._back_to_menu()

    def _you_win(self, buttons: int) -> None:
        self._text_screen(
            IMG_YOUWIN,
            (
                ("PARABENS!", 16, 18),
                ("Voce completou o jogo!", 9, 20),
                ("A: Recomecar", 14, 23),
                ("Start: Menu", 14, 25),
            ),
        )
        if buttons & Button.A:
            self.level_number = 1
            self._start_level()
        elif buttons & Button.START:
            self._back_to_menu()

    def _retry(self, buttons: int) -> None:
        self.game_started = False
        self._text_screen(
            IMG_RETRY,
            (
                ("Voce morreu!", 15, 20),
                ("Pressione A para tentar de novo", 8, 22),
                ("Pressione START para ir ao menu", 4, 24),
            ),
        )
        if buttons & Button.A:
            self._start_level()
        elif buttons & Button.START:
            self._back_to_menu()

    # -- frame ----------------------------------------------------------

    def step(self, buttons: int = 0) -> GameState:
        """Run one frame with the buttons held on the first joypad."""
        buttons = int(buttons)
        state = self.state
        if state is GameState.MENU:
            self.game_started = False
            self.update_menu(buttons)
        elif state is GameState.PLAY:
            if not self.game_started:
                self.init_level()
                self.game_started = True
            self._game_update(buttons)
        elif state is GameState.CONTROLS:
            self._controls(buttons)
        elif state is GameState.CREDITS:
            self._credits(buttons)
        elif state is GameState.EXIT:
            self._hard_reset()
        elif state is GameState.LEVEL_CLEAR:
            self._level_clear(buttons)
        elif state is GameState.YOU_WIN:
            self._you_win(buttons)
        elif state is GameState.RETRY:
            self._retry(buttons)
        return self.state