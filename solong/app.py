"""The game window: drawing tiles, reading keys and running the game."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .game import Game, Key, Outcome, play_sound  # noqa: E402
from .mapfile import EXIT, MapError, check_args, load_map  # noqa: E402
from .xpm import XpmError, load_xpm  # noqa: E402

DEFAULT_IMAGE_DIR = Path("assets/img")
TILE = 61
TEXT_COLOR = (0xF2, 0xF3, 0xF4)
TITLE = "so_long"

_FILES = {
    "player": "player_right_1.xpm",
    "player2": "player_right_2.xpm",
    "player3": "player_left_1.xpm",
    "player4": "player_left_2.xpm",
    "wall": "wall.xpm",
    "earth": "cover.xpm",
    "collect": "coin-1.xpm",
    "collect2": "coin-2.xpm",
    "collect3": "coin-3.xpm",
    "collect4": "coin-4.xpm",
    "exit": "portal.xpm",
    "exit2": "portal_active.xpm",
    "enemy": "enemy_right_1.xpm",
    "enemy2": "enemy_right_2.xpm",
}


def find_image(path: str | Path) -> Path:
    """Check that an image file can be opened and return its path."""
    path = Path(path)
    try:
        with open(path, "rb"):
            pass
    except OSError:
        raise FileNotFoundError("Error: Image not found") from None
    return path


@dataclass(frozen=True)
class Assets:
    """Paths of every sprite the game draws."""

    player: Path
    player2: Path
    player3: Path
    player4: Path
    wall: Path
    earth: Path
    collect: Path
    collect2: Path
    collect3: Path
    collect4: Path
    exit: Path
    exit2: Path
    enemy: Path
    enemy2: Path

    def image_for(self, symbol: str, exit_open: bool) -> Path | None:
        """Return the sprite for a drawing symbol, or None if it has none."""
        if symbol == "E":
            return self.exit2 if exit_open else self.exit
        sprites = {
            "1": self.wall,
            "0": self.earth,
            "P": self.player,
            "X": self.enemy,
            "D": self.enemy2,
            "C": self.collect2,
            "Q": self.collect,
            "W": self.collect3,
            "R": self.collect4,
            "Z": self.player,
            "V": self.player2,
            "B": self.player3,
            "N": self.player4,
        }
        return sprites.get(symbol)


def load_assets(base: str | Path = DEFAULT_IMAGE_DIR) -> Assets:
    """Locate every sprite under ``base``, failing on the first one missing."""
    base = Path(base)
    return Assets(**{field: find_image(base / name) for field, name in _FILES.items()})


class App:
    """A window showing a game and feeding it key presses."""

    def __init__(self, game: Game, assets: Assets) -> None:
        self.game = game
        self.assets = assets
        self.screen: pygame.Surface | None = None
        self._surfaces: dict[Path, pygame.Surface] = {}
        self._font: pygame.font.Font | None = None

    def _surface(self, path: Path) -> pygame.Surface:
        surface = self._surfaces.get(path)
        if surface is None:
            image = load_xpm(path)
            surface = pygame.image.frombuffer(
                image.rgba_bytes(), (image.width, image.height), "RGBA"
            ).copy()
            self._surfaces[path] = surface
        return surface

    def draw_tile(self, symbol: str, row: int, col: int) -> None:
        """Draw the sprite for ``symbol`` on the tile at (row, col)."""
        if self.screen is None:
            raise RuntimeError("the window is not open")
        path = self.assets.image_for(symbol, self.game.exit_open)
        if path is None:
            return
        self.screen.blit(self._surface(path), (col * TILE, row * TILE))

    def draw_all(self) -> None:
        """Draw every tile of the map."""
        for row, line in enumerate(self.game.map.rows):
            for col, tile in enumerate(line):
                self.draw_tile(tile, row, col)

    def _draw_exits(self) -> None:
        for col, row in self.game.map.positions(EXIT):
            self.draw_tile(EXIT, row, col)

    def _animate(self) -> None:
        for row, line in enumerate(self.game.map.rows):
            for col in range(len(line)):
                symbol = self.game.animated_symbol(row, col)
                if symbol is not None:
                    self.draw_tile(symbol, row, col)

    def _print_steps(self) -> None:
        steps = str(self.game.steps)
        self.draw_tile("1", 0, 1)
        self.draw_tile("1", 0, 0)
        if self._font is not None and self.screen is not None:
            self.screen.blit(self._font.render("Steps: ", True, TEXT_COLOR), (20, 10))
            self.screen.blit(self._font.render(steps, True, TEXT_COLOR), (100, 10))
        print(f"Steps: {steps}")

    def _apply(self, outcome: Outcome, old: tuple[int, int]) -> bool:
        """Draw the result of a move; return False when the game is over."""
        if outcome is Outcome.CLOSED:
            print("You closed the window")
            return False
        if outcome is Outcome.WON:
            play_sound("you_win.mp3", "YOU_WIN! ^_^")
            return False
        if outcome is Outcome.LOST:
            play_sound("game_over.mp3", "GAME_OVER X)")
            return False
        if outcome in (Outcome.MOVED, Outcome.COLLECTED):
            if outcome is Outcome.COLLECTED:
                play_sound("coin.mp3")
            x, y = old
            self.draw_tile("0", y, x)
            new_x, new_y = self.game.player
            self.draw_tile("P", new_y, new_x)
            self._print_steps()
            if outcome is Outcome.COLLECTED and self.game.exit_open:
                self._draw_exits()
        return True

    def run(self) -> None:
        """Open the window and play until the game ends or is closed."""
        keys = {
            pygame.K_w: Key.W,
            pygame.K_s: Key.S,
            pygame.K_a: Key.A,
            pygame.K_d: Key.D,
            pygame.K_ESCAPE: Key.ESCAPE,
        }
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(
                (self.game.map.width * TILE, self.game.map.height * TILE)
            )
            pygame.display.set_caption(TITLE)
            self._font = pygame.font.Font(None, 24)
            self.draw_all()
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        print("You closed window")
                        running = False
                        break
                    if event.type == pygame.KEYDOWN and event.key in keys:
                        old = self.game.player
                        outcome = self.game.handle_key(keys[event.key])
                        if not self._apply(outcome, old):
                            running = False
                            break
                if not running:
                    break
                self.game.advance_frame(time.monotonic())
                self._animate()
                pygame.display.flip()
                clock.tick(60)
        finally:
            self.screen = None
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the map named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        assets = load_assets(DEFAULT_IMAGE_DIR)
        path = check_args(args)
        game_map = load_map(path)
    except (MapError, FileNotFoundError) as exc:
        print(exc)
        return 1
    try:
        App(Game(game_map), assets).run()
    except XpmError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())