"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

MAP_EXTENSION = ".ber"
MAX_ROWS = 17
MAX_COLUMNS = 39

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "D"


class MapError(Exception):
    """Raised when the map or the command line is not acceptable."""


@dataclass
class GameMap:
    """A validated map: a mutable grid of symbols and what is on it."""

    rows: list[list[str]]
    collectibles: int
    exits: int
    player: tuple[int, int]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def positions(self, symbol: str) -> Iterator[tuple[int, int]]:
        """Yield (x, y) of every tile holding ``symbol``, row by row."""
        for y, row in enumerate(self.rows):
            for x, tile in enumerate(row):
                if tile == symbol:
                    yield x, y

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def check_args(argv: Sequence[str]) -> str:
    """Check the command-line arguments and return the map path."""
    args = list(argv)
    if len(args) != 1:
        raise MapError("Wrong numbers of arguments")
    path = args[0]
    dot = path.rfind(".")
    if dot < 0:
        raise MapError("Wrong argument")
    if path[dot:] != MAP_EXTENSION:
        raise MapError("Wrong map extension")
    return path


def read_map_lines(path: str | Path) -> list[str]:
    """Read a map file into its lines; a trailing newline leaves an empty line."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("Can't open the map") from exc
    return text.split("\n")


def _check_all_walls(row: str) -> None:
    if any(tile != WALL for tile in row):
        raise MapError("Error: Map isn't closed")


def _check_row(row: str, length: int, counts: Counter[str]) -> None:
    if len(row) != length:
        raise MapError("Error shape of the map")
    if not row or row[0] != WALL or row[-1] != WALL:
        raise MapError("Error: Map isn't closed")
    for tile in row:
        if tile in (COLLECTIBLE, EXIT, PLAYER):
            counts[tile] += 1
        elif tile not in (WALL, FLOOR, ENEMY):
            raise MapError("Error: Incorrect symbols of the map")


def validate_map(rows: Iterable[str]) -> GameMap:
    """Check a map's shape, walls and contents, and build a GameMap."""
    lines = list(rows)
    if not lines:
        raise MapError("Map is empty")
    length = len(lines[0])
    if len(lines[-1]) != length:
        raise MapError("Error: shape of the map")
    _check_all_walls(lines[0])
    _check_all_walls(lines[-1])

    counts: Counter[str] = Counter()
    for line in lines[1:]:
        _check_row(line, length, counts)
    if counts[PLAYER] != 1 or counts[COLLECTIBLE] == 0 or counts[EXIT] == 0:
        raise MapError("Error: Position or Collect or Exit")
    if len(lines) > MAX_ROWS or length > MAX_COLUMNS:
        raise MapError("Error: map is too big")

    grid = [list(line) for line in lines]
    game_map = GameMap(grid, counts[COLLECTIBLE], counts[EXIT], (0, 0))
    game_map.player = next(game_map.positions(PLAYER))
    return game_map


def load_map(path: str | Path) -> GameMap:
    """Read and validate a map file."""
    return validate_map(read_map_lines(path))