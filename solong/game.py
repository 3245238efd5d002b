"""Game state and rules: moving the player, collecting and animation frames."""

from __future__ import annotations

import subprocess
from enum import Enum, IntEnum

from .mapfile import COLLECTIBLE, ENEMY, EXIT, FLOOR, PLAYER, GameMap

SOUND_DIR = "./assets/sound/"
FRAME_INTERVAL = 0.1
FRAME_COUNT = 50


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESCAPE = 53


class Outcome(Enum):
    """What a key press led to."""

    NONE = "none"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"
    LOST = "lost"
    CLOSED = "closed"


_DIRECTIONS = {
    Key.W: (0, -1),
    Key.S: (0, 1),
    Key.A: (-1, 0),
    Key.D: (1, 0),
}


class Game:
    """The state of one game on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.steps = 0
        self.frame = 0
        self.last_tick = 0.0
        self.facing_left = False

    @property
    def player(self) -> tuple[int, int]:
        """The player's (x, y) position."""
        return self.map.player

    @property
    def collectibles(self) -> int:
        """How many collectibles are still on the map."""
        return self.map.collectibles

    @property
    def exit_open(self) -> bool:
        return self.map.collectibles == 0

    def handle_key(self, key: int) -> Outcome:
        """React to a key press and report what happened."""
        try:
            key = Key(key)
        except ValueError:
            return Outcome.NONE
        if key is Key.ESCAPE:
            return Outcome.CLOSED
        if key is Key.A:
            self.facing_left = True
        elif key is Key.D:
            self.facing_left = False
        return self.move(*_DIRECTIONS[key])

    def _step(self, dx: int, dy: int) -> None:
        x, y = self.player
        self.map.rows[y][x] = FLOOR
        self.map.rows[y + dy][x + dx] = PLAYER
        self.map.player = (x + dx, y + dy)
        self.steps += 1

    def move(self, dx: int, dy: int) -> Outcome:
        """Try to move the player by (dx, dy)."""
        x, y = self.player
        target = self.map.rows[y + dy][x + dx]
        if target == ENEMY:
            return Outcome.LOST
        if target == EXIT and self.exit_open:
            return Outcome.WON
        if target == COLLECTIBLE:
            self._step(dx, dy)
            self.map.collectibles -= 1
            return Outcome.COLLECTED
        if target == FLOOR:
            self._step(dx, dy)
            return Outcome.MOVED
        return Outcome.NONE

    def advance_frame(self, now: float) -> int:
        """Move the animation on if enough time has passed; return the frame."""
        if now - self.last_tick >= FRAME_INTERVAL:
            self.frame += 1
            self.last_tick = now
        if self.frame >= FRAME_COUNT:
            self.frame = 0
        return self.frame

    def animated_symbol(self, row: int, col: int) -> str | None:
        """Return the sprite symbol for an animated tile, or None if static."""
        tile = self.map.rows[row][col]
        frame = self.frame
        if tile == ENEMY:
            return "D" if frame > 24 else "X"
        if tile == COLLECTIBLE:
            if frame > 36:
                return "C"
            if frame > 24:
                return "Q"
            if frame > 12:
                return "W"
            return "R"
        if tile == PLAYER:
            if self.facing_left:
                return "B" if frame > 24 else "N"
            return "Z" if frame > 24 else "V"
        return None


def play_sound(sound: str, message: str | None = None) -> subprocess.Popen | None:
    """Start playing a sound in the background and print an optional message."""
    process = None
    try:
        process = subprocess.Popen(
            ["afplay", SOUND_DIR + sound],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        process = None
    if message:
        print(message)
    return process