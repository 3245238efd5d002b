# solong

A small tile-based puzzle game. Walk the player through a walled map,
pick up every coin, and step onto the portal once it has opened. Walk
into an enemy and the game is over.

## Installing

```
pip install .
```

The game window uses pygame. To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
solong maps/level.ber
```

The argument must be a single map file whose name ends in `.ber`. The
game looks for its images under `assets/img/` and its sounds under
`assets/sound/`, relative to the directory it is started from. If an
image is missing, or the arguments or the map are not acceptable, it
prints the reason and exits with status 1.

Controls:

| Key | Action     |
|-----|------------|
| W   | move up    |
| S   | move down  |
| A   | move left  |
| D   | move right |
| Esc | quit       |

Each step is counted and shown in the window and on standard output.
Coins, enemies and the player are animated. The portal only lets the
player in once every coin has been picked up; until then it blocks the
way like a wall.

## Map files

A map is a plain text file, one row per line, built from these symbols:

| Symbol | Meaning      |
|--------|--------------|
| `1`    | wall         |
| `0`    | floor        |
| `P`    | player start |
| `C`    | coin         |
| `E`    | exit portal  |
| `D`    | enemy        |

A valid map:

- is rectangular: every row has the same length;
- is closed: the first and last rows are all walls, and every row starts
  and ends with a wall;
- has exactly one `P`, at least one `C` and at least one `E`;
- is at most 17 rows tall and 39 columns wide.

The file must not end with a newline: a trailing newline counts as an
empty last row, and the map is then rejected for its shape.

Example:

```
1111111111
1P0C00D0E1
1111111111
```

## Using it as a library

The pieces of the game are importable on their own:

- `solong.mapfile.load_map(path)` reads and validates a map file, giving
  a `GameMap` or raising `MapError`; `validate_map(rows)` does the same
  for lines already in memory, and `check_args(argv)` checks a command
  line and returns the map path.
- `solong.game.Game` holds the state of a game in play.
  `Game.handle_key(key)` takes a `Key` code and `Game.move(dx, dy)` a
  direction; both report an `Outcome` (`NONE`, `MOVED`, `COLLECTED`,
  `WON`, `LOST` or `CLOSED`). `Game.advance_frame(now)` drives the
  animation clock and `Game.animated_symbol(row, col)` names the sprite
  for an animated tile.
- `solong.xpm.load_xpm(path)`, `parse_xpm_text(text)` and
  `parse_xpm(lines)` read XPM images into `XpmImage` pixel grids, raising
  `XpmError` on bad data; colour names are resolved with
  `solong.colors.lookup_color(name)`.
- `solong.app.load_assets(base)` locates the sprites, and
  `solong.app.App(game, assets).run()` opens the window and plays.
  `solong.app.main(argv)` is the `solong` command.

## Limitations

- Sounds are played by starting the `afplay` command. Where it is not
  available the game runs silently.
- Enemies stay where the map puts them; they are animated but do not
  move.
- The map is not checked for being solvable: a coin or the portal may be
  walled off.