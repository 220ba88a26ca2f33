# solong

A small top-down puzzle game. Walk through a maze, pick up every collectible,
avoid the enemies and step onto the exit to pass the map.

## Installing

```
pip install .
```

The game window is drawn with pygame.

## Playing

```
so_long maps/level.ber
```

The command takes exactly one argument: the path of a map file. A path of
three or more characters must end in `ber` (for example `level.ber`).

Textures are read from a `textures/` directory in the current working
directory: `wall.xpm`, `player.xpm`, `collectible.xpm`, `exit.xpm` and
`enemy.xpm`. They are loaded with `pygame.image.load`, so the pygame build in
use must be able to read XPM images.

Controls:

| Key                | Action     |
|--------------------|------------|
| `W` / Up arrow     | move up    |
| `S` / Down arrow   | move down  |
| `A` / Left arrow   | move left  |
| `D` / Right arrow  | move right |
| `Esc`              | quit       |

Closing the window also quits. Each step onto a free tile prints
`Moves: <n>`. Walking into a wall does nothing. Stepping onto an enemy prints
`You Died x(` and ends the game; stepping onto the exit once every collectible
has been taken prints `CONGRATULATIONS!MAP PASSED!` and ends the game. Stepping
onto the exit while collectibles remain is an ordinary move.

## Map format

A map is a rectangle of text lines made of these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `E`  | exit         |
| `C`  | collectible  |
| `X`  | enemy        |

Each tile is drawn 40 pixels square, and the window is sized to the map.

A valid map:

- has rows that are all the same length and contains no other characters,
- is closed by walls: the first and last rows are entirely `1`, and every
  row starts and ends with `1`,
- has exactly one `P`, exactly one `E` and at least one `C`,
- can be finished: every `P`, `E`, `C` and `X` tile is reachable from the
  player start without crossing walls (unreachable floor is allowed).

Example:

```
1111111
1P0C0E1
1111111
```

A problem with the arguments, the map, the display or the textures is printed
as `Error` followed by a line describing it (such as `Invalid number of args`,
`Invalid map`, `Processing map lines`, `Invalid map borders`,
`Invalid number of components`, `Finishing not possible` or `Image load`), and
the command exits with status 1.

## Using it as a library

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Key, Outcome

game_map = load_map("maps/level.ber")
game = Game(game_map)
outcome = game.move(Key.RIGHT)
if outcome.terminal:
    print(outcome.value)
```

- `solong.mapfile` — `load_map` reads and validates a map, raising
  `MapError` if it is invalid. The individual steps are `read_map_lines`,
  `parse_map`, `check_borders`, `check_counters` and `can_finish`. A
  `GameMap` holds the rows plus the walls, enemies, collectibles
  (`Collectible`), player start and exit (`Point`).
- `solong.game` — `Game.move(key)` applies a key code (`Key`) and returns an
  `Outcome`: `IGNORED`, `BLOCKED`, `MOVED`, `QUIT`, `DIED` or `WON`.
  `Game.moves` counts successful steps and `Game.ate_everything()` tells
  whether every collectible has been taken.
- `solong.render` — `load_textures(textures_dir)` loads the five sprites into
  a `Textures`, and `Renderer(game, textures).draw(surface)` draws one frame
  onto a pygame surface.
- `solong.cli` — `check_args`, `run(game, textures_dir)` and `main`, the
  function behind the `so_long` command.

## Running the tests

```
pip install .[test]
pytest
```