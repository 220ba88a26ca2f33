"""Loading and validating ``.ber`` map files."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

SPRITE_SIZE = 40

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "X"
VALID_CHARS = frozenset({WALL, FLOOR, PLAYER, EXIT, COLLECTIBLE, ENEMY})


class MapError(Exception):
    """Raised when a map cannot be loaded or is not a playable map."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


@dataclass(frozen=True)
class Point:
    """A cell position on the map grid."""

    x: int
    y: int


@dataclass
class Collectible:
    """A collectible item; inactive once the player has picked it up."""

    x: int
    y: int
    active: bool = True


@dataclass
class GameMap:
    """A parsed map: its rows and the objects placed on it."""

    rows: tuple[str, ...]
    walls: list[Point] = field(default_factory=list)
    enemies: list[Point] = field(default_factory=list)
    collectibles: list[Collectible] = field(default_factory=list)
    player: Point = Point(0, 0)
    exit: Point = Point(0, 0)

    @property
    def columns(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def pixel_width(self) -> int:
        return self.columns * SPRITE_SIZE

    @property
    def pixel_height(self) -> int:
        return self.row_count * SPRITE_SIZE


def read_map_lines(path: str | Path) -> list[str]:
    """Read a map file and return its lines without line terminators."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise MapError("Loading map lines", str(exc)) from exc
    if not content:
        raise MapError("Loading map lines", "empty map file")
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def line_is_walls(line: str) -> bool:
    """Return True if every character before a newline is a wall."""
    return all(char == WALL for char in line.split("\n", 1)[0])


def parse_map(lines: list[str]) -> GameMap:
    """Build a GameMap from map lines, checking widths and characters."""
    if not lines:
        raise MapError("Processing map lines", "no lines")
    width = len(lines[0])
    game_map = GameMap(rows=tuple(lines))
    for y, line in enumerate(lines):
        if len(line) != width:
            raise MapError("Processing map lines", f"line {y} has a different width")
        for x, char in enumerate(line):
            if char == WALL:
                game_map.walls.append(Point(x, y))
            elif char == ENEMY:
                game_map.enemies.append(Point(x, y))
            elif char == COLLECTIBLE:
                game_map.collectibles.append(Collectible(x, y))
            elif char == PLAYER:
                game_map.player = Point(x, y)
            elif char == EXIT:
                game_map.exit = Point(x, y)
            elif char != FLOOR:
                raise MapError("Processing map lines", "Invalid character")
    return game_map


def check_borders(lines: list[str]) -> None:
    """Raise MapError unless the map is enclosed by walls."""
    last = len(lines) - 1
    for y, line in enumerate(lines):
        sides_ok = line[:1] == WALL and line[-1:] == WALL
        if not sides_ok or (y in (0, last) and not line_is_walls(line)):
            raise MapError("Invalid map borders")


def check_counters(lines: list[str]) -> dict[str, int]:
    """Count players, exits and collectibles; raise unless the counts are valid."""
    width = len(lines[0]) if lines else 0
    counts = Counter(char for line in lines for char in line[:width])
    result = {
        PLAYER: counts[PLAYER],
        EXIT: counts[EXIT],
        COLLECTIBLE: counts[COLLECTIBLE],
    }
    if result[PLAYER] != 1 or result[EXIT] != 1 or result[COLLECTIBLE] < 1:
        raise MapError("Invalid number of components")
    return result


def can_finish(lines: list[str], start: Point) -> bool:
    """Flood-fill from ``start``; raise unless every object can be reached."""
    grid = [list(line) for line in lines]
    stack = [(start.x, start.y)]
    while stack:
        x, y = stack.pop()
        if x < 0 or y < 0 or y >= len(grid) or x >= len(grid[y]):
            continue
        if grid[y][x] == WALL:
            continue
        grid[y][x] = WALL
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    if any(char not in (WALL, FLOOR) for row in grid for char in row):
        raise MapError("Finishing not possible")
    return True


def load_map(path: str | Path) -> GameMap:
    """Load a map file and run every validity check on it."""
    lines = read_map_lines(path)
    game_map = parse_map(lines)
    check_borders(lines)
    check_counters(lines)
    can_finish(lines, game_map.player)
    return game_map