"""Game state and movement rules."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Iterable, TypeVar

from solong.mapfile import Collectible, GameMap, Point

_Item = TypeVar("_Item")


class Key(IntEnum):
    """Key codes the game reacts to (X11 keysyms)."""

    ESCAPE = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


_DIRECTIONS = {
    Key.W: (0, -1),
    Key.UP: (0, -1),
    Key.S: (0, 1),
    Key.DOWN: (0, 1),
    Key.A: (-1, 0),
    Key.LEFT: (-1, 0),
    Key.D: (1, 0),
    Key.RIGHT: (1, 0),
}


class Outcome(Enum):
    """What a key press did to the game."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    QUIT = "quit"
    DIED = "died"
    WON = "won"

    @property
    def terminal(self) -> bool:
        """True if the game ends with this outcome."""
        return self in (Outcome.QUIT, Outcome.DIED, Outcome.WON)


def collision(x: int, y: int, x1: int, y1: int) -> bool:
    """Return True if both positions are the same cell."""
    return x == x1 and y == y1


def list_collision(x: int, y: int, items: Iterable[_Item]) -> _Item | None:
    """Return the first item standing on cell (x, y), or None."""
    return next(
        (item for item in items if collision(x, y, item.x, item.y)),  # type: ignore[attr-defined]
        None,
    )


class Game:
    """A running game on one map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.player: Point = game_map.player
        self.exit: Point = game_map.exit
        self.walls: list[Point] = list(game_map.walls)
        self.enemies: list[Point] = list(game_map.enemies)
        self.collectibles: list[Collectible] = [
            Collectible(item.x, item.y, item.active) for item in game_map.collectibles
        ]
        self.moves = 0

    def ate_everything(self) -> bool:
        """Return True once no collectible is still active."""
        return not any(item.active for item in self.collectibles)

    def move(self, key: int) -> Outcome:
        """Apply a key press and report what happened."""
        if key == Key.ESCAPE:
            return Outcome.QUIT
        step = _DIRECTIONS.get(key)
        if step is None:
            return Outcome.IGNORED
        target = Point(self.player.x + step[0], self.player.y + step[1])
        if list_collision(target.x, target.y, self.walls) is not None:
            return Outcome.BLOCKED
        self.player = target
        if list_collision(target.x, target.y, self.enemies) is not None:
            return Outcome.DIED
        if collision(target.x, target.y, self.exit.x, self.exit.y) and self.ate_everything():
            return Outcome.WON
        item = list_collision(target.x, target.y, self.collectibles)
        if item is not None:
            item.active = False
        self.moves += 1
        return Outcome.MOVED