"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

import pygame

from solong.game import Game, Key, Outcome
from solong.mapfile import MapError, load_map
from solong.render import Renderer, load_textures

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}

_FRAME_RATE = 60


def _error(message: str) -> None:
    print(f"Error\n{message}")


def check_args(argv: Sequence[str]) -> str:
    """Return the map path from the arguments; raise ValueError if they are wrong."""
    if len(argv) != 1:
        raise ValueError("Invalid number of args")
    path = argv[0]
    if len(path) >= 3 and not path.endswith("ber"):
        raise ValueError("Invalid map")
    return path


def _report(game: Game, outcome: Outcome) -> None:
    if outcome is Outcome.DIED:
        print("You Died x(")
    elif outcome is Outcome.WON:
        print("CONGRATULATIONS!MAP PASSED!")
    elif outcome is Outcome.MOVED:
        print(f"Moves: {game.moves}")


def run(game: Game, textures_dir: str | Path = "textures") -> int:
    """Open a window and play the game until it ends; return the exit status."""
    try:
        try:
            pygame.display.init()
        except pygame.error:
            _error("Mlx init")
            return 1
        try:
            screen = pygame.display.set_mode((game.map.pixel_width, game.map.pixel_height))
        except pygame.error:
            _error("Window load")
            return 1
        pygame.display.set_caption("so_long")
        try:
            textures = load_textures(textures_dir)
        except OSError:
            _error("Image load")
            return 1
        renderer = Renderer(game, textures)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                key = _PYGAME_KEYS.get(event.key)
                if key is None:
                    continue
                outcome = game.move(key)
                _report(game, outcome)
                if outcome.terminal:
                    return 0
            renderer.draw(screen)
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = check_args(args)
    except ValueError as exc:
        _error(str(exc))
        return 1
    try:
        game_map = load_map(path)
    except MapError as exc:
        if exc.detail == "Invalid character":
            print(exc.detail)
        _error(str(exc))
        return 1
    return run(Game(game_map), "textures")


if __name__ == "__main__":
    sys.exit(main())