"""Drawing the game with pygame."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from solong.game import Game
from solong.mapfile import SPRITE_SIZE

_TEXTURE_NAMES = ("wall", "player", "collectible", "exit", "enemy")


@dataclass
class Textures:
    """The sprite images used to draw a game."""

    wall: pygame.Surface
    player: pygame.Surface
    collectible: pygame.Surface
    exit: pygame.Surface
    enemy: pygame.Surface


def load_textures(textures_dir: str | Path) -> Textures:
    """Load every sprite from ``<name>.xpm`` files; raise OSError on failure."""
    directory = Path(textures_dir)
    has_display = pygame.display.get_init() and pygame.display.get_surface() is not None
    images = {}
    for name in _TEXTURE_NAMES:
        path = directory / f"{name}.xpm"
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError) as exc:
            raise OSError(f"Image load: {path}") from exc
        images[name] = image.convert_alpha() if has_display else image
    return Textures(**images)


class Renderer:
    """Draws a game's objects onto a surface."""

    def __init__(self, game: Game, textures: Textures) -> None:
        self.game = game
        self.textures = textures

    def _blit(self, surface: pygame.Surface, image: pygame.Surface, x: int, y: int) -> None:
        surface.blit(image, (x * SPRITE_SIZE, y * SPRITE_SIZE))

    def draw(self, surface: pygame.Surface) -> pygame.Surface:
        """Clear the surface and draw one frame of the game onto it."""
        game = self.game
        surface.fill((0, 0, 0))
        for wall in game.walls:
            self._blit(surface, self.textures.wall, wall.x, wall.y)
        self._blit(surface, self.textures.player, game.player.x, game.player.y)
        for item in game.collectibles:
            if item.active:
                self._blit(surface, self.textures.collectible, item.x, item.y)
        self._blit(surface, self.textures.exit, game.exit.x, game.exit.y)
        for enemy in game.enemies:
            self._blit(surface, self.textures.enemy, enemy.x, enemy.y)
        return surface