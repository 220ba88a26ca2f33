"""A tile-based puzzle game: collect every item and reach the exit."""

__version__ = "0.1.0"
__all__ = ["mapfile", "game", "render", "cli"]