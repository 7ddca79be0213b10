"""A tile-based puzzle game with XPM sprites, .ber map files and a pygame window."""

__version__ = "0.1.0"
__all__ = ["colors", "constants", "xpm", "mapfile", "game", "render", "app"]