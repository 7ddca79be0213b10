"""The game window and the command that starts it."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path

import pygame

from solong.constants import IMG_H, IMG_W, Key, Message
from solong.game import Game, QuitGame
from solong.mapfile import MapError, check_map, organize_map, read_map_lines
from solong.render import Sprite, message_overlay, render_scene
from solong.xpm import XpmError, XpmImage, load_xpm

FPS = 60
TITLE = "SO LONG"


def _build_key_table() -> dict[int, Key]:
    table = {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_TAB: Key.TAB,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_RETURN: Key.ENTER,
        pygame.K_BACKSPACE: Key.BACKSPACE,
        pygame.K_LSHIFT: Key.LSHIFT,
        pygame.K_LCTRL: Key.LCTRL,
        pygame.K_LALT: Key.LALT,
        pygame.K_RSHIFT: Key.RSHIFT,
        pygame.K_RCTRL: Key.RCTRL,
        pygame.K_RALT: Key.RALT,
        pygame.K_MINUS: Key.MINUS,
        pygame.K_EQUALS: Key.EQUAL,
    }
    for char in "0123456789abcdefghijklmnopqrstuvwxyz":
        table[ord(char)] = Key(char)
    return table


_KEYS = _build_key_table()


def _to_surface(image: XpmImage) -> pygame.Surface:
    data = bytearray()
    for row in image.pixels:
        for pixel in row:
            value = pixel & 0xFFFFFFFF
            data += bytes(
                (
                    (value >> 16) & 0xFF,
                    (value >> 8) & 0xFF,
                    value & 0xFF,
                    0xFF - (value >> 24),
                )
            )
    return pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA").copy()


def load_images(asset_dir: str | PathLike[str]) -> dict[Sprite, pygame.Surface]:
    """Load every sprite from ``asset_dir``; raises XpmError if one fails."""
    root = Path(asset_dir)
    return {sprite: _to_surface(load_xpm(root / sprite.value)) for sprite in Sprite}


class App:
    """A window that shows a game and feeds it key presses."""

    def __init__(self, game: Game, asset_dir: str | PathLike[str]) -> None:
        self.game = game
        self.asset_dir = Path(asset_dir)

    def _draw(self, screen: pygame.Surface, images: dict[Sprite, pygame.Surface]) -> None:
        screen.fill((0, 0, 0))
        self.game.advance_frame()
        for sprite, x, y in render_scene(self.game):
            screen.blit(images[sprite], (x, y))
        if self.game.message in (Message.DEAD, Message.EXIT):
            overlay = message_overlay(self.game)
            if overlay is not None:
                sprite, x, y = overlay
                screen.blit(images[sprite], (x, y))
        pygame.display.flip()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                key = _KEYS.get(event.key)
                if key is None:
                    continue
                try:
                    self.game.handle_key(key)
                except QuitGame:
                    return False
        return True

    def run(self) -> int:
        """Open the window and play until the game is left; return the exit status.

        Raises XpmError when an image cannot be loaded.
        """
        board = self.game.board
        pygame.init()
        try:
            screen = pygame.display.set_mode((board.width * IMG_W, board.height * IMG_H))
            pygame.display.set_caption(TITLE)
            images = load_images(self.asset_dir)
            clock = pygame.time.Clock()
            while self._handle_events():
                self._draw(screen, images)
                clock.tick(FPS)
            return 0
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Play the map named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("ARGUMENTS ERROR 😐")
        return -1
    file_name = args[0]
    try:
        lines = read_map_lines(file_name)
    except MapError as exc:
        print(exc, end="")
        return 0
    try:
        check_map(file_name, lines)
    except MapError as exc:
        print(f"{exc} 😐")
        return 1
    game = Game(organize_map(lines))
    try:
        return App(game, Path.cwd()).run()
    except XpmError:
        print("UNEXPECTED ERROR")
        return 1


if __name__ == "__main__":
    sys.exit(main())