"""Turning the game state into a list of sprites to draw."""

from __future__ import annotations

from enum import Enum

from solong import constants
from solong.constants import IMG_H, IMG_W, Key, Message, Tile
from solong.game import Game

Draw = tuple["Sprite", int, int]


class Sprite(Enum):
    """Every image the game draws; the value is the asset's relative path."""

    CHAR_FRONT_1 = constants.CHAR_FRONT1
    CHAR_FRONT_2 = constants.CHAR_FRONT2
    CHAR_BACK_1 = constants.CHAR_BACK1
    CHAR_BACK_2 = constants.CHAR_BACK2
    CHAR_LEFT_1 = constants.CHAR_LEFT1
    CHAR_LEFT_2 = constants.CHAR_LEFT2
    CHAR_RIGHT_1 = constants.CHAR_RIGHT1
    CHAR_RIGHT_2 = constants.CHAR_RIGHT2
    EXIT = constants.IMG_EXIT
    COLLECT = constants.IMG_COLLECT
    ENEMY_LEFT_1 = constants.ENEMY_LEFT[0]
    ENEMY_LEFT_2 = constants.ENEMY_LEFT[1]
    ENEMY_LEFT_3 = constants.ENEMY_LEFT[2]
    ENEMY_LEFT_4 = constants.ENEMY_LEFT[3]
    ENEMY_RIGHT_1 = constants.ENEMY_RIGHT[0]
    ENEMY_RIGHT_2 = constants.ENEMY_RIGHT[1]
    ENEMY_RIGHT_3 = constants.ENEMY_RIGHT[2]
    ENEMY_RIGHT_4 = constants.ENEMY_RIGHT[3]
    TORCH_TOP_1 = constants.TORCH_TOP[0]
    TORCH_TOP_2 = constants.TORCH_TOP[1]
    TORCH_TOP_3 = constants.TORCH_TOP[2]
    TORCH_BOT_1 = constants.TORCH_BOT[0]
    TORCH_BOT_2 = constants.TORCH_BOT[1]
    TORCH_BOT_3 = constants.TORCH_BOT[2]
    TORCH_LEFT_1 = constants.TORCH_LEFT[0]
    TORCH_LEFT_2 = constants.TORCH_LEFT[1]
    TORCH_LEFT_3 = constants.TORCH_LEFT[2]
    TORCH_RIGHT_1 = constants.TORCH_RIGHT[0]
    TORCH_RIGHT_2 = constants.TORCH_RIGHT[1]
    TORCH_RIGHT_3 = constants.TORCH_RIGHT[2]
    DOOR = constants.IMG_DOOR
    FLOOR = constants.IMG_FLOOR
    HOLE = constants.IMG_HOLE
    WALL_TOP = constants.WALL_TOP
    WALL_BOT = constants.WALL_BOT
    WALL_RIGHT = constants.WALL_RIGHT
    WALL_LEFT = constants.WALL_LEFT
    CORNER_1 = constants.WALL_C1
    CORNER_2 = constants.WALL_C2
    CORNER_3 = constants.WALL_C3
    CORNER_4 = constants.WALL_C4
    DEAD_1 = constants.MSG_DEAD[0]
    DEAD_2 = constants.MSG_DEAD[1]
    DEAD_3 = constants.MSG_DEAD[2]
    WIN_0 = constants.MSG_WIN[0]
    WIN_1 = constants.MSG_WIN[1]
    WIN_2 = constants.MSG_WIN[2]


_WALLS = {
    Tile.WALL_TOP: Sprite.WALL_TOP,
    Tile.WALL_BOTTOM: Sprite.WALL_BOT,
    Tile.WALL_LEFT: Sprite.WALL_LEFT,
    Tile.WALL_RIGHT: Sprite.WALL_RIGHT,
    Tile.CORNER_TOP_LEFT: Sprite.CORNER_1,
    Tile.CORNER_TOP_RIGHT: Sprite.CORNER_2,
    # The bottom corners use the images in the opposite order.
    Tile.CORNER_BOTTOM_LEFT: Sprite.CORNER_4,
    Tile.CORNER_BOTTOM_RIGHT: Sprite.CORNER_3,
    Tile.HOLE: Sprite.HOLE,
    Tile.DOOR: Sprite.DOOR,
}

_TORCHES = {
    Tile.WALL_TOP_TORCH: (Sprite.TORCH_TOP_1, Sprite.TORCH_TOP_2, Sprite.TORCH_TOP_3),
    Tile.WALL_BOTTOM_TORCH: (Sprite.TORCH_BOT_1, Sprite.TORCH_BOT_2, Sprite.TORCH_BOT_3),
    Tile.WALL_LEFT_TORCH: (Sprite.TORCH_LEFT_1, Sprite.TORCH_LEFT_2, Sprite.TORCH_LEFT_3),
    Tile.WALL_RIGHT_TORCH: (
        Sprite.TORCH_RIGHT_1,
        Sprite.TORCH_RIGHT_2,
        Sprite.TORCH_RIGHT_3,
    ),
}

_ITEMS = {Tile.EXIT: Sprite.EXIT, Tile.COLLECT: Sprite.COLLECT}

_FACING = {
    Key.W: Sprite.CHAR_BACK_1,
    Key.A: Sprite.CHAR_LEFT_1,
    Key.S: Sprite.CHAR_FRONT_1,
    Key.D: Sprite.CHAR_RIGHT_1,
}

_ENEMY_FRAMES = (
    Sprite.ENEMY_LEFT_1,
    Sprite.ENEMY_LEFT_2,
    Sprite.ENEMY_LEFT_3,
    Sprite.ENEMY_LEFT_4,
)

# Per map width: 3 columns, 4 columns, anything else.
_DEAD_MESSAGES = (Sprite.DEAD_1, Sprite.DEAD_3, Sprite.DEAD_2)
_WIN_MESSAGES = (Sprite.WIN_0, Sprite.WIN_1, Sprite.WIN_2)


def torch_frame(frames: int) -> int:
    """Return which of the three torch images to show at a frame count."""
    if 10 <= frames < 20 or 30 <= frames < 40:
        return 1
    if 20 <= frames < 30:
        return 2
    return 0


def enemy_frame(frame: int) -> int:
    """Return which of the four enemy images to show at an enemy frame count."""
    if 15 <= frame < 30 or 75 <= frame < 90:
        return 1
    if 30 <= frame < 45 or 60 <= frame < 75:
        return 2
    if 45 <= frame < 60:
        return 3
    return 0


def render_scene(game: Game) -> list[Draw]:
    """Return the sprites of the board as ``(sprite, x, y)`` in pixels, in draw order.

    Each enemy drawn advances the enemy animation, and the player position is
    refreshed from the cell it is drawn on.
    """
    draws: list[Draw] = []
    torch = torch_frame(game.frames)
    grid = game.board.grid
    for x in range(game.board.width):
        for y in range(game.board.height):
            cell = grid[y][x]
            px, py = x * IMG_W, y * IMG_H
            if cell in _WALLS:
                draws.append((_WALLS[cell], px, py))
            elif cell in _TORCHES:
                draws.append((_TORCHES[cell][torch], px, py))
            elif cell == Tile.FLOOR:
                draws.append((Sprite.FLOOR, px, py))
            elif cell in _ITEMS:
                draws.append((Sprite.FLOOR, px, py))
                draws.append((_ITEMS[cell], px, py))
            elif cell == Tile.PLAYER:
                draws.append((Sprite.FLOOR, px, py))
                facing = _FACING.get(game.side)
                if facing is not None:
                    draws.append((facing, px, py))
                game.player_x, game.player_y = x, y
            elif cell == Tile.ENEMY:
                draws.append((Sprite.FLOOR, px, py))
                frame = enemy_frame(game.advance_enemy_frame())
                draws.append((_ENEMY_FRAMES[frame], px, py))
    return draws


def _trunc_div(numerator: int, denominator: int) -> int:
    return int(numerator / denominator)


def message_overlay(game: Game) -> Draw | None:
    """Return the end-of-game banner to draw over the board, or None."""
    if game.message is Message.DEAD:
        choices = _DEAD_MESSAGES
    elif game.message is Message.EXIT:
        choices = _WIN_MESSAGES
    else:
        return None
    width, height = game.board.width, game.board.height
    if width == 3:
        sprite, x, rows = choices[0], 64, 5
    elif width == 4:
        sprite, x, rows = choices[1], 2, 2
    else:
        sprite, x, rows = choices[2], _trunc_div(width - 5, 2) * IMG_W, 1
    return sprite, x, _trunc_div(height - rows, 2) * IMG_H