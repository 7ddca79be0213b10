"""Tile codes, key codes, message states and asset paths used by the game."""

from __future__ import annotations

import sys
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping

IMG_W = 64
IMG_H = 64


class Tile(IntEnum):
    """Cell values stored in the organised map grid."""

    FLOOR = 0
    COLLECT = 1
    PLAYER = 2
    HOLE = 3
    EXIT = 4
    ENEMY = 5
    CORNER_TOP_LEFT = 6
    CORNER_TOP_RIGHT = 7
    CORNER_BOTTOM_LEFT = 8
    CORNER_BOTTOM_RIGHT = 9
    WALL_TOP = 10
    WALL_TOP_TORCH = 11
    WALL_LEFT = 12
    WALL_LEFT_TORCH = 13
    WALL_BOTTOM = 14
    WALL_BOTTOM_TORCH = 15
    WALL_RIGHT = 16
    WALL_RIGHT_TORCH = 17
    DOOR = 18


class Message(IntEnum):
    """Which screen the game is showing."""

    MAP = 0
    DEAD = 1
    EXIT = 2


class Key(Enum):
    """Platform-independent keyboard keys."""

    ESC = "esc"
    TAB = "tab"
    SPACE = "space"
    ENTER = "enter"
    BACKSPACE = "backspace"
    LSHIFT = "lshift"
    LCTRL = "lctrl"
    LALT = "lalt"
    RSHIFT = "rshift"
    RCTRL = "rctrl"
    RALT = "ralt"
    NUM_0 = "0"
    NUM_1 = "1"
    NUM_2 = "2"
    NUM_3 = "3"
    NUM_4 = "4"
    NUM_5 = "5"
    NUM_6 = "6"
    NUM_7 = "7"
    NUM_8 = "8"
    NUM_9 = "9"
    MINUS = "minus"
    EQUAL = "equal"
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"


def _linux_codes() -> dict[Key, int]:
    codes = {
        Key.ESC: 65307,
        Key.TAB: 64289,
        Key.SPACE: 32,
        Key.ENTER: 65293,
        Key.BACKSPACE: 65288,
        Key.LSHIFT: 65505,
        Key.LCTRL: 65507,
        Key.LALT: 65513,
        Key.RSHIFT: 65506,
        Key.RCTRL: 65508,
        Key.RALT: 65514,
        Key.MINUS: 45,
        Key.EQUAL: 61,
    }
    for digit in "0123456789":
        codes[Key(digit)] = ord(digit)
    for letter in "abcdefghijklmnopqrstuvwxyz":
        codes[Key(letter)] = ord(letter)
    return codes


_APPLE_CODES: dict[Key, int] = {
    Key.ESC: 53,
    Key.TAB: 48,
    Key.SPACE: 49,
    Key.ENTER: 36,
    Key.BACKSPACE: 51,
    Key.LSHIFT: 257,
    Key.LCTRL: 256,
    Key.LALT: 261,
    Key.RSHIFT: 258,
    Key.RCTRL: 269,
    Key.RALT: 262,
    Key.NUM_1: 18,
    Key.NUM_2: 19,
    Key.NUM_3: 20,
    Key.NUM_4: 21,
    Key.NUM_5: 23,
    Key.NUM_6: 22,
    Key.NUM_7: 26,
    Key.NUM_8: 28,
    Key.NUM_9: 25,
    Key.NUM_0: 29,
    Key.MINUS: 27,
    Key.EQUAL: 24,
    Key.A: 0,
    Key.B: 11,
    Key.C: 8,
    Key.D: 2,
    Key.E: 14,
    Key.F: 3,
    Key.G: 5,
    Key.H: 4,
    Key.I: 34,
    Key.J: 38,
    Key.K: 40,
    Key.L: 37,
    Key.M: 46,
    Key.N: 45,
    Key.O: 31,
    Key.P: 35,
    Key.Q: 12,
    Key.R: 15,
    Key.S: 1,
    Key.T: 17,
    Key.U: 32,
    Key.V: 9,
    Key.W: 13,
    Key.X: 7,
    Key.Y: 16,
    Key.Z: 6,
}


def _invert(codes: dict[Key, int]) -> Mapping[int, Key]:
    return MappingProxyType({code: key for key, code in codes.items()})


_BY_CODE_LINUX = _invert(_linux_codes())
_BY_CODE_APPLE = _invert(_APPLE_CODES)


def _table_for(platform: str | None) -> Mapping[int, Key]:
    name = (platform if platform is not None else sys.platform).lower()
    if name.startswith("linux"):
        return _BY_CODE_LINUX
    if name in ("darwin", "macos", "apple"):
        return _BY_CODE_APPLE
    raise ValueError(f"no key table for platform {name!r}")


def key_from_code(code: int, platform: str | None = None) -> Key | None:
    """Return the key a raw keycode stands for on a platform, or None.

    ``platform`` follows ``sys.platform`` naming ("linux", "darwin") and
    defaults to the running platform. Raises ValueError for other platforms.
    """
    return _table_for(platform).get(code)


CHAR_FRONT1 = "image/character/char_front_1.xpm"
CHAR_FRONT2 = "image/character/char_front_2.xpm"
CHAR_BACK1 = "image/character/char_back_1.xpm"
CHAR_BACK2 = "image/character/char_back_2.xpm"
CHAR_LEFT1 = "image/character/char_left_1.xpm"
CHAR_LEFT2 = "image/character/char_left_2.xpm"
CHAR_RIGHT1 = "image/character/char_right_1.xpm"
CHAR_RIGHT2 = "image/character/char_right_2.xpm"
IMG_EXIT = "image/collect/exit.xpm"
IMG_COLLECT = "image/collect/collect.xpm"
ENEMY_LEFT = (
    "image/enemy/enemy_left_1.xpm",
    "image/enemy/enemy_left_2.xpm",
    "image/enemy/enemy_left_3.xpm",
    "image/enemy/enemy_left_4.xpm",
)
ENEMY_RIGHT = (
    "image/enemy/enemy_right_1.xpm",
    "image/enemy/enemy_right_2.xpm",
    "image/enemy/enemy_right_3.xpm",
    "image/enemy/enemy_right_4.xpm",
)
TORCH_TOP = (
    "image/tocha/wall_tocha_top_1.xpm",
    "image/tocha/wall_tocha_top_2.xpm",
    "image/tocha/wall_tocha_top_3.xpm",
)
TORCH_BOT = (
    "image/tocha/wall_tocha_bot_1.xpm",
    "image/tocha/wall_tocha_bot_2.xpm",
    "image/tocha/wall_tocha_bot_3.xpm",
)
TORCH_LEFT = (
    "image/tocha/wall_tocha_left_1.xpm",
    "image/tocha/wall_tocha_left_2.xpm",
    "image/tocha/wall_tocha_left_3.xpm",
)
TORCH_RIGHT = (
    "image/tocha/wall_tocha_right_1.xpm",
    "image/tocha/wall_tocha_right_2.xpm",
    "image/tocha/wall_tocha_right_3.xpm",
)
IMG_DOOR = "image/wall/door.xpm"
IMG_FLOOR = "image/wall/floor.xpm"
IMG_HOLE = "image/wall/hole.xpm"
WALL_TOP = "image/wall/wall_top.xpm"
WALL_BOT = "image/wall/wall_bot.xpm"
WALL_RIGHT = "image/wall/wall_right.xpm"
WALL_LEFT = "image/wall/wall_left.xpm"
WALL_C1 = "image/wall/wall_c_1.xpm"
WALL_C2 = "image/wall/wall_c_2.xpm"
WALL_C3 = "image/wall/wall_c_3.xpm"
WALL_C4 = "image/wall/wall_c_4.xpm"
MSG_DEAD = (
    "image/msg/you_dead.xpm",
    "image/msg/you_dead_2.xpm",
    "image/msg/you_dead_3.xpm",
)
MSG_WIN = (
    "image/msg/you_win_0.xpm",
    "image/msg/you_win_1.xpm",
    "image/msg/you_win_2.xpm",
)