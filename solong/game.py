"""Game state and the rules applied on each key press."""

from __future__ import annotations

from dataclasses import dataclass, field

from solong.constants import Key, Message, Tile
from solong.mapfile import GameMap

MAX_MOVES = 100
TORCH_CYCLE = 40
ENEMY_CYCLE = 90

_STEPS = {
    Key.W: (0, -1),
    Key.S: (0, 1),
    Key.A: (-1, 0),
    Key.D: (1, 0),
}


class QuitGame(Exception):
    """Raised when the player leaves the game."""


@dataclass
class Game:
    """A running game on an organised map."""

    board: GameMap
    moves: int = 0
    frames: int = -1
    message: Message = Message.MAP
    side: Key = Key.W
    enemy_frame: int = -1
    player_x: int = field(init=False, default=0)
    player_y: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        for y, row in enumerate(self.board.grid):
            for x, cell in enumerate(row):
                if cell == Tile.PLAYER:
                    self.player_x, self.player_y = x, y
                    return
        raise ValueError("map has no player")

    def _neighbour(self, key: Key) -> int:
        dx, dy = _STEPS[key]
        return self.board.grid[self.player_y + dy][self.player_x + dx]

    def _try_step(self, key: Key) -> bool:
        if self._neighbour(key) >= Tile.HOLE:
            return False
        grid = self.board.grid
        dx, dy = _STEPS[key]
        grid[self.player_y][self.player_x] = Tile.FLOOR
        self.player_x += dx
        self.player_y += dy
        if grid[self.player_y][self.player_x] == Tile.COLLECT:
            self.board.info.collectibles -= 1
        grid[self.player_y][self.player_x] = Tile.PLAYER
        self.moves += 1
        print(self.moves, flush=True)
        return True

    def _check_exit(self, key: Key) -> None:
        if self._neighbour(key) == Tile.EXIT and self.board.info.collectibles == 0:
            self.message = Message.EXIT

    def _move(self, key: Key) -> None:
        if key in (Key.W, Key.S, Key.A):
            self._try_step(key)
        if not (key is Key.D and self._try_step(key)):
            self._check_exit(key)

    def handle_key(self, key: Key) -> None:
        """Apply a key press; raises QuitGame when the game should close."""
        if key is Key.ESC:
            raise QuitGame
        if key in _STEPS:
            if self.message is not Message.MAP:
                raise QuitGame
            self.side = key
            if self._neighbour(key) == Tile.ENEMY:
                self.message = Message.DEAD
            self._move(key)
            grid = self.board.grid
            if grid[self.player_y][self.player_x] == Tile.COLLECT:
                self.board.info.collectibles -= 1
                grid[self.player_y][self.player_x] = Tile.FLOOR
        if self.moves == MAX_MOVES:
            self.message = Message.DEAD

    def advance_frame(self) -> int:
        """Step the torch animation counter and return it."""
        self.frames += 1
        if self.frames == TORCH_CYCLE:
            self.frames = -1
        return self.frames

    def advance_enemy_frame(self) -> int:
        """Step the enemy animation counter and return it."""
        self.enemy_frame += 1
        if self.enemy_frame == ENEMY_CYCLE:
            self.enemy_frame = -1
        return self.enemy_frame