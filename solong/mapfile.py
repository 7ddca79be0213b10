"""Reading, validating and laying out ``.ber`` map files."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike

from solong.constants import Tile

MAP_EXTENSION = ".ber"
EMPTY = -1

_CELL_TILES = {
    "0": Tile.FLOOR,
    "1": Tile.HOLE,
    "P": Tile.PLAYER,
    "C": Tile.COLLECT,
    "E": Tile.EXIT,
    "N": Tile.ENEMY,
}


class MapError(ValueError):
    """Raised when a map file is missing or invalid."""


@dataclass
class MapInfo:
    """Counts of the notable elements found in a map."""

    collectibles: int = 0
    exit: bool = False
    players: int = 0
    enemies: bool = False


@dataclass(frozen=True)
class WallLayout:
    """Where the door and the torches go on the outer wall."""

    door: int
    inner_height: int
    inner_width: int
    torch_height: int
    torch_width: int = 1

    @classmethod
    def from_size(cls, height: int, width: int) -> WallLayout:
        """Compute the layout for a map of the given size."""
        door = width // 2 + 1
        inner_height = height - 2
        inner_width = width - 2
        if inner_width > 3:
            torch_height = door - 1
        elif inner_height == 1:
            torch_height = 0
        else:
            torch_height = 1
        return cls(door, inner_height, inner_width, torch_height)


@dataclass
class GameMap:
    """The organised grid of tile codes; ``grid[y][x]``, -1 for empty cells."""

    width: int
    height: int
    grid: list[list[int]]
    info: MapInfo = field(default_factory=MapInfo)


def read_map_lines(path: str | PathLike[str]) -> list[str]:
    """Return the lines of a map file; a final newline yields an empty last line."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("MAP NOT EXIST") from exc
    return text.split("\n")


def check_name(file_name: str) -> bool:
    """Tell whether a file name ends in the ``.ber`` extension."""
    name = str(file_name)
    length = len(name)
    i = 0
    while i < length:
        if name[i] == ".":
            j = 0
            while i < length and j < len(MAP_EXTENSION) and name[i] == MAP_EXTENSION[j]:
                i += 1
                j += 1
            if i == length and j == len(MAP_EXTENSION):
                return True
        i += 1
    return False


def _scan(lines: list[str]) -> MapInfo | None:
    info = MapInfo()
    for row in lines:
        for char in row:
            if char == "C":
                info.collectibles += 1
            elif char == "E":
                info.exit = True
            elif char == "P":
                info.players += 1
            elif char == "N":
                info.enemies = True
            elif char not in "01":
                return None
    return info


def _rows_match_width(lines: list[str]) -> bool:
    width = len(lines[0])
    return all(len(row) == width for row in lines[1:])


def _walls_closed(lines: list[str]) -> bool:
    if lines[0].strip("1") or lines[-1].strip("1"):
        return False
    return all(row[:1] == "1" and row[-1:] == "1" for row in lines)


def check_map(file_name: str, lines: list[str]) -> MapInfo:
    """Validate a map and its file name; return the element counts.

    Raises MapError with the reason when the map cannot be played.
    """
    if not check_name(file_name):
        raise MapError("MAP NAME ERROR")
    if not lines:
        raise MapError("MAP ERROR")
    info = _scan(lines) if _rows_match_width(lines) else None
    if info is None:
        raise MapError("MAP ERROR")
    if not _walls_closed(lines):
        raise MapError("WALL ERROR")
    if info.collectibles < 1 or info.players != 1 or not info.exit:
        raise MapError("NOT ALL ELEMENTS OF THE MAP CAN BE FOUND")
    return info


def _top_wall_tile(layout: WallLayout, column: int) -> Tile:
    if layout.door % 2 == 0:
        return Tile.WALL_TOP_TORCH if column % 2 == 0 else Tile.WALL_TOP
    return Tile.WALL_TOP if column % 2 == 0 else Tile.WALL_TOP_TORCH


def organize_map(lines: list[str]) -> GameMap:
    """Turn validated map lines into a grid of walls, torches and content."""
    height = len(lines)
    width = len(lines[0])
    grid: list[list[int]] = [[EMPTY] * width for _ in range(height)]
    layout = WallLayout.from_size(height, width)

    grid[0][0] = Tile.CORNER_TOP_LEFT
    grid[0][width - 1] = Tile.CORNER_TOP_RIGHT
    grid[height - 1][0] = Tile.CORNER_BOTTOM_LEFT
    grid[height - 1][width - 1] = Tile.CORNER_BOTTOM_RIGHT
    grid[0][layout.door - 1] = Tile.DOOR

    for column in range(1, layout.inner_width + 1):
        if grid[0][column] == EMPTY and layout.torch_height != 0:
            grid[0][column] = _top_wall_tile(layout, column)
        grid[height - 1][column] = (
            Tile.WALL_BOTTOM if column % 2 == 0 else Tile.WALL_BOTTOM_TORCH
        )

    for row in range(1, layout.inner_height + 1):
        if row % 2 == 0:
            grid[row][0], grid[row][width - 1] = Tile.WALL_LEFT, Tile.WALL_RIGHT
        else:
            grid[row][0], grid[row][width - 1] = (
                Tile.WALL_LEFT_TORCH,
                Tile.WALL_RIGHT_TORCH,
            )

    for row in range(1, layout.inner_height + 1):
        for column in range(1, layout.inner_width + 1):
            tile = _CELL_TILES.get(lines[row][column])
            if tile is not None:
                grid[row][column] = tile

    return GameMap(width, height, grid, _scan(lines) or MapInfo())


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read, validate and organise a map file."""
    lines = read_map_lines(path)
    check_map(str(path), lines)
    return organize_map(lines)