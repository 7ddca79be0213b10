import pytest

from solong.constants import Tile
from solong.mapfile import (
    GameMap,
    MapError,
    MapInfo,
    WallLayout,
    check_map,
    check_name,
    load_map,
    organize_map,
    read_map_lines,
)

GOOD = ["1111111", "1P0C0E1", "1000N01", "1111111"]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("maps/level.ber", True),
        ("level.ber", True),
        (".ber", True),
        ("level.txt", False),
        ("level.ber.txt", False),
        ("level.berx", False),
        ("level", False),
        ("a..ber", False),
    ],
)
def test_check_name(name, expected):
    assert check_name(name) is expected


def test_check_map_counts_elements():
    info = check_map("x.ber", GOOD)
    assert info == MapInfo(collectibles=1, exit=True, players=1, enemies=True)


def test_check_map_bad_name():
    with pytest.raises(MapError, match="MAP NAME ERROR"):
        check_map("x.txt", GOOD)


def test_check_map_ragged_rows():
    with pytest.raises(MapError, match="MAP ERROR"):
        check_map("x.ber", ["11111", "1PCE1", "1111"])


def test_check_map_unknown_char():
    with pytest.raises(MapError, match="MAP ERROR"):
        check_map("x.ber", ["11111", "1PCX1", "1E001", "11111"])


def test_check_map_open_wall():
    with pytest.raises(MapError, match="WALL ERROR"):
        check_map("x.ber", ["11111", "0PCE1", "11111"])


def test_check_map_missing_elements():
    with pytest.raises(MapError, match="NOT ALL ELEMENTS"):
        check_map("x.ber", ["11111", "1P0E1", "11111"])


def test_check_map_two_players():
    with pytest.raises(MapError, match="NOT ALL ELEMENTS"):
        check_map("x.ber", ["111111", "1PPCE1", "111111"])


def test_wall_layout_small():
    layout = WallLayout.from_size(3, 5)
    assert layout == WallLayout(door=3, inner_height=1, inner_width=3, torch_height=0)


def test_wall_layout_wide():
    layout = WallLayout.from_size(5, 8)
    assert layout.door == 5
    assert layout.inner_width == 6
    assert layout.torch_height == layout.door - 1


def test_organize_small_map():
    game_map = organize_map(["11111", "1PCE1", "11111"])
    assert game_map.grid == [
        [Tile.CORNER_TOP_LEFT, -1, Tile.DOOR, -1, Tile.CORNER_TOP_RIGHT],
        [Tile.WALL_LEFT_TORCH, Tile.PLAYER, Tile.COLLECT, Tile.EXIT, Tile.WALL_RIGHT_TORCH],
        [
            Tile.CORNER_BOTTOM_LEFT,
            Tile.WALL_BOTTOM_TORCH,
            Tile.WALL_BOTTOM,
            Tile.WALL_BOTTOM_TORCH,
            Tile.CORNER_BOTTOM_RIGHT,
        ],
    ]


def test_organize_keeps_size_and_corners():
    game_map = organize_map(GOOD)
    assert (game_map.width, game_map.height) == (len(GOOD[0]), len(GOOD))
    assert game_map.grid[0][0] == Tile.CORNER_TOP_LEFT
    assert game_map.grid[-1][-1] == Tile.CORNER_BOTTOM_RIGHT
    assert game_map.grid[0][game_map.width // 2] == Tile.DOOR
    assert game_map.grid[2][4] == Tile.ENEMY
    assert game_map.grid[2][2] == Tile.FLOOR
    assert game_map.info.collectibles == 1


def test_top_wall_filled_when_torches():
    game_map = organize_map(GOOD)
    wall_top = Tile(10)
    wall_top_torch = Tile(11)
    assert game_map.grid[0] == [
        Tile.CORNER_TOP_LEFT,
        wall_top,
        wall_top_torch,
        Tile.DOOR,
        wall_top_torch,
        wall_top,
        Tile.CORNER_TOP_RIGHT,
    ]


def test_read_map_lines_trailing_newline(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("\n".join(GOOD) + "\n")
    lines = read_map_lines(path)
    assert lines == GOOD + [""]
    with pytest.raises(MapError, match="MAP ERROR"):
        check_map(str(path), lines)


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("\n".join(GOOD))
    game_map = load_map(path)
    assert isinstance(game_map, GameMap)
    assert game_map.grid == organize_map(GOOD).grid


def test_load_map_missing(tmp_path):
    with pytest.raises(MapError, match="MAP NOT EXIST"):
        load_map(tmp_path / "none.ber")