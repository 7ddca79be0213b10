import pytest

from solong.constants import Key, Message, Tile
from solong.game import Game, QuitGame
from solong.mapfile import organize_map

LEVEL = ["1111111", "1P0C0E1", "1000N01", "1111111"]


def new_game(lines=LEVEL):
    return Game(organize_map(lines))


def test_finds_player():
    game = new_game()
    assert (game.player_x, game.player_y) == (1, 1)
    assert game.message is Message.MAP


def test_step_right_prints_and_counts(capsys):
    game = new_game()
    game.handle_key(Key.D)
    assert (game.player_x, game.player_y) == (2, 1)
    assert game.moves == 1
    assert game.board.grid[1][1] == Tile.FLOOR
    assert game.board.grid[1][2] == Tile.PLAYER
    assert capsys.readouterr().out == "1\n"


def test_wall_blocks_move():
    game = new_game()
    game.handle_key(Key.W)
    game.handle_key(Key.A)
    assert (game.player_x, game.player_y) == (1, 1)
    assert game.moves == 0
    assert game.side is Key.A


def test_collecting_lowers_count():
    game = new_game()
    game.handle_key(Key.D)
    game.handle_key(Key.D)
    assert game.board.info.collectibles == 0
    assert game.board.grid[1][3] == Tile.PLAYER


def test_exit_needs_all_collectibles():
    game = new_game(["1111111", "1PE0C01", "1111111"])
    game.handle_key(Key.D)
    assert game.message is Message.MAP
    assert game.player_x == 1


def test_reaching_exit_wins():
    game = new_game()
    for _ in range(3):
        game.handle_key(Key.D)
    game.handle_key(Key.D)
    assert game.message is Message.EXIT
    assert game.player_x == 4


def test_enemy_kills():
    game = new_game()
    game.handle_key(Key.S)
    game.handle_key(Key.D)
    game.handle_key(Key.D)
    game.handle_key(Key.D)
    assert game.message is Message.DEAD
    assert game.board.grid[2][4] == Tile.ENEMY


def test_escape_quits():
    game = new_game()
    with pytest.raises(QuitGame):
        game.handle_key(Key.ESC)


def test_move_after_end_quits():
    game = new_game()
    game.message = Message.DEAD
    with pytest.raises(QuitGame):
        game.handle_key(Key.W)


def test_other_keys_ignored():
    game = new_game()
    game.handle_key(Key.Q)
    assert game.moves == 0
    assert game.message is Message.MAP


def test_move_limit_kills():
    game = new_game(["111111", "1P0001", "10C0E1", "111111"])
    for _ in range(50):
        game.handle_key(Key.D)
        game.handle_key(Key.A)
    assert game.moves == 100
    assert game.message is Message.DEAD


def test_torch_frame_cycle():
    game = new_game()
    assert game.advance_frame() == 0
    values = [game.advance_frame() for _ in range(40)]
    assert values[-1] == 0
    assert -1 in values
    assert max(values) < 40


def test_enemy_frame_cycle():
    game = new_game()
    values = [game.advance_enemy_frame() for _ in range(91)]
    assert values[0] == 0
    assert values[90] == -1
    assert max(values) < 90


def test_map_without_player_rejected():
    with pytest.raises(ValueError):
        new_game(["11111", "10CE1", "11111"])