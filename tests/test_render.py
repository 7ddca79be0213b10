from solong import constants
from solong.constants import IMG_H, IMG_W, Key, Message
from solong.game import Game
from solong.mapfile import organize_map
from solong.render import (
    Sprite,
    enemy_frame,
    message_overlay,
    render_scene,
    torch_frame,
)


def _game(lines):
    return Game(organize_map(lines))


def test_drawn_sprites_carry_asset_paths():
    game = _game(["111111", "1P0CE1", "111111"])
    drawn = {sprite for sprite, _, _ in render_scene(game)}
    assert Sprite.FLOOR in drawn
    floor = next(sprite for sprite in drawn if sprite is Sprite.FLOOR)
    assert floor.value == constants.IMG_FLOOR

    game.message = Message.DEAD
    narrow = _game(["111", "1P1", "1C1", "1E1", "111"])
    narrow.message = Message.DEAD
    sprite, _, _ = message_overlay(narrow)
    assert sprite.value == constants.MSG_DEAD[0]


def test_torch_frame_cycle():
    assert [torch_frame(f) for f in (-1, 0, 9)] == [0, 0, 0]
    assert torch_frame(10) == torch_frame(19) == torch_frame(30) == torch_frame(39)
    assert torch_frame(20) == torch_frame(29)
    assert len({torch_frame(f) for f in range(-1, 40)}) == 3


def test_enemy_frame_cycle():
    assert enemy_frame(-1) == enemy_frame(0) == enemy_frame(14) == 0
    assert enemy_frame(15) == enemy_frame(75) == enemy_frame(89)
    assert enemy_frame(30) == enemy_frame(60) == enemy_frame(74)
    assert len({enemy_frame(f) for f in range(-1, 90)}) == 4


def test_every_filled_cell_is_drawn_at_its_position():
    game = _game(["111111", "1P0CE1", "111111"])
    draws = render_scene(game)
    positions = {(x, y) for _, x, y in draws}
    for y, row in enumerate(game.board.grid):
        for x, cell in enumerate(row):
            if cell != -1:
                assert (x * IMG_W, y * IMG_H) in positions


def test_top_left_corner_and_player_over_floor():
    game = _game(["111111", "1P0CE1", "111111"])
    draws = render_scene(game)
    assert (Sprite.CORNER_1, 0, 0) in draws
    floor = draws.index((Sprite.FLOOR, IMG_W, IMG_H))
    player = draws.index((Sprite.CHAR_BACK_1, IMG_W, IMG_H))
    assert floor < player


def test_player_sprite_follows_side():
    game = _game(["111111", "1P0CE1", "111111"])
    game.side = Key.D
    sprites = [sprite for sprite, _, _ in render_scene(game)]
    assert Sprite.CHAR_RIGHT_1 in sprites
    assert Sprite.CHAR_BACK_1 not in sprites


def test_each_enemy_advances_enemy_frame():
    game = _game(["1111111", "1PNNCE1", "1111111"])
    start = game.enemy_frame
    render_scene(game)
    assert game.enemy_frame == start + 2


def test_no_overlay_while_playing():
    game = _game(["111111", "1P0CE1", "111111"])
    assert message_overlay(game) is None


def test_dead_overlay_on_narrow_map():
    game = _game(["111", "1P1", "1C1", "1E1", "111"])
    game.message = Message.DEAD
    assert message_overlay(game) == (Sprite.DEAD_1, 64, 0)


def test_win_overlay_on_four_wide_map():
    game = _game(["1111", "1PC1", "1E01", "1111"])
    game.message = Message.EXIT
    sprite, x, _ = message_overlay(game)
    assert (sprite, x) == (Sprite.WIN_1, 2)


def test_win_overlay_on_wide_map():
    game = _game(["11111", "1PCE1", "11111"])
    game.message = Message.EXIT
    sprite, x, y = message_overlay(game)
    assert sprite is Sprite.WIN_2
    assert x == 0
    assert y == IMG_H