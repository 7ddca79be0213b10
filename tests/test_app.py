from unittest import mock

import pygame
import pytest

from solong.app import App, load_images, main
from solong.game import Game
from solong.mapfile import organize_map
from solong.render import Sprite
from solong.xpm import XpmError

XPM = """/* XPM */
static char *img[] = {
"2 1 2 1",
"a c #FF0000",
"b c None",
"ab"
};
"""


def _write_assets(root):
    for sprite in Sprite:
        path = root / sprite.value
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(XPM)


def test_load_images_decodes_every_sprite(tmp_path):
    _write_assets(tmp_path)
    images = load_images(tmp_path)
    assert set(images) == set(Sprite)
    floor = images[Sprite.FLOOR]
    assert floor.get_size() == (2, 1)
    assert tuple(floor.get_at((0, 0))) == (255, 0, 0, 255)
    assert floor.get_at((1, 0)).a == 0


def test_load_images_missing_asset_raises(tmp_path):
    with pytest.raises(XpmError):
        load_images(tmp_path)


def test_main_wrong_argument_count(capsys):
    assert main([]) == -1
    assert "ARGUMENTS ERROR" in capsys.readouterr().out


def test_main_missing_map(tmp_path, capsys):
    assert main([str(tmp_path / "nothing.ber")]) == 0
    assert capsys.readouterr().out == "MAP NOT EXIST"


def test_main_bad_name(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text("11111\n1PCE1\n11111")
    assert main([str(path)]) == 1
    assert "MAP NAME ERROR" in capsys.readouterr().out


def test_main_wall_error(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("11111\n1PCE1\n11101")
    assert main([str(path)]) == 1
    assert "WALL ERROR" in capsys.readouterr().out


def test_main_missing_images(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ok.ber").write_text("11111\n1PCE1\n11111")
    assert main(["ok.ber"]) == 1
    assert "UNEXPECTED ERROR" in capsys.readouterr().out


def test_run_moves_player_then_quits(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    _write_assets(tmp_path)
    game = Game(organize_map(["111111", "1P0CE1", "111111"]))
    batches = [
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d)],
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)],
    ]
    with mock.patch("pygame.event.get", side_effect=batches):
        status = App(game, tmp_path).run()
    assert status == 0
    assert game.moves == 1
    assert (game.player_x, game.player_y) == (2, 1)


def test_run_stops_on_window_close(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    _write_assets(tmp_path)
    game = Game(organize_map(["111111", "1P0CE1", "111111"]))
    with mock.patch("pygame.event.get", side_effect=[[pygame.event.Event(pygame.QUIT)]]):
        assert App(game, tmp_path).run() == 0
    assert game.moves == 0