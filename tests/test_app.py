from pathlib import Path

import pytest

from solong.app import App, find_image, load_assets, main
from solong.game import Game
from solong.mapfile import validate_map

NAMES = [
    "player_right_1.xpm", "player_right_2.xpm", "player_left_1.xpm",
    "player_left_2.xpm", "wall.xpm", "cover.xpm", "coin-1.xpm", "coin-2.xpm",
    "coin-3.xpm", "coin-4.xpm", "portal.xpm", "portal_active.xpm",
    "enemy_right_1.xpm", "enemy_right_2.xpm",
]


def _make_images(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name in NAMES:
        (directory / name).write_text('"1 1 1 1",\n"a c #000000",\n"a"\n')


def test_find_image(tmp_path):
    image = tmp_path / "wall.xpm"
    image.write_text("x")
    assert find_image(image) == image
    with pytest.raises(FileNotFoundError, match="Image not found"):
        find_image(tmp_path / "missing.xpm")


def test_load_assets_and_image_for(tmp_path):
    _make_images(tmp_path)
    assets = load_assets(tmp_path)
    assert assets.image_for("1", False) == tmp_path / "wall.xpm"
    assert assets.image_for("E", False) == tmp_path / "portal.xpm"
    assert assets.image_for("E", True) == tmp_path / "portal_active.xpm"
    assert assets.image_for("C", False) == tmp_path / "coin-2.xpm"
    assert assets.image_for("N", False) == tmp_path / "player_left_2.xpm"
    assert assets.image_for("?", False) is None


def test_load_assets_missing(tmp_path):
    _make_images(tmp_path)
    (tmp_path / "wall.xpm").unlink()
    with pytest.raises(FileNotFoundError):
        load_assets(tmp_path)


def test_main_without_images(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["map.ber"]) == 1
    assert "Error: Image not found" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv,message",
    [
        (["map.txt"], "Wrong map extension"),
        ([], "Wrong numbers of arguments"),
        (["map"], "Wrong argument"),
        (["absent.ber"], "Can't open the map"),
    ],
)
def test_main_errors(tmp_path, monkeypatch, capsys, argv, message):
    _make_images(tmp_path / "assets" / "img")
    monkeypatch.chdir(tmp_path)
    assert main(argv) == 1
    assert message in capsys.readouterr().out


def test_main_invalid_map(tmp_path, monkeypatch, capsys):
    _make_images(tmp_path / "assets" / "img")
    (tmp_path / "bad.ber").write_text("111\n1P1\n111")
    monkeypatch.chdir(tmp_path)
    assert main(["bad.ber"]) == 1
    assert "Position or Collect or Exit" in capsys.readouterr().out


def test_draw_without_window(tmp_path):
    _make_images(tmp_path)
    game = Game(validate_map(["11111", "1PCE1", "11111"]))
    app = App(game, load_assets(tmp_path))
    with pytest.raises(RuntimeError):
        app.draw_tile("1", 0, 0)