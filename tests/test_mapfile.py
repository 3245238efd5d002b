import re

import pytest

from solong.mapfile import (
    GameMap,
    MapError,
    check_args,
    load_map,
    read_map_lines,
    validate_map,
)

VALID = ["1111111", "1P0C0E1", "1111111"]


def test_check_args_returns_path():
    assert check_args(["maps/level.ber"]) == "maps/level.ber"


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_check_args_wrong_count(argv):
    with pytest.raises(MapError, match="Wrong numbers of arguments"):
        check_args(argv)


def test_check_args_without_dot():
    with pytest.raises(MapError, match="Wrong argument"):
        check_args(["level"])


@pytest.mark.parametrize("path", ["level.txt", "./maps/level", "level.ber.bak"])
def test_check_args_wrong_extension(path):
    with pytest.raises(MapError, match="Wrong map extension"):
        check_args([path])


def test_read_map_lines_without_trailing_newline(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("\n".join(VALID))
    assert read_map_lines(path) == VALID


def test_read_map_lines_trailing_newline_gives_empty_line(tmp_path):
    path = tmp_path / "m.ber"
    path.write_text("\n".join(VALID) + "\n")
    assert read_map_lines(path) == VALID + [""]


def test_read_map_lines_missing_file(tmp_path):
    with pytest.raises(MapError, match="Can't open the map"):
        read_map_lines(tmp_path / "absent.ber")


def test_validate_valid_map():
    game_map = validate_map(VALID)
    assert isinstance(game_map, GameMap)
    assert game_map.player == (1, 1)
    assert game_map.collectibles == 1
    assert game_map.exits == 1
    assert game_map.height == len(VALID)
    assert game_map.width == len(VALID[0])
    assert str(game_map) == "\n".join(VALID)


def test_validate_allows_enemies_and_counts_several_items():
    game_map = validate_map(["111111", "1PCCD1", "1E0E01", "111111"])
    assert game_map.collectibles == 2
    assert game_map.exits == 2
    assert list(game_map.positions("C")) == [(2, 1), (3, 1)]


def test_trailing_newline_map_has_wrong_shape():
    with pytest.raises(MapError, match=re.escape("Error: shape of the map")):
        validate_map(VALID + [""])


@pytest.mark.parametrize(
    "rows, message",
    [
        (["1101111", "1P0C0E1", "1111111"], "Error: Map isn't closed"),
        (["1111111", "1P0C0E1", "1111011"], "Error: Map isn't closed"),
        (["1111111", "0P0C0E1", "1111111"], "Error: Map isn't closed"),
        (["1111111", "1P0C0E0", "1111111"], "Error: Map isn't closed"),
        (["1111111", "1P0X0E1", "1111111"], "Error: Incorrect symbols of the map"),
        (["1111111", "1P0C0E01", "1111111"], "Error shape of the map"),
        (["1111111", "1P0C0E1", "111111"], "Error: shape of the map"),
        (["1111111", "1PPC0E1", "1111111"], "Error: Position or Collect or Exit"),
        (["1111111", "10000E1", "1111111"], "Error: Position or Collect or Exit"),
        (["1111111", "1P0C001", "1111111"], "Error: Position or Collect or Exit"),
    ],
)
def test_validate_errors(rows, message):
    with pytest.raises(MapError, match=re.escape(message)):
        validate_map(rows)


def test_validate_too_many_rows():
    rows = ["11111"] + ["10001"] * 15 + ["1PCE1", "11111"]
    with pytest.raises(MapError, match="map is too big"):
        validate_map(rows)


def test_validate_too_many_columns():
    rows = ["1" * 40, "1PCE" + "0" * 35 + "1", "1" * 40]
    with pytest.raises(MapError, match="map is too big"):
        validate_map(rows)


def test_validate_empty_rows():
    with pytest.raises(MapError):
        validate_map([])


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(VALID))
    assert str(load_map(path)) == "\n".join(VALID)


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError, match="Position or Collect or Exit"):
        load_map(path)