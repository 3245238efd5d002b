import pytest

from solong.colors import lookup_color
from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *tile[] = {
/* columns rows colors chars-per-pixel */
"2 1 2 1 ",
"x c white",
". c black",
// pixels
"x."
};
"""


def test_split_words_handles_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_empty_line():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_drops_comment_text():
    text = 'x /* gone */ "keep /* this */" // tail\n"next"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "gone" not in stripped
    assert "tail" not in stripped
    assert '"keep /* this */"' in stripped
    assert '"next"' in stripped


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_named_is_case_insensitive():
    assert text_to_rgb("White", None) == lookup_color("white")


def test_text_to_rgb_two_word_name():
    assert text_to_rgb("light", "grey") == lookup_color("light grey")


def test_text_to_rgb_unknown_name_is_zero():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_text_to_rgb_none_is_minus_one():
    assert text_to_rgb("None", None) == -1


def test_parse_xpm_basic_image():
    image = parse_xpm(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert image.width == 2
    assert image.height == 2
    assert image.pixels == ((0xFF0000, TRANSPARENT), (TRANSPARENT, 0xFF0000))
    assert image.pixel(1, 0) == TRANSPARENT


def test_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixel(0, 0) == 0x000002


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert image.pixel(0, 0) == 0x000001


def test_undefined_key_gives_zero():
    image = parse_xpm(["2 1 1 1", "a c #000003", "az"])
    assert image.pixels == ((0x000003, 0),)


def test_parse_xpm_text_with_comments():
    image = parse_xpm_text(SAMPLE)
    assert image.pixels == ((lookup_color("white"), lookup_color("black")),)


def test_load_xpm_matches_text_parse(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(SAMPLE)
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 1 1 1", "a c #000000", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_rgba_bytes_inverts_transparency():
    image = XpmImage(2, 1, ((0x102030, TRANSPARENT),))
    data = image.rgba_bytes()
    assert len(data) == 8
    assert data[:4] == bytes((0x10, 0x20, 0x30, 255))
    assert data[7] == 0