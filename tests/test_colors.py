import pytest

from solong.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("lightgreen", 0x90EE90),
        ("gray50", 0x7F7F7F),
        ("thistle4", 0x8B7B8B),
    ],
)
def test_known_colors(name, expected):
    assert lookup_color(name) == expected


def test_lookup_is_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("DarkRed") == 0x8B0000


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("None") == -1


def test_unknown_name_gives_none():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_duplicate_names_resolve_to_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_spaced_and_joined_names_agree():
    for spaced, joined in [
        ("ghost white", "ghostwhite"),
        ("light blue", "lightblue"),
        ("dark orange", "darkorange"),
        ("hot pink", "hotpink"),
    ]:
        assert lookup_color(spaced) == lookup_color(joined)


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_ramp_is_monotonic_and_neutral():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for value in values:
        r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert r == g == b


def test_whitespace_is_not_trimmed():
    assert lookup_color(" red") is None
    assert lookup_color("red ") is None