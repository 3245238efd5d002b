"""Reading images in the XPM format into grids of 32-bit pixels."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value given to the colour ``None``; the top byte marks transparency."""

_NAME_LIMIT = 63
_WORD_SPLIT = re.compile(r"[ \t]+")
_STRING_OR_COMMENT = re.compile(
    r'(?P<string>"[^"]*(?:"|\Z))|(?P<comment>/\*.*?(?:\*/|\Z)|//[^\n]*\n?)',
    re.DOTALL,
)
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?[0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image; each pixel is 0xAARRGGBB where AA is transparency."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` of row ``y``."""
        return self.pixels[y][x]

    def rgba_bytes(self) -> bytes:
        """Return the pixels row by row as RGBA bytes with ordinary opacity."""
        out = bytearray()
        for row in self.pixels:
            for value in row:
                alpha = 255 - ((value >> 24) & 0xFF)
                out += bytes(
                    ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, alpha)
                )
        return bytes(out)


def split_words(line: str) -> list[str]:
    """Split a line into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(line) if word]


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the text's length."""

    def blank(match: re.Match[str]) -> str:
        if match.group("comment") is not None:
            return " " * len(match.group(0))
        return match.group(0)

    return _STRING_OR_COMMENT.sub(blank, text)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn a colour spec into 0xRRGGBB: ``#hex`` or a (possibly two-word) name.

    Unknown names give 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name, 1)
        return _to_int32(int(match.group(1), 16)) if match else 0
    if end:
        name = f"{name} {end}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Build an image from the strings of an XPM: header, colours, pixel rows."""
    rows = iter(lines)
    fields = split_words(_next_line(rows, "header"))
    if len(fields) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (_atoi(field) for field in fields[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header")

    # Short keys are stored by direct index, so a later definition replaces an
    # earlier one; longer keys are searched and the first definition wins.
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour in definition: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour in definition: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], end)
        if direct:
            palette[line[:cpp]] = rgb
        else:
            palette.setdefault(line[:cpp], rgb)

    pixel_rows = []
    span = width * cpp
    for _ in range(height):
        line = _next_line(rows, "pixel row")
        if len(line) < span:
            raise XpmError(f"pixel row too short: {line!r}")
        pixel_rows.append(
            tuple(
                _pixel_value(palette.get(line[start:start + cpp], 0))
                for start in range(0, span, cpp)
            )
        )
    return XpmImage(width, height, tuple(pixel_rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Parse the text of an XPM file, comments and all."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and parse an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)