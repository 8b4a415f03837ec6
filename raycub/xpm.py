"""Reader for XPM images, producing Image objects."""

from __future__ import annotations

import re
from collections.abc import Iterable
from os import PathLike

from .colornames import lookup_color
from .image import Image

_TRANSPARENT = 0xFF000000
_WORD_SPLIT = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def str_to_wordtab(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None) -> int:
    """Turn an XPM colour spec into 0xRRGGBB.

    "#RRGGBB" is read as hexadecimal. Otherwise the name, joined with the
    following word when there is one, is looked up in the colour table;
    an unknown name gives 0 and "none" gives -1.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end:
        name = f"{name} {end}"[:63]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _find_outside_quotes(text: str, token: str) -> int:
    inside = False
    for pos, char in enumerate(text):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    stop = min(start + length, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces, keeping the length."""
    while (begin := _find_outside_quotes(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        length = (end - begin - 2) + 4 if end != -1 else 3
        text = _blank(text, begin, length)
    while (begin := _find_outside_quotes(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        length = (end - begin - 2) + 3 if end != -1 else 2
        text = _blank(text, begin, length)
    return text


def extract_strings(text: str) -> list[str]:
    """Return the contents of every double-quoted string, in order."""
    return _QUOTED.findall(text)


def _next_line(lines, what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, then pixel rows."""
    source = iter(lines)
    header = str_to_wordtab(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError(f"invalid XPM header: {' '.join(header)}")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError(f"invalid XPM header: {' '.join(header)}")

    direct = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table")
        words = str_to_wordtab(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
        if at >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        rgb = text_to_rgb(words[at], words[at + 1] if at + 1 < len(words) else None)
        key = line[:cpp]
        if direct:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        row = _next_line(source, "pixel rows")
        for x in range(width):
            color = colors.get(row[cpp * x:cpp * x + cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.set_pixel(x, y, color)
    return image


def read_xpm(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(extract_strings(strip_comments(text)))