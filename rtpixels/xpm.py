"""Reading XPM pixmaps into :class:`~rtpixels.image.Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from os import PathLike

from .colornames import lookup_color
from .image import Image
from .wordtab import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour ``None``."""

_NAME_BUFFER = 63
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_DECIMAL = re.compile(r"\s*([+-]?\d+)")
_QUOTED = re.compile(r'"([^"]*)"')
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text: str) -> int:
    match = _DECIMAL.match(text)
    return int(match.group(1)) if match else 0


def _parse_hex(text: str) -> int:
    match = _HEX_NUMBER.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    if match.group(1) == "-":
        value = -value
    return min(max(value, _LONG_MIN), _LONG_MAX)


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + length)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    Block comments are blanked first, then line comments together with the
    newline that ends them. The length of the text is kept.
    """
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        rest = len(text) - begin - 2
        end = find(text[begin + 2:], "*/", rest)
        text = _blank(text, begin, len(text) if end == -1 else end + 4)
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        rest = len(text) - begin - 2
        end = find(text[begin + 2:], "\n", rest)
        text = _blank(text, begin, len(text) if end == -1 else end + 3)
    return text


def color_key(chars: str) -> int:
    """Return the numeric key of a pixel's colour characters."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def text_to_rgb(name: str, suffix: str | None = None) -> int:
    """Return the 0xRRGGBB value of an XPM colour specification.

    ``#`` introduces a hexadecimal value. Otherwise ``name`` (joined with
    ``suffix`` by a space when given) is looked up among the colour names;
    ``None`` gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        return _to_int32(_parse_hex(name[1:]))
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {line!r}")
    return width, height, ncolors, cpp


def _parse_color_line(line: str, cpp: int) -> tuple[int, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line shorter than {cpp} characters: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour after 'c': {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return color_key(line[:cpp]), text_to_rgb(words[index], suffix)


def _parse(lines: Iterable[str], bits_per_pixel: int, byte_order: int) -> Image:
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    palette: dict[int, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color_line(_next_line(source, "colour table"), cpp)
        # Short keys let later entries override; long keys keep the first.
        if cpp <= 2 or key not in palette:
            palette[key] = rgb

    image = Image.create(width, height, bits_per_pixel, byte_order)
    for y in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width * cpp} characters")
        for x in range(width):
            color = palette.get(color_key(line[x * cpp:(x + 1) * cpp]), 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def xpm_to_image(
    xpm_data: Sequence[str], bits_per_pixel: int = 32, byte_order: int = 0
) -> Image:
    """Build an image from XPM data given as its sequence of strings."""
    return _parse(xpm_data, bits_per_pixel, byte_order)


def xpm_text_to_image(text: str, bits_per_pixel: int = 32, byte_order: int = 0) -> Image:
    """Build an image from the text of an XPM file."""
    text = strip_comments(text).split("\0", 1)[0]
    lines = (match.group(1) for match in _QUOTED.finditer(text))
    return _parse(lines, bits_per_pixel, byte_order)


def xpm_file_to_image(
    path: str | PathLike[str], bits_per_pixel: int = 32, byte_order: int = 0
) -> Image:
    """Read an XPM file and build an image from it."""
    with open(path, "rb") as stream:
        text = stream.read().decode("latin-1")
    return xpm_text_to_image(text, bits_per_pixel, byte_order)