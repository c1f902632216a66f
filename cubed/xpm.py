"""Reading XPM pixmaps into :class:`~cubed.image.Image` frame buffers."""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, Union

from cubed.colors import lookup_color
from cubed.image import BYTES_PER_PIXEL, Image
from cubed.textutil import atoi

TRANSPARENT = 0xFF000000
_NONE_COLOR = -1
_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data is malformed."""


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _blank_comments(text: str, opener: str, closer: str) -> str:
    """Replace comments that start outside double quotes with spaces.

    The closing marker is blanked too; an unterminated comment runs to the
    end of the text.
    """
    chars = list(text)
    size = len(chars)
    quoted = False
    index = 0
    while index <= size - len(opener):
        if chars[index] == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, index):
            end = text.find(closer, index + len(opener))
            stop = size if end < 0 else end + len(closer)
            chars[index:stop] = " " * (stop - index)
            index = stop
            continue
        index += 1
    return "".join(chars)


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments, keeping the text's length."""
    return _blank_comments(_blank_comments(text, "/*", "*/"), "//", "\n")


def extract_quoted_lines(text: str) -> list[str]:
    """Return the contents of every double-quoted string, in order."""
    lines = []
    position = 0
    while True:
        start = text.find('"', position)
        if start < 0:
            break
        end = text.find('"', start + 1)
        if end < 0:
            break
        lines.append(text[start + 1:end])
        position = end + 1
    return lines


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_palette(rows: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    # With one or two characters per pixel a later definition replaces an
    # earlier one; with longer keys the first definition is kept.
    first_wins = cpp > 2
    palette: dict[str, int] = {}
    for number in range(ncolors):
        line = _next_line(rows, f"color definition {number + 1}")
        if len(line) < cpp:
            raise XpmError(f"color definition too short: {line!r}")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no 'c' color in definition: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no value after 'c' in definition: {line!r}")
        suffix = words[index + 2] if index + 2 < len(words) else None
        color = lookup_color(words[index + 1], suffix)
        if first_wins:
            palette.setdefault(key, color)
        else:
            palette[key] = color
    return palette


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the quoted strings of an XPM document.

    The first string holds width, height, color count and characters per
    pixel; color definitions and then one string per pixel row follow.
    Pixels whose color is ``None`` get the transparent value 0xFF000000.
    """
    rows = iter(lines)
    words = split_words(_next_line(rows, "header"))
    if len(words) < 4:
        raise XpmError(f"header needs four values, got {len(words)}")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(
            f"invalid header values: {width} {height} {ncolors} {cpp}"
        )
    palette = _read_palette(rows, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        row = _next_line(rows, f"pixel row {y + 1}")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y + 1} is shorter than {width} pixels")
        base = y * image.line_length
        for x in range(width):
            color = palette.get(row[x * cpp:(x + 1) * cpp], 0)
            if color == _NONE_COLOR:
                color = TRANSPARENT
            offset = base + x * BYTES_PER_PIXEL
            image.data[offset:offset + BYTES_PER_PIXEL] = (
                color & 0xFFFFFFFF
            ).to_bytes(BYTES_PER_PIXEL, "little")
    return image


def load_xpm_file(path: Union[str, "os.PathLike[str]"]) -> Image:
    """Read an XPM file and return its image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(extract_quoted_lines(strip_comments(text)))