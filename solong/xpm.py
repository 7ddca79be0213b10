"""Reader for XPM images as used by the game's sprites."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Iterator

from solong.colors import lookup_color

TRANSPARENT = 0xFF000000

_WORD_SPLIT = re.compile(r"[ \t]+")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_HEX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xAARRGGBB values, alpha meaning transparency."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _words(text: str) -> list[str]:
    return [word for word in _WORD_SPLIT.split(text) if word]


def _find_outside_quotes(text: str, needle: str) -> int:
    in_quote = False
    for pos, char in enumerate(text):
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments outside quoted strings, keeping the text length."""
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (begin := _find_outside_quotes(text, opener)) != -1:
            end = text.find(closer, begin + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Resolve an XPM colour value: ``#hex``, a colour name, or 0 if unknown.

    ``end`` is the following word, joined to ``name`` to form two-word names.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM given as its sequence of quoted strings."""
    source = iter(lines)
    header = _words(_next_line(source, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("header values must be non-zero")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError("header values must be positive")

    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    later_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour definition")
        if len(line) < cpp:
            raise XpmError("colour definition shorter than its key")
        words = _words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError("colour definition has no 'c' entry") from None
        if index >= len(words):
            raise XpmError("colour definition has no colour after 'c'")
        following = words[index + 1] if index + 1 < len(words) else None
        colour = text_to_rgb(words[index], following)
        key = line[:cpp]
        if later_wins:
            palette[key] = colour
        else:
            palette.setdefault(key, colour)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        row = []
        for x in range(width):
            colour = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            row.append(TRANSPARENT if colour == -1 else colour)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)