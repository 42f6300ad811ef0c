"""Loading XPM images into :class:`~cubecaster.image.Image` buffers."""

from __future__ import annotations

import re
from pathlib import Path

from .colornames import lookup_color
from .image import Image

_TRANSPARENT = 0xFF000000
_WORD_SEPARATOR = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATOR.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos in range(len(text) - len(token) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, end: int) -> str:
    end = min(end, len(text))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside string literals with spaces."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        end = len(text) if close == -1 else close + 2
        text = _blank(text, begin, end)
    while (begin := _find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        end = len(text) if newline == -1 else newline + 1
        text = _blank(text, begin, end)
    return text


def parse_color_spec(name: str, extra: str | None) -> int:
    """Resolve an XPM colour: ``#hex`` or a (possibly two-word) colour name.

    Unknown names give 0; ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if extra is not None:
        name = f"{name} {extra}"
    color = lookup_color(name)
    return 0 if color is None else color


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("incomplete XPM header")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError("invalid XPM header")
    return width, height, ncolors, cpp


def _read_colors(lines, ncolors: int, cpp: int) -> dict[str, int]:
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next(lines, None)
        if line is None:
            raise XpmError("missing XPM colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError("XPM colour definition has no 'c' key") from None
        if index >= len(words):
            raise XpmError("XPM colour definition has no value")
        extra = words[index + 1] if index + 1 < len(words) else None
        color = parse_color_spec(words[index], extra)
        key = line[:cpp]
        if cpp <= 2:
            colors[key] = color
        else:
            colors.setdefault(key, color)
    return colors


def parse_xpm_lines(lines) -> Image:
    """Build an image from the string values of an XPM array."""
    rows = iter(lines)
    header = next(rows, None)
    if header is None:
        raise XpmError("empty XPM data")
    width, height, ncolors, cpp = _read_header(header)
    colors = _read_colors(rows, ncolors, cpp)
    pixels: list[int] = []
    for _ in range(height):
        row = next(rows, None)
        if row is None:
            raise XpmError("missing XPM pixel row")
        if len(row) < width * cpp:
            raise XpmError("XPM pixel row is too short")
        for x in range(width):
            color = colors.get(row[x * cpp:(x + 1) * cpp], 0)
            pixels.append(_TRANSPARENT if color == -1 else color)
    return Image(width, height, pixels)


def parse_xpm_text(text: str) -> Image:
    """Build an image from the text of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | Path) -> Image:
    """Read an XPM file from disk."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm_text(text)