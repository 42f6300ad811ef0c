"""Reading and validating ``.cub`` scene descriptions."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from pathlib import Path

from .config import DOOR, FLOOR, WALL

_IDENTIFIERS = ("D", "NO", "SO", "WE", "EA", "F", "C")
_ID_PREFIXES = tuple(key + " " for key in _IDENTIFIERS)
_SPAWNS = frozenset("NSEW")
_MAP_LINE_CHARS = frozenset("1 \n0DNSWE")
_MAP_START_CHARS = frozenset("1D0NSEW ")
_COLOR_PART = re.compile(r"[0-9 ]*")
_LEADING_INT = re.compile(r" *(\d*)")


class SceneError(ValueError):
    """Raised when a scene file is malformed."""


@dataclass
class Scene:
    """A parsed scene: textures, colours, the map grid and the spawn point."""

    grid: list[str]
    spawn_x: int
    spawn_y: int
    orientation: str
    floor: int = 0
    ceiling: int = 0
    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    door: str | None = None

    @property
    def width(self) -> int:
        return max((len(row) for row in self.grid), default=0)

    @property
    def height(self) -> int:
        return len(self.grid)

    def cell(self, x: int, y: int) -> str:
        """Return the map symbol at (x, y); outside the grid is empty space."""
        if 0 <= y < len(self.grid):
            row = self.grid[y]
            if 0 <= x < len(row):
                return row[x]
        return " "

    def set_cell(self, x: int, y: int, value: str) -> None:
        """Replace the map symbol at (x, y)."""
        if len(value) != 1:
            raise ValueError("a map cell holds exactly one character")
        if not (0 <= y < len(self.grid) and 0 <= x < len(self.grid[y])):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        row = self.grid[y]
        self.grid[y] = row[:x] + value + row[x + 1:]


class _Status(enum.Enum):
    NONE = 0
    FOUND = 1
    MULTIPLE = 2
    OPEN = 3


class _Section(enum.Enum):
    HEADER = 0
    MAP = 1
    AFTER = 2


def check_extension(path: str | Path) -> None:
    """Raise unless the file name ends in ``.cub``."""
    if not str(path).endswith(".cub"):
        raise SceneError("Invalid file extension")


def parse_color(text: str | None) -> int:
    """Turn ``"R,G,B"`` into a 0xRRGGBB integer."""
    if text is None:
        raise SceneError("Need color parameters")
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3 or not all(_COLOR_PART.fullmatch(part) for part in parts):
        raise SceneError("Invalid colors")
    red, green, blue = (_leading_int(part) for part in parts)
    if any(channel > 255 for channel in (red, green, blue)):
        raise SceneError("Invalid colors")
    return (red << 16) | (green << 8) | blue


def _leading_int(part: str) -> int:
    digits = _LEADING_INT.match(part).group(1)
    return int(digits) if digits else 0


def read_identifier(line: str) -> tuple[str, str] | None:
    """Return ``(identifier, value)`` for a header line, or None."""
    body = line.lstrip(" ")
    for key, prefix in zip(_IDENTIFIERS, _ID_PREFIXES):
        if body.startswith(prefix):
            value = body[len(prefix):].removesuffix("\n")
            return key, value.strip(" ")
    return None


def is_map_line(line: str) -> bool:
    """Tell whether a line consists only of map symbols."""
    if line.startswith("\n"):
        return False
    return all(ch in _MAP_LINE_CHARS for ch in line)


def _char_at(row: str, index: int) -> str:
    return row[index] if 0 <= index < len(row) else ""


def _has_open_walls(rows: list[str]) -> bool:
    for y in range(1, len(rows)):
        row = rows[y]
        above = rows[y - 1]
        below = rows[y + 1] if y + 1 < len(rows) else ""
        for x, ch in enumerate(row):
            if ch in (" ", WALL):
                continue
            if (
                _char_at(above, x) == " "
                or _char_at(row, x + 1) in (" ", "")
                or _char_at(row, x - 1) in (" ", "")
                or len(below) < x + 1
                or below[x] == " "
                or row[0] not in (WALL, " ")
            ):
                return True
    return False


def check_map(grid: list[str]) -> tuple[int, int, str]:
    """Validate a map grid and return the spawn as ``(x, y, orientation)``."""
    rows = list(grid)
    height = len(rows)
    status = _Status.NONE
    spawn: tuple[int, int, str] | None = None
    for y, row in enumerate(rows):
        if not row.strip(" "):
            raise SceneError("Invalid map")
        if status is _Status.OPEN:
            continue
        for x, ch in enumerate(row):
            if ch in _SPAWNS:
                if status is _Status.NONE:
                    spawn = (x, y, ch)
                    status = _Status.FOUND
                elif y == 0:
                    status = _Status.OPEN
                else:
                    status = _Status.MULTIPLE
            elif ch in (FLOOR, DOOR):
                if y == 0 or y == height - 1:
                    status = _Status.OPEN
            elif ch not in (WALL, " "):
                raise SceneError("Invalid character in map")
            if status is _Status.OPEN:
                break
    if status is _Status.NONE:
        raise SceneError("Invalid characters in map")
    if status is _Status.MULTIPLE:
        raise SceneError("Multiple players in map")
    if status is _Status.OPEN or _has_open_walls(rows):
        raise SceneError("Map must have walls all around")
    return spawn


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _prescan(lines: list[str]) -> None:
    """Reject stray characters before the map and an unclosed first map row."""
    for line in lines:
        body = line.lstrip(" ")
        if body.startswith(_ID_PREFIXES) or body.startswith("\n"):
            continue
        if not body or body[0] not in _MAP_START_CHARS:
            raise SceneError("Invalid character in file")
        for ch in body[1:]:
            if ch == "\n":
                break
            if ch in "D0NSEW":
                raise SceneError("Map must have walls all around")
            if ch not in (WALL, " "):
                raise SceneError("Invalid character in file")
        return


def parse_scene(text: str) -> Scene:
    """Parse the contents of a scene file."""
    lines = _split_lines(text)
    _prescan(lines)
    if not lines:
        raise SceneError("Error")
    section = _Section.HEADER
    ids: dict[str, str] = {}
    grid: list[str] = []
    for line in lines:
        if section is _Section.HEADER:
            if is_map_line(line):
                section = _Section.MAP
            found = read_identifier(line)
            if found is not None:
                key, value = found
                if key in ids:
                    raise SceneError("Multiple textures for the same ID")
                ids[key] = value
        if section is _Section.AFTER and not line.startswith("\n"):
            raise SceneError("Invalid map")
        if section is _Section.MAP:
            if line.startswith("\n"):
                section = _Section.AFTER
            else:
                grid.append(line.removesuffix("\n"))
    ceiling = parse_color(ids.get("C"))
    floor = parse_color(ids.get("F"))
    spawn_x, spawn_y, orientation = check_map(grid)
    return Scene(
        grid=grid,
        spawn_x=spawn_x,
        spawn_y=spawn_y,
        orientation=orientation,
        floor=floor,
        ceiling=ceiling,
        north=ids.get("NO"),
        south=ids.get("SO"),
        west=ids.get("WE"),
        east=ids.get("EA"),
        door=ids.get("D"),
    )


def load_scene(path: str | Path) -> Scene:
    """Read and parse a scene file."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise SceneError("Invalid file") from exc
    return parse_scene(text)