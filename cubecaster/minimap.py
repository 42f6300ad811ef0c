"""The overhead minimap drawn in the corner of the window."""

from __future__ import annotations

from .config import (
    BLUE,
    BROWN,
    DOOR,
    FLOOR,
    MINIMAP_SCALE,
    RED,
    SILVER,
    WALL,
    WHITE,
    WIN_H,
    WIN_W,
)
from .image import Image
from .player import Player
from .scene import Scene

_MARKER_SIDE = 5
_MARGIN = 15


def cell_color(cell: str) -> int:
    """Return the minimap colour of one map symbol."""
    if cell == FLOOR:
        return SILVER
    if cell == DOOR:
        return BROWN
    if cell == WALL:
        return BLUE
    return WHITE


def minimap_offset(width: int, height: int) -> tuple[int, int]:
    """Return the ``(x, y)`` padding that centres a non-square map."""
    side = max(WIN_W, WIN_H) / MINIMAP_SCALE
    if width > height:
        return 0, int((width - height) * (side / width))
    if height > width:
        return int((height - width) * (side / height)), 0
    return 0, 0


class Minimap:
    """A square picture of the map with the player marked on it."""

    def __init__(self, scene: Scene):
        self.size = int(max(WIN_W, WIN_H) / MINIMAP_SCALE)
        width, height = scene.width, scene.height
        self.offset_x, self.offset_y = minimap_offset(width, height)
        self.scale = self.size / max(width, height, 1)
        background = Image(self.size, self.size)
        background.fill(WHITE)
        for y, row in enumerate(scene.grid[:height]):
            for x, cell in enumerate(row[:width]):
                self._draw_cell(background, x, y, cell_color(cell))
        self._background = [
            background.pixel(x, y) for y in range(self.size) for x in range(self.size)
        ]

    @property
    def position(self) -> tuple[int, int]:
        """Top-left corner of the minimap in window coordinates."""
        return WIN_W - self.size - _MARGIN, _MARGIN

    def _draw_cell(self, image: Image, x: int, y: int, color: int) -> None:
        top = int(y * self.size / (self.size / self.scale))
        bottom = int((y + 1) * self.size / (self.size / self.scale))
        left = int(x * self.size / (self.size / self.scale))
        right = int((x + 1) * self.size / (self.size / self.scale))
        for py in range(top, bottom):
            for px in range(left, right):
                image.put_pixel(px + self.offset_x // 2, py + self.offset_y // 2, color)

    def render(self, player: Player) -> Image:
        """Return a fresh minimap image with the player drawn as a red square."""
        image = Image(self.size, self.size, self._background)
        px = int(self.offset_x // 2 + player.pos_x * self.scale) - _MARKER_SIDE // 2
        py = int(self.offset_y // 2 + player.pos_y * self.scale) - _MARKER_SIDE // 2
        for dy in range(_MARKER_SIDE):
            for dx in range(_MARKER_SIDE):
                image.put_pixel(px + dx, py + dy, RED)
        return image