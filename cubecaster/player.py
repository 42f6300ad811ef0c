"""The player: position, view direction, camera plane and movement."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from .config import DOOR, WALL
from .scene import Scene

_SPAWN_VECTORS: dict[str, tuple[float, float, float, float]] = {
    "N": (0.0, -1.0, -0.66, 0.0),
    "S": (0.0, 1.0, 0.66, 0.0),
    "W": (0.0, 1.0, 0.0, 0.66),
    "E": (1.0, 0.0, 0.0, -0.66),
}

_BLOCKING = (WALL, DOOR)


class Move(enum.Enum):
    """A single movement step relative to where the player looks."""

    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Player:
    """Position in map cells, unit view direction and camera plane."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float

    @classmethod
    def spawn(cls, x: float, y: float, orientation: str) -> "Player":
        """Place a player in the middle of cell (x, y) facing N, S, E or W."""
        try:
            dir_x, dir_y, plane_x, plane_y = _SPAWN_VECTORS[orientation]
        except KeyError:
            raise ValueError(f"unknown orientation {orientation!r}") from None
        return cls(x + 0.5, y + 0.5, dir_x, dir_y, plane_x, plane_y)

    def rotate(self, angle: float) -> None:
        """Turn the view by ``angle`` radians; positive turns right."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        dir_x, plane_x = self.dir_x, self.plane_x
        self.dir_x = dir_x * cos_a - self.dir_y * sin_a
        self.dir_y = dir_x * sin_a + self.dir_y * cos_a
        self.plane_x = plane_x * cos_a - self.plane_y * sin_a
        self.plane_y = plane_x * sin_a + self.plane_y * cos_a

    def step(self, scene: Scene, move: Move, speed: float) -> bool:
        """Move by ``speed``; stay put if the target cell is a wall or closed door.

        Returns True when the player actually moved.
        """
        if move is Move.FORWARD:
            dx, dy = self.dir_x, self.dir_y
        elif move is Move.BACKWARD:
            dx, dy = -self.dir_x, -self.dir_y
        elif move is Move.LEFT:
            dx, dy = self.plane_x, self.plane_y
        elif move is Move.RIGHT:
            dx, dy = -self.plane_x, -self.plane_y
        else:
            raise ValueError(f"unknown move {move!r}")
        new_x = self.pos_x + dx * speed
        new_y = self.pos_y + dy * speed
        if scene.cell(int(new_x), int(new_y)) in _BLOCKING:
            return False
        self.pos_x = new_x
        self.pos_y = new_y
        return True