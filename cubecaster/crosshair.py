"""The crosshair drawn in the middle of the view."""

from __future__ import annotations

from dataclasses import dataclass

from .config import CROSSHAIR_LEN, CYAN, WIN_H, WIN_W
from .image import Image


@dataclass(frozen=True)
class Crosshair:
    """Where one arm of the crosshair starts, and its colour."""

    x: int
    y: int
    color: int


def crosshair_origin(orientation: str) -> Crosshair:
    """Return the starting point of the arm pointing N, S, E or W."""
    cx, cy = WIN_W // 2, WIN_H // 2
    if orientation == "W":
        return Crosshair(cx - CROSSHAIR_LEN, cy, CYAN)
    if orientation == "N":
        return Crosshair(cx, cy - CROSSHAIR_LEN, CYAN)
    return Crosshair(cx, cy, CYAN)


def _draw_arm(image: Image, arm: Crosshair, vertical: bool) -> None:
    for across in range(-1, 2):
        for along in range(1, CROSSHAIR_LEN):
            if vertical:
                image.put_pixel(arm.x + across, arm.y + along, arm.color)
            else:
                image.put_pixel(arm.x + along, arm.y + across, arm.color)


def draw_crosshair(image: Image) -> None:
    """Draw the four arms of the crosshair, leaving the centre empty."""
    for orientation, vertical in (("N", True), ("S", True), ("W", False), ("E", False)):
        _draw_arm(image, crosshair_origin(orientation), vertical)