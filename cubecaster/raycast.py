"""Casting rays through the map grid and drawing the textured view."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from .config import DOOR, DOOR_OPEN, TEXTURE_SIZE, WALL, WIN_H, WIN_W, TextureSide
from .image import Image
from .player import Player
from .scene import Scene

_FAR = 1e30
_DOOR_CELLS = (DOOR, DOOR_OPEN)
_HIT_CELLS = (WALL, DOOR)


@dataclass
class Ray:
    """The result of casting one screen column into the map."""

    column: int
    dir_x: float
    dir_y: float
    map_x: int
    map_y: int
    side: int
    perp_wall_dist: float
    line_height: int
    draw_start: int
    draw_end: int
    through_door: bool = False
    door: tuple[int, int] | None = None


def _outside(scene: Scene, x: int, y: int) -> bool:
    return not (0 <= y < scene.height and 0 <= x < len(scene.grid[y]))


def cast_ray(scene: Scene, player: Player, column: int) -> Ray:
    """Walk the grid along one column's ray until it hits a wall or closed door.

    Leaving the grid also ends the walk, so an unclosed map cannot hang.
    The door the centre column passes or hits is recorded in ``Ray.door``.
    """
    cam_x = 2 * column / float(WIN_W) - 1
    dir_x = player.dir_x + player.plane_x * cam_x
    dir_y = player.dir_y + player.plane_y * cam_x
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    delta_x = _FAR if dir_x == 0 else abs(1 / dir_x)
    delta_y = _FAR if dir_y == 0 else abs(1 / dir_y)

    if dir_x < 0:
        step_x = -1
        side_x = (player.pos_x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if dir_y < 0:
        step_y = -1
        side_y = (player.pos_y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    side = 0
    through_door = False
    door: tuple[int, int] | None = None
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _outside(scene, map_x, map_y):
            break
        cell = scene.cell(map_x, map_y)
        if cell in _DOOR_CELLS:
            through_door = True
            if column == WIN_W // 2:
                door = (map_x, map_y)
        if cell in _HIT_CELLS:
            break

    perp = side_x - delta_x if side == 0 else side_y - delta_y
    line_height = int(WIN_H / perp) if perp > 0 else WIN_H * 1000
    half = line_height // 2
    draw_start = max(-half + WIN_H // 2, 0)
    draw_end = min(half + WIN_H // 2, WIN_H - 1)
    return Ray(
        column=column,
        dir_x=dir_x,
        dir_y=dir_y,
        map_x=map_x,
        map_y=map_y,
        side=side,
        perp_wall_dist=perp,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        through_door=through_door,
        door=door,
    )


def texture_for(scene: Scene, ray: Ray) -> TextureSide:
    """Choose the wall texture for the cell a ray hit."""
    if scene.cell(ray.map_x, ray.map_y) in _DOOR_CELLS:
        return TextureSide.DOOR
    if (
        ray.map_y >= 1
        and ray.side == 1
        and ray.dir_y >= 0
        and scene.cell(ray.map_x, ray.map_y - 1) == DOOR_OPEN
    ) or (
        ray.map_x >= 1
        and ray.side == 0
        and ray.dir_x >= 0
        and scene.cell(ray.map_x - 1, ray.map_y) == DOOR_OPEN
    ):
        return TextureSide.DOOR
    if ray.side == 0:
        return TextureSide.WEST if ray.dir_x < 0 else TextureSide.EAST
    return TextureSide.NORTH if ray.dir_y < 0 else TextureSide.SOUTH


def texture_column(ray: Ray, player: Player, texture: Image) -> tuple[int, float, float]:
    """Return ``(tex_x, step, tex_pos)`` for sampling a texture along a ray's column."""
    if ray.side == 0:
        wall_x = player.pos_y + ray.perp_wall_dist * ray.dir_y
    else:
        wall_x = player.pos_x + ray.perp_wall_dist * ray.dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * TEXTURE_SIZE)
    if ray.side == 0 and ray.dir_x > 0:
        tex_x = texture.width - tex_x - 1
    if ray.side == 1 and ray.dir_y < 0:
        tex_x = texture.width - tex_x - 1
    step = 1.0 * texture.height / ray.line_height
    tex_pos = (ray.draw_start - WIN_H // 2 + ray.line_height // 2) * step
    return tex_x, step, tex_pos


def render_view(
    image: Image,
    scene: Scene,
    player: Player,
    textures: Sequence[Image] | Mapping[TextureSide, Image],
) -> tuple[int, int] | None:
    """Draw ceiling, walls and floor for every column.

    Returns the door cell under the centre of the view, if any.
    """
    door: tuple[int, int] | None = None
    for column in range(WIN_W):
        ray = cast_ray(scene, player, column)
        if ray.door is not None:
            door = ray.door
        texture = textures[texture_for(scene, ray)]
        tex_x, step, tex_pos = texture_column(ray, player, texture)
        tex_x %= texture.width
        mask = texture.height - 1
        screen_x = WIN_W - column - 1
        for y in range(ray.draw_start):
            image.put_pixel(screen_x, y, scene.ceiling)
        for y in range(ray.draw_start, ray.draw_end + 1):
            tex_pos += step
            image.put_pixel(screen_x, y, texture.pixel(tex_x, int(tex_pos) & mask))
        for y in range(ray.draw_end + 1, WIN_H):
            image.put_pixel(screen_x, y, scene.floor)
    return door