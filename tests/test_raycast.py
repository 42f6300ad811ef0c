import math

import pytest

from cubecaster.config import WIN_H, WIN_W, TextureSide
from cubecaster.image import Image
from cubecaster.player import Player
from cubecaster.raycast import cast_ray, render_view, texture_column, texture_for
from cubecaster.scene import Scene

CENTRE = WIN_W // 2


def _scene(grid, x, y, orientation, floor=0, ceiling=0):
    return Scene(
        grid=list(grid),
        spawn_x=x,
        spawn_y=y,
        orientation=orientation,
        floor=floor,
        ceiling=ceiling,
    )


ROOM = ["11111", "10001", "10N01", "10001", "11111"]


def test_centre_ray_hits_north_wall():
    scene = _scene(ROOM, 2, 2, "N")
    player = Player.spawn(2, 2, "N")
    ray = cast_ray(scene, player, CENTRE)
    assert (ray.map_x, ray.map_y) == (2, 0)
    assert ray.side == 1
    assert ray.perp_wall_dist == pytest.approx(player.pos_y - 1)
    assert ray.door is None
    assert ray.through_door is False


def test_line_is_centred_on_screen():
    scene = _scene(ROOM, 2, 2, "N")
    player = Player.spawn(2, 2, "N")
    for column in (0, 100, CENTRE, WIN_W - 1):
        ray = cast_ray(scene, player, column)
        assert 0 <= ray.draw_start <= ray.draw_end <= WIN_H - 1
        if ray.line_height < WIN_H:
            assert ray.draw_start + ray.draw_end == WIN_H


def test_texture_sides_follow_direction():
    scene = _scene(ROOM, 2, 2, "N")
    north = cast_ray(scene, Player.spawn(2, 2, "N"), CENTRE)
    assert texture_for(scene, north) is TextureSide.NORTH
    east = cast_ray(scene, Player.spawn(2, 2, "E"), CENTRE)
    assert east.side == 0
    assert texture_for(scene, east) is TextureSide.EAST
    south = cast_ray(scene, Player.spawn(2, 2, "S"), CENTRE)
    assert texture_for(scene, south) is TextureSide.SOUTH


def test_centre_ray_records_closed_door():
    scene = _scene(["11111", "11D11", "10N01", "11111"], 2, 2, "N")
    player = Player.spawn(2, 2, "N")
    ray = cast_ray(scene, player, CENTRE)
    assert (ray.map_x, ray.map_y) == (2, 1)
    assert ray.door == (2, 1)
    assert ray.through_door is True
    assert texture_for(scene, ray) is TextureSide.DOOR
    side_ray = cast_ray(scene, player, CENTRE + 1)
    assert side_ray.door is None


def test_open_door_is_passed_and_recorded():
    scene = _scene(["11111", "11O11", "10N01", "11111"], 2, 2, "N")
    ray = cast_ray(scene, Player.spawn(2, 2, "N"), CENTRE)
    assert (ray.map_x, ray.map_y) == (2, 0)
    assert ray.door == (2, 1)
    assert texture_for(scene, ray) is TextureSide.NORTH


def test_wall_behind_open_door_shows_door_frame():
    scene = _scene(["11111", "10S01", "11O11", "11111"], 2, 1, "S")
    ray = cast_ray(scene, Player.spawn(2, 1, "S"), CENTRE)
    assert (ray.map_x, ray.map_y) == (2, 3)
    assert texture_for(scene, ray) is TextureSide.DOOR


def test_texture_column_stays_in_texture():
    scene = _scene(ROOM, 2, 2, "N")
    texture = Image(64, 64)
    for orientation in "NSEW":
        player = Player.spawn(2, 2, orientation)
        player.rotate(0.2)
        for column in (0, 333, CENTRE, WIN_W - 1):
            ray = cast_ray(scene, player, column)
            tex_x, step, tex_pos = texture_column(ray, player, texture)
            assert 0 <= tex_x < texture.width
            assert step * ray.line_height == pytest.approx(texture.height)
            assert tex_pos >= 0
            assert math.isfinite(tex_pos)


def test_render_view_paints_ceiling_wall_and_floor():
    ceiling, floor = 0x112233, 0x445566
    scene = _scene(ROOM, 2, 2, "N", floor=floor, ceiling=ceiling)
    colours = {side: 0x010101 * (side + 1) for side in TextureSide}
    textures = {}
    for side, colour in colours.items():
        texture = Image(64, 64)
        texture.fill(colour)
        textures[side] = texture
    image = Image(WIN_W, WIN_H)
    door = render_view(image, scene, Player.spawn(2, 2, "N"), textures)
    assert door is None
    screen_x = WIN_W - CENTRE - 1
    assert image.pixel(screen_x, 0) == ceiling
    assert image.pixel(screen_x, WIN_H - 1) == floor
    assert image.pixel(screen_x, WIN_H // 2) == colours[TextureSide.NORTH]