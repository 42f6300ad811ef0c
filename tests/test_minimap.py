from cubecaster.config import BLUE, BROWN, RED, SILVER, WHITE
from cubecaster.minimap import Minimap, cell_color, minimap_offset
from cubecaster.player import Player
from cubecaster.scene import Scene


def _scene(grid):
    return Scene(grid=list(grid), spawn_x=1, spawn_y=1, orientation="N")


def _red_pixels(image):
    return {
        (x, y)
        for y in range(image.height)
        for x in range(image.width)
        if image.pixel(x, y) == RED
    }


def test_cell_colors():
    assert cell_color("0") == SILVER
    assert cell_color("D") == BROWN
    assert cell_color("1") == BLUE
    assert cell_color(" ") == WHITE
    assert cell_color("N") == WHITE


def test_square_map_has_no_offset():
    assert minimap_offset(5, 5) == (0, 0)


def test_offset_is_symmetric():
    wide = minimap_offset(10, 5)
    tall = minimap_offset(5, 10)
    assert wide[0] == 0 and wide[1] > 0
    assert tall == (wide[1], wide[0])


def test_square_map_fills_corner_with_wall():
    minimap = Minimap(_scene(["111", "1N1", "111"]))
    image = minimap.render(Player.spawn(1, 1, "N"))
    assert image.size == (minimap.size, minimap.size)
    assert image.pixel(0, 0) == BLUE
    assert image.pixel(minimap.size - 1, minimap.size - 1) == BLUE


def test_wide_map_leaves_white_padding():
    minimap = Minimap(_scene(["11111", "1N001", "11111"]))
    image = minimap.render(Player.spawn(1, 1, "N"))
    assert minimap.offset_y > 0
    assert image.pixel(0, 0) == WHITE


def test_marker_is_five_by_five_and_moves_with_player():
    minimap = Minimap(_scene(["11111", "1N001", "11111"]))
    first = _red_pixels(minimap.render(Player.spawn(1, 1, "N")))
    second = _red_pixels(minimap.render(Player.spawn(3, 1, "N")))
    assert len(first) == 25
    assert len(second) == 25
    assert min(x for x, _ in second) > max(x for x, _ in first)
    assert {y for _, y in first} == {y for _, y in second}


def test_render_does_not_accumulate():
    minimap = Minimap(_scene(["11111", "1N001", "11111"]))
    minimap.render(Player.spawn(1, 1, "N"))
    again = minimap.render(Player.spawn(3, 1, "N"))
    assert len(_red_pixels(again)) == 25