from cubecaster.config import CROSSHAIR_LEN, CYAN, WIN_H, WIN_W
from cubecaster.crosshair import Crosshair, crosshair_origin, draw_crosshair
from cubecaster.image import Image

CX, CY = WIN_W // 2, WIN_H // 2


def test_origins():
    assert crosshair_origin("W") == Crosshair(CX - CROSSHAIR_LEN, CY, CYAN)
    assert crosshair_origin("N") == Crosshair(CX, CY - CROSSHAIR_LEN, CYAN)
    assert crosshair_origin("S") == Crosshair(CX, CY, CYAN)
    assert crosshair_origin("E") == crosshair_origin("S")


def test_draw_on_window_sized_image():
    image = Image(WIN_W, WIN_H)
    draw_crosshair(image)
    assert image.pixel(CX, CY) == 0
    assert image.pixel(CX, CY - 1) == CYAN
    assert image.pixel(CX, CY + 1) == CYAN
    assert image.pixel(CX - 1, CY) == CYAN
    assert image.pixel(CX + 1, CY) == CYAN
    assert image.pixel(CX, CY + CROSSHAIR_LEN) == 0
    assert image.pixel(CX + CROSSHAIR_LEN, CY) == 0


def test_drawing_is_symmetric():
    image = Image(WIN_W, WIN_H)
    draw_crosshair(image)
    for d in range(1, CROSSHAIR_LEN):
        assert image.pixel(CX, CY - d) == image.pixel(CX, CY + d)
        assert image.pixel(CX - d, CY) == image.pixel(CX + d, CY)


def test_small_image_stays_empty():
    image = Image(8, 8)
    draw_crosshair(image)
    assert image.rgb_bytes() == bytes(8 * 8 * 3)