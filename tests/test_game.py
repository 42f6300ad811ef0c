import pytest

from cubecaster.config import CAMERA_SPEED, MAX_FPS, RED, Key, TextureSide
from cubecaster.game import Game, KeyState, QuitGame, load_textures
from cubecaster.image import Image
from cubecaster.scene import Scene, SceneError, parse_scene

SCENE_TEXT = (
    "NO n.xpm\nSO s.xpm\nWE w.xpm\nEA e.xpm\nD d.xpm\n"
    "F 10,20,30\nC 40,50,60\n\n"
    "11111\n1E0D1\n11111\n"
)

XPM_TEXT = (
    "static char *img[] = {\n"
    '"2 2 2 1",\n'
    '"a c #FF0000",\n'
    '"b c blue",\n'
    '"ab",\n'
    '"ba"};\n'
)


def _textures():
    result = []
    for color in (0x111111, 0x222222, 0x333333, 0x444444, 0x555555):
        image = Image(64, 64)
        image.fill(color)
        result.append(image)
    return result


@pytest.fixture
def game():
    return Game(parse_scene(SCENE_TEXT), _textures())


def test_initial_state(game):
    assert game.keys == KeyState()
    assert game.frame_rate == -1
    assert game.mouse_x == -1
    assert game.door is None


def test_escape_quits(game):
    with pytest.raises(QuitGame):
        game.key_press(Key.ESC)
    with pytest.raises(QuitGame):
        game.key_release(Key.ESC)


def test_press_and_release_flags(game):
    game.key_press(Key.W)
    game.key_press(Key.LEFT)
    assert game.keys.w and game.keys.left
    game.key_release(Key.W)
    game.key_release(Key.LEFT)
    assert not game.keys.w and not game.keys.left


def test_forward_movement(game):
    game.key_press(Key.W)
    game.update()
    assert game.player.pos_x > 1.5
    assert game.player.pos_y == pytest.approx(1.5)


def test_opposite_keys_cancel(game):
    game.key_press(Key.W)
    game.key_press(Key.S)
    game.update()
    assert game.player.pos_x == pytest.approx(1.5)


def test_walking_stops_at_closed_door_then_passes_open_one(game):
    game.key_press(Key.W)
    for _ in range(100):
        game.update()
    assert game.player.pos_x < 3
    game.scene.set_cell(3, 1, "O")
    for _ in range(100):
        game.update()
    assert 3 <= game.player.pos_x < 4


def test_camera_keys_rotate_and_restore(game):
    game.key_press(Key.RIGHT)
    game.update()
    assert game.player.dir_x == pytest.approx(1.0 * __import_cos())
    game.key_release(Key.RIGHT)
    game.key_press(Key.LEFT)
    game.update()
    assert game.player.dir_x == pytest.approx(1.0)
    assert game.player.dir_y == pytest.approx(0.0, abs=1e-9)


def __import_cos():
    import math

    return math.cos(CAMERA_SPEED)


def test_frame_counter_wraps(game):
    for _ in range(MAX_FPS):
        game.update()
    assert game.frame_rate == MAX_FPS - 1
    game.update()
    assert game.frame_rate == 0


def test_mouse_look_only_when_enabled(game):
    game.mouse_moved(300, 10)
    assert game.player.dir_x == pytest.approx(1.0)
    assert game.mouse_x == 300
    game.key_press(Key.M)
    assert game.keys.mouse is True
    game.mouse_moved(500, 10)
    assert game.player.dir_x != pytest.approx(1.0)
    game.mouse_moved(300, 10)
    assert game.player.dir_x == pytest.approx(1.0)
    assert game.player.dir_y == pytest.approx(0.0, abs=1e-9)


def test_toggle_mouse_twice(game):
    game.toggle_mouse()
    game.toggle_mouse()
    assert game.keys.mouse is False


def test_toggle_door_without_target(game):
    game.toggle_door()
    assert game.scene.cell(3, 1) == "D"


def test_draw_finds_door_and_paints_frame(game):
    game.draw()
    assert game.door == (3, 1)
    assert game.image.pixel(100, 0) == game.scene.ceiling
    assert game.image.pixel(100, game.image.height - 1) == game.scene.floor
    assert any(
        game.minimap_image.pixel(x, y) == RED
        for y in range(game.minimap_image.height)
        for x in range(game.minimap_image.width)
    )
    game.key_press(Key.E)
    assert game.scene.cell(3, 1) == "O"
    game.toggle_door()
    assert game.scene.cell(3, 1) == "D"


def test_load_textures_requires_paths():
    scene = Scene(grid=["111", "1N1", "111"], spawn_x=1, spawn_y=1, orientation="N")
    with pytest.raises(SceneError, match="Texture paths can't be null"):
        load_textures(scene)


def test_load_textures_reports_bad_file(tmp_path):
    missing = str(tmp_path / "missing.xpm")
    scene = Scene(
        grid=["111", "1N1", "111"], spawn_x=1, spawn_y=1, orientation="N",
        north=missing, south=missing, west=missing, east=missing, door=missing,
    )
    with pytest.raises(SceneError, match="Failed to load textures"):
        load_textures(scene)


def test_load_textures_reads_all_five(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(XPM_TEXT)
    name = str(path)
    scene = Scene(
        grid=["111", "1N1", "111"], spawn_x=1, spawn_y=1, orientation="N",
        north=name, south=name, west=name, east=name, door=name,
    )
    textures = load_textures(scene)
    assert len(textures) == len(TextureSide)
    assert textures[TextureSide.NORTH].pixel(0, 0) == 0xFF0000
    assert textures[TextureSide.DOOR].pixel(1, 0) == 0x0000FF