"""Game state: input handling, movement, doors and drawing a frame."""

from __future__ import annotations

from dataclasses import dataclass

from .config import (
    CAMERA_SPEED,
    DOOR,
    DOOR_OPEN,
    MAX_FPS,
    MOUSE_SPEED,
    SPEED,
    WIN_H,
    WIN_W,
    Key,
    TextureSide,
)
from .crosshair import draw_crosshair
from .image import Image
from .minimap import Minimap
from .player import Move, Player
from .raycast import render_view
from .scene import Scene, SceneError
from .xpm import XpmError, load_xpm


class QuitGame(Exception):
    """Raised when the player asks to leave the game."""


@dataclass
class KeyState:
    """Which movement keys are held, and whether mouse look is on."""

    a: bool = False
    s: bool = False
    d: bool = False
    w: bool = False
    left: bool = False
    right: bool = False
    mouse: bool = False


def load_textures(scene: Scene) -> list[Image]:
    """Load the five wall textures, indexed by :class:`TextureSide`."""
    paths = {
        TextureSide.NORTH: scene.north,
        TextureSide.SOUTH: scene.south,
        TextureSide.WEST: scene.west,
        TextureSide.EAST: scene.east,
        TextureSide.DOOR: scene.door,
    }
    textures: list[Image] = []
    for side in TextureSide:
        path = paths[side]
        if path is None:
            raise SceneError("Texture paths can't be null")
        try:
            textures.append(load_xpm(path))
        except XpmError as exc:
            raise SceneError("Failed to load textures") from exc
    return textures


_PRESS_FLAGS = {
    Key.A: "a",
    Key.S: "s",
    Key.D: "d",
    Key.W: "w",
    Key.LEFT: "left",
    Key.RIGHT: "right",
}


class Game:
    """Everything that changes while the game runs."""

    def __init__(self, scene: Scene, textures):
        self.scene = scene
        self.textures = textures
        self.frame_rate = -1
        self.keys = KeyState()
        self.mouse_x = -1
        self.prev_x = -1
        self.player = Player.spawn(scene.spawn_x, scene.spawn_y, scene.orientation)
        self.image = Image(WIN_W, WIN_H)
        self.minimap = Minimap(scene)
        self.minimap_image = self.minimap.render(self.player)
        self.door: tuple[int, int] | None = None

    def key_press(self, keycode: int) -> None:
        """React to a key going down."""
        if keycode == Key.ESC:
            raise QuitGame()
        if keycode in _PRESS_FLAGS:
            setattr(self.keys, _PRESS_FLAGS[keycode], True)
        elif keycode == Key.E:
            self.toggle_door()
        elif keycode == Key.M:
            self.toggle_mouse()

    def key_release(self, keycode: int) -> None:
        """React to a key going up."""
        if keycode == Key.ESC:
            raise QuitGame()
        if keycode in _PRESS_FLAGS:
            setattr(self.keys, _PRESS_FLAGS[keycode], False)

    def mouse_moved(self, x: int, y: int) -> None:
        """Turn the view by the horizontal mouse motion when mouse look is on."""
        self.prev_x = self.mouse_x
        self.mouse_x = x
        distance = float(self.mouse_x) - float(self.prev_x)
        if self.keys.mouse:
            angle = abs(distance) / float(MOUSE_SPEED)
            self.player.rotate(angle if distance > 0 else -angle)

    def toggle_mouse(self) -> None:
        """Switch mouse look on or off."""
        self.keys.mouse = not self.keys.mouse

    def toggle_door(self) -> None:
        """Open or close the door in the centre of the view."""
        if self.door is None:
            return
        door_x, door_y = self.door
        cell = self.scene.cell(door_x, door_y)
        standing_in = (int(self.player.pos_x), int(self.player.pos_y)) == (door_x, door_y)
        if cell == DOOR and not standing_in:
            self.scene.set_cell(door_x, door_y, DOOR_OPEN)
        elif cell == DOOR_OPEN:
            self.scene.set_cell(door_x, door_y, DOOR)

    def update(self) -> None:
        """Advance one frame: count it and apply the held keys."""
        self.frame_rate += 1
        if self.frame_rate >= MAX_FPS:
            self.frame_rate = 0
        keys = self.keys
        if keys.w != keys.s:
            move = Move.FORWARD if keys.w else Move.BACKWARD
            self.player.step(self.scene, move, SPEED)
        if keys.a != keys.d:
            move = Move.LEFT if keys.a else Move.RIGHT
            self.player.step(self.scene, move, SPEED)
        if keys.left != keys.right:
            self.player.rotate(-CAMERA_SPEED if keys.left else CAMERA_SPEED)

    def draw(self) -> None:
        """Render the view, crosshair and minimap for the current state."""
        self.image.clear()
        self.door = render_view(self.image, self.scene, self.player, self.textures)
        draw_crosshair(self.image)
        self.minimap_image = self.minimap.render(self.player)