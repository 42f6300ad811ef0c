"""Constants shared by the whole game: window, map symbols, colours and keys."""

from __future__ import annotations

import enum

WINDOW_TITLE = "Cube3D"

WIN_W = 1280
WIN_H = 720
MAX_FPS = 60

WHITE = 0xFFFFFF
SILVER = 0xC0C0C0
RED = 0xFF0000
PURPLE = 0x800080
FUCHSIA = 0xFF00FF
LIME = 0x00FF00
YELLOW = 0xFFFF00
BLUE = 0x0000FF
CYAN = 0x00FFFF
BROWN = 0x804000

CROSSHAIR_LEN = 8
MINIMAP_SCALE = 8

FLOOR = "0"
WALL = "1"
DOOR = "D"
DOOR_OPEN = "O"

TEXTURE_SIZE = 64.0

SPEED = 0.05
CAMERA_SPEED = 0.03
MOUSE_SPEED = 200


class TextureSide(enum.IntEnum):
    """Index of each wall texture."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3
    DOOR = 4


class Key(enum.IntEnum):
    """Key codes understood by the game (X11 keysym values)."""

    ESC = 65307
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363
    W = 119
    S = 115
    A = 97
    D = 100
    P = 112
    MINUS = 45
    PLUS = 61
    R = 114
    U = 117
    J = 106
    I = 105
    K = 107
    O = 111
    L = 108
    M = 109
    E = 101
    C = 99
    SHIFT = 65505