# cubecaster

A compact raycasting explorer. Give it a `.cub` scene file and walk through a
textured maze in first person, opening and closing doors along the way. A
minimap in the top-right corner of the window shows the map and your position
as a red square.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and reads the keyboard and
mouse.

## Running

```
cubecaster path/to/level.cub
```

Exactly one argument is expected, and its name must end in `.cub`. If the
argument count is wrong a usage message goes to standard error; if the scene
or one of its textures cannot be used, the reason is printed. In both cases
the command exits with status 1.

## Scene files

A scene file lists its textures and colours first, then the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
D  ./textures/door.xpm
F 220,100,0
C 225,30,0

111111
100D01
1000N1
111111
```

- `NO`, `SO`, `WE`, `EA` and `D` name XPM textures for the four wall faces and
  for doors. Each identifier may appear only once, and all five are needed to
  play.
- `F` and `C` set the floor and ceiling colours as three comma-separated
  values from 0 to 255.
- The map uses `1` for walls, `0` for floor, `D` for doors and a space for
  empty area. Exactly one of `N`, `S`, `E` or `W` marks where the player
  starts and which way the player faces.
- The map must be closed by walls on every side, and once it has started a
  blank line may only be followed by more blank lines.

A scene that breaks these rules is refused with a message that says what is
wrong, for example `Invalid colors`, `Multiple players in map` or
`Map must have walls all around`.

## Controls

| Key           | Action                                   |
|---------------|------------------------------------------|
| W / S         | Walk forwards / backwards                |
| A / D         | Step sideways                            |
| Left / Right  | Turn                                     |
| E             | Open or close the door in the view centre |
| M             | Turn mouse look on or off                |
| Esc           | Quit                                     |

Closing the window also quits. Walls and closed doors block movement; an
open door can be walked through, and a door cannot be closed while you stand
in it.

## Using it as a library

The parts work on their own too:

```python
from cubecaster.scene import load_scene
from cubecaster.game import Game, load_textures

scene = load_scene("level.cub")
game = Game(scene, load_textures(scene))
game.key_press(119)   # hold W
game.update()         # move one frame
game.draw()           # render into game.image and game.minimap_image
```

- `cubecaster.scene` — `parse_scene` takes the text of a scene, `load_scene`
  reads a file; both return a `Scene` or raise `SceneError`. `parse_color`,
  `check_map` and `check_extension` are available on their own.
- `cubecaster.xpm` — `load_xpm`, `parse_xpm_text` and `parse_xpm_lines` build
  an `Image` from XPM data, raising `XpmError` on bad input. Colours may be
  `#hex` values or X11 colour names (see `cubecaster.colornames.lookup_color`).
- `cubecaster.image.Image` — a 32-bit pixel buffer with `put_pixel`, `pixel`,
  `fill`, `clear` and `rgb_bytes`.
- `cubecaster.player.Player` — position, view direction and camera plane,
  with `spawn`, `rotate` and `step`.
- `cubecaster.raycast` — `cast_ray` for one screen column and `render_view`
  for a whole frame.
- `cubecaster.minimap.Minimap` and `cubecaster.crosshair.draw_crosshair`
  draw the overlays.
- `cubecaster.game.Game` holds the running state; `cubecaster.app.run` opens
  the window for a `Game`.

## Limitations

- Textures must be XPM files; other image formats are not read.
- The window is a fixed 1280×720 and runs at up to 60 frames per second.
- There are no sprites, sound, saving or level editing.

## Running the tests

```
pip install .[test]
pytest
```