# cubraycaster

A small first-person raycasting engine for grid maps described in `.cub` files.
Walls are drawn with a texture per facing direction and darkened with distance.
Doors slide open and closed, collectable items animate and disappear when you walk
into their cell, and a round minimap is drawn in the lower-left corner of the
window.

## Installation

```
pip install .
```

This installs `pygame`, `numpy` and `pillow`. Images are read with Pillow, so any
format it can open (including XPM) works for textures.

## Running

```
cubraycaster path/to/level.cub
```

The command takes exactly one argument, and the file name must end in `.cub`. If
the map or one of its images is rejected, the error message is written to
standard error and the command exits with status 1. After the window closes it
prints `Window closed: exiting...` and exits with status 0.

Besides the four wall textures named in the map, the game loads these images
from a `sprites/` directory under the current working directory:

- `sprites/door.xpm`, used for doors;
- `sprites/1.xpm` to `sprites/12.xpm`, the animation frames of items.

These images are not part of the package; run the command from a directory that
holds them.

### Controls

| Key / action            | Effect                                        |
|-------------------------|-----------------------------------------------|
| W / S                   | move forward / backward                       |
| A / D                   | strafe left / right                           |
| Left / Right arrows     | turn                                          |
| Enter or keypad Enter   | open or close a door in a cell next to you    |
| Left mouse click        | lock or unlock mouse-look                     |
| Mouse move (when locked)| turn towards the side the mouse moved         |
| Escape / close window   | quit                                          |

A door can only be toggled once it has finished sliding. An open door lets you
pass; a closed one blocks you like a wall.

## The `.cub` format

A file holds configuration lines followed by the map.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
1N0341
111111
```

- `NO`, `SO`, `WE` and `EA` (at the start of the line, followed by a space) give
  the wall texture for each face. All four are required and each file must be
  readable.
- `F` and `C` give the floor and ceiling colours as three comma-separated
  integers from 0 to 255. Both are required.
- A configuration line that appears twice is an error, as is any other
  non-blank line that is neither configuration nor map.
- Blank lines between configuration lines are allowed.

The map must come after the configuration lines, and no blank lines are allowed
inside it. These characters are allowed:

| Char      | Meaning                                                   |
|-----------|-----------------------------------------------------------|
| `1`       | wall                                                      |
| `0`       | floor                                                     |
| `N S E W` | player start, facing that direction                       |
| `3`       | collectable item                                          |
| `4`       | door; needs walls on both sides along one axis            |
| space     | void                                                      |

The map must be closed: the first and last rows may hold only walls and spaces,
every other row must begin and end with a wall once surrounding whitespace is
removed, and no void area may touch a floor cell or the player start. Exactly one
row may contain a player start.

## Library use

Everything the command does is available from Python. Errors in a map are raised
as `cubraycaster.model.CubError`:

```python
from cubraycaster.loader import parse_cub_file
from cubraycaster.model import CubError

try:
    config = parse_cub_file("level.cub")
except CubError as err:
    print(err)
else:
    print(config.player.pos, len(config.doors), len(config.sprites))
```

A frame can be drawn without opening a window:

```python
from cubraycaster.app import Game
from cubraycaster.textures import load_door_textures, load_item_frames, load_wall_textures

game = Game(config, load_wall_textures(config), load_door_textures(), load_item_frames())
screen = game.tick(1 / 60)      # advance 1/60 s and draw
print(screen.pixel(512, 384))   # 0xRRGGBB
```

Useful pieces:

- `cubraycaster.loader.parse_cub_file(path)` reads and validates a map and
  returns a `Config` with the grid, colours, texture paths, player, doors and
  items.
- `cubraycaster.raycast.cast_ray(config, x, width, height)` traces one screen
  column through the grid and returns a `Hit`; `raycast(...)` draws every column
  and fills a z-buffer of wall distances.
- `cubraycaster.framebuffer.Screen` is a pixel buffer (a NumPy array of
  `0xRRGGBB` values) with `put_pixel`, `pixel`, `draw_background`, `draw_square`,
  `draw_filled_circle` and `draw_line`; `Texture` wraps an image for reading.
- `cubraycaster.player.update_player(config, keys)` applies one frame of movement
  for the held `Keys`; `cubraycaster.events.InputState` turns key codes and mouse
  events into that state, and `toggle_door(config)` opens or closes an adjacent
  door.
- `cubraycaster.animation` slides doors, advances item animations and orders
  sprites from farthest to nearest; `cubraycaster.sprites.render_sprites` draws
  them behind nearer walls; `cubraycaster.minimap.draw_minimap` draws the minimap.
- `cubraycaster.app.Game` ties these together; `Game.run()` opens a pygame window
  and plays until it is closed.

## What it does not do

There is no sound, no score or goal beyond collecting items, and no way to save
progress. The door and item images are not bundled with the package.