# raycub

raycub holds the game logic of a small grid raycaster that reads `.cub` scene
files. It provides:

- parsing and validation of `.cub` scene files, covering texture headers,
  floor and ceiling colours, and the map grid;
- ray casting against the grid, which finds wall hits and sizes wall columns;
- player movement and rotation, sliding along walls and picking up
  collectibles;
- opening, closing and animating doors;
- a dialog sequence that types out text one character per step.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install .[test]
pytest
```

## Scene files

A `.cub` file begins with header lines. Each line is a key followed by its
values, separated by spaces. Blank lines between header lines are ignored.

```
NO textures/north.xpm
SO textures/south.xpm
WE textures/west.xpm
EA textures/east.xpm
CO textures/coin0.xpm textures/coin1.xpm
DO textures/door0.xpm textures/door1.xpm textures/door2.xpm
F 120,80,40
C 30,144,255
```

- `NO`, `SO`, `WE` and `EA` each take exactly one path.
- `CO` (collectible frames) and `DO` (door frames) each take one or more paths.
- `F` and `C` each take one colour written as `R,G,B`. Each component must be
  a run of digits between 0 and 255.

The header ends once every key has been given. The map follows it and may use
these characters:

| Character | Meaning |
|---|---|
| ` ` | void |
| `0` | empty floor |
| `1` | wall |
| `2` | closed door |
| `3` | open door |
| `N` `S` `E` `W` | player start position and facing |
| `C` | collectible |

The map is accepted only if all of the following hold:

- there is exactly one player start;
- no walkable cell (`0`, a player start or `C`) touches a space or the edge
  of the map;
- every door lies between two walls, either horizontally or vertically;
- there is no blank line between map rows.

## Usage

```python
from raycub.mapfile import CubError, load_scene

try:
    scene = load_scene("maps/level.cub", 0.5)
except CubError as exc:
    print(f"Error\n{exc}")
```

`load_scene(path, offset)` does the following:

1. checks that the file name ends in `.cub`;
2. reads the header;
3. resolves texture paths against the current directory and requires that
   each one names an existing file;
4. validates the map.

Any problem raises `CubError`, which is a subclass of `ValueError`.

The returned `Scene` has these fields:

- `config`: a `SceneConfig` holding the texture paths and the packed colours;
- `grid`: the map as a list of lists of characters;
- `player_pos` and `player_angle`: the starting position and facing;
- `collectibles`: an `ObjectList` of the collectibles;
- `doors`: an `ObjectList` of the doors that start open.

Objects and the player are placed `offset` into their cells.

### Modules

- `raycub.mapfile` provides `parse_color`, `parse_header(lines, base_dir)`,
  `scan_map`, `check_map` and `check_map_closed`. Each raises `CubError` on
  bad input. When `base_dir` is `None`, `parse_header` keeps texture paths as
  given and does not check them.
- `raycub.raycast`:
  - `wall_hit(grid, pos, angle)` returns the first point where the ray meets
    a wall or door. It also returns the side that was hit: `'h'` or `'v'`.
  - `wall_dimension(...)` sizes one wall column as a `RenderColumn`. It takes
    the screen size and field of view from a `ViewSettings`.
- `raycub.player`:
  - `Player` holds the position, angle and movement input. `move.x` and
    `move.y` each take -1, 0 or 1, and `rotate` is the turn input.
  - `move_player` moves the player one step. Walls, closed doors and cells
    off the grid block movement. Stepping onto a collectible clears its cell
    and removes it from the list.
- `raycub.doors`:
  - `toggle_door` opens or closes the door the player faces, if it is within
    `reach`.
  - `animate_doors` moves each animating door one step through its frames.
- `raycub.objects` provides `MapObject` and `ObjectList`, which stores
  objects newest first and looks them up by grid cell.
- `raycub.dialog`:
  - `read_dialogs` reads a count line followed by lines of the form
    `<color> <character> <text>`.
  - `DialogController` adds one character of the current line per `step()`
    and waits for `confirm()` between lines.
  - `SpriteManager` keeps the portraits, which are looked up by the first
    character of their name.
- `raycub.geometry` provides `Point`, `distance`, `update_radian`,
  `deg_to_rad`, `int_max` and `create_color`. `create_color` packs the
  channels into a signed 32-bit ARGB integer.
- `raycub.textutil` provides `atoi`, `split`, `has_cub_extension`,
  `is_number` and `read_lines`.

## What this package does not do

raycub contains no rendering, windowing, input handling or image loading.
Texture and portrait paths are stored but never decoded. There is no command
to start a game. An application has to draw the frames and feed keyboard and
mouse input into `Player`, `toggle_door` and `DialogController`.